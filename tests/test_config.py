"""
Tests for configuration loading and validation.
"""

import pytest

from gridsnake.config import DEFAULT_SNAKE, GameConfig, load_config, parse_cells
from gridsnake.domain import ConfigurationError, DOWN, LEFT, UP


class TestValidate:
    """Tests for GameConfig.validate()."""

    def test_defaults_are_valid(self):
        config = GameConfig()
        assert config.validate() is config
        assert config.width == 20
        assert config.height == 20
        assert config.snake_cells == DEFAULT_SNAKE
        assert config.direction is DOWN
        assert config.frame_interval == 100

    def test_default_snake_is_not_shared(self):
        a, b = GameConfig(), GameConfig()
        a.snake_cells.append((9, 9))
        assert b.snake_cells == DEFAULT_SNAKE

    @pytest.mark.parametrize("overrides,message", [
        ({"width": 0}, "Grid dimensions"),
        ({"height": -3}, "Grid dimensions"),
        ({"frame_interval": 0}, "Frame interval"),
        ({"spacing_ratio": -0.5}, "Spacing ratio"),
        ({"direction": "left"}, "Direction"),
        ({"snake_cells": []}, "at least one cell"),
        ({"snake_cells": [(20, 0)]}, "outside"),
        ({"snake_cells": [(1, 1), (1, 2), (1, 1)]}, "overlaps"),
        ({"snake_cells": [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)]}, "overlaps"),
        ({"snake_cells": [(1, 1), (3, 1)]}, "not adjacent"),
        ({"snake_cells": [(1, 2, 3)]}, "pair"),
        ({"snake_cells": [7]}, "pair"),
        ({"snake_cells": [(0.5, 0)]}, "integer"),
        ({"snake_cells": [(True, 0)]}, "integer"),
    ])
    def test_rejects_bad_values(self, overrides, message):
        with pytest.raises(ConfigurationError, match=message):
            GameConfig(**overrides).validate()

    def test_rejects_snake_filling_grid(self):
        config = GameConfig(width=2, height=1, snake_cells=[(0, 0), (1, 0)])
        with pytest.raises(ConfigurationError, match="no room"):
            config.validate()

    def test_configuration_error_is_a_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestParseCells:
    def test_parses_pairs(self):
        assert parse_cells("5,3; 4,3;3,3;") == [(5, 3), (4, 3), (3, 3)]

    def test_rejects_garbage(self):
        with pytest.raises(ConfigurationError, match="Invalid cell"):
            parse_cells("5,3;oops")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_environment_values(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GRIDSNAKE_WIDTH", "12")
        monkeypatch.setenv("GRIDSNAKE_HEIGHT", "8")
        monkeypatch.setenv("GRIDSNAKE_DIRECTION", "Up")
        monkeypatch.setenv("GRIDSNAKE_SNAKE", "2,2;2,3")
        monkeypatch.setenv("GRIDSNAKE_FRAME_INTERVAL", "50")
        monkeypatch.setenv("GRIDSNAKE_SEED", "9")
        monkeypatch.setenv("GRIDSNAKE_SNAKE_COLOR", "green")

        config = load_config(env_file=str(tmp_path / "missing.env"))
        assert config.width == 12
        assert config.height == 8
        assert config.direction is UP
        assert config.snake_cells == [(2, 2), (2, 3)]
        assert config.frame_interval == 50.0
        assert config.seed == 9
        assert config.snake_color == "green"

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GRIDSNAKE_WIDTH=15\nGRIDSNAKE_SPACING_RATIO=0.25\n")
        config = load_config(env_file=str(env_file))
        assert config.width == 15
        assert config.spacing_ratio == 0.25

    def test_dotenv_found_from_working_directory(self, monkeypatch, tmp_path):
        """Without an explicit path, the .env in the current directory is read."""
        (tmp_path / ".env").write_text("GRIDSNAKE_WIDTH=15\n")
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.width == 15

    def test_overrides_beat_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GRIDSNAKE_WIDTH", "12")
        config = load_config(env_file=str(tmp_path / "missing.env"), width=30, height=None, direction=LEFT)
        assert config.width == 30
        assert config.height == 20
        assert config.direction is LEFT

    def test_unknown_override(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unknown configuration"):
            load_config(env_file=str(tmp_path / "missing.env"), depth=3)

    def test_bad_environment_value(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GRIDSNAKE_WIDTH", "wide")
        with pytest.raises(ConfigurationError, match="GRIDSNAKE_WIDTH"):
            load_config(env_file=str(tmp_path / "missing.env"))

    def test_bad_direction_in_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GRIDSNAKE_DIRECTION", "sideways")
        with pytest.raises(ConfigurationError, match="GRIDSNAKE_DIRECTION"):
            load_config(env_file=str(tmp_path / "missing.env"))
