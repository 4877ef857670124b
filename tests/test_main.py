"""
Tests for main.py - headless sessions and the command line entry point.
"""

import json
import logging
import random
from unittest.mock import patch

import pytest

from gridsnake.config import GameConfig
from gridsnake.main import main, player_rng, run_session
from gridsnake.players import GreedyPlayer, RandomPlayer


class TestRunSession:
    """Tests for run_session()."""

    def test_summary(self):
        config = GameConfig(width=8, height=8, seed=1)
        result = run_session(config, GreedyPlayer(), max_frames=3000)

        assert set(result) == {"score", "length", "message", "ticks", "frames"}
        assert result["length"] == result["score"] + 9
        assert result["message"] in (None, "Game Over!", "You Win!")
        assert result["ticks"] >= 1
        assert result["frames"] >= 1

    def test_session_runs_until_game_over(self):
        config = GameConfig(width=8, height=8, seed=1)
        result = run_session(config, RandomPlayer(rng=random.Random(1)), max_frames=10 ** 6)
        assert result["message"] in ("Game Over!", "You Win!")

    def test_max_frames_stops_the_session(self):
        config = GameConfig(width=20, height=20, seed=1, frame_interval=1000)
        result = run_session(config, GreedyPlayer(), max_frames=10)
        assert result["frames"] == 10
        assert result["message"] is None
        assert result["ticks"] == 1

    def test_record_frames(self):
        config = GameConfig(width=8, height=8, seed=3)
        result = run_session(config, GreedyPlayer(), record_frames=True, cell_size=4, max_frames=600)
        images = result["images"]
        assert len(images) == result["ticks"]
        assert images[0].size == (32, 32)

    def test_ascii_board_is_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="gridsnake.main")
        config = GameConfig(width=8, height=8, seed=3)
        run_session(config, GreedyPlayer(), ascii_board=True, max_frames=30)
        assert "Tick 1:" in caplog.text
        assert "S" in caplog.text


class TestMain:
    """Tests for the gridsnake command."""

    def test_prints_summary(self, capsys):
        main(["--width", "8", "--height", "8", "--seed", "2", "--max-frames", "300"])
        result = json.loads(capsys.readouterr().out)
        assert result["length"] == result["score"] + 9
        assert "video" not in result

    def test_writes_video(self, capsys, tmp_path):
        output = str(tmp_path / "session.mp4")
        with patch("gridsnake.main.write_video", return_value=output) as mock_write:
            main([
                "--width", "8", "--height", "8", "--seed", "2",
                "--player", "random", "--max-frames", "120",
                "--video", output, "--fps", "4",
            ])

        images, path = mock_write.call_args[0]
        assert path == output
        assert mock_write.call_args[1] == {"fps": 4}
        assert len(images) >= 1
        result = json.loads(capsys.readouterr().out)
        assert result["video"] == output
        assert "images" not in result

    def test_invalid_config_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--width", "0"])
        assert excinfo.value.code == 1

    def test_unknown_player_is_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--player", "psychic"])
        assert excinfo.value.code == 2


class TestPlayerRng:
    def test_seeded_player_stream_differs_from_food_stream(self):
        assert player_rng(7).random() != random.Random(7).random()
        assert player_rng(7).random() == random.Random(8).random()

    def test_unseeded_player_rng(self):
        assert isinstance(player_rng(None), random.Random)

    def test_main_seeds_player_apart_from_food(self, capsys):
        with patch("gridsnake.main.player_rng", wraps=player_rng) as mock_rng:
            main(["--width", "8", "--height", "8", "--seed", "2", "--max-frames", "10"])
        mock_rng.assert_called_once_with(2)
