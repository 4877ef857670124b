"""
Game loop and state machine.

SnakeGame owns one session at a time: the snake, the food, the game state,
the buffered direction intent and the frame-pacing counter. Key events only
overwrite the buffered direction; the snake moves once per paced tick.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .domain import food as food_placement
from .domain.constants import Direction, KEY_DIRECTIONS, GAME_OVER_MESSAGE, WIN_MESSAGE
from .domain.food import Food
from .domain.game_state import GameState
from .domain.snake import Snake
from .domain.snapshot import BoardSnapshot
from .services.host import KeyEvent

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    Everything mutable about one game, replaced wholesale on restart.

    frame_count is the last processed frame number; it starts at -1 so the
    first animation callback always runs a tick.
    """

    snake: Snake
    food: Optional[Food]
    state: GameState
    pending_direction: Direction
    rng: random.Random
    frame_count: int = -1
    animation_id: Optional[int] = None
    ticks: int = 0


class SnakeGame:
    """
    Manages:
      - Session lifecycle (start / stop / restart)
      - Frame pacing from host timestamps
      - Direction-intent buffering from key events
      - Per-tick update and render
    """

    def __init__(self, config: GameConfig, renderer, host, rng: Optional[random.Random] = None):
        self.config = config
        self.renderer = renderer
        self.host = host
        self._rng = rng
        self.session: Optional[Session] = None

    # -- lifecycle --

    def start(self):
        """
        Start a new session, discarding any previous one.

        Raises:
            ConfigurationError: before anything is scheduled, if the
                configuration is invalid.
        """
        self.stop()
        config = self.config.validate()

        rng = self._rng if self._rng is not None else random.Random(config.seed)

        snake = Snake(config.snake_cells, config.direction, color=config.snake_color)
        food_cell = food_placement.generate(config.width, config.height, snake.cells(), rng)
        self.session = Session(
            snake=snake,
            food=Food(food_cell, config.food_color),
            state=GameState(),
            pending_direction=config.direction,
            rng=rng,
        )

        self.host.add_key_listener(self.on_key_down)
        self.session.animation_id = self.host.request_animation_frame(self.animate)
        logger.info(
            f"Started session on {config.width}x{config.height} grid: "
            f"snake length {len(snake)}, food at {tuple(food_cell)}"
        )

    def stop(self):
        """Unregister input and cancel the pending frame. Safe to call repeatedly."""
        self.host.remove_key_listener(self.on_key_down)
        session = self.session
        if session is None or session.animation_id is None:
            return
        self.host.cancel_animation_frame(session.animation_id)
        session.animation_id = None
        logger.info(f"Stopped session after {session.ticks} ticks (score {session.state.score})")

    @property
    def running(self) -> bool:
        """True while a session is scheduled and has not ended."""
        session = self.session
        return session is not None and session.animation_id is not None and not session.state.is_over

    # -- host callbacks --

    def animate(self, timestamp: float):
        session = self.session
        session.animation_id = None

        cur_frame_count = math.floor(timestamp / self.config.frame_interval)
        if cur_frame_count > session.frame_count:
            self.update()
            self.render()
            session.frame_count = cur_frame_count

        if session.state.is_over:
            return
        session.animation_id = self.host.request_animation_frame(self.animate)

    def on_key_down(self, event: KeyEvent):
        direction = KEY_DIRECTIONS.get(event.key_code)
        if direction is None:
            return
        self.session.pending_direction = direction
        event.stop_propagation()

    # -- per tick --

    def update(self):
        """
        Execute one tick:
          1) Apply the buffered direction (a reversal flips the body)
          2) Compute the next head
          3) Wall or self collision ends the game, nothing else changes
          4) Food at the next head: grow, score, place new food
          5) Otherwise slide forward
        """
        session = self.session
        if session.state.is_over:
            return

        config = self.config
        snake = session.snake
        session.ticks += 1

        snake.set_direction(session.pending_direction)
        new_head = snake.next_head()

        if not new_head.in_bounds(config.width, config.height) or snake.would_hit_self(new_head):
            session.state.end(GAME_OVER_MESSAGE)
            reason = "wall" if not new_head.in_bounds(config.width, config.height) else "self"
            logger.info(
                f"Game over at tick {session.ticks}: hit {reason} at {tuple(new_head)}, "
                f"score {session.state.score}"
            )
            return

        if session.food is not None and new_head == session.food.cell:
            snake.eat(new_head)
            session.state.score += 1
            if len(snake) >= config.width * config.height:
                session.food = None
                session.state.end(WIN_MESSAGE)
                logger.info(f"Board filled at tick {session.ticks}, score {session.state.score}")
                return
            food_cell = food_placement.generate(config.width, config.height, snake.cells(), session.rng)
            session.food = Food(food_cell, config.food_color)
            logger.debug(f"Ate food at {tuple(new_head)}; new food at {tuple(food_cell)}")
            return

        snake.move(new_head)

    def render(self):
        session = self.session
        renderer = self.renderer
        if session.state.is_over:
            renderer.draw_banner(session.state.error)
            return

        renderer.clear()
        session.snake.draw(renderer)
        if session.food is not None:
            session.food.draw(renderer)

    def snapshot(self) -> BoardSnapshot:
        """Return a read-only view of the current session."""
        session = self.session
        return BoardSnapshot(
            width=self.config.width,
            height=self.config.height,
            snake=tuple(session.snake.cells()),
            direction=session.snake.direction,
            food=session.food.cell if session.food is not None else None,
            score=session.state.score,
            error=session.state.error,
            ticks=session.ticks,
        )
