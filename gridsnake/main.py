#!/usr/bin/env python3
"""
Run one snake session headlessly.

An autopilot player steers the snake; frames can be written to a video and
the board can be printed as text after every tick.

Usage:
    gridsnake
    gridsnake --player random --seed 7 --video out/session.mp4
    gridsnake --width 10 --height 10 --ascii --log-level DEBUG
"""

import argparse
import json
import logging
import random
import sys
from typing import Any, Dict, List, Optional

from .config import GameConfig, load_config
from .domain.constants import Direction
from .game import SnakeGame
from .players import Autopilot, Player, get_player_class, AVAILABLE_PLAYERS
from .services.host import HeadlessHost
from .services.renderers import PillowRenderer, TextRenderer
from .services.video_writer import write_video

logger = logging.getLogger(__name__)

DEFAULT_MAX_FRAMES = 60 * 60 * 5  # five minutes of 60 Hz refreshes


def player_rng(seed: Optional[int]) -> random.Random:
    """Random source for the autopilot, kept apart from the food placement stream."""
    return random.Random(seed + 1 if seed is not None else None)


def run_session(
    config: GameConfig,
    player: Player,
    record_frames: bool = False,
    ascii_board: bool = False,
    cell_size: int = 20,
    max_frames: Optional[int] = DEFAULT_MAX_FRAMES,
    host: Optional[HeadlessHost] = None,
) -> Dict[str, Any]:
    """
    Play one session to the end (or until max_frames refreshes).

    Args:
        config: game configuration; validated on start
        player: autopilot deciding the moves
        record_frames: keep a PIL image of every tick
        ascii_board: log the board as text after every tick
        cell_size: pixel size of a grid cell when recording
        max_frames: safety limit on display refreshes, None for no limit
        host: host to run on; a fresh HeadlessHost by default

    Returns:
        A summary dict (score, length, message, ticks, frames); when
        recording, the images are under "images".
    """
    host = host or HeadlessHost()
    if record_frames:
        renderer = PillowRenderer.for_grid(config.width, config.height, config.spacing_ratio, cell_size=cell_size)
    else:
        renderer = TextRenderer(config.width, config.height, symbols={
            config.snake_color: "S",
            config.food_color: "A",
        })

    game = SnakeGame(config, renderer, host)
    autopilot = Autopilot(game, player, host)

    images: List = []
    last_tick = 0

    def after_frame(timestamp: float):
        nonlocal last_tick
        ticks = game.session.ticks
        if ticks == last_tick:
            return
        last_tick = ticks
        if record_frames:
            images.append(renderer.snapshot())
        if ascii_board and isinstance(renderer, TextRenderer):
            logger.info(f"Tick {ticks}:\n{renderer.render()}")

    host.after_frame.append(after_frame)
    autopilot.attach()
    game.start()
    try:
        frames = host.run(max_frames=max_frames)
    finally:
        game.stop()
        autopilot.detach()
        host.after_frame.remove(after_frame)

    snapshot = game.snapshot()
    summary: Dict[str, Any] = {
        "score": snapshot.score,
        "length": len(snapshot.snake),
        "message": snapshot.error,
        "ticks": snapshot.ticks,
        "frames": frames,
    }
    if record_frames:
        summary["images"] = images
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless snake session with an autopilot player.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Game settings (override GRIDSNAKE_* environment variables)
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument("--height", type=int, help="Grid height in cells")
    parser.add_argument("--frame-interval", type=float, dest="frame_interval",
                        help="Milliseconds per tick")
    parser.add_argument("--direction", type=Direction.parse,
                        help="Initial direction (left, right, up, down)")
    parser.add_argument("--seed", type=int, help="Seed for food placement and the player")
    parser.add_argument("--env-file", type=str, dest="env_file",
                        help="Path to a .env file (default: search from the working directory)")

    # Player
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Autopilot player (default: greedy)")

    # Output
    parser.add_argument("--video", "-o", type=str,
                        help="Write the session to a video file (.mp4 or .gif)")
    parser.add_argument("--fps", type=int, default=10, help="Video frames per second (default: 10)")
    parser.add_argument("--cell-size", type=int, default=20, dest="cell_size",
                        help="Video cell size in pixels (default: 20)")
    parser.add_argument("--ascii", action="store_true", help="Log the board after every tick")
    parser.add_argument("--max-frames", type=int, default=DEFAULT_MAX_FRAMES, dest="max_frames",
                        help="Stop after this many display refreshes")
    parser.add_argument("--log-level", type=str, default="INFO", dest="log_level",
                        help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(
            env_file=args.env_file,
            width=args.width,
            height=args.height,
            frame_interval=args.frame_interval,
            direction=args.direction,
            seed=args.seed,
        ).validate()

        player_class = get_player_class(args.player)
        player = player_class(rng=player_rng(config.seed))

        result = run_session(
            config,
            player,
            record_frames=bool(args.video),
            ascii_board=args.ascii,
            cell_size=args.cell_size,
            max_frames=args.max_frames,
        )

        images = result.pop("images", None)
        if args.video:
            result["video"] = write_video(images, args.video, fps=args.fps)

        print(json.dumps(result, indent=2))

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
