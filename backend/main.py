#!/usr/bin/env python3
"""
Play Snake in the terminal.

Usage:
    python main.py
    python main.py --width 60 --height 30 --fps 30

Controls:
    Arrow keys  steer
    Space       play again after game over
    Q / Esc     quit

Settings can also come from the environment (or a .env file):
    SNAKE_WIDTH, SNAKE_HEIGHT, SNAKE_FPS, SNAKE_SEED, LOG_LEVEL, SNAKE_LOG_FILE
"""

import argparse
import curses
import logging
import os
import random
import sys

from dotenv import load_dotenv

from domain.constants import GRID_WIDTH, GRID_HEIGHT
from game import SnakeGame
from game_loop import main_loop, DEFAULT_FPS
from terminal.base import TerminalError
from terminal.curses_terminal import CursesTerminal

TITLE = "Terminal Snake"

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """
    CLI options; defaults come from the environment when set.

    Environment defaults stay strings so argparse runs them through the
    same type checks as flags.
    """
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--width", type=positive_int,
                        default=os.getenv("SNAKE_WIDTH", str(GRID_WIDTH)),
                        help=f"Board width in cells (default: {GRID_WIDTH})")
    parser.add_argument("--height", type=positive_int,
                        default=os.getenv("SNAKE_HEIGHT", str(GRID_HEIGHT)),
                        help=f"Board height in cells (default: {GRID_HEIGHT})")
    parser.add_argument("--fps", type=positive_int,
                        default=os.getenv("SNAKE_FPS", str(DEFAULT_FPS)),
                        help=f"Frames per second (default: {DEFAULT_FPS})")
    parser.add_argument("--seed", type=int,
                        default=os.getenv("SNAKE_SEED") or None,
                        help="Seed for food placement (default: random)")
    parser.add_argument("--log-level", type=str,
                        default=os.getenv("LOG_LEVEL", "INFO"),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", type=str,
                        default=os.getenv("SNAKE_LOG_FILE", "snake.log"),
                        help="Log file; curses owns the console (default: snake.log)")
    return parser


def configure_logging(level: str, log_file: str) -> None:
    logging.basicConfig(
        level=level,
        filename=log_file,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run(stdscr, args: argparse.Namespace) -> int:
    """Body of curses.wrapper: build the terminal and game, then loop."""
    terminal = CursesTerminal(stdscr, args.width, args.height, title=TITLE)
    game = SnakeGame(args.width, args.height, rng=random.Random(args.seed))
    return main_loop(terminal, game, fps=args.fps)


def main(argv=None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        frames = curses.wrapper(run, args)
    except TerminalError as e:
        logger.error(f"Cannot start: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    logger.info(f"Exited after {frames} frames")
    return 0


if __name__ == "__main__":
    sys.exit(main())
