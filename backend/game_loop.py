"""
Frame loop - calls the game once per frame at a fixed frame rate.
"""

import logging
import time
from typing import Callable, Optional

from terminal.base import Terminal

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60


def main_loop(
    terminal: Terminal,
    game,
    fps: int = DEFAULT_FPS,
    max_frames: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic
) -> int:
    """
    Poll input, tick the game and refresh the screen until the terminal is
    asked to quit.

    Args:
        terminal: where the game reads keys and draws
        game: anything with a tick(terminal) method
        fps: target frames per second
        max_frames: stop after this many frames (None runs until quit)
        sleep, clock: injectable for tests

    Returns:
        Number of frames run
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")

    frame_time = 1.0 / fps
    frames = 0
    logger.info(f"Frame loop starting at {fps} fps")

    while not terminal.quitting:
        if max_frames is not None and frames >= max_frames:
            break

        started = clock()
        terminal.poll()
        game.tick(terminal)
        terminal.refresh()
        frames += 1

        remaining = frame_time - (clock() - started)
        if remaining > 0:
            sleep(remaining)

    logger.info(f"Frame loop stopped after {frames} frames")
    return frames
