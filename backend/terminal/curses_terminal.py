"""
Curses terminal - draws the grid on the real console.

Keys handled:
- Arrow keys move the snake
- Space restarts after game over
- q, Q or Escape quits
"""

import curses
import logging
import sys
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, SPACE, QUIT
from .base import Terminal, TerminalError

logger = logging.getLogger(__name__)

ESCAPE = 27

KEY_MAP = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord(' '): SPACE,
    ord('q'): QUIT,
    ord('Q'): QUIT,
    ESCAPE: QUIT,
}


def translate_key(code: int) -> Optional[str]:
    """Map a curses key code to a game key; unknown codes map to None."""
    return KEY_MAP.get(code)


class CursesTerminal(Terminal):
    """
    Terminal backed by a curses window.

    Build it inside curses.wrapper() so the console is restored on exit,
    even when the game raises.
    """

    def __init__(self, stdscr, width: int, height: int, title: Optional[str] = None):
        super().__init__(width, height)
        rows, cols = stdscr.getmaxyx()
        if rows < height or cols < width:
            raise TerminalError(
                f"Terminal is {cols}x{rows} but the board needs {width}x{height}. "
                "Enlarge the window or pass a smaller --width/--height."
            )

        self.stdscr = stdscr
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)
        stdscr.clear()

        if title:
            self.set_title(title)

        logger.info(f"Curses terminal ready ({cols}x{rows}, board {width}x{height})")

    @staticmethod
    def set_title(title: str) -> None:
        """Set the window title via the xterm escape sequence."""
        sys.stdout.write(f"\x1b]0;{title}\x07")
        sys.stdout.flush()

    def poll(self) -> Optional[str]:
        # Drain the input buffer; the last recognised key of the frame wins
        key = None
        code = self.stdscr.getch()
        while code != -1:
            key = translate_key(code) or key
            code = self.stdscr.getch()
        self.key = key
        return key

    def print(self, x: int, y: int, text: str) -> None:
        if not (0 <= y < self.height) or x >= self.width:
            return
        text = text[:self.width - x]
        try:
            self.stdscr.addstr(y, x, text)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass

    def cls(self) -> None:
        self.stdscr.erase()

    def refresh(self) -> None:
        self.stdscr.refresh()
