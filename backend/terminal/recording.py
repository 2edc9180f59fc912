"""
In-memory terminal - replays scripted keys and records draw calls.
"""

from typing import Iterable, List, Optional, Tuple

from domain.constants import VALID_KEYS
from .base import Terminal

PRINT = "print"
CLS = "cls"
QUIT_COMMAND = "quit"


class RecordingTerminal(Terminal):
    """
    A terminal with no screen.

    Each poll() takes the next key from `keys` (None when exhausted).
    Everything drawn is kept in `commands` as tuples and in `cells` as the
    current character at each (x, y).
    """

    def __init__(self, width: int, height: int, keys: Iterable[Optional[str]] = ()):
        super().__init__(width, height)
        self._keys = iter(keys)
        self.commands: List[Tuple] = []
        self.cells = {}

    def poll(self) -> Optional[str]:
        key = next(self._keys, None)
        self.key = key if key in VALID_KEYS else None
        return self.key

    def press(self, key: Optional[str]) -> None:
        """Set this frame's key directly, bypassing the script."""
        self.key = key if key in VALID_KEYS else None

    def print(self, x: int, y: int, text: str) -> None:
        self.commands.append((PRINT, x, y, text))
        for i, char in enumerate(text):
            self.cells[(x + i, y)] = char

    def cls(self) -> None:
        self.commands.append((CLS,))
        self.cells.clear()

    def quit(self) -> None:
        self.commands.append((QUIT_COMMAND,))
        super().quit()

    def clear_commands(self) -> None:
        self.commands.clear()

    def printed(self) -> List[Tuple[int, int, str]]:
        """(x, y, text) of every print since the last clear_commands()."""
        return [command[1:] for command in self.commands if command[0] == PRINT]

    def row(self, y: int) -> str:
        """The current text of one grid row, trailing blanks removed."""
        return "".join(self.cells.get((x, y), " ") for x in range(self.width)).rstrip()
