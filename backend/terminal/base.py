"""
Base terminal interface for the game engine.
"""

from typing import Optional


class TerminalError(RuntimeError):
    """The terminal cannot host the game (e.g. it is too small)."""


class Terminal:
    """
    Base class/interface for the character grid the game draws on.

    A terminal is both the render target and the input source: once per
    frame the loop calls poll() and the game reads `key`.

    Attributes:
        width, height: grid size in cells
        key: key pressed this frame, one of the domain key constants or None
        quitting: set by quit(); the frame loop stops when it sees it
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.key: Optional[str] = None
        self.quitting = False

    def poll(self) -> Optional[str]:
        """
        Read the key pressed since the last frame into `key`.

        Returns:
            The key, or None when nothing recognised was pressed
        """
        raise NotImplementedError

    def print(self, x: int, y: int, text: str) -> None:
        raise NotImplementedError

    def print_centered(self, row: int, text: str) -> None:
        x = max(0, (self.width - len(text)) // 2)
        self.print(x, row, text)

    def cls(self) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        """Flush this frame's drawing to the screen."""

    def quit(self) -> None:
        self.quitting = True
