"""
Terminals the game can be drawn on.
"""

from .base import Terminal, TerminalError
from .recording import RecordingTerminal

__all__ = [
    'Terminal',
    'TerminalError',
    'RecordingTerminal',
]
