"""nano+ - A minimal raw-mode terminal text editor."""

from .model import LineBuffer, CursorPosition, Direction
from .keyboard import InputDecoder, Command, CommandType
from .view import TerminalRenderer
from .session import Session
from .editor import Editor

__all__ = [
    'LineBuffer',
    'CursorPosition',
    'Direction',
    'InputDecoder',
    'Command',
    'CommandType',
    'TerminalRenderer',
    'Session',
    'Editor',
]
