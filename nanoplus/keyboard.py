"""Keyboard input decoding from raw terminal bytes."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import EditorConstants
from .model import Direction

logger = logging.getLogger(__name__)


class CommandType(Enum):
    """Kinds of commands produced by the decoder."""
    INSERT_CHAR = "insert_char"
    INSERT_NEWLINE = "insert_newline"
    DELETE_BACKWARD = "delete_backward"
    MOVE = "move"
    SAVE = "save"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """A decoded keyboard command."""
    command_type: CommandType
    char: Optional[int] = None  # Byte to insert for INSERT_CHAR
    direction: Optional[Direction] = None  # For MOVE


CONTROL_COMMANDS = {
    EditorConstants.CTRL_Q: CommandType.QUIT,
    EditorConstants.CTRL_S: CommandType.SAVE,
    EditorConstants.DELETE: CommandType.DELETE_BACKWARD,
    EditorConstants.NEWLINE: CommandType.INSERT_NEWLINE,
}

# Final byte of "ESC [ x" arrow-key sequences
ARROW_KEYS = {
    ord('A'): Direction.UP,
    ord('B'): Direction.DOWN,
    ord('C'): Direction.RIGHT,
    ord('D'): Direction.LEFT,
}


def is_control(byte: int) -> bool:
    return byte < EditorConstants.FIRST_PRINTABLE or byte == EditorConstants.DELETE


class InputDecoder:
    """Turns the terminal's byte stream into commands.

    Every read goes through terminal.read_byte(), which returns None when
    no byte arrived within the read timeout.
    """

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def read_command(self) -> Optional[Command]:
        """Read and decode the next command.

        Returns:
            The command, or None if the wait timed out or the bytes read
            do not form a command
        """
        byte = self.terminal.read_byte()
        if byte is None:
            return None
        return self.decode(byte)

    def decode(self, byte: int) -> Optional[Command]:
        """Classify one byte read in the normal state.

        An ESC byte pulls the rest of its sequence from the terminal.
        """
        if not is_control(byte):
            return Command(CommandType.INSERT_CHAR, char=byte)
        if byte == EditorConstants.ESCAPE:
            return self._read_escape_sequence()
        command_type = CONTROL_COMMANDS.get(byte)
        if command_type is None:
            return None
        return Command(command_type)

    def _read_escape_sequence(self) -> Optional[Command]:
        # A lone ESC (no follow-up byte before the timeout) is dropped.
        first = self.terminal.read_byte()
        if first is None:
            return None
        second = self.terminal.read_byte()
        if second is None:
            return None

        if first == ord('[') and second in ARROW_KEYS:
            return Command(CommandType.MOVE, direction=ARROW_KEYS[second])
        logger.debug("Discarding escape sequence %r", bytes([EditorConstants.ESCAPE, first, second]))
        return None
