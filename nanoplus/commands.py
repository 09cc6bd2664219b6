"""Command pattern implementation for editor actions."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, TYPE_CHECKING

from .constants import EditorConstants
from .errors import PersistenceError
from .keyboard import CommandType
from .persistence import save_lines

if TYPE_CHECKING:
    from .keyboard import Command
    from .session import Session

logger = logging.getLogger(__name__)


class SessionCommand(ABC):
    """Base class for commands applied to a session."""

    @abstractmethod
    def execute(self, session: 'Session', command: 'Command') -> bool:
        """Execute the command.

        Args:
            session: Session to act on
            command: The decoded command that triggered this

        Returns:
            True if the session should be redrawn afterwards
        """
        pass


class EditCommand(SessionCommand):
    """Base class for commands that change the buffer or its cursor."""

    def execute(self, session: 'Session', command: 'Command') -> bool:
        self._edit(session, command)
        return True

    @abstractmethod
    def _edit(self, session: 'Session', command: 'Command'):
        """Perform the edit."""
        pass


class InsertCharCommand(EditCommand):
    def _edit(self, session, command):
        session.buffer.insert_char(command.char)


class InsertNewlineCommand(EditCommand):
    def _edit(self, session, command):
        session.buffer.insert_newline()


class DeleteBackwardCommand(EditCommand):
    def _edit(self, session, command):
        session.buffer.delete_backward()


class MoveCommand(EditCommand):
    def _edit(self, session, command):
        session.buffer.move(command.direction)


class SaveCommand(SessionCommand):
    """Write the buffer to the session's file.

    A failed save is reported in the status line; the session keeps running.
    """

    def execute(self, session, command):
        try:
            count = save_lines(session.filename, session.buffer.iter_lines())
        except PersistenceError as e:
            logger.warning("%s", e)
            session.status_message = EditorConstants.SAVE_FAILED_MESSAGE.format(
                filename=session.filename
            )
        else:
            session.status_message = EditorConstants.SAVED_MESSAGE.format(count=count)
        return True


class QuitCommand(SessionCommand):
    def execute(self, session, command):
        session.stop()
        return False


class CommandRegistry:
    """Maps decoded command types to the commands that carry them out."""

    def __init__(self):
        self._commands: Dict[CommandType, SessionCommand] = {
            CommandType.INSERT_CHAR: InsertCharCommand(),
            CommandType.INSERT_NEWLINE: InsertNewlineCommand(),
            CommandType.DELETE_BACKWARD: DeleteBackwardCommand(),
            CommandType.MOVE: MoveCommand(),
            CommandType.SAVE: SaveCommand(),
            CommandType.QUIT: QuitCommand(),
        }

    def execute(self, session: 'Session', command: 'Command') -> bool:
        """Run the command for a decoded command.

        Any transient status message is cleared first, so a save message
        only survives until the next keystroke.

        Returns:
            True if the session should be redrawn afterwards
        """
        session.status_message = None
        return self._commands[command.command_type].execute(session, command)
