"""Full-screen rendering of a session to the terminal."""

import os

from .constants import EditorConstants
from .session import Session


class TerminalRenderer:
    """Redraws the whole screen for every state change.

    Each frame is written with a single terminal write: clear and home,
    every buffer line followed by CRLF, the status line, then the cursor
    placed at the buffer cursor (1-indexed terminal coordinates).
    """

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def status_line(self, session: Session) -> bytes:
        """Build the status line for the session."""
        status = EditorConstants.STATUS_TEMPLATE.format(filename=session.filename)
        if session.status_message:
            status += EditorConstants.STATUS_MESSAGE_TEMPLATE.format(message=session.status_message)
        return os.fsencode(status)

    def compose_frame(self, session: Session) -> bytes:
        """Build the bytes for one complete screen update."""
        cursor = session.buffer.cursor
        frame = bytearray(EditorConstants.CLEAR_SCREEN + EditorConstants.CURSOR_HOME)
        for line in session.buffer.iter_lines():
            frame += line
            frame += EditorConstants.LINE_END
        frame += self.status_line(session)
        frame += EditorConstants.CURSOR_POSITION.format(
            row=cursor.row + 1, col=cursor.col + 1
        ).encode('ascii')
        return bytes(frame)

    def render(self, session: Session) -> None:
        """Write a full frame for the session to the terminal."""
        self.terminal.write(self.compose_frame(session))
