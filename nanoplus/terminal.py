"""Raw-mode terminal control using termios for input and Blessed for geometry."""

from __future__ import annotations

import atexit
import contextlib
import errno
import logging
import os
import sys
import termios
from typing import Iterator, NoReturn, Optional

import blessed

from .config import EditorConfig
from .constants import EditorConstants
from .errors import ReadError, TerminalError

logger = logging.getLogger(__name__)

# Indices into the list returned by termios.tcgetattr
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

_NO_DATA_ERRNOS = {errno.EAGAIN, errno.EWOULDBLOCK, errno.EINTR}


class RawModeController:
    """Owns the terminal's raw-mode lifecycle and byte-level I/O.

    The attributes captured by enable() are restored exactly once, by
    whichever comes first: disable(), the raw_mode() scope ending, die(),
    or interpreter exit.
    """

    def __init__(
        self,
        stdin_fd: int = 0,
        stdout_fd: int = 1,
        terminal: Optional[blessed.Terminal] = None,
        config: Optional[EditorConfig] = None,
    ):
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.term = terminal
        self.config = config or EditorConfig()
        self._original_mode: Optional[list] = None
        self.is_raw = False

    def raw_attributes(self, original: list) -> list:
        """Derive raw-mode attributes from the captured ones."""
        raw = list(original)
        raw[CC] = list(original[CC])
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
        raw[IFLAG] &= ~(termios.IXON | termios.ICRNL)
        raw[OFLAG] &= ~termios.OPOST
        raw[CC][termios.VMIN] = EditorConstants.READ_MIN_BYTES
        raw[CC][termios.VTIME] = self.config.read_timeout_deciseconds
        return raw

    def enable(self) -> None:
        """Capture the current attributes and switch the terminal to raw mode."""
        if self.is_raw:
            return
        try:
            original = termios.tcgetattr(self.stdin_fd)
        except termios.error as e:
            raise TerminalError(f"tcgetattr: {e}") from e

        self._original_mode = original
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self.raw_attributes(original))
        except termios.error as e:
            raise TerminalError(f"tcsetattr: {e}") from e
        self.is_raw = True
        atexit.register(self._restore_at_exit)
        logger.debug("Raw mode enabled on fd %d", self.stdin_fd)

    def disable(self) -> None:
        """Restore the attributes captured by enable(). Safe to call repeatedly."""
        if not self.is_raw:
            return
        self.is_raw = False
        atexit.unregister(self._restore_at_exit)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._original_mode)
        except termios.error as e:
            raise TerminalError(f"tcsetattr: {e}") from e
        logger.debug("Raw mode disabled on fd %d", self.stdin_fd)

    def _restore_at_exit(self) -> None:
        try:
            self.disable()
        except TerminalError as e:
            logger.error("Could not restore terminal at exit: %s", e)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator["RawModeController"]:
        """Scope raw mode to a with-block."""
        self.enable()
        try:
            yield self
        finally:
            self.disable()

    def query_viewport(self) -> Optional[tuple[int, int]]:
        """Return (rows, cols) of the output terminal, or None if it has no size."""
        if self.term is None:
            stream = os.fdopen(self.stdout_fd, 'w', closefd=False)
            self.term = blessed.Terminal(stream=stream)
        if not self.term.is_a_tty:
            return None
        rows, cols = self.term.height, self.term.width
        if not rows or not cols:
            return None
        return rows, cols

    def read_byte(self) -> Optional[int]:
        """Read one byte, waiting at most the configured timeout.

        Returns:
            The byte value, or None if nothing arrived in time

        Raises:
            ReadError: the read failed for another reason
        """
        try:
            data = os.read(self.stdin_fd, 1)
        except OSError as e:
            if e.errno in _NO_DATA_ERRNOS:
                return None
            raise ReadError(f"read: {e}") from e
        if not data:
            return None
        return data[0]

    def write(self, data: bytes) -> None:
        """Write all of data to the output descriptor."""
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def die(self, reason: str) -> NoReturn:
        """Report a fatal error, restore the terminal and exit non-zero."""
        logger.error("Fatal: %s", reason)
        try:
            self.disable()
        except TerminalError as e:
            logger.error("Could not restore terminal: %s", e)
        print(f"{EditorConstants.PROGRAM_NAME}: {reason}", file=sys.stderr)
        sys.exit(EditorConstants.EXIT_FAILURE)
