"""Main editor controller: the session loop."""

import logging
import signal
from typing import Optional

from .commands import CommandRegistry
from .config import EditorConfig
from .constants import EditorConstants
from .keyboard import InputDecoder
from .session import Session
from .terminal import RawModeController
from .view import TerminalRenderer

logger = logging.getLogger(__name__)

# Signals that would otherwise kill the process with the terminal still raw
TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


class Editor:
    """Composes decoder, buffer and renderer into the editing loop."""

    def __init__(self, filename: str, terminal: Optional[RawModeController] = None,
                 config: Optional[EditorConfig] = None):
        """Initialize the editor components.

        Args:
            filename: File to edit; it need not exist yet
            terminal: Terminal controller (a real one on stdin/stdout by default)
            config: Runtime configuration
        """
        self.config = config or EditorConfig()
        self.terminal = terminal or RawModeController(config=self.config)
        self.session = Session.open(filename)
        self.decoder = InputDecoder(self.terminal)
        self.renderer = TerminalRenderer(self.terminal)
        self.command_registry = CommandRegistry()

    def _handle_termination(self, signum, frame):
        """Turn a termination signal into SystemExit so cleanup runs."""
        del frame  # Unused
        raise SystemExit(128 + signum)

    def run(self) -> int:
        """Run the session loop until a quit command.

        Raw mode is active only inside this call and is restored on every
        way out of it, including errors and termination signals.

        Returns:
            The process exit status for a normal quit

        Raises:
            TerminalError: raw mode could not be entered or left
            ReadError: reading the terminal failed
        """
        original_handlers = {
            signum: signal.signal(signum, self._handle_termination)
            for signum in TERMINATION_SIGNALS
        }
        try:
            with self.terminal.raw_mode():
                self.session.viewport = (
                    self.terminal.query_viewport() or EditorConstants.FALLBACK_VIEWPORT
                )
                logger.debug("Editing %s in a %dx%d viewport",
                             self.session.filename, *self.session.viewport)
                self.renderer.render(self.session)

                while self.session.running:
                    command = self.decoder.read_command()
                    if command is None:
                        continue
                    if self.command_registry.execute(self.session, command):
                        self.renderer.render(self.session)
        finally:
            for signum, handler in original_handlers.items():
                signal.signal(signum, handler)
        return EditorConstants.EXIT_SUCCESS
