"""Session state for one editing run.

A Session bundles everything the session loop owns: the filename, the
line buffer, the viewport and the run state. It is passed explicitly to
the components that read or change it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .model import LineBuffer
from .persistence import load_lines


class SessionState(Enum):
    """Run state of the session loop."""
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class Session:
    """Everything owned by a single editing session."""

    filename: str
    buffer: LineBuffer
    viewport: Optional[tuple[int, int]] = None
    state: SessionState = SessionState.RUNNING
    status_message: Optional[str] = None

    @classmethod
    def open(cls, filename: str) -> "Session":
        """Create a session for filename, loading it if it exists."""
        return cls(filename=filename, buffer=LineBuffer(load_lines(filename)))

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def stop(self) -> None:
        self.state = SessionState.STOPPED
