"""Error types raised by the editor components.

Components raise these instead of exiting; only the command-line boundary
decides whether an error ends the process.
"""


class EditorError(Exception):
    """Base class for all editor errors."""


class UsageError(EditorError):
    """The command line is missing its filename argument."""


class TerminalError(EditorError):
    """Terminal attributes could not be queried or installed."""


class ReadError(EditorError):
    """Reading from the terminal failed for a reason other than "no data yet"."""


class PersistenceError(EditorError):
    """The document could not be written to disk."""
