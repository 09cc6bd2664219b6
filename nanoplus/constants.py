"""Constants and configuration for the nano+ editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    PROGRAM_NAME = "nano+"

    # Control bytes recognised by the input decoder
    CTRL_Q = 0x11
    CTRL_S = 0x13
    NEWLINE = 0x0A
    ESCAPE = 0x1B
    DELETE = 0x7F
    FIRST_PRINTABLE = 0x20

    # Raw-mode read policy: return whatever is available, else wait up to
    # READ_TIMEOUT seconds. termios expresses the wait in tenths of a second.
    READ_TIMEOUT = 0.1
    READ_MIN_BYTES = 0

    # Used when the terminal cannot report its size
    FALLBACK_VIEWPORT = (24, 80)

    # ANSI/VT100 output sequences
    CLEAR_SCREEN = b"\x1b[2J"
    CURSOR_HOME = b"\x1b[H"
    CURSOR_POSITION = "\x1b[{row};{col}H"
    LINE_END = b"\r\n"

    # Status line
    STATUS_TEMPLATE = "-- nano+ editor --  File: {filename}  | Ctrl+S Save | Ctrl+Q Quit --"
    STATUS_MESSAGE_TEMPLATE = "  [{message}]"
    SAVED_MESSAGE = "Wrote {count} lines"
    SAVE_FAILED_MESSAGE = "Cannot save to {filename}"

    # Process boundary
    USAGE_MESSAGE = "Usage: nano+ <filename>"
    EXIT_BANNER = "\n[Exited nano+]"
    EXIT_SUCCESS = 0
    EXIT_FAILURE = 1

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Logging
    APP_NAME = "nanoplus"
    LOG_FILE_NAME = "nanoplus.log"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_LEVEL_ENV = "NANOPLUS_LOG_LEVEL"
    LOG_FILE_ENV = "NANOPLUS_LOG_FILE"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
