"""nano+ CLI entry point.

Allows running via `python -m nanoplus` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .config import EditorConfig, configure_logging
from .constants import EditorConstants
from .editor import Editor
from .errors import ReadError, TerminalError, UsageError
from .terminal import RawModeController


def parse_args(args: Sequence[str]) -> str:
    """Return the filename argument.

    Raises:
        UsageError: no filename was given
    """
    if not args:
        raise UsageError(EditorConstants.USAGE_MESSAGE)
    return args[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        filename = parse_args(args)
    except UsageError as e:
        print(e)
        return EditorConstants.EXIT_FAILURE

    config = EditorConfig.from_env()
    configure_logging(config)

    terminal = RawModeController(config=config)
    editor = Editor(filename, terminal=terminal, config=config)
    try:
        status = editor.run()
    except (TerminalError, ReadError) as e:
        terminal.die(str(e))

    print(EditorConstants.EXIT_BANNER)
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
