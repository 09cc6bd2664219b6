#!/usr/bin/env python3
"""nano+ - A minimal terminal text editor.

Usage:
    python main.py <filename>

Controls:
    Arrow keys: Move cursor
    Ctrl-S: Save file
    Ctrl-Q: Quit
    Ctrl-J: New line
    Backspace: Delete character
    Type to insert text
"""

import sys
from nanoplus.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
