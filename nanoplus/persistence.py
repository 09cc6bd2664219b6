"""Loading and saving documents as newline-terminated lines of bytes."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from typing import Iterable

from .constants import EditorConstants
from .errors import PersistenceError

logger = logging.getLogger(__name__)


def load_lines(filename: str) -> list[bytes]:
    """Read a file into a list of lines.

    A missing, unreadable or empty file gives a single empty line. A
    trailing newline ends the last line rather than starting a new one.

    Args:
        filename: Path of the document

    Returns:
        Lines without their newline characters
    """
    try:
        with open(filename, 'rb') as f:
            content = f.read()
    except FileNotFoundError:
        return [b""]
    except OSError as e:
        logger.warning("Could not read %s, starting empty: %s", filename, e)
        return [b""]

    if not content:
        return [b""]
    lines = content.split(b"\n")
    if content.endswith(b"\n"):
        lines.pop()
    return lines


def save_lines(filename: str, lines: Iterable[bytes]) -> int:
    """Replace a file atomically with each line followed by a newline.

    Lines go to a temporary file in the same directory, which is synced
    and then renamed over the target, so a failed save leaves the
    previous contents in place. An existing file keeps its permissions.

    Args:
        filename: Path of the document
        lines: Lines to write, in order

    Returns:
        Number of lines written

    Raises:
        PersistenceError: the file could not be written or replaced
    """
    if os.path.exists(filename) and not os.access(filename, os.W_OK):
        raise PersistenceError(f"Cannot save to {filename}: permission denied")

    dir_name = os.path.dirname(filename) or '.'
    base_name = os.path.basename(filename)
    temp_filename = None
    count = 0
    try:
        with tempfile.NamedTemporaryFile(
            mode='wb',
            dir=dir_name,
            prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
            suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
            delete=False
        ) as temp_file:
            temp_filename = temp_file.name
            for line in lines:
                temp_file.write(line)
                temp_file.write(b"\n")
                count += 1
            temp_file.flush()
            os.fsync(temp_file.fileno())

        try:
            os.chmod(temp_filename, stat.S_IMODE(os.stat(filename).st_mode))
        except FileNotFoundError:
            pass
        os.replace(temp_filename, filename)
    except OSError as e:
        if temp_filename is not None:
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        raise PersistenceError(f"Cannot save to {filename}: {e}") from e
    logger.info("Saved %d lines to %s", count, filename)
    return count
