"""Runtime configuration and logging setup.

Configuration comes from the environment; there is no configuration file.
Log output always goes to a file in the user's log directory because the
terminal itself is owned by the editor while it runs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def default_log_file() -> Path:
    """Return the platform-appropriate log file path."""
    log_dir = Path(platformdirs.user_log_dir(EditorConstants.APP_NAME))
    return log_dir / EditorConstants.LOG_FILE_NAME


@dataclass
class EditorConfig:
    """Settings resolved once at startup."""

    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    read_timeout: float = EditorConstants.READ_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            EditorConfig with unknown log levels replaced by the default
        """
        env = os.environ if environ is None else environ

        level = env.get(EditorConstants.LOG_LEVEL_ENV, "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = EditorConstants.DEFAULT_LOG_LEVEL

        log_file_value = env.get(EditorConstants.LOG_FILE_ENV)
        log_file = Path(log_file_value) if log_file_value else default_log_file()

        return cls(log_level=level, log_file=log_file)

    @property
    def read_timeout_deciseconds(self) -> int:
        """Read timeout in the tenths of a second termios expects (1..255)."""
        return max(1, min(255, round(self.read_timeout * 10)))


def configure_logging(config: EditorConfig) -> logging.Logger:
    """Attach a file handler to the package logger.

    Never logs to stderr: that stream shares the screen with the editor.
    Falls back to a NullHandler when the log location is not writable.
    """
    package_logger = logging.getLogger(EditorConstants.APP_NAME)
    package_logger.setLevel(config.log_level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    log_file = config.log_file or default_log_file()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(EditorConstants.LOG_FORMAT))
    except OSError:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    logger.debug("Logging configured at %s to %s", config.log_level, log_file)
    return package_logger
