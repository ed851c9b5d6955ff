from __future__ import annotations

"""
Logging Configuration Models.

Holds the immutable settings object consumed by configure_logging and
the translation of textual level names.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names (case-insensitive) and their numeric values
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Minimum level name; unknown names resolve to INFO.
        console: Write records to stderr.
        log_file: Path of the rotating log file, None to disable it.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings used by the command line front end."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)


def parse_level(level: Optional[str]) -> int:
    """Translate a level name to its numeric value, defaulting to INFO."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)
