from __future__ import annotations

"""
Logging Handler Factories.

Every handler created here carries a marker attribute so that a later
reconfiguration removes exactly the handlers this package installed and
leaves those of pytest or embedding applications alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_fileaudit_handler"


# ==============================================================================
# TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# FACTORIES
# ==============================================================================

def _create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Tagged stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return _tag_handler(sh)


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the rotating report log, creating its directory first.

    An unwritable location is reported on stderr and yields None, so the
    audit still runs with console output only.

    Args:
        log_file: Path of the active log file.
        level_int: Numeric threshold of the handler.
        formatter: Line formatter.
        max_bytes: Rollover size in bytes.
        backup_count: Number of rolled-over files to keep.

    Returns:
        Optional[RotatingFileHandler]: The tagged handler, or None.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
