from __future__ import annotations

"""
Logging Bootstrap.

configure_logging installs a single QueueHandler on the root logger. A
QueueListener thread drains the queue into the real handlers (stderr and
the optional rotating file), so scanning and rendering never wait on log
file writes. Repeated calls are no-ops unless force is given.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fileaudit.infra.fs import get_user_data_dir
from fileaudit.infra.logging.config import LoggingConfig, parse_level
from fileaudit.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Attributes stored on the root logger
_CONFIGURED_FLAG_ATTR: str = "_fileaudit_configured"
_QUEUE_LISTENER_ATTR: str = "_fileaudit_queue_listener"

LOG_DIR_NAME = "logs"
DEFAULT_LOG_FILE = "fileaudit.log"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = DEFAULT_LOG_FILE) -> str:
    """Location used by '--log-file' when no path is given."""
    return os.path.join(get_user_data_dir(), LOG_DIR_NAME, file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger for an audit run.

    Args:
        cfg: Logging settings.
        force: Rebuild the handlers even if logging was already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = parse_level(cfg.level)
        root.setLevel(level_int)
        _teardown(root)

        targets = _build_targets(cfg, level_int)
        if targets:
            _install_queue(root, targets)
        return root
    except Exception:
        return _emergency_console(root)


def get_logger(name: str) -> logging.Logger:
    """Named logger below the configured root."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_targets(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    """Handlers the queue listener fans out to."""
    targets: List[logging.Handler] = []

    if cfg.console:
        targets.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            targets.append(fh)

    return targets


def _install_queue(root: logging.Logger, targets: List[logging.Handler]) -> None:
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    listener = QueueListener(log_queue, *targets, respect_handler_level=True)
    listener.start()
    root.addHandler(_tag_handler(QueueHandler(log_queue)))

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Drain records still queued at interpreter exit
    atexit.register(_safe_stop_listener, listener)


def _teardown(root: logging.Logger) -> None:
    """Detach our handlers and stop the previous listener, if any."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    _safe_stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)


def _emergency_console(root: logging.Logger) -> logging.Logger:
    """Plain stderr logging used when the queue setup itself failed."""
    root.setLevel(logging.INFO)
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
    root.addHandler(_tag_handler(sh))
    root.warning("Logging setup failed. Falling back to plain console output.")
    return root


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() on a listener whose thread is gone raises; test resets do that
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
