from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, default report naming and
atomic file persistence. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
import re
import stat
import tempfile
from datetime import datetime
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "FileAudit"
UNIX_APP_DIR_NAME = ".fileaudit"
REPORT_PREFIX = "FileAudit"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/FileAudit
    - Linux/Mac: ~/.fileaudit

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def default_report_name(client_name: str, when: Optional[datetime] = None) -> str:
    """
    Build the default report filename.

    Format: FileAudit_<client>_<YYYYmmdd_HHMMSS>.html, the client segment
    being omitted when no usable client name is given.

    Args:
        client_name: Display name of the audited client.
        when: Timestamp embedded in the filename (defaults to now).

    Returns:
        str: Filesystem-safe filename.
    """
    stamp = (when or datetime.now()).strftime("%Y%m%d_%H%M%S")
    client = _UNSAFE_FILENAME_CHARS.sub("_", (client_name or "").strip()).strip("._")
    if client:
        return f"{REPORT_PREFIX}_{client}_{stamp}.html"
    return f"{REPORT_PREFIX}_{stamp}.html"


def resolve_output_path(
        output_path: Optional[str],
        client_name: str,
        when: Optional[datetime] = None,
) -> str:
    """
    Compute the absolute report destination.

    An empty output path falls back to the default report name in the
    current working directory; an existing directory receives the
    default name inside it.
    """
    default_name = default_report_name(client_name, when)
    raw = (output_path or "").strip()
    if not raw:
        return os.path.join(os.getcwd(), default_name)

    resolved = normalize_path(raw, os.getcwd())
    if os.path.isdir(resolved):
        return os.path.join(resolved, default_name)
    return resolved

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def write_text_atomic(
        path: str,
        content: str,
        encoding: str = "utf-8",
        errors: str = "replace",
) -> None:
    """
    Write text so the destination is either fully replaced or untouched.

    Content goes to a temporary sibling file which is then moved over the
    destination with os.replace. The result keeps the mode of the file it
    replaces; a new file gets the usual umask-derived mode instead of the
    owner-only mode of the temporary file.

    Args:
        path: Destination file path.
        content: Text to persist.
        encoding: Text encoding.
        errors: Handling of characters the encoding cannot represent.

    Raises:
        OSError: If the directory cannot be created or the write fails.
    """
    target = os.path.abspath(path)
    parent = os.path.dirname(target)
    os.makedirs(parent, exist_ok=True)
    mode = _target_mode(target)

    fd, tmp_path = tempfile.mkstemp(prefix=".fileaudit-", suffix=".tmp", dir=parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, errors=errors, newline="") as f:
            f.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _target_mode(target: str) -> int:
    """Permission bits for the file written at target."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except OSError:
        pass
    # os.umask can only be read by setting it
    current = os.umask(0)
    os.umask(current)
    return 0o666 & ~current
