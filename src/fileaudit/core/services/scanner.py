from __future__ import annotations

"""
Recent File Discovery Service.

Walks the audited directory and yields a FileRecord for every file whose
creation or modification time falls inside the recency window. Metadata
that cannot be read is replaced by well-defined defaults so a single
unreadable attribute never drops a file from the report.
"""

import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from fileaudit.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_patterns,
    matches_any,
)
from fileaudit.domain.audit_models import UNKNOWN_OWNER, FileRecord

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def scan_recent_files(
        base_path: str,
        days: int,
        *,
        now: Optional[datetime] = None,
        exclude_patterns: Optional[List[str]] = None,
) -> Iterator[FileRecord]:
    """
    Traverse the filesystem and yield files inside the recency window.

    Args:
        base_path: Directory to audit.
        days: Size of the recency window in days.
        now: Reference time for the window (defaults to the current time).
        exclude_patterns: Regex patterns for directory/file names to skip.
                          None applies the default exclusions.

    Yields:
        FileRecord: One record per qualifying file, in walk order.
    """
    base_abs = os.path.abspath(base_path)
    reference = now or datetime.now()
    cutoff = reference - timedelta(days=days)
    patterns = default_exclude_patterns() if exclude_patterns is None else exclude_patterns
    exclude_rx = compile_patterns(patterns)

    logger.debug(f"Scanning '{base_abs}' for changes since {cutoff:%Y-%m-%d %H:%M:%S}")

    for root, dirs, files in os.walk(base_abs, onerror=_log_walk_error):
        # In-place directory pruning to optimize traversal
        dirs[:] = [d for d in dirs if not matches_any(d, exclude_rx)]
        dirs.sort()
        files.sort()

        for file_name in files:
            if matches_any(file_name, exclude_rx):
                continue

            file_path = os.path.join(root, file_name)
            try:
                st = os.stat(file_path)
            except OSError as e:
                logger.debug(f"Cannot stat '{file_path}': {e}")
                continue

            record = build_file_record(file_path, st)
            if is_recent(record, cutoff):
                yield record


def build_file_record(file_path: str, st: os.stat_result) -> FileRecord:
    """
    Create a FileRecord from a path and its stat result.

    Args:
        file_path: Absolute file path.
        st: Result of os.stat for the path.

    Returns:
        FileRecord: Record with defaults for any unreadable attribute.
    """
    return FileRecord(
        name=os.path.basename(file_path),
        full_path=file_path,
        size_kb=_size_kb(st),
        created_time=_to_datetime(_creation_timestamp(st)),
        modified_time=_to_datetime(getattr(st, "st_mtime", None)),
        owner=lookup_owner(file_path),
    )


def is_recent(record: FileRecord, cutoff: datetime) -> bool:
    """Check whether the record was created or modified at or after cutoff."""
    for stamp in (record.created_time, record.modified_time):
        if stamp is not None and stamp >= cutoff:
            return True
    return False


def lookup_owner(file_path: str) -> str:
    """
    Resolve the owner account name of a file.

    Returns:
        str: Owner name, or 'Unknown' when the platform or account lookup fails.
    """
    try:
        owner = _owner_of(file_path)
    except (KeyError, NotImplementedError, OSError, ValueError) as e:
        logger.debug(f"Owner lookup failed for '{file_path}': {e}")
        return UNKNOWN_OWNER
    return owner or UNKNOWN_OWNER


def summarize_records(records: Iterable[FileRecord]) -> Dict[str, Any]:
    """
    Aggregate count and size of a record collection.

    Returns:
        Dict[str, Any]: {'files': int, 'total_size_kb': float}.
    """
    count = 0
    total = 0.0
    for record in records:
        count += 1
        total += record.size_kb or 0.0
    return {"files": count, "total_size_kb": round(total, 2)}


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _owner_of(file_path: str) -> str:
    return Path(file_path).owner()


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable directory: {error}")


def _creation_timestamp(st: os.stat_result) -> Optional[float]:
    """Prefer the true birth time; fall back to st_ctime."""
    birth = getattr(st, "st_birthtime", None)
    if birth:
        return birth
    return getattr(st, "st_ctime", None)


def _to_datetime(timestamp: Optional[float]) -> Optional[datetime]:
    if timestamp is None:
        return None
    try:
        return datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return None


def _size_kb(st: os.stat_result) -> float:
    size = getattr(st, "st_size", 0) or 0
    if size < 0:
        return 0.0
    return round(size / 1024, 2)
