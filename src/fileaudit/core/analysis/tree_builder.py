from __future__ import annotations

"""
Audit Tree Builder.

Converts the flat sequence of scanned file records into a hierarchy of
folder nodes relative to the audited base path. Folder nodes are created
in encounter order; sorting is left to the renderer.
"""

import logging
import os
from typing import Iterable, List, Optional

from fileaudit.domain.audit_models import FileRecord, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        base_path: str,
        records: Iterable[FileRecord],
        sep: str = os.sep,
) -> TreeNode:
    """
    Build the folder hierarchy for a collection of file records.

    Each record is attached to the node of its immediate parent directory
    relative to base_path. Records that cannot be placed (empty path, path
    outside base_path) are skipped without affecting the others.

    Args:
        base_path: Absolute audited directory.
        records: File records whose full_path lies under base_path.
        sep: Path separator used by the records.

    Returns:
        TreeNode: The root node (files directly inside base_path).
    """
    root = TreeNode()
    separators = _separators(sep)
    base = _strip_trailing(base_path or "", separators)
    skipped = 0

    for record in records:
        segments = _relative_segments(base, getattr(record, "full_path", None), separators)
        if not segments:
            skipped += 1
            logger.debug(f"Skipping record outside audit scope: {getattr(record, 'full_path', None)!r}")
            continue

        # Walk all but the last segment; the last one is the filename
        current = root
        for folder in segments[:-1]:
            child = current.children.get(folder)
            if child is None:
                child = TreeNode()
                current.children[folder] = child
            current = child
        current.files.append(record)

    if skipped:
        logger.debug(f"Tree built with {skipped} skipped record(s).")

    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _separators(sep: str) -> str:
    """Accepted separators; forward slashes are always valid on Windows."""
    if sep == "\\":
        return "\\/"
    return sep or "/"


def _strip_trailing(path: str, separators: str) -> str:
    """Remove trailing separators (a bare root collapses to an empty prefix)."""
    return path.rstrip(separators)


def _relative_segments(base: str, full_path: Optional[str], separators: str) -> List[str]:
    """
    Split the part of full_path below base into non-empty segments.

    Returns an empty list when the path is missing, lies outside base or
    has nothing left after the prefix.
    """
    if not isinstance(full_path, str) or not full_path:
        return []

    if not full_path.startswith(base):
        return []

    remainder = full_path[len(base):]
    # The prefix must end on a separator boundary ("/base2" is not under "/base")
    if not remainder or remainder[0] not in separators:
        return []

    normalized = remainder
    for extra in separators[1:]:
        normalized = normalized.replace(extra, separators[0])

    return [s for s in normalized.split(separators[0]) if s]
