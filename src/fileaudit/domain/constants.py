from __future__ import annotations

"""
Domain Constants.

Settings defaults shared by the configuration layer and the scanner.
"""

from typing import List

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_DAYS = 7


def default_exclude_patterns() -> List[str]:
    """
    Names skipped when the user gives no exclusion list.

    Version-control metadata and editor or dependency caches change on
    every checkout or build and would drown the real changes.
    """
    return [
        r"^(\.git|\.svn|\.hg)$",
        r"^(__pycache__|\.idea|\.vscode|node_modules)$",
    ]
