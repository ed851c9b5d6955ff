from __future__ import annotations

"""
Audit Domain Data Models.

Defines the per-file record produced by the scanner, the folder node used
by the hierarchical tree, and the immutable options that drive report
generation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

UNKNOWN_OWNER = "Unknown"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileRecord:
    """
    Represents one audited file.

    Attributes:
        name: Leaf filename.
        full_path: Absolute filesystem path (unique key).
        size_kb: Size in kilobytes rounded to 2 decimals, 0 if unknown.
        created_time: Creation timestamp, None if unknown.
        modified_time: Last modification timestamp, None if unknown.
        owner: Owner account name, "Unknown" if the lookup failed.
    """
    name: str
    full_path: str
    size_kb: float = 0.0
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    owner: str = UNKNOWN_OWNER


@dataclass
class TreeNode:
    """
    One folder level of the audited tree (including the implicit root).

    Attributes:
        files: Records whose immediate parent is this folder, in scan order.
        children: Child folders keyed by folder name, in insertion order.
    """
    files: List[FileRecord] = field(default_factory=list)
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def file_count(self) -> int:
        """Total number of records held by this node and its descendants."""
        return len(self.files) + sum(c.file_count() for c in self.children.values())

    def folder_count(self) -> int:
        """Number of descendant folders (this node excluded)."""
        return sum(1 + c.folder_count() for c in self.children.values())

    def total_size_kb(self) -> float:
        """Summed size of every record held by this node and its descendants."""
        total = 0.0
        for record in self.files:
            try:
                total += float(record.size_kb or 0)
            except (TypeError, ValueError):
                continue
        total += sum(c.total_size_kb() for c in self.children.values())
        return round(total, 2)

# -----------------------------------------------------------------------------
# REPORT OPTIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ReportOptions:
    """
    Immutable inputs of the document assembler.

    Attributes:
        base_path: Audited directory, shown in the header.
        days: Recency window in days.
        client_name: Display-only client label.
        company_name: Display-only company label.
        tree_view: Render the interactive tree (otherwise a placeholder).
        dark_mode: Start the document in dark mode.
        generated_at: Generation timestamp shown in the header.
    """
    base_path: str
    days: int = 7
    client_name: str = ""
    company_name: str = ""
    tree_view: bool = False
    dark_mode: bool = False
    generated_at: datetime = field(default_factory=datetime.now)
