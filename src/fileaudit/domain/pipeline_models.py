from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
audit outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AuditResult:
    """
    Unified result object of a complete audit run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized audited directory.
        output_path: Absolute path of the report (empty if nothing was written).
        days: Recency window used for the scan.
        tree_view: Whether the interactive tree was rendered.
        dark_mode: Whether the report starts in dark mode.
        file_count: Number of files placed in the report.
        total_size_kb: Aggregate size of the reported files.
        summary: Execution statistics.
    """
    ok: bool
    error: str

    base_path: str
    output_path: str
    days: int

    tree_view: bool
    dark_mode: bool

    file_count: int = 0
    total_size_kb: float = 0.0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        base_path: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> AuditResult:
    """
    Create a failed audit result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        base_path: The audited directory.
        output_path: Destination that could not be written, if known.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AuditResult: An immutable error result object.
    """
    return AuditResult(
        ok=False,
        error=error,
        base_path=base_path,
        output_path=output_path,
        days=cfg.get("days", 0),
        tree_view=cfg.get("tree_view", False),
        dark_mode=cfg.get("dark_mode", False),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        base_path: str,
        output_path: str,
        file_count: int,
        total_size_kb: float,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AuditResult:
    """
    Create a successful audit result instance.

    Args:
        cfg: Final configuration used during execution.
        base_path: Normalized audited directory.
        output_path: Absolute report path.
        file_count: Files placed in the report.
        total_size_kb: Aggregate size of those files.
        summary_extra: Final execution metrics.

    Returns:
        AuditResult: An immutable success result object.
    """
    return AuditResult(
        ok=True,
        error="",
        base_path=base_path,
        output_path=output_path,
        days=cfg.get("days", 0),
        tree_view=cfg.get("tree_view", False),
        dark_mode=cfg.get("dark_mode", False),
        file_count=file_count,
        total_size_kb=total_size_kb,
        summary=summary_extra or {},
    )
