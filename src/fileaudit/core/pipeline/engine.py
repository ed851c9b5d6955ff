from __future__ import annotations

"""
Core audit orchestration pipeline.

This module coordinates the entire audit workflow:
1. Validates configuration and the audited path.
2. Resolves the report destination.
3. Scans the directory for recently changed files.
4. Builds the folder tree and renders the report document.
5. Persists the document atomically.
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from fileaudit.core.pipeline.stages.validator import validate_config
from fileaudit.core.report.document import render_report
from fileaudit.core.services.scanner import scan_recent_files, summarize_records
from fileaudit.domain.audit_models import ReportOptions
from fileaudit.domain.pipeline_models import (
    AuditResult,
    create_error_result,
    create_success_result,
)
from fileaudit.infra.fs import normalize_path, resolve_output_path, write_text_atomic

logger = logging.getLogger(__name__)


def run_audit(
        config: Optional[Dict[str, Any]],
        *,
        now: Optional[datetime] = None,
) -> AuditResult:
    """
    Execute the full audit pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        now: Reference time for the recency window and report timestamp.

    Returns:
        AuditResult: Object containing status, metrics, and summary.
    """
    logger.info("Audit execution started.")
    started = now or datetime.now()

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg.get("input_path", ""), os.getcwd())

    if not os.path.isdir(base_path):
        msg = f"Invalid input directory: {base_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, base_path)

    output_path = resolve_output_path(cfg["output_path"], cfg["client_name"], started)

    # -------------------------------------------------------------------------
    # 2) Scan
    # -------------------------------------------------------------------------
    records = list(scan_recent_files(
        base_path,
        cfg["days"],
        now=started,
        exclude_patterns=cfg["exclude_patterns"],
    ))
    stats = summarize_records(records)
    logger.info(f"Found {stats['files']} file(s) changed in the last {cfg['days']} day(s).")

    # -------------------------------------------------------------------------
    # 3) Tree & Document
    # -------------------------------------------------------------------------
    options = ReportOptions(
        base_path=base_path,
        days=cfg["days"],
        client_name=cfg["client_name"],
        company_name=cfg["company_name"],
        tree_view=cfg["tree_view"],
        dark_mode=cfg["dark_mode"],
        generated_at=started,
    )
    html, root = render_report(options, records)
    placed = root.file_count()

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    try:
        write_text_atomic(output_path, html)
    except OSError as e:
        msg = f"Failed to write report to '{output_path}': {e}"
        logger.critical(msg)
        return create_error_result(msg, cfg, base_path, output_path)

    logger.info(f"Report written to: {output_path}")

    summary = {
        "scanned": stats["files"],
        "reported": placed,
        "skipped": stats["files"] - placed,
        "folders": root.folder_count(),
        "generated_at": started.strftime("%Y-%m-%d %H:%M:%S"),
    }
    return create_success_result(
        cfg,
        base_path,
        output_path,
        file_count=placed,
        total_size_kb=root.total_size_kb(),
        summary_extra=summary,
    )
