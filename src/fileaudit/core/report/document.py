from __future__ import annotations

"""
Report Document Assembler.

Produces the single self-contained HTML report: header, summary cards,
the interactive tree (or a placeholder when the tree view is disabled)
and the inline style and behavior. The Jinja2 environment runs with
autoescaping disabled because every dynamic value is pre-encoded with
the project's own encoder before it reaches the template.
"""

import logging
import os
from typing import Iterable, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from fileaudit.core.analysis.tree_builder import build_tree
from fileaudit.core.analysis.tree_renderer import (
    TIMESTAMP_FORMAT,
    format_size_kb,
    render_tree,
)
from fileaudit.core.processing.encoder import encode_content
from fileaudit.domain.audit_models import FileRecord, ReportOptions, TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TEMPLATE ENVIRONMENT
# -----------------------------------------------------------------------------

REPORT_TITLE = "File Audit Report"
TEMPLATE_NAME = "report.html.j2"
TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

_env: Optional[Environment] = None


def get_environment() -> Environment:
    """Lazily create the shared template environment."""
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
    return _env

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_document(
        options: ReportOptions,
        root: Optional[TreeNode] = None,
        total_size_kb: float = 0.0,
) -> str:
    """
    Assemble the final HTML document.

    The tree renderer is only invoked when options.tree_view is set.
    Otherwise no per-file element or metadata is written at all.

    Args:
        options: Display options and header values.
        root: Built tree, may be None when there is nothing to show.
        total_size_kb: Aggregate size of the audited records.

    Returns:
        str: The complete HTML document.
    """
    file_count = root.file_count() if root is not None else 0

    tree_html = ""
    if options.tree_view and root is not None and file_count:
        tree_html = render_tree(root)

    template = get_environment().get_template(TEMPLATE_NAME)
    return template.render(
        title=encode_content(REPORT_TITLE),
        client_name=encode_content(options.client_name),
        company_name=encode_content(options.company_name),
        base_path=encode_content(options.base_path),
        days=encode_content(options.days),
        generated_at=encode_content(options.generated_at.strftime(TIMESTAMP_FORMAT)),
        file_count=file_count,
        total_size_kb=encode_content(format_size_kb(total_size_kb)),
        tree_view=options.tree_view,
        dark_mode=options.dark_mode,
        tree_html=tree_html,
    )


def render_report(options: ReportOptions, records: Iterable[FileRecord]) -> Tuple[str, TreeNode]:
    """
    Build the tree for the given records and render the document.

    Args:
        options: Display options (options.base_path anchors the tree).
        records: Scanned file records.

    Returns:
        Tuple[str, TreeNode]: (HTML document, built tree).
    """
    record_list: List[FileRecord] = list(records)
    root = build_tree(options.base_path, record_list)

    placed = root.file_count()
    if placed != len(record_list):
        logger.debug(f"{len(record_list) - placed} record(s) could not be placed in the tree.")

    html = render_document(options, root, root.total_size_kb())
    logger.debug(f"Report rendered: {placed} file(s), {len(html)} characters.")
    return html, root

