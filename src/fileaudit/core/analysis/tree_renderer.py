from __future__ import annotations

"""
Audit Tree Renderer.

Converts the folder hierarchy into nested HTML lists. Folders become
collapsible items, files become interactive links carrying their metadata
in attribute-encoded data-* values for the client-side detail modal.
"""

import logging
from datetime import datetime
from typing import Any, List

from fileaudit.core.processing.encoder import encode_attribute, encode_content
from fileaudit.domain.audit_models import FileRecord, TreeNode

logger = logging.getLogger(__name__)

ROOT_LABEL = "(Root)"
UNKNOWN_TIMESTAMP = "Unknown"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: TreeNode, root_label: str = ROOT_LABEL) -> str:
    """
    Render the complete tree as an HTML fragment.

    Files located directly in the base path are grouped under a synthetic,
    initially expanded folder. Top-level folders follow it, collapsed.

    Args:
        root: Root node produced by the tree builder.
        root_label: Label of the synthetic folder holding root files.

    Returns:
        str: A <ul class="tree"> fragment.
    """
    lines: List[str] = ['<ul class="tree">']

    if root.files:
        lines.extend(_render_folder(root_label, TreeNode(files=root.files), expanded=True))

    for name in sorted(root.children):
        lines.extend(_render_folder(name, root.children[name], expanded=False))

    lines.append("</ul>")
    return "\n".join(lines)


def format_timestamp(value: Any) -> str:
    """Format a timestamp as 'yyyy-MM-dd HH:mm:ss' or 'Unknown' when absent."""
    if value is None or value == "":
        return UNKNOWN_TIMESTAMP
    if isinstance(value, datetime):
        return value.strftime(TIMESTAMP_FORMAT)
    return str(value)


def format_size_kb(value: Any) -> str:
    """
    Format a size in KB as plain numeric text with at most two decimals.

    Absent or non-numeric values yield '0'.
    """
    try:
        number = round(float(value), 2)
    except (TypeError, ValueError):
        return "0"
    if number != number or number < 0:
        return "0"
    text = f"{number:.2f}".rstrip("0").rstrip(".")
    return text or "0"

# -----------------------------------------------------------------------------
# INTERNAL RENDERING
# -----------------------------------------------------------------------------

def _render_folder(name: str, node: TreeNode, expanded: bool) -> List[str]:
    """Render one folder item, recursing depth-first into its children."""
    css_class = "folder expanded" if expanded else "folder"
    lines: List[str] = [
        f'<li class="{css_class}">',
        f'<span class="folder-label">{encode_content(name)}</span>',
    ]

    if node.files:
        lines.append('<ul class="file-list">')
        for record in node.files:
            lines.append(_render_file_safe(record))
        lines.append("</ul>")

    if node.children:
        lines.append('<ul class="folder-list">')
        for child_name in sorted(node.children):
            lines.extend(_render_folder(child_name, node.children[child_name], expanded=False))
        lines.append("</ul>")

    lines.append("</li>")
    return lines


def _render_file_safe(record: FileRecord) -> str:
    """Render a file item; a failing record degrades to plain coercions."""
    try:
        return _render_file(record)
    except Exception as e:
        logger.warning(f"Falling back to plain rendering for record {record!r}: {e}")
        return _render_file_fallback(record)


def _render_file(record: FileRecord) -> str:
    size_text = format_size_kb(record.size_kb)
    attrs = " ".join([
        f'data-name="{encode_attribute(record.name)}"',
        f'data-path="{encode_attribute(record.full_path)}"',
        f'data-owner="{encode_attribute(record.owner)}"',
        f'data-created="{encode_attribute(format_timestamp(record.created_time))}"',
        f'data-modified="{encode_attribute(format_timestamp(record.modified_time))}"',
        f'data-size="{encode_attribute(size_text)}"',
    ])
    return (
        f'<li class="file"><a href="#" class="file-link" {attrs}>'
        f"{encode_content(record.name)}</a>"
        f'<span class="file-size"> ({encode_content(size_text)} KB)</span></li>'
    )


def _render_file_fallback(record: Any) -> str:
    name = getattr(record, "name", "")
    values = {
        "name": name,
        "path": getattr(record, "full_path", ""),
        "owner": getattr(record, "owner", ""),
        "created": UNKNOWN_TIMESTAMP,
        "modified": UNKNOWN_TIMESTAMP,
        "size": "0",
    }
    attrs = " ".join(f'data-{k}="{encode_attribute(v)}"' for k, v in values.items())
    return (
        f'<li class="file"><a href="#" class="file-link" {attrs}>'
        f"{encode_content(name)}</a>"
        f'<span class="file-size"> (0 KB)</span></li>'
    )
