from __future__ import annotations

"""
HTML Encoding Primitives.

Provides the two escaping functions used to embed untrusted filesystem
metadata (names, owners, paths) into the report: one for text nodes and one
for double-quoted attributes. Both are total: any input is coerced to text
and no input raises.
"""

from typing import Any, List, Tuple

# -----------------------------------------------------------------------------
# REPLACEMENT TABLES
# -----------------------------------------------------------------------------

# Order matters: '&' must be replaced before any entity is introduced.
_CONTENT_REPLACEMENTS: List[Tuple[str, str]] = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]

_ATTRIBUTE_REPLACEMENTS: List[Tuple[str, str]] = [
    ("\r", "&#13;"),
    ("\n", "&#10;"),
    ("\t", "&#9;"),
]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def encode_content(text: Any) -> str:
    """
    Escape text for safe placement inside an HTML element body.

    Args:
        text: Value to encode. None yields an empty string, other
              non-string values are coerced with str().

    Returns:
        str: Text with &, <, >, " and ' replaced by entities.
    """
    value = _coerce_text(text)
    for raw, entity in _CONTENT_REPLACEMENTS:
        value = value.replace(raw, entity)
    return value


def encode_attribute(text: Any) -> str:
    """
    Escape text for safe placement inside a double-quoted HTML attribute.

    Applies content encoding first, then replaces carriage return, line feed
    and tab with numeric character references.

    Args:
        text: Value to encode.

    Returns:
        str: Attribute-safe text without literal CR, LF or TAB.
    """
    value = encode_content(text)
    for raw, entity in _ATTRIBUTE_REPLACEMENTS:
        value = value.replace(raw, entity)
    return value

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _coerce_text(value: Any) -> str:
    """Best-effort conversion of arbitrary input to UTF-8 encodable str."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if not isinstance(value, str):
        try:
            value = str(value)
        except Exception:
            return ""
    return _scrub_surrogates(value)


def _scrub_surrogates(value: str) -> str:
    """
    Replace lone surrogates with U+FFFD.

    os.walk hands back undecodable filename bytes as surrogate escapes
    (b'\\xff' -> '\\udcff'), which cannot be written as UTF-8.
    """
    try:
        value.encode("utf-8")
        return value
    except UnicodeEncodeError:
        pass
    try:
        return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    except UnicodeEncodeError:
        # Surrogates outside the escape range
        return "".join("\ufffd" if "\ud800" <= ch <= "\udfff" else ch for ch in value)
