from __future__ import annotations

"""
Configuration Validation Stage.

Turns the untrusted settings dictionary (CLI overrides merged over the
saved session) into the typed values the audit pipeline expects. Each
key is coerced by the rule registered for it in _SCHEMA. In lenient
mode a bad value is replaced by its default and a warning is recorded.
In strict mode it raises.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from fileaudit.domain.config import get_default_config

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "1", "yes", "y", "on")
_FALSE_WORDS = ("false", "0", "no", "n", "off")

Coercer = Callable[[Any, Any, str, List[str], bool], Any]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize an audit configuration.

    Args:
        config: Raw configuration, normally a dictionary.
        strict: Raise TypeError/ValueError instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration (every
        known key present) and the warnings produced while coercing.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        logger.warning(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = {**defaults, **config}
    for key, coerce in _SCHEMA.items():
        merged[key] = coerce(merged.get(key), defaults[key], key, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# COERCION RULES
# -----------------------------------------------------------------------------

def _reject(msg: str, fallback: Any, warnings: List[str], strict: bool, exc: type = TypeError) -> Any:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Strings are stripped; blank means 'use the default'."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        return _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.",
                       fallback, warnings, strict)
    return value.strip() or fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Accept real booleans, 0/1 and the usual yes/no words (lenient mode only)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        word = value.strip().lower() if isinstance(value, str) else None
        if word in _TRUE_WORDS or word in _FALSE_WORDS:
            result = word in _TRUE_WORDS
            warnings.append(f"Field '{field}' converted from '{value}' to {result}.")
            return result

    return _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.",
                   fallback, warnings, strict)


def _as_days(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Window length in whole days, at least 1."""
    if value is None:
        return fallback

    days = None
    if isinstance(value, int) and not isinstance(value, bool):
        days = value
    elif not strict and isinstance(value, str) and value.strip().isdigit():
        days = int(value.strip())
    elif not strict and isinstance(value, float) and value.is_integer():
        days = int(value)

    if days is None:
        return _reject(f"Invalid field '{field}': expected int, received {type(value).__name__}.",
                       fallback, warnings, strict)
    if days < 1:
        return _reject(f"Invalid field '{field}': must be a positive integer, received {days}.",
                       fallback, warnings, strict, ValueError)

    if days is not value:
        warnings.append(f"Field '{field}' converted from {value!r} to {days}.")
    return days


def _as_patterns(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """List of non-blank regex strings; a comma-separated string is split."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [part.strip() for part in value.split(",") if part.strip()]

    if not isinstance(value, list):
        return _reject(f"Invalid field '{field}': expected list[str], received {type(value).__name__}.",
                       list(fallback), warnings, strict)

    patterns: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            msg = f"Invalid item in '{field}[{i}]': expected str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
        elif item.strip():
            patterns.append(item.strip())
    return patterns


_SCHEMA: Dict[str, Coercer] = {
    "input_path": _as_str,
    "output_path": _as_str,
    "client_name": _as_str,
    "company_name": _as_str,
    "days": _as_days,
    "exclude_patterns": _as_patterns,
    "tree_view": _as_bool,
    "dark_mode": _as_bool,
    "open_report": _as_bool,
}
