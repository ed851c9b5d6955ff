from __future__ import annotations

"""
Name Exclusion Filters.

Regex rules matched against single directory or file names (never full
paths) while the audited tree is walked. A matching directory is pruned
together with everything below it.
"""

import logging
import re
from typing import Iterable, List

from fileaudit.domain.constants import default_exclude_patterns

logger = logging.getLogger(__name__)

__all__ = ["compile_patterns", "default_exclude_patterns", "matches_any"]

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile the exclusion rules, dropping the ones that are not valid regex.

    Args:
        patterns: Regex strings as entered by the user.

    Returns:
        List[re.Pattern]: The usable rules, in input order.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Ignoring invalid exclude pattern '{p}': {e}")
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """True if at least one rule matches somewhere in name."""
    return any(rx.search(name) for rx in compiled_patterns)
