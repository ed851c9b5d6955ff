from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and file records.
"""

import os
import sys
from datetime import datetime
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fileaudit.domain.audit_models import FileRecord  # noqa: E402

BASE = os.sep + os.path.join("srv", "share")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'fileaudit.domain.config'.
    """
    return {
        "input_path": "/tmp/test_input",
        "output_path": "/tmp/test_output/report.html",
        "days": 7,
        "exclude_patterns": [],
        "client_name": "Acme",
        "company_name": "Audit Co",
        "tree_view": True,
        "dark_mode": False,
        "open_report": False,
    }


def make_record(*parts: str, base: str = BASE, **kwargs: Any) -> FileRecord:
    """Build a FileRecord located at base/<parts...>."""
    full_path = os.path.join(base, *parts)
    values: Dict[str, Any] = {
        "name": parts[-1],
        "full_path": full_path,
        "size_kb": 1.5,
        "created_time": datetime(2024, 5, 1, 9, 30, 0),
        "modified_time": datetime(2024, 5, 2, 17, 45, 12),
        "owner": "alice",
    }
    values.update(kwargs)
    return FileRecord(**values)


@pytest.fixture
def base_path() -> str:
    return BASE


@pytest.fixture
def record_factory():
    """Expose make_record to tests without importing conftest."""
    return make_record


@pytest.fixture
def sample_records() -> List[FileRecord]:
    """
    Records forming the tree:

    /srv/share
      x.txt
      a/
        b/
          c.txt
        d.txt
      z/
        e.txt
    """
    return [
        make_record("x.txt"),
        make_record("a", "b", "c.txt"),
        make_record("z", "e.txt"),
        make_record("a", "d.txt"),
    ]
