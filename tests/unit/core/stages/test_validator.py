from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default injection for missing keys.
2. Lenient coercion (strings/numbers to bool, CSV to list, str to int).
3. Strict mode exceptions.
"""

import pytest

from fileaudit.core.pipeline.stages.validator import validate_config
from fileaudit.domain.config import DEFAULT_DAYS


def test_validate_complete_config_has_no_warnings(mock_config_dict):
    cfg, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert cfg["days"] == 7
    assert cfg["tree_view"] is True
    assert cfg["client_name"] == "Acme"


def test_validate_non_dict_returns_defaults():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg["days"] == DEFAULT_DAYS
    assert warnings and "Invalid config type" in warnings[0]


def test_validate_non_dict_strict_raises():
    with pytest.raises(TypeError):
        validate_config("bad", strict=True)


def test_missing_keys_are_filled():
    cfg, _ = validate_config({"client_name": "Acme"})

    assert cfg["tree_view"] is False
    assert cfg["dark_mode"] is False
    assert cfg["days"] == DEFAULT_DAYS
    assert cfg["output_path"] == ""


@pytest.mark.parametrize("raw, expected", [("yes", True), ("off", False), (1, True), (0, False)])
def test_bool_coercion(mock_config_dict, raw, expected):
    mock_config_dict["dark_mode"] = raw
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg["dark_mode"] is expected
    assert any("dark_mode" in w for w in warnings)


def test_invalid_bool_falls_back(mock_config_dict):
    mock_config_dict["tree_view"] = "maybe"
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg["tree_view"] is False
    assert any("expected bool" in w for w in warnings)


@pytest.mark.parametrize("raw, expected", [("30", 30), (14.0, 14), (0, DEFAULT_DAYS),
                                           (-3, DEFAULT_DAYS), ("soon", DEFAULT_DAYS),
                                           (True, DEFAULT_DAYS)])
def test_days_coercion(mock_config_dict, raw, expected):
    mock_config_dict["days"] = raw
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg["days"] == expected
    assert warnings


def test_days_strict_rejects_non_positive(mock_config_dict):
    mock_config_dict["days"] = 0
    with pytest.raises(ValueError):
        validate_config(mock_config_dict, strict=True)


def test_days_strict_rejects_strings(mock_config_dict):
    mock_config_dict["days"] = "30"
    with pytest.raises(TypeError):
        validate_config(mock_config_dict, strict=True)


def test_exclude_patterns_csv(mock_config_dict):
    mock_config_dict["exclude_patterns"] = r"^tmp$, \.bak$"
    cfg, _ = validate_config(mock_config_dict)

    assert cfg["exclude_patterns"] == [r"^tmp$", r"\.bak$"]


def test_exclude_patterns_drop_non_strings(mock_config_dict):
    mock_config_dict["exclude_patterns"] = ["^a$", 3, "  "]
    cfg, warnings = validate_config(mock_config_dict)

    assert cfg["exclude_patterns"] == ["^a$"]
    assert any("Item discarded" in w for w in warnings)


def test_empty_strings_fall_back_to_defaults(mock_config_dict):
    mock_config_dict["client_name"] = "   "
    cfg, _ = validate_config(mock_config_dict)

    assert cfg["client_name"] == ""


def test_wrong_string_type_strict_raises(mock_config_dict):
    mock_config_dict["company_name"] = 42
    with pytest.raises(TypeError):
        validate_config(mock_config_dict, strict=True)
