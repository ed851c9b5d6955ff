from __future__ import annotations

"""
Smoke tests for imports and the public contract of the entry points.
"""

import importlib

import pytest

MODULES = [
    "fileaudit.main",
    "fileaudit.interface.cli.app",
    "fileaudit.interface.cli.args",
    "fileaudit.core.pipeline.engine",
    "fileaudit.core.pipeline.stages.validator",
    "fileaudit.core.pipeline.components.filters",
    "fileaudit.core.processing.encoder",
    "fileaudit.core.analysis.tree_builder",
    "fileaudit.core.analysis.tree_renderer",
    "fileaudit.core.report.document",
    "fileaudit.core.services.scanner",
    "fileaudit.domain.audit_models",
    "fileaudit.domain.pipeline_models",
    "fileaudit.domain.config",
    "fileaudit.domain.constants",
    "fileaudit.infra.fs",
    "fileaudit.infra.logging",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_importable(name):
    assert importlib.import_module(name) is not None


def test_entry_point_contract():
    main_mod = importlib.import_module("fileaudit.main")
    app = importlib.import_module("fileaudit.interface.cli.app")

    assert callable(main_mod.main)
    assert callable(main_mod.global_exception_handler)
    assert callable(app.main)
    assert app.EXIT_OK == 0
    assert app.EXIT_INVALID_INPUT == 2


def test_report_templates_are_packaged():
    document = importlib.import_module("fileaudit.core.report.document")
    env = document.get_environment()

    for name in (document.TEMPLATE_NAME, "report.css", "report.js"):
        assert env.get_template(name) is not None
