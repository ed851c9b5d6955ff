from __future__ import annotations

"""
Unit tests for the Report Document Assembler.

Verifies the self-contained structure of the report, the dark-mode root
class, header encoding and the tree-view switch.
"""

import re
from datetime import datetime

import pytest

from fileaudit.core.report import document
from fileaudit.core.report.document import render_document, render_report
from fileaudit.domain.audit_models import ReportOptions


@pytest.fixture
def options(base_path) -> ReportOptions:
    return ReportOptions(
        base_path=base_path,
        days=14,
        client_name="Acme & Sons",
        company_name="<Audit Co>",
        tree_view=True,
        dark_mode=False,
        generated_at=datetime(2024, 5, 3, 8, 0, 0),
    )


def test_document_is_self_contained(options, sample_records):
    html, _ = render_report(options, sample_records)

    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert "<style>" in html
    assert html.count("<script>") == 1
    assert not re.search(r"<script[^>]+src=", html)
    assert not re.search(r"<link[^>]+href=", html)


def test_header_values_are_content_encoded(options, sample_records):
    html, _ = render_report(options, sample_records)

    assert "Acme &amp; Sons" in html
    assert "&lt;Audit Co&gt;" in html
    assert "<Audit Co>" not in html
    assert "Last 14 day(s)" in html
    assert "2024-05-03 08:00:00" in html


def test_empty_names_omit_header_lines(options, sample_records):
    opts = ReportOptions(base_path=options.base_path, tree_view=True)
    html, _ = render_report(opts, sample_records)

    assert "Client:" not in html
    assert "Prepared by:" not in html


def test_dark_mode_class_only_when_requested(options, sample_records):
    light, _ = render_report(options, sample_records)
    dark_opts = ReportOptions(base_path=options.base_path, tree_view=True, dark_mode=True)
    dark, _ = render_report(dark_opts, sample_records)

    assert '<html lang="en">' in light
    assert '<html lang="en" class="dark-mode">' in dark


def test_tree_view_renders_every_file(options, sample_records):
    html, root = render_report(options, sample_records)

    assert root.file_count() == len(sample_records)
    assert html.count('class="file-link"') == len(sample_records)
    assert '<ul class="tree">' in html


def test_disabled_tree_view_emits_no_file_data(options, sample_records, monkeypatch):
    calls = []
    monkeypatch.setattr(document, "render_tree", lambda root: calls.append(root) or "")
    opts = ReportOptions(base_path=options.base_path, tree_view=False)

    html, _ = render_report(opts, sample_records)

    assert calls == []
    assert 'class="file-link"' not in html
    assert '<ul class="tree">' not in html
    for record in sample_records:
        assert record.full_path not in html
        assert f'"{record.name}"' not in html
    assert "Tree view is disabled" in html


def test_summary_counts_files_and_size(options, sample_records):
    html, _ = render_report(options, sample_records)

    # 4 records of 1.5 KB each
    assert re.search(r'Files created or modified</span><span class="summary-value">4<', html)
    assert "6 KB" in html


def test_empty_tree_shows_message(options):
    html = render_document(options, None)

    assert "No files were created or modified" in html
    assert 'class="file-link"' not in html


def test_hostile_file_name_does_not_inject_script(options, record_factory):
    record = record_factory("evil.txt", name='"><script>alert(1)</script>')
    html, _ = render_report(options, [record])

    assert "alert(1)</script>" not in html
    assert html.count("<script>") == 1
    assert "&quot;&gt;&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_client_script_wires_interactions(options, sample_records):
    html, _ = render_report(options, sample_records)

    assert "escapeHtml" in html
    assert "preventDefault" in html
    assert 'classList.toggle("dark-mode")' in html
    assert 'classList.toggle("expanded")' in html
    assert '"Escape"' in html
    assert 'id="modal-overlay"' in html
    assert 'id="modal-close"' in html
