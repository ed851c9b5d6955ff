from __future__ import annotations

"""
Unit tests for the Audit Tree Builder.

Verifies placement of records by relative depth, conservation of records,
insertion ordering and isolation of malformed records.
"""

import os

from fileaudit.core.analysis.tree_builder import build_tree
from fileaudit.domain.audit_models import FileRecord, TreeNode


def _all_files(node: TreeNode):
    out = list(node.files)
    for child in node.children.values():
        out.extend(_all_files(child))
    return out


def test_nested_record_is_placed_under_its_parent_folder(base_path, record_factory):
    record = record_factory("a", "b", "c.txt")
    root = build_tree(base_path, [record])

    assert root.files == []
    assert list(root.children) == ["a"]
    a = root.children["a"]
    assert a.files == []
    assert list(a.children) == ["b"]
    assert a.children["b"].files == [record]
    assert a.children["b"].children == {}


def test_direct_record_goes_to_root(base_path, record_factory):
    record = record_factory("x.txt")
    root = build_tree(base_path, [record])

    assert root.files == [record]
    assert root.children == {}


def test_every_record_lands_in_exactly_one_node(base_path, sample_records):
    root = build_tree(base_path, sample_records)

    placed = _all_files(root)
    assert len(placed) == len(sample_records)
    assert sorted(r.full_path for r in placed) == sorted(r.full_path for r in sample_records)
    assert root.file_count() == len(sample_records)


def test_insertion_order_is_preserved(base_path, record_factory):
    records = [
        record_factory("z", "1.txt"),
        record_factory("a", "2.txt"),
        record_factory("z", "0.txt"),
    ]
    root = build_tree(base_path, records)

    # Folders in first-seen order, files in scan order (no sorting)
    assert list(root.children) == ["z", "a"]
    assert [r.name for r in root.children["z"].files] == ["1.txt", "0.txt"]


def test_trailing_separator_on_base_is_ignored(base_path, record_factory):
    record = record_factory("a", "f.txt")
    root = build_tree(base_path + os.sep, [record])

    assert root.children["a"].files == [record]


def test_malformed_records_are_skipped_without_affecting_others(base_path, record_factory):
    good = record_factory("a", "ok.txt")
    records = [
        FileRecord(name="empty", full_path=""),
        record_factory("outside.txt", base=os.sep + "elsewhere"),
        good,
        # Sibling directory sharing the base prefix is not under the base
        FileRecord(name="x.txt", full_path=base_path + "2" + os.sep + "x.txt"),
        FileRecord(name="base", full_path=base_path),
    ]
    root = build_tree(base_path, records)

    assert root.file_count() == 1
    assert root.children["a"].files == [good]
    assert root.files == []


def test_folder_named_like_internal_key_is_an_ordinary_child(base_path, record_factory):
    record = record_factory("_files", "f.txt")
    root = build_tree(base_path, [record])

    assert root.files == []
    assert root.children["_files"].files == [record]


def test_doubled_separators_do_not_create_empty_folders(base_path):
    full_path = base_path + os.sep + "a" + os.sep + os.sep + "f.txt"
    record = FileRecord(name="f.txt", full_path=full_path)
    root = build_tree(base_path, [record])

    assert list(root.children) == ["a"]
    assert root.children["a"].files == [record]


def test_windows_style_paths_accept_both_separators():
    base = "C:\\Data"
    records = [
        FileRecord(name="a.txt", full_path="C:\\Data\\docs\\a.txt"),
        FileRecord(name="b.txt", full_path="C:\\Data/docs/b.txt"),
    ]
    root = build_tree(base, records, sep="\\")

    assert [r.name for r in root.children["docs"].files] == ["a.txt", "b.txt"]


def test_folder_count(base_path, sample_records):
    root = build_tree(base_path, sample_records)
    # a, a/b, z
    assert root.folder_count() == 3
