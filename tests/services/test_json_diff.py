# tests/services/test_json_diff.py

from typing import List

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.services.json_diff import diff_json


def _paths_and_kinds(changes: List[Change]):
    """Utility for assertions: return a set of (path, kind)."""
    return {(c.path, c.kind) for c in changes}


def test_diff_json_no_changes():
    doc = {"a": 1, "b": [1, 2, 3], "c": {"d": None}}
    assert diff_json(doc, {"a": 1, "b": [1, 2, 3], "c": {"d": None}}) == []


def test_diff_json_added_and_removed_and_modified():
    old = {
        "a": 1,
        "b": 2,
        "nested": {"x": 10, "y": 20},
    }
    new = {
        "a": 2,  # modified
        "c": 3,  # added
        "nested": {"x": 10},  # y removed
    }

    changes = diff_json(old, new)
    pts = _paths_and_kinds(changes)

    assert pts == {
        ("a", ChangeKind.MODIFIED),
        ("b", ChangeKind.REMOVED),
        ("c", ChangeKind.ADDED),
        ("nested.y", ChangeKind.REMOVED),
    }
    severities = {c.path: c.severity for c in changes}
    assert severities["a"] is Severity.INFO
    assert severities["b"] is Severity.CRITICAL
    assert severities["c"] is Severity.INFO
    assert severities["nested.y"] is Severity.CRITICAL


def test_diff_json_output_is_sorted_by_key():
    old = {"z": 1, "a": 1, "m": 1}
    new = {"m": 2, "z": 2, "a": 2}
    assert [c.path for c in diff_json(old, new)] == ["a", "m", "z"]


def test_diff_json_kind_change_is_warning():
    changes = diff_json({"value": {"nested": 1}}, {"value": "1"})
    assert len(changes) == 1
    change = changes[0]
    assert change.path == "value"
    assert change.kind is ChangeKind.MODIFIED
    assert change.severity is Severity.WARNING
    assert change.before == {"nested": 1}
    assert change.after == "1"


def test_diff_json_bool_and_number_are_different_kinds():
    changes = diff_json({"flag": 1}, {"flag": True})
    assert [(c.path, c.severity) for c in changes] == [("flag", Severity.WARNING)]


def test_diff_json_null_to_object_is_a_value_change():
    changes = diff_json({"v": None}, {"v": {}})
    assert [(c.path, c.kind, c.severity) for c in changes] == [
        ("v", ChangeKind.MODIFIED, Severity.INFO)
    ]
    assert changes[0].description == 'Value of "v" changed from "null" to "{}"'


def test_diff_json_null_to_array_or_string_is_a_kind_change():
    changes = diff_json({"a": None, "b": None}, {"a": [], "b": "x"})
    assert [(c.path, c.severity) for c in changes] == [
        ("a", Severity.WARNING),
        ("b", Severity.WARNING),
    ]
    assert 'from "object" to "array"' in changes[0].description


def test_diff_json_null_to_null_is_unchanged():
    assert diff_json({"v": None}, {"v": None}) == []


def test_diff_json_array_growth_is_one_change():
    changes = diff_json({"a": 1, "b": [1, 2, 3]}, {"a": 1, "b": [1, 2, 3, 4]})
    assert len(changes) == 1
    change = changes[0]
    assert change.path == "b"
    assert change.kind is ChangeKind.MODIFIED
    assert change.severity is Severity.INFO
    assert change.before == [1, 2, 3]
    assert change.after == [1, 2, 3, 4]


def test_diff_json_array_reorder_counts_as_change():
    changes = diff_json({"tags": ["a", "b"]}, {"tags": ["b", "a"]})
    assert [c.path for c in changes] == ["tags"]


def test_diff_json_array_element_key_order_is_not_a_change():
    old = {"items": [{"id": 1, "name": "x"}]}
    new = {"items": [{"name": "x", "id": 1}]}
    assert diff_json(old, new) == []


def test_diff_json_primitive_description():
    changes = diff_json({"name": "a"}, {"name": "b"})
    assert changes[0].description == 'Value of "name" changed from "a" to "b"'


def test_diff_json_non_object_roots_compare_as_one_value():
    changes = diff_json([1, 2], [1, 2, 3])
    assert len(changes) == 1
    assert changes[0].path == "<root>"
    assert changes[0].severity is Severity.INFO

    changes = diff_json(None, {"a": 1})
    assert changes[0].path == "<root>"
    assert changes[0].severity is Severity.INFO

    changes = diff_json(None, [1])
    assert changes[0].severity is Severity.WARNING

    assert diff_json("same", "same") == []


def test_diff_json_does_not_mutate_inputs():
    old = {"a": {"b": [1, 2]}}
    new = {"a": {"b": [2, 1]}, "c": 1}
    snapshot = (repr(old), repr(new))
    diff_json(old, new)
    assert (repr(old), repr(new)) == snapshot
