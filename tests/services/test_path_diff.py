# tests/services/test_path_diff.py

from schemadrift.models.change import ChangeKind, Severity
from schemadrift.services.path_diff import diff_paths


def test_endpoint_added_is_info():
    changes = diff_paths({}, {"/pets": {"get": {}}})
    assert [(c.path, c.kind, c.severity) for c in changes] == [
        ("paths./pets", ChangeKind.ADDED, Severity.INFO)
    ]
    assert changes[0].after == {"get": {}}


def test_endpoint_removed_is_critical():
    changes = diff_paths({"/pets": {"get": {}}}, {})
    assert [(c.path, c.kind, c.severity) for c in changes] == [
        ("paths./pets", ChangeKind.REMOVED, Severity.CRITICAL)
    ]
    assert "breaking" in changes[0].description


def test_method_removed_is_critical():
    old = {"/pets": {"get": {}, "post": {"summary": "create"}}}
    new = {"/pets": {"get": {}}}
    changes = diff_paths(old, new)
    assert len(changes) == 1
    assert changes[0].path == "paths./pets.POST"
    assert changes[0].kind is ChangeKind.REMOVED
    assert changes[0].severity is Severity.CRITICAL
    assert changes[0].before == {"summary": "create"}


def test_method_added_is_info():
    changes = diff_paths({"/pets": {"get": {}}}, {"/pets": {"get": {}, "delete": {}}})
    assert [(c.path, c.kind, c.severity) for c in changes] == [
        ("paths./pets.DELETE", ChangeKind.ADDED, Severity.INFO)
    ]


def test_methods_follow_fixed_order():
    old = {"/pets": {}}
    new = {"/pets": {"options": {}, "delete": {}, "get": {}, "patch": {}}}
    assert [c.path for c in diff_paths(old, new)] == [
        "paths./pets.GET",
        "paths./pets.PATCH",
        "paths./pets.DELETE",
        "paths./pets.OPTIONS",
    ]


def test_paths_are_sorted():
    new = {"/b": {}, "/a": {}, "/c": {}}
    assert [c.path for c in diff_paths({}, new)] == ["paths./a", "paths./b", "paths./c"]


def test_non_method_keys_are_ignored():
    old = {"/pets": {"parameters": [{"name": "x", "in": "query"}], "get": {}}}
    new = {"/pets": {"summary": "Pets", "get": {}}}
    assert diff_paths(old, new) == []


def test_matched_methods_are_compared():
    old = {"/pets": {"get": {"parameters": [{"name": "limit", "in": "query", "schema": {"type": "integer"}}]}}}
    new = {"/pets": {"get": {"parameters": [{"name": "limit", "in": "query", "schema": {"type": "string"}}]}}}
    assert [c.path for c in diff_paths(old, new)] == ["paths./pets.GET.parameters.limit.type"]
