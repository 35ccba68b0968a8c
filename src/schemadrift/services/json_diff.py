# src/schemadrift/services/json_diff.py

from __future__ import annotations

import logging
from typing import Any, List

from opentelemetry import trace

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.utils.json_utils import canonical_json, join_path, json_kind

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

ROOT_PATH = "<root>"


def _diff_values(old: Any, new: Any, path: str, key: str, changes: List[Change]) -> None:
    """
    Compare two values that both exist at ``path``.

    Objects recurse, arrays are compared whole, primitives by value.
    """
    old_kind = _comparison_kind(old)
    new_kind = _comparison_kind(new)

    if old_kind != new_kind:
        changes.append(
            Change(
                path=path,
                kind=ChangeKind.MODIFIED,
                severity=Severity.WARNING,
                before=old,
                after=new,
                description=f'Type of "{key}" changed from "{old_kind}" to "{new_kind}"',
            )
        )
        return

    if isinstance(old, dict) and isinstance(new, dict):
        _diff_objects(old, new, path, changes)
        return

    # No element-wise diff: any content change is one modification.
    if old_kind == "array":
        if canonical_json(old) != canonical_json(new):
            changes.append(
                Change(
                    path=path,
                    kind=ChangeKind.MODIFIED,
                    severity=Severity.INFO,
                    before=old,
                    after=new,
                    description=f'Array "{key}" contents changed',
                )
            )
        return

    if old != new:
        changes.append(
            Change(
                path=path,
                kind=ChangeKind.MODIFIED,
                severity=Severity.INFO,
                before=old,
                after=new,
                description=f'Value of "{key}" changed from "{_display(old)}" to "{_display(new)}"',
            )
        )


def _comparison_kind(value: Any) -> str:
    # null shares the object kind; null vs {} is then a value change.
    if value is None:
        return "object"
    return json_kind(value)


def _diff_objects(old: dict, new: dict, path: str, changes: List[Change]) -> None:
    for key in sorted(set(old) | set(new)):
        current = join_path(path, str(key))

        if key not in new:
            changes.append(
                Change(
                    path=current,
                    kind=ChangeKind.REMOVED,
                    severity=Severity.CRITICAL,
                    before=old[key],
                    description=f'Key "{key}" removed (breaking change)',
                )
            )
            logger.info("Detected removed key: %s", current)
            continue

        if key not in old:
            changes.append(
                Change(
                    path=current,
                    kind=ChangeKind.ADDED,
                    severity=Severity.INFO,
                    after=new[key],
                    description=f'New key "{key}" added',
                )
            )
            logger.debug("Detected added key: %s", current)
            continue

        _diff_values(old[key], new[key], current, str(key), changes)


def _display(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def diff_json(old: Any, new: Any) -> List[Change]:
    """
    Structural diff of two arbitrary JSON values, without API semantics.

    Removed keys are breaking, added keys informational, kind changes a
    warning, and value or array content changes informational. Two
    non-object roots are compared as one value at ``<root>``.
    """
    with tracer.start_as_current_span("service.diff_json") as span:
        span.set_attribute("old.type", json_kind(old))
        span.set_attribute("new.type", json_kind(new))
        changes: List[Change] = []
        if isinstance(old, dict) and isinstance(new, dict):
            _diff_objects(old, new, "", changes)
        else:
            _diff_values(old, new, ROOT_PATH, ROOT_PATH, changes)
        span.set_attribute("diff.changes_count", len(changes))
        logger.debug("Computed JSON diffs: count=%d", len(changes))
        return changes
