# src/schemadrift/services/schema_diff.py

"""
Schema Object Comparator

Recursive diff of two OpenAPI schema nodes:
- Type changes (BREAKING)
- Property removals (BREAKING) and additions (warning when required)
- Enum changes on properties (warning)
- Existing properties that became required (warning)

Recursion only follows ``properties``. A nested schema that only has
``items`` / ``allOf`` / ``oneOf`` / ``anyOf`` is not descended into, and
``$ref`` is compared as a plain string without being resolved.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.models.openapi import SchemaNode
from schemadrift.utils.json_utils import canonical_json

logger = logging.getLogger(__name__)


def diff_schema_objects(path: str, old: Optional[Any], new: Optional[Any]) -> List[Change]:
    """
    Compare two schema nodes rooted at ``path``.

    Args:
        path: Dot-separated locator of the node, e.g. "paths./pets.POST.requestBody"
        old: Previous schema (None when absent)
        new: New schema (None when absent)

    Returns:
        List of changes in a stable order: type, then properties sorted by
        name, then newly required fields sorted by name.
    """
    old_node = SchemaNode.wrap(old)
    new_node = SchemaNode.wrap(new)

    if old_node is None and new_node is None:
        return []

    if old_node is None:
        return [
            Change(
                path=path,
                kind=ChangeKind.ADDED,
                severity=Severity.INFO,
                after=new_node.raw,
                description=f"New schema added at {path}",
            )
        ]

    if new_node is None:
        logger.info("Detected removed schema: %s", path)
        return [
            Change(
                path=path,
                kind=ChangeKind.REMOVED,
                severity=Severity.CRITICAL,
                before=old_node.raw,
                description=f"Schema removed at {path} (breaking change)",
            )
        ]

    changes: List[Change] = []

    if _types_differ(old_node.type, new_node.type):
        changes.append(
            Change(
                path=f"{path}.type",
                kind=ChangeKind.MODIFIED,
                severity=Severity.CRITICAL,
                before=old_node.type,
                after=new_node.type,
                description=(
                    f'Type changed from "{old_node.type}" to "{new_node.type}" '
                    f"at {path} (breaking change)"
                ),
            )
        )

    old_props = old_node.properties
    new_props = new_node.properties

    for name in sorted(set(old_props) | set(new_props)):
        changes.extend(
            _diff_property(path, name, old_props, new_props, new_required=new_node.required)
        )

    old_required = old_node.required
    for name in sorted(new_node.required - old_required):
        # Fields that did not exist before are reported as added properties.
        if name not in old_props:
            continue
        changes.append(
            Change(
                path=f"{path}.required.{name}",
                kind=ChangeKind.MODIFIED,
                severity=Severity.WARNING,
                before=False,
                after=True,
                description=f'Property "{name}" is now required at {path}',
            )
        )
        logger.debug("Detected newly required property: %s.%s", path, name)

    return changes


def _diff_property(
    path: str,
    name: str,
    old_props: dict,
    new_props: dict,
    *,
    new_required: set,
) -> List[Change]:
    prop_path = f"{path}.properties.{name}"

    if name not in old_props:
        is_required = name in new_required
        logger.debug("Detected added property: %s required=%s", prop_path, is_required)
        return [
            Change(
                path=prop_path,
                kind=ChangeKind.ADDED,
                severity=Severity.WARNING if is_required else Severity.INFO,
                after=new_props[name],
                description=(
                    f'New required property "{name}" added at {path}'
                    if is_required
                    else f'New optional property "{name}" added at {path}'
                ),
            )
        ]

    if name not in new_props:
        logger.info("Detected removed property: %s", prop_path)
        return [
            Change(
                path=prop_path,
                kind=ChangeKind.REMOVED,
                severity=Severity.CRITICAL,
                before=old_props[name],
                description=f'Property "{name}" removed from {path} (breaking change)',
            )
        ]

    old_prop = SchemaNode.wrap(old_props[name])
    new_prop = SchemaNode.wrap(new_props[name])
    if old_prop is None or new_prop is None:
        # A non-object property value carries no schema to compare.
        return []

    changes: List[Change] = []

    if _types_differ(old_prop.type, new_prop.type):
        changes.append(
            Change(
                path=f"{prop_path}.type",
                kind=ChangeKind.MODIFIED,
                severity=Severity.CRITICAL,
                before=old_prop.type,
                after=new_prop.type,
                description=(
                    f'Property "{name}" type changed from "{old_prop.type}" '
                    f'to "{new_prop.type}" (breaking change)'
                ),
            )
        )

    if old_prop.enum is not None or new_prop.enum is not None:
        if canonical_json(old_prop.enum or []) != canonical_json(new_prop.enum or []):
            changes.append(
                Change(
                    path=f"{prop_path}.enum",
                    kind=ChangeKind.MODIFIED,
                    severity=Severity.WARNING,
                    before=old_prop.enum,
                    after=new_prop.enum,
                    description=f'Enum values changed for property "{name}" at {path}',
                )
            )

    if old_prop.has_properties or new_prop.has_properties:
        # Same procedure as the parent, so a property type change is
        # reported here and again as the nested node's own type.
        changes.extend(diff_schema_objects(prop_path, old_prop.raw, new_prop.raw))

    return changes


def _types_differ(old_type: Any, new_type: Any) -> bool:
    return bool(old_type) and bool(new_type) and old_type != new_type
