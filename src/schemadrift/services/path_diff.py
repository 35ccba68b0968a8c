# src/schemadrift/services/path_diff.py

"""
Path Comparator

Compares the endpoint surface (paths x HTTP methods) of two documents:
- Endpoint / method removals (BREAKING)
- Endpoint / method additions (informational)
- Operations present on both sides are handed to the operation comparator
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from opentelemetry import trace

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.models.openapi import HTTP_METHODS, Operation, as_mapping
from schemadrift.services.operation_diff import diff_operations

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def diff_paths(old_paths: Dict[str, Any], new_paths: Dict[str, Any]) -> List[Change]:
    """
    Compare two ``paths`` mappings.

    Path keys are visited in sorted order and methods in the fixed order
    GET, POST, PUT, PATCH, DELETE, HEAD, OPTIONS.
    """
    with tracer.start_as_current_span("service.diff_paths") as span:
        span.set_attribute("paths.old_count", len(old_paths))
        span.set_attribute("paths.new_count", len(new_paths))
        changes: List[Change] = []

        for path in sorted(set(old_paths) | set(new_paths)):
            if path not in old_paths:
                changes.append(
                    Change(
                        path=f"paths.{path}",
                        kind=ChangeKind.ADDED,
                        severity=Severity.INFO,
                        after=new_paths[path],
                        description=f"New endpoint added: {path}",
                    )
                )
                logger.debug("Detected added endpoint: %s", path)
                continue

            if path not in new_paths:
                changes.append(
                    Change(
                        path=f"paths.{path}",
                        kind=ChangeKind.REMOVED,
                        severity=Severity.CRITICAL,
                        before=old_paths[path],
                        description=f"Endpoint removed: {path} (breaking change)",
                    )
                )
                logger.info("Detected removed endpoint: %s", path)
                continue

            changes.extend(_diff_methods(path, old_paths[path], new_paths[path]))

        span.set_attribute("diff.changes_count", len(changes))
        return changes


def _diff_methods(path: str, old_item: Any, new_item: Any) -> List[Change]:
    old_item = as_mapping(old_item)
    new_item = as_mapping(new_item)
    changes: List[Change] = []

    for method in HTTP_METHODS:
        old_op = old_item.get(method)
        new_op = new_item.get(method)
        has_old = isinstance(old_op, dict)
        has_new = isinstance(new_op, dict)
        label = method.upper()

        if has_new and not has_old:
            changes.append(
                Change(
                    path=f"paths.{path}.{label}",
                    kind=ChangeKind.ADDED,
                    severity=Severity.INFO,
                    after=new_op,
                    description=f"New method {label} added to {path}",
                )
            )
            logger.debug("Detected added method: %s %s", label, path)
        elif has_old and not has_new:
            changes.append(
                Change(
                    path=f"paths.{path}.{label}",
                    kind=ChangeKind.REMOVED,
                    severity=Severity.CRITICAL,
                    before=old_op,
                    description=f"Method {label} removed from {path} (breaking change)",
                )
            )
            logger.info("Detected removed method: %s %s", label, path)
        elif has_old and has_new:
            changes.extend(diff_operations(path, label, Operation(old_op), Operation(new_op)))

    return changes
