# src/schemadrift/services/schema_comparator.py

"""
Schema Comparator

Entry point of the diff engine. Detects whether the inputs look like
OpenAPI / Swagger documents and dispatches to:
- the path + definitions comparators (API-aware), or
- the generic JSON comparator (no API semantics)

The result is a ComparisonResult with a generated summary. Inputs are
never mutated and the same inputs always produce the same change list.
"""

from __future__ import annotations

import logging
from typing import Any, List

from opentelemetry import trace

from schemadrift.metrics import schema_changes_total, schema_comparisons_total
from schemadrift.models.change import Change, ComparisonResult
from schemadrift.models.openapi import document_definitions, document_paths
from schemadrift.services.definitions_diff import diff_definitions
from schemadrift.services.json_diff import diff_json
from schemadrift.services.path_diff import diff_paths
from schemadrift.services.summary import generate_summary

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

OPENAPI_MARKER_KEYS = ("openapi", "swagger", "paths", "definitions")


def is_openapi_document(value: Any) -> bool:
    """Return True when value is an object carrying any OpenAPI marker key."""
    return isinstance(value, dict) and any(key in value for key in OPENAPI_MARKER_KEYS)


def compare_schemas(old: Any, new: Any) -> ComparisonResult:
    """
    Compare two OpenAPI / Swagger documents.

    Missing ``paths`` / ``components`` / ``definitions`` sections count as
    empty.
    """
    with tracer.start_as_current_span("service.compare_schemas") as span:
        changes: List[Change] = []
        changes.extend(diff_paths(document_paths(old), document_paths(new)))
        changes.extend(diff_definitions(document_definitions(old), document_definitions(new)))
        result = _build_result(changes)
        _record(span, result, mode="openapi")
        return result


def compare_json(old: Any, new: Any) -> ComparisonResult:
    """Compare two arbitrary JSON values structurally."""
    with tracer.start_as_current_span("service.compare_json") as span:
        result = _build_result(diff_json(old, new))
        _record(span, result, mode="json")
        return result


def compare(old: Any, new: Any) -> ComparisonResult:
    """
    Compare two parsed JSON documents.

    Uses the OpenAPI-aware comparison when either side carries an
    ``openapi``, ``swagger``, ``paths`` or ``definitions`` key, and the
    generic JSON comparison otherwise.

    Example result (serialized):
        {
            "totalChanges": 1,
            "breaking": 1,
            "nonBreaking": 0,
            "changes": [
                {
                    "path": "paths./pets.POST",
                    "type": "removed",
                    "severity": "critical",
                    "oldValue": {...},
                    "description": "Method POST removed from /pets (breaking change)"
                }
            ],
            "summary": "Detected 1 total change(s): 1 breaking change(s)."
        }
    """
    if is_openapi_document(old) or is_openapi_document(new):
        return compare_schemas(old, new)
    return compare_json(old, new)


def _build_result(changes: List[Change]) -> ComparisonResult:
    return ComparisonResult(changes=changes, summary=generate_summary(changes))


def _record(span, result: ComparisonResult, *, mode: str) -> None:
    span.set_attribute("diff.mode", mode)
    span.set_attribute("diff.changes_count", result.total_changes)
    span.set_attribute("diff.breaking", result.breaking)

    schema_comparisons_total.labels(mode=mode).inc()
    for change in result.changes:
        schema_changes_total.labels(severity=change.severity.value).inc()

    logger.info(
        "Comparison complete: mode=%s changes=%d breaking=%d",
        mode,
        result.total_changes,
        result.breaking,
    )
