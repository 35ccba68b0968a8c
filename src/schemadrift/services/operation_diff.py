# src/schemadrift/services/operation_diff.py

from __future__ import annotations

import logging
from typing import List

from schemadrift.models.change import Change
from schemadrift.models.openapi import Operation
from schemadrift.services.parameter_diff import diff_parameters
from schemadrift.services.schema_diff import diff_schema_objects

logger = logging.getLogger(__name__)


def diff_operations(path: str, method: str, old_op: Operation, new_op: Operation) -> List[Change]:
    """
    Compare one HTTP operation present in both documents.

    Parameters come first, then the JSON request body, then JSON response
    schemas per status code in sorted order.
    """
    op_path = f"paths.{path}.{method}"
    changes: List[Change] = []

    changes.extend(
        diff_parameters(
            old_op.parameters,
            new_op.parameters,
            op_path=op_path,
            method=method,
            path=path,
        )
    )

    old_body = old_op.request_body_schema
    new_body = new_op.request_body_schema
    if old_body is not None or new_body is not None:
        changes.extend(diff_schema_objects(f"{op_path}.requestBody", old_body, new_body))

    old_responses = old_op.responses
    new_responses = new_op.responses
    for status in sorted(set(old_responses) | set(new_responses)):
        old_schema = old_op.response_schema(status)
        new_schema = new_op.response_schema(status)
        if old_schema is None and new_schema is None:
            continue
        changes.extend(
            diff_schema_objects(f"{op_path}.responses.{status}", old_schema, new_schema)
        )

    logger.debug("Compared operation %s %s: %d changes", method, path, len(changes))
    return changes
