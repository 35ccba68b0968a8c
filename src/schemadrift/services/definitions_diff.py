# src/schemadrift/services/definitions_diff.py

from __future__ import annotations

import logging
from typing import Any, Dict, List

from opentelemetry import trace

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.services.schema_diff import diff_schema_objects

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

DEFINITIONS_PREFIX = "components/schemas"


def diff_definitions(
    old_defs: Dict[str, Any],
    new_defs: Dict[str, Any],
    *,
    prefix: str = DEFINITIONS_PREFIX,
) -> List[Change]:
    """
    Compare the named reusable schemas of two documents.

    Swagger 2.0 ``definitions`` are reported under the same prefix as
    OpenAPI 3 ``components.schemas``.
    """
    with tracer.start_as_current_span("service.diff_definitions") as span:
        span.set_attribute("definitions.old_count", len(old_defs))
        span.set_attribute("definitions.new_count", len(new_defs))
        changes: List[Change] = []

        for name in sorted(set(old_defs) | set(new_defs)):
            def_path = f"{prefix}.{name}"

            if name not in old_defs:
                changes.append(
                    Change(
                        path=def_path,
                        kind=ChangeKind.ADDED,
                        severity=Severity.INFO,
                        after=new_defs[name],
                        description=f"New schema definition added: {name}",
                    )
                )
                logger.debug("Detected added definition: %s", name)
                continue

            if name not in new_defs:
                changes.append(
                    Change(
                        path=def_path,
                        kind=ChangeKind.REMOVED,
                        severity=Severity.CRITICAL,
                        before=old_defs[name],
                        description=f"Schema definition removed: {name} (breaking change)",
                    )
                )
                logger.info("Detected removed definition: %s", name)
                continue

            changes.extend(diff_schema_objects(def_path, old_defs[name], new_defs[name]))

        span.set_attribute("diff.changes_count", len(changes))
        return changes
