# src/schemadrift/services/parameter_diff.py

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from schemadrift.models.change import Change, ChangeKind, Severity
from schemadrift.models.openapi import Parameter

logger = logging.getLogger(__name__)


def diff_parameters(
    old_params: List[Parameter],
    new_params: List[Parameter],
    *,
    op_path: str,
    method: str,
    path: str,
) -> List[Change]:
    """
    Compare two operation parameter lists keyed by (name, location).

    Args:
        old_params: Parameters of the previous operation
        new_params: Parameters of the new operation
        op_path: Locator of the operation, e.g. "paths./pets.GET"
        method: Upper-case HTTP method, used in descriptions
        path: API path, used in descriptions

    Returns:
        Added parameters, then removed ones, then changes to parameters
        present on both sides; each group sorted by key.
    """
    old_map = _by_key(old_params)
    new_map = _by_key(new_params)
    changes: List[Change] = []

    for key in sorted(new_map.keys() - old_map.keys()):
        param = new_map[key]
        logger.debug(
            "Detected added parameter: %s %s name=%s required=%s",
            method, path, param.name, param.required,
        )
        changes.append(
            Change(
                path=f"{op_path}.parameters.{param.name}",
                kind=ChangeKind.ADDED,
                # A new required parameter breaks callers that do not send it.
                severity=Severity.WARNING if param.required else Severity.INFO,
                after=param.raw,
                description=(
                    f'New required parameter "{param.name}" added to {method} {path}'
                    if param.required
                    else f'New optional parameter "{param.name}" added to {method} {path}'
                ),
            )
        )

    for key in sorted(old_map.keys() - new_map.keys()):
        param = old_map[key]
        logger.info("Detected removed parameter: %s %s name=%s", method, path, param.name)
        changes.append(
            Change(
                path=f"{op_path}.parameters.{param.name}",
                kind=ChangeKind.REMOVED,
                severity=Severity.CRITICAL,
                before=param.raw,
                description=(
                    f'Parameter "{param.name}" removed from {method} {path} (breaking change)'
                ),
            )
        )

    for key in sorted(old_map.keys() & new_map.keys()):
        old_param = old_map[key]
        new_param = new_map[key]
        param_path = f"{op_path}.parameters.{old_param.name}"

        old_type = old_param.effective_type
        new_type = new_param.effective_type
        if old_type and new_type and old_type != new_type:
            changes.append(
                Change(
                    path=f"{param_path}.type",
                    kind=ChangeKind.MODIFIED,
                    severity=Severity.CRITICAL,
                    before=old_type,
                    after=new_type,
                    description=(
                        f'Parameter "{old_param.name}" type changed from "{old_type}" '
                        f'to "{new_type}" in {method} {path} (breaking change)'
                    ),
                )
            )

        # Only optional -> required is flagged; loosening never breaks callers.
        if not old_param.required and new_param.required:
            changes.append(
                Change(
                    path=f"{param_path}.required",
                    kind=ChangeKind.MODIFIED,
                    severity=Severity.WARNING,
                    before=False,
                    after=True,
                    description=(
                        f'Parameter "{old_param.name}" is now required in {method} {path}'
                    ),
                )
            )

    return changes


def _by_key(params: List[Parameter]) -> Dict[Tuple[str, str], Parameter]:
    # Later duplicates win, matching how the document would be read.
    return {p.key: p for p in params}
