# src/schemadrift/utils/json_utils.py
import json
from typing import Any, Literal

JsonKind = Literal["object", "array", "string", "number", "boolean", "null"]


def join_path(parent: str, key: str) -> str:
    if not parent:
        return key
    return f"{parent}.{key}"


def json_kind(value: Any) -> JsonKind:
    """
    Runtime kind of a parsed JSON value.

    bool is checked before int so True never counts as a number.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__  # type: ignore[return-value]


def canonical_json(value: Any) -> str:
    """
    Serialize a JSON value for equality checks.

    Object keys are sorted, array order is kept.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
