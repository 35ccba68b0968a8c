# src/schemadrift/models/openapi.py

"""
Read-only views over a raw OpenAPI / Swagger tree.

The views never copy or resolve anything: each one wraps the parsed JSON
dict it was built from (``raw``) and exposes the handful of fields the
comparators look at. Anything that is not a JSON object where an object is
expected is treated as absent.

SchemaNode shapes
-----------------
A schema node is kept as one permissive structural type because real
documents mix shapes freely. ``variant`` names the dominant shape, checked
in this order:

- ``ref``: carries ``$ref`` (compared as a string, never dereferenced)
- ``composite``: carries ``allOf`` / ``oneOf`` / ``anyOf``
- ``object``: carries ``properties``
- ``array``: carries ``items``
- ``plain``: carries only scalar keywords such as ``type`` / ``format`` / ``enum``
- ``empty``: carries none of the above
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set, Tuple

HTTP_METHODS: Tuple[str, ...] = ("get", "post", "put", "patch", "delete", "head", "options")

JSON_MEDIA_TYPE = "application/json"


def as_mapping(value: Any) -> Dict[str, Any]:
    """Return value when it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}


def json_schema_of(container: Any) -> Optional[Dict[str, Any]]:
    """
    Return the JSON schema carried by a request body or response object.

    OpenAPI 3 nests it under ``content.application/json.schema``;
    Swagger 2 responses carry it directly under ``schema``.
    """
    container = as_mapping(container)
    content = as_mapping(container.get("content"))
    media = as_mapping(content.get(JSON_MEDIA_TYPE))
    schema = media.get("schema")
    if isinstance(schema, dict):
        return schema
    schema = container.get("schema")
    if isinstance(schema, dict):
        return schema
    return None


@dataclass(frozen=True)
class SchemaNode:
    raw: Dict[str, Any]

    @classmethod
    def wrap(cls, value: Any) -> Optional["SchemaNode"]:
        if not isinstance(value, dict):
            return None
        return cls(value)

    @property
    def type(self) -> Any:
        return self.raw.get("type")

    @property
    def properties(self) -> Dict[str, Any]:
        return as_mapping(self.raw.get("properties"))

    @property
    def has_properties(self) -> bool:
        return isinstance(self.raw.get("properties"), dict)

    @property
    def required(self) -> Set[str]:
        required = self.raw.get("required")
        if not isinstance(required, list):
            return set()
        return {name for name in required if isinstance(name, str)}

    @property
    def enum(self) -> Optional[List[Any]]:
        enum = self.raw.get("enum")
        return enum if isinstance(enum, list) else None

    @property
    def ref(self) -> Optional[str]:
        return self.raw.get("$ref")

    @property
    def variant(self) -> str:
        if "$ref" in self.raw:
            return "ref"
        if any(k in self.raw for k in ("allOf", "oneOf", "anyOf")):
            return "composite"
        if "properties" in self.raw:
            return "object"
        if "items" in self.raw:
            return "array"
        if any(k in self.raw for k in ("type", "format", "enum", "nullable")):
            return "plain"
        return "empty"


@dataclass(frozen=True)
class Parameter:
    raw: Dict[str, Any]

    @property
    def name(self) -> str:
        return str(self.raw.get("name", ""))

    @property
    def location(self) -> str:
        return str(self.raw.get("in", ""))

    @property
    def key(self) -> Tuple[str, str]:
        return (self.name, self.location)

    @property
    def required(self) -> bool:
        return self.raw.get("required") is True

    @property
    def effective_type(self) -> Any:
        # OpenAPI 3 puts the type under schema; Swagger 2 keeps it inline.
        schema_type = as_mapping(self.raw.get("schema")).get("type")
        return schema_type or self.raw.get("type")


@dataclass(frozen=True)
class Operation:
    raw: Dict[str, Any]

    @property
    def parameters(self) -> List[Parameter]:
        params = self.raw.get("parameters")
        if not isinstance(params, list):
            return []
        return [Parameter(p) for p in params if isinstance(p, dict)]

    @property
    def request_body_schema(self) -> Optional[Dict[str, Any]]:
        body = as_mapping(self.raw.get("requestBody"))
        schema = as_mapping(as_mapping(body.get("content")).get(JSON_MEDIA_TYPE)).get("schema")
        if isinstance(schema, dict):
            return schema
        return None

    @property
    def responses(self) -> Dict[str, Any]:
        return {str(k): v for k, v in as_mapping(self.raw.get("responses")).items()}

    def response_schema(self, status: str) -> Optional[Dict[str, Any]]:
        return json_schema_of(self.responses.get(status))


def document_paths(doc: Any) -> Dict[str, Dict[str, Any]]:
    """Return the ``paths`` mapping, empty when absent."""
    return as_mapping(as_mapping(doc).get("paths"))


def document_definitions(doc: Any) -> Dict[str, Any]:
    """
    Return the named reusable schemas of a document.

    ``components.schemas`` (OpenAPI 3) wins; legacy Swagger 2.0 documents
    fall back to top-level ``definitions``.
    """
    doc = as_mapping(doc)
    schemas = as_mapping(doc.get("components")).get("schemas")
    if isinstance(schemas, dict):
        return schemas
    return as_mapping(doc.get("definitions"))
