# src/schemadrift/services/spec_loader.py

from __future__ import annotations
import json
import yaml
from pathlib import Path
from typing import Any
import logging
from opentelemetry import trace

from schemadrift.utils.file_utils import detect_file_type
from schemadrift.metrics import spec_load_failures_total

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def parse_spec(filename: str, raw_bytes: bytes) -> Any:
    """
    Parse a raw schema document into a JSON value.
    Supports JSON and YAML; YAML is converted here so the diff engine
    only ever sees JSON values.
    """

    ftype = detect_file_type(filename, raw_bytes)

    with tracer.start_as_current_span("service.parse_spec") as span:
        span.set_attribute("filename", filename)
        span.set_attribute("file.type", ftype)
        try:
            if ftype == "unknown":
                raise ValueError(f"Unsupported or unknown schema format: {filename}")

            text = raw_bytes.decode("utf-8")

            if ftype == "json":
                return json.loads(text)

            # Round-trip through JSON so YAML-only values (dates, sets) become JSON.
            return json.loads(json.dumps(yaml.safe_load(text), default=str))

        except Exception as exc:
            spec_load_failures_total.inc()
            logger.exception("Failed to parse schema: filename=%s ftype=%s", filename, ftype)
            if isinstance(exc, ValueError):
                raise
            raise ValueError(f"Failed to parse {filename}: {exc}") from exc


def load_spec(path: str | Path) -> Any:
    """Read and parse a schema document from disk."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        spec_load_failures_total.inc()
        logger.error("Failed to read schema file %s: %s", path, exc)
        raise ValueError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    return parse_spec(path.name, raw)
