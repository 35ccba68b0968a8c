# src/schemadrift/tracing.py

import os

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    SimpleSpanProcessor,
    ConsoleSpanExporter,
)

_TRUTHY = {"1", "true", "yes", "on"}


def console_export_enabled() -> bool:
    return os.getenv("SCHEMADRIFT_TRACE_CONSOLE", "").strip().lower() in _TRUTHY


def configure_tracing() -> None:
    """
    Install an OpenTelemetry tracer provider.

    Spans are printed to stdout only when SCHEMADRIFT_TRACE_CONSOLE is set;
    otherwise they are recorded (so trace ids reach the logs) but not exported.
    """
    # If there's already a provider, don't reconfigure
    if isinstance(trace.get_tracer_provider(), TracerProvider):
        return

    provider = TracerProvider()
    if console_export_enabled():
        # SimpleSpanProcessor exports synchronously. BatchSpanProcessor's
        # background worker can write to stdout after pytest closed capture.
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
