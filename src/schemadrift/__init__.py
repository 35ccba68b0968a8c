"""Schema diff engine for OpenAPI documents and arbitrary JSON."""

__version__ = "0.1.0"
