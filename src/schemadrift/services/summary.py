# src/schemadrift/services/summary.py

from __future__ import annotations

from typing import List

from schemadrift.models.change import Change, Severity

NO_CHANGES_SUMMARY = "No changes detected between the two schemas."


def generate_summary(changes: List[Change]) -> str:
    """
    Render a one-sentence summary of a change list.

    Example:
        "Detected 3 total change(s): 1 breaking change(s), 2 informational change(s)."
    """
    if not changes:
        return NO_CHANGES_SUMMARY

    critical = sum(1 for c in changes if c.severity is Severity.CRITICAL)
    warnings = sum(1 for c in changes if c.severity is Severity.WARNING)
    info = sum(1 for c in changes if c.severity is Severity.INFO)

    parts = []
    if critical:
        parts.append(f"{critical} breaking change(s)")
    if warnings:
        parts.append(f"{warnings} warning(s)")
    if info:
        parts.append(f"{info} informational change(s)")

    return f"Detected {len(changes)} total change(s): {', '.join(parts)}."
