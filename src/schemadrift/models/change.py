# src/schemadrift/models/change.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

_MISSING = object()


class ChangeKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


@dataclass
class Change:
    """
    A single difference between two documents.

    path:
        Dot-separated locator into the compared document. Example:
        "paths./pets.GET.parameters.limit.type"
    kind:
        added, removed or modified
    before:
        Previous value (left unset for ADDED)
    after:
        New value (left unset for REMOVED)
    """
    path: str
    kind: ChangeKind
    severity: Severity
    description: str
    before: Any = _MISSING
    after: Any = _MISSING

    @property
    def has_before(self) -> bool:
        return self.before is not _MISSING

    @property
    def has_after(self) -> bool:
        return self.after is not _MISSING

    @property
    def is_breaking(self) -> bool:
        return self.severity is Severity.CRITICAL

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "path": self.path,
            "type": self.kind.value,
            "severity": self.severity.value,
        }
        if self.has_before:
            out["oldValue"] = self.before
        if self.has_after:
            out["newValue"] = self.after
        out["description"] = self.description
        return out


@dataclass
class ComparisonResult:
    changes: List[Change] = field(default_factory=list)
    summary: str = ""

    @property
    def total_changes(self) -> int:
        return len(self.changes)

    @property
    def breaking(self) -> int:
        return sum(1 for c in self.changes if c.is_breaking)

    @property
    def non_breaking(self) -> int:
        return self.total_changes - self.breaking

    def count(self, severity: Severity) -> int:
        return sum(1 for c in self.changes if c.severity is severity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalChanges": self.total_changes,
            "breaking": self.breaking,
            "nonBreaking": self.non_breaking,
            "changes": [c.to_dict() for c in self.changes],
            "summary": self.summary,
        }
