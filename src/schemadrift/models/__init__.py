from schemadrift.models.change import Change, ChangeKind, ComparisonResult, Severity

__all__ = ["Change", "ChangeKind", "ComparisonResult", "Severity"]
