"""Issue model shared by validation and comparison."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Literal

Severity = Literal["error", "warning", "info"]

_SEVERITY_ORDER: Dict[str, int] = {"error": 0, "warning": 1, "info": 2}


@dataclass(slots=True)
class Issue:
    severity: Severity
    code: str
    endpoint: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        where = f"{self.endpoint}: " if self.endpoint else ""
        return f"[{self.severity}] {where}{self.message} ({self.code})"


def sort_issues(issues: Iterable[Issue]) -> List[Issue]:
    """Errors first, then warnings, then info; stable by endpoint and code."""
    return sorted(issues, key=lambda i: (_SEVERITY_ORDER.get(i.severity, 9), i.endpoint, i.code))


def count_by_severity(issues: Iterable[Issue]) -> Dict[str, int]:
    counts = {"error": 0, "warning": 0, "info": 0}
    for i in issues:
        counts[i.severity] = counts.get(i.severity, 0) + 1
    return counts


def has_errors(issues: Iterable[Issue]) -> bool:
    return any(i.severity == "error" for i in issues)
