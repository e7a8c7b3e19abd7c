"""
Comparison engine behind the service-compare task.

Generator.compare_services loads the custom service declaration, validates
it, and when a base declaration is supplied also validates the base and diffs
the two. An incompatible result raises ServiceComparisonError after the
report has been logged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from servicecompare.checks import Issue, count_by_severity, has_errors, validate_service
from servicecompare.compare import diff_services, diff_to_text
from servicecompare.declarations import ServiceDeclaration, load_service_declaration
from servicecompare.errors import ServiceComparisonError
from servicecompare.logging import get_logger

_log = get_logger("generator")


@dataclass(slots=True)
class ComparisonReport:
    custom: ServiceDeclaration
    base: Optional[ServiceDeclaration] = None
    custom_issues: List[Issue] = field(default_factory=list)
    base_issues: List[Issue] = field(default_factory=list)
    diff: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        if has_errors(self.custom_issues) or has_errors(self.base_issues):
            return False
        return self.diff is None or bool(self.diff["compatible"])

    def counts(self) -> Dict[str, int]:
        totals = count_by_severity(self.custom_issues + self.base_issues)
        if self.diff is not None:
            for k, v in self.diff["summary"].items():
                totals[k] = totals.get(k, 0) + v
        return totals

    def summary_line(self) -> str:
        c = self.counts()
        target = f"{self.custom.path} vs {self.base.path}" if self.base is not None else str(self.custom.path)
        status = "OK" if self.ok else "FAILED"
        return f"{target}: {status} ({c['error']} errors, {c['warning']} warnings, {c['info']} info)"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "custom": str(self.custom.path),
            "base": str(self.base.path) if self.base is not None else None,
            "ok": self.ok,
            "summary": self.counts(),
            "validation": {
                "custom": [i.to_dict() for i in self.custom_issues],
                "base": [i.to_dict() for i in self.base_issues],
            },
            "diff": self.diff,
        }

    def to_text(self) -> str:
        lines: List[str] = []
        for label, issues in (("custom", self.custom_issues), ("base", self.base_issues)):
            if not issues:
                continue
            lines.append(f"VALIDATION ({label})")
            lines.extend(f"  {i}" for i in issues)
            lines.append("")
        if self.diff is not None:
            lines.append(diff_to_text(self.diff))
        else:
            lines.append(f"{len(self.custom.endpoints)} endpoint(s) validated")
            lines.append(self.summary_line())
        return "\n".join(lines)


class Generator:
    """Loads, validates and compares service declarations."""

    def load(self, path: Path | str) -> ServiceDeclaration:
        return load_service_declaration(path)

    def compare_services(self, custom_path: str, base_path: Optional[str] = None) -> ComparisonReport:
        """
        Compare the custom service declaration with an optional base.

        Without base_path only the custom declaration is validated.
        Raises DeclarationError for unreadable input and ServiceComparisonError
        when the result contains errors.
        """
        custom = self.load(custom_path)
        report = ComparisonReport(custom=custom, custom_issues=validate_service(custom))
        if base_path:
            base = self.load(base_path)
            report.base = base
            report.base_issues = validate_service(base)
            report.diff = diff_services(base, custom)
            _log.debug("servicecompare: compared %s against %s", custom.path, base.path)
        else:
            _log.debug("servicecompare: no base declaration, validating %s only", custom.path)

        _log.debug("%s", report.to_text())
        _log.info("servicecompare: %s", report.summary_line())
        if not report.ok:
            raise ServiceComparisonError(report)
        return report
