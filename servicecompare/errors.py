"""Exception hierarchy shared by the task adapter, loader and comparison engine."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from servicecompare.generator import ComparisonReport


class ServiceCompareError(Exception):
    """Base class for every error raised by servicecompare."""


class MissingArgumentError(ServiceCompareError, ValueError):
    """A required configuration value was neither set directly nor found in properties."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} not specified")
        self.name = name


class DeclarationError(ServiceCompareError):
    """A service or endpoint declaration could not be read or is malformed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        text = f"{path}: {message}" if path is not None else message
        super().__init__(text)
        self.path = Path(path) if path is not None else None


class ServiceComparisonError(ServiceCompareError):
    """Comparison finished but found errors (incompatible custom service)."""

    def __init__(self, report: "ComparisonReport") -> None:
        counts: dict[str, Any] = report.counts()
        super().__init__(
            f"custom service {report.custom.path} is not compatible"
            f" ({counts.get('error', 0)} error(s), {counts.get('warning', 0)} warning(s))"
        )
        self.report = report
