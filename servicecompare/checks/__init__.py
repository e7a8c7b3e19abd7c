"""Declaration checks and the issue model."""

from .declaration_rules import RESERVED_PARAMS, validate_endpoint, validate_service
from .models import Issue, count_by_severity, has_errors, sort_issues

__all__ = [
    "Issue",
    "RESERVED_PARAMS",
    "count_by_severity",
    "has_errors",
    "sort_issues",
    "validate_endpoint",
    "validate_service",
]
