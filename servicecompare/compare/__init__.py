"""Base-vs-custom service diff engine."""

from .diff import compare_endpoints, diff_services, diff_to_text

__all__ = ["compare_endpoints", "diff_services", "diff_to_text"]
