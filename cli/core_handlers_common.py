"""Shared helpers for core CLI handlers."""

from __future__ import annotations

import json
from typing import Any


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("servicecompare: %s", msg)


def _clog() -> Any:
    from servicecompare.logging import get_logger

    return get_logger("cli")


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))
