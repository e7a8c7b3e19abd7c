"""Centralized logging helpers for the CLI and the comparison engine."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "SERVICECOMPARE_LOG_LEVEL"

_configured = False
_handler: logging.StreamHandler | None = None


def _resolve_level() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def _ensure_handler() -> logging.Logger:
    """Attach the plain stderr handler to the servicecompare package logger once."""
    global _handler
    root = logging.getLogger("servicecompare")
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_handler)
        root.propagate = False
    else:
        # rebind to the current sys.stderr
        _handler.stream = sys.stderr
    return root


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set servicecompare.* logger levels from CLI flags. --quiet/--verbose override env."""
    global _configured
    env_level = _resolve_level()
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = env_level
    root = _ensure_handler()
    root.setLevel(level)
    for child in ("task", "generator", "declarations", "config", "cli"):
        logging.getLogger(f"servicecompare.{child}").setLevel(level)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a servicecompare.<name> logger writing plain messages to stderr."""
    logger = logging.getLogger(f"servicecompare.{name}")
    if _handler is None:
        _ensure_handler()
    if not _configured:
        logger.setLevel(_resolve_level())
    return logger
