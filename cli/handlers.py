"""CLI handlers facade.

Re-exports concrete handler implementations from cli.core_handlers so the
public `cli.handlers.handle_*` API stays stable.
"""
from __future__ import annotations
from .core_handlers import handle_compare, handle_help, handle_validate
__all__ = ['handle_help', 'handle_compare', 'handle_validate']
