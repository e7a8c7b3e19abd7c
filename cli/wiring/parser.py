"""Parser wiring for the servicecompare entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="servicecompare",
        description="servicecompare: check a custom data-service declaration against its base",
        epilog="Commands: compare | validate. Use servicecompare help for an overview.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    subparsers = parser.add_subparsers(dest="command")

    _add_compare_command(subparsers)
    _add_validate_command(subparsers)

    subparsers.add_parser("help", help="Show servicecompare command overview")

    return parser


def _add_output_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")
    p.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors on stderr")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")


def _add_compare_command(subparsers: argparse._SubParsersAction) -> None:
    compare_parser = subparsers.add_parser("compare", help="Compare custom service declaration with base (or validate custom if no base)")
    compare_parser.add_argument("--custom", dest="custom", default="", metavar="PATH", help="Custom service.json (or its directory); else property customServiceDeclarationFile")
    compare_parser.add_argument("--base", dest="base", default="", metavar="PATH", help="Base service.json (or its directory); else property baseServiceDeclarationFile")
    compare_parser.add_argument("-P", dest="properties", action="append", default=[], metavar="NAME=VALUE", help="Set a property (repeatable), like gradle -P")
    compare_parser.add_argument("--project", type=Path, default=Path("."), metavar="DIR", help="Project root for pyproject.toml / .servicecompare/properties.toml (default: .)")
    _add_output_flags(compare_parser)


def _add_validate_command(subparsers: argparse._SubParsersAction) -> None:
    validate_parser = subparsers.add_parser("validate", help="Validate one service declaration and its endpoints")
    validate_parser.add_argument("path", type=Path, help="service.json or the directory containing it")
    _add_output_flags(validate_parser)
