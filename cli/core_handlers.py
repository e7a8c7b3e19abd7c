"""Core CLI command handlers (compare / validate / help).

Public surface is re-exported via cli.handlers.
"""

from __future__ import annotations

from typing import Any

from servicecompare.config import load_properties, parse_overrides
from servicecompare.errors import ServiceCompareError, ServiceComparisonError
from servicecompare.generator import ComparisonReport, Generator
from servicecompare.task import ServiceCompareConfig, ServiceCompareTask

from .core_handlers_common import _err, _print_json


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    print("servicecompare: custom vs base data-service declaration checker")
    print()
    print("Commands:")
    print("  compare [--custom PATH] [--base PATH] [-P name=value]")
    print("                     compare custom with base; validate custom only if no base")
    print("  validate PATH      structural checks for one service declaration")
    print()
    print("  Paths may also come from properties customServiceDeclarationFile /")
    print("  baseServiceDeclarationFile (pyproject [tool.servicecompare], env, -P).")
    print("  --json for machine output; exit code 1 on errors or incompatibility.")
    print()
    parser.print_help()
    return 0


def _emit(report: ComparisonReport, as_json: bool) -> None:
    if as_json:
        _print_json(report.to_dict())
    else:
        print(report.to_text())


def _run_and_report(run: Any, as_json: bool) -> int:
    try:
        report = run()
    except ServiceComparisonError as exc:
        _emit(exc.report, as_json)
        _err(str(exc))
        return 1
    except ServiceCompareError as exc:
        _err(str(exc))
        return 1
    _emit(report, as_json)
    return 0


def handle_compare(args: Any) -> int:
    try:
        overrides = parse_overrides(getattr(args, "properties", None))
    except ValueError as exc:
        _err(str(exc))
        return 1
    project = getattr(args, "project", None) or "."
    properties = load_properties(project, overrides)
    config = ServiceCompareConfig(
        custom_service_declaration_file=getattr(args, "custom", "") or "",
        base_service_declaration_file=getattr(args, "base", "") or "",
    )
    task = ServiceCompareTask(config, properties)
    return _run_and_report(task.run, getattr(args, "json", False))


def handle_validate(args: Any) -> int:
    path = str(args.path)
    return _run_and_report(lambda: Generator().compare_services(path), getattr(args, "json", False))
