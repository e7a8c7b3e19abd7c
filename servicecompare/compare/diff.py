"""
Service Diff

Compares a base service declaration with a custom one and produces a
compatibility report: which endpoints were added or removed, and how the
signatures of common endpoints changed from a caller's point of view.
"""

from __future__ import annotations

from typing import Dict, List

from servicecompare.checks.models import Issue, count_by_severity, has_errors, sort_issues
from servicecompare.declarations.datatypes import is_session
from servicecompare.declarations.models import EndpointDeclaration, ParamDef, ServiceDeclaration


def _compute_endpoint_sets(base: ServiceDeclaration, custom: ServiceDeclaration) -> Dict[str, List[str]]:
    base_set = set(base.endpoints)
    custom_set = set(custom.endpoints)
    return {
        "added": sorted(custom_set - base_set),
        "removed": sorted(base_set - custom_set),
        "common": sorted(base_set & custom_set),
    }


def _same_datatype(old: str, new: str) -> bool:
    # session is case-insensitive
    if is_session(old) and is_session(new):
        return True
    return old == new


def _compare_param(name: str, old: ParamDef, new: ParamDef) -> List[Issue]:
    issues: List[Issue] = []
    pname = old.name
    if not _same_datatype(old.datatype, new.datatype):
        issues.append(
            Issue("error", "param_datatype_changed", name, f"parameter '{pname}' datatype {old.datatype} → {new.datatype}")
        )
    if old.multiple != new.multiple:
        issues.append(
            Issue("error", "param_multiple_changed", name, f"parameter '{pname}' multiple {old.multiple} → {new.multiple}")
        )
    if old.nullable and not new.nullable:
        issues.append(
            Issue("error", "param_nullable_narrowed", name, f"parameter '{pname}' is no longer nullable")
        )
    elif not old.nullable and new.nullable:
        issues.append(
            Issue("info", "param_nullable_widened", name, f"parameter '{pname}' now accepts null")
        )
    return issues


def _compare_params(name: str, old: EndpointDeclaration, new: EndpointDeclaration) -> List[Issue]:
    issues: List[Issue] = []
    for p in old.params:
        q = new.param(p.name)
        if q is None:
            issues.append(Issue("error", "param_removed", name, f"parameter '{p.name}' removed"))
            continue
        issues.extend(_compare_param(name, p, q))
    old_names = set(old.param_names)
    for q in new.params:
        if q.name in old_names:
            continue
        if q.nullable:
            issues.append(Issue("info", "param_added", name, f"optional parameter '{q.name}' added"))
        else:
            issues.append(
                Issue("error", "param_added_required", name, f"required parameter '{q.name}' added")
            )
    common_old = [n for n in old.param_names if n in set(new.param_names)]
    common_new = [n for n in new.param_names if n in old_names]
    if common_old != common_new:
        issues.append(
            Issue(
                "warning",
                "param_order_changed",
                name,
                f"parameter order {', '.join(common_old)} → {', '.join(common_new)}",
            )
        )
    return issues


def _compare_return(name: str, old: EndpointDeclaration, new: EndpointDeclaration) -> List[Issue]:
    r_old, r_new = old.returns, new.returns
    if r_old is None and r_new is None:
        return []
    if r_new is None:
        return [Issue("error", "return_removed", name, f"return {r_old.signature()} removed")]
    if r_old is None:
        return [Issue("warning", "return_added", name, f"return {r_new.signature()} added")]
    issues: List[Issue] = []
    if not _same_datatype(r_old.datatype, r_new.datatype):
        issues.append(
            Issue("error", "return_datatype_changed", name, f"return datatype {r_old.datatype} → {r_new.datatype}")
        )
    if r_old.multiple != r_new.multiple:
        issues.append(
            Issue("error", "return_multiple_changed", name, f"return multiple {r_old.multiple} → {r_new.multiple}")
        )
    if not r_old.nullable and r_new.nullable:
        issues.append(Issue("error", "return_nullable_widened", name, "return may now be null"))
    elif r_old.nullable and not r_new.nullable:
        issues.append(Issue("info", "return_nullable_narrowed", name, "return is no longer nullable"))
    return issues


def compare_endpoints(old: EndpointDeclaration, new: EndpointDeclaration) -> List[Issue]:
    """All signature changes between two declarations of the same function."""
    name = old.function_name
    issues = _compare_params(name, old, new) + _compare_return(name, old, new)
    if old.module_extension and new.module_extension and old.module_extension != new.module_extension:
        issues.append(
            Issue("warning", "module_changed", name, f"module {old.module_extension} → {new.module_extension}")
        )
    return issues


def diff_services(base: ServiceDeclaration, custom: ServiceDeclaration) -> Dict:
    endpoints = _compute_endpoint_sets(base, custom)
    changes: List[Issue] = []
    if base.endpoint_directory != custom.endpoint_directory:
        changes.append(
            Issue(
                "warning",
                "endpoint_directory_changed",
                "",
                f"endpointDirectory {base.endpoint_directory} → {custom.endpoint_directory}",
            )
        )
    for name in endpoints["removed"]:
        changes.append(Issue("error", "endpoint_removed", name, f"endpoint missing from custom service: {base.endpoints[name].signature()}"))
    for name in endpoints["added"]:
        changes.append(Issue("info", "endpoint_added", name, f"endpoint only in custom service: {custom.endpoints[name].signature()}"))
    for name in endpoints["common"]:
        changes.extend(compare_endpoints(base.endpoints[name], custom.endpoints[name]))

    changes = sort_issues(changes)
    return {
        "base": str(base.path),
        "custom": str(custom.path),
        "endpoints": endpoints,
        "changes": [c.to_dict() for c in changes],
        "summary": count_by_severity(changes),
        "compatible": not has_errors(changes),
    }


def diff_to_text(diff: Dict) -> str:
    lines: List[str] = []
    lines.append("SERVICE COMPARISON REPORT")
    lines.append(f"base:   {diff['base']}")
    lines.append(f"custom: {diff['custom']}")
    lines.append("")

    _append_endpoint_sets(lines, diff["endpoints"])
    _append_changes(lines, diff["changes"])
    _append_verdict(lines, diff)

    return "\n".join(lines)


def _append_endpoint_sets(lines: List[str], endpoints: Dict[str, List[str]]) -> None:
    lines.append("1. Endpoints")
    lines.append(f"+ added: {len(endpoints['added'])}")
    for m in endpoints["added"]:
        lines.append(f"  + {m}")
    lines.append(f"- removed: {len(endpoints['removed'])}")
    for m in endpoints["removed"]:
        lines.append(f"  - {m}")
    lines.append(f"= common: {len(endpoints['common'])}")
    lines.append("")


def _append_changes(lines: List[str], changes: List[Dict]) -> None:
    lines.append("2. Signature changes")
    if not changes:
        lines.append("(none)")
    for c in changes:
        where = f"{c['endpoint']}: " if c["endpoint"] else ""
        lines.append(f"  [{c['severity']}] {where}{c['message']}")
    lines.append("")


def _append_verdict(lines: List[str], diff: Dict) -> None:
    s = diff["summary"]
    verdict = "COMPATIBLE" if diff["compatible"] else "INCOMPATIBLE"
    lines.append(f"3. Verdict: {verdict} ({s['error']} errors, {s['warning']} warnings, {s['info']} info)")
