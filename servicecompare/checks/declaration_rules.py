"""
Structural checks for a single service declaration.

Applies the constraints the data-service client enforces when it builds a
caller for an endpoint, so a declaration that passes here will not be rejected
at call time for its shape.
"""

from __future__ import annotations

from typing import List

from servicecompare.declarations.datatypes import document_format, is_known_datatype, is_session
from servicecompare.declarations.models import EndpointDeclaration, ServiceDeclaration

from .models import Issue, sort_issues

RESERVED_PARAMS = frozenset({"endpointState", "input", "session", "endpointConstants", "workUnit"})


def _check_datatypes(endpoint: EndpointDeclaration) -> List[Issue]:
    issues: List[Issue] = []
    name = endpoint.function_name
    for p in endpoint.params:
        if not is_known_datatype(p.datatype):
            issues.append(Issue("error", "unknown_datatype", name, f"parameter '{p.name}' has unknown datatype '{p.datatype}'"))
    if endpoint.returns is not None and not is_known_datatype(endpoint.returns.datatype):
        issues.append(Issue("error", "unknown_datatype", name, f"return has unknown datatype '{endpoint.returns.datatype}'"))
    return issues


def _check_duplicates(endpoint: EndpointDeclaration) -> List[Issue]:
    seen: set[str] = set()
    issues: List[Issue] = []
    for p in endpoint.params:
        if p.name in seen:
            issues.append(Issue("error", "duplicate_param", endpoint.function_name, f"parameter '{p.name}' declared more than once"))
        seen.add(p.name)
    return issues


def _check_function_name(endpoint: EndpointDeclaration) -> List[Issue]:
    if endpoint.source is None or endpoint.source.stem == endpoint.function_name:
        return []
    return [
        Issue(
            "error",
            "function_name_mismatch",
            endpoint.function_name,
            f"functionName '{endpoint.function_name}' does not match file {endpoint.source.name}",
        )
    ]


def _check_reserved_params(endpoint: EndpointDeclaration) -> List[Issue]:
    """Rules for endpointState / input / session / endpointConstants / workUnit."""
    name = endpoint.function_name
    issues: List[Issue] = []

    def bad(msg: str) -> None:
        issues.append(Issue("error", "reserved_param", name, msg))

    constants_param = ""
    for p in endpoint.params:
        if p.name == "endpointState":
            if p.multiple:
                bad("endpointState parameter cannot be multiple")
            elif not p.nullable:
                bad("endpointState parameter must be nullable")
            if endpoint.returns is None:
                bad("endpointState parameter requires return")
            elif document_format(p.datatype) != document_format(endpoint.returns.datatype):
                bad("endpointState format must match return format")
        elif p.name == "input":
            if not p.multiple:
                bad("input parameter must be multiple")
            elif not p.nullable:
                bad("input parameter must be nullable")
        elif p.name == "session":
            if not is_session(p.datatype):
                bad("session parameter must have session data type")
            elif p.multiple:
                bad("session parameter cannot be multiple")
        elif p.name in ("endpointConstants", "workUnit"):
            if constants_param:
                bad(f"can only declare one of {p.name} and {constants_param}")
            elif p.multiple:
                bad(f"{p.name} parameter cannot be multiple")
            constants_param = constants_param or p.name

    if endpoint.returns is not None and not endpoint.returns.nullable:
        if any(p.name in RESERVED_PARAMS for p in endpoint.params):
            bad("return must be nullable")
    return issues


def validate_endpoint(endpoint: EndpointDeclaration) -> List[Issue]:
    issues: List[Issue] = []
    issues.extend(_check_function_name(endpoint))
    issues.extend(_check_datatypes(endpoint))
    issues.extend(_check_duplicates(endpoint))
    issues.extend(_check_reserved_params(endpoint))
    if endpoint.source is not None and endpoint.module_extension is None:
        issues.append(
            Issue("warning", "missing_module", endpoint.function_name, "no sjs/mjs/xqy module next to the declaration")
        )
    return issues


def validate_service(service: ServiceDeclaration) -> List[Issue]:
    """Validate every endpoint of a service; result is sorted errors-first."""
    issues: List[Issue] = []
    if not service.endpoints:
        issues.append(Issue("warning", "empty_service", "", f"no *.api endpoint declarations in {service.directory}"))
    for name in service.endpoint_names():
        issues.extend(validate_endpoint(service.endpoints[name]))
    return sort_issues(issues)
