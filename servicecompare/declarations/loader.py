"""Read service.json and its *.api endpoint declarations from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from servicecompare.errors import DeclarationError
from servicecompare.logging import get_logger

from .datatypes import MODULE_EXTENSIONS
from .models import EndpointDeclaration, ParamDef, ReturnDef, ServiceDeclaration

SERVICE_FILENAME = "service.json"
API_SUFFIX = ".api"

_log = get_logger("declarations")


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise DeclarationError("file not found", path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DeclarationError(f"invalid JSON ({exc.msg} at line {exc.lineno})", path) from exc
    except UnicodeDecodeError as exc:
        raise DeclarationError("not UTF-8 encoded", path) from exc
    except OSError as exc:
        raise DeclarationError(f"cannot read ({exc.strerror})", path) from exc


def _flag(data: Dict[str, Any], key: str, source: Path | str | None) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise DeclarationError(f"'{key}' must be true or false, got {value!r}", source)
    return value


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def normalize_endpoint_directory(value: str) -> str:
    """Ensure a leading and trailing slash: 'dbf/test' -> '/dbf/test/'."""
    value = value.strip()
    if not value.startswith("/"):
        value = "/" + value
    if not value.endswith("/"):
        value += "/"
    return value


def _parse_param(item: Any, source: Path | str | None) -> ParamDef:
    if not isinstance(item, dict):
        raise DeclarationError(f"parameter must be object: {json.dumps(item)}", source)
    name = item.get("name")
    if not isinstance(name, str) or not name:
        raise DeclarationError(f"parameter without name: {json.dumps(item)}", source)
    datatype = item.get("datatype")
    if not isinstance(datatype, str) or not datatype:
        raise DeclarationError(f"parameter '{name}' without datatype", source)
    return ParamDef(
        name=name,
        datatype=datatype,
        multiple=_flag(item, "multiple", source),
        nullable=_flag(item, "nullable", source),
        desc=_text(item, "desc"),
    )


def _parse_return(item: Any, source: Path | str | None) -> ReturnDef:
    if not isinstance(item, dict):
        raise DeclarationError(f"return must be object: {json.dumps(item)}", source)
    datatype = item.get("datatype")
    if not isinstance(datatype, str) or not datatype:
        raise DeclarationError("return without datatype", source)
    return ReturnDef(
        datatype=datatype,
        multiple=_flag(item, "multiple", source),
        nullable=_flag(item, "nullable", source),
        desc=_text(item, "desc"),
    )


def parse_endpoint_declaration(data: Any, source: Path | str | None = None) -> EndpointDeclaration:
    """Build an EndpointDeclaration from one decoded *.api document."""
    if not isinstance(data, dict):
        raise DeclarationError("endpoint declaration must be object", source)
    function_name = data.get("functionName")
    if not isinstance(function_name, str) or not function_name:
        raise DeclarationError("no functionName in endpoint declaration", source)

    raw_params = data.get("params")
    params: list[ParamDef] = []
    if raw_params is not None:
        if not isinstance(raw_params, list):
            raise DeclarationError("params must be array in endpoint declaration", source)
        params = [_parse_param(p, source) for p in raw_params]

    raw_return = data.get("return")
    returns = _parse_return(raw_return, source) if raw_return is not None else None

    return EndpointDeclaration(
        function_name=function_name,
        params=params,
        returns=returns,
        desc=_text(data, "desc"),
        endpoint=_text(data, "endpoint"),
        source=Path(source) if source is not None else None,
    )


def _module_extension(api_path: Path) -> str | None:
    for ext in MODULE_EXTENSIONS:
        if api_path.with_suffix(f".{ext}").is_file():
            return ext
    return None


def load_endpoint_declaration(api_path: Path) -> EndpointDeclaration:
    endpoint = parse_endpoint_declaration(_read_json(api_path), api_path)
    endpoint.module_extension = _module_extension(api_path)
    return endpoint


def resolve_service_file(path: Path | str) -> Path:
    """Accept either the service.json itself or the directory containing it."""
    p = Path(path)
    if p.is_dir():
        return p / SERVICE_FILENAME
    return p


def load_service_declaration(path: Path | str) -> ServiceDeclaration:
    """
    Load a service declaration and every *.api file in its directory.

    Raises DeclarationError naming the offending file on any structural problem.
    """
    service_path = resolve_service_file(path).resolve()
    data = _read_json(service_path)
    if not isinstance(data, dict):
        raise DeclarationError("service declaration must be object", service_path)
    endpoint_dir = data.get("endpointDirectory")
    if not isinstance(endpoint_dir, str) or not endpoint_dir.strip():
        raise DeclarationError("no endpointDirectory in service declaration", service_path)

    service = ServiceDeclaration(
        path=service_path,
        endpoint_directory=normalize_endpoint_directory(endpoint_dir),
        java_class=_text(data, "$javaClass"),
        extra={k: v for k, v in data.items() if k not in ("endpointDirectory", "$javaClass")},
    )
    for api_path in sorted(service_path.parent.glob(f"*{API_SUFFIX}")):
        endpoint = load_endpoint_declaration(api_path)
        if endpoint.function_name in service.endpoints:
            other = service.endpoints[endpoint.function_name].source
            raise DeclarationError(
                f"duplicate functionName '{endpoint.function_name}' (also declared in {other})",
                api_path,
            )
        service.endpoints[endpoint.function_name] = endpoint
    _log.debug("servicecompare: loaded %s (%d endpoints)", service_path, len(service.endpoints))
    return service


__all__ = [
    "API_SUFFIX",
    "SERVICE_FILENAME",
    "load_endpoint_declaration",
    "load_service_declaration",
    "normalize_endpoint_directory",
    "parse_endpoint_declaration",
    "resolve_service_file",
]
