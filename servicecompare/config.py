"""Property store for the service-compare task.

Sources, later overriding earlier:
pyproject.toml [tool.servicecompare], .servicecompare/properties.toml,
SERVICECOMPARE_* environment variables, CLI -P name=value overrides.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

from servicecompare.logging import get_logger
from servicecompare.task import BASE_PROPERTY, CUSTOM_PROPERTY

ENV_PREFIX = "SERVICECOMPARE_"
PROPERTIES_FILE = Path(".servicecompare") / "properties.toml"

_log = get_logger("config")


def env_name(prop: str) -> str:
    """customServiceDeclarationFile -> SERVICECOMPARE_CUSTOM_SERVICE_DECLARATION_FILE."""
    return ENV_PREFIX + re.sub(r"(?<!^)(?=[A-Z])", "_", prop).upper()


def _load_toml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError) as exc:
        _log.warning("servicecompare: ignoring unreadable %s (%s)", path, exc)
        return {}


def _string_values(table: Any) -> Dict[str, str]:
    if not isinstance(table, dict):
        return {}
    return {str(k): str(v) for k, v in table.items() if isinstance(v, (str, int, float)) and not isinstance(v, bool)}


def _anchor_paths(props: Dict[str, str], project_root: Path) -> Dict[str, str]:
    """Declaration paths read from project files are relative to the project root."""
    for prop in (CUSTOM_PROPERTY, BASE_PROPERTY):
        value = props.get(prop, "").strip()
        if value:
            props[prop] = str(project_root / value)
    return props


def _from_pyproject(project_root: Path) -> Dict[str, str]:
    data = _load_toml(project_root / "pyproject.toml")
    tool = data.get("tool") or {}
    return _anchor_paths(_string_values(tool.get("servicecompare")), project_root)


def _from_properties_file(project_root: Path) -> Dict[str, str]:
    return _anchor_paths(_string_values(_load_toml(project_root / PROPERTIES_FILE)), project_root)


def _from_env(environ: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for prop in (CUSTOM_PROPERTY, BASE_PROPERTY):
        value = environ.get(env_name(prop), "").strip()
        if value:
            out[prop] = value
    return out


def parse_overrides(items: Iterable[str] | None) -> Dict[str, str]:
    """Parse CLI `-P name=value` items. Raises ValueError on a missing '='."""
    out: Dict[str, str] = {}
    for item in items or ():
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"property override must be name=value, got {item!r}")
        out[name.strip()] = value
    return out


def load_properties(
    project_root: Path | str = ".",
    overrides: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Dict[str, str]:
    """Assemble the property store for one task run."""
    root = Path(project_root)
    props: Dict[str, str] = {}
    props.update(_from_pyproject(root))
    props.update(_from_properties_file(root))
    props.update(_from_env(os.environ if environ is None else environ))
    props.update(overrides or {})
    _log.debug("servicecompare: properties %s", sorted(props))
    return props
