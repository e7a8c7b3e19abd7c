"""Pytest configuration. Ensures project root is in sys.path and provides declaration-writing fixtures."""
import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_project_root_to_path():
    root = Path(__file__).resolve().parent.parent
    import sys
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


def _param(name: str, datatype: str, multiple: bool = False, nullable: bool = False) -> dict:
    return {"name": name, "datatype": datatype, "multiple": multiple, "nullable": nullable}


@pytest.fixture
def param() -> Callable[..., dict]:
    return _param


@pytest.fixture
def write_service(tmp_path: Path) -> Callable[..., Path]:
    """
    Write service.json plus one <name>.api (and .sjs module) per endpoint.

    endpoints: {functionName: {"params": [...], "return": {...}}}
    Returns the service.json path.
    """

    def _write(
        dirname: str,
        endpoints: dict[str, dict[str, Any]],
        endpoint_directory: str = "/dbf/test/",
        module_ext: str | None = "sjs",
    ) -> Path:
        d = tmp_path / dirname
        d.mkdir(parents=True, exist_ok=True)
        service = d / "service.json"
        service.write_text(json.dumps({"endpointDirectory": endpoint_directory}), encoding="utf-8")
        for name, body in endpoints.items():
            decl = {"functionName": name, **body}
            (d / f"{name}.api").write_text(json.dumps(decl), encoding="utf-8")
            if module_ext:
                (d / f"{name}.{module_ext}").write_text("'use strict';\n", encoding="utf-8")
        return service

    return _write
