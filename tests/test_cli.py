"""CLI tests: compare / validate / help through servicecompare_cli.main."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from servicecompare_cli import main


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch) -> None:
    """Run from an empty directory with no SERVICECOMPARE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("SERVICECOMPARE_CUSTOM_SERVICE_DECLARATION_FILE", "SERVICECOMPARE_BASE_SERVICE_DECLARATION_FILE"):
        monkeypatch.delenv(name, raising=False)


def _endpoint(param, datatype: str) -> dict:
    return {"params": [param("value", datatype)], "return": {"datatype": "string", "nullable": True}}


def test_compare_compatible_exit_zero(write_service, param, capsys) -> None:
    base = write_service("base", {"f": _endpoint(param, "string")})
    custom = write_service("custom", {"f": _endpoint(param, "string")})
    code = main(["compare", "--custom", str(custom), "--base", str(base), "--quiet"])
    assert code == 0
    assert "COMPATIBLE" in capsys.readouterr().out


def test_compare_incompatible_exit_one_json(write_service, param, capsys) -> None:
    base = write_service("base", {"f": _endpoint(param, "string")})
    custom = write_service("custom", {"f": _endpoint(param, "int")})
    code = main(["compare", "--custom", str(custom), "--base", str(base), "--json", "--quiet"])
    assert code == 1
    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is False
    assert data["diff"]["changes"][0]["code"] == "param_datatype_changed"


def test_compare_custom_from_property_flag(write_service, param, capsys) -> None:
    custom = write_service("custom", {"f": _endpoint(param, "string")})
    code = main(["compare", "-P", f"customServiceDeclarationFile={custom}", "--json", "--quiet"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["base"] is None
    assert data["custom"] == str(custom.resolve())


def test_compare_custom_from_pyproject(write_service, param, tmp_path: Path, capsys) -> None:
    custom = write_service("custom", {"f": _endpoint(param, "string")})
    (tmp_path / "pyproject.toml").write_text(
        f"[tool.servicecompare]\ncustomServiceDeclarationFile = '{custom}'\n", encoding="utf-8"
    )
    assert main(["compare", "--json", "--quiet"]) == 0
    assert json.loads(capsys.readouterr().out)["ok"] is True


def test_compare_missing_custom_fails(capsys) -> None:
    code = main(["compare"])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "customServiceDeclarationFile not specified" in captured.err


def test_compare_bad_override_fails(capsys) -> None:
    assert main(["compare", "-P", "oops"]) == 1
    assert "name=value" in capsys.readouterr().err


def test_validate_ok_and_broken(write_service, param, capsys) -> None:
    good = write_service("good", {"f": _endpoint(param, "string")})
    assert main(["validate", str(good.parent), "--quiet"]) == 0
    capsys.readouterr()

    bad = write_service("bad", {"f": _endpoint(param, "strng")})
    assert main(["validate", str(bad), "--quiet"]) == 1
    captured = capsys.readouterr()
    assert "unknown datatype 'strng'" in captured.out
    assert "not compatible" in captured.err


def test_validate_unreadable_declaration(tmp_path: Path, capsys) -> None:
    (tmp_path / "service.json").write_text("{", encoding="utf-8")
    assert main(["validate", str(tmp_path), "--quiet"]) == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_help_and_no_command(capsys) -> None:
    assert main(["help"]) == 0
    assert "compare" in capsys.readouterr().out
    assert main([]) == 0
    assert "usage: servicecompare" in capsys.readouterr().out


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "servicecompare 1.0.0" in capsys.readouterr().out


def test_compare_project_relative_path(write_service, param, tmp_path: Path, capsys) -> None:
    write_service("proj/decl", {"f": _endpoint(param, "string")})
    (tmp_path / "proj" / "pyproject.toml").write_text(
        "[tool.servicecompare]\ncustomServiceDeclarationFile = 'decl/service.json'\n", encoding="utf-8"
    )
    assert main(["compare", "--project", "proj", "--json", "--quiet"]) == 0
    assert json.loads(capsys.readouterr().out)["ok"] is True
