"""Tests for servicecompare.generator (Generator.compare_services, ComparisonReport)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from servicecompare.errors import DeclarationError, ServiceComparisonError
from servicecompare.generator import ComparisonReport, Generator


def _docify(param, nullable: bool = False) -> dict:
    return {
        "params": [param("value", "string", nullable=nullable)],
        "return": {"datatype": "jsonDocument", "nullable": True},
    }


def test_compare_compatible_services(write_service, param) -> None:
    base = write_service("base", {"docify": _docify(param, nullable=False)})
    custom = write_service("custom", {"docify": _docify(param, nullable=True), "extra": {}})

    report = Generator().compare_services(str(custom), str(base))

    assert isinstance(report, ComparisonReport)
    assert report.ok is True
    assert report.base is not None
    assert report.diff is not None
    assert report.diff["endpoints"]["added"] == ["extra"]
    assert report.counts()["error"] == 0


def test_compare_incompatible_raises_with_report(write_service, param) -> None:
    base = write_service("base", {"docify": _docify(param, nullable=True), "gone": {}})
    custom = write_service("custom", {"docify": _docify(param, nullable=False)})

    with pytest.raises(ServiceComparisonError) as exc:
        Generator().compare_services(str(custom), str(base))

    report = exc.value.report
    assert report.ok is False
    codes = {c["code"] for c in report.diff["changes"]}
    assert codes == {"endpoint_removed", "param_nullable_narrowed"}
    assert "2 error(s)" in str(exc.value)


def test_single_argument_validates_custom_only(write_service, param) -> None:
    custom = write_service("custom", {"docify": _docify(param)})
    report = Generator().compare_services(str(custom))
    assert report.base is None
    assert report.diff is None
    assert report.ok is True
    assert "1 endpoint(s) validated" in report.to_text()


def test_single_argument_fails_on_invalid_custom(write_service, param) -> None:
    custom = write_service("custom", {"bad": {"params": [param("x", "nope")]}})
    with pytest.raises(ServiceComparisonError) as exc:
        Generator().compare_services(str(custom))
    assert [i.code for i in exc.value.report.custom_issues] == ["unknown_datatype"]


def test_invalid_base_fails_even_if_diff_is_clean(write_service, param) -> None:
    endpoints = {"bad": {"params": [param("x", "nope")]}}
    base = write_service("base", endpoints)
    custom = write_service("custom", endpoints)
    with pytest.raises(ServiceComparisonError) as exc:
        Generator().compare_services(str(custom), str(base))
    report = exc.value.report
    assert report.diff["compatible"] is True
    assert report.base_issues and report.custom_issues


def test_missing_declaration_raises_declaration_error(tmp_path: Path) -> None:
    with pytest.raises(DeclarationError):
        Generator().compare_services(str(tmp_path / "missing" / "service.json"))


def test_summary_logged_at_info(write_service, param, caplog, monkeypatch) -> None:
    custom = write_service("custom", {"docify": _docify(param)})
    monkeypatch.setattr(logging.getLogger("servicecompare"), "propagate", True)
    with caplog.at_level(logging.INFO, logger="servicecompare.generator"):
        Generator().compare_services(str(custom))
    assert any("OK (0 errors" in r.getMessage() for r in caplog.records)


def test_report_to_dict_shape(write_service, param) -> None:
    base = write_service("base", {"docify": _docify(param)})
    custom = write_service("custom", {"docify": _docify(param)})
    data = Generator().compare_services(str(custom), str(base)).to_dict()
    assert set(data) == {"custom", "base", "ok", "summary", "validation", "diff"}
    assert data["ok"] is True
    assert data["validation"] == {"custom": [], "base": []}
