import json
import logging
from pathlib import Path

import pytest

from application import (
    TaintParseReport,
    collect_specs,
    parse_taint_specs,
    render_report_text,
    serialize_report,
)
from domain.taints import TaintEffect


def test_successful_report() -> None:
    report = parse_taint_specs(["foo=abc:NoSchedule", "bar-"], source="argv")

    assert report.ok is True
    assert report.error is None
    assert [str(t) for t in report.to_add] == ["foo=abc:NoSchedule"]
    assert [str(t) for t in report.to_remove] == ["bar-"]


def test_failed_report_has_no_partial_output() -> None:
    report = parse_taint_specs(["foo=abc:NoSchedule", "foo=abc:NoSchedule"])

    assert report.ok is False
    assert report.to_add == []
    assert report.to_remove == []
    assert report.error_type == "DuplicateTaintError"
    assert report.spec == "foo=abc:NoSchedule"


def test_rejection_is_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="application.taints"):
        parse_taint_specs(["foo=abc:bogus"])

    assert "invalid taint effect: bogus" in caplog.text


def test_collect_specs_puts_files_before_argv(tmp_path: Path) -> None:
    first = tmp_path / "a.txt"
    first.write_text("a:NoSchedule\n", encoding="utf-8")
    second = tmp_path / "b.yaml"
    second.write_text("taints: [b:NoExecute]\n", encoding="utf-8")

    specs, source = collect_specs(["c-"], [first, second])

    assert specs == ["a:NoSchedule", "b:NoExecute", "c-"]
    assert source == f"{first},{second},argv"


def test_collect_specs_argv_only() -> None:
    assert collect_specs(["x:NoSchedule"], []) == (["x:NoSchedule"], "argv")


def test_serialize_report_json(tmp_path: Path) -> None:
    report = parse_taint_specs(["foo=abc:NoSchedule", "bar-", "baz:NoExecute-"])
    out = tmp_path / "out" / "report.json"

    text = serialize_report(report, out)
    payload = json.loads(text)

    assert out.read_text(encoding="utf-8").strip() == text
    assert payload["to_add"] == [{"key": "foo", "value": "abc", "effect": "NoSchedule"}]
    assert payload["to_remove"] == [
        {"key": "bar", "effect": None},
        {"key": "baz", "effect": "NoExecute"},
    ]


def test_report_json_round_trips_into_model() -> None:
    report = parse_taint_specs(["foo=abc:PreferNoSchedule"])

    restored = TaintParseReport.model_validate_json(serialize_report(report))

    assert restored == report
    assert restored.to_add[0].effect is TaintEffect.PREFER_NO_SCHEDULE


def test_render_report_text() -> None:
    ok = parse_taint_specs(["foo=abc:NoSchedule", "bar-"])
    bad = parse_taint_specs(["foo"])

    assert render_report_text(ok) == "+ foo=abc:NoSchedule\n- bar-"
    assert render_report_text(bad) == "error: invalid taint spec: foo"
