import json
from pathlib import Path

import pytest

import main as cli


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("TAINT_SPECS_FILE", raising=False)
    monkeypatch.chdir(tmp_path)


def test_cli_prints_json_report(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["foo=abc:NoSchedule", "dedicated-"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["to_remove"] == [{"key": "dedicated", "effect": None}]


def test_cli_invalid_spec_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--format", "text", "foo=abc=xyz:NoSchedule"])

    assert code == 1
    assert capsys.readouterr().out.strip() == "error: invalid taint spec: foo=abc=xyz:NoSchedule"


def test_cli_reads_spec_file_and_writes_output(tmp_path: Path) -> None:
    spec_file = tmp_path / "taints.yaml"
    spec_file.write_text("taints:\n  - gpu=a100:NoSchedule\n", encoding="utf-8")
    out = tmp_path / "report.txt"

    code = cli.main(["--file", str(spec_file), "--format", "text", "--output", str(out), "spot-"])

    assert code == 0
    assert out.read_text(encoding="utf-8") == "+ gpu=a100:NoSchedule\n- spot-\n"


def test_cli_uses_env_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    # registered with monkeypatch so the value loaded from .env is undone afterwards
    monkeypatch.setenv("TAINT_SPECS_FILE", "unused")
    spec_file = tmp_path / "taints.txt"
    spec_file.write_text("foo:NoExecute\n", encoding="utf-8")
    (tmp_path / ".env").write_text(f"TAINT_SPECS_FILE={spec_file}\n", encoding="utf-8")

    code = cli.main(["--format", "text"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "+ foo:NoExecute"


def test_cli_without_specs_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 2
    assert "no taint specs given" in capsys.readouterr().err


def test_cli_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.main(["--file", str(tmp_path / "nope.yaml")])
