from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from fullname_parser.cli import _safe_exit, app


def test_missing_file(tmp_path: Path) -> None:
    out_path = tmp_path / "out.jsonl"
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(missing), "--out", str(out_path)])
    assert result.exit_code == 3
    assert str(missing) in result.output


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--config", str(bad_cfg), "David Davis"])
    assert result.exit_code == 4


def test_unparsable_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("titles: [unclosed\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--config", str(bad_cfg), "David Davis"])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["parse", "--config", str(tmp_path / "nope.yml"), "David Davis"]
    )
    assert result.exit_code == 4


def test_unknown_part() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--part", "surname", "David Davis"])
    assert result.exit_code == 4
    assert "Unsupported name part 'surname'." in result.output


def test_strict_parse_failure() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "Edward"])
    assert result.exit_code == 5
    assert "Couldn't find a last name." in result.output


def test_strict_run_failure(tmp_path: Path) -> None:
    in_path = tmp_path / "names.txt"
    in_path.write_text("David Davis\nEdward\n", encoding="utf-8")
    out_path = tmp_path / "out.jsonl"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path), "--out", str(out_path)])
    assert result.exit_code == 5
    assert not out_path.exists()


def test_safe_exit_raises_typer_exit(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(typer.Exit) as excinfo:
        _safe_exit(4, "bad config")
    assert excinfo.value.exit_code == 4
    assert "bad config" in capsys.readouterr().err
