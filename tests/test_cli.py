"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

import jsdoc_render.cli as cli


def test_renders_file_to_output(sections_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "API.md"

    exit_code = cli.main([str(sections_file), "-o", str(output), "--title", "API"])

    assert exit_code == 0
    content = output.read_text(encoding="utf-8")
    assert content.startswith("# API\n\n- [nested-hamt](#nestedhamt)\n")
    assert "### <a id='len'></a>len()" in content
    assert "setRaw" not in content
    assert content.endswith("\n")


def test_reads_stdin_and_writes_stdout(
    len_section,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(json.dumps([len_section])))

    exit_code = cli.main(["-", "--no-toc"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("### <a id='len'></a>len()")


def test_flags_override_config(
    sections_file: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "config.json"
    config.write_text(
        json.dumps({"options": {"title": "From config"}, "style": {"privateMarker": "(p)"}}),
        encoding="utf-8",
    )

    exit_code = cli.main(
        [
            str(sections_file),
            "--config",
            str(config),
            "--dialect",
            "markdown",
            "--params",
            "table",
            "--private",
            "--no-toc",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("# From config\n\n## nested-hamt")
    assert "<details>" not in out
    assert "| `options.prefix` | string, optional | Key prefix |" in out
    assert "### setRaw() (p) _private_" in out


def test_no_signature_flag(sections_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([str(sections_file), "--no-signature"]) == 0
    assert "<details>" not in capsys.readouterr().out


def test_invalid_input_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")

    exit_code = cli.main([str(bad)])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.startswith("ERROR: Could not load sections from")
    assert "invalid JSON" in err


def test_strict_mode_lists_issues(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps([{"kind": "function"}]), encoding="utf-8")

    assert cli.main([str(path)]) == 0
    capsys.readouterr()

    exit_code = cli.main([str(path), "--strict"])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "ERROR: Strict validation found 1 issue." in err
    assert "  section #1: missing name" in err


def test_bad_config_reports_error(
    sections_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"preset": "rst"}), encoding="utf-8")

    assert cli.main([str(sections_file), "--config", str(config)]) == 1
    assert "unknown preset 'rst'" in capsys.readouterr().err


def test_unexpected_errors_are_reported(
    sections_file: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def _boom(*_args, **_kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "render_document", _boom)

    assert cli.main([str(sections_file)]) == 1
    assert "ERROR: Unexpected: boom" in capsys.readouterr().err


def test_log_file_records_events(sections_file: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"

    assert cli.main([str(sections_file), "-o", str(tmp_path / "API.md"), "--log-file", str(log_file)]) == 0

    content = log_file.read_text(encoding="utf-8")
    assert "=== input_loaded ===" in content
    assert "section_count: 7" in content
    assert "=== document_written ===" in content


def test_strict_mode_rejects_wrongly_shaped_fields(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "doc.json"
    path.write_text(
        json.dumps([{"name": "f", "kind": "function", "params": "nope"}]), encoding="utf-8"
    )

    assert cli.main([str(path), "--no-toc"]) == 0
    assert "### <a id='f'></a>f()" in capsys.readouterr().out

    assert cli.main([str(path), "--strict"]) == 1
    assert "section #1 field 'params'" in capsys.readouterr().err


def test_strict_failure_is_logged_on_one_line(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps([{"kind": "function", "params": [{}]}]), encoding="utf-8")
    log_file = tmp_path / "run.log"

    assert cli.main([str(path), "--strict", "--log-file", str(log_file)]) == 1

    content = log_file.read_text(encoding="utf-8")
    assert "=== strict_validation_failed ===" in content
    assert "issue_count: 2" in content
    assert "first_issue: section #1: missing name" in content
