"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from schema_naming_governance.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_command_returns_clean_click_error(capsys) -> None:
    exit_code = main(["lint"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such command" in captured.err


def test_missing_schema_directory_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--schema-dir", str(tmp_path / "missing")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema directory not found" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_file_returns_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["check", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
