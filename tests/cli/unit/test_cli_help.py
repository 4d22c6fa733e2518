"""CLI smoke tests."""

from click.testing import CliRunner
from schema_naming_governance.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "check" in result.output


def test_check_command_documents_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--help"])

    assert result.exit_code == 0
    for option in ("--schema-dir", "--config", "--fail-on-parse-error", "--quiet", "--verbose"):
        assert option in result.output
