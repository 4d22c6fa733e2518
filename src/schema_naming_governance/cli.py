"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_naming_governance.configuration import DEFAULT_CONFIG_FILENAME
from schema_naming_governance.naming_rules import NamingViolation
from schema_naming_governance.run_execution import (
    GovernanceRunError,
    RunRequest,
    execute_governance_check,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-naming-governance")
def cli() -> None:
    """Naming convention governance for Avro schemas."""


@cli.command(name="check")
@click.option(
    "--schema-dir",
    "schema_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory holding the Avro schema files (defaults to src/main/avro)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=(
        "Path to the YAML configuration file "
        f"(defaults to ./{DEFAULT_CONFIG_FILENAME} if present)"
    ),
)
@click.option(
    "--fail-on-parse-error",
    is_flag=True,
    default=False,
    help="Fail when a schema file cannot be parsed instead of skipping it.",
)
@click.option("--quiet", is_flag=True, default=False, help="Only print the final verdict.")
@click.option("--verbose", is_flag=True, default=False, help="Log loader progress to stderr.")
def check(
    schema_dir: str | None,
    config_path: str | None,
    fail_on_parse_error: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Check that field names are capitalized and consistently cased."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        outcome = execute_governance_check(
            RunRequest(
                schema_dir=schema_dir,
                config_path=config_path,
                fail_on_parse_error=True if fail_on_parse_error else None,
            ),
            progress=None if quiet else click.echo,
        )
    except (GovernanceRunError, NamingViolation) as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.summary())


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
