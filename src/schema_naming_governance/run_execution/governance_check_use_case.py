"""Governance check use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_naming_governance.configuration import (
    ConfigurationError,
    GovernanceSettings,
    load_configuration,
)
from schema_naming_governance.corpus_loading import load_schema_corpus
from schema_naming_governance.naming_rules import (
    ProgressCallback,
    check_consistent_casing,
    check_field_capitalization,
)
from schema_naming_governance.schema_management import all_fields, all_records

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class GovernanceRunError(Exception):
    """Raised when a governance check cannot be completed."""


def execute_governance_check(
    request: RunRequest, *, progress: ProgressCallback | None = None
) -> RunOutcome:
    """Load the schema corpus and apply both naming rules to all of its fields.

    Naming rule violations propagate as ``NamingViolation``; everything that
    prevents the check from running is raised as ``GovernanceRunError``.
    """
    settings = _resolve_settings(request)

    try:
        corpus = load_schema_corpus(settings.schema_dir)
    except OSError as exc:
        raise GovernanceRunError(str(exc)) from exc

    if settings.fail_on_parse_error and corpus.failures:
        details = "; ".join(f"{failure.path}: {failure.reason}" for failure in corpus.failures)
        raise GovernanceRunError(
            f"{len(corpus.failures)} schema files could not be parsed: {details}"
        )

    fields = tuple(all_fields(corpus.schemas))
    checked_fields = check_field_capitalization(fields, progress=progress)
    name_groups = check_consistent_casing(fields, progress=progress)
    records = sum(1 for _ in all_records(corpus.schemas))

    outcome = RunOutcome(
        schema_dir=corpus.root,
        schema_files=len(corpus.schema_files),
        records=records,
        fields=checked_fields,
        name_groups=name_groups,
        failures=corpus.failures,
    )
    _LOGGER.info("Naming governance passed: %s", outcome.summary())
    return outcome


def _resolve_settings(request: RunRequest) -> GovernanceSettings:
    try:
        settings = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise GovernanceRunError(str(exc)) from exc

    schema_dir = Path(request.schema_dir) if request.schema_dir is not None else settings.schema_dir
    fail_on_parse_error = (
        request.fail_on_parse_error
        if request.fail_on_parse_error is not None
        else settings.fail_on_parse_error
    )
    return GovernanceSettings(
        schema_dir=schema_dir,
        fail_on_parse_error=fail_on_parse_error,
        source_path=settings.source_path,
    )
