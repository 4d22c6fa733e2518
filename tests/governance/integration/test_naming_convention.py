"""Naming convention governance over the repository schema corpus.

- Field names are capital case
- Only a single variant of capitalization for all fields with the same lower case name
"""

from __future__ import annotations

from pathlib import Path

from schema_naming_governance.configuration import DEFAULT_SCHEMA_DIR
from schema_naming_governance.run_execution import RunRequest, execute_governance_check


def _schema_dir() -> Path:
    return Path(__file__).resolve().parents[3] / DEFAULT_SCHEMA_DIR


def test_fields_capitalized() -> None:
    outcome = execute_governance_check(RunRequest(schema_dir=_schema_dir()), progress=print)

    assert outcome.fields > 0
    assert outcome.skipped == 0
