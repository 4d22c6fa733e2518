"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_naming_governance.corpus_loading.corpus_models import ParseFailure


@dataclass(frozen=True)
class RunRequest:
    """Input contract for one governance check.

    ``schema_dir`` and ``fail_on_parse_error`` override configuration values when set.
    """

    schema_dir: Path | str | None = None
    config_path: Path | str | None = None
    fail_on_parse_error: bool | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one passing governance check."""

    schema_dir: Path
    schema_files: int
    records: int
    fields: int
    name_groups: int
    failures: tuple[ParseFailure, ...]

    @property
    def skipped(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        return (
            f"checked {self.fields} fields in {self.records} records from "
            f"{self.schema_files} schema files ({self.skipped} skipped)"
        )
