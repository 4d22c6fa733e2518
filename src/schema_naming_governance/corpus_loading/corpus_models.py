"""Schema corpus entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_naming_governance.schema_management.schema_models import Schema


@dataclass(frozen=True)
class ParseFailure:
    """Schema file excluded from the corpus because it could not be parsed."""

    path: Path
    reason: str


@dataclass(frozen=True)
class CorpusLoadResult:
    """Schemas parsed from one schema directory."""

    root: Path
    schema_files: tuple[Path, ...]
    schemas: tuple[Schema, ...]
    failures: tuple[ParseFailure, ...]
