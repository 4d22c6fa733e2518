"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_FILENAME = "naming-governance.yaml"
DEFAULT_SCHEMA_DIR = Path("src") / "main" / "avro"


@dataclass(frozen=True)
class GovernanceSettings:
    """Normalized naming governance settings."""

    schema_dir: Path
    fail_on_parse_error: bool = False
    source_path: Path | None = None
