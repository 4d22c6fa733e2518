"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .governance_settings import DEFAULT_CONFIG_FILENAME, DEFAULT_SCHEMA_DIR, GovernanceSettings

_KNOWN_KEYS = frozenset({"schema_dir", "fail_on_parse_error"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(
    config_path: Path | str | None = None, *, working_dir: Path | str | None = None
) -> GovernanceSettings:
    """Load governance settings.

    Without an explicit ``config_path`` the default configuration file in
    ``working_dir`` (the current directory when omitted) is used if it exists;
    otherwise the built-in defaults apply.
    """
    base_dir = Path(working_dir) if working_dir is not None else Path.cwd()
    if config_path is None:
        default_path = base_dir / DEFAULT_CONFIG_FILENAME
        if not default_path.is_file():
            return GovernanceSettings(schema_dir=base_dir / DEFAULT_SCHEMA_DIR)
        path = default_path
    else:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown_keys = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown_keys:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown_keys)}")

    schema_dir = _parse_schema_dir(parsed.get("schema_dir"), path.parent)
    fail_on_parse_error = _require_bool(
        parsed.get("fail_on_parse_error", False), "fail_on_parse_error"
    )

    return GovernanceSettings(
        schema_dir=schema_dir,
        fail_on_parse_error=fail_on_parse_error,
        source_path=path,
    )


def _parse_schema_dir(value: Any, base_path: Path) -> Path:
    if value is None:
        return base_path / DEFAULT_SCHEMA_DIR
    if not isinstance(value, str):
        raise ConfigurationError("schema_dir must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError("schema_dir must not be empty.")
    return _resolve_path(base_path, stripped)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
