"""Configuration domain exports."""

from .governance_settings import DEFAULT_CONFIG_FILENAME, DEFAULT_SCHEMA_DIR, GovernanceSettings
from .loader import ConfigurationError, load_configuration

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_SCHEMA_DIR",
    "GovernanceSettings",
    "ConfigurationError",
    "load_configuration",
]
