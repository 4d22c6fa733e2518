"""Naming rule exports."""

from .naming_rule_checker import (
    NamingViolation,
    ProgressCallback,
    check_consistent_casing,
    check_field_capitalization,
    group_names_by_lowercase,
)

__all__ = [
    "NamingViolation",
    "ProgressCallback",
    "check_consistent_casing",
    "check_field_capitalization",
    "group_names_by_lowercase",
]
