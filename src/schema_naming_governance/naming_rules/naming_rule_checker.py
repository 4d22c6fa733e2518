"""Field naming rule checks."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from schema_naming_governance.schema_management.schema_models import Field

ProgressCallback = Callable[[str], None]


class NamingViolation(AssertionError):
    """Raised for the first field name that breaks a naming rule."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name


def check_field_capitalization(
    fields: Iterable[Field], *, progress: ProgressCallback | None = None
) -> int:
    """Require every field name to start with an uppercase letter.

    Returns the number of fields checked.
    """
    checked = 0
    for field in fields:
        _emit(progress, f"Checking field name {field.name}")
        if not field.name or not field.name[0].isupper():
            raise NamingViolation(
                f"Field name must be capitalized: {field.name} (record {field.record_name})",
                name=field.name,
            )
        checked += 1
    return checked


def group_names_by_lowercase(names: Iterable[str]) -> dict[str, list[str]]:
    """Group distinct names by their lowercase form, keeping first-seen order."""
    groups: dict[str, list[str]] = {}
    for name in dict.fromkeys(names):
        groups.setdefault(name.lower(), []).append(name)
    return groups


def check_consistent_casing(
    fields: Iterable[Field], *, progress: ProgressCallback | None = None
) -> int:
    """Require one capitalization per case-insensitive field name.

    Returns the number of name groups checked.
    """
    groups = group_names_by_lowercase(field.name for field in fields)
    for key, variants in groups.items():
        _emit(progress, f"Checking consistent naming {key}")
        if len(variants) != 1:
            raise NamingViolation(
                f"Inconsistent capitalization for field name '{key}': "
                f"{', '.join(sorted(variants))}",
                name=key,
            )
    return len(groups)


def _emit(progress: ProgressCallback | None, line: str) -> None:
    if progress is not None:
        progress(line)
