"""Schema traversal service.

Flattens parsed schemas into the fields and records reachable through record and
union structure. Array, map, enum, fixed and primitive nodes are leaves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .schema_models import Field, Schema


def all_fields(schemas: Schema | Iterable[Schema]) -> Iterator[Field]:
    """Yield every reachable field, depth first, own fields before nested ones.

    A named record referenced from several places is visited once per reference.
    A record is not re-entered while it is already being expanded, which keeps
    recursive types finite.
    """
    for schema in _as_schemas(schemas):
        yield from _fields_of(schema, frozenset())


def all_records(schemas: Schema | Iterable[Schema]) -> Iterator[Schema]:
    """Yield every reachable record schema in the same order as :func:`all_fields`."""
    for schema in _as_schemas(schemas):
        yield from _records_of(schema, frozenset())


def _fields_of(schema: Schema, expanding: frozenset[Schema]) -> Iterator[Field]:
    if schema.is_record:
        if schema in expanding:
            return
        nested = expanding | {schema}
        yield from schema.fields
        for field in schema.fields:
            yield from _fields_of(field.schema, nested)
    elif schema.is_union:
        for branch in schema.branches:
            yield from _fields_of(branch, expanding)


def _records_of(schema: Schema, expanding: frozenset[Schema]) -> Iterator[Schema]:
    if schema.is_record:
        if schema in expanding:
            return
        nested = expanding | {schema}
        yield schema
        for field in schema.fields:
            yield from _records_of(field.schema, nested)
    elif schema.is_union:
        for branch in schema.branches:
            yield from _records_of(branch, expanding)


def _as_schemas(schemas: Schema | Iterable[Schema]) -> Iterable[Schema]:
    if isinstance(schemas, Schema):
        return (schemas,)
    return schemas
