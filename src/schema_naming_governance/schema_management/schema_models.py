"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

PRIMITIVE_TYPE_NAMES = frozenset(
    {"boolean", "bytes", "double", "float", "int", "long", "null", "string"}
)


class SchemaKind(str, Enum):
    """Variant tag of a parsed schema node."""

    PRIMITIVE = "primitive"
    RECORD = "record"
    UNION = "union"
    ENUM = "enum"
    FIXED = "fixed"
    ARRAY = "array"
    MAP = "map"


@dataclass(frozen=True, eq=False)
class Schema:
    """Parsed Avro schema node.

    Nodes compare by identity: a named type referenced from several places is the
    same object at every reference, and records may reference themselves.
    """

    kind: SchemaKind
    name: str | None = None
    fields: list[Field] = field(default_factory=list, repr=False)
    branches: tuple[Schema, ...] = ()
    items: Schema | None = None
    values: Schema | None = None
    symbols: tuple[str, ...] = ()
    size: int | None = None

    @property
    def is_record(self) -> bool:
        return self.kind is SchemaKind.RECORD

    @property
    def is_union(self) -> bool:
        return self.kind is SchemaKind.UNION


@dataclass(frozen=True, eq=False)
class Field:
    """Named member of a record schema."""

    name: str
    schema: Schema = field(repr=False)
    record_name: str
