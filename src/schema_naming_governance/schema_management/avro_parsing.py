"""Avro schema document parsing service."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .schema_models import PRIMITIVE_TYPE_NAMES, Field, Schema, SchemaKind

_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_NAMED_TYPES = frozenset({"record", "error", "enum", "fixed"})


class SchemaParseError(Exception):
    """Raised when a schema document cannot be parsed."""


class AvroSchemaParser:
    """Parse Avro schema documents into :class:`Schema` trees.

    One parser is meant to be shared across a corpus: named types defined by an
    earlier document can be referenced by later ones. A document that fails to
    parse registers none of its names.
    """

    def __init__(self) -> None:
        self._named_types: dict[str, Schema] = {}

    @property
    def known_names(self) -> tuple[str, ...]:
        return tuple(self._named_types)

    def parse_path(self, path: Path | str) -> Schema:
        """Read and parse one schema file."""
        schema_path = Path(path)
        try:
            with schema_path.open(encoding="utf-8") as handle:
                text = handle.read()
        except UnicodeDecodeError as exc:
            raise SchemaParseError(f"Schema file is not valid UTF-8: {schema_path}") from exc
        return self.parse_text(text)

    def parse_text(self, text: str) -> Schema:
        """Parse schema JSON text."""
        try:
            document = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise SchemaParseError(f"Invalid Avro schema JSON: {exc}") from exc

        pending: dict[str, Schema] = {}
        try:
            schema = self._parse_node(document, namespace=None, pending=pending)
        except RecursionError as exc:
            raise SchemaParseError("Avro schema is nested too deeply.") from exc
        self._named_types.update(pending)
        return schema

    def _parse_node(
        self, node: Any, *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        if isinstance(node, str):
            if node in PRIMITIVE_TYPE_NAMES:
                return Schema(kind=SchemaKind.PRIMITIVE, name=node)
            return self._resolve_reference(node, namespace, pending)
        if isinstance(node, list):
            return self._parse_union(node, namespace=namespace, pending=pending)
        if isinstance(node, Mapping):
            return self._parse_complex(node, namespace=namespace, pending=pending)
        raise SchemaParseError(f"Unsupported Avro schema segment: {node!r}")

    def _parse_complex(
        self, node: Mapping[str, Any], *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        if "type" not in node:
            raise SchemaParseError("Avro schema object requires a type.")
        type_value = node["type"]
        if isinstance(type_value, (list, Mapping)):
            return self._parse_node(type_value, namespace=namespace, pending=pending)
        if not isinstance(type_value, str):
            raise SchemaParseError(f"Avro type must be a string: {type_value!r}")

        if type_value in PRIMITIVE_TYPE_NAMES:
            return Schema(kind=SchemaKind.PRIMITIVE, name=type_value)
        if type_value in ("record", "error"):
            return self._parse_record(node, namespace=namespace, pending=pending)
        if type_value == "enum":
            return self._parse_enum(node, namespace=namespace, pending=pending)
        if type_value == "fixed":
            return self._parse_fixed(node, namespace=namespace, pending=pending)
        if type_value == "array":
            if "items" not in node:
                raise SchemaParseError("Avro array requires items.")
            items = self._parse_node(node["items"], namespace=namespace, pending=pending)
            return Schema(kind=SchemaKind.ARRAY, items=items)
        if type_value == "map":
            if "values" not in node:
                raise SchemaParseError("Avro map requires values.")
            values = self._parse_node(node["values"], namespace=namespace, pending=pending)
            return Schema(kind=SchemaKind.MAP, values=values)
        return self._resolve_reference(type_value, namespace, pending)

    def _parse_record(
        self, node: Mapping[str, Any], *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        full_name = self._register_name(node, namespace, pending)
        record = Schema(kind=SchemaKind.RECORD, name=full_name)
        pending[full_name] = record

        raw_fields = node.get("fields")
        if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
            raise SchemaParseError(f"Avro record {full_name} requires a list of fields.")

        record_namespace = _namespace_of(full_name)
        seen_names: set[str] = set()
        for raw_field in raw_fields:
            if not isinstance(raw_field, Mapping) or not isinstance(raw_field.get("name"), str):
                raise SchemaParseError(
                    f"Avro field definitions in {full_name} must include a string name."
                )
            field_name = raw_field["name"]
            _validate_name(field_name, kind="field")
            if field_name in seen_names:
                raise SchemaParseError(f"Duplicate field {field_name} in record {full_name}.")
            if "type" not in raw_field:
                raise SchemaParseError(f"Avro field {full_name}.{field_name} requires a type.")
            seen_names.add(field_name)
            field_schema = self._parse_node(
                raw_field["type"], namespace=record_namespace, pending=pending
            )
            record.fields.append(Field(name=field_name, schema=field_schema, record_name=full_name))
        return record

    def _parse_enum(
        self, node: Mapping[str, Any], *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        full_name = self._register_name(node, namespace, pending)
        symbols = node.get("symbols")
        if not isinstance(symbols, Sequence) or isinstance(symbols, str):
            raise SchemaParseError(f"Avro enum {full_name} requires a list of symbols.")
        if not all(isinstance(symbol, str) for symbol in symbols):
            raise SchemaParseError(f"Avro enum {full_name} symbols must be strings.")
        for symbol in symbols:
            _validate_name(symbol, kind="enum symbol")
        if len(set(symbols)) != len(symbols):
            raise SchemaParseError(f"Duplicate enum symbol in {full_name}.")
        enum_schema = Schema(kind=SchemaKind.ENUM, name=full_name, symbols=tuple(symbols))
        pending[full_name] = enum_schema
        return enum_schema

    def _parse_fixed(
        self, node: Mapping[str, Any], *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        full_name = self._register_name(node, namespace, pending)
        size = node.get("size")
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise SchemaParseError(f"Avro fixed {full_name} requires a non-negative size.")
        fixed_schema = Schema(kind=SchemaKind.FIXED, name=full_name, size=size)
        pending[full_name] = fixed_schema
        return fixed_schema

    def _parse_union(
        self, node: list[Any], *, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        if not node:
            raise SchemaParseError("Avro union requires at least one branch.")
        branches: list[Schema] = []
        seen_keys: set[str] = set()
        for raw_branch in node:
            branch = self._parse_node(raw_branch, namespace=namespace, pending=pending)
            if branch.is_union:
                raise SchemaParseError("Avro unions may not immediately contain other unions.")
            key = branch.name if branch.name is not None else branch.kind.value
            if key in seen_keys:
                raise SchemaParseError(f"Duplicate in union: {key}")
            seen_keys.add(key)
            branches.append(branch)
        return Schema(kind=SchemaKind.UNION, branches=tuple(branches))

    def _register_name(
        self, node: Mapping[str, Any], namespace: str | None, pending: dict[str, Schema]
    ) -> str:
        name = node.get("name")
        if not isinstance(name, str):
            raise SchemaParseError(f"Avro {node.get('type')} requires a string name.")
        explicit_namespace = node.get("namespace")
        if explicit_namespace is not None and not isinstance(explicit_namespace, str):
            raise SchemaParseError(f"Avro namespace must be a string: {explicit_namespace!r}")
        if explicit_namespace is not None:
            namespace = explicit_namespace or None

        full_name = name if "." in name or not namespace else f"{namespace}.{name}"
        for segment in full_name.split("."):
            _validate_name(segment, kind="type")
        if full_name in PRIMITIVE_TYPE_NAMES:
            raise SchemaParseError(f"Avro named type may not redefine primitive {full_name}.")
        if full_name in self._named_types or full_name in pending:
            raise SchemaParseError(f"Can't redefine: {full_name}")
        return full_name

    def _resolve_reference(
        self, name: str, namespace: str | None, pending: dict[str, Schema]
    ) -> Schema:
        candidates = [name]
        if namespace and "." not in name:
            candidates.insert(0, f"{namespace}.{name}")
        for candidate in candidates:
            if candidate in pending:
                return pending[candidate]
            if candidate in self._named_types:
                return self._named_types[candidate]
        if name in _NAMED_TYPES or name in ("array", "map"):
            raise SchemaParseError(f"Avro {name} must be declared as an object.")
        raise SchemaParseError(f"Undefined name: {name!r}")


def _namespace_of(full_name: str) -> str | None:
    namespace, _, _ = full_name.rpartition(".")
    return namespace or None


def _validate_name(name: str, *, kind: str) -> None:
    if not _NAME_PATTERN.match(name):
        raise SchemaParseError(f"Illegal {kind} name: {name!r}")
