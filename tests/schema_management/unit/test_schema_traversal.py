"""Schema traversal service tests."""

from __future__ import annotations

import json

from schema_naming_governance.schema_management import (
    AvroSchemaParser,
    Schema,
    SchemaKind,
    all_fields,
    all_records,
)


def _parse(document: dict) -> Schema:
    return AvroSchemaParser().parse_text(json.dumps(document))


def test_record_fields_come_before_nested_fields() -> None:
    schema = _parse(
        {
            "type": "record",
            "name": "Root",
            "fields": [
                {
                    "name": "Details",
                    "type": {
                        "type": "record",
                        "name": "Details",
                        "fields": [
                            {
                                "name": "Inner",
                                "type": {
                                    "type": "record",
                                    "name": "Inner",
                                    "fields": [{"name": "Deepest", "type": "string"}],
                                },
                            }
                        ],
                    },
                },
                {"name": "Id", "type": "string"},
            ],
        }
    )

    assert [field.name for field in all_fields(schema)] == ["Details", "Id", "Inner", "Deepest"]
    assert [record.name for record in all_records(schema)] == ["Root", "Details", "Inner"]


def test_union_alternative_records_contribute_their_fields() -> None:
    schema = _parse(
        {
            "type": "record",
            "name": "Payment",
            "fields": [
                {
                    "name": "Method",
                    "type": [
                        "null",
                        {
                            "type": "record",
                            "name": "Card",
                            "fields": [{"name": "CardToken", "type": "string"}],
                        },
                        {
                            "type": "record",
                            "name": "Invoice",
                            "fields": [{"name": "InvoiceNumber", "type": "string"}],
                        },
                    ],
                }
            ],
        }
    )

    assert [field.name for field in all_fields(schema)] == ["Method", "CardToken", "InvoiceNumber"]
    assert [record.name for record in all_records(schema)] == ["Payment", "Card", "Invoice"]


def test_top_level_union_is_traversed() -> None:
    schema = _parse(
        [
            {"type": "record", "name": "A", "fields": [{"name": "First", "type": "int"}]},
            {"type": "record", "name": "B", "fields": [{"name": "Second", "type": "int"}]},
        ]
    )

    assert schema.kind is SchemaKind.UNION
    assert [field.name for field in all_fields(schema)] == ["First", "Second"]


def test_named_type_is_revisited_once_per_reference() -> None:
    schema = _parse(
        {
            "type": "record",
            "name": "Person",
            "fields": [
                {
                    "name": "Home",
                    "type": {
                        "type": "record",
                        "name": "Address",
                        "fields": [{"name": "Street", "type": "string"}],
                    },
                },
                {"name": "Work", "type": "Address"},
            ],
        }
    )

    assert [field.name for field in all_fields(schema)] == ["Home", "Work", "Street", "Street"]
    assert [record.name for record in all_records(schema)] == ["Person", "Address", "Address"]


def test_recursive_record_traversal_terminates() -> None:
    schema = _parse(
        {
            "type": "record",
            "name": "Node",
            "fields": [
                {"name": "Value", "type": "int"},
                {"name": "Next", "type": ["null", "Node"]},
            ],
        }
    )

    assert [field.name for field in all_fields(schema)] == ["Value", "Next"]
    assert [record.name for record in all_records(schema)] == ["Node"]


def test_array_map_and_primitive_schemas_are_leaves() -> None:
    schema = _parse(
        {
            "type": "record",
            "name": "Root",
            "fields": [
                {
                    "name": "Lines",
                    "type": {
                        "type": "array",
                        "items": {
                            "type": "record",
                            "name": "Line",
                            "fields": [{"name": "Sku", "type": "string"}],
                        },
                    },
                },
                {"name": "Labels", "type": {"type": "map", "values": "string"}},
            ],
        }
    )

    assert [field.name for field in all_fields(schema)] == ["Lines", "Labels"]
    assert list(all_fields(_parse("string"))) == []
    assert list(all_records(_parse("string"))) == []


def test_traversal_chains_multiple_schemas_and_is_repeatable() -> None:
    parser = AvroSchemaParser()
    first = parser.parse_text(
        json.dumps({"type": "record", "name": "A", "fields": [{"name": "One", "type": "int"}]})
    )
    second = parser.parse_text(
        json.dumps({"type": "record", "name": "B", "fields": [{"name": "Two", "type": "A"}]})
    )

    names = [field.name for field in all_fields([first, second])]

    assert names == ["One", "Two", "One"]
    assert [field.name for field in all_fields([first, second])] == names
    assert list(all_fields([])) == []
