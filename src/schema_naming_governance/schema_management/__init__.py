"""Schema management exports."""

from .avro_parsing import AvroSchemaParser, SchemaParseError
from .schema_models import PRIMITIVE_TYPE_NAMES, Field, Schema, SchemaKind
from .schema_traversal import all_fields, all_records

__all__ = [
    "AvroSchemaParser",
    "Field",
    "PRIMITIVE_TYPE_NAMES",
    "Schema",
    "SchemaKind",
    "SchemaParseError",
    "all_fields",
    "all_records",
]
