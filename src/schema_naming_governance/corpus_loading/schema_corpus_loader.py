"""Schema corpus discovery and loading service."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_naming_governance.schema_management.avro_parsing import (
    AvroSchemaParser,
    SchemaParseError,
)
from schema_naming_governance.schema_management.schema_models import Schema

from .corpus_models import CorpusLoadResult, ParseFailure

_LOGGER = logging.getLogger(__name__)


def discover_schema_files(root: Path | str) -> tuple[Path, ...]:
    """Return every regular file beneath ``root`` in sorted order."""
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Schema directory not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Schema path is not a directory: {root_path}")
    return tuple(sorted(path for path in root_path.rglob("*") if path.is_file()))


def load_schema_corpus(
    root: Path | str, *, parser: AvroSchemaParser | None = None
) -> CorpusLoadResult:
    """Parse every schema file beneath ``root``.

    Files that fail to parse are logged and left out of the result; they are
    reported in ``CorpusLoadResult.failures`` instead of raising.
    """
    root_path = Path(root)
    schema_files = discover_schema_files(root_path)
    resolved_parser = parser or AvroSchemaParser()

    schemas: list[Schema] = []
    failures: list[ParseFailure] = []
    for path in schema_files:
        try:
            schemas.append(resolved_parser.parse_path(path))
        except (SchemaParseError, OSError) as exc:
            _LOGGER.warning("Skipping unparseable schema file %s: %s", path, exc)
            failures.append(ParseFailure(path=path, reason=str(exc)))

    if failures:
        _LOGGER.warning(
            "%d of %d schema files under %s could not be parsed",
            len(failures),
            len(schema_files),
            root_path,
        )
    _LOGGER.info("Loaded %d schemas from %s", len(schemas), root_path)

    return CorpusLoadResult(
        root=root_path,
        schema_files=schema_files,
        schemas=tuple(schemas),
        failures=tuple(failures),
    )
