"""Schema corpus loading exports."""

from .corpus_models import CorpusLoadResult, ParseFailure
from .schema_corpus_loader import discover_schema_files, load_schema_corpus

__all__ = [
    "CorpusLoadResult",
    "ParseFailure",
    "discover_schema_files",
    "load_schema_corpus",
]
