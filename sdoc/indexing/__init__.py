"""Term indexing, aggregation, and query matching."""

from sdoc.indexing.aggregator import aggregate_indexes, merge_index
from sdoc.indexing.builder import (
    build_index,
    index_snippet,
    indexed_text,
    is_compound_key,
    tokenize,
)
from sdoc.indexing.query import matches, query_key, search
from sdoc.indexing.words import outline, source_terms, word_list

__all__ = [
    "aggregate_indexes",
    "build_index",
    "index_snippet",
    "indexed_text",
    "is_compound_key",
    "matches",
    "merge_index",
    "outline",
    "query_key",
    "search",
    "source_terms",
    "tokenize",
    "word_list",
]
