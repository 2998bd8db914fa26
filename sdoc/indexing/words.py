"""Word listing and outline views over a processed document."""

from sdoc.indexing.builder import is_compound_key
from sdoc.models.document import Document
from sdoc.models.snippet import SourceSnippet


def source_terms(document: Document) -> dict[str, float]:
    """Union of the indexes of all source snippets (later keys win)."""
    terms: dict[str, float] = {}
    for snippet in document.walk():
        if isinstance(snippet, SourceSnippet):
            terms.update(snippet.index)
    return terms


def word_list(document: Document, separator: str = ":") -> list[str]:
    """Sorted plain terms that occur in source code, for an alphabetic index."""
    return sorted(
        key for key in source_terms(document) if not is_compound_key(key, separator)
    )


def outline(document: Document) -> list[tuple[int, str]]:
    """Table of contents as ``(level, title)`` pairs in document order."""
    return [(s.level, s.section) for s in document.sections()]
