"""Query matching against snippet indexes."""

from sdoc.indexing.builder import tokenize
from sdoc.models.document import Document
from sdoc.models.snippet import Snippet


def query_key(query: str, separator: str = ":") -> str | None:
    """Turn a query into the single index key it is looked up under.

    One token is looked up as itself. Several tokens are looked up as
    the full ordered phrase ("a b c" becomes "a:b:c"), never as their
    pairwise combinations.

    Returns:
        The key, or None when the query has no tokens.
    """
    tokens = tokenize(query)
    if not tokens:
        return None
    return separator.join(tokens)


def matches(index: dict[str, float], query: str, separator: str = ":") -> bool:
    """Check whether an index matches a query. Empty queries match anything."""
    key = query_key(query, separator)
    return key is None or key in index


def search(document: Document, query: str, separator: str = ":") -> list[Snippet]:
    """Find every snippet in a document whose index matches the query.

    Containers are matched on their aggregated index and leaves on their
    own, so a hit inside a section also keeps every enclosing section.

    Args:
        document: Processed (aggregated) document.
        query: Free-text query.
        separator: Pair separator the document was indexed with.

    Returns:
        Matching snippets in document order.
    """
    return [s for s in document.walk() if matches(s.index, query, separator)]
