"""Proximity-weighted term index for snippets.

Every token counts 1 towards its own key. Every ordered pair of tokens
that are ``d`` positions apart (``0 < d < window``) adds ``1 / d`` to the
compound key ``"first:second"``. Relevance adds up over all occurrences and
is not normalized by length, so in "foo bar bif baz" the pair "foo:bif"
scores 0.5.
"""

import re

from sdoc.config import IndexingConfig
from sdoc.models.snippet import SectionSnippet, Snippet

TOKEN_SEPARATOR = re.compile(r"[^-\w]+")


def tokenize(text: str) -> list[str]:
    """Split text on runs of anything but word characters and hyphens."""
    return [token for token in TOKEN_SEPARATOR.split(text) if token]


def is_compound_key(key: str, separator: str = ":") -> bool:
    """Tell a term-pair key apart from a plain term."""
    return separator in key


def build_index(text: str, config: IndexingConfig | None = None) -> dict[str, float]:
    """Build the term and term-pair relevance map for a piece of text.

    Args:
        text: Text to index.
        config: Window size and pair separator. Defaults are used when omitted.

    Returns:
        Mapping from key to summed relevance.
    """
    config = config or IndexingConfig()
    tokens = tokenize(text)
    index: dict[str, float] = {}

    for i, token in enumerate(tokens):
        index[token] = index.get(token, 0.0) + 1.0
        for j in range(i + 1, min(i + config.window, len(tokens))):
            key = f"{token}{config.pair_separator}{tokens[j]}"
            index[key] = index.get(key, 0.0) + 1 / (j - i)

    return index


def indexed_text(snippet: Snippet, include_section_title: bool = True) -> str:
    """Text a snippet is indexed under: its heading (if any) and its body."""
    if include_section_title and isinstance(snippet, SectionSnippet):
        # space keeps an unindented body off the last title word
        return f"{snippet.section} {snippet.text}"
    return snippet.text


def index_snippet(snippet: Snippet, config: IndexingConfig | None = None) -> Snippet:
    """Return a copy of the snippet carrying a freshly built index."""
    config = config or IndexingConfig()
    text = indexed_text(snippet, config.include_section_title)
    return snippet.model_copy(update={"index": build_index(text, config)})
