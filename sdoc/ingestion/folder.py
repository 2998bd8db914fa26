"""Fold a flat, leveled snippet sequence into a section tree."""

import logging
from collections.abc import Sequence

from sdoc.models.document import Document
from sdoc.models.snippet import SectionSnippet, Snippet

logger = logging.getLogger(__name__)


def fold_sections(document: Document, snippets: Sequence[Snippet]) -> Document:
    """Nest snippets under the section headings that precede them.

    Uses a stack of open sections: a section at level N closes every open
    section at level >= N, is appended to whatever is still open (the
    document root if nothing is), and then opens itself. Any other snippet
    is a leaf of the innermost open section.

    Children are recorded by position first and the tree is assembled
    afterwards from the last snippet backwards, so every section is built
    once, with all of its subsnippets in original order.

    Args:
        document: Empty document root (level 0) for the file.
        snippets: Classified snippets in original paragraph order.

    Returns:
        A copy of ``document`` whose subsnippets hold the folded tree.
    """
    children: list[list[int]] = [[] for _ in snippets]
    top_level: list[int] = []
    stack: list[int] = []

    for position, snippet in enumerate(snippets):
        if isinstance(snippet, SectionSnippet):
            while stack and snippets[stack[-1]].level >= snippet.level:
                stack.pop()

        if stack:
            children[stack[-1]].append(position)
        else:
            top_level.append(position)

        if isinstance(snippet, SectionSnippet):
            stack.append(position)

    built: list[Snippet] = list(snippets)
    for position in reversed(range(len(snippets))):
        snippet = snippets[position]
        if isinstance(snippet, SectionSnippet):
            built[position] = snippet.model_copy(
                update={"subsnippets": [built[c] for c in children[position]]}
            )

    logger.debug(
        "Folded %d snippets into %d top-level nodes", len(snippets), len(top_level)
    )
    return document.model_copy(
        update={"subsnippets": [built[p] for p in top_level]}
    )
