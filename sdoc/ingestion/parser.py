"""Paragraph splitting, role classification, and prelude extraction."""

import logging
import re

from sdoc.models.snippet import (
    CommentSnippet,
    PipeSnippet,
    PreludeSnippet,
    Snippet,
    SourceSnippet,
)

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\n+")

COMMENT_START = re.compile(r"\s*[A-Z]")
PIPE_START = re.compile(r"\s*\|")

# "<name> | <author>" on the first line, then an optional body
PRELUDE_PATTERN = re.compile(r"\s*([^|]+)\|(.*)\n?([\s\S]*)")


def split_paragraphs(text: str) -> list[str]:
    """Split raw text into paragraphs on runs of blank lines.

    Leading whitespace of each paragraph is preserved; section levels are
    measured from it later on.

    Args:
        text: Raw content of one file.

    Returns:
        Paragraph strings in order. Empty input yields no paragraphs.
    """
    if not text:
        return []
    return PARAGRAPH_BREAK.split(text)


def classify_paragraph(text: str) -> Snippet:
    """Assign an initial role from the paragraph's first non-blank character.

    Args:
        text: One paragraph.

    Returns:
        A CommentSnippet, PipeSnippet, or SourceSnippet.
    """
    if COMMENT_START.match(text):
        return CommentSnippet(text=text)
    if PIPE_START.match(text):
        return PipeSnippet(text=text)
    return SourceSnippet(text=text)


def parse_paragraphs(text: str) -> list[Snippet]:
    """Split and classify a file. Classification is total over the split."""
    return [classify_paragraph(p) for p in split_paragraphs(text)]


def extract_prelude(snippet: Snippet) -> Snippet:
    """Turn a ``Module name | Author`` first paragraph into a prelude.

    Everything after the first line becomes the prelude's text. Snippets
    that do not have the name/author shape are returned unchanged.
    """
    match = PRELUDE_PATTERN.match(snippet.text)
    if not match or not match.group(1).strip():
        return snippet

    logger.debug("Prelude detected: %s", match.group(1).strip())
    return PreludeSnippet(
        name=match.group(1).strip(),
        author=match.group(2).strip(),
        text=match.group(3) or "",
    )
