"""Pipe-paragraph disambiguation: numbered lists versus verbatim blocks.

A paragraph starting with ``|`` is one the author marked as documentation
even though it looks like code. It is either a numbered list or an example
(ASCII art and code render the same way).

| 1. Numbered lists start with one or two digits, a dot, one or two spaces,
     and a letter.
  2. Anything else is verbatim text that only loses its leading pipe.

Numbering is not tracked past the first item: a list numbered 2, 3, 5
comes out as 2, 3, 4.
"""

import re

from sdoc.models.snippet import EnumerateSnippet, PipeSnippet, PreSnippet, Snippet

NUMBERED_LIST_START = re.compile(r"\s*\|?\s*(\d{1,2})\.\s{1,2}[A-Za-z]")

# An item runs across lines until a line that starts with a digit.
LIST_ITEM = re.compile(r"\.\s{1,2}([A-Za-z](?:.|\n\s*[^\s0-9])*)")

LEADING_PIPE = re.compile(r"^(\s*)\|")


def extract_items(text: str) -> list[str]:
    """Return the text of every numbered item, inner newlines preserved."""
    return [m.group(1) for m in LIST_ITEM.finditer(text)]


def disambiguate_pipe(snippet: Snippet) -> Snippet:
    """Resolve a pipe paragraph into an enumerate or a pre snippet.

    Args:
        snippet: Any snippet. Only pipe paragraphs are considered.

    Returns:
        EnumerateSnippet with ``start`` and ``items`` for numbered lists,
        PreSnippet with the first pipe replaced by a space otherwise, or
        the snippet unchanged if it is not a pipe paragraph.
    """
    if not isinstance(snippet, PipeSnippet):
        return snippet

    number = NUMBERED_LIST_START.match(snippet.text)
    if number:
        return EnumerateSnippet(
            text=snippet.text,
            start=int(number.group(1)),
            items=extract_items(snippet.text),
            index=snippet.index,
        )

    return PreSnippet(
        text=LEADING_PIPE.sub(r"\1 ", snippet.text, count=1),
        index=snippet.index,
    )
