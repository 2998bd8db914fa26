"""Section-heading inference for comment paragraphs."""

import logging
import re

from sdoc.config import SectioningConfig
from sdoc.models.snippet import CommentSnippet, SectionSnippet, Snippet

logger = logging.getLogger(__name__)

# Leading whitespace, a capitalized line ending in ".", then the body.
HEADING_PATTERN = re.compile(r"(\s*)([A-Z][^\n]*)\.\n(\s*)([\s\S]*)\Z")


def section_level(indent: str, indent_width: int = 2) -> int:
    """Compute a section level from the heading's leading whitespace.

    Level 1 is unindented; each ``indent_width`` characters add one level.
    """
    return max(0, 1 + len(indent) // indent_width)


def detect_section(
    snippet: Snippet, config: SectioningConfig | None = None
) -> Snippet:
    """Promote a comment paragraph to a section heading when it looks like one.

    A heading is a short first line that starts with an uppercase letter and
    ends in a period. It has to be more than ``min_length_gap`` characters
    shorter than the following line; otherwise it is most likely just a
    wrapped line of prose.

    Args:
        snippet: Any snippet. Only plain comments are considered.
        config: Sectioning thresholds. Defaults are used when omitted.

    Returns:
        A SectionSnippet whose text is the body after the heading line
        (leading whitespace kept), or the snippet unchanged.
    """
    if not isinstance(snippet, CommentSnippet):
        return snippet

    config = config or SectioningConfig()
    match = HEADING_PATTERN.match(snippet.text)
    if not match:
        return snippet

    indent, heading, body_indent, body = match.groups()
    first_body_line = body.split("\n", 1)[0]
    if not len(heading) + config.min_length_gap < len(first_body_line):
        return snippet

    return SectionSnippet(
        section=heading.strip(),
        level=section_level(indent, config.indent_width),
        text=body_indent + body,
        index=snippet.index,
    )
