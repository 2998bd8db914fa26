"""Paragraph snippet data models.

Each paragraph role has its own model carrying exactly the fields that role
needs. Section headings keep the ``comment`` role and are told apart from
plain comments by their ``section`` and ``level`` fields; unknown fields are
rejected so serialized snippets validate back into the same class.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseSnippet(BaseModel):
    """Fields shared by every paragraph snippet."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    index: dict[str, float] = Field(default_factory=dict)


class CommentSnippet(BaseSnippet):
    """Prose paragraph starting with an uppercase letter."""

    role: Literal["comment"] = "comment"


class SectionSnippet(BaseSnippet):
    """A comment paragraph that heads a section.

    ``subsnippets`` holds, in order, every following paragraph up to the
    next section whose level is the same or shallower.
    """

    role: Literal["comment"] = "comment"
    section: str
    level: int = Field(ge=0)
    subsnippets: list[Snippet] = Field(default_factory=list)


class PipeSnippet(BaseSnippet):
    """Paragraph starting with ``|``, not yet disambiguated."""

    role: Literal["pipe"] = "pipe"


class SourceSnippet(BaseSnippet):
    """Verbatim code paragraph."""

    role: Literal["source"] = "source"


class PreludeSnippet(BaseSnippet):
    """First paragraph of a file in ``<name> | <author>`` form."""

    role: Literal["prelude"] = "prelude"
    name: str
    author: str


class EnumerateSnippet(BaseSnippet):
    """Pipe paragraph recognized as a numbered list."""

    role: Literal["enumerate"] = "enumerate"
    start: int
    items: list[str] = Field(default_factory=list)


class PreSnippet(BaseSnippet):
    """Pipe paragraph kept verbatim (ASCII art or a code example)."""

    role: Literal["pre"] = "pre"


Snippet = Union[
    SectionSnippet,
    CommentSnippet,
    PipeSnippet,
    SourceSnippet,
    PreludeSnippet,
    EnumerateSnippet,
    PreSnippet,
]

SectionSnippet.model_rebuild()


def walk(subsnippets: list[Snippet]) -> Iterator[Snippet]:
    """Yield every snippet of a subtree in document order (pre-order)."""
    for snippet in subsnippets:
        yield snippet
        if isinstance(snippet, SectionSnippet):
            yield from walk(snippet.subsnippets)
