"""Document root data model."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from sdoc.models.snippet import SectionSnippet, Snippet, walk


class Document(BaseModel):
    """Synthetic top-level snippet for one source file.

    The file name plays the part of the section title and the level is
    always zero, so every inferred section nests underneath it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    section: str
    level: int = 0
    text: str = ""
    index: dict[str, float] = Field(default_factory=dict)
    subsnippets: list[Snippet] = Field(default_factory=list)

    @property
    def filename(self) -> str:
        return self.section

    def walk(self) -> Iterator[Snippet]:
        """Yield every snippet in the tree in original paragraph order."""
        return walk(self.subsnippets)

    def sections(self) -> list[SectionSnippet]:
        return [s for s in self.walk() if isinstance(s, SectionSnippet)]


# Nodes that own subsnippets
Container = Union[Document, SectionSnippet]
