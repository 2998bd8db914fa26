"""Data models for the SDoc engine."""

from sdoc.models.document import Container, Document
from sdoc.models.snippet import (
    BaseSnippet,
    CommentSnippet,
    EnumerateSnippet,
    PipeSnippet,
    PreludeSnippet,
    PreSnippet,
    SectionSnippet,
    Snippet,
    SourceSnippet,
    walk,
)

__all__ = [
    "BaseSnippet",
    "CommentSnippet",
    "Container",
    "Document",
    "EnumerateSnippet",
    "PipeSnippet",
    "PreSnippet",
    "PreludeSnippet",
    "SectionSnippet",
    "Snippet",
    "SourceSnippet",
    "walk",
]
