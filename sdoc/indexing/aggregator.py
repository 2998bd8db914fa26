"""Bottom-up merging of child indexes into their containers."""

from typing import TypeVar

from sdoc.models.document import Document
from sdoc.models.snippet import SectionSnippet

Node = TypeVar("Node")


def merge_index(target: dict[str, float], source: dict[str, float]) -> None:
    """Add every relevance in ``source`` to ``target`` in place."""
    for key, relevance in source.items():
        target[key] = target.get(key, 0) + relevance


def aggregate_indexes(node: Node) -> Node:
    """Fold every descendant's index into each container, post-order.

    After aggregation a section's index stands for everything beneath it,
    so a search that hits a nested paragraph also hits its sections. The
    input tree is never modified: containers come back as new copies with
    their own terms plus the sum of their aggregated children, and leaves
    come back as they are. Running it on a freshly built tree therefore
    always gives the same result.

    Args:
        node: A Document, a snippet, or any subtree of either.

    Returns:
        The aggregated node.
    """
    if not isinstance(node, (Document, SectionSnippet)) or not node.subsnippets:
        return node

    children = [aggregate_indexes(child) for child in node.subsnippets]
    index = dict(node.index)
    for child in children:
        merge_index(index, child.index)

    return node.model_copy(update={"subsnippets": children, "index": index})
