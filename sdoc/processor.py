"""End-to-end processing of one annotated source file."""

import logging

from sdoc.config import AppConfig
from sdoc.indexing.aggregator import aggregate_indexes
from sdoc.indexing.builder import index_snippet
from sdoc.ingestion.folder import fold_sections
from sdoc.ingestion.parser import extract_prelude, parse_paragraphs
from sdoc.ingestion.pipes import disambiguate_pipe
from sdoc.ingestion.sections import detect_section
from sdoc.models.document import Document

logger = logging.getLogger(__name__)


class SdocProcessor:
    """Turns raw annotated source into an indexed section tree.

    Pipeline (each stage returns new snippets):
    1. Split into paragraphs and classify by first character
    2. Extract the prelude from the first paragraph
    3. Promote heading-like comments to sections
    4. Resolve pipe paragraphs into numbered lists or verbatim blocks
    5. Index every snippet
    6. Fold the flat sequence into a tree under the document root
    7. Merge child indexes into their containers

    Args:
        config: AppConfig with sectioning and indexing settings.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    def process(self, filename: str, text: str) -> Document:
        """Process one file's text. Never raises for any input text.

        Args:
            filename: Name used as the root section title.
            text: Already-loaded file content.

        Returns:
            Document root with folded subsnippets and aggregated indexes.
        """
        snippets = parse_paragraphs(text)
        if snippets:
            snippets[0] = extract_prelude(snippets[0])

        snippets = [detect_section(s, self._config.sectioning) for s in snippets]
        snippets = [disambiguate_pipe(s) for s in snippets]
        snippets = [index_snippet(s, self._config.indexing) for s in snippets]

        document = fold_sections(Document(section=filename), snippets)
        document = aggregate_indexes(document)

        logger.debug(
            "Processed %s: %d paragraphs, %d sections, %d index keys",
            filename,
            len(snippets),
            len(document.sections()),
            len(document.index),
        )
        return document


def process(filename: str, text: str, config: AppConfig | None = None) -> Document:
    """Process one file's text with the given (or default) configuration."""
    return SdocProcessor(config).process(filename, text)
