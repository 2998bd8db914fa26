"""Source ingestion: paragraph parsing, sectioning, and tree folding."""

from sdoc.ingestion.folder import fold_sections
from sdoc.ingestion.loader import document_name, read_source
from sdoc.ingestion.outdent import outdent
from sdoc.ingestion.parser import (
    classify_paragraph,
    extract_prelude,
    parse_paragraphs,
    split_paragraphs,
)
from sdoc.ingestion.pipes import disambiguate_pipe
from sdoc.ingestion.sections import detect_section

__all__ = [
    "classify_paragraph",
    "detect_section",
    "disambiguate_pipe",
    "document_name",
    "extract_prelude",
    "fold_sections",
    "outdent",
    "parse_paragraphs",
    "read_source",
    "split_paragraphs",
]
