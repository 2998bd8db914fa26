"""Entry point for the SDoc command line driver.

Usage:
  sdoc [FILE...] [--config PATH] [--search QUERY] [--words] [--no-cache]

Each file is processed into a section tree, cached in SQLite, and shown as
an outline. Without FILE arguments every ``*.sdoc`` file under the
configured ``storage.sources_dir`` is processed. ``--search`` lists the
snippets matching a query instead, and ``--words`` prints the alphabetic
list of terms used in source code.
"""

import argparse
import logging
import sys
from pathlib import Path

from sdoc.config import AppConfig, load_config
from sdoc.indexing.query import search
from sdoc.indexing.words import outline, word_list
from sdoc.ingestion.loader import SDOC_SUFFIX, document_name, read_source
from sdoc.ingestion.outdent import outdent
from sdoc.models.document import Document
from sdoc.models.snippet import SectionSnippet
from sdoc.processor import SdocProcessor
from sdoc.storage.database import get_connection, initialize_database, save_document

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdoc",
        description="Build sectioned, searchable documents from SDoc sources.",
    )
    parser.add_argument(
        "files", nargs="*", help="SDoc source files (default: sources_dir/*.sdoc)"
    )
    parser.add_argument("--config", default="config.yaml", help="YAML config path")
    parser.add_argument("--search", metavar="QUERY", help="show matching snippets")
    parser.add_argument("--words", action="store_true", help="list source terms")
    parser.add_argument(
        "--no-cache", action="store_true", help="do not store trees in SQLite"
    )
    return parser


def source_files(sources_dir: str | Path) -> list[Path]:
    """Every SDoc file under the sources directory, sorted by path."""
    root = Path(sources_dir)
    if not root.is_dir():
        return []
    return sorted(p for p in root.rglob(f"*{SDOC_SUFFIX}") if p.is_file())


def format_document(document: Document, args: argparse.Namespace, config: AppConfig) -> str:
    """Render the requested view of one document as plain text."""
    separator = config.indexing.pair_separator
    lines = [f"# {document.filename}"]

    if args.words:
        lines.extend(word_list(document, separator))
    elif args.search is not None:
        for snippet in search(document, args.search, separator):
            if isinstance(snippet, SectionSnippet):
                lines.append(f"{'  ' * (snippet.level - 1)}- {snippet.section}")
            else:
                lines.append(f"[{snippet.role}]\n{outdent(snippet.text).rstrip()}")
    else:
        lines.extend(f"{'  ' * (level - 1)}- {title}" for level, title in outline(document))

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Process the given files and print the requested view."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=config.app.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    files = args.files or source_files(config.storage.sources_dir)
    if not files:
        logger.error("No SDoc files found in %s", config.storage.sources_dir)
        return 1

    conn = None
    if not args.no_cache:
        initialize_database(config.storage.sqlite_path)
        conn = get_connection(config.storage.sqlite_path)

    processor = SdocProcessor(config)
    status = 0
    try:
        for path in files:
            try:
                text = read_source(path)
            except FileNotFoundError:
                logger.error("File not found: %s", path)
                status = 1
                continue

            document = processor.process(document_name(path), text)
            if conn is not None:
                save_document(conn, document)
            print(format_document(document, args, config))
    finally:
        if conn is not None:
            conn.close()

    return status


if __name__ == "__main__":
    sys.exit(main())
