"""SQLite cache of processed documents."""

import sqlite3
from pathlib import Path

from sdoc.models.document import Document
from sdoc.models.snippet import PreludeSnippet


def get_connection(db_path: str | Path) -> sqlite3.Connection:
    """Create a connection to the SQLite database.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A sqlite3 Connection with row_factory set to Row.
    """
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def initialize_database(db_path: str | Path) -> None:
    """Create the database schema if it doesn't exist.

    Args:
        db_path: Path to the SQLite database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS documents (
                filename TEXT PRIMARY KEY,
                name TEXT DEFAULT '',
                author TEXT DEFAULT '',
                snippet_count INTEGER DEFAULT 0,
                section_count INTEGER DEFAULT 0,
                tree_json TEXT NOT NULL,
                processed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


def save_document(conn: sqlite3.Connection, document: Document) -> None:
    """Insert or replace a processed document.

    Args:
        conn: Open database connection.
        document: Processed document; its filename is the key.
    """
    snippets = list(document.walk())
    prelude = next((s for s in snippets if isinstance(s, PreludeSnippet)), None)

    conn.execute(
        """
        INSERT OR REPLACE INTO documents
            (filename, name, author, snippet_count, section_count, tree_json)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (
            document.filename,
            prelude.name if prelude else "",
            prelude.author if prelude else "",
            len(snippets),
            len(document.sections()),
            document.model_dump_json(),
        ),
    )
    conn.commit()


def load_document(conn: sqlite3.Connection, filename: str) -> Document | None:
    """Load a cached document by filename.

    Returns:
        The document, or None if it has not been saved.
    """
    row = conn.execute(
        "SELECT tree_json FROM documents WHERE filename = ?", (filename,)
    ).fetchone()
    if row is None:
        return None
    return Document.model_validate_json(row["tree_json"])


def list_documents(conn: sqlite3.Connection) -> list[sqlite3.Row]:
    """List cached documents (without their trees), ordered by filename."""
    return conn.execute(
        """
        SELECT filename, name, author, snippet_count, section_count, processed_at
        FROM documents ORDER BY filename
        """
    ).fetchall()
