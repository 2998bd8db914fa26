"""Source file loading with encoding detection."""

import logging
from pathlib import Path

import chardet

logger = logging.getLogger(__name__)

# Conventional suffix for annotated source files (e.g. Foo.java.sdoc)
SDOC_SUFFIX = ".sdoc"


def document_name(file_path: str | Path) -> str:
    """Name a document after its file, dropping the ``.sdoc`` suffix.

    Args:
        file_path: Path to the source file.

    Returns:
        The file name, e.g. "Foo.java" for "src/Foo.java.sdoc".
    """
    path = Path(file_path)
    if path.suffix.lower() == SDOC_SUFFIX:
        return path.stem
    return path.name


def read_source(file_path: str | Path) -> str:
    """Read an annotated source file.

    Tries UTF-8 first, then uses chardet for fallback detection.

    Args:
        file_path: Path to the file.

    Returns:
        The file content as a string.

    Raises:
        FileNotFoundError: If file_path does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        pass

    raw_bytes = path.read_bytes()
    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence") or 0

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for %s: %s (%.0f%%)",
            path,
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.error("Failed to decode file: %s", path)
        return raw_bytes.decode("utf-8", errors="replace")
