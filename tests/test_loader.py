"""Tests for source file loading."""

from pathlib import Path

import pytest

from sdoc.ingestion.loader import document_name, read_source

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "sample_texts"


class TestReadSource:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        f = tmp_path / "a.sdoc"
        f.write_text("Über | Zoë\n\nx = 1\n", encoding="utf-8")
        assert read_source(f) == "Über | Zoë\n\nx = 1\n"

    def test_non_utf8_falls_back(self, tmp_path: Path) -> None:
        f = tmp_path / "latin.sdoc"
        f.write_bytes("Café notes are here.\n\nvar café = 1;\n".encode("cp1252"))
        text = read_source(f)
        assert "Caf" in text
        assert "notes are here" in text

    def test_reads_fixture(self) -> None:
        text = read_source(FIXTURES_DIR / "counter.js.sdoc")
        assert text.startswith("Counter | Jane Example")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_source(tmp_path / "missing.sdoc")


class TestDocumentName:
    def test_strips_sdoc_suffix(self) -> None:
        assert document_name("src/Foo.java.sdoc") == "Foo.java"

    def test_suffix_case_insensitive(self) -> None:
        assert document_name(Path("Foo.java.SDOC")) == "Foo.java"

    def test_other_files_keep_name(self) -> None:
        assert document_name("notes/readme.txt") == "readme.txt"
