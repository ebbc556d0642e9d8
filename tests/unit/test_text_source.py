"""Unit tests for reading lesson text from files."""

from __future__ import annotations

from pathlib import Path

import pytest

from lesson_pipeline.io import text_source
from lesson_pipeline.io.text_source import extract_pdf_pages, read_lesson_text


class _FakePage:
    def __init__(self, text: str | None) -> None:
        self._text = text

    def extract_text(self, x_tolerance: float = 3, y_tolerance: float = 3) -> str | None:
        return self._text


class _FakePdf:
    def __init__(self, texts: list[str | None]) -> None:
        self.pages = [_FakePage(text) for text in texts]

    def __enter__(self) -> _FakePdf:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


@pytest.fixture
def fake_pdf(monkeypatch: pytest.MonkeyPatch) -> None:
    texts = ["Lecția 3\n", None, "Ana are mere.\nIon are pere.  ", "Pagina patru."]
    monkeypatch.setattr(text_source.pdfplumber, "open", lambda path: _FakePdf(texts))


def test_read_lesson_text_from_txt(tmp_path: Path) -> None:
    path = tmp_path / "lesson.txt"
    path.write_text("Bună ziua!\n", encoding="utf-8")

    assert read_lesson_text(path) == "Bună ziua!\n"


def test_read_lesson_text_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "lesson.docx"
    path.write_bytes(b"")

    with pytest.raises(ValueError, match="Unsupported lesson file type"):
        read_lesson_text(path)


def test_read_lesson_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_lesson_text(tmp_path / "missing.txt")


def test_pdf_pages_become_paragraphs(tmp_path: Path, fake_pdf: None) -> None:
    path = tmp_path / "lesson.pdf"
    path.write_bytes(b"%PDF-1.4")

    text = read_lesson_text(path, page_start=1, page_end=3)

    assert text == "Lecția 3\n\nAna are mere.\nIon are pere."


def test_extract_pdf_pages_clamps_page_range(tmp_path: Path, fake_pdf: None) -> None:
    pages = list(extract_pdf_pages(tmp_path / "lesson.pdf", page_start=3, page_end=99))

    assert pages == ["Ana are mere.\nIon are pere.", "Pagina patru."]
