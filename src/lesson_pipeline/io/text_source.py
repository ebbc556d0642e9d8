"""Read raw lesson text from plain-text or PDF files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pdfplumber

TEXT_SUFFIXES = {".txt", ".md"}
PDF_SUFFIXES = {".pdf"}


def extract_pdf_pages(
    pdf_path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> Iterator[str]:
    """Yield the text of each selected PDF page.

    Page boundaries are inclusive and 1-based to match the CLI arguments.
    Pages without extractable text are skipped.

    Args:
        pdf_path: Path to the lesson PDF.
        page_start: 1-based start page, inclusive; ``None`` means first page.
        page_end: 1-based end page, inclusive; ``None`` means last page.

    Yields:
        Page text with trailing whitespace removed.
    """

    with pdfplumber.open(pdf_path) as pdf:
        total_pages = len(pdf.pages)
        start_idx = 0 if page_start is None else max(page_start - 1, 0)
        end_idx = total_pages - 1 if page_end is None else min(page_end - 1, total_pages - 1)

        for page_idx in range(start_idx, end_idx + 1):
            text = pdf.pages[page_idx].extract_text(x_tolerance=1, y_tolerance=1)
            if text and text.strip():
                yield text.rstrip()


def read_lesson_text(
    path: Path,
    page_start: int | None = None,
    page_end: int | None = None,
) -> str:
    """Load lesson text from ``path``.

    PDF pages are joined with a blank line, so every page starts a new
    paragraph when the text is parsed.

    Args:
        path: ``.txt``/``.md`` or ``.pdf`` file.
        page_start: First PDF page to read (ignored for text files).
        page_end: Last PDF page to read (ignored for text files).

    Returns:
        Raw lesson text.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the suffix is not supported.
    """

    if not path.exists():
        raise FileNotFoundError(f"Lesson file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8")
    if suffix in PDF_SUFFIXES:
        return "\n\n".join(extract_pdf_pages(path, page_start=page_start, page_end=page_end))
    raise ValueError(f"Unsupported lesson file type: {path.suffix or '(none)'}")
