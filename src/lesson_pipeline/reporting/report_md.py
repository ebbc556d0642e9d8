"""Markdown report generation for annotated lessons."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from lesson_pipeline.pipeline import PipelineResult


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(cell.replace("|", "\\|") for cell in row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def collect_phoneme_counts(result: PipelineResult) -> dict[tuple[str, str], int]:
    """Count matches by ``(matched letters lowercased, phoneme)``."""

    counter: Counter[tuple[str, str]] = Counter()
    for annotation in result.annotations:
        for match in annotation.matches:
            counter[(match.text.lower(), match.pronunciation)] += 1
    return dict(counter)


def words_without_hints(result: PipelineResult) -> list[str]:
    """Return distinct normalized words that received no match, sorted."""

    return sorted(
        {
            annotation.normalized
            for annotation in result.annotations
            if not annotation.matches and annotation.normalized
        }
    )


def build_report_md(result: PipelineResult) -> str:
    """Build the markdown report for one annotated lesson.

    Args:
        result: Pipeline output.

    Returns:
        Markdown with summary, phoneme usage and unannotated words.
    """

    lesson = result.lesson
    sentence_count = sum(len(paragraph.sentences) for paragraph in lesson.paragraphs)
    summary_rows = [
        ("paragraphs", str(len(lesson.paragraphs))),
        ("sentences", str(sentence_count)),
        ("words", str(len(result.annotations))),
        ("vocabulary_keys", str(len(result.vocabulary_keys))),
    ]

    phoneme_counts = collect_phoneme_counts(result)
    phoneme_rows = [
        (letters, phoneme, str(count))
        for (letters, phoneme), count in sorted(
            phoneme_counts.items(), key=lambda item: (-item[1], item[0])
        )
    ]

    unannotated = words_without_hints(result)

    parts = [
        f"# {lesson.title}",
        "",
        "## Summary",
        "",
        _markdown_table(["item", "count"], summary_rows),
        "",
        "## Pronunciation hints used",
        "",
        _markdown_table(["letters", "phoneme", "count"], phoneme_rows),
        "",
        "## Words without pronunciation hints",
        "",
    ]
    if unannotated:
        parts.extend(f"- {word}" for word in unannotated)
    else:
        parts.append("None.")
    parts.append("")
    return "\n".join(parts)
