"""JSON read/write helpers for lesson documents."""

from __future__ import annotations

import json
from pathlib import Path

from lesson_pipeline.models import ParsedLesson
from lesson_pipeline.pipeline import PipelineResult


def write_lesson_json(result: PipelineResult, output_path: Path) -> None:
    """Write a lesson document with ``content`` and ``annotations`` keys.

    Args:
        result: Pipeline output to serialize.
        output_path: Destination JSON file path.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(result.to_dict(), handle, ensure_ascii=False, indent=2)
        handle.write("\n")


def read_lesson_json(path: Path) -> ParsedLesson:
    """Load the ``content`` field of a lesson document.

    A bare lesson object (``title`` and ``paragraphs`` at the top level) is
    accepted too.

    Raises:
        ValueError: If the document does not contain a lesson.
    """

    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError(f"Lesson document must be a JSON object: {path}")
    content = payload.get("content", payload)
    if not isinstance(content, dict):
        raise ValueError(f"Lesson content must be a JSON object: {path}")
    return ParsedLesson.from_dict(content)
