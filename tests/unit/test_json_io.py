"""Unit tests for lesson document JSON serialization."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lesson_pipeline.io.json_io import read_lesson_json, write_lesson_json
from lesson_pipeline.models import ParsedLesson
from lesson_pipeline.pipeline import run_pipeline


def test_write_lesson_json_uses_stored_content_shape(tmp_path: Path) -> None:
    output = tmp_path / "lesson.json"
    result = run_pipeline("Ai carte?")

    write_lesson_json(result, output_path=output)
    payload = json.loads(output.read_text(encoding="utf-8"))

    assert set(payload) == {"content", "annotations", "vocabularyKeys"}
    assert set(payload["content"]) == {"title", "paragraphs"}
    sentence = payload["content"]["paragraphs"][0]["sentences"][0]
    assert set(sentence) == {"id", "text", "words"}
    assert sentence["words"] == ["Ai", "carte"]
    assert payload["annotations"][0]["matches"][0] == {
        "text": "Ai",
        "pronunciation": "eye",
        "explanation": "like 'eye'",
        "startIndex": 0,
        "endIndex": 1,
    }


def test_lesson_json_round_trips(tmp_path: Path) -> None:
    output = tmp_path / "lesson.json"
    result = run_pipeline("Lecția 2\n\nȘtii să înoți? Da, știu.")

    write_lesson_json(result, output_path=output)

    assert read_lesson_json(output) == result.lesson
    assert "Știi" in output.read_text(encoding="utf-8")


def test_read_lesson_json_accepts_bare_lesson(tmp_path: Path) -> None:
    path = tmp_path / "bare.json"
    lesson = run_pipeline("Eva merge acasă.").lesson
    path.write_text(json.dumps(lesson.to_dict()), encoding="utf-8")

    assert read_lesson_json(path) == lesson


def test_read_lesson_json_rejects_non_lessons(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        read_lesson_json(path)


def test_from_dict_reports_missing_keys() -> None:
    with pytest.raises(ValueError, match="missing key 'paragraphs'"):
        ParsedLesson.from_dict({"title": "Fără paragrafe"})
