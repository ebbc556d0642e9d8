"""Top-level orchestration: segment a lesson and annotate every word."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from lesson_pipeline.config import PipelineConfig
from lesson_pipeline.models import ParsedLesson, WordAnnotation
from lesson_pipeline.pronunciation.matcher import find_pronunciation_matches
from lesson_pipeline.pronunciation.rules import RuleTable, default_rule_table
from lesson_pipeline.text.normalize import normalize_word, vocabulary_keys
from lesson_pipeline.text.segmenter import parse_lesson
from lesson_pipeline.validation import validate_lesson, validate_matches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        lesson: Parsed paragraph/sentence/word tree.
        annotations: One entry per word token, in reading order.
        vocabulary_keys: Distinct normalized word keys for vocabulary lookup.
    """

    lesson: ParsedLesson
    annotations: tuple[WordAnnotation, ...]
    vocabulary_keys: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.lesson.to_dict(),
            "annotations": [annotation.to_dict() for annotation in self.annotations],
            "vocabularyKeys": list(self.vocabulary_keys),
        }


def annotate_lesson(
    lesson: ParsedLesson,
    config: PipelineConfig,
    rule_table: RuleTable | None = None,
) -> tuple[WordAnnotation, ...]:
    """Attach pronunciation matches to every word of a parsed lesson.

    Args:
        lesson: Lesson tree, freshly parsed or loaded from storage.
        config: Language pair and strictness options.
        rule_table: Rule table to use; the built-in table when ``None``.

    Returns:
        Word annotations in reading order.

    Raises:
        ValueError: In strict mode, if a match list breaks its ordering or
            slicing invariants.
    """

    table = rule_table or default_rule_table()
    rules = table.get_rules(config.target_lang, config.native_lang)

    annotations: list[WordAnnotation] = []
    for paragraph in lesson.paragraphs:
        for sentence in paragraph.sentences:
            for word in sentence.words:
                matches = find_pronunciation_matches(word, rules)
                if config.strict:
                    validate_matches(word, matches)
                annotations.append(
                    WordAnnotation(
                        paragraph_id=paragraph.id,
                        sentence_id=sentence.id,
                        word=word,
                        normalized=normalize_word(word),
                        matches=tuple(matches),
                    )
                )
    return tuple(annotations)


def run_pipeline(
    text: str,
    config: PipelineConfig | None = None,
    rule_table: RuleTable | None = None,
) -> PipelineResult:
    """Parse lesson text and annotate its words.

    Args:
        text: Raw lesson text.
        config: Run options; defaults to the global default language pair.
        rule_table: Rule table override, mainly for tests.

    Returns:
        ``PipelineResult`` with lesson tree, annotations and vocabulary keys.
    """

    config = config or PipelineConfig()

    lesson = parse_lesson(text)
    validate_lesson(lesson)
    logger.info(
        "Parsed lesson %r: %d paragraphs, %d words",
        lesson.title,
        len(lesson.paragraphs),
        len(lesson.words),
    )

    annotations = annotate_lesson(lesson, config, rule_table=rule_table)
    logger.debug(
        "Annotated %d words for %s/%s",
        len(annotations),
        config.resolved_target,
        config.native_lang or "default",
    )

    return PipelineResult(
        lesson=lesson,
        annotations=annotations,
        vocabulary_keys=tuple(vocabulary_keys(lesson.words)),
    )
