"""Processing and editing of sentences entered as parallel columns."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import math
import secrets
from typing import Sequence

from lesson_pipeline.models import WORD_STATUSES, AlignedWord, LessonProgress, ProcessedSentence
from lesson_pipeline.text.segmenter import BASE36_DIGITS
from lesson_pipeline.text.tokenizer import align_words, tokenize_romanian

EDITABLE_WORD_FIELDS = ("rom", "decode", "eng", "status")


def _timestamp(now: datetime | None) -> str:
    """Render ``now`` as a UTC ISO-8601 string like ``2024-01-02T03:04:05.000Z``."""

    moment = now if now is not None else datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


def generate_sentence_id(now: datetime | None = None) -> str:
    """Return an id like ``sentence_1718000000000_k3j9x0a2b``."""

    moment = now if now is not None else datetime.now(timezone.utc)
    suffix = "".join(secrets.choice(BASE36_DIGITS) for _ in range(9))
    return f"sentence_{int(moment.timestamp() * 1000)}_{suffix}"


def process_sentence(
    target_text: str,
    decode_text: str = "",
    translation_text: str = "",
    now: datetime | None = None,
) -> ProcessedSentence:
    """Tokenize and align the three columns of one sentence.

    Args:
        target_text: Sentence in the language being learned.
        decode_text: Word-by-word decoding (transliteration), optional.
        translation_text: Translation in the learner's language, optional.
        now: Creation time; the current UTC time when ``None``.

    Returns:
        ``ProcessedSentence`` with one ``AlignedWord`` per token position.
    """

    target_words = tokenize_romanian(target_text)
    decode_words = tokenize_romanian(decode_text) if decode_text else []
    translation_words = tokenize_romanian(translation_text) if translation_text else []

    stamp = _timestamp(now)
    return ProcessedSentence(
        id=generate_sentence_id(now),
        target=target_text,
        decode=decode_text,
        translation=translation_text,
        words=tuple(align_words(target_words, decode_words, translation_words)),
        created_at=stamp,
        last_modified=stamp,
    )


def update_sentence_word(
    sentence: ProcessedSentence,
    word_index: int,
    field_name: str,
    value: str,
    now: datetime | None = None,
) -> ProcessedSentence:
    """Return a copy of ``sentence`` with one word field replaced.

    An index outside the word list returns ``sentence`` unchanged.

    Raises:
        ValueError: If ``field_name`` is not a word field, or a status value is
            not one of ``unknown``, ``known`` or ``blank``.
    """

    if field_name not in EDITABLE_WORD_FIELDS:
        raise ValueError(f"Unknown word field: {field_name!r}")
    if field_name == "status" and value not in WORD_STATUSES:
        raise ValueError(f"Unknown word status: {value!r}")
    if not 0 <= word_index < len(sentence.words):
        return sentence

    words = tuple(
        replace(word, **{field_name: value}) if idx == word_index else word
        for idx, word in enumerate(sentence.words)
    )
    return replace(sentence, words=words, last_modified=_timestamp(now))


def mark_word_status(
    sentence: ProcessedSentence,
    word_index: int,
    status: str,
    now: datetime | None = None,
) -> ProcessedSentence:
    return update_sentence_word(sentence, word_index, "status", status, now=now)


def update_word_decode(
    sentence: ProcessedSentence,
    word_index: int,
    decode: str,
    now: datetime | None = None,
) -> ProcessedSentence:
    return update_sentence_word(sentence, word_index, "decode", decode, now=now)


def calculate_progress(sentences: Sequence[ProcessedSentence]) -> LessonProgress:
    """Count word statuses across sentences.

    Only words with a non-blank target token are counted, so rows padded for a
    longer decode or translation column are ignored. Statuses other than
    ``known`` and ``unknown`` count as blank.
    """

    words: list[AlignedWord] = [
        word for sentence in sentences for word in sentence.words if word.rom.strip()
    ]
    if not words:
        return LessonProgress()

    known = sum(1 for word in words if word.status == "known")
    unknown = sum(1 for word in words if word.status == "unknown")
    total = len(words)
    return LessonProgress(
        total=total,
        known=known,
        unknown=unknown,
        blank=total - known - unknown,
        percentage=math.floor(known / total * 100 + 0.5),
    )
