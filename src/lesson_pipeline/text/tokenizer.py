"""Token-level helpers for entering sentences as parallel columns.

Unlike :mod:`lesson_pipeline.text.segmenter`, the tokenizer here keeps
punctuation as separate tokens so target, decode and translation columns can be
aligned position by position.
"""

from __future__ import annotations

import re
from typing import Sequence

from lesson_pipeline.models import AlignedWord

# Whitespace runs and single punctuation marks, captured so they are kept.
TOKEN_SPLIT_RE = re.compile(r"(\s+|[.,;:!?()\[\]{}\"“”„«»—–-])")
SENTENCE_BREAK_RE = re.compile(r"[.!?]+")


def tokenize_romanian(text: str) -> list[str]:
    """Split text on whitespace and punctuation, keeping punctuation tokens.

    Args:
        text: Sentence text; non-string input is treated as empty.

    Returns:
        Trimmed non-empty tokens, e.g. ``["Bună", "ziua", "!"]``.
    """

    if not text or not isinstance(text, str):
        return []
    parts = (part.strip() for part in TOKEN_SPLIT_RE.split(text.strip()))
    return [part for part in parts if part]


def split_into_sentences(text: str) -> list[str]:
    """Split text on runs of ``.``, ``!`` and ``?``, dropping the punctuation."""

    if not text or not isinstance(text, str):
        return []
    parts = (part.strip() for part in SENTENCE_BREAK_RE.split(text))
    return [part for part in parts if part]


def align_words(
    target_words: Sequence[str],
    decode_words: Sequence[str],
    translation_words: Sequence[str] = (),
) -> list[AlignedWord]:
    """Zip three token columns into one record per position.

    The result is as long as the longest column; positions missing from a
    shorter column get ``""``. Every record starts with status ``unknown``.
    """

    length = max(len(target_words), len(decode_words), len(translation_words))

    def at(words: Sequence[str], idx: int) -> str:
        return (words[idx] or "") if idx < len(words) else ""

    return [
        AlignedWord(
            rom=at(target_words, idx),
            decode=at(decode_words, idx),
            eng=at(translation_words, idx),
        )
        for idx in range(length)
    ]
