"""Lookup-key normalization for vocabulary matching."""

from __future__ import annotations

import unicodedata
from typing import Iterable

STRIPPED_CATEGORY_PREFIXES = ("P", "S")


def normalize_word(word: str) -> str:
    """Lowercase ``word`` and drop Unicode punctuation and symbol characters.

    Letters, combining marks and digits are kept, so ``"Acasă!"`` becomes
    ``"acasă"`` and ``"„Bună”"`` becomes ``"bună"``.

    Args:
        word: Raw token as it appears in the lesson.

    Returns:
        Normalized key; ``""`` for empty or punctuation-only input.
    """

    return "".join(
        ch
        for ch in word.lower()
        if not unicodedata.category(ch).startswith(STRIPPED_CATEGORY_PREFIXES)
    )


def vocabulary_keys(words: Iterable[str]) -> list[str]:
    """Return distinct non-empty normalized keys in first-seen order."""

    seen: dict[str, None] = {}
    for word in words:
        key = normalize_word(word)
        if key:
            seen.setdefault(key, None)
    return list(seen)
