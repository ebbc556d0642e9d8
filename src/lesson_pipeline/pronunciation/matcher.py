"""Left-to-right pronunciation matching for single words.

Rules are ranked once per call:

1. multi-character literals, longer first;
2. anchored patterns, eligible only at word position 0;
3. single-character literals;
4. unanchored patterns, longer source first.

Ties keep declaration order. The scan is a two-transition state machine: at
each cursor position it either emits a match for the first eligible rule and
jumps past it, or skips exactly one character. Every step advances the cursor,
so a word of length ``n`` takes at most ``n`` steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from lesson_pipeline.models import (
    LiteralPattern,
    PronunciationMatch,
    PronunciationRule,
    RegexPattern,
)

MATCH = "match"
SKIP = "skip"


@dataclass(frozen=True)
class ScanStep:
    """One transition of the scan: a rule match or a one-character skip."""

    kind: str
    start: int
    length: int
    match: PronunciationMatch | None = None


def rule_weight(rule: PronunciationRule) -> tuple[int, int]:
    """Return the precedence weight of a rule; larger sorts first."""

    pattern = rule.pattern
    if isinstance(pattern, LiteralPattern):
        if len(pattern.text) > 1:
            return 3, len(pattern.text)
        return 1, len(pattern.text)
    if pattern.anchored:
        return 2, 0
    return 0, len(pattern.source)


def order_rules(rules: Sequence[PronunciationRule]) -> list[PronunciationRule]:
    """Sort rules by descending weight, keeping declaration order for ties."""

    return sorted(rules, key=rule_weight, reverse=True)


def _fold_case(word: str) -> str:
    """Lowercase ``word`` without changing its length.

    A few characters (such as ``İ``) lowercase to two code points; those are
    kept as-is so offsets in the folded copy stay valid for the original.
    """

    lowered = word.lower()
    if len(lowered) == len(word):
        return lowered
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in word)


def _match_length(pattern: LiteralPattern | RegexPattern, folded: str, position: int) -> int:
    """Return how many characters ``pattern`` consumes at ``position`` (0 if none)."""

    if isinstance(pattern, LiteralPattern):
        return len(pattern.text) if folded.startswith(pattern.text, position) else 0
    if pattern.anchored and position != 0:
        return 0
    hit = pattern.regex.match(folded[position:])
    # A zero-width hit would stall the cursor; treat it as no match.
    return hit.end() if hit is not None else 0


def _step(
    word: str,
    folded: str,
    ordered: Sequence[PronunciationRule],
    position: int,
) -> ScanStep:
    for rule in ordered:
        length = _match_length(rule.pattern, folded, position)
        if length:
            match = PronunciationMatch(
                text=word[position : position + length],
                pronunciation=rule.phoneme,
                explanation=rule.explanation,
                start_index=position,
                end_index=position + length - 1,
            )
            return ScanStep(kind=MATCH, start=position, length=length, match=match)
    return ScanStep(kind=SKIP, start=position, length=1)


def scan_word(word: str, rules: Sequence[PronunciationRule]) -> Iterator[ScanStep]:
    """Yield the scan transitions that tile ``word`` from left to right.

    Args:
        word: Word in its original casing.
        rules: Rules in declaration order.

    Yields:
        ``ScanStep`` items whose ``(start, length)`` spans cover the word
        exactly once, in order.
    """

    ordered = order_rules(rules)
    folded = _fold_case(word)
    position = 0
    while position < len(folded):
        step = _step(word, folded, ordered, position)
        yield step
        position += step.length


def find_pronunciation_matches(
    word: str,
    rules: Sequence[PronunciationRule],
) -> list[PronunciationMatch]:
    """Annotate ``word`` with pronunciation matches.

    Matching is case-insensitive but ``text`` keeps the word's own casing.
    Characters no rule covers are skipped silently.

    Args:
        word: Word to annotate, not normalized.
        rules: Rule set, typically from ``get_pronunciation_rules``.

    Returns:
        Non-overlapping matches ordered by ``start_index``.
    """

    return [step.match for step in scan_word(word, rules) if step.match is not None]
