"""Validation helpers for rule tables, parsed lessons and match lists."""

from __future__ import annotations

from typing import Sequence

from lesson_pipeline.models import (
    LiteralPattern,
    ParsedLesson,
    PronunciationMatch,
    PronunciationRule,
    RegexPattern,
)

# A pattern that matches any of these with zero width could stall a scan.
ZERO_WIDTH_PROBES = ("",) + tuple("abcdefghijklmnopqrstuvwxyz0123456789ăâîșțşţ")


def _zero_width_probes(rules: Sequence[PronunciationRule]) -> tuple[str, ...]:
    """Return the fixed probes plus every character the rule set mentions."""

    extra: list[str] = []
    for rule in rules:
        pattern = rule.pattern
        if isinstance(pattern, LiteralPattern):
            extra.extend(pattern.text)
        elif isinstance(pattern, RegexPattern):
            extra.extend(pattern.source)
    # Matching runs on lowercased words.
    extra.extend([char.lower() for char in extra if len(char.lower()) == 1])
    return tuple(dict.fromkeys(ZERO_WIDTH_PROBES + tuple(extra)))


def _raise_if_errors(what: str, errors: list[str]) -> None:
    """Raise one ``ValueError`` previewing the first 25 collected errors."""

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:25])
    rest = len(errors) - min(25, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{what} validation failed with {len(errors)} errors:\n{preview}{more}")


def _describe(rule: PronunciationRule) -> str:
    if isinstance(rule.pattern, LiteralPattern):
        return repr(rule.pattern.text)
    return f"/{rule.pattern.source}/"


def validate_rules(rules: Sequence[PronunciationRule], label: str = "Rule set") -> None:
    """Validate pronunciation rules before they are used for matching.

    Args:
        rules: Rules in declaration order.
        label: Name used in the error message, such as ``ro/en``.

    Raises:
        ValueError: If a literal is empty, a phoneme is missing, or a regex can
            match the empty string.
    """

    errors: list[str] = []
    if not rules:
        errors.append("no rules defined")
    probes = _zero_width_probes(rules)
    for idx, rule in enumerate(rules, start=1):
        pattern = rule.pattern
        if isinstance(pattern, LiteralPattern):
            if not pattern.text:
                errors.append(f"Rule {idx}: empty literal pattern")
        elif isinstance(pattern, RegexPattern):
            for probe in probes:
                hit = pattern.regex.match(probe)
                if hit is not None and hit.end() == 0:
                    errors.append(f"Rule {idx}: pattern {_describe(rule)} can match zero characters")
                    break
        else:
            errors.append(f"Rule {idx}: unsupported pattern type {type(pattern).__name__}")
        if not rule.phoneme.strip():
            errors.append(f"Rule {idx}: empty phoneme for {_describe(rule)}")

    _raise_if_errors(label, errors)


def validate_lesson(lesson: ParsedLesson) -> None:
    """Validate the structural shape of a parsed lesson.

    Args:
        lesson: Lesson tree produced by ``parse_lesson`` or loaded from storage.

    Raises:
        ValueError: If ids are empty or sentences contain blank tokens.
    """

    errors: list[str] = []
    if not lesson.title.strip():
        errors.append("empty title")
    for p_idx, paragraph in enumerate(lesson.paragraphs, start=1):
        if not paragraph.id:
            errors.append(f"Paragraph {p_idx}: empty id")
        if not paragraph.text.strip():
            errors.append(f"Paragraph {p_idx}: empty text")
        for s_idx, sentence in enumerate(paragraph.sentences, start=1):
            if not sentence.id:
                errors.append(f"Paragraph {p_idx} sentence {s_idx}: empty id")
            for word in sentence.words:
                if not word or word != word.strip():
                    errors.append(f"Paragraph {p_idx} sentence {s_idx}: invalid token {word!r}")

    _raise_if_errors("Lesson", errors)


def validate_matches(word: str, matches: Sequence[PronunciationMatch]) -> None:
    """Check that matches for ``word`` are ordered, disjoint and faithful slices.

    Args:
        word: Word the matches were produced for.
        matches: Output of ``find_pronunciation_matches``.

    Raises:
        ValueError: If any span is out of range, overlaps its predecessor, or
            its ``text`` differs from the slice of ``word`` it claims.
    """

    errors: list[str] = []
    previous_end = -1
    for idx, match in enumerate(matches, start=1):
        if match.start_index <= previous_end:
            errors.append(f"Match {idx}: starts at {match.start_index}, overlapping {previous_end}")
        if match.end_index - match.start_index + 1 != len(match.text):
            errors.append(f"Match {idx}: span length differs from text {match.text!r}")
        if match.end_index >= len(word) or match.start_index < 0:
            errors.append(f"Match {idx}: span outside word {word!r}")
        elif word[match.start_index : match.end_index + 1] != match.text:
            errors.append(f"Match {idx}: text {match.text!r} is not the slice of {word!r}")
        previous_end = match.end_index

    _raise_if_errors(f"Matches for {word!r}", errors)
