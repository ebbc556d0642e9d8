"""Unit tests for pronunciation rule precedence and word scanning."""

from __future__ import annotations

import re

from lesson_pipeline.models import PronunciationRule, RegexPattern
from lesson_pipeline.pronunciation.matcher import (
    MATCH,
    SKIP,
    find_pronunciation_matches,
    order_rules,
    rule_weight,
    scan_word,
)
from lesson_pipeline.pronunciation.rules import (
    build_rule,
    compile_pattern,
    get_pronunciation_rules,
)


def _phonemes(word: str, rules) -> list[tuple[str, str, int]]:
    return [
        (match.text, match.pronunciation, match.start_index)
        for match in find_pronunciation_matches(word, rules)
    ]


def test_two_letter_literal_beats_single_letters() -> None:
    """A declared-later digraph still wins over its first letter."""

    rules = [build_rule("a", "ah", ""), build_rule("ai", "eye", "")]

    matches = find_pronunciation_matches("ai", rules)

    assert len(matches) == 1
    assert (matches[0].text, matches[0].start_index, matches[0].end_index) == ("ai", 0, 1)


def test_matching_is_case_insensitive_but_text_keeps_case() -> None:
    matches = find_pronunciation_matches("Ai", get_pronunciation_rules("ro", "en"))

    assert [match.text for match in matches] == ["Ai"]
    assert matches[0].pronunciation == "eye"


def test_anchored_rule_outranks_single_letter_only_at_word_start() -> None:
    rules = [build_rule("e", "eh", ""), build_rule(re.compile("^e"), "yeh", "")]

    assert _phonemes("ee", rules) == [("e", "yeh", 0), ("e", "eh", 1)]


def test_grouped_caret_needs_explicit_anchoring() -> None:
    inferred = compile_pattern("(?:^e)")
    explicit = compile_pattern("(?:^e)", anchored=True)

    assert not inferred.anchored
    assert _phonemes("ee", [build_rule(inferred, "yeh", "")]) == [("e", "yeh", 0), ("e", "yeh", 1)]
    assert _phonemes("ee", [build_rule(explicit, "yeh", "")]) == [("e", "yeh", 0)]


def test_anchored_rule_loses_to_multi_letter_literal() -> None:
    rules = [build_rule(re.compile("^e"), "yeh", ""), build_rule("ea", "ya", "")]

    assert _phonemes("ea", rules) == [("ea", "ya", 0)]


def test_single_letter_literal_outranks_unanchored_pattern() -> None:
    rules = [build_rule(re.compile("c[ei]"), "ch", ""), build_rule("c", "k", "")]

    assert _phonemes("ce", rules) == [("c", "k", 0)]


def test_unanchored_patterns_prefer_longer_source() -> None:
    rules = [build_rule(re.compile("c[ei]"), "ch", ""), build_rule(re.compile("ch[ei]"), "k", "")]

    assert _phonemes("che", rules) == [("che", "k", 0)]


def test_unanchored_pattern_must_match_at_cursor() -> None:
    """A pattern hit further inside the word does not count at the cursor."""

    rules = [build_rule(re.compile("b"), "bee", "")]

    assert _phonemes("ab", rules) == [("b", "bee", 1)]


def test_rule_weights_follow_tiers() -> None:
    multi = build_rule("iu", "ee-you", "")
    anchored = build_rule(re.compile("^e"), "yeh", "")
    single = build_rule("a", "ah", "")
    loose = build_rule(re.compile("ce"), "che", "")

    assert rule_weight(multi) == (3, 2)
    assert rule_weight(anchored) == (2, 0)
    assert rule_weight(single) == (1, 1)
    assert rule_weight(loose) == (0, 2)
    assert order_rules([loose, single, anchored, multi]) == [multi, anchored, single, loose]


def test_order_rules_keeps_declaration_order_for_ties() -> None:
    first = build_rule("a", "first", "")
    second = build_rule("a", "second", "")

    assert order_rules([first, second]) == [first, second]
    assert _phonemes("a", [first, second]) == [("a", "first", 0)]


def test_unmatched_characters_are_skipped() -> None:
    steps = list(scan_word("bac", [build_rule("a", "ah", "")]))

    assert [(step.kind, step.start, step.length) for step in steps] == [
        (SKIP, 0, 1),
        (MATCH, 1, 1),
        (SKIP, 2, 1),
    ]


def test_zero_width_pattern_never_stalls_scan() -> None:
    lookahead = PronunciationRule(
        pattern=RegexPattern(regex=re.compile("(?=a)"), anchored=False),
        phoneme="x",
        explanation="",
    )

    assert find_pronunciation_matches("aaa", [lookahead]) == []


def test_offsets_survive_characters_that_lowercase_to_two_code_points() -> None:
    matches = find_pronunciation_matches("İa", [build_rule("a", "ah", "")])

    assert [(match.text, match.start_index) for match in matches] == [("a", 1)]


def test_empty_word_and_empty_rules() -> None:
    assert find_pronunciation_matches("", get_pronunciation_rules()) == []
    assert find_pronunciation_matches("acasă", []) == []


def test_romanian_initial_e_applies_to_native_words() -> None:
    rules = get_pronunciation_rules("ro", "en")

    assert _phonemes("este", rules) == [("e", "yeh", 0), ("e", "eh", 3)]
    assert _phonemes("ele", rules) == [("e", "yeh", 0), ("e", "eh", 2)]


def test_romanian_initial_e_skips_names() -> None:
    """Names such as Eva and Elena fall through to the plain 'e' rule."""

    rules = get_pronunciation_rules("ro", "en")

    for word in ("Eva", "Elena", "Emanuel", "Europa"):
        first = find_pronunciation_matches(word, rules)[0]
        assert first.start_index == 0
        assert first.pronunciation != "yeh", word

    assert _phonemes("Eva", rules) == [("E", "eh", 0), ("a", "ah", 2)]


def test_romanian_special_vowels_are_detected() -> None:
    rules = get_pronunciation_rules("ro", "en")

    assert _phonemes("acasă", rules) == [("a", "ah", 0), ("a", "ah", 2), ("ă", "uh", 4)]
    assert _phonemes("Când", rules) == [("â", "uh", 1)]


def test_romani_aspirated_digraph_wins_over_single_letters() -> None:
    rules = get_pronunciation_rules("rom", "en")

    assert _phonemes("čhavo", rules) == [
        ("čh", "ch-h", 0),
        ("a", "ah", 2),
        ("o", "oh", 4),
    ]
