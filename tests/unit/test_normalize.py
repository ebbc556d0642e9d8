"""Unit tests for vocabulary key normalization."""

from __future__ import annotations

from lesson_pipeline.text.normalize import normalize_word, vocabulary_keys


def test_normalize_word_strips_punctuation_and_lowercases() -> None:
    assert normalize_word("Acasă!") == "acasă"
    assert normalize_word("„Bună”") == "bună"
    assert normalize_word("Ce-ai") == "ceai"
    assert normalize_word("didn't") == "didnt"


def test_normalize_word_keeps_letters_marks_and_digits() -> None:
    assert normalize_word("ȘTIU") == "știu"
    assert normalize_word("mâine2") == "mâine2"
    assert normalize_word("a\N{COMBINING BREVE}") == "a\N{COMBINING BREVE}"


def test_normalize_word_strips_symbols() -> None:
    assert normalize_word("a+b=c") == "abc"
    assert normalize_word("€5") == "5"


def test_normalize_word_empty_input() -> None:
    assert normalize_word("") == ""
    assert normalize_word("...") == ""


def test_vocabulary_keys_deduplicates_in_first_seen_order() -> None:
    assert vocabulary_keys(["Eva", "merge", "eva!", "", "...", "Merge"]) == ["eva", "merge"]
