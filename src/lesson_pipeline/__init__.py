"""Lesson text segmentation and pronunciation annotation package."""

from .models import AlignedWord, ParsedLesson, PronunciationMatch, PronunciationRule
from .pronunciation.matcher import find_pronunciation_matches
from .pronunciation.rules import RuleTable, get_pronunciation_rules
from .sentences import process_sentence
from .text.normalize import normalize_word
from .text.segmenter import parse_lesson
from .text.tokenizer import align_words, split_into_sentences, tokenize_romanian

__all__ = [
    "AlignedWord",
    "ParsedLesson",
    "PronunciationMatch",
    "PronunciationRule",
    "RuleTable",
    "align_words",
    "find_pronunciation_matches",
    "get_pronunciation_rules",
    "normalize_word",
    "parse_lesson",
    "process_sentence",
    "split_into_sentences",
    "tokenize_romanian",
]
