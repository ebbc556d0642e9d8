"""Split raw lesson text into paragraphs, sentences and word tokens.

``parse_lesson`` produces the ``ParsedLesson`` tree stored as a lesson's
``content``. Identifiers are short content hashes suffixed with the segment's
position; they are display keys only and may collide across documents.
"""

from __future__ import annotations

import re

from lesson_pipeline.config import (
    EMPTY_LESSON_TITLE,
    MAX_TITLE_LENGTH,
    UNTITLED_LESSON_TITLE,
)
from lesson_pipeline.models import ParsedLesson, ParsedParagraph, ParsedSentence

SENTENCE_TERMINALS = ".!?…"

# Blank line, or a newline followed by an indented line.
PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n|\n(?=\s{2,})")
SENTENCE_RE = re.compile(r"[^.!?…]+[.!?…]+(?:\s+|\Z)|[^.!?…]+\Z")
# Everything except word characters, whitespace, combining marks, Romanian
# letters, apostrophes and hyphens.
NON_WORD_RE = re.compile(
    r"[^\w\s\N{COMBINING GRAVE ACCENT}-\N{COMBINING LATIN SMALL LETTER X}"
    r"ăâîșțşţĂÂÎȘȚŞŢ'\N{RIGHT SINGLE QUOTATION MARK}\-]"
)
WHITESPACE_RE = re.compile(r"\s+")

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_id(text: str, index: int) -> str:
    """Return a short display key for a text segment.

    The key is a signed 32-bit rolling hash (``h * 31 + unit`` over UTF-16
    code units) rendered in base 36, followed by ``-<index>``. Equal text at
    equal positions always yields the same key.

    Args:
        text: Segment text.
        index: Position of the segment among its siblings.

    Returns:
        Key such as ``"1x9k2p-0"``.
    """

    data = text.encode("utf-16-le")
    value = 0
    for pos in range(0, len(data), 2):
        unit = data[pos] | (data[pos + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return f"{_to_base36(abs(value))}-{index}"


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping terminal punctuation.

    A sentence is a run of non-terminal characters followed by one or more of
    ``.``, ``!``, ``?`` or ``…``; a trailing run without punctuation is a
    sentence too.

    Args:
        text: Paragraph or line of text.

    Returns:
        Trimmed, non-empty sentences in order.
    """

    sentences = (match.group(0).strip() for match in SENTENCE_RE.finditer(text))
    return [sentence for sentence in sentences if sentence]


def tokenize_words(sentence: str) -> list[str]:
    """Split a sentence into word tokens with punctuation removed.

    Hyphens and apostrophes are kept inside tokens, so ``"didn't"`` and
    ``"într-o"`` stay whole.
    """

    cleaned = NON_WORD_RE.sub("", sentence)
    return [token for token in WHITESPACE_RE.split(cleaned) if token]


def extract_title(text: str) -> str:
    """Pick a lesson title from the first non-empty line.

    Short lines without sentence punctuation are used as-is; otherwise the
    first sentence of the line is used.
    """

    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return UNTITLED_LESSON_TITLE

    first_line = lines[0]
    if len(first_line) < MAX_TITLE_LENGTH and not any(
        ch in SENTENCE_TERMINALS for ch in first_line
    ):
        return first_line

    sentences = split_sentences(first_line)
    return sentences[0] if sentences else UNTITLED_LESSON_TITLE


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines or indented line starts.

    Newlines inside a paragraph collapse to spaces. Text without any
    paragraph break comes back as a single paragraph.
    """

    paragraphs = [
        part.replace("\n", " ").strip() for part in PARAGRAPH_SPLIT_RE.split(text)
    ]
    paragraphs = [part for part in paragraphs if part]
    return paragraphs if paragraphs else [text]


def parse_lesson(text: str) -> ParsedLesson:
    """Parse raw lesson text into a paragraph/sentence/word tree.

    Args:
        text: Lesson text as typed or pasted by the author.

    Returns:
        ``ParsedLesson``; empty input gives the ``"Empty Lesson"`` title and
        no paragraphs.
    """

    if not text or not text.strip():
        return ParsedLesson(title=EMPTY_LESSON_TITLE, paragraphs=())

    clean_text = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    title = extract_title(clean_text)

    paragraphs: list[ParsedParagraph] = []
    for p_index, paragraph_text in enumerate(split_paragraphs(clean_text)):
        sentences = tuple(
            ParsedSentence(
                id=generate_id(sentence_text, s_index),
                text=sentence_text,
                words=tuple(tokenize_words(sentence_text)),
            )
            for s_index, sentence_text in enumerate(split_sentences(paragraph_text))
        )
        paragraphs.append(
            ParsedParagraph(
                id=generate_id(paragraph_text, p_index),
                text=paragraph_text,
                sentences=sentences,
            )
        )

    return ParsedLesson(title=title, paragraphs=tuple(paragraphs))


def reconstruct_lesson(lesson: ParsedLesson) -> str:
    """Rebuild editable text from a parsed lesson.

    Sentences are joined with spaces and paragraphs with a blank line, so
    parsing the result again gives the same paragraph and sentence texts.
    """

    return "\n\n".join(
        " ".join(sentence.text for sentence in paragraph.sentences)
        for paragraph in lesson.paragraphs
    )
