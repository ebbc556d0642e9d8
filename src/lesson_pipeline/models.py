"""Data models shared by the segmentation, alignment and pronunciation stages.

Every record is immutable so lesson structures can be passed between stages
(and handed to the persistence layer) without defensive copies. The
``to_dict`` helpers render the JSON shapes stored in lesson documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Any, Mapping

WORD_STATUSES = ("unknown", "known", "blank")


@dataclass(frozen=True)
class LiteralPattern:
    """Plain letter sequence matched with ``startswith`` at the scan cursor."""

    text: str


@dataclass(frozen=True)
class RegexPattern:
    """Compiled pattern matched against the remainder of a word.

    ``anchored`` rules are only eligible at absolute word position 0.
    """

    regex: re.Pattern[str]
    anchored: bool

    @property
    def source(self) -> str:
        """Return the original pattern source."""

        return self.regex.pattern


@dataclass(frozen=True)
class PronunciationRule:
    """One letter (or letter group) and the hint shown to the learner."""

    pattern: LiteralPattern | RegexPattern
    phoneme: str
    explanation: str


@dataclass(frozen=True)
class PronunciationMatch:
    """A rule hit inside one word.

    ``text`` is sliced from the original-case word; ``start_index`` and
    ``end_index`` are inclusive character offsets into that word.
    """

    text: str
    pronunciation: str
    explanation: str
    start_index: int
    end_index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "pronunciation": self.pronunciation,
            "explanation": self.explanation,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }


@dataclass(frozen=True)
class ParsedSentence:
    """Sentence text and its word tokens."""

    id: str
    text: str
    words: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "words": list(self.words)}


@dataclass(frozen=True)
class ParsedParagraph:
    """Paragraph text and its sentences."""

    id: str
    text: str
    sentences: tuple[ParsedSentence, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "sentences": [sentence.to_dict() for sentence in self.sentences],
        }


@dataclass(frozen=True)
class ParsedLesson:
    """Structured lesson tree produced by :func:`parse_lesson`.

    The dictionary form is the ``content`` payload of a stored lesson document,
    so :meth:`to_dict` and :meth:`from_dict` must stay exact inverses.
    """

    title: str
    paragraphs: tuple[ParsedParagraph, ...] = field(default_factory=tuple)

    @property
    def words(self) -> tuple[str, ...]:
        """Return every word token in reading order."""

        return tuple(
            word
            for paragraph in self.paragraphs
            for sentence in paragraph.sentences
            for word in sentence.words
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "paragraphs": [paragraph.to_dict() for paragraph in self.paragraphs],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ParsedLesson:
        """Rebuild a lesson from its stored dictionary shape.

        Args:
            payload: Mapping with ``title`` and ``paragraphs`` keys.

        Returns:
            Equivalent ``ParsedLesson`` instance.

        Raises:
            ValueError: If required keys are missing.
        """

        try:
            paragraphs = tuple(
                ParsedParagraph(
                    id=str(paragraph["id"]),
                    text=str(paragraph["text"]),
                    sentences=tuple(
                        ParsedSentence(
                            id=str(sentence["id"]),
                            text=str(sentence["text"]),
                            words=tuple(str(word) for word in sentence["words"]),
                        )
                        for sentence in paragraph["sentences"]
                    ),
                )
                for paragraph in payload["paragraphs"]
            )
            title = str(payload["title"])
        except KeyError as exc:
            raise ValueError(f"Lesson content is missing key {exc.args[0]!r}") from exc
        return cls(title=title, paragraphs=paragraphs)


@dataclass(frozen=True)
class AlignedWord:
    """One position across the target, decode and translation columns."""

    rom: str
    decode: str
    eng: str
    status: str = "unknown"

    def to_dict(self) -> dict[str, str]:
        return {"rom": self.rom, "decode": self.decode, "eng": self.eng, "status": self.status}


@dataclass(frozen=True)
class ProcessedSentence:
    """A sentence entered as parallel target/decode/translation columns."""

    id: str
    target: str
    decode: str
    translation: str
    words: tuple[AlignedWord, ...]
    created_at: str
    last_modified: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "target": self.target,
            "decode": self.decode,
            "translation": self.translation,
            "words": [word.to_dict() for word in self.words],
            "createdAt": self.created_at,
            "lastModified": self.last_modified,
        }


@dataclass(frozen=True)
class LessonProgress:
    """Word status counts across a set of processed sentences."""

    total: int = 0
    known: int = 0
    unknown: int = 0
    blank: int = 0
    percentage: int = 0


@dataclass(frozen=True)
class WordAnnotation:
    """Pronunciation hints for one word token of a parsed lesson."""

    paragraph_id: str
    sentence_id: str
    word: str
    normalized: str
    matches: tuple[PronunciationMatch, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "paragraphId": self.paragraph_id,
            "sentenceId": self.sentence_id,
            "word": self.word,
            "normalized": self.normalized,
            "matches": [match.to_dict() for match in self.matches],
        }
