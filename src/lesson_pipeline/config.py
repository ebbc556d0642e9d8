"""Language defaults and run configuration for the lesson pipeline."""

from __future__ import annotations

from dataclasses import dataclass

GLOBAL_DEFAULT_TARGET = "ro"

# Native language assumed when a learner profile does not name one.
DEFAULT_NATIVE_LANGUAGES = {
    "ro": "en",
    "rom": "en",
}

EMPTY_LESSON_TITLE = "Empty Lesson"
UNTITLED_LESSON_TITLE = "Untitled Lesson"
MAX_TITLE_LENGTH = 100


@dataclass(frozen=True)
class PipelineConfig:
    """Options for one :func:`lesson_pipeline.pipeline.run_pipeline` call.

    Attributes:
        target_lang: Language being learned; ``None`` selects the global default.
        native_lang: Learner language; ``None`` selects the target's default.
        strict: Whether to re-check match coverage invariants for every word.
    """

    target_lang: str | None = None
    native_lang: str | None = None
    strict: bool = True

    @property
    def resolved_target(self) -> str:
        return self.target_lang or GLOBAL_DEFAULT_TARGET
