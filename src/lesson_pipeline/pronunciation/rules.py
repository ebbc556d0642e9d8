"""Rule construction and the language-pair rule table."""

from __future__ import annotations

from dataclasses import dataclass, field
import functools
import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

from lesson_pipeline.config import DEFAULT_NATIVE_LANGUAGES, GLOBAL_DEFAULT_TARGET
from lesson_pipeline.models import LiteralPattern, PronunciationRule, RegexPattern
from lesson_pipeline.pronunciation.ro_en import RO_EN_RULES
from lesson_pipeline.pronunciation.ro_fr import RO_FR_RULES
from lesson_pipeline.pronunciation.rom_en import ROM_EN_RULES
from lesson_pipeline.validation import validate_rules

logger = logging.getLogger(__name__)

PatternSpec = Union[str, re.Pattern, LiteralPattern, RegexPattern]
RuleSpec = Tuple[PatternSpec, str, str]

ANCHOR_PREFIXES = ("^", "\\A")


def compile_pattern(pattern: str | re.Pattern[str], anchored: bool | None = None) -> RegexPattern:
    """Compile a regex source into a case-insensitive ``RegexPattern``.

    Only a source that starts with ``^`` or ``\\A`` is inferred as anchored.
    Sources that anchor later, such as ``(?:^e)`` or ``(^e|^i)``, are treated
    as unanchored. Their ``^`` then holds at every scan position, because
    matching runs on the rest of the word. Pass ``anchored=True`` for them.

    Args:
        pattern: Regex source or an already compiled pattern.
        anchored: Explicit anchoring; inferred from a leading ``^``/``\\A``
            when ``None``.

    Returns:
        Compiled pattern with its anchoring flag.

    Raises:
        ValueError: If the source does not compile.
    """

    if isinstance(pattern, re.Pattern):
        source, flags = pattern.pattern, pattern.flags
    else:
        source, flags = pattern, 0
    try:
        regex = re.compile(source, flags | re.IGNORECASE)
    except re.error as exc:
        raise ValueError(f"Invalid pronunciation pattern /{source}/: {exc}") from exc
    if anchored is None:
        anchored = source.startswith(ANCHOR_PREFIXES)
    return RegexPattern(regex=regex, anchored=anchored)


def build_rule(pattern: PatternSpec, phoneme: str, explanation: str) -> PronunciationRule:
    """Create a rule from a literal string or a regular expression.

    Plain strings become lowercase literals; compiled patterns become regex
    rules. Use :func:`compile_pattern` to build a regex rule from source text.
    """

    if isinstance(pattern, (LiteralPattern, RegexPattern)):
        built = pattern
    elif isinstance(pattern, re.Pattern):
        built = compile_pattern(pattern)
    elif isinstance(pattern, str):
        built = LiteralPattern(pattern.lower())
    else:
        raise ValueError(f"Unsupported pattern type: {type(pattern).__name__}")
    return PronunciationRule(pattern=built, phoneme=phoneme, explanation=explanation)


def build_rules(specs: Iterable[RuleSpec]) -> tuple[PronunciationRule, ...]:
    """Build rules from ``(pattern, phoneme, explanation)`` triples."""

    return tuple(build_rule(pattern, phoneme, explanation) for pattern, phoneme, explanation in specs)


@dataclass(frozen=True)
class RuleTable:
    """Immutable rule sets keyed by ``(target_language, native_language)``.

    Every rule set is validated when the table is created, so a malformed or
    zero-width pattern fails here rather than during matching. Lookups never
    fail: unknown pairs fall back to the target's default native language and
    then to the global default pair.
    """

    rules_by_pair: Mapping[tuple[str, str], tuple[PronunciationRule, ...]]
    default_native: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_NATIVE_LANGUAGES)
    )
    default_target: str = GLOBAL_DEFAULT_TARGET

    def __post_init__(self) -> None:
        frozen_rules = MappingProxyType(
            {pair: tuple(rules) for pair, rules in self.rules_by_pair.items()}
        )
        object.__setattr__(self, "rules_by_pair", frozen_rules)
        object.__setattr__(self, "default_native", MappingProxyType(dict(self.default_native)))

        for (target, native), rules in frozen_rules.items():
            validate_rules(rules, label=f"Rule set {target}/{native}")

        if self.default_pair not in frozen_rules:
            raise ValueError(f"Rule table has no rules for default pair {self.default_pair}")

    @classmethod
    def from_specs(
        cls,
        specs: Mapping[tuple[str, str], Iterable[RuleSpec]],
        default_native: Mapping[str, str] | None = None,
        default_target: str = GLOBAL_DEFAULT_TARGET,
    ) -> RuleTable:
        """Build a table from ``(pattern, phoneme, explanation)`` triples per pair."""

        return cls(
            rules_by_pair={pair: build_rules(items) for pair, items in specs.items()},
            default_native=dict(DEFAULT_NATIVE_LANGUAGES if default_native is None else default_native),
            default_target=default_target,
        )

    @property
    def default_pair(self) -> tuple[str, str]:
        return self.default_target, self.default_native.get(self.default_target, "en")

    @property
    def targets(self) -> frozenset[str]:
        return frozenset(target for target, _ in self.rules_by_pair)

    def get_rules(
        self,
        target_lang: str | None = None,
        native_lang: str | None = None,
    ) -> tuple[PronunciationRule, ...]:
        """Return the ordered rules for a language pair.

        Args:
            target_lang: Language being learned; ``None`` means the default target.
            native_lang: Learner language; ``None`` means the target's default.

        Returns:
            Rules for the exact pair, else for the target's default native
            language, else for the global default pair.
        """

        target = (target_lang or self.default_target).lower()
        default_native = self.default_native.get(target)
        native = (native_lang or default_native or "").lower()

        rules = self.rules_by_pair.get((target, native))
        if rules:
            return rules

        if default_native is not None:
            rules = self.rules_by_pair.get((target, default_native))
            if rules:
                logger.debug("No rules for %s/%s; using %s/%s", target, native, target, default_native)
                return rules

        logger.debug("No rules for %s/%s; using default pair %s/%s", target, native, *self.default_pair)
        return self.rules_by_pair[self.default_pair]


@functools.lru_cache(maxsize=1)
def default_rule_table() -> RuleTable:
    """Build the built-in rule table once per process."""

    return RuleTable.from_specs(
        {
            ("ro", "en"): RO_EN_RULES,
            ("ro", "fr"): RO_FR_RULES,
            ("rom", "en"): ROM_EN_RULES,
        }
    )


def get_pronunciation_rules(
    target_lang: str | None = None,
    native_lang: str | None = None,
    table: RuleTable | None = None,
) -> tuple[PronunciationRule, ...]:
    """Look up rules in ``table`` (the built-in table by default)."""

    return (table or default_rule_table()).get_rules(target_lang, native_lang)
