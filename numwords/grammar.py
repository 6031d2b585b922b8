"""
Grammar base classes.

A language is a ``Language`` subclass that owns its vocabulary and picks one
of the two engines:

  CardLanguage     cards + a merge operator (greedy decomposition)
  SegmentLanguage  digit grouping + a scale-word strategy + a segment builder

The base class handles everything outside the integer itself: input
normalization, the negative word, the decimal separator and fractional
digits, ordinal/currency dispatch and option validation.

Merge operators never compute magnitudes themselves. ``classify`` names the
relationship between two pairs and ``combine`` builds the result from it, so
the merged magnitude is always the sum or the product of its inputs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Sequence

from pydantic import ValidationError

from .cards import Card, CardTable, WordValuePair
from .config import Settings, get_settings
from .decomposer import CardDecomposer, Decomposer, RenderedSegment, SegmentDecomposer
from .exceptions import InvalidOptionsError, UnsupportedModeError
from .models import ConversionMode, ConversionOptions, CurrencyAmount, ParsedNumber
from .normalizer import NumericInput, normalize, normalize_currency, normalize_ordinal
from .scales import ScaleWords
from .segments import Grouping


# ─── Merge Classification ───────────────────────────────────────────


class MergeKind(str, Enum):
    """How two adjacent pairs relate during reduction."""

    IMPLICIT_ONE = "implicit_one"  # left is the quantity-one marker: one × right
    MULTIPLY = "multiply"  # right is larger: left × right ("two" "hundred")
    ADD = "add"  # right is smaller: left + right ("twenty" "one")


def classify(left: WordValuePair, right: WordValuePair) -> MergeKind:
    if left.magnitude == 1:
        return MergeKind.IMPLICIT_ONE
    if right.magnitude > left.magnitude:
        return MergeKind.MULTIPLY
    return MergeKind.ADD


def combine(left: WordValuePair, right: WordValuePair, word: str, kind: MergeKind) -> WordValuePair:
    """Build the merged pair; the magnitude follows from ``kind``."""
    if kind == MergeKind.ADD:
        return WordValuePair(word, left.magnitude + right.magnitude)
    return WordValuePair(word, left.magnitude * right.magnitude)


# ─── Language Base ──────────────────────────────────────────────────


class Language(ABC):
    """Base class for every grammar module.

    Subclasses set the class attributes and implement ``build_decomposer``;
    ordinal and currency support is opt-in by overriding
    ``integer_to_ordinal`` and ``currency_to_words``.
    """

    code: ClassVar[str]
    name: ClassVar[str]  # English name, used for fuzzy lookup
    options_model: ClassVar[type[ConversionOptions]] = ConversionOptions

    negative_word: ClassVar[str] = "minus"
    decimal_separator_word: ClassVar[str] = "point"
    zero_word: ClassVar[str] = "zero"
    word_separator: ClassVar[str] = " "
    per_digit_decimals: ClassVar[bool] = False

    def __init__(
        self,
        options: ConversionOptions | dict[str, Any] | None = None,
        settings: Settings | None = None,
        **kwargs: Any,
    ):
        self.settings = settings or get_settings()
        self.options = self.parse_options(options, **kwargs)

        # Instance-level overrides of the class vocabulary
        if self.options.negative_word is not None:
            self.negative_word = self.options.negative_word
        if self.options.decimal_separator_word is not None:
            self.decimal_separator_word = self.options.decimal_separator_word
        if self.options.zero_word is not None:
            self.zero_word = self.options.zero_word

        self.decomposer = self.build_decomposer()

    @classmethod
    def parse_options(
        cls, options: ConversionOptions | dict[str, Any] | None = None, **kwargs: Any
    ) -> ConversionOptions:
        if isinstance(options, cls.options_model) and not kwargs:
            return options
        if isinstance(options, ConversionOptions):
            options = options.model_dump(exclude_unset=True)
        raw = {**(options or {}), **kwargs}
        try:
            return cls.options_model.model_validate(raw)
        except ValidationError as e:
            raise InvalidOptionsError(
                f"Invalid options for language '{cls.code}'",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    @classmethod
    def supported_modes(cls) -> list[ConversionMode]:
        modes = [ConversionMode.CARDINAL]
        if cls.integer_to_ordinal is not Language.integer_to_ordinal:
            modes.append(ConversionMode.ORDINAL)
        if cls.currency_to_words is not Language.currency_to_words:
            modes.append(ConversionMode.CURRENCY)
        return modes

    @classmethod
    def describe(cls) -> dict[str, Any]:
        return {
            "code": cls.code,
            "name": cls.name,
            "modes": [m.value for m in cls.supported_modes()],
            "options": sorted(cls.options_model.model_fields),
        }

    @abstractmethod
    def build_decomposer(self) -> Decomposer:
        ...

    # ── Public entry points ──

    def to_cardinal(self, value: NumericInput) -> str:
        return self.cardinal_from_parsed(normalize(value, self.settings.max_digits))

    def to_ordinal(self, value: NumericInput) -> str:
        return self.integer_to_ordinal(normalize_ordinal(value, self.settings.max_digits))

    def to_currency(self, value: NumericInput) -> str:
        return self.currency_to_words(normalize_currency(value, self.settings.max_digits))

    # ── Building blocks ──

    def cardinal_from_parsed(self, parsed: ParsedNumber) -> str:
        parts = []
        if parsed.is_negative:
            parts.append(self.negative_word)
        parts.append(self.integer_to_words(parsed.integer_part))
        if parsed.decimal_digits:
            parts.append(self.decimal_separator_word)
            parts.append(self.decimal_to_words(parsed.decimal_digits))
        return self.word_separator.join(parts)

    def integer_to_words(self, n: int) -> str:
        if n == 0:
            return self.zero_word
        return self.decomposer.render(n)

    def decimal_to_words(self, digits: str) -> str:
        """Voice fractional digits.

        Grouped (default): each leading zero is the zero word, the rest is one
        integer ("05" → "zero five", "14" → "fourteen"). Per-digit languages
        read every digit alone.
        """
        if self.per_digit_decimals:
            return self.word_separator.join(self.integer_to_words(int(d)) for d in digits)

        stripped = digits.lstrip("0")
        words = [self.zero_word] * (len(digits) - len(stripped))
        if stripped:
            words.append(self.integer_to_words(int(stripped)))
        return self.word_separator.join(words)

    def integer_to_ordinal(self, n: int) -> str:
        raise UnsupportedModeError(
            f"Language '{self.code}' does not support ordinal numbers",
            details={"lang": self.code, "mode": ConversionMode.ORDINAL.value},
        )

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        raise UnsupportedModeError(
            f"Language '{self.code}' does not support currency",
            details={"lang": self.code, "mode": ConversionMode.CURRENCY.value},
        )


# ─── Card Languages ─────────────────────────────────────────────────


class CardLanguage(Language):
    """Greedy-decomposition language: a card table plus a merge operator."""

    cards: ClassVar[Sequence[tuple[int, str]]] = ()

    def card_table(self) -> CardTable:
        return CardTable(Card(m, w) for m, w in self.cards)

    def build_decomposer(self) -> Decomposer:
        self.table = self.card_table()
        return CardDecomposer(self.table, self.merge, self.finalize)

    @abstractmethod
    def merge(self, left: WordValuePair, right: WordValuePair) -> WordValuePair:
        ...

    def finalize(self, words: str) -> str:
        return words


# ─── Segment Languages ──────────────────────────────────────────────


class SegmentLanguage(Language):
    """Digit-grouping language: segments voiced one by one, tagged with scale words."""

    grouping: ClassVar[Grouping] = Grouping.THREES

    def build_decomposer(self) -> Decomposer:
        self.scales = self.build_scales()
        return SegmentDecomposer(
            self.grouping,
            self.scales,
            self.segment_to_words,
            self.join_segments,
            self.settings.vocabulary_gap,
        )

    @abstractmethod
    def build_scales(self) -> ScaleWords:
        ...

    @abstractmethod
    def segment_to_words(self, value: int, index: int) -> str:
        ...

    def segment_phrase(self, segment: RenderedSegment) -> str:
        return self.word_separator.join(w for w in (segment.words, segment.scale_word) if w)

    def join_segments(self, segments: Sequence[RenderedSegment], n: int) -> str:
        return self.word_separator.join(self.segment_phrase(s) for s in segments)
