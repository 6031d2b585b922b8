"""
Scale-word strategies for segment-grouping languages.

A strategy answers two questions for a segment at a given scale index
(1 = first grouping above the units):

    word_for_index(index, segment) → the scale word, or "" when the language
                                     has no word for that index
    speaks_one(index)              → whether a segment equal to 1 is voiced
                                     before the scale word

Strategies are immutable and safe to share between threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .validators import raise_for_errors, validate_scale_words


def slavic_plural(n: int, forms: Sequence[str]) -> str:
    """Pick the (one, few, many) form for n.

    1, 21, 31 → one;  2-4, 22-24 → few;  0, 5-20, 25-30 → many.
    """
    last_two = n % 100
    last = n % 10
    if 11 <= last_two <= 19:
        return forms[2]
    if last == 1:
        return forms[0]
    if 2 <= last <= 4:
        return forms[1]
    return forms[2]


class ScaleWords(ABC):
    """Base strategy. Subclasses map (index, segment) to a scale word."""

    @abstractmethod
    def word_for_index(self, index: int, segment: int) -> str:
        ...

    def speaks_one(self, index: int) -> bool:
        return True

    @property
    @abstractmethod
    def max_index(self) -> int:
        """Highest index with a defined word."""


class DirectScaleWords(ScaleWords):
    """One word per index: thousand, million, billion …"""

    def __init__(self, words: Sequence[str]):
        raise_for_errors(validate_scale_words(words))
        self._words = tuple(words)

    def word_for_index(self, index: int, segment: int) -> str:
        if 1 <= index <= len(self._words):
            return self._words[index - 1]
        return ""

    @property
    def max_index(self) -> int:
        return len(self._words)


class InflectedScaleWords(ScaleWords):
    """One (one, few, many) triple per index, chosen by the Slavic plural rule.

    тысяча / тысячи / тысяч, миллион / миллиона / миллионов …
    """

    def __init__(
        self,
        forms: Sequence[tuple[str, str, str]],
        plural: Callable[[int, Sequence[str]], str] = slavic_plural,
    ):
        for triple in forms:
            raise_for_errors(validate_scale_words(triple))
        self._forms = tuple(tuple(f) for f in forms)
        self._plural = plural

    def word_for_index(self, index: int, segment: int) -> str:
        if 1 <= index <= len(self._forms):
            return self._plural(segment, self._forms[index - 1])
        return ""

    @property
    def max_index(self) -> int:
        return len(self._forms)


class CompoundScaleWords(ScaleWords):
    """Long scale where odd powers reuse the thousand word.

        index 1 → mil
        index 2 → milhão / milhões
        index 3 → mil milhões
        index 4 → bilião / biliões
        index 5 → mil biliões

    Base words are pluralized with ``pluralize`` when the segment exceeds one;
    the "thousand + previous" compounds are always plural. Past the last base
    word every index is a vocabulary gap (empty string).
    """

    def __init__(self, thousand: str, words: Sequence[str], pluralize: Callable[[str], str]):
        raise_for_errors(validate_scale_words([thousand, *words]))
        self._thousand = thousand
        self._words = tuple(words)
        self._pluralize = pluralize

    def word_for_index(self, index: int, segment: int) -> str:
        if index < 1:
            return ""
        if index == 1:
            return self._thousand

        if index % 2 == 0:
            position = index // 2 - 1
            if position >= len(self._words):
                return ""
            base = self._words[position]
            return self._pluralize(base) if segment > 1 else base

        position = (index - 1) // 2 - 1
        if position >= len(self._words):
            return ""
        return f"{self._thousand} {self._pluralize(self._words[position])}"

    def speaks_one(self, index: int) -> bool:
        # "mil", "mil milhões": the thousand word never takes "one"
        return index % 2 == 0

    @property
    def max_index(self) -> int:
        return 2 * len(self._words) + 1


class AgglutinativeScaleWords(ScaleWords):
    """Myriad-style words (万, 億, 兆 …) that never inflect.

    ``omit_one_through`` is the highest index at which a segment of 1 goes
    unspoken: Korean says 만 but 일억 (threshold 1), Japanese says 一万
    (threshold 0).
    """

    def __init__(self, words: Sequence[str], omit_one_through: int = 0):
        raise_for_errors(validate_scale_words(words))
        self._words = tuple(words)
        self.omit_one_through = omit_one_through

    def word_for_index(self, index: int, segment: int) -> str:
        if 1 <= index <= len(self._words):
            return self._words[index - 1]
        return ""

    def speaks_one(self, index: int) -> bool:
        return index > self.omit_one_through

    @property
    def max_index(self) -> int:
        return len(self._words)
