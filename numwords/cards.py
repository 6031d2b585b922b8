"""
Magnitude cards: the vocabulary of the greedy decomposer.

A card pairs a magnitude with its word (1000 → "mille"). A language's cards
form an immutable ``CardTable`` sorted strictly descending, so the first card
not larger than a remainder is always the largest usable one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union


@dataclass(frozen=True)
class Card:
    magnitude: int
    word: str


@dataclass(frozen=True)
class WordValuePair:
    """A word (or partially merged phrase) with the magnitude it denotes."""

    word: str
    magnitude: int


# Nested list of WordValuePair / DecompositionTree, one per conversion call
DecompositionTree = list


class CardTable:
    """Immutable, strictly descending sequence of cards.

    Built once per language instance. The table is validated on construction
    and ``InvalidCardTableError`` is raised when any ERROR finding turns up.
    """

    __slots__ = ("_cards", "_by_magnitude")

    def __init__(self, cards: Iterable[Union[Card, tuple[int, str]]]):
        from .validators import raise_for_errors, validate_all

        self._cards: tuple[Card, ...] = tuple(
            c if isinstance(c, Card) else Card(int(c[0]), c[1]) for c in cards
        )
        raise_for_errors(validate_all(self._cards))
        self._by_magnitude = {c.magnitude: c.word for c in self._cards}

    @classmethod
    def from_mapping(cls, mapping: dict[int, str]) -> "CardTable":
        """Build from {magnitude: word}, sorting descending."""
        return cls(Card(m, w) for m, w in sorted(mapping.items(), reverse=True))

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, magnitude: object) -> bool:
        return magnitude in self._by_magnitude

    def __repr__(self) -> str:
        return f"CardTable({len(self._cards)} cards, max={self._cards[0].magnitude})"

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def has_zero(self) -> bool:
        return 0 in self._by_magnitude

    def word_for(self, magnitude: int) -> str:
        """Word for an exact magnitude. Raises KeyError when absent."""
        return self._by_magnitude[magnitude]

    def largest_at_most(self, remainder: int) -> Card | None:
        """First (largest) card whose magnitude is <= remainder."""
        for card in self._cards:
            if card.magnitude <= remainder:
                return card
        return None
