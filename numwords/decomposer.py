"""
Integer → words engines.

Two interchangeable strategies behind one ``Decomposer`` interface:

  CardDecomposer     greedy decomposition into a tree of magnitude cards,
                     folded back into one phrase by a language merge operator
  SegmentDecomposer  fixed-width digit groups, each voiced by the language and
                     tagged with a scale word from a ScaleWords strategy

Greedy decomposition of 2341 over an English-like table:

    [[two, thousand], [[three, hundred], forty, one]]   (schematically)
      → reduce: merge(two, thousand) → ("two thousand", 2000) …
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from .cards import CardTable, DecompositionTree, WordValuePair
from .config import GapPolicy
from .exceptions import VocabularyGapError
from .scales import ScaleWords
from .segments import Grouping

logger = logging.getLogger(__name__)

MergeFn = Callable[[WordValuePair, WordValuePair], WordValuePair]


# ─── Greedy Decomposer ──────────────────────────────────────────────


def decompose(table: CardTable, n: int) -> DecompositionTree:
    """Break n into a tree of card pairs, largest card first.

    A quantity of one is spelled with the magnitude-1 card; larger quantities
    are decomposed recursively into a nested tree. Zero matches the 0 card in
    a single step; a table without one yields an empty tree.
    """
    one = WordValuePair(table.word_for(1), 1)
    tree: DecompositionTree = []
    remainder = n

    while True:
        card = table.largest_at_most(remainder)
        if card is None:
            break

        if remainder == 0:
            quantity = 1
        else:
            quantity, remainder = divmod(remainder, card.magnitude)

        tree.append(one if quantity == 1 else decompose(table, quantity))
        tree.append(WordValuePair(card.word, card.magnitude))

        if remainder <= 0:
            break

    return tree


# ─── Tree-Merge Reducer ─────────────────────────────────────────────


def reduce_tree(tree: DecompositionTree, merge: MergeFn) -> WordValuePair:
    """Fold a decomposition tree into a single pair with ``merge``.

    While the sequence holds more than one element: two leading plain pairs
    are merged and the rest is re-nested behind the result; otherwise every
    element is normalized (single-element trees unwrapped, longer trees
    reduced recursively).
    """
    if not tree:
        raise ValueError("Cannot reduce an empty decomposition tree")

    current: list = list(tree)
    while len(current) > 1:
        first, second = current[0], current[1]
        if isinstance(first, WordValuePair) and isinstance(second, WordValuePair):
            rest = current[2:]
            current = [merge(first, second)]
            if rest:
                current.append(rest)
        else:
            current = [_normalize(element, merge) for element in current]

    return _normalize(current[0], merge)


def _normalize(element: Union[WordValuePair, list], merge: MergeFn) -> WordValuePair:
    if isinstance(element, WordValuePair):
        return element
    if len(element) == 1:
        return _normalize(element[0], merge)
    return reduce_tree(element, merge)


# ─── Unified Decomposer ─────────────────────────────────────────────


class Decomposer(ABC):
    """Renders a positive integer as words."""

    @abstractmethod
    def render(self, n: int) -> str:
        ...


class CardDecomposer(Decomposer):
    """decompose → reduce → finalize."""

    def __init__(
        self,
        table: CardTable,
        merge: MergeFn,
        finalize: Callable[[str], str] | None = None,
    ):
        self.table = table
        self.merge = merge
        self.finalize = finalize

    def render(self, n: int) -> str:
        words = reduce_tree(decompose(self.table, n), self.merge).word
        return self.finalize(words) if self.finalize else words


@dataclass(frozen=True)
class RenderedSegment:
    """One voiced digit group, handed to the language's joiner."""

    index: int  # 0 = units group
    value: int
    words: str  # "" when a leading one goes unspoken
    scale_word: str  # "" for the units group (or an omitted gap)


class SegmentDecomposer(Decomposer):
    """split → voice each non-zero segment → attach scale words → join.

    Args:
        grouping: How digits are grouped (threes, fours, three-then-twos).
        scales: Scale-word strategy.
        build_segment: (value, index) → words for one segment.
        join: (segments, n) → final phrase; segments are most significant first.
        gap_policy: What to do when ``scales`` has no word for an index.
    """

    def __init__(
        self,
        grouping: Grouping,
        scales: ScaleWords,
        build_segment: Callable[[int, int], str],
        join: Callable[[Sequence[RenderedSegment], int], str],
        gap_policy: GapPolicy = GapPolicy.RAISE,
    ):
        self.grouping = grouping
        self.scales = scales
        self.build_segment = build_segment
        self.join = join
        self.gap_policy = gap_policy

    def segments(self, n: int) -> list[RenderedSegment]:
        rendered: list[RenderedSegment] = []
        groups = self.grouping.split(n)

        for index in range(len(groups) - 1, -1, -1):
            value = groups[index]
            if value == 0:
                continue

            scale_word = ""
            if index > 0:
                scale_word = self.scales.word_for_index(index, value)
                if not scale_word:
                    self._handle_gap(index, value, n)

            if value == 1 and scale_word and not self.scales.speaks_one(index):
                words = ""
            else:
                words = self.build_segment(value, index)

            rendered.append(RenderedSegment(index, value, words, scale_word))

        return rendered

    def render(self, n: int) -> str:
        return self.join(self.segments(n), n)

    def _handle_gap(self, index: int, value: int, n: int) -> None:
        if self.gap_policy == GapPolicy.RAISE:
            raise VocabularyGapError(
                f"No scale word for grouping index {index} "
                f"(largest supported index is {self.scales.max_index})",
                details={"index": index, "segment": value, "digits": len(str(n))},
            )
        logger.warning(
            "Omitting scale word for grouping index %d (segment %d); "
            "output will be ambiguous",
            index,
            value,
        )
