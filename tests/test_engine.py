"""
Tests for the card engine: card tables, table validators, the greedy
decomposer, the tree-merge reducer and merge classification.

A small English-like table keeps the expected trees readable.
"""

from __future__ import annotations

import pytest

from numwords.cards import Card, CardTable, WordValuePair
from numwords.decomposer import CardDecomposer, decompose, reduce_tree
from numwords.exceptions import InvalidCardTableError
from numwords.grammar import MergeKind, classify, combine
from numwords.models import Severity
from numwords.validators import (
    raise_for_errors,
    validate_all,
    validate_card_order,
    validate_card_words,
    validate_has_one_card,
    validate_has_zero_card,
    validate_scale_words,
    validate_unique_magnitudes,
)

# ─── Test Data ───────────────────────────────────────────────────────

WORDS = {
    1000: "thousand",
    100: "hundred",
    20: "twenty",
    10: "ten",
    9: "nine",
    8: "eight",
    7: "seven",
    6: "six",
    5: "five",
    4: "four",
    3: "three",
    2: "two",
    1: "one",
    0: "zero",
}

TABLE = CardTable.from_mapping(WORDS)


def _pair(magnitude: int) -> WordValuePair:
    return WordValuePair(WORDS[magnitude], magnitude)


ONE = _pair(1)


def _merge(left: WordValuePair, right: WordValuePair) -> WordValuePair:
    kind = classify(left, right)
    if kind == MergeKind.IMPLICIT_ONE:
        return combine(left, right, right.word, kind)
    return combine(left, right, f"{left.word} {right.word}", kind)


# ═══════════════════════════════════════════════════════════════════════
# CARD TABLE
# ═══════════════════════════════════════════════════════════════════════


class TestCardTable:
    def test_from_mapping_sorts_descending(self):
        magnitudes = [card.magnitude for card in TABLE]
        assert magnitudes == sorted(WORDS, reverse=True)

    def test_lookup(self):
        assert TABLE.word_for(100) == "hundred"
        assert 20 in TABLE
        assert 30 not in TABLE
        assert len(TABLE) == len(WORDS)

    def test_has_zero(self):
        assert TABLE.has_zero
        assert not CardTable([(10, "ten"), (1, "one")]).has_zero

    def test_largest_at_most(self):
        assert TABLE.largest_at_most(99) == Card(20, "twenty")
        assert TABLE.largest_at_most(0) == Card(0, "zero")

    def test_largest_at_most_without_zero_card(self):
        assert CardTable([(10, "ten"), (1, "one")]).largest_at_most(0) is None

    def test_accepts_tuples_and_cards(self):
        table = CardTable([Card(10, "ten"), (1, "one")])
        assert table.cards == (Card(10, "ten"), Card(1, "one"))

    def test_rejects_ascending_table(self):
        with pytest.raises(InvalidCardTableError) as exc_info:
            CardTable([(1, "one"), (10, "ten")])
        codes = {f["code"] for f in exc_info.value.details["findings"]}
        assert codes == {"CARDS_NOT_DESCENDING"}

    def test_rejects_table_without_one(self):
        with pytest.raises(InvalidCardTableError, match="magnitude 1"):
            CardTable([(10, "ten"), (0, "zero")])

    def test_rejects_empty_table(self):
        with pytest.raises(InvalidCardTableError):
            CardTable([])

    def test_error_is_also_value_error(self):
        with pytest.raises(ValueError):
            CardTable([(10, "ten"), (10, "dix"), (1, "one")])


# ═══════════════════════════════════════════════════════════════════════
# TABLE VALIDATORS
# ═══════════════════════════════════════════════════════════════════════


class TestTableValidators:
    def test_clean_table_has_no_errors(self):
        assert not [f for f in validate_all(TABLE.cards) if f.severity == Severity.ERROR]

    def test_missing_zero_is_only_a_warning(self):
        findings = validate_has_zero_card([Card(1, "one")])
        assert len(findings) == 1
        assert findings[0].severity == Severity.WARNING
        assert findings[0].code == "MISSING_ZERO_CARD"

    def test_order(self):
        findings = validate_card_order([Card(1, "one"), Card(5, "five")])
        assert findings[0].details == {"previous": 1, "current": 5}

    def test_equal_neighbours_are_duplicates_not_misordered(self):
        cards = [Card(5, "five"), Card(5, "cinq"), Card(1, "one")]
        assert validate_card_order(cards) == []
        assert validate_unique_magnitudes(cards)[0].code == "DUPLICATE_MAGNITUDE"

    def test_has_one_card(self):
        assert validate_has_one_card([Card(1, "one")]) == []
        assert validate_has_one_card([Card(2, "two")])[0].code == "MISSING_ONE_CARD"

    def test_card_words(self):
        codes = {f.code for f in validate_card_words([Card(-1, "minus"), Card(3, "  ")])}
        assert codes == {"NEGATIVE_MAGNITUDE", "EMPTY_CARD_WORD"}

    def test_scale_words(self):
        findings = validate_scale_words(["thousand", "", "billion"])
        assert [(f.code, f.details["index"]) for f in findings] == [("EMPTY_SCALE_WORD", 2)]

    def test_no_scale_words_is_info(self):
        findings = validate_scale_words([])
        assert [(f.severity, f.code) for f in findings] == [(Severity.INFO, "NO_SCALE_WORDS")]

    def test_raise_for_errors_ignores_warnings(self):
        raise_for_errors(validate_has_zero_card([Card(1, "one")]))

    def test_raise_for_errors(self):
        with pytest.raises(InvalidCardTableError):
            raise_for_errors(validate_scale_words([""]))


# ═══════════════════════════════════════════════════════════════════════
# GREEDY DECOMPOSER
# ═══════════════════════════════════════════════════════════════════════


class TestDecompose:
    def test_single_card(self):
        assert decompose(TABLE, 5) == [ONE, _pair(5)]

    def test_zero_matches_zero_card_once(self):
        assert decompose(TABLE, 0) == [ONE, _pair(0)]

    def test_zero_without_zero_card_is_empty(self):
        table = CardTable([(10, "ten"), (1, "one")])
        assert decompose(table, 0) == []

    def test_quantity_above_one_nests(self):
        assert decompose(TABLE, 300) == [[ONE, _pair(3)], _pair(100)]

    def test_sum_of_cards(self):
        assert decompose(TABLE, 21) == [ONE, _pair(20), ONE, _pair(1)]

    def test_remainder_zero_stops_without_zero_card(self):
        assert _pair(0) not in decompose(TABLE, 1000)

    def test_nested_quantity(self):
        tree = decompose(TABLE, 2341)
        assert tree[:2] == [[ONE, _pair(2)], _pair(1000)]
        assert tree[-2:] == [ONE, _pair(1)]


# ═══════════════════════════════════════════════════════════════════════
# TREE-MERGE REDUCER
# ═══════════════════════════════════════════════════════════════════════


class TestReduceTree:
    def test_implicit_one(self):
        assert reduce_tree([ONE, _pair(5)], _merge) == WordValuePair("five", 5)

    def test_multiply(self):
        result = reduce_tree(decompose(TABLE, 300), _merge)
        assert result == WordValuePair("three hundred", 300)

    def test_full_number(self):
        result = reduce_tree(decompose(TABLE, 2341), _merge)
        assert result == WordValuePair("two thousand three hundred two twenty one", 2341)

    def test_single_nested_element_unwraps(self):
        assert reduce_tree([[_pair(7)]], _merge) == _pair(7)

    def test_empty_tree_raises(self):
        with pytest.raises(ValueError):
            reduce_tree([], _merge)

    def test_magnitude_always_equals_input(self):
        for n in range(0, 5000, 7):
            assert reduce_tree(decompose(TABLE, n), _merge).magnitude == n


# ═══════════════════════════════════════════════════════════════════════
# MERGE CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════


class TestMergeKind:
    def test_implicit_one(self):
        assert classify(ONE, _pair(100)) == MergeKind.IMPLICIT_ONE

    def test_multiply(self):
        assert classify(_pair(2), _pair(100)) == MergeKind.MULTIPLY

    def test_add(self):
        assert classify(_pair(20), _pair(1)) == MergeKind.ADD

    def test_combine_follows_kind(self):
        two, hundred = _pair(2), _pair(100)
        assert combine(two, hundred, "w", MergeKind.MULTIPLY).magnitude == 200
        assert combine(hundred, two, "w", MergeKind.ADD).magnitude == 102
        assert combine(ONE, hundred, "w", MergeKind.IMPLICIT_ONE).magnitude == 100


class TestCardDecomposer:
    def test_render(self):
        assert CardDecomposer(TABLE, _merge).render(21) == "twenty one"

    def test_finalize_applied(self):
        decomposer = CardDecomposer(TABLE, _merge, finalize=lambda w: w.replace(" ", "-"))
        assert decomposer.render(300) == "three-hundred"
