"""
German.

Card-based; numbers below a million are written as one word, ones precede
tens ("einundzwanzig"), and scale nouns from Million upward are capitalized,
separated by spaces and pluralized.

    21       → "einundzwanzig"
    1000     → "eintausend"
    1000000  → "eine Million"
    2000001  → "zwei Millionen eins"
"""

from __future__ import annotations

from ..cards import WordValuePair
from ..grammar import CardLanguage, MergeKind, classify, combine
from ..models import CurrencyAmount

ONES = ("", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun")
TEENS = (
    "zehn", "elf", "zwölf", "dreizehn", "vierzehn",
    "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn",
)
TENS = ("", "", "zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig")

SCALE_NOUNS = (
    "Million", "Milliarde", "Billion", "Billiarde",
    "Trillion", "Trilliarde", "Quadrillion", "Quadrilliarde",
)

CARDS: tuple[tuple[int, str], ...] = (
    *((10 ** (6 + 3 * i), noun) for i, noun in reversed(list(enumerate(SCALE_NOUNS)))),
    (1000, "tausend"),
    (100, "hundert"),
    *((10 * t, TENS[t]) for t in range(9, 1, -1)),
    *((10 + i, TEENS[i]) for i in range(9, -1, -1)),
    *((i, ONES[i]) for i in range(9, 0, -1)),
    (0, "null"),
)

ORDINAL_BELOW_TWENTY: dict[int, str] = {
    1: "erste", 2: "zweite", 3: "dritte", 4: "vierte", 5: "fünfte",
    6: "sechste", 7: "siebte", 8: "achte", 9: "neunte",
    **{10 + i: word + "te" for i, word in enumerate(TEENS)},
}


def plural(noun: str) -> str:
    """Million → Millionen, Milliarde → Milliarden."""
    return noun + "n" if noun.endswith("e") else noun + "en"


# "Millionen" / "Million" → "millionste"
ORDINAL_SCALE_STEMS: dict[str, str] = {}
for _noun in SCALE_NOUNS:
    _stem = (_noun[:-1] if _noun.endswith("e") else _noun).lower() + "ste"
    ORDINAL_SCALE_STEMS[_noun] = _stem
    ORDINAL_SCALE_STEMS[plural(_noun)] = _stem


class German(CardLanguage):
    code = "de"
    name = "German"

    negative_word = "minus"
    decimal_separator_word = "komma"
    zero_word = "null"

    cards = CARDS

    def merge(self, left: WordValuePair, right: WordValuePair) -> WordValuePair:
        kind = classify(left, right)
        l_word, r_word = left.word, right.word
        l_num, r_num = left.magnitude, right.magnitude

        if kind == MergeKind.IMPLICIT_ONE:
            if r_num in (100, 1000):
                return combine(left, right, "ein" + r_word, kind)
            if r_num < 10**6:
                return combine(left, right, r_word, kind)
            return combine(left, right, f"eine {r_word}", kind)

        if kind == MergeKind.MULTIPLY:
            if r_num >= 10**6:
                return combine(left, right, f"{l_word} {plural(r_word)}", kind)
            return combine(left, right, l_word + r_word, kind)

        # ones before tens: "ein" + "und" + "zwanzig"
        if r_num < 10 and 10 < l_num < 100:
            ones = "ein" if r_num == 1 else r_word
            return combine(left, right, f"{ones}und{l_word}", kind)
        if l_num >= 10**6:
            return combine(left, right, f"{l_word} {r_word}", kind)
        return combine(left, right, l_word + r_word, kind)

    # ── Ordinals ──

    def integer_to_ordinal(self, n: int) -> str:
        words = self.integer_to_words(n)
        tail = n % 100

        if 1 <= tail <= 19:
            cardinal_tail = ONES[tail] if tail < 10 else TEENS[tail - 10]
            return words[: -len(cardinal_tail)] + ORDINAL_BELOW_TWENTY[tail]

        head, _, last = words.rpartition(" ")
        if last in ORDINAL_SCALE_STEMS:
            # count and noun fuse: "eine Million" → "einmillionste"
            rest, _, count = head.rpartition(" ")
            count = "ein" if count == "eine" else count
            return (rest + " " if rest else "") + count + ORDINAL_SCALE_STEMS[last]
        return words + "ste"

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        parts = []
        if amount.units or not amount.cents:
            parts.append(f"{self._count(amount.units)} Euro")
        if amount.cents:
            parts.append(f"{self._count(amount.cents)} Cent")

        words = " und ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words

    def _count(self, n: int) -> str:
        # "ein Euro", not "eins Euro"
        return "ein" if n == 1 else self.integer_to_words(n)
