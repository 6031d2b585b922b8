"""
English (short scale).

    1234567  → "one million two hundred thirty-four thousand five hundred sixty-seven"
    101      → "one hundred one"           (use_and → "one hundred and one")
    1500     → "one thousand five hundred" (hundred_pairing → "fifteen hundred")
"""

from __future__ import annotations

from typing import Sequence

from ..decomposer import RenderedSegment
from ..grammar import SegmentLanguage
from ..models import ConversionOptions, CurrencyAmount
from ..scales import DirectScaleWords, ScaleWords

# ─── Vocabulary ─────────────────────────────────────────────────────

ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
HUNDRED = "hundred"

SCALE_WORDS = (
    "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion", "undecillion", "duodecillion", "tredecillion", "quattuordecillion",
    "quindecillion", "sexdecillion", "septendecillion", "octodecillion", "novemdecillion",
    "vigintillion",
)

# Last-word replacements for ordinals; anything else takes "th"
ORDINAL_WORDS: dict[str, str] = {
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
}


class EnglishOptions(ConversionOptions):
    use_and: bool = False
    hundred_pairing: bool = False


def below_hundred(n: int) -> str:
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]
    tens, ones = divmod(n, 10)
    return f"{TENS[tens]}-{ONES[ones]}" if ones else TENS[tens]


class English(SegmentLanguage):
    code = "en"
    name = "English"
    options_model = EnglishOptions

    negative_word = "minus"
    decimal_separator_word = "point"
    zero_word = "zero"

    def build_scales(self) -> ScaleWords:
        return DirectScaleWords(SCALE_WORDS)

    def segment_to_words(self, value: int, index: int) -> str:
        hundreds, rest = divmod(value, 100)
        if not hundreds:
            return below_hundred(rest)

        head = f"{ONES[hundreds]} {HUNDRED}"
        if not rest:
            return head
        connector = " and " if self.options.use_and else " "
        return head + connector + below_hundred(rest)

    def join_segments(self, segments: Sequence[RenderedSegment], n: int) -> str:
        if self.options.hundred_pairing and 1100 <= n <= 9999 and n // 100 % 10:
            return self._paired_hundreds(n)

        phrases = [self.segment_phrase(s) for s in segments]
        last = segments[-1]
        # British usage: "one thousand and five", but "one thousand two hundred"
        if self.options.use_and and len(segments) > 1 and last.index == 0 and last.value < 100:
            phrases.insert(-1, "and")
        return " ".join(phrases)

    def _paired_hundreds(self, n: int) -> str:
        high, low = divmod(n, 100)
        words = f"{below_hundred(high)} {HUNDRED}"
        if low:
            words += (" and " if self.options.use_and else " ") + below_hundred(low)
        return words

    # ── Ordinals ──

    def integer_to_ordinal(self, n: int) -> str:
        cardinal = self.integer_to_words(n)
        split_at = max(cardinal.rfind(" "), cardinal.rfind("-"))
        head, last = cardinal[: split_at + 1], cardinal[split_at + 1 :]

        if last in ORDINAL_WORDS:
            last = ORDINAL_WORDS[last]
        elif last.endswith("y"):
            last = last[:-1] + "ieth"
        else:
            last += "th"
        return head + last

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        parts = []
        if amount.units or not amount.cents:
            unit = "dollar" if amount.units == 1 else "dollars"
            parts.append(f"{self.integer_to_words(amount.units)} {unit}")
        if amount.cents:
            unit = "cent" if amount.cents == 1 else "cents"
            parts.append(f"{self.integer_to_words(amount.cents)} {unit}")

        words = " and ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
