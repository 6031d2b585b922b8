"""
Russian.

Three-digit segments with inflected scale nouns: the noun form follows the
segment's trailing digits (одна тысяча, две тысячи, пять тысяч) and
thousands are feminine. ``gender`` selects the form of the units group.
"""

from __future__ import annotations

from typing import Literal

from ..decomposer import SegmentDecomposer
from ..grammar import SegmentLanguage
from ..models import ConversionOptions, CurrencyAmount
from ..scales import InflectedScaleWords, ScaleWords, slavic_plural
from ..segments import Grouping

ONES_MASCULINE = ("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")
ONES_FEMININE = ("", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")
TEENS = (
    "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
    "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
)
TENS = (
    "", "", "двадцать", "тридцать", "сорок",
    "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто",
)
HUNDREDS = (
    "", "сто", "двести", "триста", "четыреста",
    "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот",
)

SCALE_FORMS: tuple[tuple[str, str, str], ...] = (
    ("тысяча", "тысячи", "тысяч"),
    ("миллион", "миллиона", "миллионов"),
    ("миллиард", "миллиарда", "миллиардов"),
    ("триллион", "триллиона", "триллионов"),
    ("квадриллион", "квадриллиона", "квадриллионов"),
    ("квинтиллион", "квинтиллиона", "квинтиллионов"),
    ("секстиллион", "секстиллиона", "секстиллионов"),
    ("септиллион", "септиллиона", "септиллионов"),
    ("октиллион", "октиллиона", "октиллионов"),
    ("нониллион", "нониллиона", "нониллионов"),
)

# Grouping indices whose noun is feminine
FEMININE_SCALES = frozenset({1})

RUBLE_FORMS = ("рубль", "рубля", "рублей")
KOPECK_FORMS = ("копейка", "копейки", "копеек")


class RussianOptions(ConversionOptions):
    gender: Literal["masculine", "feminine"] = "masculine"


def segment_words(value: int, feminine: bool) -> str:
    hundreds, rest = divmod(value, 100)
    tens, ones = divmod(rest, 10)

    parts = [HUNDREDS[hundreds]]
    if tens == 1:
        parts.append(TEENS[ones])
    else:
        parts.append(TENS[tens])
        parts.append((ONES_FEMININE if feminine else ONES_MASCULINE)[ones])
    return " ".join(p for p in parts if p)


class Russian(SegmentLanguage):
    code = "ru"
    name = "Russian"
    options_model = RussianOptions
    grouping = Grouping.THREES

    negative_word = "минус"
    decimal_separator_word = "запятая"
    zero_word = "ноль"

    def build_decomposer(self) -> SegmentDecomposer:
        decomposer = super().build_decomposer()
        # Counting feminine nouns (копейка) needs feminine units regardless of options
        self.feminine_decomposer = SegmentDecomposer(
            self.grouping,
            self.scales,
            lambda value, index: segment_words(value, True),
            self.join_segments,
            self.settings.vocabulary_gap,
        )
        return decomposer

    def build_scales(self) -> ScaleWords:
        return InflectedScaleWords(SCALE_FORMS)

    def segment_to_words(self, value: int, index: int) -> str:
        feminine = index in FEMININE_SCALES or (index == 0 and self.options.gender == "feminine")
        return segment_words(value, feminine)

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        units = self.integer_to_words(amount.units)
        parts = [f"{units} {slavic_plural(amount.units, RUBLE_FORMS)}"]
        if amount.cents:
            cents = self.feminine_decomposer.render(amount.cents)
            parts.append(f"{cents} {slavic_plural(amount.cents, KOPECK_FORMS)}")

        words = " ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
