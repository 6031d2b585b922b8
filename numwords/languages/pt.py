"""
European Portuguese.

Segment-based with the compound long scale: 10^9 is "mil milhões" and 10^12
is "bilião". The conjunction "e" links hundreds, tens and units, and links
the final group when it is below one hundred or a round hundred.

    100      → "cem"           101     → "cento e um"
    1001     → "mil e um"      1234    → "mil duzentos e trinta e quatro"
    2000000  → "dois milhões"  10**9   → "mil milhões"
"""

from __future__ import annotations

from typing import Sequence

from ..decomposer import RenderedSegment
from ..grammar import SegmentLanguage
from ..models import CurrencyAmount
from ..scales import CompoundScaleWords, ScaleWords

BELOW_TWENTY = (
    "", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove",
    "dez", "onze", "doze", "treze", "catorze", "quinze",
    "dezasseis", "dezassete", "dezoito", "dezanove",
)
TENS = ("", "", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa")
HUNDREDS = (
    "", "cento", "duzentos", "trezentos", "quatrocentos",
    "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
)

THOUSAND = "mil"
SCALE_WORDS = ("milhão", "bilião", "trilião", "quatrilião", "quintilião")

ORDINAL_ONES = ("", "primeiro", "segundo", "terceiro", "quarto", "quinto", "sexto", "sétimo", "oitavo", "nono")
ORDINAL_TENS = (
    "", "décimo", "vigésimo", "trigésimo", "quadragésimo",
    "quinquagésimo", "sexagésimo", "septuagésimo", "octogésimo", "nonagésimo",
)
ORDINAL_HUNDREDS = (
    "", "centésimo", "ducentésimo", "tricentésimo", "quadringentésimo",
    "quingentésimo", "sexcentésimo", "septingentésimo", "octingentésimo", "nongentésimo",
)

# milhão / milhões → milionésimo
ORDINAL_SCALES: dict[str, str] = {THOUSAND: "milésimo"}
for _word in SCALE_WORDS:
    _ordinal = _word.replace("lhão", "lião")[: -len("ão")] + "onésimo"
    ORDINAL_SCALES[_word] = _ordinal
    ORDINAL_SCALES[_word[: -len("ão")] + "ões"] = _ordinal


def pluralize(word: str) -> str:
    """milhão → milhões"""
    return word[: -len("ão")] + "ões" if word.endswith("ão") else word + "s"


def below_hundred(n: int) -> str:
    if n < 20:
        return BELOW_TWENTY[n]
    tens, ones = divmod(n, 10)
    return f"{TENS[tens]} e {BELOW_TWENTY[ones]}" if ones else TENS[tens]


def ordinal_segment(n: int) -> str:
    hundreds, rest = divmod(n, 100)
    tens, ones = divmod(rest, 10)
    parts = [ORDINAL_HUNDREDS[hundreds], ORDINAL_TENS[tens], ORDINAL_ONES[ones]]
    return " ".join(p for p in parts if p)


class Portuguese(SegmentLanguage):
    code = "pt"
    name = "Portuguese"

    negative_word = "menos"
    decimal_separator_word = "vírgula"
    zero_word = "zero"

    def build_scales(self) -> ScaleWords:
        return CompoundScaleWords(THOUSAND, SCALE_WORDS, pluralize)

    def segment_to_words(self, value: int, index: int) -> str:
        if value == 100:
            return "cem"
        hundreds, rest = divmod(value, 100)
        parts = [HUNDREDS[hundreds], below_hundred(rest) if rest else ""]
        return " e ".join(p for p in parts if p)

    def join_segments(self, segments: Sequence[RenderedSegment], n: int) -> str:
        phrases = [self.segment_phrase(s) for s in segments]
        joiners = [" "] * len(segments)

        for i in range(len(segments) - 1):
            upper, lower = segments[i], segments[i + 1]
            # Thousands of millions share one noun: "dois mil e trezentos milhões"
            if lower.index == upper.index - 1 and upper.scale_word.startswith(THOUSAND + " "):
                phrases[i] = " ".join(w for w in (upper.words, THOUSAND) if w)
                noun = pluralize(lower.scale_word) if lower.value == 1 else lower.scale_word
                phrases[i + 1] = f"{lower.words} {noun}"
                if lower.value < 100 or lower.value % 100 == 0:
                    joiners[i + 1] = " e "

        last = segments[-1]
        if len(segments) > 1 and (last.value < 100 or last.value % 100 == 0):
            joiners[-1] = " e "

        words = phrases[0]
        for joiner, phrase in zip(joiners[1:], phrases[1:]):
            words += joiner + phrase
        return words

    # ── Ordinals ──

    def integer_to_ordinal(self, n: int) -> str:
        segments = self.decomposer.segments(n)
        *higher, last = segments

        phrases = [self.segment_phrase(s) for s in higher]
        if last.index == 0:
            phrases.append(ordinal_segment(last.value))
        else:
            head, _, scale = last.scale_word.rpartition(" ")
            ordinal_scale = (head + " " if head else "") + ORDINAL_SCALES.get(scale, scale)
            if last.value == 1:
                phrases.append(ordinal_scale)
            else:
                phrases.append(f"{ordinal_segment(last.value)} {ordinal_scale}")
        return " ".join(phrases)

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        if not amount.units and not amount.cents:
            words = f"{self.zero_word} euros"
        else:
            parts = []
            if amount.units:
                unit = "euro" if amount.units == 1 else "euros"
                # "um milhão de euros", but "um milhão e cem euros"
                if amount.units % 10**6 == 0:
                    unit = "de euros"
                parts.append(f"{self.integer_to_words(amount.units)} {unit}")
            if amount.cents:
                unit = "cêntimo" if amount.cents == 1 else "cêntimos"
                parts.append(f"{self.integer_to_words(amount.cents)} {unit}")
            words = " e ".join(parts)

        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
