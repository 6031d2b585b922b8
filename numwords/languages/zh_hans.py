"""
Simplified Chinese.

Financial numerals (壹贰叁 … 拾佰仟) by default, as written on cheques and
invoices; ``formal=False`` gives everyday numerals. 零 marks skipped places
between groups:

    1001       → 壹仟零壹        (formal=False: 一千零一)
    100000001  → 壹亿零壹
    10         → 壹拾            (formal=False: 十)
"""

from __future__ import annotations

from typing import Sequence

from ..decomposer import RenderedSegment
from ..models import ConversionOptions, CurrencyAmount
from ..segments import place_digits
from .myriad import MyriadLanguage

DIGITS_COMMON = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
PLACES_COMMON = ("千", "百", "十", "")
DIGITS_FORMAL = ("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")
PLACES_FORMAL = ("仟", "佰", "拾", "")

SCALE_WORDS = ("万", "亿", "兆", "京", "垓", "秭", "穰", "沟", "涧", "正", "载")

ZERO = "零"


class ChineseOptions(ConversionOptions):
    formal: bool = True


class SimplifiedChinese(MyriadLanguage):
    code = "zh-Hans"
    name = "Chinese"
    options_model = ChineseOptions

    negative_word = "负"
    decimal_separator_word = "点"
    zero_word = ZERO

    scale_words = SCALE_WORDS
    omit_one_through = 0
    omit_one_before_places = False

    @property
    def digits(self) -> Sequence[str]:
        return DIGITS_FORMAL if self.options.formal else DIGITS_COMMON

    @property
    def places(self) -> Sequence[str]:
        return PLACES_FORMAL if self.options.formal else PLACES_COMMON

    def segment_to_words(self, value: int, index: int) -> str:
        words = []
        pending_zero = False
        for digit, place in zip(place_digits(value, 4), self.places):
            if not digit:
                pending_zero = bool(words)
                continue
            if pending_zero:
                words.append(ZERO)
                pending_zero = False
            words.append(self.digits[digit] + place)
        return "".join(words)

    def join_segments(self, segments: Sequence[RenderedSegment], n: int) -> str:
        words = ""
        previous = None
        for segment in segments:
            # 零 for a gap: a skipped group or a group shorter than four digits
            if previous is not None and (
                segment.value < 1000 or previous.index - segment.index > 1
            ):
                words += ZERO
            words += self.segment_phrase(segment)
            previous = segment

        # 十 rather than 一十 at the head of everyday numerals
        if not self.options.formal and 10 <= segments[0].value < 20:
            words = words[1:]
        return words

    def integer_to_ordinal(self, n: int) -> str:
        return "第" + self.integer_to_words(n)

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        yuan = "圆" if self.options.formal else "元"
        jiao, fen = divmod(amount.cents, 10)

        words = ""
        if amount.units:
            words += self.integer_to_words(amount.units) + yuan
        if jiao:
            words += self.digits[jiao] + "角"
        elif amount.units and fen:
            words += ZERO
        if fen:
            words += self.digits[fen] + "分"
        elif amount.units or jiao:
            words += "整"
        if not words:
            words = ZERO + yuan + "整"

        if amount.is_negative:
            words = self.negative_word + words
        return words
