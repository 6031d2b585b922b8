"""
Japanese.

一 is dropped before 十, 百 and 千 but always spoken before a myriad word
(一万, 一億). Decimals are read digit by digit (三点一四).
"""

from __future__ import annotations

from ..models import CurrencyAmount
from .myriad import MyriadLanguage

DIGITS = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")

SCALE_WORDS = (
    "万", "億", "兆", "京", "垓", "秭", "穣", "溝", "澗", "正", "載", "極",
    "恒河沙", "阿僧祇", "那由他", "不可思議", "無量大数",
)


class Japanese(MyriadLanguage):
    code = "ja"
    name = "Japanese"

    negative_word = "マイナス"
    decimal_separator_word = "点"
    zero_word = "零"

    digits = DIGITS
    places = ("千", "百", "十", "")
    scale_words = SCALE_WORDS
    omit_one_through = 0

    def integer_to_ordinal(self, n: int) -> str:
        return "第" + self.integer_to_words(n)

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        words = ""
        if amount.units:
            words += self.integer_to_words(amount.units) + "円"
        if amount.cents:
            words += self.integer_to_words(amount.cents) + "銭"
        if not words:
            words = self.zero_word + "円"

        if amount.is_negative:
            words = self.negative_word + words
        return words
