"""
Korean (Sino-Korean numerals).

일 is dropped before 십, 백, 천 and before 만, but kept from 억 upward.
Myriad groups are separated by spaces:

    12345      → "만 이천삼백사십오"
    100000000  → "일억"
"""

from __future__ import annotations

from ..models import CurrencyAmount
from .myriad import MyriadLanguage

DIGITS = ("영", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")
SCALE_WORDS = ("만", "억", "조", "경", "해", "자", "양")


class Korean(MyriadLanguage):
    code = "ko"
    name = "Korean"

    negative_word = "마이너스"
    decimal_separator_word = "점"
    zero_word = "영"
    word_separator = " "

    digits = DIGITS
    places = ("천", "백", "십", "")
    scale_words = SCALE_WORDS
    omit_one_through = 1
    group_separator = " "

    def integer_to_ordinal(self, n: int) -> str:
        return "제" + self.integer_to_words(n)

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        # The won has no subunit in use; the fraction is dropped
        words = self.integer_to_words(amount.units) + "원"
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
