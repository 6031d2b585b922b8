"""
Hindi.

Indian grouping: the last three digits, then pairs (हज़ार, लाख, करोड़ …).
Every number below one hundred has its own word.

    100000    → "एक लाख"
    12345678  → "एक करोड़ तेईस लाख पैंतालीस हज़ार छह सौ अठहत्तर"
"""

from __future__ import annotations

from ..grammar import SegmentLanguage
from ..models import CurrencyAmount
from ..scales import DirectScaleWords, ScaleWords
from ..segments import Grouping

BELOW_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)
HUNDRED = "सौ"

# हज़ार (10^3), लाख (10^5), करोड़ (10^7), अरब (10^9) …
SCALE_WORDS = ("हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख")

ORDINAL_SPECIAL = ("", "पहला", "दूसरा", "तीसरा", "चौथा", "पाँचवाँ", "छठा")
ORDINAL_SUFFIX = "वाँ"


class Hindi(SegmentLanguage):
    code = "hi"
    name = "Hindi"
    grouping = Grouping.THREE_THEN_TWOS

    negative_word = "माइनस"
    decimal_separator_word = "दशमलव"
    zero_word = "शून्य"

    def build_scales(self) -> ScaleWords:
        return DirectScaleWords(SCALE_WORDS)

    def segment_to_words(self, value: int, index: int) -> str:
        if value < 100:
            return BELOW_HUNDRED[value]
        hundreds, rest = divmod(value, 100)
        words = f"{BELOW_HUNDRED[hundreds]} {HUNDRED}"
        return f"{words} {BELOW_HUNDRED[rest]}" if rest else words

    def integer_to_ordinal(self, n: int) -> str:
        if n < len(ORDINAL_SPECIAL):
            return ORDINAL_SPECIAL[n]
        return self.integer_to_words(n) + ORDINAL_SUFFIX

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        parts = []
        if amount.units or not amount.cents:
            unit = "रुपया" if amount.units == 1 else "रुपये"
            parts.append(f"{self.integer_to_words(amount.units)} {unit}")
        if amount.cents:
            unit = "पैसा" if amount.cents == 1 else "पैसे"
            parts.append(f"{self.integer_to_words(amount.cents)} {unit}")

        words = " ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
