"""
Turkish.

Card-based, short scale. "bir" (one) is dropped before on/yüz/bin but kept
before milyon and above. With ``drop_spaces`` the words run together, as
they commonly do on cheques ("ikiyüzelli").
"""

from __future__ import annotations

from ..cards import WordValuePair
from ..grammar import CardLanguage, MergeKind, classify, combine
from ..models import ConversionOptions, CurrencyAmount

CARDS: tuple[tuple[int, str], ...] = (
    (10**18, "kentilyon"),
    (10**15, "katrilyon"),
    (10**12, "trilyon"),
    (10**9, "milyar"),
    (10**6, "milyon"),
    (1000, "bin"),
    (100, "yüz"),
    (90, "doksan"),
    (80, "seksen"),
    (70, "yetmiş"),
    (60, "altmış"),
    (50, "elli"),
    (40, "kırk"),
    (30, "otuz"),
    (20, "yirmi"),
    (10, "on"),
    (9, "dokuz"),
    (8, "sekiz"),
    (7, "yedi"),
    (6, "altı"),
    (5, "beş"),
    (4, "dört"),
    (3, "üç"),
    (2, "iki"),
    (1, "bir"),
    (0, "sıfır"),
)

BACK_VOWELS = "aıou"
FRONT_VOWELS = "eiöü"
VOWELS = BACK_VOWELS + FRONT_VOWELS


class TurkishOptions(ConversionOptions):
    drop_spaces: bool = False


def ordinal_suffix(word: str) -> str:
    """-ıncı / -inci / -uncu / -üncü by the word's last vowel (vowel harmony)."""
    for char in reversed(word):
        if char in "ou":
            return "uncu"
        if char in "aı":
            return "ıncı"
        if char in "öü":
            return "üncü"
        if char in "ei":
            return "inci"
    return "inci"


class Turkish(CardLanguage):
    code = "tr"
    name = "Turkish"
    options_model = TurkishOptions

    negative_word = "eksi"
    decimal_separator_word = "virgül"
    zero_word = "sıfır"

    cards = CARDS

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.options.drop_spaces:
            self.word_separator = ""

    def merge(self, left: WordValuePair, right: WordValuePair) -> WordValuePair:
        kind = classify(left, right)
        if kind == MergeKind.IMPLICIT_ONE and (right.magnitude <= 100 or right.magnitude == 1000):
            return combine(left, right, right.word, kind)
        return combine(left, right, f"{left.word} {right.word}", kind)

    def finalize(self, words: str) -> str:
        if self.options.drop_spaces:
            return words.replace(" ", "")
        return words

    # ── Ordinals ──

    def integer_to_ordinal(self, n: int) -> str:
        words = self.integer_to_words(n)
        # dört → dördüncü
        if words.endswith("dört"):
            words = words[:-1] + "d"
        suffix = ordinal_suffix(words)
        if words[-1] in VOWELS:
            suffix = suffix[1:]
        return words + suffix

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        parts = []
        if amount.units or not amount.cents:
            parts.append(f"{self.integer_to_words(amount.units)} lira")
        if amount.cents:
            parts.append(f"{self.integer_to_words(amount.cents)} kuruş")

        words = " ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words
