"""
French (France) and Belgian French.

Card-based, long scale. Both variants share one merge operator; Belgium
adds septante (70) and nonante (90) to the card table.

    80      → "quatre-vingts"       81  → "quatre-vingt-un"
    71      → "soixante et onze"    (fr-BE: "septante et un" for 71)
    200     → "deux cents"          201 → "deux cent un"
    2000000 → "deux millions"
"""

from __future__ import annotations

from ..cards import Card, CardTable, WordValuePair
from ..grammar import CardLanguage, MergeKind, classify, combine
from ..models import ConversionOptions, CurrencyAmount

CARDS: tuple[tuple[int, str], ...] = (
    (10**27, "quadrilliard"),
    (10**24, "quadrillion"),
    (10**21, "trilliard"),
    (10**18, "trillion"),
    (10**15, "billiard"),
    (10**12, "billion"),
    (10**9, "milliard"),
    (10**6, "million"),
    (1000, "mille"),
    (100, "cent"),
    (80, "quatre-vingts"),
    (60, "soixante"),
    (50, "cinquante"),
    (40, "quarante"),
    (30, "trente"),
    (20, "vingt"),
    (19, "dix-neuf"),
    (18, "dix-huit"),
    (17, "dix-sept"),
    (16, "seize"),
    (15, "quinze"),
    (14, "quatorze"),
    (13, "treize"),
    (12, "douze"),
    (11, "onze"),
    (10, "dix"),
    (9, "neuf"),
    (8, "huit"),
    (7, "sept"),
    (6, "six"),
    (5, "cinq"),
    (4, "quatre"),
    (3, "trois"),
    (2, "deux"),
    (1, "un"),
    (0, "zéro"),
)

# Regional additions to the table
REGIONAL_CARDS: dict[str, dict[int, str]] = {
    "FR": {},
    "BE": {90: "nonante", 70: "septante"},
}

# Large-number nouns take "d'euros" ("un million d'euros")
LARGE_NOUNS = (
    "million", "milliard", "billion", "billiard",
    "trillion", "trilliard", "quadrillion", "quadrilliard",
)


class FrenchOptions(ConversionOptions):
    with_hyphen_separator: bool = False


class French(CardLanguage):
    code = "fr"
    name = "French"
    options_model = FrenchOptions
    region = "FR"

    negative_word = "moins"
    decimal_separator_word = "virgule"
    zero_word = "zéro"

    cards = CARDS

    def card_table(self) -> CardTable:
        merged = dict(CARDS)
        merged.update(REGIONAL_CARDS[self.region])
        return CardTable(Card(m, w) for m, w in sorted(merged.items(), reverse=True))

    def merge(self, left: WordValuePair, right: WordValuePair) -> WordValuePair:
        kind = classify(left, right)
        l_word, r_word = left.word, right.word
        l_num, r_num = left.magnitude, right.magnitude

        if kind == MergeKind.IMPLICIT_ONE:
            # "mille", "cent", but "un million"
            if r_num < 10**6:
                return combine(left, right, r_word, kind)
            return combine(left, right, f"{l_word} {r_word}", kind)

        # "quatre-vingts" / "deux cents" lose their s when something follows
        if (
            ((l_num - 80) % 100 == 0 or (l_num % 100 == 0 and l_num < 1000))
            and r_num < 10**6
            and l_word.endswith("s")
        ):
            l_word = l_word[:-1]
        # …and gain it when multiplied ("deux cents", "trois millions")
        if l_num < 1000 and r_num != 1000 and not r_word.endswith("s") and r_num % 100 == 0:
            r_word += "s"

        if kind == MergeKind.ADD and l_num < 100:
            if r_num % 10 == 1 and l_num != 80:
                return combine(left, right, f"{l_word} et {r_word}", kind)
            return combine(left, right, f"{l_word}-{r_word}", kind)

        return combine(left, right, f"{l_word} {r_word}", kind)

    def finalize(self, words: str) -> str:
        if self.options.with_hyphen_separator:
            return words.replace(" ", "-")
        return words

    # ── Ordinals ──

    def integer_to_ordinal(self, n: int) -> str:
        if n == 1:
            return "premier"

        words = self.integer_to_words(n)
        if words.endswith("cinq"):
            return words + "uième"
        if words.endswith("neuf"):
            return words[:-1] + "vième"
        if words.endswith(("cents", "vingts")) or words.endswith(
            tuple(noun + "s" for noun in LARGE_NOUNS)
        ):
            return words[:-1] + "ième"
        if words.endswith("e"):
            return words[:-1] + "ième"
        return words + "ième"

    # ── Currency ──

    def currency_to_words(self, amount: CurrencyAmount) -> str:
        parts = []
        if amount.units or not amount.cents:
            units = self.integer_to_words(amount.units)
            if units.rstrip("s").endswith(LARGE_NOUNS):
                parts.append(f"{units} d'euros")
            else:
                parts.append(f"{units} {'euro' if amount.units <= 1 else 'euros'}")
        if amount.cents:
            cents = self.integer_to_words(amount.cents)
            parts.append(f"{cents} {'centime' if amount.cents == 1 else 'centimes'}")

        words = " et ".join(parts)
        if amount.is_negative:
            words = f"{self.negative_word} {words}"
        return words


class BelgianFrench(French):
    code = "fr-BE"
    name = "Belgian French"
    region = "BE"
