"""
Vocabulary-table validation.

The decomposer trusts its card table blindly: an unsorted table picks the
wrong card, a duplicate magnitude shadows a word, and a table without a
"one" card cannot express quantity one. These checks catch such mistakes
when a language is built, not at conversion time.

Each validator function:
  - Takes a sequence of cards (or scale words)
  - Returns a list of TableFinding objects (empty = all clear)
  - Is independently testable

validate_all() runs every card check and aggregates findings.
"""

from __future__ import annotations

from typing import Sequence

from .cards import Card
from .exceptions import InvalidCardTableError
from .models import Severity, TableFinding


# ─── Orchestrator ────────────────────────────────────────────────────


def validate_all(cards: Sequence[Card]) -> list[TableFinding]:
    """Run ALL card-table validators and collect findings."""
    findings: list[TableFinding] = []
    findings.extend(validate_not_empty(cards))
    findings.extend(validate_card_order(cards))
    findings.extend(validate_unique_magnitudes(cards))
    findings.extend(validate_has_one_card(cards))
    findings.extend(validate_has_zero_card(cards))
    findings.extend(validate_card_words(cards))
    return findings


def raise_for_errors(findings: list[TableFinding]) -> None:
    """Raise InvalidCardTableError if any finding is an ERROR."""
    errors = [f for f in findings if f.severity == Severity.ERROR]
    if errors:
        raise InvalidCardTableError(
            "; ".join(f.message for f in errors),
            details={"findings": [f.model_dump(mode="json") for f in errors]},
        )


# ─── Individual Validators ───────────────────────────────────────────


def validate_not_empty(cards: Sequence[Card]) -> list[TableFinding]:
    if cards:
        return []
    return [
        TableFinding(
            severity=Severity.ERROR,
            code="CARDS_EMPTY",
            message="Card table has no cards",
        )
    ]


def validate_card_order(cards: Sequence[Card]) -> list[TableFinding]:
    """Magnitudes must be strictly descending so the first match is the largest."""
    findings: list[TableFinding] = []

    for prev, card in zip(cards, cards[1:]):
        if card.magnitude > prev.magnitude:
            findings.append(
                TableFinding(
                    severity=Severity.ERROR,
                    code="CARDS_NOT_DESCENDING",
                    message=(
                        f"Card '{card.word}' ({card.magnitude}) follows "
                        f"'{prev.word}' ({prev.magnitude})"
                    ),
                    details={"previous": prev.magnitude, "current": card.magnitude},
                )
            )

    return findings


def validate_unique_magnitudes(cards: Sequence[Card]) -> list[TableFinding]:
    findings: list[TableFinding] = []
    seen: dict[int, str] = {}

    for card in cards:
        if card.magnitude in seen:
            findings.append(
                TableFinding(
                    severity=Severity.ERROR,
                    code="DUPLICATE_MAGNITUDE",
                    message=(
                        f"Magnitude {card.magnitude} appears twice "
                        f"('{seen[card.magnitude]}' and '{card.word}')"
                    ),
                    details={"magnitude": card.magnitude},
                )
            )
        else:
            seen[card.magnitude] = card.word

    return findings


def validate_has_one_card(cards: Sequence[Card]) -> list[TableFinding]:
    """Quantity one is spelled with the magnitude-1 card."""
    if any(c.magnitude == 1 for c in cards):
        return []
    return [
        TableFinding(
            severity=Severity.ERROR,
            code="MISSING_ONE_CARD",
            message="Card table has no card for magnitude 1",
        )
    ]


def validate_has_zero_card(cards: Sequence[Card]) -> list[TableFinding]:
    """A table without 0 decomposes zero to an empty tree; callers must special-case it."""
    if any(c.magnitude == 0 for c in cards):
        return []
    return [
        TableFinding(
            severity=Severity.WARNING,
            code="MISSING_ZERO_CARD",
            message="Card table has no card for magnitude 0; zero must be handled by the caller",
        )
    ]


def validate_card_words(cards: Sequence[Card]) -> list[TableFinding]:
    findings: list[TableFinding] = []

    for card in cards:
        if card.magnitude < 0:
            findings.append(
                TableFinding(
                    severity=Severity.ERROR,
                    code="NEGATIVE_MAGNITUDE",
                    message=f"Card '{card.word}' has negative magnitude {card.magnitude}",
                    details={"magnitude": card.magnitude},
                )
            )
        if not card.word.strip():
            findings.append(
                TableFinding(
                    severity=Severity.ERROR,
                    code="EMPTY_CARD_WORD",
                    message=f"Card for magnitude {card.magnitude} has an empty word",
                    details={"magnitude": card.magnitude},
                )
            )

    return findings


def validate_scale_words(words: Sequence[str]) -> list[TableFinding]:
    """Scale-word lists must not contain blanks; a blank reads as a vocabulary gap."""
    findings: list[TableFinding] = []

    for position, word in enumerate(words, start=1):
        if not word or not word.strip():
            findings.append(
                TableFinding(
                    severity=Severity.ERROR,
                    code="EMPTY_SCALE_WORD",
                    message=f"Scale word for index {position} is empty",
                    details={"index": position},
                )
            )

    if not words:
        findings.append(
            TableFinding(
                severity=Severity.INFO,
                code="NO_SCALE_WORDS",
                message="No scale words; only the first segment can be voiced",
            )
        )

    return findings
