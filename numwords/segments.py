"""
Digit grouping for segment-based languages.

    THREES           1234567    → [567, 234, 1]        (thousand, million, …)
    FOURS            123456789  → [6789, 2345, 1]      (万, 億, …)
    THREE_THEN_TWOS  12345678   → [678, 45, 23, 1]     (hazār, lakh, crore)

Segments are returned least-significant first; the list index is the scale
index used to look up a scale word.
"""

from __future__ import annotations

from enum import Enum


class Grouping(str, Enum):
    THREES = "threes"
    FOURS = "fours"
    THREE_THEN_TWOS = "three_then_twos"

    def split(self, n: int) -> list[int]:
        return split_segments(n, self)


def split_segments(n: int, grouping: Grouping) -> list[int]:
    """Split a non-negative integer into segments, least significant first."""
    if n < 0:
        raise ValueError(f"Cannot split a negative number: {n}")
    if n == 0:
        return [0]

    if grouping == Grouping.THREE_THEN_TWOS:
        segments = [n % 1000]
        n //= 1000
        while n > 0:
            segments.append(n % 100)
            n //= 100
        return segments

    base = 10_000 if grouping == Grouping.FOURS else 1000
    segments = []
    while n > 0:
        n, segment = divmod(n, base)
        segments.append(segment)
    return segments


def place_digits(segment: int, width: int) -> list[int]:
    """Digits of a segment from the highest place down, zero padded.

    place_digits(305, 4) → [0, 3, 0, 5]
    """
    return [int(d) for d in str(segment).zfill(width)]
