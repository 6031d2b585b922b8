"""
Arbitrary-precision numeric normalizer.

Turns caller input into an exact ``ParsedNumber`` without ever passing
through floating-point arithmetic:

    42                        → (False, 42, None)
    "-3.050"                  → (True, 3, "050")
    "1e21"                    → (False, 1000000000000000000000, None)
    1.5e-7  (float)           → (False, 0, "00000015")
    Decimal("12.5")           → (False, 12, "5")

Scientific notation is expanded by shifting the decimal point through the
digit string, so "1e400" is exact even though no float can hold it.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Union

from .config import get_settings
from .exceptions import (
    InputTooLargeError,
    InvalidFormatError,
    InvalidTypeError,
    OrdinalRangeError,
)
from .models import CurrencyAmount, ParsedNumber

NumericInput = Union[int, float, str, Decimal]

# Largest integer a float holds exactly
MAX_SAFE_INTEGER = 2**53

# Optional sign, digits with an optional point (or a bare fraction), optional exponent.
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


# ─── Scientific Notation ────────────────────────────────────────────


def has_exponent(text: str) -> bool:
    return "e" in text or "E" in text


def expand_scientific(text: str, max_digits: int | None = None) -> str:
    """Expand scientific notation to plain decimal form.

    Examples:
        "1e21"   → "1000000000000000000000"
        "1.5e3"  → "1500"
        "1e-3"   → "0.001"
        "-2.5e1" → "-25"

    Raises:
        InputTooLargeError: If the expansion would exceed ``max_digits`` digits.
            The check happens before any string is built.
    """
    sign = ""
    if text[:1] in ("+", "-"):
        sign = "-" if text[0] == "-" else ""
        text = text[1:]

    mantissa, _, exponent_text = text.lower().partition("e")
    exponent = int(exponent_text)

    integer_digits, _, fraction_digits = mantissa.partition(".")
    digits = integer_digits + fraction_digits
    point = len(integer_digits) + exponent

    # Digit count of the result, computed before building it
    if point >= len(digits):
        expanded_length = point
    elif point <= 0:
        expanded_length = 1 - point + len(digits)
    else:
        expanded_length = len(digits)

    if max_digits is not None and expanded_length > max_digits:
        raise InputTooLargeError(
            f"Input expands to {expanded_length} digits (limit {max_digits})",
            details={"input": sign + text, "digits": expanded_length, "limit": max_digits},
        )

    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    if point <= 0:
        return sign + "0." + "0" * -point + digits
    return sign + digits[:point] + "." + digits[point:]


# ─── Main Normalizer ────────────────────────────────────────────────


def normalize(value: NumericInput, max_digits: int | None = None) -> ParsedNumber:
    """Parse an int, float, str or Decimal into a ParsedNumber.

    Args:
        value: The number to normalize.
        max_digits: Digit limit; defaults to ``Settings.max_digits``.

    Raises:
        InvalidTypeError: For any other input type (including bool).
        InvalidFormatError: For empty, non-numeric or non-finite input.
        InputTooLargeError: When the number has more digits than allowed.
    """
    if max_digits is None:
        max_digits = get_settings().max_digits

    # bool is an int subclass, but True is not a number anyone means to spell out
    if isinstance(value, bool):
        raise InvalidTypeError(
            "Invalid value type: expected int, float, str or Decimal, received bool",
            details={"input": repr(value), "type": "bool"},
        )

    if isinstance(value, int):
        return _from_int(value, max_digits)

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise InvalidFormatError(
                "Number must be finite (NaN and Infinity are not supported)",
                details={"input": repr(value)},
            )
        if value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
            return _from_int(int(value), max_digits)
        return _from_string(repr(value), max_digits, original=value)

    if isinstance(value, Decimal):
        return _from_string(str(value), max_digits, original=value)

    if isinstance(value, str):
        return _from_string(value, max_digits, original=value)

    raise InvalidTypeError(
        "Invalid value type: expected int, float, str or Decimal, "
        f"received {type(value).__name__}",
        details={"input": repr(value), "type": type(value).__name__},
    )


def normalize_currency(value: NumericInput, max_digits: int | None = None) -> CurrencyAmount:
    """Normalize a monetary amount: fraction truncated (never rounded) to two digits.

    1.006 → units 1, fractional "00";  0.5 → units 0, fractional "50".
    """
    parsed = normalize(value, max_digits)
    fractional = ((parsed.decimal_digits or "") + "00")[:2]
    return CurrencyAmount(
        is_negative=parsed.is_negative,
        units=parsed.integer_part,
        fractional=fractional,
    )


def normalize_ordinal(value: NumericInput, max_digits: int | None = None) -> int:
    """Normalize an ordinal: only positive whole numbers are in range.

    Raises:
        OrdinalRangeError: For negative, zero or fractional values.
    """
    parsed = normalize(value, max_digits)
    details = {"input": str(value)}

    if parsed.is_negative:
        raise OrdinalRangeError("Ordinals cannot be negative", details=details)
    if parsed.decimal_digits:
        raise OrdinalRangeError("Ordinals must be whole numbers", details=details)
    if parsed.integer_part == 0:
        raise OrdinalRangeError("Ordinals cannot be zero", details=details)

    return parsed.integer_part


# ─── Internal Helpers ───────────────────────────────────────────────


def _from_int(value: int, max_digits: int) -> ParsedNumber:
    magnitude = -value if value < 0 else value
    if magnitude >= 10**max_digits:
        raise InputTooLargeError(
            f"Integer has more than {max_digits} digits",
            details={"limit": max_digits, "bit_length": magnitude.bit_length()},
        )
    return ParsedNumber(is_negative=value < 0, integer_part=magnitude)


def _from_string(text: str, max_digits: int, original: object) -> ParsedNumber:
    trimmed = text.strip()
    if not trimmed or not _NUMERIC_RE.match(trimmed):
        raise InvalidFormatError(
            f'Invalid number format: "{original}"',
            details={"input": str(original)},
        )

    if has_exponent(trimmed):
        trimmed = expand_scientific(trimmed, max_digits)

    is_negative = trimmed.startswith("-")
    unsigned = trimmed.lstrip("+-")

    integer_text, _, decimal_text = unsigned.partition(".")
    integer_text = integer_text or "0"

    if len(integer_text) > max_digits or len(decimal_text) > max_digits:
        raise InputTooLargeError(
            f"Input has more than {max_digits} digits",
            details={"input": str(original)[:64], "limit": max_digits},
        )

    return ParsedNumber(
        is_negative=is_negative,
        integer_part=int(integer_text),
        decimal_digits=decimal_text or None,
    )
