"""
Tests for the numeric normalizer.

Every path from caller input to ParsedNumber: ints, floats, strings,
Decimals, scientific notation, and the errors for everything else.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from numwords.exceptions import (
    InputTooLargeError,
    InvalidFormatError,
    InvalidTypeError,
    NumWordsError,
    OrdinalRangeError,
)
from numwords.models import ParsedNumber
from numwords.normalizer import (
    expand_scientific,
    normalize,
    normalize_currency,
    normalize_ordinal,
)


def _parsed(is_negative: bool, integer_part: int, decimal_digits: str | None = None) -> ParsedNumber:
    return ParsedNumber(
        is_negative=is_negative, integer_part=integer_part, decimal_digits=decimal_digits
    )


# ═══════════════════════════════════════════════════════════════════════
# SCIENTIFIC NOTATION
# ═══════════════════════════════════════════════════════════════════════


class TestExpandScientific:
    def test_pads_zeros_past_the_digits(self):
        assert expand_scientific("1e21") == "1" + "0" * 21

    def test_moves_point_inside_digits(self):
        assert expand_scientific("1.5e3") == "1500"
        assert expand_scientific("1.2345e2") == "123.45"

    def test_negative_exponent_adds_leading_zeros(self):
        assert expand_scientific("1e-3") == "0.001"
        assert expand_scientific("15e-1") == "1.5"

    def test_keeps_sign(self):
        assert expand_scientific("-2.5e1") == "-25"
        assert expand_scientific("+2.5e1") == "25"

    def test_uppercase_and_explicit_plus_exponent(self):
        assert expand_scientific("4E+2") == "400"

    def test_exact_far_beyond_float_range(self):
        assert expand_scientific("1e400") == "1" + "0" * 400

    def test_limit_checked_before_expansion(self):
        with pytest.raises(InputTooLargeError) as exc_info:
            expand_scientific("1e100000000", max_digits=1000)
        assert exc_info.value.details["digits"] == 100000001


# ═══════════════════════════════════════════════════════════════════════
# INTEGERS AND STRINGS
# ═══════════════════════════════════════════════════════════════════════


class TestNormalizeIntegers:
    def test_positive(self):
        assert normalize(42) == _parsed(False, 42)

    def test_negative(self):
        assert normalize(-7) == _parsed(True, 7)

    def test_zero(self):
        assert normalize(0) == _parsed(False, 0)

    def test_beyond_float_precision_is_exact(self):
        n = 2**64 + 1
        assert normalize(n).integer_part == n

    def test_largest_allowed(self):
        assert normalize(10**1000 - 1).integer_part == 10**1000 - 1

    def test_too_many_digits(self):
        with pytest.raises(InputTooLargeError):
            normalize(10**1000)

    def test_custom_limit(self):
        with pytest.raises(InputTooLargeError):
            normalize(12345, max_digits=4)


class TestNormalizeStrings:
    def test_plain(self):
        assert normalize("123") == _parsed(False, 123)

    def test_keeps_fraction_digits_literally(self):
        assert normalize("-3.050") == _parsed(True, 3, "050")

    def test_trims_whitespace(self):
        assert normalize("  42  ") == _parsed(False, 42)

    def test_bare_fraction(self):
        assert normalize(".5") == _parsed(False, 0, "5")

    def test_trailing_point(self):
        assert normalize("5.") == _parsed(False, 5)

    def test_leading_plus(self):
        assert normalize("+8") == _parsed(False, 8)

    def test_scientific(self):
        assert normalize("1e21") == _parsed(False, 10**21)

    def test_scientific_fraction(self):
        assert normalize("2.5e-3") == _parsed(False, 0, "0025")

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "--1", "1e", "1,000", "0x10"])
    def test_rejects_malformed(self, text: str):
        with pytest.raises(InvalidFormatError) as exc_info:
            normalize(text)
        assert exc_info.value.code == "INVALID_FORMAT"
        assert exc_info.value.details["input"] == text

    def test_too_many_digits(self):
        with pytest.raises(InputTooLargeError):
            normalize("9" * 1001)

    def test_scientific_too_large(self):
        with pytest.raises(InputTooLargeError):
            normalize("1e1001")


# ═══════════════════════════════════════════════════════════════════════
# FLOATS AND DECIMALS
# ═══════════════════════════════════════════════════════════════════════


class TestNormalizeFloats:
    def test_integral_float(self):
        assert normalize(5.0) == _parsed(False, 5)

    def test_fraction(self):
        assert normalize(0.1) == _parsed(False, 0, "1")

    def test_negative_fraction(self):
        assert normalize(-2.75) == _parsed(True, 2, "75")

    def test_small_float_uses_its_shortest_repr(self):
        assert normalize(1.5e-7) == _parsed(False, 0, "00000015")

    def test_large_float_expanded_from_repr(self):
        assert normalize(1e21) == _parsed(False, 10**21)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, value: float):
        with pytest.raises(InvalidFormatError):
            normalize(value)


class TestNormalizeDecimals:
    def test_decimal(self):
        assert normalize(Decimal("12.5")) == _parsed(False, 12, "5")

    def test_decimal_exponent(self):
        assert normalize(Decimal("1E+3")) == _parsed(False, 1000)


class TestNormalizeTypes:
    def test_rejects_bool(self):
        with pytest.raises(InvalidTypeError):
            normalize(True)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, [1], {"n": 1}, b"12"])
    def test_rejects_other_types(self, value: object):
        with pytest.raises(InvalidTypeError) as exc_info:
            normalize(value)  # type: ignore[arg-type]
        assert exc_info.value.code == "INVALID_TYPE"

    def test_type_error_is_also_builtin_type_error(self):
        with pytest.raises(TypeError):
            normalize(None)  # type: ignore[arg-type]

    def test_every_error_shares_the_base(self):
        with pytest.raises(NumWordsError):
            normalize("nope")


# ═══════════════════════════════════════════════════════════════════════
# CURRENCY AND ORDINAL NORMALIZATION
# ═══════════════════════════════════════════════════════════════════════


class TestNormalizeCurrency:
    def test_pads_fraction(self):
        amount = normalize_currency("2.5")
        assert (amount.units, amount.fractional, amount.cents) == (2, "50", 50)

    def test_truncates_never_rounds(self):
        amount = normalize_currency("1.999")
        assert (amount.units, amount.cents) == (1, 99)

    def test_sub_cent_amount_truncates_to_zero(self):
        assert normalize_currency(1.006).cents == 0

    def test_whole_amount(self):
        amount = normalize_currency(100)
        assert (amount.units, amount.fractional) == (100, "00")

    def test_negative(self):
        assert normalize_currency("-0.05").is_negative


class TestNormalizeOrdinal:
    def test_positive_whole(self):
        assert normalize_ordinal("21") == 21

    def test_integral_float(self):
        assert normalize_ordinal(3.0) == 3

    @pytest.mark.parametrize("value", [0, -1, "2.5", "-0.5"])
    def test_out_of_range(self, value: object):
        with pytest.raises(OrdinalRangeError):
            normalize_ordinal(value)  # type: ignore[arg-type]

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_ordinal(0)


# ═══════════════════════════════════════════════════════════════════════
# IDEMPOTENCE
# ═══════════════════════════════════════════════════════════════════════


class TestIdempotence:
    @pytest.mark.parametrize(
        "value", [0, 7, 10**30, "0042", "1e21", "+15", 3.0, Decimal("900"), 2**53]
    )
    def test_whole_numbers_reparse_to_the_same_result(self, value):
        parsed = normalize(value)
        assert normalize(str(parsed.integer_part)) == parsed

    @pytest.mark.parametrize("value", ["-42", -7.25, "3.05", "-1.5e3", Decimal("12.50"), ".5"])
    def test_integer_part_reparses_to_itself(self, value):
        integer_part = normalize(value).integer_part
        assert normalize(str(integer_part)) == _parsed(False, integer_part)
