"""
Pydantic models for conversion inputs, options and findings.

Every field is explicitly typed. Options reject unknown keys, so a typo in
an option name fails loudly at the boundary instead of being ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ─── Conversion Modes ───────────────────────────────────────────────


class ConversionMode(str, Enum):
    """The three renderings every language may offer."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    CURRENCY = "currency"


# ─── Normalized Numbers ─────────────────────────────────────────────


class ParsedNumber(BaseModel):
    """Exact sign / integer / fractional-digits triple.

    ``decimal_digits`` stays a string so that leading zeros and the digit
    count survive ("3.05" keeps "05").
    """

    model_config = ConfigDict(frozen=True)

    is_negative: bool
    integer_part: int = Field(ge=0)
    decimal_digits: Optional[str] = None


class CurrencyAmount(BaseModel):
    """A monetary amount split into main units and a two-digit fraction."""

    model_config = ConfigDict(frozen=True)

    is_negative: bool
    units: int = Field(ge=0)
    fractional: str = Field(default="00", pattern=r"^\d{2}$")

    @property
    def cents(self) -> int:
        return int(self.fractional)


# ─── Options ────────────────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Options every language understands.

    Keys may be given in snake_case or camelCase (``negativeWord``).
    ``None`` means "use the language's own word".
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    negative_word: Optional[str] = None
    decimal_separator_word: Optional[str] = None
    zero_word: Optional[str] = None


# ─── Table Findings ─────────────────────────────────────────────────


class Severity(str, Enum):
    """Severity of a vocabulary-table finding."""

    ERROR = "ERROR"  # Table is unusable
    WARNING = "WARNING"  # Usable, but callers must compensate
    INFO = "INFO"


class TableFinding(BaseModel):
    """A single finding about a card table or scale-word list."""

    severity: Severity
    code: str  # Machine-readable, e.g. "CARDS_NOT_DESCENDING"
    message: str
    details: dict = Field(default_factory=dict)
