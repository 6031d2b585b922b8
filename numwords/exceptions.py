"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of conversion failure,
enabling callers (and the HTTP layer) to tell "malformed input" apart from
"out of domain" and from "the language cannot say this".

Every error also derives from the closest built-in exception, so callers
that only know Python's vocabulary (``except ValueError``) still work.
"""

from __future__ import annotations


class NumWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidTypeError(NumWordsError, TypeError):
    """Input is not an int, float, str or Decimal."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_TYPE", message, details)


class InvalidFormatError(NumWordsError, ValueError):
    """Input is empty, non-numeric, or not finite."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_FORMAT", message, details)


class InputTooLargeError(NumWordsError, ValueError):
    """Input expands to more digits than the configured limit."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INPUT_TOO_LARGE", message, details)


class OrdinalRangeError(NumWordsError, ValueError):
    """Ordinal conversion was given a negative, zero or fractional value."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("ORDINAL_RANGE", message, details)


class VocabularyGapError(NumWordsError, ValueError):
    """The language has no scale word for the requested grouping index."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("VOCABULARY_GAP", message, details)


class InvalidOptionsError(NumWordsError, ValueError):
    """Conversion options are unknown or have the wrong type."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_OPTIONS", message, details)


class InvalidCardTableError(NumWordsError, ValueError):
    """A card table breaks ordering/uniqueness/completeness rules."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CARD_TABLE", message, details)


class UnsupportedLanguageError(NumWordsError, LookupError):
    """No registered language matches the requested tag."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LANGUAGE", message, details)


class UnsupportedModeError(NumWordsError, NotImplementedError):
    """The language does not implement the requested conversion mode."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_MODE", message, details)
