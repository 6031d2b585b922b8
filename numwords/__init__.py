"""
numwords — Spell out numbers in words, in many languages.

Architecture: Normalizer → Decomposer (cards or digit segments) → Grammar → Words
Philosophy:  Exact digits in, grammatical words out. Never round through a float.
"""

__version__ = "1.0.0"

from .converter import NumberConverter, to_cardinal, to_currency, to_ordinal
from .exceptions import NumWordsError
from .languages import LANGUAGES
from .registry import resolve_language

__all__ = [
    "LANGUAGES",
    "NumWordsError",
    "NumberConverter",
    "resolve_language",
    "to_cardinal",
    "to_currency",
    "to_ordinal",
]
