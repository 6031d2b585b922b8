"""
Conversion orchestrator.

    converter = NumberConverter()
    converter.convert(1234, lang="fr")                  # "mille deux cent trente-quatre"
    converter.convert("2.50", lang="en", mode="currency")
    converter.convert(21, lang="en", mode="ordinal")    # "twenty-first"

Language instances are immutable once built, so the converter shares them
between calls and threads. Options may come from HTTP clients, so only the
``INSTANCE_CACHE_SIZE`` most recently used (language, options) pairs are kept.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping

from .config import Settings, get_settings
from .exceptions import UnsupportedModeError
from .grammar import Language
from .models import ConversionMode, ConversionOptions
from .normalizer import NumericInput
from .registry import LanguageMatch, resolve_language

logger = logging.getLogger(__name__)

INSTANCE_CACHE_SIZE = 64


class NumberConverter:
    """Resolves languages, caches their instances and dispatches on mode.

    Usage:
        converter = NumberConverter()
        words = converter.convert(42, lang="de")
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._instance = lru_cache(maxsize=INSTANCE_CACHE_SIZE)(self._build)

    def resolve(self, lang: str | None = None) -> LanguageMatch:
        return resolve_language(lang or self.settings.default_language)

    def language(
        self, lang: str | None = None, options: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Language:
        """Return the shared instance for ``lang`` configured with ``options``."""
        cls = self.resolve(lang).language
        parsed = cls.parse_options(dict(options or {}), **kwargs)
        return self._instance(cls, parsed)

    def _build(self, cls: type[Language], options: ConversionOptions) -> Language:
        logger.debug("Building %s instance with %s", cls.code, options)
        return cls(options, settings=self.settings)

    def convert(
        self,
        value: NumericInput,
        lang: str | None = None,
        mode: ConversionMode | str = ConversionMode.CARDINAL,
        options: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> str:
        """Spell out ``value``.

        Args:
            value: int, float, str or Decimal.
            lang: Language tag or English name; defaults to ``Settings.default_language``.
            mode: "cardinal", "ordinal" or "currency".
            options: Common and language-specific options.
            **kwargs: Same as ``options``, given as keywords.

        Raises:
            NumWordsError: Any conversion failure (see ``numwords.exceptions``).
        """
        mode = self._parse_mode(mode)
        language = self.language(lang, options, **kwargs)
        logger.debug("Converting %s input to %s (%s)", type(value).__name__, mode.value, language.code)

        if mode == ConversionMode.ORDINAL:
            return language.to_ordinal(value)
        if mode == ConversionMode.CURRENCY:
            return language.to_currency(value)
        return language.to_cardinal(value)

    def cardinal(self, value: NumericInput, lang: str | None = None, **options: Any) -> str:
        return self.convert(value, lang, ConversionMode.CARDINAL, **options)

    def ordinal(self, value: NumericInput, lang: str | None = None, **options: Any) -> str:
        return self.convert(value, lang, ConversionMode.ORDINAL, **options)

    def currency(self, value: NumericInput, lang: str | None = None, **options: Any) -> str:
        return self.convert(value, lang, ConversionMode.CURRENCY, **options)

    @staticmethod
    def _parse_mode(mode: ConversionMode | str) -> ConversionMode:
        try:
            return ConversionMode(mode)
        except ValueError as e:
            raise UnsupportedModeError(
                f"Unknown conversion mode: '{mode}'",
                details={"mode": str(mode), "available": [m.value for m in ConversionMode]},
            ) from e


# ─── Module-level helpers ───────────────────────────────────────────

_default: NumberConverter | None = None


def get_converter() -> NumberConverter:
    global _default  # noqa: PLW0603
    if _default is None:
        _default = NumberConverter()
    return _default


def to_cardinal(value: NumericInput, lang: str | None = None, **options: Any) -> str:
    return get_converter().cardinal(value, lang, **options)


def to_ordinal(value: NumericInput, lang: str | None = None, **options: Any) -> str:
    return get_converter().ordinal(value, lang, **options)


def to_currency(value: NumericInput, lang: str | None = None, **options: Any) -> str:
    return get_converter().currency(value, lang, **options)
