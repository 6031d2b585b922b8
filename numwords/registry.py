"""
Language tag resolution.

Maps whatever the caller typed ("en", "FR_be", "pt-BR", "portugese") onto a
registered grammar module.

Strategy, in order:
  1. Exact tag match (case-insensitive, "_" treated as "-")
  2. Subtag truncation: "fr-BE-x-old" → "fr-BE" → "fr"
  3. Same primary subtag: "zh-CN", "zh" → "zh-Hans"
  4. Fuzzy match on English language names (SequenceMatcher)

Anything below the threshold is an UnsupportedLanguageError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import Mapping

from .exceptions import UnsupportedLanguageError
from .grammar import Language
from .languages import LANGUAGES

logger = logging.getLogger(__name__)

# Minimum fuzzy-match score to accept (0.0 = no match, 1.0 = exact)
MATCH_THRESHOLD = 0.75

# Confidence reported for tag fallbacks (steps 2 and 3)
SUBTAG_CONFIDENCE = 0.9
PRIMARY_CONFIDENCE = 0.8


# ─── Data Structures ────────────────────────────────────────────────


@dataclass
class LanguageMatch:
    """Result of a language resolution attempt."""

    original: str  # What the caller asked for
    resolved: str  # Registered tag
    language: type[Language]
    confidence: float  # 0.0-1.0 match score


# ─── Public API ─────────────────────────────────────────────────────


def available_languages(languages: Mapping[str, type[Language]] | None = None) -> list[dict]:
    """Describe every registered language (tag, name, modes, options)."""
    languages = LANGUAGES if languages is None else languages
    return [cls.describe() for cls in languages.values()]


def resolve_language(
    tag: str, languages: Mapping[str, type[Language]] | None = None
) -> LanguageMatch:
    """Resolve a language tag or name to a registered grammar module.

    Args:
        tag: BCP-47 tag or English language name.
        languages: Registry to search; defaults to the bundled languages.

    Raises:
        UnsupportedLanguageError: If nothing matches above the threshold.
    """
    languages = LANGUAGES if languages is None else languages
    by_lower = {code.lower(): code for code in languages}
    wanted = str(tag).strip().replace("_", "-").lower()

    def match(code: str, confidence: float) -> LanguageMatch:
        return LanguageMatch(
            original=tag, resolved=code, language=languages[code], confidence=confidence
        )

    if not wanted:
        raise UnsupportedLanguageError(
            "Language tag must not be empty", details={"lang": tag}
        )

    # ── Step 1: Exact tag ───────────────────────────────────────────
    if wanted in by_lower:
        return match(by_lower[wanted], 1.0)

    # ── Step 2: Drop trailing subtags ───────────────────────────────
    subtags = wanted.split("-")
    for end in range(len(subtags) - 1, 0, -1):
        candidate = "-".join(subtags[:end])
        if candidate in by_lower:
            logger.info("Language '%s' resolved to '%s' by subtag truncation", tag, by_lower[candidate])
            return match(by_lower[candidate], SUBTAG_CONFIDENCE)

    # ── Step 3: Any variant of the same primary language ────────────
    for lower, code in by_lower.items():
        if lower.split("-")[0] == subtags[0]:
            logger.info("Language '%s' resolved to '%s' by primary subtag", tag, code)
            return match(code, PRIMARY_CONFIDENCE)

    # ── Step 4: Fuzzy match on English names ────────────────────────
    best_code: str | None = None
    best_score = 0.0
    for code, cls in languages.items():
        score = SequenceMatcher(None, wanted, cls.name.lower()).ratio()
        if score > best_score:
            best_score = score
            best_code = code

    if best_code is not None and best_score >= MATCH_THRESHOLD:
        logger.info(
            "Language '%s' resolved to '%s' by name (score %.3f)", tag, best_code, best_score
        )
        return match(best_code, round(best_score, 3))

    raise UnsupportedLanguageError(
        f"Unsupported language: '{tag}'",
        details={"lang": tag, "available": sorted(languages)},
    )
