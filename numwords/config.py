"""
Runtime configuration, read from the environment.

    NUMWORDS_MAX_DIGITS         Largest accepted number of digits (default 1000)
    NUMWORDS_VOCABULARY_GAP     "raise" (default) or "omit"
    NUMWORDS_DEFAULT_LANGUAGE   Language tag used when none is given (default "en")
    NUMWORDS_LOG_LEVEL          Logging level for the entry points (default "WARNING")

A `.env` file in the working directory is honoured.
"""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidOptionsError


class GapPolicy(str, Enum):
    """What to do when a language runs out of scale words."""

    RAISE = "raise"
    OMIT = "omit"


class Settings(BaseModel):
    """Process-wide knobs. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    # Python's int() refuses strings above 4300 digits by default
    max_digits: int = Field(default=1000, gt=0, le=4300)
    vocabulary_gap: GapPolicy = GapPolicy.RAISE
    default_language: str = "en"
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build Settings from environment variables (after loading `.env`)."""
    load_dotenv()

    raw = {
        "max_digits": os.environ.get("NUMWORDS_MAX_DIGITS"),
        "vocabulary_gap": os.environ.get("NUMWORDS_VOCABULARY_GAP"),
        "default_language": os.environ.get("NUMWORDS_DEFAULT_LANGUAGE"),
        "log_level": os.environ.get("NUMWORDS_LOG_LEVEL"),
    }
    try:
        return Settings(**{k: v for k, v in raw.items() if v is not None})
    except ValidationError as e:
        raise InvalidOptionsError(
            "Invalid NUMWORDS_* environment configuration",
            details={"errors": e.errors(include_url=False)},
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
