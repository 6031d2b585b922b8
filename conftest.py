"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from numwords.config import GapPolicy, Settings, get_settings  # noqa: E402

_ENV_VARS = (
    "NUMWORDS_MAX_DIGITS",
    "NUMWORDS_VOCABULARY_GAP",
    "NUMWORDS_DEFAULT_LANGUAGE",
    "NUMWORDS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _default_environment(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default settings, whatever the shell exports."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def omit_settings() -> Settings:
    """Settings that drop missing scale words instead of raising."""
    return Settings(vocabulary_gap=GapPolicy.OMIT)
