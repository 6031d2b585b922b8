#!/usr/bin/env python3
"""
numwords — Entry Point
======================

Prints a table of sample conversions for one language.

Usage:
    python main.py                  # Default language (NUMWORDS_DEFAULT_LANGUAGE, "en")
    python main.py fr               # Any tag or English name: de, pt-BR, japanese …
    NUMWORDS_LOG_LEVEL=DEBUG python main.py ko
"""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from numwords.config import get_settings
from numwords.converter import NumberConverter
from numwords.exceptions import NumWordsError
from numwords.models import ConversionMode

load_dotenv()


# ─── Sample Inputs ───────────────────────────────────────────────────

SAMPLES: list[tuple[ConversionMode, str]] = [
    (ConversionMode.CARDINAL, "0"),
    (ConversionMode.CARDINAL, "7"),
    (ConversionMode.CARDINAL, "21"),
    (ConversionMode.CARDINAL, "80"),
    (ConversionMode.CARDINAL, "101"),
    (ConversionMode.CARDINAL, "1984"),
    (ConversionMode.CARDINAL, "1000000"),
    (ConversionMode.CARDINAL, "123456789"),
    (ConversionMode.CARDINAL, "-42"),
    (ConversionMode.CARDINAL, "3.05"),
    (ConversionMode.CARDINAL, "1e21"),
    (ConversionMode.ORDINAL, "1"),
    (ConversionMode.ORDINAL, "23"),
    (ConversionMode.ORDINAL, "100"),
    (ConversionMode.CURRENCY, "1"),
    (ConversionMode.CURRENCY, "2.50"),
    (ConversionMode.CURRENCY, "1000000"),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_table(converter: NumberConverter, lang: str | None) -> int:
    """Convert every sample and print it; failures are shown inline.

    Returns:
        0 if every sample converted (or the mode is unsupported), 1 otherwise.
    """
    match = converter.resolve(lang)
    language = converter.language(match.resolved)
    failures = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMWORDS — {match.language.name} ({match.resolved}){_RESET}")
    print(f"{'=' * _WIDTH}")
    if match.confidence < 1.0:
        print(f"  {_DIM}'{match.original}' matched with confidence {match.confidence}{_RESET}")
    print(f"  Modes:       {', '.join(m.value for m in language.supported_modes())}")
    print(f"{'─' * _WIDTH}")

    for mode, value in SAMPLES:
        label = f"{mode.value:<9} {value:>10}"
        try:
            words = converter.convert(value, match.resolved, mode)
        except NumWordsError as e:
            if e.code == "UNSUPPORTED_MODE":
                color = _YELLOW
            else:
                color = _RED
                failures += 1
            print(f"  {_DIM}{label}{_RESET}  {color}[{e.code}]{_RESET}")
            continue
        print(f"  {_DIM}{label}{_RESET}  {words}")

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} sample(s) failed{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL SAMPLES CONVERTED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Print the sample table for the language named on the command line."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    lang = sys.argv[1] if len(sys.argv) > 1 else None
    converter = NumberConverter(settings)
    try:
        exit_code = print_table(converter, lang)
    except NumWordsError as e:
        print(f"\n  {_RED}{_BOLD}[{e.code}]{_RESET} {e.message}\n")
        exit_code = 2
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
