#!/usr/bin/env python3
"""
Number Words — Entry Point
==========================

Spells out numbers, amounts, ordinals and dates from the command line.

Usage:
    python main.py                              # Demo table
    python main.py 120 '$1.506' '32%' '32.8°'   # Convert values
    python main.py 21 123 --ordinal             # Ordinals
    python main.py 03/21/2012 --date 'l, F jS, Y'
    NUMBER_WORDS_NEGATIVE="minus " python main.py -- -13
"""

from __future__ import annotations

import argparse
import logging
import sys

from number_words.config import load_mode, load_options, log_level
from number_words.converter import WordConverter
from number_words.dates import DEFAULT_PATTERN, DateAdapter
from number_words.exceptions import InvalidInputError, NumberWordsError
from number_words.models import ConversionMode

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Demo Values ─────────────────────────────────────────────────────

DEMO_VALUES = [
    "0",
    "120",
    "-2980.123",
    "1000000",
    "32%",
    "-32.5°",
    "$1.506",
    "$1235.506",
    "$.25",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_result(value: str, result: str | NumberWordsError) -> bool:
    """Print one converted value. Returns False if it failed."""
    if isinstance(result, NumberWordsError):
        print(f"  {_DIM}{value:>16}{_RESET}  {_RED}[{result.code}] {result.message}{_RESET}")
        return False
    print(f"  {_DIM}{value:>16}{_RESET}  {_GREEN}{result}{_RESET}")
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert numbers, amounts, ordinals and dates to English words."
    )
    parser.add_argument("values", nargs="*", help="Values to convert (demo table if none)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ConversionMode],
        default=None,
        help="Read bare numbers as plain counts or as money",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--ordinal", action="store_true", help="Print ordinals instead")
    group.add_argument(
        "--date",
        metavar="PATTERN",
        nargs="?",
        const=DEFAULT_PATTERN,
        default=None,
        help="Treat values as dates, rendered through a PHP date() pattern",
    )
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert each value and print it. Returns 1 if any value failed."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    converter = WordConverter(load_options(), load_mode())
    values = args.values or DEMO_VALUES
    mode = ConversionMode(args.mode) if args.mode else None

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    ok = True
    for value in values:
        if args.ordinal:
            try:
                result: str | NumberWordsError = converter.get_number_ordinal(value)
            except ValueError:
                result = InvalidInputError(f"Not an integer: {value!r}")
            except NumberWordsError as exc:
                result = exc
        elif args.date is not None:
            result = DateAdapter(converter).convert_date_to_words(value, args.date)
        else:
            result = converter.convert_to_words(value, mode)
        ok = print_result(value, result) and ok

    print(f"{'=' * _WIDTH}\n")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
