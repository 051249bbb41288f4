"""
English word tables used by the converter.

Two read-only mappings keyed by integer:
  - CARDINAL_WORDS: everything the magnitude converter may need to look up
  - ORDINAL_WORDS:  only the ordinals that are NOT "cardinal + th"

Anything missing from ORDINAL_WORDS is formed by appending "th"
("four" → "fourth", "thirteen" → "thirteenth").
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Cardinal Words ──────────────────────────────────────────────────

_CARDINALS: dict[int, str] = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
    100: "hundred",
    1_000: "thousand",
    1_000_000: "million",
    1_000_000_000: "billion",
    1_000_000_000_000: "trillion",
    1_000_000_000_000_000: "quadrillion",
    1_000_000_000_000_000_000: "quintillion",
}

# ─── Irregular Ordinals ──────────────────────────────────────────────

_ORDINALS: dict[int, str] = {
    0: "zeroth",
    1: "first",
    2: "second",
    3: "third",
    5: "fifth",
    8: "eighth",
    9: "ninth",
    12: "twelfth",
    20: "twentieth",
    30: "thirtieth",
    40: "fortieth",
    50: "fiftieth",
    60: "sixtieth",
    70: "seventieth",
    80: "eightieth",
    90: "ninetieth",
    100: "hundredth",
    1_000: "thousandth",
    1_000_000: "millionth",
    1_000_000_000: "billionth",
    1_000_000_000_000: "trillionth",
    1_000_000_000_000_000: "quadrillionth",
    1_000_000_000_000_000_000: "quintillionth",
}

CARDINAL_WORDS: Mapping[int, str] = MappingProxyType(_CARDINALS)
ORDINAL_WORDS: Mapping[int, str] = MappingProxyType(_ORDINALS)

# Reverse lookup: "twelve" → 12, used to turn a phrase's last word into an ordinal
WORD_VALUES: Mapping[str, int] = MappingProxyType(
    {word: value for value, word in _CARDINALS.items()}
)

# Largest scale word we can spell; the magnitude converter never goes above it
LARGEST_SCALE: int = max(k for k in _CARDINALS if k >= 1_000)
