"""
Pydantic models for conversion settings — typed, frozen, validated at the boundary.

ConversionOptions is immutable: a converter swaps in a new copy when a
setting changes, so an options object handed to another caller never
changes underneath it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ─── Conversion Mode ────────────────────────────────────────────────


class ConversionMode(str, Enum):
    """How a bare number is read."""

    AUTOMATIC = "automatic"  # Plain count, fraction spoken digit by digit
    CURRENCY = "currency"  # Money: implied cents, pluralized unit names


# ─── Conversion Options ─────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Words and switches used while assembling a phrase."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hyphen: str = Field(default="-", min_length=1)  # Also splits off the last word for ordinals
    conjunction: str = "and"
    separator: str = ","  # Between scale groups: "one thousand, two hundred"
    negative: str = "negative "  # Prefix, trailing space included ("minus " also works)
    decimal: str = "point"
    percent: str = "percent"
    degree: str = "degree"
    currency_major: str = Field(default="dollar", min_length=1)
    currency_minor: str = Field(default="cent", min_length=1)
    capitalize: bool = True  # Upper-case every word except the conjunction
    include_zero_major: bool = True  # "Zero Dollars and ..." vs "... Cents"
    include_zero_minor: bool = True  # "... and Zero Cents"
