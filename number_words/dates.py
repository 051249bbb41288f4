"""
Date phrases: "2000-01-01" → "Saturday, January First, Two Thousand".

A thin adapter over WordConverter.  The pattern uses PHP date() letters
(the default "l, F jS, Y" reads "weekday, month day-ordinal, year"):

    d D j l N S w z   day tokens      (S = ordinal of the token before it)
    W                 ISO week number
    F m M n t         month tokens
    L o Y y           year tokens
    a A g G h H i s   time tokens

Numeric token values go through convert_to_words() in automatic mode.
Names (weekday, month, AM/PM) pass through untouched.  A backslash escapes
the next character; every other character is copied as-is.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, time
from typing import Callable

from .converter import WordConverter
from .exceptions import InvalidInputError, NumberWordsError
from .models import ConversionMode

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "l, F jS, Y"
ORDINAL_SUFFIX_TOKEN = "S"
ESCAPE = "\\"

# Accepted string layouts, tried after ISO 8601
_DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%d %B %Y",
)


# ─── Token Resolution ────────────────────────────────────────────────


def _english_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


_TOKENS: dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda m: f"{m.day:02d}",
    "D": lambda m: m.strftime("%a"),
    "j": lambda m: str(m.day),
    "l": lambda m: m.strftime("%A"),
    "N": lambda m: str(m.isoweekday()),
    "S": lambda m: _english_suffix(m.day),
    "w": lambda m: str(m.isoweekday() % 7),
    "z": lambda m: str(m.timetuple().tm_yday - 1),
    # Week
    "W": lambda m: f"{m.isocalendar()[1]:02d}",
    # Month
    "F": lambda m: m.strftime("%B"),
    "m": lambda m: f"{m.month:02d}",
    "M": lambda m: m.strftime("%b"),
    "n": lambda m: str(m.month),
    "t": lambda m: str(calendar.monthrange(m.year, m.month)[1]),
    # Year
    "L": lambda m: "1" if calendar.isleap(m.year) else "0",
    "o": lambda m: str(m.isocalendar()[0]),
    "Y": lambda m: str(m.year),
    "y": lambda m: f"{m.year % 100:02d}",
    # Time
    "a": lambda m: "am" if m.hour < 12 else "pm",
    "A": lambda m: "AM" if m.hour < 12 else "PM",
    "g": lambda m: str(_hour12(m)),
    "G": lambda m: str(m.hour),
    "h": lambda m: f"{_hour12(m):02d}",
    "H": lambda m: f"{m.hour:02d}",
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
}


def parse_date(value: date | datetime | str) -> datetime:
    """Coerce a date, datetime or date string to a datetime.

    Raises:
        InvalidInputError: If the string matches none of the known layouts.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())

    text = str(value).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise InvalidInputError(
        f"Unrecognized date: {value!r}",
        {"input": text, "accepted_formats": ["ISO 8601", *_DATE_FORMATS]},
    )


# ─── Adapter ─────────────────────────────────────────────────────────


class DateAdapter:
    """Spells out the numeric parts of a formatted date.

    Usage:
        adapter = DateAdapter()
        adapter.convert_date_to_words("03/21/2012")
        # 'Wednesday, March Twenty-first, Two Thousand and Twelve'
    """

    def __init__(self, converter: WordConverter | None = None):
        self.converter = converter or WordConverter()

    def convert_date_to_words(
        self, value: date | datetime | str, pattern: str = DEFAULT_PATTERN
    ) -> str | NumberWordsError:
        """Render ``value`` through ``pattern`` with every number spelled out.

        Returns:
            The phrase, or an InvalidInputError if the date can't be parsed.
        """
        try:
            moment = parse_date(value)
        except InvalidInputError as exc:
            logger.warning("Could not convert date %r to words: %s", value, exc)
            return exc

        pieces: list[str] = []
        # Raw value of the previous token, if it was numeric (for "S")
        previous_number: str | None = None
        chars = iter(pattern)

        for char in chars:
            if char == ESCAPE:
                pieces.append(next(chars, ""))
                previous_number = None
                continue

            if char == ORDINAL_SUFFIX_TOKEN and previous_number is not None:
                pieces[-1] = self.converter.get_number_ordinal(previous_number)
                previous_number = None
                continue

            resolve = _TOKENS.get(char)
            if resolve is None:
                pieces.append(char)
                previous_number = None
                continue

            raw = resolve(moment)
            if raw.isdigit():
                words = self.converter.convert_to_words(raw, ConversionMode.AUTOMATIC)
                if isinstance(words, NumberWordsError):
                    return words
                pieces.append(words)
                previous_number = raw
            else:
                pieces.append(raw)
                previous_number = None

        return "".join(pieces).strip()
