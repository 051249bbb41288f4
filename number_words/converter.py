"""
Convert numbers to English words.

THIS IS THE CORE OF THE PACKAGE.  Everything else (dates, API, CLI) routes
through WordConverter.

Supported patterns:
    0              → "Zero"
    120            → "One Hundred and Twenty"
    -2980.123      → "Negative Two Thousand, Nine Hundred and Eighty Point One Two Three"
    "32%"          → "Thirty-two Percent"
    "32.8°"        → "Thirty-two Point Eight Degrees"
    "$1.506"       → "One Dollar and Fifty-one Cents"
    ordinal 123    → "One Hundred and Twenty-third"

Failures are RETURNED, not raised: convert_to_words() gives back either the
phrase or an InvalidInputError / OutOfRangeError instance.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from itertools import groupby
from typing import Any, Union

from .exceptions import InvalidInputError, NumberWordsError, OutOfRangeError
from .lexicon import CARDINAL_WORDS, LARGEST_SCALE, ORDINAL_WORDS, WORD_VALUES
from .models import ConversionMode, ConversionOptions

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, str]

# ─── Input Markers ───────────────────────────────────────────────────

CURRENCY_MARKER = "$"
PERCENT_MARKER = "%"
DEGREE_MARKER = "°"
THOUSANDS_MARKER = ","

_MARKERS = str.maketrans(
    "", "", CURRENCY_MARKER + PERCENT_MARKER + DEGREE_MARKER + THOUSANDS_MARKER
)

# Anything outside the host's signed machine integer range is rejected outright
MAX_MAGNITUDE: int = sys.maxsize
MIN_MAGNITUDE: int = -sys.maxsize - 1

_CENTS = Decimal("0.01")


# ─── Data Structures ────────────────────────────────────────────────


@dataclass
class NormalizedInput:
    """A number after marker stripping, sign removal and fraction split."""

    whole: int
    is_negative: bool
    mode: ConversionMode
    fraction: str | None = None  # Automatic mode: fractional digits, verbatim
    cents: int = 0  # Currency mode only, 0-99
    unit: str = ""  # "percent" / "degree"
    plural_unit: bool = True


# ─── Capitalization ─────────────────────────────────────────────────


def _is_word_char(char: str) -> bool:
    return char == "-" or (char.isascii() and char.isalpha())


def capitalize_words(text: str, keep_lower: set[str] | frozenset[str] = frozenset()) -> str:
    """Upper-case the first letter of every word, except words in keep_lower.

    A "word" is a run of ASCII letters and hyphens, so "twenty-one" becomes
    "Twenty-one", not "Twenty-One".  Only the first letter is touched, which
    makes the operation idempotent.
    """
    pieces: list[str] = []
    for is_word, chars in groupby(text, key=_is_word_char):
        token = "".join(chars)
        if is_word and token.lower() not in keep_lower:
            token = token[:1].upper() + token[1:]
        pieces.append(token)
    return "".join(pieces)


def _pluralize(word: str, plural: bool) -> str:
    return word + "s" if plural else word


def resolve_mode(value: Number, mode: ConversionMode) -> ConversionMode:
    """The mode a value is actually read in, once its markers are taken into account.

    A leading "$" forces currency; a trailing "%" or "°" forces automatic.
    Non-string values always keep ``mode``.
    """
    if not isinstance(value, str):
        return mode
    text = value.strip()
    if text.endswith((PERCENT_MARKER, DEGREE_MARKER)):
        return ConversionMode.AUTOMATIC
    if text.lstrip("+-").startswith(CURRENCY_MARKER):
        return ConversionMode.CURRENCY
    return mode


# ─── Main Converter ─────────────────────────────────────────────────


class WordConverter:
    """Turns numbers into English phrases.

    Usage:
        converter = WordConverter()
        converter.convert_to_words("$1,235.506")
        # 'One Thousand, Two Hundred and Thirty-five Dollars and Fifty-one Cents'
        converter.get_number_ordinal(21)
        # 'Twenty-first'

    The instance mode (set_mode) is only a default.  Passing ``mode=`` to
    convert_to_words() applies to that call alone and never changes the
    instance, so one converter can be shared between callers that always
    pass a mode.
    """

    def __init__(
        self,
        options: ConversionOptions | None = None,
        mode: ConversionMode | str = ConversionMode.AUTOMATIC,
        **overrides: Any,
    ):
        self.options = options if options is not None else ConversionOptions()
        if overrides:
            self.configure(**overrides)
        self.mode = ConversionMode(mode)

    # ─── Settings ────────────────────────────────────────────────────

    def set_mode(self, mode: ConversionMode | str) -> None:
        """Change the default mode used when a call passes none."""
        self.mode = ConversionMode(mode)
        logger.debug("Default conversion mode set to %s", self.mode.value)

    def configure(self, **changes: Any) -> None:
        """Replace one or more option fields, e.g. configure(negative="minus ")."""
        merged = {**self.options.model_dump(), **changes}
        self.options = ConversionOptions.model_validate(merged)

    # ─── Public API ──────────────────────────────────────────────────

    def convert_to_words(
        self, value: Number, mode: ConversionMode | str | None = None
    ) -> str | NumberWordsError:
        """Convert any number (or "$", "%", "°" string) to words.

        Args:
            value: 42, -2980.123, Decimal("1.5"), "$1,235.50", "32%", "32.8°"
            mode: Per-call override of the instance mode.

        Returns:
            The phrase, or an InvalidInputError / OutOfRangeError instance.
            Nothing is raised for bad input.
        """
        effective = ConversionMode(mode) if mode is not None else self.mode
        try:
            return self._convert(value, effective)
        except NumberWordsError as exc:
            logger.warning("Could not convert %r to words: %s", value, exc)
            return exc

    def get_number_ordinal(self, value: int | str) -> str:
        """Return the ordinal phrase for an integer: 21 → "Twenty-first".

        The sign is ignored (-3 → "Third").  Exact lexicon hits are used as-is
        (1000 → "Thousandth"); otherwise only the last word of the cardinal
        phrase changes: "one hundred and twelve" → "one hundred and twelfth",
        "twenty-four" → "twenty-fourth".
        """
        number = abs(int(value))

        if number in ORDINAL_WORDS:
            phrase = ORDINAL_WORDS[number]
        else:
            cardinal = self.spell(number)
            cut = self._last_word_start(cardinal)
            phrase = cardinal[:cut] + self._ordinal_word(cardinal[cut:])

        if self.options.capitalize:
            phrase = capitalize_words(phrase, {self.options.conjunction.lower()})
        return phrase

    def spell(self, number: int) -> str:
        """Spell a non-negative whole number, lower-case, with no units.

        Magnitude bands:
            0-20     → direct lookup
            21-99    → tens + hyphen + ones
            100-999  → "<digit> hundred [and <rest>]"
            >= 1000  → "<groups> <scale>[, <rest> | and <rest>]"

        Raises:
            OutOfRangeError: If the number needs a scale word we don't have.
        """
        hyphen = self.options.hyphen
        conjunction = self.options.conjunction

        if number < 21:
            return CARDINAL_WORDS[number]

        if number < 100:
            tens, units = divmod(number, 10)
            words = CARDINAL_WORDS[tens * 10]
            return f"{words}{hyphen}{CARDINAL_WORDS[units]}" if units else words

        if number < 1000:
            hundreds, remainder = divmod(number, 100)
            words = f"{CARDINAL_WORDS[hundreds]} {CARDINAL_WORDS[100]}"
            if remainder:
                words += f" {conjunction} {self.spell(remainder)}"
            return words

        # Largest power of 1000 not above the number; integer math only, so
        # exact powers like 1,000,000 land on the right scale
        base = 1000
        while base * 1000 <= number:
            base *= 1000
        if base not in CARDINAL_WORDS:
            raise OutOfRangeError(
                f"{number} is too large to spell (largest scale is {LARGEST_SCALE:,})",
                {"value": str(number), "largest_scale": str(LARGEST_SCALE)},
            )

        groups, remainder = divmod(number, base)
        words = f"{self.spell(groups)} {CARDINAL_WORDS[base]}"
        if remainder:
            # "one thousand and five" but "one thousand, two hundred and thirty-three"
            joiner = f" {conjunction} " if remainder < 100 else f"{self.options.separator} "
            words += joiner + self.spell(remainder)
        return words

    # ─── Phrase Assembly ─────────────────────────────────────────────

    def _convert(self, value: Number, mode: ConversionMode) -> str:
        opts = self.options
        parsed = self._normalize(value, mode)
        parts: list[str] = []

        # ── Major amount ────────────────────────────────────────────
        if parsed.whole != 0 or opts.include_zero_major:
            major = self.spell(parsed.whole)
            if parsed.mode is ConversionMode.CURRENCY:
                major += " " + _pluralize(opts.currency_major, parsed.whole != 1)
            parts.append(major)

        # ── Currency: cents, then done (no percent/degree suffix) ───
        if parsed.mode is ConversionMode.CURRENCY:
            if parsed.cents != 0 or opts.include_zero_minor:
                if parts:
                    parts.append(opts.conjunction)
                parts.append(self.spell(parsed.cents))
                parts.append(_pluralize(opts.currency_minor, parsed.cents != 1))
            return self._finish(parts, parsed.is_negative)

        # ── Automatic: fraction spoken digit by digit ───────────────
        if parsed.fraction is not None:
            parts.append(opts.decimal)
            parts.extend(CARDINAL_WORDS[int(digit)] for digit in parsed.fraction)

        # ── Unit suffix ─────────────────────────────────────────────
        if parsed.unit:
            plural = parsed.plural_unit and (
                parsed.whole != 1 or parsed.fraction is not None
            )
            parts.append(_pluralize(parsed.unit, plural))

        return self._finish(parts, parsed.is_negative)

    def _finish(self, parts: list[str], is_negative: bool) -> str:
        """Apply the negative prefix and capitalization, then trim."""
        phrase = " ".join(part for part in parts if part)
        if is_negative:
            phrase = self.options.negative + phrase
        if self.options.capitalize:
            phrase = capitalize_words(phrase, {self.options.conjunction.lower()})
        return phrase.strip()

    # ─── Input Normalization ─────────────────────────────────────────

    def _normalize(self, value: Number, mode: ConversionMode) -> NormalizedInput:
        """Detect unit markers, validate, strip the sign and split off the fraction.

        Raises:
            InvalidInputError: Not numeric after markers are removed.
            OutOfRangeError: Larger than the platform integer range.
        """
        unit = ""
        plural_unit = True

        if isinstance(value, bool):
            raise InvalidInputError(
                f"Booleans are not numbers: {value!r}", {"input": repr(value)}
            )
        if isinstance(value, float) and value.is_integer():
            value = int(value)

        if isinstance(value, str):
            text = value.strip()
            mode = resolve_mode(text, mode)
            if text.endswith(PERCENT_MARKER):
                unit = self.options.percent
                plural_unit = False
            elif text.endswith(DEGREE_MARKER):
                unit = self.options.degree
            text = text.translate(_MARKERS)
        elif isinstance(value, (int, float, Decimal)):
            text = str(value)
        else:
            raise InvalidInputError(
                f"Unsupported input type: {type(value).__name__}",
                {"input": repr(value)},
            )

        try:
            number = Decimal(text)
        except InvalidOperation:
            raise InvalidInputError(
                f"Not a number: {value!r}", {"input": str(value)}
            ) from None
        if not number.is_finite():
            raise InvalidInputError(f"Not a finite number: {value!r}", {"input": str(value)})

        if not MIN_MAGNITUDE <= number <= MAX_MAGNITUDE:
            raise OutOfRangeError(
                f"{value!r} is outside {MIN_MAGNITUDE}..{MAX_MAGNITUDE}",
                {
                    "input": str(value),
                    "min_magnitude": str(MIN_MAGNITUDE),
                    "max_magnitude": str(MAX_MAGNITUDE),
                },
            )

        is_negative = number < 0
        number = number.copy_abs()

        if mode is ConversionMode.CURRENCY:
            # Half-up to whole cents: .109 → .11, .506 → .51, .1 → .10
            number = number.quantize(_CENTS, rounding=ROUND_HALF_UP)
            whole = int(number)
            return NormalizedInput(
                whole=whole,
                is_negative=is_negative,
                mode=mode,
                cents=int((number - whole) * 100),
            )

        whole_text, _, fraction_text = format(number, "f").partition(".")
        return NormalizedInput(
            whole=int(whole_text),
            is_negative=is_negative,
            mode=mode,
            fraction=fraction_text or None,
            unit=unit,
            plural_unit=plural_unit,
        )

    # ─── Ordinal Helpers ─────────────────────────────────────────────

    def _last_word_start(self, phrase: str) -> int:
        """Index where the final word of a cardinal phrase begins."""
        start = phrase.rfind(" ") + 1
        hyphen = self.options.hyphen
        if hyphen:
            at = phrase.rfind(hyphen)
            if at >= 0:
                start = max(start, at + len(hyphen))
        return start

    @staticmethod
    def _ordinal_word(word: str) -> str:
        """Map a cardinal word to its ordinal: three → third, four → fourth."""
        value = WORD_VALUES.get(word)
        if value is not None and value in ORDINAL_WORDS:
            return ORDINAL_WORDS[value]
        return word + "th"
