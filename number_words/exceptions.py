"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to a specific category of conversion failure.
The public conversion calls RETURN these instead of raising them, so
text-assembly code can decide for itself whether a failure is fatal.
"""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(NumberWordsError):
    """The input is not a number, even after unit markers are stripped."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class OutOfRangeError(NumberWordsError):
    """The magnitude exceeds the platform integer range or the largest scale word."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)
