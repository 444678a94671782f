"""
Engine Errors

Raised by the analysis entry points before any detector runs. Blank
input is not an error; it returns the neutral result.
"""

from __future__ import annotations


class SlopSenseError(Exception):
    """Base class for every error the engine raises."""


class InputTooLarge(SlopSenseError):
    """Text exceeds the engine's input ceiling. No partial analysis is done."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input is {length:,} characters; the limit is {limit:,}."
        )


class InvalidInput(SlopSenseError):
    """Text is not a string or is not well-formed UTF-8."""
