"""
Entropy Core Time - Errors
============================
Error types for clock construction and manipulation.

Only clock set-up can fail. Every temporal query that runs
against an already-built clock is total and never raises.
"""

from __future__ import annotations


class ClockError(Exception):
    """Base error for clock operations."""
    pass


class ParseError(ClockError, ValueError):
    """A time string is neither an absolute instant nor a relative expression."""

    def __init__(self, value: object, reason: str = ""):
        self.value = value
        message = f"Unable to parse datetime string '{value}'."
        if reason:
            message = f"{message[:-1]}: {reason}"
        super().__init__(message)


class InvalidInput(ClockError, ValueError):
    """A relative time expression is not recognized."""

    def __init__(self, expression: object):
        self.expression = expression
        super().__init__(
            f"Invalid relative time modifier '{expression}'."
        )
