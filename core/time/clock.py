"""
Entropy Core Time - Explicit Clock Protocol
=============================================
Doctrine: NO datetime.now() inside temporal decision logic.
Every "now" is read through an injected Clock so that any
instant can be simulated.

Implementations:
- SystemClock   production, real wall-clock time
- FixedClock    frozen instant, immutable
- MutableClock  settable/advanceable, test-only, not thread safe
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Protocol, Union

from core.time.parsing import apply_relative, parse_instant

logger = logging.getLogger("entropy.time")

InstantInput = Union[datetime, str, None]
Offset = Union[timedelta, str]


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    """Injectable time source."""

    def now(self) -> datetime:
        """Return the current instant."""
        ...  # pragma: no cover


def _coerce_instant(value: InstantInput) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("Clock requires timezone-aware datetime.")
        return value
    return parse_instant(value)


def _shift(instant: datetime, offset: Offset) -> datetime:
    if isinstance(offset, timedelta):
        return instant + offset
    return apply_relative(instant, offset)


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock - real system time, read fresh on every call."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Test clock - returns the same instant for its whole lifetime.

    Accepts an aware datetime, a parseable string, or nothing
    (real time captured once at construction).

    Usage:
        clock = FixedClock("2025-03-01T12:00:00+00:00")
        later = clock.advanced("+2 hours")   # clock itself is unchanged
    """

    __slots__ = ("_now",)

    def __init__(self, fixed: InstantInput = None) -> None:
        self._now = _coerce_instant(fixed)

    def now(self) -> datetime:
        return self._now

    def advanced(self, offset: Offset) -> FixedClock:
        """Return a new FixedClock shifted by a timedelta or relative expression."""
        return FixedClock(_shift(self._now, offset))

    def at(self, instant: Union[datetime, str]) -> FixedClock:
        """Return a new FixedClock frozen at an absolute instant."""
        return FixedClock(instant)

    def __repr__(self) -> str:
        return f"FixedClock({self._now.isoformat()!r})"


class MutableClock:
    """
    Test clock whose instant is set or advanced explicitly.

    NOT thread safe: confine one instance to one test at a time.
    Never wire it as the production clock.
    """

    def __init__(self, initial: InstantInput = None) -> None:
        self._now = _coerce_instant(initial)

    def now(self) -> datetime:
        return self._now

    def set_now(self, new: Union[datetime, str]) -> None:
        """Overwrite the current instant."""
        if new is None:
            raise ValueError("MutableClock.set_now() requires an instant.")
        self._now = _coerce_instant(new)
        logger.debug(f"MutableClock set to {self._now.isoformat()}")

    def advance(self, offset: Offset) -> None:
        """
        Advance (or rewind) by a timedelta or relative expression.

        Examples:
            clock.advance("+15 minutes")
            clock.advance("-2 days")
            clock.advance("next monday")

        Raises:
            InvalidInput: expression is not recognized.
        """
        self._now = _shift(self._now, offset)
        logger.debug(f"MutableClock advanced by {offset!r} to {self._now.isoformat()}")

    def advance_seconds(self, seconds: int) -> None:
        if seconds == 0:
            return
        self.advance(timedelta(seconds=seconds))

    def advance_minutes(self, minutes: int) -> None:
        if minutes == 0:
            return
        self.advance(timedelta(minutes=minutes))

    def advance_hours(self, hours: int) -> None:
        if hours == 0:
            return
        self.advance(timedelta(hours=hours))

    def advance_days(self, days: int) -> None:
        if days == 0:
            return
        self.advance(timedelta(days=days))

    def __repr__(self) -> str:
        return f"MutableClock({self._now.isoformat()!r})"
