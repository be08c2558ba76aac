"""
Entropy Core Time - Instant Parsing
=====================================
Turns strings into instants for clock set-up.

Two grammars:
- absolute: ISO-8601 date-times or plain dates (parsed with
  django.utils.dateparse). No offset means UTC.
- relative: signed offsets ("+1 day", "-2 hours", "+1 day 2 hours")
  and named offsets ("tomorrow", "noon", "next monday").

parse_instant falls back to the relative grammar, counted from
real now, when a string is not an absolute instant.
"""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta, timezone

from django.utils.dateparse import parse_date, parse_datetime

from core.time.errors import InvalidInput, ParseError


# ══════════════════════════════════════════════════════════════
# ABSOLUTE INSTANTS
# ══════════════════════════════════════════════════════════════

NOW_KEYWORD = "now"


def parse_instant(value: str) -> datetime:
    """
    Parse an absolute or relative time string into an aware datetime.

    Raises:
        ParseError: value is not a string or not a recognizable instant.
    """
    if not isinstance(value, str):
        raise ParseError(value, "expected a string")

    text = value.strip()
    if text.lower() == NOW_KEYWORD:
        return datetime.now(timezone.utc)

    try:
        parsed = parse_datetime(text)
        if parsed is None:
            day = parse_date(text)
            if day is not None:
                parsed = datetime.combine(day, time.min)
    except ValueError as exc:
        raise ParseError(value, str(exc)) from exc

    if parsed is None:
        # Relative strings ("+1 day", "tomorrow") count from real now.
        try:
            return apply_relative(datetime.now(timezone.utc), text)
        except InvalidInput as exc:
            raise ParseError(value) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ══════════════════════════════════════════════════════════════
# RELATIVE EXPRESSIONS
# ══════════════════════════════════════════════════════════════

_UNITS = {
    "sec": timedelta(seconds=1),
    "secs": timedelta(seconds=1),
    "second": timedelta(seconds=1),
    "seconds": timedelta(seconds=1),
    "min": timedelta(minutes=1),
    "mins": timedelta(minutes=1),
    "minute": timedelta(minutes=1),
    "minutes": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "hours": timedelta(hours=1),
    "day": timedelta(days=1),
    "days": timedelta(days=1),
    "week": timedelta(weeks=1),
    "weeks": timedelta(weeks=1),
}

_WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_OFFSET_RE = re.compile(r"\s*([+-]?)\s*(\d+)\s*([a-z]+)\s*")
_WEEKDAY_RE = re.compile(r"(next|last)\s+([a-z]+)")


def _midnight(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def _apply_named(instant: datetime, text: str) -> datetime | None:
    if text == NOW_KEYWORD:
        return instant
    if text in ("today", "midnight"):
        return _midnight(instant)
    if text == "noon":
        return _midnight(instant).replace(hour=12)
    if text == "tomorrow":
        return _midnight(instant) + timedelta(days=1)
    if text == "yesterday":
        return _midnight(instant) - timedelta(days=1)

    match = _WEEKDAY_RE.fullmatch(text)
    if match is None or match.group(2) not in _WEEKDAYS:
        return None

    target = _WEEKDAYS.index(match.group(2))
    current = instant.weekday()
    if match.group(1) == "next":
        days = (target - current) % 7 or 7
    else:
        days = -((current - target) % 7 or 7)
    return _midnight(instant) + timedelta(days=days)


def _parse_offsets(expression: str, text: str) -> timedelta:
    total = timedelta()
    pos = 0
    while pos < len(text):
        match = _OFFSET_RE.match(text, pos)
        if match is None or match.end() == pos:
            raise InvalidInput(expression)
        sign, amount, unit = match.groups()
        step = _UNITS.get(unit)
        if step is None:
            raise InvalidInput(expression)
        offset = step * int(amount)
        total += -offset if sign == "-" else offset
        pos = match.end()
    return total


def apply_relative(instant: datetime, expression: str) -> datetime:
    """
    Apply a relative time expression to an instant.

    Raises:
        InvalidInput: expression is empty or not recognized.
    """
    if not isinstance(expression, str) or not expression.strip():
        raise InvalidInput(expression)

    text = " ".join(expression.lower().split())
    named = _apply_named(instant, text)
    if named is not None:
        return named
    return instant + _parse_offsets(expression, text)
