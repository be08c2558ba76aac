"""
Tests for core.time - Clock protocol and instant parsing.
"""

import pytest
from datetime import datetime, timedelta, timezone

from core.time import (
    Clock,
    FixedClock,
    InvalidInput,
    MutableClock,
    ParseError,
    SystemClock,
    apply_relative,
    parse_instant,
)


START = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_utc_datetime(self):
        clock = SystemClock()
        dt = clock.now()
        assert dt.tzinfo is not None
        assert dt.tzinfo == timezone.utc

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now()
        t2 = clock.now()
        assert t2 >= t1


class TestFixedClock:
    def test_returns_fixed_time(self):
        fixed = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed  # Same every time

    def test_parses_string_instant(self):
        clock = FixedClock("2030-12-31T23:59:59+00:00")
        assert clock.now() == datetime(2030, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

    def test_parses_zulu_suffix(self):
        clock = FixedClock("2025-03-01T12:00:00Z")
        assert clock.now() == datetime(2025, 3, 1, 12, tzinfo=timezone.utc)

    def test_defaults_to_real_now_at_construction(self):
        before = datetime.now(timezone.utc)
        clock = FixedClock()
        after = datetime.now(timezone.utc)
        assert before <= clock.now() <= after
        assert clock.now() == clock.now()

    def test_rejects_naive_datetime(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2025, 1, 1))

    def test_rejects_unparsable_string(self):
        with pytest.raises(ParseError, match="Unable to parse"):
            FixedClock("not a date at all")

    def test_advanced_returns_new_clock(self):
        clock = FixedClock(START)
        later = clock.advanced("+2 hours")
        assert later is not clock
        assert later.now() == START + timedelta(hours=2)
        assert clock.now() == START

    def test_advanced_accepts_timedelta(self):
        clock = FixedClock(START)
        assert clock.advanced(timedelta(days=-1)).now() == START - timedelta(days=1)

    def test_advanced_rejects_unknown_expression(self):
        with pytest.raises(InvalidInput):
            FixedClock(START).advanced("sometime soon")

    def test_at_returns_new_clock(self):
        clock = FixedClock(START)
        moved = clock.at("2026-06-15T08:30:00+00:00")
        assert moved.now() == datetime(2026, 6, 15, 8, 30, tzinfo=timezone.utc)
        assert clock.now() == START

    def test_relative_string_counts_from_real_now(self):
        before = datetime.now(timezone.utc)
        clock = FixedClock("+1 day")
        after = datetime.now(timezone.utc)
        assert before + timedelta(days=1) <= clock.now() <= after + timedelta(days=1)

    def test_at_accepts_relative_string(self):
        clock = FixedClock(START)
        before = datetime.now(timezone.utc)
        moved = clock.at("+2 hours")
        after = datetime.now(timezone.utc)
        assert before + timedelta(hours=2) <= moved.now() <= after + timedelta(hours=2)
        assert clock.now() == START


class TestMutableClock:
    def test_defaults_to_real_now(self):
        before = datetime.now(timezone.utc)
        clock = MutableClock()
        after = datetime.now(timezone.utc)
        assert before <= clock.now() <= after

    def test_set_now(self):
        clock = MutableClock("2025-01-01T00:00:00+00:00")
        assert clock.now() == START

        clock.set_now("2026-06-15T08:30:00+00:00")
        assert clock.now() == datetime(2026, 6, 15, 8, 30, tzinfo=timezone.utc)

        clock.set_now(START)
        assert clock.now() == START

    def test_set_now_rejects_garbage(self):
        clock = MutableClock(START)
        with pytest.raises(ParseError):
            clock.set_now("31st of Nevuary")
        assert clock.now() == START

    def test_set_now_accepts_named_offset(self):
        clock = MutableClock(START)
        before = datetime.now(timezone.utc)
        clock.set_now("tomorrow")
        after = datetime.now(timezone.utc)

        now = clock.now()
        assert (now.hour, now.minute, now.second, now.microsecond) == (0, 0, 0, 0)
        assert before.date() + timedelta(days=1) <= now.date() <= after.date() + timedelta(days=1)

    def test_advance_relative(self):
        clock = MutableClock(START)

        clock.advance("+1 day")
        assert clock.now() == datetime(2025, 1, 2, tzinfo=timezone.utc)

        clock.advance("-2 hours")  # previous day 22:00
        assert clock.now() == datetime(2025, 1, 1, 22, tzinfo=timezone.utc)

    def test_convenience_advance_methods(self):
        clock = MutableClock(START)

        clock.advance_seconds(30)
        assert clock.now() == datetime(2025, 1, 1, 0, 0, 30, tzinfo=timezone.utc)

        clock.advance_minutes(2)
        assert clock.now() == datetime(2025, 1, 1, 0, 2, 30, tzinfo=timezone.utc)

        clock.advance_hours(1)
        assert clock.now() == datetime(2025, 1, 1, 1, 2, 30, tzinfo=timezone.utc)

        clock.advance_days(1)
        assert clock.now() == datetime(2025, 1, 2, 1, 2, 30, tzinfo=timezone.utc)

        clock.advance_seconds(-30)
        assert clock.now() == datetime(2025, 1, 2, 1, 2, 0, tzinfo=timezone.utc)

    def test_zero_advance_is_noop(self):
        clock = MutableClock(START)
        clock.advance_seconds(0)
        clock.advance_minutes(0)
        clock.advance_hours(0)
        clock.advance_days(0)
        assert clock.now() == START

    def test_invalid_modifier_raises(self):
        clock = MutableClock(START)
        with pytest.raises(InvalidInput, match="Invalid relative time modifier"):
            clock.advance("++ not a relative modifier ++")
        assert clock.now() == START


class TestClockProtocol:
    @pytest.mark.parametrize(
        "clock", [SystemClock(), FixedClock(START), MutableClock(START)]
    )
    def test_all_clocks_satisfy_protocol(self, clock):
        def read(c: Clock) -> datetime:
            return c.now()

        assert isinstance(read(clock), datetime)


# ── Parsing ──────────────────────────────────────────────────

class TestParseInstant:
    def test_plain_date_is_midnight_utc(self):
        assert parse_instant("2025-03-01") == datetime(2025, 3, 1, tzinfo=timezone.utc)

    def test_naive_string_is_utc(self):
        assert parse_instant("2025-03-01 10:15:00") == datetime(
            2025, 3, 1, 10, 15, tzinfo=timezone.utc
        )

    def test_keeps_explicit_offset(self):
        parsed = parse_instant("2025-03-01T12:00:00+02:00")
        assert parsed == datetime(2025, 3, 1, 10, tzinfo=timezone.utc)

    def test_out_of_range_component(self):
        with pytest.raises(ParseError):
            parse_instant("2025-13-01")

    def test_non_string(self):
        with pytest.raises(ParseError):
            parse_instant(20250301)

    def test_relative_fallback(self):
        before = datetime.now(timezone.utc)
        parsed = parse_instant("-2 hours")
        after = datetime.now(timezone.utc)
        assert before - timedelta(hours=2) <= parsed <= after - timedelta(hours=2)

    @pytest.mark.parametrize("value", ["", "soon", "+1 fortnight", "next someday"])
    def test_neither_absolute_nor_relative(self, value):
        with pytest.raises(ParseError):
            parse_instant(value)


class TestApplyRelative:
    # 2025-03-05 is a Wednesday
    BASE = datetime(2025, 3, 5, 15, 45, 10, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("+1 day", BASE + timedelta(days=1)),
            ("-2 hours", BASE - timedelta(hours=2)),
            ("+15 minutes", BASE + timedelta(minutes=15)),
            ("30 seconds", BASE + timedelta(seconds=30)),
            ("+1 week", BASE + timedelta(weeks=1)),
            ("+1 day 2 hours", BASE + timedelta(days=1, hours=2)),
            ("  +1   DAY  ", BASE + timedelta(days=1)),
            ("now", BASE),
            ("today", datetime(2025, 3, 5, tzinfo=timezone.utc)),
            ("midnight", datetime(2025, 3, 5, tzinfo=timezone.utc)),
            ("noon", datetime(2025, 3, 5, 12, tzinfo=timezone.utc)),
            ("tomorrow", datetime(2025, 3, 6, tzinfo=timezone.utc)),
            ("yesterday", datetime(2025, 3, 4, tzinfo=timezone.utc)),
            ("next monday", datetime(2025, 3, 10, tzinfo=timezone.utc)),
            ("next wednesday", datetime(2025, 3, 12, tzinfo=timezone.utc)),
            ("last friday", datetime(2025, 2, 28, tzinfo=timezone.utc)),
            ("last wednesday", datetime(2025, 2, 26, tzinfo=timezone.utc)),
        ],
    )
    def test_recognized_expressions(self, expression, expected):
        assert apply_relative(self.BASE, expression) == expected

    @pytest.mark.parametrize(
        "expression",
        ["", "   ", "+1 fortnight", "next someday", "soon", "+ day", "1 day later"],
    )
    def test_unrecognized_expressions(self, expression):
        with pytest.raises(InvalidInput):
            apply_relative(self.BASE, expression)
