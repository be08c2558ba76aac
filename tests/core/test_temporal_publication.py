"""
Tests for core.temporal.publication - publish visibility.
"""

import logging

import pytest
from datetime import datetime, timedelta, timezone

from core.temporal.publication import (
    PublicationStatus,
    is_flag_set,
    is_published,
    publication_state,
)

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
TICK = timedelta(microseconds=1)


# ── Loose flag ───────────────────────────────────────────────

class TestIsFlagSet:
    @pytest.mark.parametrize(
        "value", [True, 1, -1, 0.5, "1", "yes", "false", "0.0", " ", [0], {"a": 1}]
    )
    def test_set(self, value):
        assert is_flag_set(value) is True

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", "0", [], {}, ()])
    def test_not_set(self, value):
        assert is_flag_set(value) is False


# ── is_published ─────────────────────────────────────────────

class TestIsPublished:
    def test_inclusive_at_publish_instant(self):
        assert is_published(True, NOW, NOW)

    def test_past_publish_instant(self):
        assert is_published(True, NOW - timedelta(hours=1), NOW)

    def test_one_tick_early(self):
        assert not is_published(True, NOW + TICK, NOW)

    def test_missing_publish_instant(self):
        assert not is_published(True, None, NOW)

    @pytest.mark.parametrize("flag", [False, None, 0, "", "0"])
    def test_flag_not_set(self, flag):
        assert not is_published(flag, NOW - timedelta(days=1), NOW)

    def test_loose_flag_counts(self):
        assert is_published(1, NOW - timedelta(days=1), NOW)
        assert is_published("on", NOW - timedelta(days=1), NOW)


# ── publication_state ────────────────────────────────────────

class TestPublicationState:
    def test_unknown_when_flag_without_instant(self):
        assert publication_state(True, None, NOW) is PublicationStatus.UNKNOWN

    def test_scheduled(self):
        assert publication_state(True, NOW + timedelta(hours=1), NOW) is PublicationStatus.SCHEDULED

    def test_live(self):
        assert publication_state(True, NOW - timedelta(hours=1), NOW) is PublicationStatus.LIVE

    def test_live_at_exact_instant(self):
        assert publication_state(True, NOW, NOW) is PublicationStatus.LIVE

    @pytest.mark.parametrize(
        "publish_at", [None, NOW - timedelta(days=1), NOW, NOW + timedelta(days=1)]
    )
    def test_draft_ignores_publish_instant(self, publish_at):
        assert publication_state(False, publish_at, NOW) is PublicationStatus.DRAFT

    def test_unknown_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="entropy.temporal"):
            state = publication_state("1", None, NOW)
        assert state is PublicationStatus.UNKNOWN
        assert "without publish instant" in caplog.text

    def test_status_values(self):
        assert [s.value for s in PublicationStatus] == [
            "draft",
            "unknown",
            "live",
            "scheduled",
        ]
