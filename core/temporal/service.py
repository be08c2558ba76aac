"""
Entropy Core Temporal - Event Temporal State Service
======================================================
Centralized temporal decisions for events.

Holds one injected Clock and nothing else. Every method is a
pure function of (event fields, clock.now()); windows are rebuilt
from the event on every call and never cached.

Safe to share across request threads when its clock is safe for
concurrent reads (SystemClock, FixedClock). MutableClock is not.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from core.primitives.actor import Actor
from core.temporal import phase as phase_rules
from core.temporal import publication as publication_rules
from core.temporal.context import EventTemporalContext
from core.temporal.phase import Phase
from core.temporal.publication import PublicationStatus
from core.temporal.window import ArtistSignupWindow, TicketPresaleWindow
from core.time.clock import Clock


class EventTemporalStateService:
    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    @property
    def clock(self) -> Clock:
        return self._clock

    # ── Publication ───────────────────────────────────────────

    def is_published(self, event: EventTemporalContext) -> bool:
        return publication_rules.is_published(
            event.published_flag, event.publish_at, self._clock.now()
        )

    def publication_state(self, event: EventTemporalContext) -> PublicationStatus:
        return publication_rules.publication_state(
            event.published_flag, event.publish_at, self._clock.now()
        )

    def unpublish_at(self) -> Optional[datetime]:
        """No unpublish-after-date rule exists; always None."""
        return None

    def public_events(
        self,
        events: Iterable[EventTemporalContext],
        category: Optional[str] = None,
        exclude_category: Optional[str] = None,
    ) -> list[EventTemporalContext]:
        """
        Published events, newest start first.

        category / exclude_category compare case-insensitively.
        """
        selected = []
        for event in events:
            event_category = (event.category or "").lower()
            if category is not None and event_category != category.lower():
                continue
            if (
                exclude_category is not None
                and event_category == exclude_category.lower()
            ):
                continue
            if self.is_published(event):
                selected.append(event)
        return sorted(selected, key=lambda e: e.start, reverse=True)

    # ── Phase ─────────────────────────────────────────────────

    def get_phase(self, event: EventTemporalContext) -> Phase:
        return phase_rules.compute_phase(event.start, event.end, self._clock.now())

    def is_in_past(self, event: EventTemporalContext) -> bool:
        return self.get_phase(event) is Phase.AFTER

    def is_datetime_in_past(self, instant: datetime) -> bool:
        """A bare instant is past from the moment it is reached."""
        return phase_rules.is_in_past(instant, None, self._clock.now())

    def badge_key(self, event: EventTemporalContext) -> str:
        return phase_rules.badge_key(event.category, self.get_phase(event))

    # ── Artist signup ─────────────────────────────────────────

    def signup_window(self, event: EventTemporalContext) -> ArtistSignupWindow:
        return ArtistSignupWindow(
            enabled=bool(event.artist_signup_enabled),
            start=event.artist_signup_start,
            end=event.artist_signup_end,
            members_only=bool(event.artist_signup_members_only),
            info_primary=event.artist_signup_info_fi,
            info_secondary=event.artist_signup_info_en,
        )

    def is_signup_open(self, event: EventTemporalContext) -> bool:
        """A past event never has open signups, whatever its window says."""
        window = self.signup_window(event)

        if self.is_in_past(event):
            return False

        return window.is_open(self._clock)

    def can_show_signup_link(
        self, event: EventTemporalContext, actor: Optional[Actor]
    ) -> bool:
        window = self.signup_window(event)

        if not window.is_open(self._clock):
            return False

        if self.is_in_past(event):
            return False

        return window.can_member_access(actor)

    def artist_signup_info(
        self, event: EventTemporalContext, locale: str
    ) -> Optional[str]:
        return self.signup_window(event).get_info(locale)

    # ── Ticket presale ────────────────────────────────────────

    def presale_window(self, event: EventTemporalContext) -> TicketPresaleWindow:
        return TicketPresaleWindow(
            enabled=bool(event.tickets_enabled),
            start=event.ticket_presale_start,
            end=event.ticket_presale_end,
            info_primary=event.ticket_info_fi,
            info_secondary=event.ticket_info_en,
        )

    def is_presale_open(self, event: EventTemporalContext) -> bool:
        """Not gated by phase: presale may stay open for a past event."""
        return self.presale_window(event).is_open(self._clock)

    def ticket_info(self, event: EventTemporalContext, locale: str) -> Optional[str]:
        return self.presale_window(event).get_info(locale)
