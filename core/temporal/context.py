"""
Entropy Core Temporal - Event Context
=======================================
Read-only projection of a caller-owned event.

The temporal service only ever reads these attributes, so any
object exposing them (an ORM row, a form snapshot) can be passed
in place of EventTemporalContext.

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

MEETING_CATEGORY = "meeting"
MEETING_DURATION = timedelta(hours=2)
DEFAULT_DURATION = timedelta(hours=8)


@dataclass(frozen=True)
class EventTemporalContext:
    """
    Temporal fields of an event.

    Fields:
        start:           event start instant (required)
        end:             explicit "until" instant, None for instantaneous events
        published_flag:  legacy loosely-boolean publish flag
        publish_at:      instant from which the event is public
        category:        event type, e.g. "event", "meeting", "announcement"
    """

    start: datetime
    end: Optional[datetime] = None
    published_flag: object = False
    publish_at: Optional[datetime] = None
    category: str = "event"

    # Artist signup
    artist_signup_enabled: bool = False
    artist_signup_start: Optional[datetime] = None
    artist_signup_end: Optional[datetime] = None
    artist_signup_members_only: bool = False
    artist_signup_info_fi: Optional[str] = None
    artist_signup_info_en: Optional[str] = None

    # Ticket presale
    tickets_enabled: bool = False
    ticket_presale_start: Optional[datetime] = None
    ticket_presale_end: Optional[datetime] = None
    ticket_info_fi: Optional[str] = None
    ticket_info_en: Optional[str] = None


def display_until(event: EventTemporalContext) -> datetime:
    """
    End instant for display (calendar entries, "until" labels).

    Falls back to a nominal duration when no explicit end is stored.
    Phase computation never uses this value.
    """
    if event.end is not None:
        return event.end
    if event.category == MEETING_CATEGORY:
        return event.start + MEETING_DURATION
    return event.start + DEFAULT_DURATION
