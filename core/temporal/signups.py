"""
Entropy Core Temporal - Active Artist Signups
===============================================
Selects the artist signups that are still "active": the ones whose
performance slot has not started yet. Profile edits are synced only
to active signups.

A slot start time wins when set; otherwise the event's own phase
decides. Signups detached from an event are never active.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from core.temporal.context import EventTemporalContext
from core.temporal.service import EventTemporalStateService


@dataclass(frozen=True)
class SignupRecord:
    """An artist's signup on an event, with an optional slot start."""

    event: Optional[EventTemporalContext]
    start_time: Optional[datetime] = None
    artist_name: str = ""


class ArtistSignupSyncSelector:
    def __init__(self, temporal_service: EventTemporalStateService) -> None:
        self._temporal = temporal_service

    def is_active(self, signup: SignupRecord) -> bool:
        if signup.event is None:
            return False
        if signup.start_time is not None:
            return not self._temporal.is_datetime_in_past(signup.start_time)
        return not self._temporal.is_in_past(signup.event)

    def find_active_signups(
        self, signups: Iterable[SignupRecord]
    ) -> list[SignupRecord]:
        """Input order is preserved."""
        return [signup for signup in signups if self.is_active(signup)]
