"""
Entropy Core Temporal - Public API
====================================
Clock-driven decisions about events: publication, lifecycle
phase, artist signup and ticket presale windows.
"""

from core.temporal.context import EventTemporalContext, display_until
from core.temporal.phase import Phase, badge_key, compute_phase, is_in_past
from core.temporal.publication import (
    PublicationStatus,
    is_flag_set,
    is_published,
    publication_state,
)
from core.temporal.service import EventTemporalStateService
from core.temporal.signups import ArtistSignupSyncSelector, SignupRecord
from core.temporal.window import (
    AccessWindow,
    ArtistSignupWindow,
    TicketPresaleWindow,
)

__all__ = [
    "EventTemporalContext",
    "display_until",
    "Phase",
    "compute_phase",
    "is_in_past",
    "badge_key",
    "PublicationStatus",
    "is_flag_set",
    "is_published",
    "publication_state",
    "AccessWindow",
    "ArtistSignupWindow",
    "TicketPresaleWindow",
    "EventTemporalStateService",
    "ArtistSignupSyncSelector",
    "SignupRecord",
]
