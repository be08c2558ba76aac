"""
Entropy Core Temporal - Access Windows
========================================
A flag-gated, optionally members-only closed interval [start, end]
with bilingual informational text.

Invariant: a window missing either bound is permanently closed,
whatever its enabled flag says.

Time (is_open) and access (can_member_access) are orthogonal.
Callers combine them; a window never looks at event phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.primitives.actor import Actor
from core.time.clock import Clock

SECONDARY_LOCALE = "en"


# ══════════════════════════════════════════════════════════════
# ACCESS WINDOW
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AccessWindow:
    """
    Closed interval [start, end] gated by an enabled flag.

    Fields:
        enabled:         master switch, closes the window and denies access
        start, end:      inclusive bounds, None means "not configured"
        members_only:    require an authenticated actor
        info_primary:    Finnish copy, the unconditional fallback
        info_secondary:  English copy
    """

    enabled: bool
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    members_only: bool = False
    info_primary: Optional[str] = None
    info_secondary: Optional[str] = None

    def is_open(self, clock: Clock) -> bool:
        """Both bounds inclusive."""
        if not self.enabled:
            return False
        if self.start is None or self.end is None:
            return False
        return self.start <= clock.now() <= self.end

    def can_member_access(self, actor: Optional[Actor]) -> bool:
        """Only the presence of the actor matters, none of its fields."""
        if not self.enabled:
            return False
        if self.members_only:
            return actor is not None
        return True

    def get_info(self, locale: str) -> Optional[str]:
        if locale == SECONDARY_LOCALE and self.info_secondary is not None:
            return self.info_secondary
        return self.info_primary


# ══════════════════════════════════════════════════════════════
# CONCRETE WINDOWS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ArtistSignupWindow(AccessWindow):
    """Interval during which performers may sign up for an event."""

    def is_enabled(self) -> bool:
        return self.enabled

    def requires_authentication(self) -> bool:
        return self.members_only


@dataclass(frozen=True)
class TicketPresaleWindow(AccessWindow):
    """Interval during which tickets may be bought ahead of an event."""
