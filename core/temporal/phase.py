"""
Entropy Core Temporal - Event Phase
=====================================
Classifies an event as before / now / after relative to "now".

The two event shapes follow different rules:
- interval event (has an end): NOW on [start, end + 1s], the
  tolerance applies to the upper bound only
- instantaneous event (no end): there is no NOW phase at all,
  the event is AFTER from its start instant onward

Comparison is at whole-second granularity.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional


class Phase(Enum):
    BEFORE = "before"
    NOW = "now"
    AFTER = "after"


END_TOLERANCE = timedelta(seconds=1)

ANNOUNCEMENT_CATEGORY = "announcement"
ANNOUNCEMENT_BADGE = "announcement-badge"

_BADGE_BY_PHASE = {
    Phase.NOW: "live-badge",
    Phase.AFTER: "past-badge",
}
_DEFAULT_BADGE = "future-badge"


def _to_second(instant: datetime) -> datetime:
    return instant.replace(microsecond=0)


def compute_phase(
    start: datetime, end: Optional[datetime], now: datetime
) -> Phase:
    now_s = _to_second(now)
    start_s = _to_second(start)

    if end is not None:
        upper = _to_second(end) + END_TOLERANCE
        if start_s <= now_s <= upper:
            return Phase.NOW
        if now_s > upper:
            return Phase.AFTER
        return Phase.BEFORE

    if now_s < start_s:
        return Phase.BEFORE
    return Phase.AFTER


def is_in_past(start: datetime, end: Optional[datetime], now: datetime) -> bool:
    return compute_phase(start, end, now) is Phase.AFTER


def badge_key(category: str, phase: Phase) -> str:
    """Translation key for the listing badge; announcements ignore phase."""
    if category == ANNOUNCEMENT_CATEGORY:
        return ANNOUNCEMENT_BADGE
    return _BADGE_BY_PHASE.get(phase, _DEFAULT_BADGE)
