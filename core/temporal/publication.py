"""
Entropy Core Temporal - Publication Decider
=============================================
Answers "is this event visible to the public right now?".

Rules:
- published flag must be set (loose legacy truthiness, see is_flag_set)
- publish instant must exist
- publish instant <= now (inclusive: live at the exact stored instant)

UNKNOWN is a data-anomaly sentinel (flag set, no publish instant).
It is reported, never raised; callers decide how to surface it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Optional

logger = logging.getLogger("entropy.temporal")


class PublicationStatus(Enum):
    DRAFT = "draft"
    UNKNOWN = "unknown"
    LIVE = "live"
    SCHEDULED = "scheduled"


_UNSET_STRINGS = frozenset({"", "0"})


def is_flag_set(value: object) -> bool:
    """
    Loose truthiness of the legacy published flag.

    Not set: None, False, 0, 0.0, "", "0", empty containers.
    Set: everything else, including the strings "false" and "0.0".
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value not in _UNSET_STRINGS
    return bool(value)


def is_published(
    flag: object, publish_at: Optional[datetime], now: datetime
) -> bool:
    if publish_at is None:
        return False
    if not is_flag_set(flag):
        return False
    return publish_at <= now


def publication_state(
    flag: object, publish_at: Optional[datetime], now: datetime
) -> PublicationStatus:
    if not is_flag_set(flag):
        return PublicationStatus.DRAFT

    if publish_at is None:
        logger.debug("Published flag set without publish instant")
        return PublicationStatus.UNKNOWN

    if publish_at <= now:
        return PublicationStatus.LIVE
    return PublicationStatus.SCHEDULED
