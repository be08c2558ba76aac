"""
Entropy Django Adapter Wiring
===============================
Selects the process clock from Django settings and hands out the
shared EventTemporalStateService.

This module is adapter-only glue:
- no temporal rule lives here
- the clock is chosen once, then injected
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from core.temporal.service import EventTemporalStateService
from core.time.clock import Clock, FixedClock, MutableClock, SystemClock

logger = logging.getLogger("entropy.wiring")

CLOCK_SYSTEM = "system"
CLOCK_FIXED = "fixed"
CLOCK_MUTABLE = "mutable"

VALID_CLOCK_BACKENDS = frozenset({CLOCK_SYSTEM, CLOCK_FIXED, CLOCK_MUTABLE})

_SERVICE_LOCK = threading.Lock()
_SERVICE: EventTemporalStateService | None = None


def build_clock(backend: str, instant: Optional[str] = None) -> Clock:
    """
    Map a configured backend name to a clock.

    Raises:
        ImproperlyConfigured: unknown backend, or mutable clock outside DEBUG.
        ParseError: instant string is not parseable.
    """
    name = (backend or "").strip().lower()
    if name not in VALID_CLOCK_BACKENDS:
        raise ImproperlyConfigured(
            f"TEMPORAL_CLOCK '{backend}' not valid. "
            f"Must be one of: {sorted(VALID_CLOCK_BACKENDS)}"
        )

    if name == CLOCK_SYSTEM:
        return SystemClock()
    if name == CLOCK_FIXED:
        return FixedClock(instant)

    if not settings.DEBUG:
        raise ImproperlyConfigured(
            "TEMPORAL_CLOCK 'mutable' is a test-only clock and "
            "requires DEBUG = True."
        )
    return MutableClock(instant)


def _create_service() -> EventTemporalStateService:
    backend = getattr(settings, "TEMPORAL_CLOCK", CLOCK_SYSTEM)
    instant = getattr(settings, "TEMPORAL_CLOCK_INSTANT", None)
    clock = build_clock(backend, instant)
    logger.info(f"Temporal clock selected: {clock!r} (backend: {backend})")
    return EventTemporalStateService(clock)


def get_temporal_service() -> EventTemporalStateService:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _SERVICE
    with _SERVICE_LOCK:
        if _SERVICE is None:
            _SERVICE = _create_service()
        return _SERVICE


def reset_temporal_service() -> None:
    """Drop the singleton so the next call re-reads settings (tests only)."""
    global _SERVICE
    with _SERVICE_LOCK:
        _SERVICE = None
