"""
Entropy Core Time - Public API
================================
Explicit clock protocol and instant parsing.
Doctrine: NO datetime.now() in temporal decision logic.
"""

from core.time.clock import (
    Clock,
    FixedClock,
    MutableClock,
    SystemClock,
)
from core.time.errors import (
    ClockError,
    InvalidInput,
    ParseError,
)
from core.time.parsing import apply_relative, parse_instant

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "MutableClock",
    "ClockError",
    "ParseError",
    "InvalidInput",
    "parse_instant",
    "apply_relative",
]
