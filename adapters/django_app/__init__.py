"""
Entropy Django adapter.
Process-level clock selection and temporal service wiring.
"""

from adapters.django_app.wiring import (
    CLOCK_FIXED,
    CLOCK_MUTABLE,
    CLOCK_SYSTEM,
    build_clock,
    get_temporal_service,
    reset_temporal_service,
)

__all__ = [
    "CLOCK_SYSTEM",
    "CLOCK_FIXED",
    "CLOCK_MUTABLE",
    "build_clock",
    "get_temporal_service",
    "reset_temporal_service",
]
