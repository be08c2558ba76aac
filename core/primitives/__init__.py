"""
Entropy Core Primitives - Reusable Building Blocks
====================================================
Pure Python (no Django dependency), immutable (frozen dataclasses).

Primitives:
    actor  - Authenticated member asking for a gated feature
"""

from core.primitives.actor import Actor

__all__ = [
    "Actor",
]
