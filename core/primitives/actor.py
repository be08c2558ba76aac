"""
Entropy Actor Primitive - Who Is Looking
==========================================
The Actor Primitive captures WHO is asking for a gated feature
(artist signup link, members-only info).

Anonymous visitors are represented by the absence of an actor
(None), never by a special Actor value. Temporal access checks
look only at presence; no field of the actor is read.

This file contains NO persistence logic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """
    An authenticated club member.

    Fields:
        actor_id:       Member identifier
        display_name:   Human-readable name
    """
    actor_id: str
    display_name: str = ""

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")

    @classmethod
    def member(cls, member_id: str, display_name: str = "") -> Actor:
        """Factory for member actors."""
        return cls(actor_id=member_id, display_name=display_name)
