"""Symbolic direction names mapped to grid deltas.

Player commands use ``up/down/left/right``; NPC advice uses the compass
names. Both vocabularies resolve to the same deltas (y grows downward).
"""

from __future__ import annotations

from hedgehog_sim.core.models import Vector2

DIRECTION_DELTAS: dict[str, Vector2] = {
    "up": Vector2(0, -1),
    "down": Vector2(0, 1),
    "left": Vector2(-1, 0),
    "right": Vector2(1, 0),
    "north": Vector2(0, -1),
    "south": Vector2(0, 1),
    "west": Vector2(-1, 0),
    "east": Vector2(1, 0),
}

# Directions an NPC may name when giving advice
DIRECTIONS: tuple[str, ...] = ("north", "south", "east", "west")

MOVE_DIRECTIONS: tuple[str, ...] = ("up", "down", "left", "right")


def get_delta(direction: str, default: Vector2 | None = None) -> Vector2 | None:
    """Return the delta for *direction*, or *default* if it is unknown."""
    if not isinstance(direction, str):
        return default
    return DIRECTION_DELTAS.get(direction.lower(), default)


def is_direction(direction: str) -> bool:
    return get_delta(direction) is not None
