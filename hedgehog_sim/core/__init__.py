"""Core data models and world representation."""

from hedgehog_sim.core.enums import AdviceKind, HashOffset, HedgehogState
from hedgehog_sim.core.models import Bush, Vector2
from hedgehog_sim.core.snapshot import GameSnapshot, WorldView
from hedgehog_sim.core.maps import DEFAULT_MAP, default_map

__all__ = [
    "AdviceKind",
    "Bush",
    "DEFAULT_MAP",
    "GameSnapshot",
    "HashOffset",
    "HedgehogState",
    "Vector2",
    "WorldView",
    "default_map",
]
