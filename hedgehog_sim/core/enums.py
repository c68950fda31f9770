"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class HedgehogState(IntEnum):
    """Behavioral states of the hedgehog."""

    NORMAL = 0
    CURLED = 1
    DEAD = 2        # Terminal until restart

    @property
    def label(self) -> str:
        return self.name.capitalize()


@unique
class AdviceKind(IntEnum):
    """NPC advice strategies."""

    HONEST = 0
    DECEPTIVE = 1


@unique
class HashOffset(IntEnum):
    """Offsets added to an NPC personality seed, one per decision."""

    PREDATOR_INDEX = 1
    SHOULD_WARN = 2
    SHOULD_LIE = 3
    WARN_DECEPTIVE = 10
    WARN_HONEST = 11
    SAFE_DECEPTIVE = 12
    SAFE_HONEST = 13
    NO_THREAT = 14
