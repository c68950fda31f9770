"""Predators — scripted horizontal patrols leashed to a spawn anchor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.systems.rng import RandomSource

if TYPE_CHECKING:
    from hedgehog_sim.core.world import World
    from hedgehog_sim.entities.hedgehog import Hedgehog

logger = logging.getLogger(__name__)


class Predator:
    """A patrolling predator.

    Predators never pursue the hedgehog. Every ``move_interval``-th call to
    ``move`` they try one horizontal step, flipping their direction bias once
    they reach the leash limit around their anchor. A full predator never
    attacks.
    """

    __slots__ = (
        "name", "pos", "anchor", "is_full", "direction",
        "move_counter", "leash_radius", "move_interval", "_rng",
    )

    def __init__(
        self,
        name: str,
        pos: Vector2,
        is_full: bool = False,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.name = name
        self.pos = pos
        self.anchor = pos
        self.is_full = is_full
        self.leash_radius = cfg.predator_leash_radius
        self.move_interval = cfg.predator_move_interval
        self.move_counter = 0
        # Unseeded predators patrol from a position-derived seed
        self._rng = rng or RandomSource(pos.x * 1000 + pos.y)
        self.direction = 1 if self._rng.next() > cfg.predator_initial_direction_chance else -1

    def distance_from_anchor(self, pos: Vector2 | None = None) -> int:
        return (pos or self.pos).manhattan(self.anchor)

    def at_leash_limit(self) -> bool:
        return self.distance_from_anchor() >= self.leash_radius

    def move(self, world: World) -> bool:
        """Advance one tick. Returns True if the predator changed cell."""
        self.move_counter += 1
        if self.move_counter % self.move_interval != 0:
            return False

        if self.at_leash_limit():
            self.direction = -self.direction

        step_x = self._rng.pick((self.direction, -self.direction))
        target = Vector2(self.pos.x + step_x, self.pos.y)

        if not world.is_valid_position(target.x, target.y):
            return False
        if self.distance_from_anchor(target) > self.leash_radius:
            return False

        logger.debug("%s patrols %s -> %s", self.name, self.pos, target)
        self.pos = target
        return True

    def attack(self, hedgehog: Hedgehog) -> bool:
        """Kill a vulnerable hedgehog. Returns True only if it died."""
        if self.is_full:
            return False
        if hedgehog.is_vulnerable():
            hedgehog.die()
            return True
        return False

    def __repr__(self) -> str:
        return f"Predator({self.name!r}, pos={self.pos}, full={self.is_full})"
