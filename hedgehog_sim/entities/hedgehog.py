"""The player-controlled hedgehog."""

from __future__ import annotations

import logging

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.enums import HedgehogState
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.entities.states import StateTraits, traits_for

logger = logging.getLogger(__name__)

MIN_ENERGY = 0


class Hedgehog:
    """Position, energy budget, score and behavioral state.

    Only the GameController mutates a hedgehog. The state is replaced
    wholesale on every transition.
    """

    __slots__ = ("pos", "energy", "score", "state", "_config")

    def __init__(self, start: Vector2, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self.pos: Vector2 = start
        self.energy: int = self._config.max_energy
        self.score: int = 0
        self.state: HedgehogState = HedgehogState.NORMAL

    # -- state queries --

    @property
    def traits(self) -> StateTraits:
        return traits_for(self.state)

    @property
    def state_name(self) -> str:
        return self.state.label

    @property
    def max_energy(self) -> int:
        return self._config.max_energy

    def is_alive(self) -> bool:
        return self.state != HedgehogState.DEAD

    def is_vulnerable(self) -> bool:
        return self.traits.vulnerable

    def can_talk(self) -> bool:
        return self.traits.can_talk

    # -- transitions --

    def _set_state(self, new_state: HedgehogState) -> None:
        logger.debug("Hedgehog %s -> %s at %s", self.state.name, new_state.name, self.pos)
        self.state = new_state

    def curl(self) -> bool:
        """Roll into a ball. Returns False outside NORMAL."""
        target = self.traits.curl_to
        if target is None:
            return False
        self._set_state(target)
        return True

    def uncurl(self) -> bool:
        """Unroll. Returns False outside CURLED."""
        target = self.traits.uncurl_to
        if target is None:
            return False
        self._set_state(target)
        return True

    def die(self) -> None:
        self._set_state(HedgehogState.DEAD)

    # -- actions --

    def move(self, dx: int, dy: int) -> bool:
        """Step by (dx, dy), paying the current state's energy cost.

        Returns True if the position changed. An unaffordable step drains
        the remaining energy and kills the hedgehog in place.
        """
        cost = self.traits.energy_cost(self._config)
        if cost == MIN_ENERGY:
            return False

        if self.energy < cost:
            self.energy = MIN_ENERGY
            self.die()
            return False

        self.pos = Vector2(self.pos.x + dx, self.pos.y + dy)
        self.consume_energy(cost)
        return True

    def consume_energy(self, amount: int) -> None:
        self.energy = max(MIN_ENERGY, self.energy - amount)
        if self.energy == MIN_ENERGY:
            logger.info("Hedgehog exhausted at %s", self.pos)
            self.die()

    def eat(self, amount: int) -> None:
        self.energy = min(self._config.max_energy, self.energy + amount)

    def add_score(self, points: int) -> None:
        self.score += points

    def __repr__(self) -> str:
        return (
            f"Hedgehog(pos={self.pos}, energy={self.energy}, "
            f"score={self.score}, state={self.state.name})"
        )
