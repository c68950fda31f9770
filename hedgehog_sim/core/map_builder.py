"""WorldBuilder — fluent API for assembling a World from a map description.

Usage::

    world = (
        WorldBuilder(config, rng)
        .set_dimensions(12, 3)
        .add_pit(4, 1)
        .add_food(2, 0, 20)
        .add_npc("Owl", "honest", 5, 2, ["Hoo!"])
        .add_predator("Wolf", 9, 1)
        .add_bush(7, 0, has_fox=True)
        .build()
    )

or from the declarative map description::

    world = WorldBuilder(config, rng).from_dict(map_data).build()

Map descriptions are permissive: missing arrays are empty and missing or
non-positive dimensions fall back to 10 × 10.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.core.world import World
from hedgehog_sim.entities.npc import NPC, AdviceStrategy
from hedgehog_sim.entities.predator import Predator
from hedgehog_sim.systems.rng import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10

NPC_TYPE_HONEST = "honest"
NPC_TYPE_DECEPTIVE = "deceptive"


def _dimension(value: Any, default: int) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        return default
    return size if size > 0 else default


class WorldBuilder:
    """Fluent builder for World construction.

    All ``add_*`` methods return ``self`` for chaining. ``build()`` may be
    called repeatedly; each call produces a fresh World.
    """

    __slots__ = (
        "_config", "_rng",
        "_width", "_height",
        "_pits", "_food", "_npcs", "_predators", "_bushes",
    )

    def __init__(self, config: GameConfig | None = None, rng: RandomSource | None = None) -> None:
        self._config = config or GameConfig()
        self._rng = rng

        self._width: int = DEFAULT_WIDTH
        self._height: int = DEFAULT_HEIGHT
        self._pits: list[dict[str, Any]] = []
        self._food: list[dict[str, Any]] = []
        self._npcs: list[dict[str, Any]] = []
        self._predators: list[dict[str, Any]] = []
        self._bushes: list[dict[str, Any]] = []

    # -------------------------------------------------------------------
    # Explicit accumulation
    # -------------------------------------------------------------------

    def set_dimensions(self, width: int, height: int) -> WorldBuilder:
        if width <= 0 or height <= 0:
            raise ValueError(f"World dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        return self

    def add_pit(self, x: int, y: int) -> WorldBuilder:
        self._pits.append({"x": x, "y": y})
        return self

    def add_food(self, x: int, y: int, value: int) -> WorldBuilder:
        self._food.append({"x": x, "y": y, "value": value})
        return self

    def add_npc(
        self, name: str, npc_type: str, x: int, y: int, dialogs: list[str] | None = None,
    ) -> WorldBuilder:
        self._npcs.append({
            "name": name, "type": npc_type, "x": x, "y": y,
            "dialogs": list(dialogs or []),
        })
        return self

    def add_predator(self, name: str, x: int, y: int, is_full: bool = False) -> WorldBuilder:
        self._predators.append({"name": name, "x": x, "y": y, "isFull": is_full})
        return self

    def add_bush(self, x: int, y: int, has_fox: bool = False) -> WorldBuilder:
        self._bushes.append({"x": x, "y": y, "hasFox": has_fox})
        return self

    # -------------------------------------------------------------------
    # Declarative map description
    # -------------------------------------------------------------------

    def from_dict(self, data: Mapping[str, Any] | None) -> WorldBuilder:
        """Replace the accumulated descriptors with those in *data*."""
        data = data or {}
        self._width = _dimension(data.get("width"), DEFAULT_WIDTH)
        self._height = _dimension(data.get("height"), DEFAULT_HEIGHT)
        self._pits = list(data.get("pits") or [])
        self._food = list(data.get("food") or [])
        self._npcs = list(data.get("npcs") or [])
        self._predators = list(data.get("predators") or [])
        self._bushes = list(data.get("bushes") or [])
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the accumulated map description."""
        return {
            "width": self._width,
            "height": self._height,
            "pits": [dict(p) for p in self._pits],
            "food": [dict(f) for f in self._food],
            "npcs": [dict(n) for n in self._npcs],
            "predators": [dict(p) for p in self._predators],
            "bushes": [dict(b) for b in self._bushes],
        }

    # -------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------

    def create_strategy(self, npc_type: str | None) -> AdviceStrategy:
        return AdviceStrategy.from_tag(npc_type, honesty_rate=self._config.npc_honesty_rate)

    def _predator_rng(self, index: int) -> RandomSource | None:
        if self._rng is None:
            return None
        return self._rng.spawn(index)

    def build(self) -> World:
        cfg = self._config
        world = World(self._width, self._height, cfg.fox_marker)

        for pit in self._pits:
            world.add_pit(pit["x"], pit["y"])

        for food in self._food:
            world.add_food(food["x"], food["y"], food.get("value", 0))

        for npc_data in self._npcs:
            npc = NPC(
                npc_data.get("name", "Stranger"),
                self.create_strategy(npc_data.get("type")),
                Vector2(npc_data["x"], npc_data["y"]),
                sense_radius=cfg.npc_sense_radius,
            )
            for line in npc_data.get("dialogs") or []:
                npc.add_dialog(line)
            world.add_npc(npc)

        for index, pred_data in enumerate(self._predators):
            world.add_predator(Predator(
                pred_data.get("name", "Predator"),
                Vector2(pred_data["x"], pred_data["y"]),
                is_full=bool(pred_data.get("isFull", False)),
                config=cfg,
                rng=self._predator_rng(index),
            ))

        for bush in self._bushes:
            world.add_bush(bush["x"], bush["y"], bool(bush.get("hasFox", False)))

        logger.debug("Built %r", world)
        return world
