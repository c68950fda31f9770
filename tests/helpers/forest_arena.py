"""ForestArena — E2E test fixture for game rules.

Describes a small forest, builds a real GameController from it, issues
commands and records every event the bus emits, for assertion.

Usage:
    arena = ForestArena(width=5, height=1)
    arena.add_food(1, 0, 20)
    arena.move("right")
    assert arena.hedgehog.score == 20
    assert arena.event_names() == ["foodCollected"]
"""

from __future__ import annotations

import sys
import os
from typing import Any, Callable

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.engine.game_controller import GameController
from hedgehog_sim.entities.hedgehog import Hedgehog
from hedgehog_sim.systems.rng import RandomSource

Event = tuple[str, dict[str, Any]]


class ForestArena:
    """E2E test fixture for controller rules.

    The controller is built lazily on first use, so all ``add_*`` calls must
    come before the first command.
    """

    def __init__(
        self,
        width: int = 10,
        height: int = 10,
        seed: int = 42,
        start: tuple[int, int] = (0, 0),
        **config_overrides,
    ):
        self.config = GameConfig(seed=seed, start_x=start[0], start_y=start[1]).with_overrides(
            **config_overrides,
        )
        self.map_data: dict[str, Any] = {
            "width": width, "height": height,
            "pits": [], "food": [], "npcs": [], "predators": [], "bushes": [],
        }
        self._controller: GameController | None = None
        self._events: list[Event] = []

    # -- Map setup --

    def add_pit(self, x: int, y: int) -> ForestArena:
        self.map_data["pits"].append({"x": x, "y": y})
        return self

    def add_food(self, x: int, y: int, value: int) -> ForestArena:
        self.map_data["food"].append({"x": x, "y": y, "value": value})
        return self

    def add_npc(
        self, name: str, x: int, y: int, npc_type: str = "honest", dialogs: list[str] | None = None,
    ) -> ForestArena:
        self.map_data["npcs"].append({
            "name": name, "type": npc_type, "x": x, "y": y, "dialogs": list(dialogs or []),
        })
        return self

    def add_predator(self, name: str, x: int, y: int, is_full: bool = False) -> ForestArena:
        self.map_data["predators"].append({"name": name, "x": x, "y": y, "isFull": is_full})
        return self

    def add_bush(self, x: int, y: int, has_fox: bool = False) -> ForestArena:
        self.map_data["bushes"].append({"x": x, "y": y, "hasFox": has_fox})
        return self

    # -- Controller access --

    @property
    def controller(self) -> GameController:
        if self._controller is None:
            rng = RandomSource(self.config.seed)
            self._controller = GameController(self.map_data, rng, self.config)
            self._controller.event_bus.on_any(self._record)
        return self._controller

    @property
    def hedgehog(self) -> Hedgehog:
        return self.controller.hedgehog

    def place_hedgehog(self, x: int, y: int) -> None:
        self.hedgehog.pos = Vector2(x, y)

    def _record(self, name: str, payload: dict[str, Any]) -> None:
        self._events.append((name, payload))

    # -- Running --

    def move(self, *directions: str) -> list[bool]:
        """Issue one move per direction; return each move's result."""
        return [self.controller.move_hedgehog(d) for d in directions]

    def run_ticks(self, n: int) -> int:
        """Run n predator ticks and return how many predator steps happened."""
        return sum(self.controller.tick() for _ in range(n))

    def run_until(self, predicate: Callable[[ForestArena], bool], max_ticks: int = 100) -> int:
        """Tick until predicate(arena) is True; return the number of ticks run."""
        for n in range(1, max_ticks + 1):
            self.controller.tick()
            if predicate(self):
                return n
        return max_ticks

    # -- Queries --

    def all_events(self) -> list[Event]:
        return list(self._events)

    def event_names(self) -> list[str]:
        return [name for name, _ in self._events]

    def events_named(self, name: str) -> list[dict[str, Any]]:
        return [payload for n, payload in self._events if n == name]

    def clear_events(self) -> None:
        self._events.clear()
