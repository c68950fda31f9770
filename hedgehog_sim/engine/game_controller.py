"""GameController — turn resolution for one hedgehog session.

Turn cycle for an accepted move:
  1. Throttle — while curled only every Nth move call advances
  2. Step — the hedgehog's state machine pays energy and moves
  3. Clock — one unit of time is spent (timeOut at zero)
  4. Hazards — predator, fox bush, food, pit; lethal results short-circuit

Every observable outcome is published on the EventBus. Presentation code
subscribes to events and reads ``get_game_state()``; it never touches the
rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.enums import HedgehogState
from hedgehog_sim.core.map_builder import WorldBuilder
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.core.snapshot import GameSnapshot, WorldView
from hedgehog_sim.core.world import World
from hedgehog_sim.engine.event_bus import EventBus
from hedgehog_sim.entities.hedgehog import Hedgehog
from hedgehog_sim.entities.npc import PredatorWarning
from hedgehog_sim.entities.predator import Predator
from hedgehog_sim.systems.rng import RandomSource
from hedgehog_sim.utils.directions import get_delta

logger = logging.getLogger(__name__)

FOOD_SEARCH_RADIUS = 1


@dataclass(frozen=True, slots=True)
class TalkResult:
    """Outcome of talking to an NPC."""

    npc: str
    dialog: str
    advice: str
    warning: PredatorWarning | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "npc": self.npc,
            "dialog": self.dialog,
            "advice": self.advice,
            "warning": self.warning.to_dict() if self.warning else None,
        }


@dataclass(frozen=True, slots=True)
class Surroundings:
    """What is within reach of the hedgehog right now."""

    npc_nearby: str | None
    food_nearby: bool
    predator_here: str | None
    bush_here: bool
    bush_has_fox: bool


class GameController:
    """Owns one World and one Hedgehog and resolves every player command."""

    __slots__ = (
        "_config",
        "_map_data",
        "rng",
        "event_bus",
        "world",
        "hedgehog",
        "max_time",
        "time_remaining",
        "game_over_flag",
        "won",
        "curled_move_counter",
        "lives",
    )

    def __init__(
        self,
        map_data: Mapping[str, Any] | None = None,
        rng: RandomSource | None = None,
        config: GameConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self.rng = rng or RandomSource(self._config.seed)
        self.event_bus = event_bus or EventBus()
        self.max_time = self._config.max_time
        self.lives = self._config.default_lives
        self._new_session(map_data)

    @property
    def config(self) -> GameConfig:
        return self._config

    def _new_session(self, map_data: Mapping[str, Any] | None) -> None:
        cfg = self._config
        self._map_data = map_data
        self.world: World = WorldBuilder(cfg, self.rng).from_dict(map_data).build()
        self.hedgehog = Hedgehog(Vector2(cfg.start_x, cfg.start_y), cfg)
        self.time_remaining = self.max_time
        self.game_over_flag = False
        self.won = False
        self.curled_move_counter = 0

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------

    def _position_payload(self, **extra: Any) -> dict[str, Any]:
        payload = dict(extra)
        payload["positionX"] = self.hedgehog.pos.x
        payload["positionY"] = self.hedgehog.pos.y
        return payload

    def _decrease_time(self) -> None:
        self.time_remaining -= 1
        if self.time_remaining <= 0:
            self.game_over_flag = True
            logger.info("Time is up (score=%d)", self.hedgehog.score)
            self.event_bus.emit("timeOut", {})

    def _check_win(self) -> None:
        if self.game_over_flag or self.hedgehog.score < self._config.win_score:
            return
        self.game_over_flag = True
        self.won = True
        logger.info("Hedgehog won with score %d", self.hedgehog.score)
        self.event_bus.emit("gameWon", {"score": self.hedgehog.score})

    def _collect_at(self, cell: Vector2) -> int:
        value = self.world.collect_food(cell.x, cell.y)
        self.hedgehog.eat(value)
        self.hedgehog.add_score(value)
        self.event_bus.emit("foodCollected", {
            "value": value,
            "positionX": cell.x,
            "positionY": cell.y,
        })
        self._check_win()
        return value

    # -------------------------------------------------------------------
    # Movement & hazards
    # -------------------------------------------------------------------

    def move_hedgehog(self, direction: str) -> bool:
        """Try to move one cell. Returns True if the hedgehog advanced."""
        if self.is_game_over():
            return False

        delta = get_delta(direction)
        if delta is None:
            self.event_bus.emit("invalidMove", {"direction": direction})
            return False

        target = self.hedgehog.pos + delta
        if not self.world.is_valid_position(target.x, target.y):
            self.event_bus.emit("invalidMove", {"direction": direction})
            return False

        if self.hedgehog.state == HedgehogState.CURLED:
            self.curled_move_counter += 1
            if self.curled_move_counter % self._config.curled_move_interval != 0:
                logger.debug("Curled move %d held back", self.curled_move_counter)
                return False
        self.curled_move_counter = 0

        moved = self.hedgehog.move(delta.x, delta.y)
        self._decrease_time()

        if self.is_game_over():
            return moved
        if self._check_danger():
            return moved
        self._check_landing()
        return moved

    def _check_danger(self) -> bool:
        """Resolve predator and fox-bush hazards. True if the hedgehog died."""
        pos = self.hedgehog.pos

        predator = self.world.get_predator_at(pos.x, pos.y)
        if predator is not None and predator.attack(self.hedgehog):
            logger.info("%s caught the hedgehog at %s", predator.name, pos)
            self.event_bus.emit("predatorDeath", self._position_payload(predator=predator.name))
            return True

        if self.world.check_bush_trap(pos.x, pos.y):
            if self.hedgehog.is_vulnerable():
                self.hedgehog.die()
                logger.info("Fox bush trap at %s", pos)
                self.event_bus.emit("bushTrapDeath", self._position_payload())
                return True
            self.event_bus.emit("bushSurvived", self._position_payload())
        return False

    def _check_landing(self) -> None:
        pos = self.hedgehog.pos

        if self.hedgehog.can_talk() and self.world.is_food_reachable(pos.x, pos.y):
            self._collect_at(pos)
            if self.is_game_over():
                return

        if self.world.has_pit(pos.x, pos.y):
            self._handle_pit()

    def _handle_pit(self) -> None:
        if self.rng.chance(self._config.pit_survival_chance):
            self.event_bus.emit("pitSurvived", self._position_payload())
            return
        self.hedgehog.die()
        logger.info("Hedgehog fell into the pit at %s", self.hedgehog.pos)
        self.event_bus.emit("pitDeath", self._position_payload())

    # -------------------------------------------------------------------
    # Predator ticks
    # -------------------------------------------------------------------

    def tick(self) -> int:
        """Advance every predator once. Returns how many changed cell."""
        if self.is_game_over():
            return 0

        moved = 0
        for predator in self.world.predators:
            if not predator.move(self.world):
                continue
            moved += 1
            if predator.pos == self.hedgehog.pos:
                self._resolve_encounter(predator)
                if self.is_game_over():
                    break
        return moved

    def _resolve_encounter(self, predator: Predator) -> None:
        if predator.attack(self.hedgehog):
            logger.info("%s pounced on the hedgehog at %s", predator.name, self.hedgehog.pos)
            self.event_bus.emit("predatorDeath", self._position_payload(predator=predator.name))
        else:
            self.event_bus.emit("predatorSurvived", self._position_payload(predator=predator.name))

    # -------------------------------------------------------------------
    # Other commands
    # -------------------------------------------------------------------

    def collect_food(self) -> bool:
        """Eat the first reachable food within radius 1."""
        if self.is_game_over() or not self.hedgehog.can_talk():
            return False
        pos = self.hedgehog.pos
        cell = self.world.get_food_in_radius(pos.x, pos.y, FOOD_SEARCH_RADIUS)
        if cell is None:
            return False
        self._collect_at(cell)
        return True

    def talk_to_npc(self) -> TalkResult | None:
        if self.is_game_over() or not self.hedgehog.can_talk():
            return None

        pos = self.hedgehog.pos
        npc = self.world.get_npc_at(pos.x, pos.y)
        if npc is None:
            return None

        dialog = npc.get_dialog(self.rng)
        advice = npc.give_advice(self._config.npc_advice_direction, self.rng)
        warning = npc.get_predator_warning_message(self.world)

        result = TalkResult(
            npc=npc.name,
            dialog=warning.message if warning else dialog,
            advice=advice,
            warning=warning,
        )
        self.event_bus.emit("npcTalk", result.to_dict())
        return result

    def curl_hedgehog(self) -> bool:
        if self.is_game_over():
            return False
        changed = self.hedgehog.curl()
        self.event_bus.emit("hedgehogCurl", {})
        return changed

    def uncurl_hedgehog(self) -> bool:
        if self.is_game_over():
            return False
        changed = self.hedgehog.uncurl()
        self.event_bus.emit("hedgehogUncurl", {})
        return changed

    def describe_surroundings(self) -> Surroundings:
        pos = self.hedgehog.pos
        npc = self.world.get_npc_at(pos.x, pos.y)
        predator = self.world.get_predator_at(pos.x, pos.y)
        return Surroundings(
            npc_nearby=npc.name if npc else None,
            food_nearby=self.world.get_food_in_radius(pos.x, pos.y, FOOD_SEARCH_RADIUS) is not None,
            predator_here=predator.name if predator else None,
            bush_here=self.world.has_bush(pos.x, pos.y),
            bush_has_fox=self.world.check_bush_trap(pos.x, pos.y),
        )

    # -------------------------------------------------------------------
    # Session state
    # -------------------------------------------------------------------

    def is_game_over(self) -> bool:
        return self.game_over_flag or not self.hedgehog.is_alive()

    def get_game_state(self) -> GameSnapshot:
        return GameSnapshot.from_controller(self)

    def world_view(self) -> WorldView:
        return WorldView.from_world(self.world)

    def restart(self, map_data: Mapping[str, Any] | None = None) -> None:
        """Rebuild the world and hedgehog. Lives are left to the driver.

        Without *map_data* the previous map description is reused.
        """
        self._new_session(map_data if map_data is not None else self._map_data)
        logger.info("Session restarted (%r)", self.world)
        self.event_bus.emit("gameRestart", {})
