"""Autoplayer — a scripted player for the headless CLI and soak tests.

Priority order each turn:
  1. While curled, crawl a couple of moves and then uncurl
  2. Curl if the last NPC told it to
  3. Collect food within reach
  4. Talk to a nearby NPC (not twice in a row)
  5. Otherwise move in a random direction

The player draws from its own RandomSource so its choices never shift the
controller's stream: the same seed replays the same game.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hedgehog_sim.core.enums import HedgehogState
from hedgehog_sim.utils.directions import MOVE_DIRECTIONS

if TYPE_CHECKING:
    from hedgehog_sim.engine.game_controller import GameController
    from hedgehog_sim.systems.rng import RandomSource

logger = logging.getLogger(__name__)

CURLED_MOVES = 4  # move calls spent curled before unrolling


class Autoplayer:
    """Issues one command per turn against a GameController."""

    __slots__ = ("_controller", "_rng", "_curl_pending", "_just_talked", "_curled_moves")

    def __init__(self, controller: GameController, rng: RandomSource) -> None:
        self._controller = controller
        self._rng = rng
        self._curl_pending = False
        self._just_talked = False
        self._curled_moves = 0

    def choose(self) -> str:
        """Return the next command as ``"verb"`` or ``"move:<direction>"``."""
        hog = self._controller.hedgehog

        if hog.state == HedgehogState.CURLED:
            if self._curled_moves >= CURLED_MOVES:
                return "uncurl"
            return "move:" + self._rng.pick(MOVE_DIRECTIONS)
        if self._curl_pending:
            return "curl"

        near = self._controller.describe_surroundings()
        if near.food_nearby:
            return "collect"
        if near.npc_nearby and not self._just_talked:
            return "talk"
        return "move:" + self._rng.pick(MOVE_DIRECTIONS)

    def play_turn(self) -> str:
        command = self.choose()
        controller = self._controller
        self._just_talked = False

        match command.split(":", 1):
            case ["uncurl"]:
                controller.uncurl_hedgehog()
                self._curled_moves = 0
            case ["curl"]:
                controller.curl_hedgehog()
                self._curl_pending = False
                self._curled_moves = 0
            case ["collect"]:
                controller.collect_food()
            case ["talk"]:
                result = controller.talk_to_npc()
                self._just_talked = True
                if result is not None and result.warning and result.warning.should_curl:
                    self._curl_pending = True
            case ["move", direction]:
                controller.move_hedgehog(direction)
                if controller.hedgehog.state == HedgehogState.CURLED:
                    self._curled_moves += 1

        logger.debug("Autoplay: %s -> %r", command, controller.hedgehog)
        return command
