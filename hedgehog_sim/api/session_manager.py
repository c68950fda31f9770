"""SessionManager — owns the single game session behind the HTTP API.

Every command runs under one lock, so request handlers and the background
predator ticker never interleave inside the controller. Events reach the
API through an EventLog subscribed to the controller's bus.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Mapping

from hedgehog_sim.core.maps import default_map
from hedgehog_sim.engine.event_bus import EventBus
from hedgehog_sim.engine.game_controller import GameController, Surroundings, TalkResult
from hedgehog_sim.systems.rng import RandomSource
from hedgehog_sim.utils.event_log import EventLog

if TYPE_CHECKING:
    from hedgehog_sim.config import GameConfig
    from hedgehog_sim.core.snapshot import GameSnapshot, WorldView

logger = logging.getLogger(__name__)


class SessionManager:
    """Runs one GameController and an optional predator ticker thread.

    Provides thread-safe access to:
      - player commands (move / collect / talk / curl / uncurl / tick)
      - lives-aware restart
      - snapshots and the event log
    """

    def __init__(self, config: GameConfig, map_data: Mapping[str, Any] | None = None) -> None:
        self.config = config
        self._map_data: Mapping[str, Any] = map_data if map_data is not None else default_map()
        self._tick_interval: float = config.tick_interval

        self._lock = threading.RLock()
        self._event_log = EventLog(config.event_log_size)

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._stop_requested = threading.Event()

        self._rng = RandomSource(config.seed)
        bus = EventBus()
        bus.on_any(self._event_log.record)
        self._controller = GameController(self._map_data, self._rng, config, bus)
        logger.info("Session ready (seed=%d, %r)", self._rng.seed, self._controller.world)

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @tick_interval.setter
    def tick_interval(self, value: float) -> None:
        self._tick_interval = max(0.05, min(value, 10.0))

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def seed(self) -> int:
        return self._rng.seed

    @property
    def lives(self) -> int:
        with self._lock:
            return self._controller.lives

    # -- commands --

    def move(self, direction: str) -> bool:
        with self._lock:
            return self._controller.move_hedgehog(direction)

    def collect_food(self) -> bool:
        with self._lock:
            return self._controller.collect_food()

    def talk(self) -> TalkResult | None:
        with self._lock:
            return self._controller.talk_to_npc()

    def curl(self) -> bool:
        with self._lock:
            return self._controller.curl_hedgehog()

    def uncurl(self) -> bool:
        with self._lock:
            return self._controller.uncurl_hedgehog()

    def tick(self) -> int:
        with self._lock:
            return self._controller.tick()

    def restart(self, map_data: Mapping[str, Any] | None = None) -> bool:
        """Spend a life and rebuild the session.

        Returns False when the last life was just spent: the session is over
        and nothing is rebuilt. The next call starts a fresh game with full
        lives.
        """
        with self._lock:
            controller = self._controller
            if controller.lives > 0:
                controller.lives -= 1
                if controller.lives == 0:
                    logger.info("No lives left; session over")
                    return False
            else:
                controller.lives = self.config.default_lives
                logger.info("New game with %d lives", controller.lives)

            if map_data is not None:
                self._map_data = map_data
            controller.restart(self._map_data)
            return True

    # -- reads --

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self._controller.get_game_state()

    def world_view(self) -> WorldView:
        with self._lock:
            return self._controller.world_view()

    def surroundings(self) -> Surroundings:
        with self._lock:
            return self._controller.describe_surroundings()

    def state_bundle(self) -> tuple[GameSnapshot, WorldView, Surroundings]:
        """Snapshot, world view and surroundings read under one lock hold."""
        with self._lock:
            controller = self._controller
            return (
                controller.get_game_state(),
                controller.world_view(),
                controller.describe_surroundings(),
            )

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set():
            return
        self._stop_requested.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_ticker, name="predator-ticker", daemon=True)
        self._thread.start()
        logger.info("Predator ticker started (interval=%.2fs)", self._tick_interval)

    def stop(self) -> None:
        self._stop_requested.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._thread = None
        self._running.clear()
        logger.info("Predator ticker stopped.")

    # -- internals --

    def _run_ticker(self) -> None:
        """Background thread: one predator tick per interval."""
        logger.debug("Ticker thread started.")
        while not self._stop_requested.wait(self._tick_interval):
            moved = self.tick()
            if moved:
                logger.debug("Ticker moved %d predator(s)", moved)
        self._running.clear()
        logger.debug("Ticker thread exited.")
