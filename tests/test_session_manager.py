"""Tests for SessionManager: lives, commands, event log and the ticker thread."""

import sys
import os
import threading
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hedgehog_sim.api.session_manager import SessionManager
from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.engine.game_controller import GameController

SMALL_MAP = {
    "width": 5, "height": 5,
    "food": [{"x": 1, "y": 0, "value": 20}],
    "npcs": [{"name": "Owl", "type": "honest", "x": 0, "y": 1, "dialogs": ["Hoo!"]}],
    "predators": [{"name": "Wolf", "x": 2, "y": 4}],
}


def _make_manager(**config) -> SessionManager:
    config.setdefault("seed", 42)
    return SessionManager(GameConfig(**config), SMALL_MAP)


class TestCommands:

    def test_move_and_snapshot(self):
        mgr = _make_manager()
        assert mgr.move("right")
        snap = mgr.snapshot()
        assert snap.position == Vector2(1, 0)
        assert snap.score == 20
        assert snap.energy == 100

    def test_events_reach_log(self):
        mgr = _make_manager()
        mgr.move("up")
        mgr.curl()
        mgr.uncurl()
        names = [e.name for e in mgr.event_log.since(0)]
        assert names == ["invalidMove", "hedgehogCurl", "hedgehogUncurl"]

    def test_talk(self):
        mgr = _make_manager()
        result = mgr.talk()
        assert result.npc == "Owl"

    def test_collect(self):
        mgr = _make_manager()
        assert mgr.collect_food()
        assert not mgr.collect_food()

    def test_world_view_and_surroundings(self):
        mgr = _make_manager()
        view = mgr.world_view()
        assert view.food == ((1, 0, 20),)
        assert view.npcs == (("Owl", 0, 1, "honest"),)
        assert view.predators == (("Wolf", 2, 4, False),)
        near = mgr.surroundings()
        assert near.npc_nearby == "Owl"
        assert near.food_nearby

    def test_state_bundle_matches_reads(self):
        mgr = _make_manager()
        mgr.move("right")
        snap, view, near = mgr.state_bundle()
        assert snap == mgr.snapshot()
        assert view == mgr.world_view()
        assert near == mgr.surroundings()

    def test_state_bundle_holds_lock_throughout(self, monkeypatch):
        mgr = _make_manager()
        original = GameController.world_view
        lock_free: list[bool] = []

        def world_view_from_other_thread(controller):
            def try_lock():
                acquired = mgr._lock.acquire(blocking=False)
                if acquired:
                    mgr._lock.release()
                lock_free.append(acquired)

            t = threading.Thread(target=try_lock)
            t.start()
            t.join()
            return original(controller)

        monkeypatch.setattr(GameController, "world_view", world_view_from_other_thread)
        mgr.state_bundle()
        assert lock_free == [False]

    def test_default_map_when_none_given(self):
        mgr = SessionManager(GameConfig(seed=1))
        assert mgr.world_view().width == 20

    def test_seed_is_reported(self):
        assert _make_manager(seed=77).seed == 77


class TestLives:

    def test_restart_spends_a_life(self):
        mgr = _make_manager(default_lives=3)
        mgr.move("right")
        assert mgr.restart()
        assert mgr.lives == 2
        snap = mgr.snapshot()
        assert snap.position == Vector2(0, 0)
        assert snap.score == 0

    def test_last_life_refuses_restart(self):
        mgr = _make_manager(default_lives=2)
        assert mgr.restart()
        mgr.move("right")
        assert not mgr.restart()
        assert mgr.lives == 0
        assert mgr.snapshot().position == Vector2(1, 0)

    def test_no_lives_starts_new_game(self):
        mgr = _make_manager(default_lives=1)
        assert not mgr.restart()
        assert mgr.restart()
        assert mgr.lives == 1
        assert mgr.snapshot().lives == 1

    def test_restart_with_new_map(self):
        mgr = _make_manager()
        assert mgr.restart({"width": 3, "height": 3})
        assert mgr.world_view().width == 3
        assert mgr.restart()
        assert mgr.world_view().width == 3


class TestTicker:

    def test_start_stop(self):
        mgr = _make_manager(tick_interval=0.05, predator_move_interval=1)
        mgr.start()
        assert mgr.running
        time.sleep(0.3)
        mgr.stop()
        assert not mgr.running
        assert mgr._controller.world.predators[0].move_counter > 0

    def test_start_twice_is_noop(self):
        mgr = _make_manager(tick_interval=0.05)
        mgr.start()
        mgr.start()
        mgr.stop()
        assert not mgr.running

    def test_stop_without_start(self):
        mgr = _make_manager()
        mgr.stop()
        assert not mgr.running

    def test_tick_interval_is_clamped(self):
        mgr = _make_manager()
        mgr.tick_interval = 0.0
        assert mgr.tick_interval == 0.05
        mgr.tick_interval = 100
        assert mgr.tick_interval == 10.0

    def test_manual_tick(self):
        mgr = _make_manager(predator_move_interval=1)
        assert mgr.tick() == 1
        assert mgr.world_view().predators[0][1] in (1, 3)
