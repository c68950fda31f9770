"""Tests for predator patrols, leash and attacks."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hedgehog_sim.config import GameConfig
from hedgehog_sim.core.enums import HedgehogState
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.core.world import World
from hedgehog_sim.entities.hedgehog import Hedgehog
from hedgehog_sim.entities.predator import Predator
from hedgehog_sim.systems.rng import RandomSource


def _make_predator(x: int = 20, y: int = 0, seed: int = 1, **config) -> Predator:
    return Predator("Wolf", Vector2(x, y), config=GameConfig(**config), rng=RandomSource(seed))


class TestPatrol:

    def test_only_every_interval_th_call_moves(self):
        world = World(40, 1)
        wolf = _make_predator(predator_move_interval=10)
        results = [wolf.move(world) for _ in range(10)]
        assert results[:9] == [False] * 9
        assert results[9] is True
        assert wolf.pos.manhattan(Vector2(20, 0)) == 1

    def test_moves_horizontally_only(self):
        world = World(40, 5)
        wolf = _make_predator(y=2, predator_move_interval=1)
        for _ in range(50):
            wolf.move(world)
            assert wolf.pos.y == 2

    def test_never_leaves_leash(self):
        world = World(40, 1)
        wolf = _make_predator(predator_move_interval=1, predator_leash_radius=3)
        for _ in range(300):
            wolf.move(world)
            assert wolf.distance_from_anchor() <= 3

    def test_blocked_by_world_edge(self):
        world = World(1, 1)
        wolf = _make_predator(x=0, predator_move_interval=1)
        assert not any(wolf.move(world) for _ in range(20))
        assert wolf.pos == Vector2(0, 0)

    def test_anchor_is_spawn(self):
        wolf = _make_predator(x=7)
        assert wolf.anchor == Vector2(7, 0)
        assert not wolf.at_leash_limit()

    def test_unseeded_predator_is_position_deterministic(self):
        a = Predator("A", Vector2(3, 2))
        b = Predator("B", Vector2(3, 2))
        assert a.direction == b.direction
        assert a.direction in (1, -1)


class TestAttack:

    def test_hungry_kills_normal(self):
        hog = Hedgehog(Vector2(0, 0))
        assert _make_predator().attack(hog)
        assert hog.state == HedgehogState.DEAD

    def test_curled_is_immune(self):
        hog = Hedgehog(Vector2(0, 0))
        hog.curl()
        assert not _make_predator().attack(hog)
        assert hog.state == HedgehogState.CURLED

    def test_full_predator_never_attacks(self):
        hog = Hedgehog(Vector2(0, 0))
        wolf = Predator("Bear", Vector2(0, 0), is_full=True)
        assert not wolf.attack(hog)
        assert hog.is_alive()
