"""Seeded randomness for the simulation.

Two sources live here:

* ``RandomSource`` — a small linear-congruential generator. Every
  probabilistic outcome the controller resolves (pit survival, deceptive
  advice, dialog picks) draws from it, so a fixed seed and a fixed command
  sequence always replay the same game.
* ``personality_hash`` — a stateless xxhash digest used for decisions that
  must *not* change between calls (an NPC's honesty is a trait, not a
  per-conversation coin flip).
"""

from __future__ import annotations

import struct
import time
from typing import Sequence, TypeVar

import xxhash

T = TypeVar("T")

_MASK64 = (1 << 64) - 1

PERSONALITY_MODULO = 1000


def personality_hash(seed: int) -> int:
    """Return a deterministic value in ``[0, PERSONALITY_MODULO)`` for *seed*."""
    payload = struct.pack("<Q", seed & _MASK64)
    return xxhash.xxh64(payload).intdigest() % PERSONALITY_MODULO


class RandomSource:
    """Seeded linear-congruential pseudo-random number generator.

    Output is a pure function of the seed and the sequence of calls made.
    """

    __slots__ = ("_state", "_initial_seed")

    MULTIPLIER = 9301
    INCREMENT = 49297
    MODULUS = 233280

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(time.time() * 1000)
        self._initial_seed = seed
        self._state = seed

    @property
    def seed(self) -> int:
        """The seed this source was created with."""
        return self._initial_seed

    def next(self) -> float:
        """Return a float in [0.0, 1.0)."""
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self._state / self.MODULUS

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.next() < probability

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in [low, high] inclusive."""
        return int(self.next() * (high - low + 1)) + low

    def pick(self, items: Sequence[T]) -> T | None:
        """Return a uniformly chosen element, or None for an empty sequence."""
        if not items:
            return None
        return items[self.next_int(0, len(items) - 1)]

    def spawn(self, salt: int) -> RandomSource:
        """Derive an independent child source without advancing this one."""
        payload = struct.pack("<QQ", self._state & _MASK64, salt & _MASK64)
        return RandomSource(xxhash.xxh64(payload).intdigest() % self.MODULUS)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._initial_seed})"
