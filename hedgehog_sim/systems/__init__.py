"""Engine systems: seeded randomness and personality hashing."""

from hedgehog_sim.systems.rng import RandomSource, personality_hash

__all__ = ["RandomSource", "personality_hash"]
