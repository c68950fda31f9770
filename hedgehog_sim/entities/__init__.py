"""Actors: the hedgehog, patrolling predators and talking NPCs."""

from hedgehog_sim.entities.hedgehog import Hedgehog
from hedgehog_sim.entities.npc import NPC, AdviceStrategy, PredatorWarning
from hedgehog_sim.entities.predator import Predator

__all__ = ["AdviceStrategy", "Hedgehog", "NPC", "Predator", "PredatorWarning"]
