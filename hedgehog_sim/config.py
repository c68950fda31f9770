"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class GameConfig:
    """Immutable tunables for one game session."""

    # Randomness (None = time-derived seed)
    seed: int | None = None

    # Hedgehog
    max_energy: int = 100
    normal_move_cost: int = 1
    curled_move_cost: int = 2
    start_x: int = 0
    start_y: int = 0

    # Session
    max_time: int = 100                 # Accepted moves before timeOut
    default_lives: int = 5
    win_score: int = 1000

    # Hazards
    pit_survival_chance: float = 0.5
    curled_move_interval: int = 2       # Only every Nth curled move advances

    # Predators
    predator_move_interval: int = 10    # Ticks between patrol steps
    predator_leash_radius: int = 10
    predator_initial_direction_chance: float = 0.5

    # NPCs
    npc_honesty_rate: float = 0.6
    npc_sense_radius: int = 15
    npc_advice_direction: str = "north"
    fox_marker: str = "\U0001F98A"      # fox emoji in NPC names

    # Driver
    tick_interval: float = 0.5          # Seconds between predator ticks
    event_log_size: int = 500

    # Logging
    log_level: str = "INFO"

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)
