"""Immutable views of a game session for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hedgehog_sim.core.models import Vector2

if TYPE_CHECKING:
    from hedgehog_sim.core.world import World
    from hedgehog_sim.engine.game_controller import GameController


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only game state. Renderers consume this and nothing else."""

    position: Vector2
    energy: int
    score: int
    state: str
    time_remaining: int
    is_game_over: bool
    lives: int

    @classmethod
    def from_controller(cls, controller: GameController) -> GameSnapshot:
        hedgehog = controller.hedgehog
        return cls(
            position=hedgehog.pos,
            energy=hedgehog.energy,
            score=hedgehog.score,
            state=hedgehog.state_name,
            time_remaining=controller.time_remaining,
            is_game_over=controller.is_game_over(),
            lives=controller.lives,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "hedgehog": {
                "position": self.position.to_dict(),
                "energy": self.energy,
                "score": self.score,
                "state": self.state,
            },
            "timeRemaining": self.time_remaining,
            "isGameOver": self.is_game_over,
            "lives": self.lives,
        }


@dataclass(frozen=True, slots=True)
class WorldView:
    """Copied positions of everything a renderer draws."""

    width: int
    height: int
    pits: tuple[tuple[int, int], ...]
    food: tuple[tuple[int, int, int], ...]
    bushes: tuple[tuple[int, int, bool], ...]
    npcs: tuple[tuple[str, int, int, str], ...]
    predators: tuple[tuple[str, int, int, bool], ...]

    @classmethod
    def from_world(cls, world: World) -> WorldView:
        return cls(
            width=world.width,
            height=world.height,
            pits=tuple(sorted(world.pits)),
            food=tuple((x, y, v) for (x, y), v in sorted(world.food.items())),
            bushes=tuple((x, y, b.has_fox) for (x, y), b in sorted(world.bushes.items())),
            npcs=tuple(
                (n.name, n.pos.x, n.pos.y, n.strategy.kind.name.lower()) for n in world.npcs
            ),
            predators=tuple(
                (p.name, p.pos.x, p.pos.y, p.is_full) for p in world.predators
            ),
        )
