"""Spatial registry of everything placed in the forest."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from hedgehog_sim.core.models import Bush, Vector2
from hedgehog_sim.utils.directions import get_delta

if TYPE_CHECKING:
    from hedgehog_sim.entities.npc import NPC
    from hedgehog_sim.entities.predator import Predator

DEFAULT_SCAN_DIRECTION = "right"
DEFAULT_SCAN_DISTANCE = 10
DEFAULT_PREDATOR_RADIUS = 15
FOX_MARKER = "\U0001F98A"


class World:
    """Pits, food, bushes, NPCs and predators on a width × height grid.

    Cells are keyed by exact ``(x, y)``; placing food, a pit or a bush on an
    occupied key overwrites it. Every query is read-only except
    ``collect_food``.
    """

    __slots__ = ("width", "height", "fox_marker", "pits", "food", "npcs", "predators", "bushes")

    def __init__(self, width: int, height: int, fox_marker: str = FOX_MARKER) -> None:
        self.width = width
        self.height = height
        self.fox_marker = fox_marker
        self.pits: set[tuple[int, int]] = set()
        self.food: dict[tuple[int, int], int] = {}
        self.npcs: list[NPC] = []
        self.predators: list[Predator] = []
        self.bushes: dict[tuple[int, int], Bush] = {}

    # -- bounds --

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # -- pits --

    def add_pit(self, x: int, y: int) -> None:
        self.pits.add((x, y))

    def has_pit(self, x: int, y: int) -> bool:
        return (x, y) in self.pits

    # -- food --

    def add_food(self, x: int, y: int, value: int) -> None:
        self.food[(x, y)] = value

    def has_food(self, x: int, y: int) -> bool:
        return (x, y) in self.food

    def collect_food(self, x: int, y: int) -> int:
        """Remove and return the food value at (x, y), or 0."""
        return self.food.pop((x, y), 0)

    def is_food_reachable(self, x: int, y: int) -> bool:
        """Food hidden under a bush can't be picked up."""
        return self.has_food(x, y) and not self.has_bush(x, y)

    def get_food_in_radius(self, x: int, y: int, radius: int) -> Vector2 | None:
        """Return the first reachable food cell within Manhattan *radius*.

        The hedgehog's own cell is checked first, then offsets in dx-major,
        dy-minor order.
        """
        if self.is_food_reachable(x, y):
            return Vector2(x, y)

        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx == 0 and dy == 0:
                    continue
                if abs(dx) + abs(dy) > radius:
                    continue
                if self.is_food_reachable(x + dx, y + dy):
                    return Vector2(x + dx, y + dy)
        return None

    # -- NPCs --

    def add_npc(self, npc: NPC) -> None:
        self.npcs.append(npc)

    def get_npc_at(self, x: int, y: int) -> NPC | None:
        return self.get_npc_in_radius(x, y, 1)

    def get_npc_in_radius(self, x: int, y: int, radius: int) -> NPC | None:
        """Exact match first, else the nearest NPC within *radius*.

        Ties go to the earliest registered NPC.
        """
        origin = Vector2(x, y)
        best: NPC | None = None
        best_dist = radius + 1
        for npc in self.npcs:
            dist = npc.pos.manhattan(origin)
            if dist == 0:
                return npc
            if dist <= radius and dist < best_dist:
                best, best_dist = npc, dist
        return best

    # -- predators --

    def add_predator(self, predator: Predator) -> None:
        self.predators.append(predator)

    def get_predator_at(self, x: int, y: int) -> Predator | None:
        for predator in self.predators:
            if predator.pos.x == x and predator.pos.y == y:
                return predator
        return None

    def get_nearest_predator(
        self, x: int, y: int, max_distance: int = DEFAULT_PREDATOR_RADIUS,
    ) -> Predator | None:
        origin = Vector2(x, y)
        nearest: Predator | None = None
        nearest_dist = max_distance + 1
        for predator in self.predators:
            dist = predator.pos.manhattan(origin)
            if dist <= max_distance and dist < nearest_dist:
                nearest, nearest_dist = predator, dist
        return nearest

    def _scan(self, x: int, y: int, direction: str, max_distance: int) -> Iterator[tuple[Vector2, int]]:
        """Yield (cell, distance) along a ray until it leaves the grid."""
        delta = get_delta(direction, default=get_delta(DEFAULT_SCAN_DIRECTION))
        for distance in range(1, max_distance + 1):
            cell = Vector2(x + delta.x * distance, y + delta.y * distance)
            if not self.is_valid_position(cell.x, cell.y):
                return
            yield cell, distance

    def get_predator_in_front_of(
        self,
        x: int,
        y: int,
        direction: str = DEFAULT_SCAN_DIRECTION,
        max_distance: int = DEFAULT_SCAN_DISTANCE,
    ) -> Predator | None:
        for cell, _ in self._scan(x, y, direction, max_distance):
            predator = self.get_predator_at(cell.x, cell.y)
            if predator is not None:
                return predator
        return None

    def get_all_predators_in_direction(
        self,
        x: int,
        y: int,
        direction: str = DEFAULT_SCAN_DIRECTION,
        max_distance: int = DEFAULT_SCAN_DISTANCE,
    ) -> list[tuple[Predator, int]]:
        found: list[tuple[Predator, int]] = []
        for cell, distance in self._scan(x, y, direction, max_distance):
            predator = self.get_predator_at(cell.x, cell.y)
            if predator is not None:
                found.append((predator, distance))
        return found

    # -- bushes --

    def add_bush(self, x: int, y: int, has_fox: bool = False) -> None:
        self.bushes[(x, y)] = Bush(has_fox=bool(has_fox))

    def has_bush(self, x: int, y: int) -> bool:
        return (x, y) in self.bushes

    def get_bush(self, x: int, y: int) -> Bush | None:
        return self.bushes.get((x, y))

    def check_bush_trap(self, x: int, y: int) -> bool:
        bush = self.get_bush(x, y)
        return bush is not None and bush.has_fox

    def approach_cell(self, bush_x: int, bush_y: int, from_x: int, from_y: int) -> Vector2:
        """The cell beside a bush on the side the hedgehog comes from.

        The dominant axis of the approach vector picks the side.
        """
        dx = bush_x - from_x
        dy = bush_y - from_y
        if abs(dx) > abs(dy):
            return Vector2(bush_x - 1, bush_y) if dx > 0 else Vector2(bush_x + 1, bush_y)
        if dy > 0:
            return Vector2(bush_x, bush_y - 1)
        return Vector2(bush_x, bush_y + 1)

    def has_fox_before_bush(
        self, bush_x: int, bush_y: int, from_x: int, from_y: int,
    ) -> bool:
        """True if a fox waits on the approach side of the bush at (bush_x, bush_y).

        A fox is either a predator standing on the approach cell or an NPC
        there whose name carries the world's ``fox_marker``.
        """
        if not self.has_bush(bush_x, bush_y):
            return False
        cell = self.approach_cell(bush_x, bush_y, from_x, from_y)
        if self.get_predator_at(cell.x, cell.y) is not None:
            return True
        return any(
            npc.pos == cell and self.fox_marker in npc.name
            for npc in self.npcs
        )

    def __repr__(self) -> str:
        return (
            f"World({self.width}x{self.height}, pits={len(self.pits)}, food={len(self.food)}, "
            f"npcs={len(self.npcs)}, predators={len(self.predators)}, bushes={len(self.bushes)})"
        )
