"""NPCs — stationary forest dwellers who give advice and predator warnings.

Two advice strategies exist (``AdviceKind``):

* HONEST — always tells the truth.
* DECEPTIVE — tells the truth with probability ``honesty_rate`` when asked
  for a direction, and may invert or fabricate predator warnings.

Predator-warning decisions are *not* drawn from the session RNG. Each NPC
derives a personality seed from its fixed position (``x * 1000 + y``) and
hashes it with a fixed offset per decision, so asking the same NPC twice
about the same world gives the same answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hedgehog_sim.core.enums import AdviceKind, HashOffset
from hedgehog_sim.core.models import Vector2
from hedgehog_sim.systems.rng import RandomSource, personality_hash
from hedgehog_sim.utils.directions import DIRECTIONS

if TYPE_CHECKING:
    from hedgehog_sim.core.world import World
    from hedgehog_sim.entities.predator import Predator

POSITION_MULTIPLIER = 1000
DEFAULT_HONESTY_RATE = 0.6
DEFAULT_SENSE_RADIUS = 15


# ---------------------------------------------------------------------------
# Advice strategy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AdviceStrategy:
    """Tagged advice variant: the kind selects the behaviour."""

    kind: AdviceKind = AdviceKind.HONEST
    honesty_rate: float = DEFAULT_HONESTY_RATE

    @classmethod
    def from_tag(cls, tag: str | None, honesty_rate: float = DEFAULT_HONESTY_RATE) -> AdviceStrategy:
        """``"honest"`` builds an honest strategy; any other tag is deceptive."""
        kind = AdviceKind.HONEST if tag == "honest" else AdviceKind.DECEPTIVE
        return cls(kind=kind, honesty_rate=honesty_rate)

    @property
    def is_deceptive(self) -> bool:
        return self.kind == AdviceKind.DECEPTIVE

    def give_advice(self, actual_direction: str, rng: RandomSource) -> str:
        if self.kind == AdviceKind.HONEST:
            return actual_direction
        if rng.chance(self.honesty_rate):
            return actual_direction
        others = [d for d in DIRECTIONS if d != actual_direction]
        return rng.pick(others)


# ---------------------------------------------------------------------------
# Warning payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WarningSignal:
    """Raw warn/no-warn decision about one predator."""

    predator: Predator
    should_warn: bool
    is_truthful: bool


@dataclass(frozen=True, slots=True)
class PredatorWarning:
    """What the NPC actually says about predators."""

    message: str
    should_curl: bool
    is_warning: bool
    predator: Predator | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "shouldCurl": self.should_curl,
            "isWarning": self.is_warning,
            "predator": self.predator.name if self.predator else None,
        }


def warn_messages(predator_name: str) -> tuple[str, ...]:
    return (
        f"Careful! {predator_name} is close by! Curl up or you won't make it!",
        f"Beware of {predator_name}! It is dangerous!",
        f"{predator_name} is hunting for food! Stay alert!",
    )


def safe_messages(predator_name: str) -> tuple[str, ...]:
    return (
        f"All good! {predator_name} has eaten, no need to fear it!",
        f"{predator_name} is not dangerous right now, you can pass!",
        f"Don't worry, {predator_name} is already full!",
    )


NO_THREAT_MESSAGES: tuple[str, ...] = (
    "All good! There is no danger around!",
    "You can walk on calmly, it is safe here!",
    "Don't worry, everything is fine!",
)


# ---------------------------------------------------------------------------
# NPC
# ---------------------------------------------------------------------------

class NPC:
    """A stationary NPC. Strategy and position never change after build."""

    __slots__ = ("name", "strategy", "pos", "dialogs", "sense_radius")

    def __init__(
        self,
        name: str,
        strategy: AdviceStrategy,
        pos: Vector2,
        sense_radius: int = DEFAULT_SENSE_RADIUS,
    ) -> None:
        self.name = name
        self.strategy = strategy
        self.pos = pos
        self.dialogs: list[str] = []
        self.sense_radius = sense_radius

    @property
    def is_deceptive(self) -> bool:
        return self.strategy.is_deceptive

    def add_dialog(self, text: str) -> None:
        self.dialogs.append(text)

    def get_dialog(self, rng: RandomSource) -> str:
        if not self.dialogs:
            return f"{self.name} has nothing to say."
        return rng.pick(self.dialogs)

    def give_advice(self, actual_direction: str, rng: RandomSource) -> str:
        return self.strategy.give_advice(actual_direction, rng)

    # -- personality --

    @property
    def personality_seed(self) -> int:
        return self.pos.x * POSITION_MULTIPLIER + self.pos.y

    def _decide(self, offset: HashOffset) -> int:
        return personality_hash(self.personality_seed + offset)

    def _coin(self, offset: HashOffset) -> bool:
        return self._decide(offset) % 2 == 0

    # -- predator warnings --

    def _fabricated_warning(self, world: World) -> WarningSignal | None:
        if not world.predators:
            return None
        index = self._decide(HashOffset.PREDATOR_INDEX) % len(world.predators)
        return WarningSignal(
            predator=world.predators[index],
            should_warn=self._coin(HashOffset.SHOULD_WARN),
            is_truthful=False,
        )

    def get_predator_warning(self, world: World) -> WarningSignal | None:
        """Decide whether to warn about the nearest predator.

        Honest NPCs report nothing when no predator is in sensing range;
        deceptive ones may invent a warning about a predator elsewhere.
        """
        predator = world.get_nearest_predator(self.pos.x, self.pos.y, self.sense_radius)
        if predator is None:
            return self._fabricated_warning(world) if self.is_deceptive else None

        should_warn = not predator.is_full
        if self.is_deceptive and self._coin(HashOffset.SHOULD_LIE):
            should_warn = not should_warn

        return WarningSignal(
            predator=predator,
            should_warn=should_warn,
            is_truthful=should_warn == (not predator.is_full),
        )

    def get_predator_warning_message(self, world: World) -> PredatorWarning | None:
        warning = self.get_predator_warning(world)
        deceptive = self.is_deceptive

        if warning is None:
            if not deceptive:
                return None
            index = self._decide(HashOffset.NO_THREAT) % len(NO_THREAT_MESSAGES)
            return PredatorWarning(
                message=NO_THREAT_MESSAGES[index],
                should_curl=False,
                is_warning=False,
                predator=None,
            )

        name = warning.predator.name
        if warning.should_warn:
            pool = warn_messages(name)
            offset = HashOffset.WARN_DECEPTIVE if deceptive else HashOffset.WARN_HONEST
            return PredatorWarning(
                message=pool[self._decide(offset) % len(pool)],
                should_curl=warning.is_truthful if deceptive else True,
                is_warning=True,
                predator=warning.predator,
            )

        pool = safe_messages(name)
        offset = HashOffset.SAFE_DECEPTIVE if deceptive else HashOffset.SAFE_HONEST
        return PredatorWarning(
            message=pool[self._decide(offset) % len(pool)],
            should_curl=(not warning.is_truthful) if deceptive else False,
            is_warning=False,
            predator=warning.predator,
        )

    def __repr__(self) -> str:
        return f"NPC({self.name!r}, {self.strategy.kind.name}, pos={self.pos})"
