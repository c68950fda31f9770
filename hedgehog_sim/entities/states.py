"""Hedgehog behavioral states — a closed enum plus a trait table.

State machine:
  NORMAL → CURLED (curl)
  CURLED → NORMAL (uncurl)
  any    → DEAD   (die: exhaustion, pit, predator, fox bush)
  DEAD is terminal until the session restarts.

Each state's behaviour is looked up in STATE_TRAITS; adding a state means
adding an enum member and one table entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hedgehog_sim.core.enums import HedgehogState

if TYPE_CHECKING:
    from hedgehog_sim.config import GameConfig


@dataclass(frozen=True, slots=True)
class StateTraits:
    """What a hedgehog can do while in one state."""

    vulnerable: bool
    can_talk: bool
    cost_field: str | None = None              # GameConfig field holding the move cost
    curl_to: HedgehogState | None = None
    uncurl_to: HedgehogState | None = None

    def energy_cost(self, config: GameConfig) -> int:
        if self.cost_field is None:
            return 0
        return getattr(config, self.cost_field)


STATE_TRAITS: dict[HedgehogState, StateTraits] = {
    HedgehogState.NORMAL: StateTraits(
        vulnerable=True, can_talk=True,
        cost_field="normal_move_cost", curl_to=HedgehogState.CURLED,
    ),
    HedgehogState.CURLED: StateTraits(
        vulnerable=False, can_talk=False,
        cost_field="curled_move_cost", uncurl_to=HedgehogState.NORMAL,
    ),
    HedgehogState.DEAD: StateTraits(vulnerable=False, can_talk=False),
}


def traits_for(state: HedgehogState) -> StateTraits:
    return STATE_TRAITS[state]
