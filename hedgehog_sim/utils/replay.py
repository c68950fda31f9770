"""Replay serialization — records turn-by-turn commands for deterministic replay."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hedgehog_sim.engine.game_controller import GameController

logger = logging.getLogger(__name__)

REPLAY_VERSION = "1.0"


class ReplayRecorder:
    """Accumulates turns and flushes them to a JSON replay file.

    Attach it with ``controller.event_bus.on_any(recorder.on_event)``; events
    emitted between two ``record_turn`` calls belong to the later turn.
    """

    __slots__ = ("_path", "_seed", "_turns", "_pending")

    def __init__(self, path: str | Path, seed: int) -> None:
        self._path = Path(path)
        self._seed = seed
        self._turns: list[dict[str, Any]] = []
        self._pending: list[dict[str, Any]] = []

    def on_event(self, name: str, payload: dict[str, Any]) -> None:
        self._pending.append({"name": name, "payload": dict(payload)})

    def record_turn(self, turn: int, command: str, controller: GameController) -> None:
        self._turns.append({
            "turn": turn,
            "command": command,
            "events": self._pending,
            "state": controller.get_game_state().to_dict(),
        })
        self._pending = []

    @property
    def turns(self) -> list[dict[str, Any]]:
        return list(self._turns)

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": REPLAY_VERSION,
            "seed": self._seed,
            "total_turns": len(self._turns),
            "turns": self._turns,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Replay saved to %s (%d turns)", self._path, len(self._turns))
