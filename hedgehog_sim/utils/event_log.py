"""Thread-safe ring buffer of controller events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One EventBus emission, numbered in arrival order."""

    seq: int
    name: str
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"seq": self.seq, "name": self.name, "payload": dict(self.payload)}


class EventLog:
    """Bounded event log. The bus handler appends; API readers copy slices.

    Sequence numbers keep increasing across ``clear()`` so a client polling
    with ``since`` never sees an old number reused.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._next_seq = 0

    def record(self, name: str, payload: dict[str, Any] | None = None) -> GameEvent:
        """EventBus wildcard handler: ``bus.on_any(log.record)``."""
        with self._lock:
            event = GameEvent(self._next_seq, name, dict(payload or {}))
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return all retained events with seq >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    @property
    def next_seq(self) -> int:
        with self._lock:
            return self._next_seq

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
