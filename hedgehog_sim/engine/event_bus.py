"""Synchronous publish/subscribe between the controller and its observers.

Handlers run inside ``emit`` in registration order. A handler registered
with ``on_any`` receives every event as ``handler(name, payload)``; named
handlers receive only the payload.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Payload = dict[str, Any]
Handler = Callable[[Payload], Any]
AnyHandler = Callable[[str, Payload], Any]


class EventBus:
    """Minimal event bus. Handler return values are ignored."""

    __slots__ = ("_subscriptions",)

    def __init__(self) -> None:
        # (event name or None for wildcard, handler), in registration order
        self._subscriptions: list[tuple[str | None, Callable[..., Any]]] = []

    def on(self, event_name: str, handler: Handler) -> None:
        self._subscriptions.append((event_name, handler))

    def on_any(self, handler: AnyHandler) -> None:
        self._subscriptions.append((None, handler))

    def off(self, event_name: str | None, handler: Callable[..., Any]) -> None:
        """Remove *handler* from *event_name* (None removes a wildcard handler)."""
        self._subscriptions = [
            (name, h) for name, h in self._subscriptions
            if not (name == event_name and h == handler)
        ]

    def emit(self, event_name: str, payload: Payload | None = None) -> None:
        payload = {} if payload is None else payload
        logger.debug("emit %s %s", event_name, payload)
        for name, handler in list(self._subscriptions):
            if name is None:
                handler(event_name, payload)
            elif name == event_name:
                handler(payload)

    def subscriber_count(self, event_name: str | None = None) -> int:
        return sum(1 for name, _ in self._subscriptions if name == event_name)

    def clear(self) -> None:
        self._subscriptions.clear()
