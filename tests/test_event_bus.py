"""Tests for the synchronous EventBus."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hedgehog_sim.engine.event_bus import EventBus


class TestEventBus:

    def test_named_handler_gets_payload(self):
        bus = EventBus()
        got = []
        bus.on("foodCollected", got.append)
        bus.emit("foodCollected", {"value": 5})
        assert got == [{"value": 5}]

    def test_other_events_ignored(self):
        bus = EventBus()
        got = []
        bus.on("pitDeath", got.append)
        bus.emit("pitSurvived", {})
        assert got == []

    def test_missing_payload_is_empty_dict(self):
        bus = EventBus()
        got = []
        bus.on("timeOut", got.append)
        bus.emit("timeOut")
        assert got == [{}]

    def test_registration_order(self):
        bus = EventBus()
        order = []
        bus.on("x", lambda p: order.append("first"))
        bus.on_any(lambda n, p: order.append("any"))
        bus.on("x", lambda p: order.append("second"))
        bus.emit("x")
        assert order == ["first", "any", "second"]

    def test_wildcard_receives_name(self):
        bus = EventBus()
        got = []
        bus.on_any(lambda name, payload: got.append((name, payload)))
        bus.emit("hedgehogCurl", {})
        bus.emit("timeOut", {})
        assert got == [("hedgehogCurl", {}), ("timeOut", {})]

    def test_off(self):
        bus = EventBus()
        got = []
        bus.on("x", got.append)
        bus.off("x", got.append)
        bus.emit("x", {"a": 1})
        assert got == []
        assert bus.subscriber_count("x") == 0

    def test_handler_may_unsubscribe_during_emit(self):
        bus = EventBus()
        calls = []

        def once(payload):
            calls.append(payload)
            bus.off("x", once)

        bus.on("x", once)
        bus.emit("x", {})
        bus.emit("x", {})
        assert len(calls) == 1

    def test_subscriber_count_and_clear(self):
        bus = EventBus()
        bus.on("x", print)
        bus.on("x", repr)
        bus.on_any(print)
        assert bus.subscriber_count("x") == 2
        assert bus.subscriber_count(None) == 1
        bus.clear()
        assert bus.subscriber_count("x") == 0
