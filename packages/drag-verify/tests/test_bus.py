"""Unit tests for SignalBus."""
from __future__ import annotations

from drag_verify.bus import STATE_CHANGED, SignalBus


def test_publish_is_deferred_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe(STATE_CHANGED, lambda name, data: received.append((name, data)))

    bus.publish(STATE_CHANGED, progress=10.0)
    assert received == []
    assert bus.pending == 1

    assert bus.flush() == 1
    assert received == [(STATE_CHANGED, {"progress": 10.0})]
    assert bus.pending == 0


def test_delivery_in_publish_order():
    bus = SignalBus()
    seen = []
    bus.subscribe("a", lambda name, data: seen.append(data["n"]))
    bus.subscribe("b", lambda name, data: seen.append(data["n"]))

    bus.publish("a", n=1)
    bus.publish("b", n=2)
    bus.publish("a", n=3)
    bus.flush()

    assert seen == [1, 2, 3]


def test_handlers_called_in_registration_order():
    bus = SignalBus()
    calls = []
    bus.subscribe("evt", lambda n, d: calls.append("first"))
    bus.subscribe("evt", lambda n, d: calls.append("second"))

    bus.publish("evt")
    bus.flush()

    assert calls == ["first", "second"]


def test_unsubscribe_callable():
    bus = SignalBus()
    calls = []
    unsubscribe = bus.subscribe("evt", lambda n, d: calls.append(d))

    unsubscribe()
    bus.publish("evt", x=1)
    bus.flush()

    assert calls == []


def test_unsubscribe_unknown_handler_is_noop():
    bus = SignalBus()
    bus.unsubscribe("never", lambda n, d: None)


def test_signal_published_during_flush_is_delivered_same_flush():
    bus = SignalBus()
    seen = []

    def chain(name, data):
        seen.append(name)
        bus.publish("second")

    bus.subscribe("first", chain)
    bus.subscribe("second", lambda n, d: seen.append(n))

    bus.publish("first")
    assert bus.flush() == 2
    assert seen == ["first", "second"]


def test_publish_without_subscribers():
    bus = SignalBus()
    bus.publish("nobody")
    assert bus.flush() == 1


def test_clear_drops_queue():
    bus = SignalBus()
    calls = []
    bus.subscribe("evt", lambda n, d: calls.append(d))
    bus.publish("evt")
    bus.clear()
    assert bus.flush() == 0
    assert calls == []
