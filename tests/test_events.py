"""Tests for the host event bus and the host-ready signal."""

import asyncio

from core.events import EventBus, HostReadySignal


def test_emit_delivers_args_in_subscription_order():
    bus = EventBus()
    received = []
    bus.subscribe("TooltipShown", lambda t, i: received.append(("a", t, i)))
    bus.subscribe("TooltipShown", lambda t, i: received.append(("b", t, i)))

    bus.emit("TooltipShown", "TOOLTIP_UNIT", 7)
    assert received == [("a", "TOOLTIP_UNIT", 7), ("b", "TOOLTIP_UNIT", 7)]


def test_emit_without_listeners_is_harmless():
    EventBus().emit("Nothing", 1, 2)


def test_unsubscribe_is_idempotent():
    bus = EventBus()
    received = []
    sub = bus.subscribe("LensActivated", received.append)
    sub.unsubscribe()
    sub.unsubscribe()

    bus.emit("LensActivated", "X")
    assert received == []
    assert bus.listener_count("LensActivated") == 0
    assert not sub.active


def test_listener_error_does_not_stop_others(caplog):
    bus = EventBus()
    received = []

    def broken(_):
        raise RuntimeError("boom")

    bus.subscribe("LensActivated", broken)
    bus.subscribe("LensActivated", received.append)
    bus.emit("LensActivated", "X")

    assert received == ["X"]
    assert "Listener error" in caplog.text


def test_unsubscribe_during_emit_skips_removed_listener():
    bus = EventBus()
    received = []
    second = None

    def first(_):
        second.unsubscribe()

    bus.subscribe("E", first)
    second = bus.subscribe("E", received.append)
    bus.emit("E", 1)
    assert received == []


def test_host_ready_runs_callbacks_once():
    ready = HostReadySignal()
    calls = []
    ready.on_ready(lambda: calls.append("early"))
    assert calls == []

    ready.fire()
    ready.fire()
    assert calls == ["early"]

    ready.on_ready(lambda: calls.append("late"))
    assert calls == ["early", "late"]


def test_host_ready_callback_error_is_isolated():
    ready = HostReadySignal()
    calls = []

    def broken():
        raise RuntimeError("boom")

    ready.on_ready(broken)
    ready.on_ready(lambda: calls.append(1))
    ready.fire()
    assert calls == [1]


def test_host_ready_wait():
    async def scenario():
        ready = HostReadySignal()
        waiter = asyncio.create_task(ready.wait())
        await asyncio.sleep(0)
        assert not waiter.done()
        ready.fire()
        await asyncio.wait_for(waiter, timeout=1)
        # already ready: returns immediately
        await asyncio.wait_for(ready.wait(), timeout=1)
        return ready.is_ready

    assert asyncio.run(scenario()) is True
