"""
Event delivery between the host UI and the mod components.

The host emits named events (lens selection, tooltip display); components
register listeners at construction and keep the returned Subscription so
they can unregister on teardown.

Usage:
    from core.events import EventBus

    bus = EventBus()
    sub = bus.subscribe("LensActivated", controller.on_lens_activated)
    bus.emit("LensActivated", "RESOURCE_POTENTIAL_LENS")
    sub.unsubscribe()
"""

import asyncio
from typing import Callable, Dict, List

from core.logger_setup import get_logger

log = get_logger("EventBus")


class Subscription:
    """Handle returned by EventBus.subscribe()."""

    def __init__(self, bus, event_type: str, callback: Callable):
        self.bus = bus
        self.event_type = event_type
        self.callback = callback
        self.active = True

    def unsubscribe(self):
        if not self.active:
            return
        self.active = False
        self.bus._remove(self)

    def __repr__(self):
        return f"Subscription(event={self.event_type}, active={self.active})"


class EventBus:
    """Synchronous dispatcher for host UI events."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Subscription]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> Subscription:
        """Register a listener for an event type."""
        sub = Subscription(self, event_type, callback)
        self._listeners.setdefault(event_type, []).append(sub)
        log.debug(f"[EventBus] Subscribed {getattr(callback, '__qualname__', callback)} to '{event_type}'")
        return sub

    def _remove(self, sub: Subscription) -> None:
        listeners = self._listeners.get(sub.event_type, [])
        if sub in listeners:
            listeners.remove(sub)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def emit(self, event_type: str, *args) -> None:
        """Deliver an event to every listener; a failing listener does not stop the others."""
        for sub in list(self._listeners.get(event_type, [])):
            if not sub.active:
                continue
            try:
                sub.callback(*args)
            except Exception:
                log.exception(f"[EventBus] Listener error for '{event_type}'")


class HostReadySignal:
    """
    Fired once by the host when its UI services are initialised.
    Components that need the host (lens registration, button wiring)
    wait on it instead of a fixed delay.
    """

    def __init__(self):
        self.is_ready = False
        self._callbacks = []
        self._event = None

    def on_ready(self, callback):
        if self.is_ready:
            callback()
            return
        self._callbacks.append(callback)

    def fire(self):
        if self.is_ready:
            return
        self.is_ready = True
        log.info("[HostReady] Host UI initialised.")
        if self._event is not None:
            self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                callback()
            except Exception:
                log.exception("[HostReady] Ready callback failed")

    async def wait(self):
        if self.is_ready:
            return
        if self._event is None:
            self._event = asyncio.Event()
        await self._event.wait()
