import os

# pygame / pygame_gui run headless in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.notifications import NotificationManager


class FakeOverlay:
    """Overlay surface double: keeps per-layer colors and a call log."""

    def __init__(self):
        self.layers = {}
        self.calls = []

    def create_layer(self, name):
        self.calls.append(("create_layer", name))
        self.layers.setdefault(name, {})

    def set_hex_color(self, layer, x, y, color):
        self.calls.append(("set_hex_color", layer, x, y, color))
        self.layers.setdefault(layer, {})[(x, y)] = color

    def clear_layer(self, name):
        self.calls.append(("clear_layer", name))
        if name in self.layers:
            self.layers[name].clear()


class DeferredTileSource:
    """Tile data source double: callbacks are held until deliver() is called."""

    def __init__(self, plots=None):
        self.plots = plots
        self.pending = []

    def request_plot_data(self, callback):
        self.pending.append(callback)

    def deliver(self, plots="default"):
        payload = self.plots if plots == "default" else plots
        pending, self.pending = self.pending, []
        for callback in pending:
            callback(payload)


class ImmediateTileSource:
    def __init__(self, plots):
        self.plots = plots
        self.requests = 0

    def request_plot_data(self, callback):
        self.requests += 1
        callback(self.plots)


class FakeLegend:
    def __init__(self):
        self.visible = False
        self.entries = None
        self.shown = 0
        self.hidden = 0

    def show_legend(self, entries):
        self.visible = True
        self.entries = list(entries)
        self.shown += 1

    def hide_legend(self):
        self.visible = False
        self.hidden += 1


class FakeTooltip:
    def __init__(self):
        self.enhanced = False
        self.sections = []

    def mark_enhanced(self):
        self.enhanced = True

    def add_section(self, lines, style="info"):
        self.sections.append((style, list(lines)))


class DeferredUnitSource:
    def __init__(self, details=None):
        self.details = details or {}
        self.pending = []

    def query_unit_details(self, unit_id, callback):
        self.pending.append((unit_id, callback))

    def deliver(self):
        pending, self.pending = self.pending, []
        for unit_id, callback in pending:
            callback(self.details.get(unit_id))


@pytest.fixture
def overlay():
    return FakeOverlay()


@pytest.fixture
def legend():
    return FakeLegend()


@pytest.fixture
def notifications():
    return NotificationManager()


@pytest.fixture
def deferred_source():
    return DeferredTileSource


@pytest.fixture
def immediate_source():
    return ImmediateTileSource


@pytest.fixture
def tooltip():
    return FakeTooltip()


@pytest.fixture
def unit_source():
    return DeferredUnitSource
