"""
Resource potential lens.

The LensController owns the lens on/off state and turns plot data into
colored hexes on a named overlay layer. The host collaborators are passed
in at construction:

    overlay      create_layer(name), set_hex_color(layer, x, y, color), clear_layer(name)
    tile_source  request_plot_data(callback)   callback(plots or None), called later
    legend       show_legend(entries), hide_legend()

Plot data arrives asynchronously, so every request is tagged with the
activation cycle it belongs to. A callback whose cycle is no longer current
(the lens was switched off, or re-activated) is dropped.
"""

from core.config import (
    LENS_NAME,
    LENS_LAYER,
    LENS_ICON,
    EVENT_LENS_ACTIVATED,
    EVENT_LENS_DEACTIVATED,
    localize,
)
from core.logger_setup import get_logger
from core.resource_potential import (
    DEFAULT_PALETTE,
    classify,
    legend_entries,
    potential_color,
    validate_palette,
)
from core.terrain import Tile

log = get_logger("LensController")


class LensState:
    """On/off flag plus the token of the current activation cycle."""

    def __init__(self):
        self.active = False
        self.cycle = 0

    def begin_cycle(self, active):
        self.active = active
        self.cycle += 1
        return self.cycle

    def is_current(self, cycle):
        return self.active and cycle == self.cycle

    def __repr__(self):
        return f"LensState(active={self.active}, cycle={self.cycle})"


class LensController:
    def __init__(self, overlay, tile_source, legend, lens_name=LENS_NAME, layer_name=LENS_LAYER,
                 palette=None, localize=localize, notifications=None):
        self.overlay = overlay
        self.tile_source = tile_source
        self.legend = legend
        self.lens_name = lens_name
        self.layer_name = layer_name
        self.localize = localize
        self.notifications = notifications
        self.palette = validate_palette(palette or DEFAULT_PALETTE)
        self.legend_entries = legend_entries(self.palette, localize)

        self.state = LensState()
        self.last_draw_count = 0
        self.stale_discarded = 0
        self._subscriptions = []

        missing = [name for name, host in (("overlay", overlay), ("tile source", tile_source), ("legend", legend))
                   if host is None]
        self.available = not missing
        if missing:
            log.error(f"[Lens] {lens_name} disabled, missing host surface(s): {', '.join(missing)}")
            self.report_once("unavailable", localize("LOC_RESOURCE_LENS_UNAVAILABLE"), level="error")

    @property
    def active(self):
        return self.state.active

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def activate(self):
        """Switch the lens on (or redraw it if already on). Returns before plot data arrives."""
        if not self.available:
            log.warning(f"[Lens] Ignoring activation of unavailable lens {self.lens_name}")
            return

        was_active = self.state.active
        cycle = self.state.begin_cycle(active=True)
        log.info(f"[Lens] Activating {self.lens_name} (cycle {cycle}, redraw={was_active})")

        if was_active:
            # drop whatever the previous cycle drew
            self.overlay.clear_layer(self.layer_name)
        else:
            self.overlay.create_layer(self.layer_name)

        self.legend.show_legend(self.legend_entries)

        try:
            self.tile_source.request_plot_data(lambda plots: self._on_plot_data(cycle, plots))
        except Exception:
            log.exception(f"[Lens] Plot data request failed (cycle {cycle})")
            self._report_no_data()

    def deactivate(self):
        """Switch the lens off. Does nothing when already off."""
        if not self.state.active:
            log.debug(f"[Lens] {self.lens_name} already inactive")
            return

        cycle = self.state.begin_cycle(active=False)
        log.info(f"[Lens] Deactivating {self.lens_name} (cycle {cycle})")
        self.overlay.clear_layer(self.layer_name)
        self.legend.hide_legend()
        self.last_draw_count = 0

    def teardown(self):
        """Host is removing the lens: switch off and drop event subscriptions."""
        self.deactivate()
        for sub in self._subscriptions:
            sub.unsubscribe()
        self._subscriptions.clear()

    # ------------------------------------------------------------------
    # Plot data
    # ------------------------------------------------------------------
    def _on_plot_data(self, cycle, plots):
        if not self.state.is_current(cycle):
            self.stale_discarded += 1
            log.debug(f"[Lens] Discarding stale plot data from cycle {cycle} (now {self.state})")
            return

        if not plots:
            self._report_no_data()
            return

        drawn = 0
        for plot in plots:
            tile = plot if isinstance(plot, Tile) else Tile.from_dict(plot)
            color = potential_color(classify(tile), self.palette)
            if color is None:
                continue
            self.overlay.set_hex_color(self.layer_name, tile.x, tile.y, color)
            drawn += 1

        self.last_draw_count = drawn
        log.info(f"[Lens] Cycle {cycle}: highlighted {drawn}/{len(plots)} plots")

    def _report_no_data(self):
        self.last_draw_count = 0
        log.warning(f"[Lens] Could not get plot data for {self.lens_name}; overlay left empty")
        if self.notifications is not None:
            self.notifications.add(self.localize("LOC_RESOURCE_LENS_NO_DATA"), level="warning")

    def report_once(self, key, message, level="warning"):
        if self.notifications is not None:
            self.notifications.add_once(f"{self.lens_name}:{key}", message, level=level)

    # ------------------------------------------------------------------
    # Host lens-selection events
    # ------------------------------------------------------------------
    def on_lens_activated(self, lens_name):
        if lens_name == self.lens_name:
            self.activate()

    def on_lens_deactivated(self, lens_name):
        if lens_name == self.lens_name:
            self.deactivate()

    def attach(self, bus):
        """Listen to the host's lens-selection events. Returns the subscription handles."""
        if self._subscriptions:
            return list(self._subscriptions)
        self._subscriptions = [
            bus.subscribe(EVENT_LENS_ACTIVATED, self.on_lens_activated),
            bus.subscribe(EVENT_LENS_DEACTIVATED, self.on_lens_deactivated),
        ]
        return list(self._subscriptions)


def register_lens(controller, bus, lens_manager, ready, localize=localize):
    """
    Add the lens to the host's lens palette once the host signals it is ready,
    then start listening to lens-selection events.
    """
    def _register():
        if lens_manager is None:
            log.error(f"[Lens] Could not register {controller.lens_name} - lens manager not available")
            controller.report_once("no_manager", localize("LOC_RESOURCE_LENS_UNAVAILABLE"), level="error")
            return

        log.info(f"[Lens] Registering {controller.lens_name}")
        lens_manager.add_lens(
            controller.lens_name,
            localize("LOC_RESOURCE_POTENTIAL_LENS_NAME"),
            localize("LOC_RESOURCE_POTENTIAL_LENS_DESCRIPTION"),
            LENS_ICON,
            is_available=lambda: controller.available,
        )
        controller.attach(bus)
        log.info(f"[Lens] {controller.lens_name} registered successfully")

    ready.on_ready(_register)
