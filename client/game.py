from core.config import (
    EVENT_TOOLTIP_HIDDEN,
    EVENT_TOOLTIP_SHOWN,
    HEX_SIZE,
    TOOLTIP_BUILDING,
    TOOLTIP_PLOT,
    TOOLTIP_UNIT,
    localize,
)
from core.events import EventBus, HostReadySignal
from core.lens import LensController, register_lens
from core.logger_setup import get_logger
from core.notifications import NotificationManager
from core.registry import RegistryUnitSource, display_name
from core.resource_potential import classify
from core.tooltip import TooltipEnhancer
from client.hex_overlay import HexOverlay, contains_point, hex_polygon, hex_to_pixel
from client.lens_manager import LensManager
from client.plot_source import PlotDataSource

log = get_logger("GameClient")


class Game:
    """Host state: the map, the event bus and the mod components wired to the GUI."""

    def __init__(self, plot_map, palette=None, snapshot_path=None, tooltips_enabled=True):
        self.plot_map = plot_map
        self.palette = palette
        self.tooltips_enabled = tooltips_enabled
        self.bus = EventBus()
        self.ready = HostReadySignal()
        self.notifications = NotificationManager()
        self.overlay = HexOverlay()
        self.plot_source = PlotDataSource(plot_map=plot_map, snapshot_path=snapshot_path)
        self.lens_manager = LensManager(self.bus)
        self.lens = None
        self.tooltip_enhancer = None
        self.hovered = None
        self.gui = None #set later to prevent circular references

    def setup_mods(self, gui):
        """Create the lens and the tooltip enhancer against the GUI's sinks."""
        self.gui = gui
        self.lens = LensController(
            overlay=self.overlay,
            tile_source=self.plot_source,
            legend=gui.legend_panel,
            palette=self.palette,
            notifications=self.notifications,
        )
        register_lens(self.lens, self.bus, self.lens_manager, self.ready)

        self.tooltip_enhancer = TooltipEnhancer(
            gui.tooltip_panel,
            RegistryUnitSource(),
            notifications=self.notifications,
            enabled=self.tooltips_enabled,
        )
        self.tooltip_enhancer.attach(self.bus)
        self.ready.on_ready(gui.populate_lens_bar)

    def shutdown(self):
        if self.lens is not None:
            self.lens.teardown()
        if self.tooltip_enhancer is not None:
            self.tooltip_enhancer.detach()

    def update(self, dt):
        """Advance game logic each frame (non-UI)."""
        self.gui.notification_panel.update(self.notifications.get_visible())

    # ------------------------------------------------------------------
    # Hover / tooltips
    # ------------------------------------------------------------------
    def plot_at_pixel(self, pos, cam_offset=(0, 0)):
        """Plot under a screen position, or None."""
        origin = self.overlay.origin
        best, best_dist = None, None
        for tile in self.plot_map.tiles:
            cx, cy = hex_to_pixel(tile.x, tile.y, origin, HEX_SIZE, cam_offset)
            dist = (cx - pos[0]) ** 2 + (cy - pos[1]) ** 2
            if best_dist is None or dist < best_dist:
                best, best_dist = tile, dist
        if best is None or best_dist > HEX_SIZE ** 2:
            return None
        if not contains_point(hex_polygon(best.x, best.y, origin, HEX_SIZE, cam_offset), pos):
            return None
        return best

    def tooltip_for(self, tile):
        """(tooltip_type, tooltip_id, base_text) for a plot."""
        occupant = self.plot_map.occupant_at(tile.x, tile.y)
        if occupant is not None:
            kind, entry_id = occupant
            if kind == "unit":
                return TOOLTIP_UNIT, entry_id, display_name("units", entry_id)
            return TOOLTIP_BUILDING, entry_id, display_name("buildings", entry_id)

        terrain = tile.terrain_type.name.title()
        details = [terrain]
        if tile.has_hills:
            details.append("Hills")
        if tile.has_feature:
            details.append("Feature")
        text = ", ".join(details)
        if tile.has_resource:
            text += "\nResource present"
        elif self.lens is not None and self.lens.active:
            text += f"\n{classify(tile).value} potential"
        return TOOLTIP_PLOT, tile.position, text

    def on_mouse_motion(self, pos, cam_offset=(0, 0)):
        tile = self.plot_at_pixel(pos, cam_offset)
        tooltip = self.gui.tooltip_panel
        if tile is None:
            if self.hovered is not None:
                self.hovered = None
                tooltip.hide()
                self.bus.emit(EVENT_TOOLTIP_HIDDEN)
            return

        if tile is self.hovered:
            tooltip.move(pos)
            return

        self.hovered = tile
        tooltip_type, tooltip_id, text = self.tooltip_for(tile)
        tooltip.show(text, pos)
        self.bus.emit(EVENT_TOOLTIP_SHOWN, tooltip_type, tooltip_id)

    def toggle_lens(self):
        if self.lens is None:
            return False
        return self.lens_manager.toggle_lens(self.lens.lens_name)

    def toggle_tooltips(self):
        if self.tooltip_enhancer is None:
            return False
        enabled = self.tooltip_enhancer.toggle()
        self.notifications.add(
            f"{localize('LOC_ENHANCED_TOOLTIP_TOGGLE')}: {'on' if enabled else 'off'}")
        return enabled
