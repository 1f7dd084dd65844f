import pygame
import pygame_gui
from core.config import *
from client.camera import Camera
from client.hex_overlay import hex_polygon, hex_to_pixel
from client.legend_panel import LegendPanel
from client.lens_bar import LensBar
from client.notification_panel import NotificationPanel
from client.tooltip_panel import TooltipPanel


class GameGUI:
    def __init__(self, game, with_lens_bar=True):
        self.game = game
        pygame.init()
        pygame.display.set_caption("Resource Potential Lens")

        # --- Setup display ---
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        self.ui_manager = pygame_gui.UIManager((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.running = True
        self.font = pygame.font.SysFont("arial", 16)

        tiles = game.plot_map.tiles
        world_w = (max((t.x for t in tiles), default=0) + 2) * HEX_SIZE * 2 + MAP_ORIGIN[0]
        world_h = (max((t.y for t in tiles), default=0) + 2) * HEX_SIZE * 1.5 + MAP_ORIGIN[1]
        self.camera = Camera(SCREEN_WIDTH, SCREEN_HEIGHT, int(world_w), int(world_h))

        # --- Panels ---
        self.notification_panel = NotificationPanel(self.ui_manager, pygame.Rect(10, SCREEN_HEIGHT - 170, 320, 160))
        self.legend_panel = LegendPanel(self.ui_manager, pygame.Rect(SCREEN_WIDTH - 230, 60, 220, 140))
        self.tooltip_panel = TooltipPanel(self.font)

        lens_bar_container = None
        if with_lens_bar:
            lens_bar_container = pygame_gui.elements.UIPanel(
                relative_rect=pygame.Rect(SCREEN_WIDTH - 250, 8, 240, 46),
                manager=self.ui_manager,
                starting_height=3,
                object_id="#lens_bar"
            )
        self.lens_bar = LensBar(self.ui_manager, lens_bar_container, notifications=game.notifications)

    def populate_lens_bar(self):
        """Add the lens and tooltip buttons once the host is ready."""
        game = self.game
        self.lens_bar.add_lens_button(game.lens_manager, game.lens.lens_name, "Resources")
        self.lens_bar.add_button(
            "tooltips", "Tooltips", localize("LOC_ENHANCED_TOOLTIP_TOGGLE"), game.toggle_tooltips,
            object_id="#tooltip_toggle_button")

    def render(self, dt):
        """Draw the full scene."""
        self.screen.fill(BACKGROUND_COLOR)
        cam_offset = self.camera.get_offset()
        self.draw_map(cam_offset)
        #draw order is important ! map, then the lens overlay, then pygame_gui panels, then the tooltip
        self.game.overlay.draw(self.screen, cam_offset)
        self.ui_manager.draw_ui(self.screen)
        self.tooltip_panel.draw(self.screen)
        pygame.display.update()

    def draw_map(self, cam_offset=(0, 0)):
        plot_map = self.game.plot_map
        for tile in plot_map.tiles:
            points = hex_polygon(tile.x, tile.y, MAP_ORIGIN, HEX_SIZE, cam_offset)
            color = TERRAIN_COLORS.get(tile.terrain_type.value, TERRAIN_COLORS["TERRAIN_OTHER"])
            pygame.draw.polygon(self.screen, color, points)
            # Border
            pygame.draw.polygon(self.screen, HEX_BORDER_COLOR, points, 1)
            if tile.has_resource:
                hx, hy = hex_to_pixel(tile.x, tile.y, MAP_ORIGIN, HEX_SIZE, cam_offset)
                pygame.draw.circle(self.screen, RESOURCE_MARKER_COLOR, (int(hx), int(hy)), 3)

        for marker_list, color in ((plot_map.units, UNIT_MARKER_COLOR), (plot_map.buildings, BUILDING_MARKER_COLOR)):
            for entry in marker_list:
                hx, hy = hex_to_pixel(entry["x"], entry["y"], MAP_ORIGIN, HEX_SIZE, cam_offset)
                rect = pygame.Rect(0, 0, 10, 10)
                rect.center = (int(hx), int(hy))
                pygame.draw.rect(self.screen, color, rect)
