import math
import pygame
from pygame.math import Vector2
from core.config import HEX_SIZE, MAP_ORIGIN
from core.logger_setup import get_logger

log = get_logger("HexOverlay")


# --------------------------------------------------------------------
# Hex <-> pixel functions (pointy-topped, odd rows shifted right)
# --------------------------------------------------------------------
def offset_to_axial(x, y):
    q = x - (y - (y & 1)) // 2
    return q, y

def hex_to_pixel(x, y, origin=MAP_ORIGIN, size=HEX_SIZE, cam_offset=(0, 0)):
    q, r = offset_to_axial(x, y)
    px = size * math.sqrt(3) * (q + r/2) + origin[0] + cam_offset[0]
    py = size * 3/2 * r + origin[1] + cam_offset[1]
    return (px, py)

def hex_polygon(x, y, origin=MAP_ORIGIN, size=HEX_SIZE, cam_offset=(0, 0)):
    cx, cy = hex_to_pixel(x, y, origin, size, cam_offset)
    points = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        points.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return points

def contains_point(poly, point):
    """Ray casting point-in-polygon test."""
    poly = [Vector2(c) for c in poly]
    p = Vector2(point)
    inside = False
    j = len(poly) - 1
    for i in range(len(poly)):
        if ((poly[i].y > p.y) != (poly[j].y > p.y)) and \
        (p.x < (poly[j].x - poly[i].x) * (p.y - poly[i].y) / (poly[j].y - poly[i].y) + poly[i].x):
            inside = not inside
        j = i
    return inside


class HexOverlay:
    """
    Named hex layers drawn on top of the map.
    Each layer maps a plot position to an RGBA color; unset plots stay transparent.
    """

    def __init__(self, origin=MAP_ORIGIN, hex_size=HEX_SIZE):
        self.origin = origin
        self.hex_size = hex_size
        self.layers = {}

    # --- Overlay surface API used by the lens ---
    def create_layer(self, name):
        if name in self.layers:
            log.debug(f"[Overlay] Layer {name} already exists")
            return
        self.layers[name] = {}
        log.debug(f"[Overlay] Created layer {name}")

    def set_hex_color(self, layer, x, y, color):
        if layer not in self.layers:
            log.warning(f"[Overlay] set_hex_color on unknown layer {layer}, creating it")
            self.layers[layer] = {}
        self.layers[layer][(x, y)] = tuple(color)

    def clear_layer(self, name):
        if name in self.layers:
            count = len(self.layers[name])
            self.layers[name].clear()
            log.debug(f"[Overlay] Cleared {count} hexes from {name}")

    def colors(self, name):
        return dict(self.layers.get(name, {}))

    # --- Rendering ---
    def draw(self, surface, cam_offset=(0, 0)):
        if not any(self.layers.values()):
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for layer in self.layers.values():
            for (x, y), color in layer.items():
                points = hex_polygon(x, y, self.origin, self.hex_size, cam_offset)
                pygame.draw.polygon(overlay, color, points)
        surface.blit(overlay, (0, 0))
