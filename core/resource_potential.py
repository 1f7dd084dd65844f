"""
Resource potential classification.

Decides, for a single map plot, which resource highlight (if any) the
resource lens should draw on it, and owns the category -> color table
used by both the overlay and the legend.
"""

from enum import Enum

from core.config import (
    LUXURY_COLOR,
    STRATEGIC_COLOR,
    BONUS_COLOR,
    HIGH_POTENTIAL_COLOR,
    NO_POTENTIAL_COLOR,
    localize,
)
from core.terrain import Terrain


class ResourcePotential(Enum):
    LUXURY = "Luxury"
    STRATEGIC = "Strategic"
    BONUS = "Bonus"
    HIGH = "High"
    NONE = "None"


# Legend order
HIGHLIGHTED_POTENTIALS = (
    ResourcePotential.LUXURY,
    ResourcePotential.STRATEGIC,
    ResourcePotential.BONUS,
    ResourcePotential.HIGH,
)

DEFAULT_PALETTE = {
    ResourcePotential.LUXURY: LUXURY_COLOR,
    ResourcePotential.STRATEGIC: STRATEGIC_COLOR,
    ResourcePotential.BONUS: BONUS_COLOR,
    ResourcePotential.HIGH: HIGH_POTENTIAL_COLOR,
}

LEGEND_LABEL_KEYS = {
    ResourcePotential.LUXURY: "LOC_RESOURCE_LENS_LUXURY_POTENTIAL",
    ResourcePotential.STRATEGIC: "LOC_RESOURCE_LENS_STRATEGIC_POTENTIAL",
    ResourcePotential.BONUS: "LOC_RESOURCE_LENS_BONUS_POTENTIAL",
    ResourcePotential.HIGH: "LOC_RESOURCE_LENS_HIGH_POTENTIAL",
}

_LAND_FERTILE = (Terrain.GRASS, Terrain.PLAINS)
_LAND_HARSH = (Terrain.DESERT, Terrain.TUNDRA)
_WATER = (Terrain.COAST, Terrain.OCEAN)


class PaletteError(ValueError):
    """Raised when a potential color table cannot be rendered unambiguously."""


def classify(tile):
    """Return the ResourcePotential of a tile. Total: never raises on unknown terrain."""
    if tile.has_resource:
        return ResourcePotential.NONE

    terrain = Terrain.from_name(tile.terrain_type)
    if terrain in _LAND_FERTILE:
        return ResourcePotential.LUXURY if tile.has_hills else ResourcePotential.BONUS
    if terrain in _LAND_HARSH:
        if tile.has_hills or tile.has_feature:
            return ResourcePotential.STRATEGIC
        return ResourcePotential.HIGH
    if terrain is Terrain.SNOW:
        return ResourcePotential.NONE
    if terrain in _WATER:
        return ResourcePotential.BONUS if tile.is_shallow else ResourcePotential.HIGH
    return ResourcePotential.NONE


def potential_color(potential, palette=None):
    """Color for a potential, or None when nothing should be drawn."""
    if potential is ResourcePotential.NONE:
        return None
    palette = palette or DEFAULT_PALETTE
    return palette[potential]


def _check_color(potential, color):
    if not isinstance(color, (tuple, list)) or len(color) != 4:
        raise PaletteError(f"{potential.value}: color must be an RGBA tuple, got {color!r}")
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise PaletteError(f"{potential.value}: invalid channel {channel!r} in {color!r}")
    if color[3] == 0:
        raise PaletteError(f"{potential.value}: fully transparent color would never be visible")
    if tuple(color) == NO_POTENTIAL_COLOR:
        raise PaletteError(f"{potential.value}: color collides with the no-potential sentinel")


def validate_palette(palette):
    """
    Check that every highlighted potential has a visible RGBA color,
    distinct from the no-draw sentinel and from the other categories.
    Returns a normalised copy with tuple colors.
    """
    normalised = {}
    for potential in HIGHLIGHTED_POTENTIALS:
        if potential not in palette:
            raise PaletteError(f"Missing color for {potential.value}")
        color = palette[potential]
        _check_color(potential, color)
        normalised[potential] = tuple(color)

    seen = {}
    for potential, color in normalised.items():
        if color in seen:
            raise PaletteError(f"{potential.value} and {seen[color].value} share color {color}")
        seen[color] = potential
    return normalised


def legend_entries(palette=None, localize=localize):
    """Legend rows for the highlighted potentials, in display order."""
    palette = palette or DEFAULT_PALETTE
    return [
        {
            "potential": potential,
            "label": localize(LEGEND_LABEL_KEYS[potential]),
            "color": palette[potential],
        }
        for potential in HIGHLIGHTED_POTENTIALS
    ]
