# Screen setup
SCREEN_WIDTH = 1200 #in pixels
SCREEN_HEIGHT = 700 #in pixels
HEX_SIZE = 18
MAP_ORIGIN = (60, 60)
BACKGROUND_COLOR = (20, 20, 30)

# Map generation defaults
MAP_WIDTH = 28  # in tiles
MAP_HEIGHT = 20

# --------------------------------------------------------------------
# Lens
# --------------------------------------------------------------------
LENS_NAME = "RESOURCE_POTENTIAL_LENS"
LENS_LAYER = "RESOURCE_POTENTIAL_LAYER"
LENS_ICON = "ICON_RESOURCE_LENS"

# Colors are RGBA
LUXURY_COLOR = (255, 215, 0, 255)          # gold
STRATEGIC_COLOR = (255, 0, 0, 255)         # red
BONUS_COLOR = (0, 255, 0, 255)             # green
HIGH_POTENTIAL_COLOR = (255, 255, 255, 128)  # translucent white
NO_POTENTIAL_COLOR = (0, 0, 0, 0)          # transparent, never drawn

# --------------------------------------------------------------------
# Host events
# --------------------------------------------------------------------
EVENT_LENS_ACTIVATED = "LensActivated"
EVENT_LENS_DEACTIVATED = "LensDeactivated"
EVENT_TOOLTIP_SHOWN = "TooltipShown"
EVENT_TOOLTIP_HIDDEN = "TooltipHidden"

# Tooltip types
TOOLTIP_UNIT = "TOOLTIP_UNIT"
TOOLTIP_BUILDING = "TOOLTIP_BUILDING"
TOOLTIP_PLOT = "TOOLTIP_PLOT"
ENHANCED_TOOLTIP_TYPES = (TOOLTIP_UNIT, TOOLTIP_BUILDING)

# Tooltip styling
TOOLTIP_BG_COLOR = (230, 230, 230)
TOOLTIP_BORDER_COLOR = (100, 100, 100)
TOOLTIP_ENHANCED_BORDER_COLOR = (255, 215, 0)
TOOLTIP_TEXT_COLOR = (0, 0, 0)
TOOLTIP_INFO_COLOR = (70, 70, 70)

# --------------------------------------------------------------------
# Localization (English only, keys follow the game's LOC_ convention)
# --------------------------------------------------------------------
LOC_TEXT = {
    "LOC_RESOURCE_POTENTIAL_LENS_NAME": "Resource Potential",
    "LOC_RESOURCE_POTENTIAL_LENS_DESCRIPTION": "Highlights tiles by their potential for resources.",
    "LOC_RESOURCE_LENS_LEGEND_TITLE": "Resource Potential",
    "LOC_RESOURCE_LENS_LUXURY_POTENTIAL": "Luxury potential",
    "LOC_RESOURCE_LENS_STRATEGIC_POTENTIAL": "Strategic potential",
    "LOC_RESOURCE_LENS_BONUS_POTENTIAL": "Bonus potential",
    "LOC_RESOURCE_LENS_HIGH_POTENTIAL": "High potential",
    "LOC_RESOURCE_LENS_NO_DATA": "Resource lens: no plot data available.",
    "LOC_RESOURCE_LENS_UNAVAILABLE": "Resource lens unavailable.",
    "LOC_ENHANCED_TOOLTIP_TOGGLE": "Toggle enhanced tooltips",
    "LOC_ENHANCED_TOOLTIP_UNIT_INFO": "Unit details",
    "LOC_ENHANCED_TOOLTIP_BUILDING_INFO": "Building details",
    "LOC_ENHANCED_TOOLTIP_MOVEMENT": "Movement",
    "LOC_ENHANCED_TOOLTIP_COST": "Cost",
    "LOC_ENHANCED_TOOLTIP_UNAVAILABLE": "Enhanced tooltips unavailable.",
}


def localize(key):
    """Return the display text for a LOC_ key, or the key itself when unknown."""
    return LOC_TEXT.get(key, key)

# --------------------------------------------------------------------
# Base map colors (keyed by terrain wire name)
# --------------------------------------------------------------------
TERRAIN_COLORS = {
    "TERRAIN_GRASS": (80, 200, 120),
    "TERRAIN_PLAINS": (170, 190, 90),
    "TERRAIN_DESERT": (210, 180, 140),
    "TERRAIN_TUNDRA": (140, 150, 130),
    "TERRAIN_SNOW": (240, 240, 255),
    "TERRAIN_COAST": (90, 160, 230),
    "TERRAIN_OCEAN": (50, 100, 255),
    "TERRAIN_OTHER": (120, 120, 120),
}
HEX_BORDER_COLOR = (60, 60, 80)
RESOURCE_MARKER_COLOR = (40, 40, 40)
UNIT_MARKER_COLOR = (255, 255, 255)
BUILDING_MARKER_COLOR = (200, 120, 40)
