import random
from core.config import MAP_WIDTH, MAP_HEIGHT
from core.logger_setup import get_logger
from core.terrain import Terrain, Tile

log = get_logger("PlotMap")

TERRAIN_WEIGHTS = {
    Terrain.GRASS: 0.22,
    Terrain.PLAINS: 0.2,
    Terrain.DESERT: 0.1,
    Terrain.TUNDRA: 0.08,
    Terrain.SNOW: 0.05,
    Terrain.COAST: 0.15,
    Terrain.OCEAN: 0.15,
    Terrain.OTHER: 0.05,
}

RESOURCE_CHANCE = 0.12
HILLS_CHANCE = 0.25
FEATURE_CHANCE = 0.2


class PlotMap:
    """
    Host-side map: the plots served to the lens plus unit and building
    placements used for tooltips.
    """

    def __init__(self, tiles, units=None, buildings=None):
        self.tiles = list(tiles)
        self.units = list(units or [])
        self.buildings = list(buildings or [])
        self._by_pos = {t.position: t for t in self.tiles}

    @classmethod
    def generate(cls, width=MAP_WIDTH, height=MAP_HEIGHT, seed=None, unit_ids=(), building_ids=()):
        rng = random.Random(seed)
        terrains = list(TERRAIN_WEIGHTS)
        weights = list(TERRAIN_WEIGHTS.values())

        tiles = []
        for y in range(height):
            for x in range(width):
                terrain = rng.choices(terrains, weights=weights)[0]
                water = terrain.is_water
                tiles.append(Tile(
                    terrain_type=terrain,
                    x=x,
                    y=y,
                    has_hills=not water and rng.random() < HILLS_CHANCE,
                    has_feature=not water and rng.random() < FEATURE_CHANCE,
                    is_shallow=terrain is Terrain.COAST or (water and rng.random() < 0.2),
                    has_resource=rng.random() < RESOURCE_CHANCE,
                ))

        land = [t for t in tiles if not t.terrain_type.is_water]
        rng.shuffle(land)
        units = [{"id": uid, "x": t.x, "y": t.y} for uid, t in zip(unit_ids, land)]
        land = land[len(units):]
        buildings = [{"id": bid, "x": t.x, "y": t.y} for bid, t in zip(building_ids, land)]

        log.info(f"[PlotMap] Generated {width}x{height} map (seed={seed}) "
                 f"with {len(units)} units and {len(buildings)} buildings")
        return cls(tiles, units, buildings)

    def tile_at(self, x, y):
        return self._by_pos.get((x, y))

    def occupant_at(self, x, y):
        """Return ("unit" | "building", id) for the first occupant of a plot, or None."""
        for unit in self.units:
            if (unit["x"], unit["y"]) == (x, y):
                return "unit", unit["id"]
        for building in self.buildings:
            if (building["x"], building["y"]) == (x, y):
                return "building", building["id"]
        return None
