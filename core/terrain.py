from enum import Enum


class Terrain(Enum):
    GRASS = "TERRAIN_GRASS"
    PLAINS = "TERRAIN_PLAINS"
    DESERT = "TERRAIN_DESERT"
    TUNDRA = "TERRAIN_TUNDRA"
    SNOW = "TERRAIN_SNOW"
    COAST = "TERRAIN_COAST"
    OCEAN = "TERRAIN_OCEAN"
    OTHER = "TERRAIN_OTHER"

    @classmethod
    def from_name(cls, name):
        """Map a host terrain name to a Terrain; unknown names become OTHER."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER

    @property
    def is_water(self):
        return self in (Terrain.COAST, Terrain.OCEAN)


class Tile:
    """Read-only view of one map plot as delivered by the host."""

    __slots__ = ("terrain_type", "has_hills", "has_feature", "is_shallow", "has_resource", "x", "y")

    def __init__(self, terrain_type, x=0, y=0, has_hills=False, has_feature=False,
                 is_shallow=False, has_resource=False):
        object.__setattr__(self, "terrain_type", terrain_type)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "has_hills", bool(has_hills))
        object.__setattr__(self, "has_feature", bool(has_feature))
        object.__setattr__(self, "is_shallow", bool(is_shallow))
        object.__setattr__(self, "has_resource", bool(has_resource))

    def __setattr__(self, name, value):
        raise AttributeError(f"Tile is read-only (tried to set '{name}')")

    @property
    def position(self):
        return (self.x, self.y)

    # --- Serialization with the host plot format ---
    def to_dict(self):
        terrain = self.terrain_type.value if isinstance(self.terrain_type, Terrain) else self.terrain_type
        return {
            "terrainType": terrain,
            "hasHills": self.has_hills,
            "hasFeature": self.has_feature,
            "isShallow": self.is_shallow,
            "hasResource": self.has_resource,
            "x": self.x,
            "y": self.y,
        }

    @classmethod
    def from_dict(cls, data: dict):
        """
        Build a Tile from a host plot dict.
        Missing flags default to False, unknown terrain names to Terrain.OTHER.
        """
        return cls(
            terrain_type=Terrain.from_name(data.get("terrainType")),
            x=data.get("x", 0),
            y=data.get("y", 0),
            has_hills=data.get("hasHills", False),
            has_feature=data.get("hasFeature", False),
            is_shallow=data.get("isShallow", False),
            has_resource=data.get("hasResource", False),
        )

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return all(getattr(self, s) == getattr(other, s) for s in self.__slots__)

    def __hash__(self):
        return hash(tuple(getattr(self, s) for s in self.__slots__))

    def __repr__(self):
        return (f"Tile(terrain={self.terrain_type}, pos=({self.x}, {self.y}), hills={self.has_hills}, "
                f"feature={self.has_feature}, shallow={self.is_shallow}, resource={self.has_resource})")
