import msgpack
from core.terrain import Tile

# ExtType code for PlotCoord, must be 0–127
PLOT_COORD_EXT = 1
SNAPSHOT_TYPE = "plot_snapshot"
SNAPSHOT_VERSION = 1


class PlotCodecError(ValueError):
    pass


class PlotCoord:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def pack(self):
        # Pack two 32-bit integers → 8 bytes
        return self.x.to_bytes(4, 'big', signed=True) + \
               self.y.to_bytes(4, 'big', signed=True)

    @classmethod
    def unpack(cls, data):
        if len(data) != 8:
            raise PlotCodecError(f"PlotCoord payload must be 8 bytes, got {len(data)}")
        x = int.from_bytes(data[0:4], 'big', signed=True)
        y = int.from_bytes(data[4:8], 'big', signed=True)
        return cls(x, y)

    def __eq__(self, other):
        return isinstance(other, PlotCoord) and (self.x, self.y) == (other.x, other.y)

    def __repr__(self):
        return f"PlotCoord({self.x}, {self.y})"


# Packer and Unpacker hooks
def ext_encoder(obj):
    if isinstance(obj, PlotCoord):
        return msgpack.ExtType(PLOT_COORD_EXT, obj.pack())
    raise TypeError(f"Cannot serialize {type(obj).__name__}")

def ext_decoder(code, data):
    """
    MsgPack ext_hook for decoding custom types.
    """
    if code == PLOT_COORD_EXT:
        return PlotCoord.unpack(data)
    return msgpack.ExtType(code, data)


# --------------------------------------------------------------------
# Snapshots
# --------------------------------------------------------------------
def _plot_to_msgpack_dict(tile):
    data = tile.to_dict()
    data["coord"] = PlotCoord(data.pop("x"), data.pop("y"))
    return data

def _plot_from_msgpack_dict(data):
    coord = data.get("coord")
    if not isinstance(coord, PlotCoord):
        raise PlotCodecError(f"Plot entry without coord: {data}")
    plot = dict(data)
    del plot["coord"]
    plot["x"], plot["y"] = coord.x, coord.y
    return Tile.from_dict(plot)

def _placement_to_msgpack(entry):
    return {"id": entry["id"], "coord": PlotCoord(entry["x"], entry["y"])}

def _placement_from_msgpack(entry):
    coord = entry["coord"]
    return {"id": entry["id"], "x": coord.x, "y": coord.y}


def encode_snapshot(tiles, units=(), buildings=()):
    """Pack plots plus unit/building placements into a msgpack snapshot."""
    packet = {
        "type": SNAPSHOT_TYPE,
        "version": SNAPSHOT_VERSION,
        "plots": [_plot_to_msgpack_dict(t) for t in tiles],
        "units": [_placement_to_msgpack(u) for u in units],
        "buildings": [_placement_to_msgpack(b) for b in buildings],
    }
    return msgpack.packb(packet, default=ext_encoder, use_bin_type=True)


def decode_snapshot(data):
    """
    Unpack a snapshot produced by encode_snapshot().
    Returns (tiles, units, buildings); raises PlotCodecError on malformed data.
    """
    try:
        packet = msgpack.unpackb(data, ext_hook=ext_decoder, raw=False)
    except PlotCodecError:
        raise
    except (msgpack.exceptions.ExtraData, msgpack.exceptions.UnpackException, ValueError) as e:
        raise PlotCodecError(f"Invalid snapshot data: {e}") from e

    if not isinstance(packet, dict) or packet.get("type") != SNAPSHOT_TYPE:
        got = packet.get("type") if isinstance(packet, dict) else type(packet).__name__
        raise PlotCodecError(f"Expected {SNAPSHOT_TYPE}, got {got}")
    if packet.get("version") != SNAPSHOT_VERSION:
        raise PlotCodecError(f"Unsupported snapshot version {packet.get('version')}")

    try:
        tiles = [_plot_from_msgpack_dict(p) for p in packet.get("plots", [])]
        units = [_placement_from_msgpack(u) for u in packet.get("units", [])]
        buildings = [_placement_from_msgpack(b) for b in packet.get("buildings", [])]
    except (KeyError, TypeError, AttributeError) as e:
        raise PlotCodecError(f"Malformed snapshot entry: {e}") from e
    return tiles, units, buildings
