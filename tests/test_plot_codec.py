"""Tests for the msgpack plot snapshot codec."""

import msgpack
import pytest

from client.plot_codec import (
    PLOT_COORD_EXT,
    PlotCodecError,
    PlotCoord,
    decode_snapshot,
    encode_snapshot,
    ext_decoder,
    ext_encoder,
)
from core.terrain import Terrain, Tile


def test_snapshot_preserves_plots_and_placements():
    tiles = [
        Tile(Terrain.GRASS, x=0, y=0, has_hills=True),
        Tile(Terrain.COAST, x=-3, y=12, is_shallow=True, has_resource=True),
        Tile(Terrain.OTHER, x=5, y=1, has_feature=True),
    ]
    units = [{"id": "UNIT_SCOUT", "x": 0, "y": 0}]
    buildings = [{"id": "BUILDING_GRANARY", "x": 5, "y": 1}]

    decoded_tiles, decoded_units, decoded_buildings = decode_snapshot(encode_snapshot(tiles, units, buildings))

    assert decoded_tiles == tiles
    assert decoded_units == units
    assert decoded_buildings == buildings


def test_coord_uses_ext_type():
    packed = ext_encoder(PlotCoord(-1, 70000))
    assert isinstance(packed, msgpack.ExtType)
    assert packed.code == PLOT_COORD_EXT
    assert len(packed.data) == 8
    assert ext_decoder(packed.code, packed.data) == PlotCoord(-1, 70000)


def test_unknown_ext_code_passes_through():
    assert ext_decoder(42, b"xyz") == msgpack.ExtType(42, b"xyz")


def test_encoder_rejects_unknown_objects():
    with pytest.raises(TypeError):
        ext_encoder(object())


def test_wrong_packet_type_is_rejected():
    data = msgpack.packb({"type": "full_galaxy_sync", "version": 1}, use_bin_type=True)
    with pytest.raises(PlotCodecError, match="Expected plot_snapshot"):
        decode_snapshot(data)


def test_wrong_version_is_rejected():
    data = msgpack.packb({"type": "plot_snapshot", "version": 99}, use_bin_type=True)
    with pytest.raises(PlotCodecError, match="version"):
        decode_snapshot(data)


def test_plot_without_coord_is_rejected():
    data = msgpack.packb({"type": "plot_snapshot", "version": 1,
                          "plots": [{"terrainType": "TERRAIN_GRASS"}]}, use_bin_type=True)
    with pytest.raises(PlotCodecError):
        decode_snapshot(data)


def test_garbage_is_rejected():
    with pytest.raises(PlotCodecError):
        decode_snapshot(b"\xc1\xc1\xc1")
    with pytest.raises(PlotCodecError):
        decode_snapshot(msgpack.packb([1, 2, 3]))
