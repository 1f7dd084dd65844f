"""Tests for the asynchronous plot data source and the generated map."""

import asyncio

from client.plot_map import PlotMap
from client.plot_source import PlotDataSource, load_snapshot, save_snapshot
from core.config import LENS_LAYER
from core.lens import LensController
from core.terrain import Terrain


def run_request(source):
    async def scenario():
        received = []
        source.request_plot_data(received.append)
        assert received == []  # never delivered synchronously
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        return received

    return asyncio.run(scenario())


def test_generated_map_is_reproducible():
    a = PlotMap.generate(width=6, height=4, seed=3, unit_ids=["U1"], building_ids=["B1"])
    b = PlotMap.generate(width=6, height=4, seed=3, unit_ids=["U1"], building_ids=["B1"])

    assert a.tiles == b.tiles
    assert len(a.tiles) == 24
    assert a.units == b.units and a.buildings == b.buildings
    assert a.tile_at(5, 3) is not None
    assert a.tile_at(6, 0) is None


def test_generated_placements_are_on_land_and_distinct():
    plot_map = PlotMap.generate(width=10, height=10, seed=1, unit_ids=["U1", "U2"], building_ids=["B1"])
    positions = [(e["x"], e["y"]) for e in plot_map.units + plot_map.buildings]

    assert len(set(positions)) == len(positions)
    for x, y in positions:
        assert not plot_map.tile_at(x, y).terrain_type.is_water
    ux, uy = positions[0]
    assert plot_map.occupant_at(ux, uy) == ("unit", "U1")


def test_water_plots_have_no_hills():
    plot_map = PlotMap.generate(width=12, height=12, seed=9)
    for tile in plot_map.tiles:
        if tile.terrain_type.is_water:
            assert not tile.has_hills
        if tile.terrain_type is Terrain.COAST:
            assert tile.is_shallow


def test_request_delivers_map_plots_later():
    plot_map = PlotMap.generate(width=4, height=3, seed=2)
    source = PlotDataSource(plot_map=plot_map)

    received = run_request(source)
    assert received == [plot_map.tiles]
    assert source.requests == 1


def test_request_without_map_delivers_none():
    assert run_request(PlotDataSource()) == [None]


def test_snapshot_source(tmp_path):
    plot_map = PlotMap.generate(width=5, height=5, seed=4, unit_ids=["U1"])
    path = tmp_path / "maps" / "snapshot.msgpack"
    save_snapshot(plot_map, str(path))

    loaded = load_snapshot(str(path))
    assert loaded.tiles == plot_map.tiles
    assert loaded.units == plot_map.units

    assert run_request(PlotDataSource(snapshot_path=str(path))) == [plot_map.tiles]


def test_missing_or_corrupt_snapshot_delivers_none(tmp_path):
    assert run_request(PlotDataSource(snapshot_path=str(tmp_path / "missing.msgpack"))) == [None]

    corrupt = tmp_path / "corrupt.msgpack"
    corrupt.write_bytes(b"\xc1 not msgpack")
    assert load_snapshot(str(corrupt)) is None
    assert run_request(PlotDataSource(snapshot_path=str(corrupt))) == [None]


def test_lens_with_async_source_and_quick_toggle(overlay, legend):
    """Lens switched off before the loop delivers: nothing is drawn."""
    plot_map = PlotMap.generate(width=6, height=6, seed=5)

    async def scenario():
        lens = LensController(overlay, PlotDataSource(plot_map=plot_map), legend)
        lens.activate()
        lens.deactivate()
        await asyncio.sleep(0)
        off = dict(overlay.layers[LENS_LAYER])

        lens.activate()
        await asyncio.sleep(0)
        return off, lens.last_draw_count, dict(overlay.layers[LENS_LAYER])

    off, drawn, on = asyncio.run(scenario())
    assert off == {}
    assert drawn == len(on) > 0
