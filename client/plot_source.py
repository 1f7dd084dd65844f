import asyncio
import os
from client.plot_codec import PlotCodecError, decode_snapshot, encode_snapshot
from client.plot_map import PlotMap
from core.logger_setup import get_logger

log = get_logger("PlotSource")


class PlotDataSource:
    """
    Serves plot data to the lens the way the game does: the request returns
    immediately and the callback runs on a later loop iteration.

    Plots come from a msgpack snapshot file when one is configured, otherwise
    from the in-memory map.
    """

    def __init__(self, plot_map=None, snapshot_path=None, latency=0.0):
        self.plot_map = plot_map
        self.snapshot_path = snapshot_path
        self.latency = latency
        self.requests = 0

    def request_plot_data(self, callback):
        self.requests += 1
        loop = asyncio.get_running_loop()
        if self.latency > 0:
            loop.call_later(self.latency, self._deliver, callback)
        else:
            loop.call_soon(self._deliver, callback)

    def _deliver(self, callback):
        callback(self.load_plots())

    def load_plots(self):
        """Current plots, or None when no data can be produced."""
        if self.snapshot_path:
            snapshot = load_snapshot(self.snapshot_path)
            return snapshot.tiles if snapshot else None
        if self.plot_map is None:
            log.warning("[PlotSource] No map loaded yet.")
            return None
        return list(self.plot_map.tiles)


def load_snapshot(path):
    """Read a msgpack snapshot into a PlotMap; None (logged) on failure."""
    if not os.path.exists(path):
        log.warning(f"[PlotSource] Missing snapshot file: {path}")
        return None
    try:
        with open(path, "rb") as f:
            tiles, units, buildings = decode_snapshot(f.read())
    except (OSError, PlotCodecError):
        log.exception(f"[PlotSource] Failed to read snapshot {path}")
        return None
    log.debug(f"[PlotSource] Loaded {len(tiles)} plots from {path}")
    return PlotMap(tiles, units, buildings)


def save_snapshot(plot_map, path):
    data = encode_snapshot(plot_map.tiles, plot_map.units, plot_map.buildings)
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    log.info(f"[PlotSource] Saved {len(plot_map.tiles)} plots to {path}.")
