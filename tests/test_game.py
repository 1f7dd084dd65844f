"""Host wiring: lens registration on host-ready, lens toggling and hover tooltips."""

import asyncio

from client.game import Game
from client.hex_overlay import hex_to_pixel
from client.plot_map import PlotMap
from core.config import HEX_SIZE, LENS_LAYER, LENS_NAME, TOOLTIP_PLOT, TOOLTIP_UNIT
from core.registry import REGISTRY
from core.terrain import Terrain, Tile


class StubTooltip:
    def __init__(self):
        self.text = None
        self.pos = None
        self.enhanced = False
        self.sections = []

    def show(self, text, pos):
        self.text, self.pos = text, pos
        self.enhanced = False
        self.sections = []

    def move(self, pos):
        self.pos = pos

    def hide(self):
        self.text = None

    def mark_enhanced(self):
        self.enhanced = True

    def add_section(self, lines, style="info"):
        self.sections.append((style, list(lines)))


class StubGUI:
    def __init__(self, legend):
        self.legend_panel = legend
        self.tooltip_panel = StubTooltip()
        self.lens_bar_populated = False

    def populate_lens_bar(self):
        self.lens_bar_populated = True


def small_map():
    tiles = [
        Tile(Terrain.GRASS, x=0, y=0, has_hills=True),
        Tile(Terrain.DESERT, x=1, y=0),
        Tile(Terrain.SNOW, x=0, y=1),
        Tile(Terrain.OCEAN, x=1, y=1),
    ]
    return PlotMap(tiles, units=[{"id": "UNIT_SCOUT", "x": 1, "y": 0}])


def make_game(legend):
    game = Game(small_map())
    gui = StubGUI(legend)
    game.setup_mods(gui)
    return game, gui


def test_lens_registered_only_after_host_ready(legend):
    game, gui = make_game(legend)
    assert LENS_NAME not in game.lens_manager.lenses
    assert not gui.lens_bar_populated

    game.ready.fire()
    assert LENS_NAME in game.lens_manager.lenses
    assert gui.lens_bar_populated


def test_toggle_lens_draws_then_clears(legend):
    game, _ = make_game(legend)
    game.ready.fire()

    async def scenario():
        game.toggle_lens()
        await asyncio.sleep(0)
        drawn = game.overlay.colors(LENS_LAYER)
        game.toggle_lens()
        return drawn

    drawn = asyncio.run(scenario())
    assert set(drawn) == {(0, 0), (1, 0), (1, 1)}
    assert game.overlay.colors(LENS_LAYER) == {}
    assert not legend.visible


def test_hover_shows_plot_and_unit_tooltips(legend):
    REGISTRY["units"]["UNIT_SCOUT"] = {"id": "UNIT_SCOUT", "name": "Scout", "movement": 3, "cost": 30}
    try:
        game, gui = make_game(legend)
        shown = []
        game.bus.subscribe("TooltipShown", lambda t, i: shown.append((t, i)))
        origin = game.overlay.origin

        game.on_mouse_motion(hex_to_pixel(0, 0, origin, HEX_SIZE))
        assert gui.tooltip_panel.text == "Grass, Hills"
        assert shown[-1] == (TOOLTIP_PLOT, (0, 0))

        async def hover_unit():
            game.on_mouse_motion(hex_to_pixel(1, 0, origin, HEX_SIZE))
            await asyncio.sleep(0)

        asyncio.run(hover_unit())
        assert gui.tooltip_panel.text == "Scout"
        assert shown[-1] == (TOOLTIP_UNIT, "UNIT_SCOUT")
        assert gui.tooltip_panel.enhanced
        assert ("stats", ["Movement: 3", "Cost: 30"]) in gui.tooltip_panel.sections

        game.on_mouse_motion((-500, -500))
        assert gui.tooltip_panel.text is None
    finally:
        REGISTRY["units"].pop("UNIT_SCOUT", None)


def test_plot_at_pixel_misses_outside_map(legend):
    game, _ = make_game(legend)
    assert game.plot_at_pixel((5000, 5000)) is None
    center = hex_to_pixel(1, 1, game.overlay.origin, HEX_SIZE)
    assert game.plot_at_pixel(center).position == (1, 1)
