import asyncio
import logging
import os
import pygame
from client.client_config import CONFIG_PATH, load_client_config, load_palette, save_client_config
from client.game import Game
from client.gui import GameGUI
from client.input import InputHandler
from client.plot_map import PlotMap
from client.plot_source import load_snapshot, save_snapshot
from core.logger_setup import configure_logging, get_logger
from core.registry import REGISTRY, load_registry

log = get_logger("Main")


def build_plot_map(config):
    """Map from the configured snapshot, or a freshly generated one (saved to the snapshot path if set)."""
    snapshot_path = config.get("snapshot")
    if snapshot_path and os.path.exists(snapshot_path):
        plot_map = load_snapshot(snapshot_path)
        if plot_map is not None:
            return plot_map

    map_cfg = config.get("map", {})
    plot_map = PlotMap.generate(
        width=map_cfg.get("width"),
        height=map_cfg.get("height"),
        seed=map_cfg.get("seed"),
        unit_ids=list(REGISTRY["units"]),
        building_ids=list(REGISTRY["buildings"]),
    )
    if snapshot_path:
        save_snapshot(plot_map, snapshot_path)
    return plot_map


async def main_async(config_path=CONFIG_PATH):
    config = load_client_config(config_path)
    level = getattr(logging, str(config.get("log_level", "DEBUG")).upper(), logging.DEBUG)
    configure_logging(level=level)
    load_registry(config.get("data_folder", "data/"))

    plot_map = build_plot_map(config)
    game = Game(
        plot_map,
        palette=load_palette(config),
        snapshot_path=config.get("snapshot"),
        tooltips_enabled=config.get("tooltips_enabled", True),
    )
    gui = GameGUI(game)
    game.setup_mods(gui)
    input_handler = InputHandler(game, gui.camera)

    # Host services are up: lens registration and lens bar wiring run now
    game.ready.fire()

    clock = pygame.time.Clock()
    try:
        while gui.running:
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                gui.ui_manager.process_events(event)
                if input_handler.handle_event(event) == "quit":
                    gui.running = False

            input_handler.handle_keys()
            game.update(dt)
            gui.ui_manager.update(dt)
            gui.render(dt)

            await asyncio.sleep(0)
    finally:
        config["tooltips_enabled"] = game.tooltip_enhancer.enabled
        save_client_config(config, config_path)
        game.shutdown()
        pygame.quit()
        log.info("Client closed.")

if __name__ == "__main__":
    asyncio.run(main_async())
