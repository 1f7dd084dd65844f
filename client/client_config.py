# client_config.py
import json
from pathlib import Path
from core.config import MAP_WIDTH, MAP_HEIGHT
from core.logger_setup import get_logger
from core.resource_potential import DEFAULT_PALETTE, PaletteError, ResourcePotential, validate_palette

log = get_logger("ClientConfig")

CONFIG_PATH = Path("client_config.json")

DEFAULT_CONFIG = {
    "palette": {},
    "tooltips_enabled": True,
    "map": {"width": MAP_WIDTH, "height": MAP_HEIGHT, "seed": None},
    "snapshot": None,
    "data_folder": "data/",
    "log_level": "DEBUG",
}


def load_client_config(path=CONFIG_PATH):
    """User config merged over DEFAULT_CONFIG. A missing or broken file gives the defaults."""
    config = json.loads(json.dumps(DEFAULT_CONFIG))
    path = Path(path)
    if not path.exists():
        return config
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"⚠️ Failed to load client config {path}: {e}")
        return config
    if not isinstance(data, dict):
        log.warning(f"⚠️ Client config {path} must be a JSON object, ignoring it")
        return config

    for key, value in data.items():
        if isinstance(config.get(key), dict) and isinstance(value, dict):
            config[key].update(value)
        else:
            config[key] = value
    return config


def save_client_config(data, path=CONFIG_PATH):
    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        log.error(f"⚠️ Failed to save client config: {e}")
        return False
    return True


def load_palette(config):
    """
    Lens colors with the user's overrides, e.g. {"palette": {"Luxury": [255, 200, 0, 255]}}.
    Invalid overrides are logged and the default palette is used instead.
    """
    overrides = config.get("palette") or {}
    palette = dict(DEFAULT_PALETTE)
    for name, color in overrides.items():
        try:
            potential = ResourcePotential(name)
        except ValueError:
            log.warning(f"[Config] Unknown resource potential '{name}' in palette")
            continue
        if potential is ResourcePotential.NONE:
            log.warning("[Config] 'None' potential is never drawn, ignoring its color")
            continue
        palette[potential] = tuple(color) if isinstance(color, list) else color

    try:
        return validate_palette(palette)
    except PaletteError as e:
        log.error(f"[Config] Invalid lens palette, using defaults: {e}")
        return dict(DEFAULT_PALETTE)
