import asyncio
import json
import os
from core.logger_setup import get_logger

log = get_logger("Registry")

# --------------------------------------------------------------------
# Global registry container
# --------------------------------------------------------------------
REGISTRY = {
    "units": {},
    "buildings": {},
    "all": {}
}

REGISTRY_FILES = {
    "units.json": "units",
    "buildings.json": "buildings",
}

# --------------------------------------------------------------------
# Loading functions
# --------------------------------------------------------------------
def load_registry(folder_path="data/"):
    """Load unit and building definitions from JSON files in a folder."""
    for table in REGISTRY.values():
        table.clear()

    for filename, category in REGISTRY_FILES.items():
        path = os.path.join(folder_path, filename)
        if not os.path.exists(path):
            log.warning(f"[Registry] Missing file: {filename}")
            continue

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{filename} must contain a list of entries, not a dict")

        for item in data:
            if "id" not in item:
                raise ValueError(f"[Registry] Entry missing 'id' in {filename}: {item}")
            if item["id"] in REGISTRY["all"]:
                log.warning(f"[Registry] Duplicate ID '{item['id']}' in {filename}.")
            REGISTRY[category][item["id"]] = item
            REGISTRY["all"][item["id"]] = item

            log.debug(f"[Registry] Loaded {item['id']} → {category}")

    validate_registry()
    log.info(f"[Registry] Loaded registry with {len(REGISTRY['all'])} total entries.")


def validate_registry():
    """Warn about entries the tooltips cannot describe."""
    for id_, entry in REGISTRY["units"].items():
        if "name" not in entry:
            log.warning(f"[Registry] units:{id_} missing 'name' field.")
        for stat in ("movement", "cost"):
            if stat not in entry:
                log.warning(f"[Registry] units:{id_} missing '{stat}' field.")
    for id_, entry in REGISTRY["buildings"].items():
        if "name" not in entry:
            log.warning(f"[Registry] buildings:{id_} missing 'name' field.")
    log.debug("[Registry] Validation complete.")


# --------------------------------------------------------------------
# Lookups
# --------------------------------------------------------------------
def get_entry(category, entry_id):
    return REGISTRY.get(category, {}).get(entry_id)


def display_name(category, entry_id):
    entry = get_entry(category, entry_id)
    if entry is None:
        return str(entry_id)
    return entry.get("name", str(entry_id))


def unit_details(unit_id):
    """Tooltip stats for a unit, or None if the unit is unknown."""
    entry = get_entry("units", unit_id)
    if entry is None:
        return None
    return {
        "Movement": entry.get("movement", 0),
        "Cost": entry.get("cost", 0),
    }


def query_unit_details(unit_id, callback):
    """
    Asynchronous unit lookup, as the game's database queries are.
    The callback runs on a later loop iteration with the details or None.
    """
    loop = asyncio.get_running_loop()
    loop.call_soon(callback, unit_details(unit_id))


class RegistryUnitSource:
    """Unit details source backed by the global registry."""

    def query_unit_details(self, unit_id, callback):
        query_unit_details(unit_id, callback)
