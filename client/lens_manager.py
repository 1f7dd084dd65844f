from core.config import EVENT_LENS_ACTIVATED, EVENT_LENS_DEACTIVATED
from core.logger_setup import get_logger

log = get_logger("LensManager")


class LensEntry:
    def __init__(self, name, label, description, icon, is_available=None):
        self.name = name
        self.label = label
        self.description = description
        self.icon = icon
        self.is_available = is_available or (lambda: True)

    def __repr__(self):
        return f"LensEntry(name={self.name}, label={self.label})"


class LensManager:
    """
    Host lens palette. At most one lens is active; switching lenses
    emits LensDeactivated for the old one before LensActivated for the new one.
    """

    def __init__(self, bus):
        self.bus = bus
        self.lenses = {}
        self.active_lens = None

    def add_lens(self, name, label, description, icon, is_available=None):
        if name in self.lenses:
            log.warning(f"[LensManager] Lens {name} already registered, replacing it")
        self.lenses[name] = LensEntry(name, label, description, icon, is_available)
        log.info(f"[LensManager] Added lens {name} ('{label}')")

    def remove_lens(self, name):
        if name == self.active_lens:
            self.deactivate_active()
        self.lenses.pop(name, None)

    def is_available(self, name):
        entry = self.lenses.get(name)
        return entry is not None and bool(entry.is_available())

    def activate_lens(self, name):
        if not self.is_available(name):
            log.warning(f"[LensManager] Lens {name} is not available")
            return False
        if self.active_lens and self.active_lens != name:
            self.deactivate_active()
        self.active_lens = name
        self.bus.emit(EVENT_LENS_ACTIVATED, name)
        return True

    def deactivate_active(self):
        if self.active_lens is None:
            return
        name, self.active_lens = self.active_lens, None
        self.bus.emit(EVENT_LENS_DEACTIVATED, name)

    def toggle_lens(self, name):
        """Switch a lens on, or off if it is the active one. Returns the new on/off state."""
        if self.active_lens == name:
            self.deactivate_active()
            return False
        return self.activate_lens(name)
