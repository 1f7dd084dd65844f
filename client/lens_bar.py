import pygame
import pygame_gui
from core.logger_setup import get_logger

log = get_logger("LensBar")

BUTTON_SIZE = (110, 32)
BUTTON_GAP = 6


class LensBar:
    """
    Row of toggle buttons (lenses, tooltip enhancement) inside a host container.
    Without a container the bar is disabled: the first add reports it and
    every add returns None.
    """

    def __init__(self, ui_manager, anchor, notifications=None):
        self.ui_manager = ui_manager
        self.anchor = anchor
        self.notifications = notifications
        self.buttons = {}   # key -> (button, on_click)
        self.enabled = anchor is not None
        self._reported_missing = False

    def _report_missing(self, key):
        if self._reported_missing:
            return
        self._reported_missing = True
        log.error(f"[LensBar] Could not find lens bar container, '{key}' button disabled")
        if self.notifications is not None:
            self.notifications.add_once("lens_bar:missing", "Lens bar unavailable.", level="error")

    def add_button(self, key, text, tool_tip, on_click, object_id="#lens_button"):
        if not self.enabled:
            self._report_missing(key)
            return None
        x = len(self.buttons) * (BUTTON_SIZE[0] + BUTTON_GAP) + BUTTON_GAP
        button = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect((x, BUTTON_GAP), BUTTON_SIZE),
            text=text,
            manager=self.ui_manager,
            container=self.anchor,
            tool_tip_text=tool_tip,
            object_id=object_id
        )
        self.buttons[key] = (button, on_click)
        log.debug(f"[LensBar] Added button '{key}'")
        return button

    def add_lens_button(self, lens_manager, lens_name, text):
        entry = lens_manager.lenses.get(lens_name)
        tool_tip = entry.description if entry else text
        button = self.add_button(lens_name, text, tool_tip, lambda: lens_manager.toggle_lens(lens_name))
        if button is not None and not lens_manager.is_available(lens_name):
            button.disable()
        return button

    def process_event(self, event):
        """Handle a pygame event; True when one of our buttons consumed it."""
        if event.type != pygame_gui.UI_BUTTON_PRESSED:
            return False
        for key, (button, on_click) in self.buttons.items():
            if event.ui_element is button:
                log.debug(f"[LensBar] '{key}' pressed")
                on_click()
                return True
        return False
