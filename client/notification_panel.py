import pygame
import pygame_gui

LEVEL_COLORS = {
    "info": (255, 255, 255),
    "warning": (255, 200, 100),
    "error": (255, 100, 100),
}
MAX_VISIBLE = 5


class NotificationPanel:
    """Shows the latest lens/tooltip notices; hidden while there is nothing to say."""

    def __init__(self, ui_manager, rect):
        self.panel = pygame_gui.elements.UIPanel(
            relative_rect=rect,
            manager=ui_manager,
            visible=False,
            starting_height=5
        )
        self.labels = []
        self._shown = []

    def update(self, notifications):
        latest = [(n["message"], n["level"]) for n in notifications[-MAX_VISIBLE:]]
        if latest == self._shown:
            return
        self._shown = latest

        for label in self.labels:
            label.kill()
        self.labels.clear()

        if not latest:
            self.panel.hide()
            return

        y_offset = 0
        for message, level in latest:
            label = pygame_gui.elements.UILabel(
                relative_rect=pygame.Rect(0, y_offset, self.panel.relative_rect.width, 25),
                text=message,
                container=self.panel,
                manager=self.panel.ui_manager,
                object_id="#notification_label"
            )
            label.text_colour = LEVEL_COLORS.get(level, LEVEL_COLORS["info"])
            label.rebuild()
            self.labels.append(label)
            y_offset += 30
        self.panel.show()
