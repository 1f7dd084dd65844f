import pygame
import pygame_gui
from core.config import localize
from core.logger_setup import get_logger

log = get_logger("LegendPanel")

ROW_HEIGHT = 24
SWATCH_SIZE = 16
TITLE_HEIGHT = 28


class LegendPanel:
    """Lens legend. The panel is built on first show and kept until kill()."""

    def __init__(self, ui_manager, rect, localize=localize):
        self.ui_manager = ui_manager
        self.rect = pygame.Rect(rect)
        self.localize = localize
        self.panel = None
        self.entries = []
        self.rows = []

    @property
    def visible(self):
        return bool(self.panel is not None and self.panel.visible)

    def show_legend(self, entries):
        entries = list(entries)
        if self.panel is None:
            self._build_panel()
        if entries != self.entries:
            self._build_rows(entries)
        self.panel.show()

    def hide_legend(self):
        if self.panel is not None:
            self.panel.hide()

    def kill(self):
        if self.panel is not None:
            self.panel.kill()
        self.panel = None
        self.rows.clear()
        self.entries = []

    def _build_panel(self):
        height = TITLE_HEIGHT + 4 * ROW_HEIGHT + 12
        self.rect.height = max(self.rect.height, height)
        self.panel = pygame_gui.elements.UIPanel(
            relative_rect=self.rect,
            manager=self.ui_manager,
            visible=False,
            starting_height=5,
            object_id="#resource_lens_legend"
        )
        pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect(6, 2, self.rect.width - 12, TITLE_HEIGHT - 4),
            text=self.localize("LOC_RESOURCE_LENS_LEGEND_TITLE"),
            container=self.panel,
            manager=self.ui_manager,
            object_id="#legend_title"
        )
        log.debug("[Legend] Created legend panel")

    def _build_rows(self, entries):
        for element in self.rows:
            element.kill()
        self.rows.clear()

        y_offset = TITLE_HEIGHT
        for entry in entries:
            swatch = pygame.Surface((SWATCH_SIZE, SWATCH_SIZE), pygame.SRCALPHA)
            swatch.fill(entry["color"])
            pygame.draw.rect(swatch, (60, 60, 80), swatch.get_rect(), 1)
            self.rows.append(pygame_gui.elements.UIImage(
                relative_rect=pygame.Rect(8, y_offset + 4, SWATCH_SIZE, SWATCH_SIZE),
                image_surface=swatch,
                container=self.panel,
                manager=self.ui_manager
            ))
            self.rows.append(pygame_gui.elements.UILabel(
                relative_rect=pygame.Rect(8 + SWATCH_SIZE + 8, y_offset, self.rect.width - 48, ROW_HEIGHT),
                text=entry["label"],
                container=self.panel,
                manager=self.ui_manager,
                object_id="#legend_label"
            ))
            y_offset += ROW_HEIGHT
        self.entries = entries
