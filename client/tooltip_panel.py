import pygame
from core.config import (
    TOOLTIP_BG_COLOR,
    TOOLTIP_BORDER_COLOR,
    TOOLTIP_ENHANCED_BORDER_COLOR,
    TOOLTIP_INFO_COLOR,
    TOOLTIP_TEXT_COLOR,
)

SECTION_GAP = 6


class TooltipPanel:
    """
    Hover tooltip. The host fills the base text; the tooltip enhancer adds
    sections through mark_enhanced() / add_section().
    """

    def __init__(self, font, bg_color=TOOLTIP_BG_COLOR, border_color=TOOLTIP_BORDER_COLOR, text_color=TOOLTIP_TEXT_COLOR):
        self.font = font
        self.bg_color = bg_color
        self.border_color = border_color
        self.text_color = text_color
        self.lines = []
        self.sections = []
        self.enhanced = False
        self.pos = None

    @property
    def visible(self):
        return bool(self.lines)

    def show(self, text, pos):
        self.lines = text.split('\n')
        self.sections = []
        self.enhanced = False
        self.pos = pos

    def move(self, pos):
        self.pos = pos

    def hide(self):
        self.lines = []
        self.sections = []
        self.enhanced = False
        self.pos = None

    # --- Tooltip sink API used by the enhancer ---
    def mark_enhanced(self):
        self.enhanced = True

    def add_section(self, lines, style="info"):
        if not self.visible:
            return
        self.sections.append((style, list(lines)))

    def _rendered_lines(self):
        rendered = [(self.font.render(line, True, self.text_color), 0) for line in self.lines]
        for style, lines in self.sections:
            if style == "stats":
                self.font.set_bold(True)
            for i, line in enumerate(lines):
                gap = SECTION_GAP if i == 0 else 0
                rendered.append((self.font.render(line, True, TOOLTIP_INFO_COLOR), gap))
            self.font.set_bold(False)
        return rendered

    def draw(self, surface):
        if not self.visible or self.pos is None:
            return
        screen_width = surface.get_width()
        screen_height = surface.get_height()

        rendered = self._rendered_lines()
        line_height = self.font.get_height() + 2
        total_width = max(s.get_width() for s, _ in rendered)
        total_height = sum(line_height + gap for _, gap in rendered)

        # Default position: right of mouse
        tooltip_x = self.pos[0] + 10
        tooltip_y = self.pos[1] + 10
        bg_rect = pygame.Rect(tooltip_x, tooltip_y, total_width + 10, total_height + 6)

        # Adjust position if going offscreen
        if bg_rect.right > screen_width:
            bg_rect.x = self.pos[0] - bg_rect.width - 10
        if bg_rect.bottom > screen_height:
            bg_rect.y = self.pos[1] - bg_rect.height - 10

        border_color = TOOLTIP_ENHANCED_BORDER_COLOR if self.enhanced else self.border_color
        border_width = 3 if self.enhanced else 2
        pygame.draw.rect(surface, self.bg_color, bg_rect, border_radius=5)
        pygame.draw.rect(surface, border_color, bg_rect, border_width, border_radius=5)

        y_offset = bg_rect.y + 3
        for line_surface, gap in rendered:
            y_offset += gap
            surface.blit(line_surface, (bg_rect.x + 5, y_offset))
            y_offset += line_height
