from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from entities.base import Entity
from textures.texture_utils import parse_color
from ui.text_renderer import TextRenderer, default_text_renderer

DEFAULT_BUTTON_COLOR = "#4a90e2"


@dataclass(eq=False)
class Button(Entity):
    """Rounded, labelled rectangle that runs `on_click` when hit."""

    width: float = 200.0
    height: float = 80.0
    color: object = DEFAULT_BUTTON_COLOR
    text: str = ""
    text_color: object = "#ffffff"
    font: str = "bold 32px Arial"
    border_radius: int = 12
    on_click: Optional[Callable[[], None]] = None
    # the parsed onClick descriptor, kept for inspection/debugging
    action: Optional[object] = None
    text_renderer: Optional[TextRenderer] = None

    def check_click(self, x: float, y: float) -> bool:
        """Invoke `on_click` if (x, y) is inside the button. Returns True on a hit."""
        if not self.visible or self.on_click is None:
            return False
        if not self.contains_point(x, y):
            return False
        self.on_click()
        return True

    def draw(self, surface: pygame.Surface) -> None:
        rect = self.bounds()
        if rect.width <= 0 or rect.height <= 0:
            return
        img = pygame.Surface(rect.size, pygame.SRCALPHA)
        radius = int(self.border_radius * min(abs(self.scale_x), abs(self.scale_y)))
        pygame.draw.rect(img, parse_color(self.color), img.get_rect(), border_radius=radius)
        if self.text:
            renderer = self.text_renderer or default_text_renderer()
            label_h = renderer.measure(self.text, self.font)[1] * abs(self.scale_y)
            renderer.draw_text(
                img,
                self.text,
                rect.width / 2,
                (rect.height - label_h) / 2,
                parse_color(self.text_color),
                font=self.font,
                align="center",
                scale=(abs(self.scale_x), abs(self.scale_y)),
            )
        self._present(surface, img)


__all__ = ["Button", "DEFAULT_BUTTON_COLOR"]
