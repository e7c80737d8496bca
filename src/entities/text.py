from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from entities.base import Entity
from textures.texture_utils import parse_color
from ui.text_renderer import DEFAULT_FONT, TextRenderer, default_text_renderer


@dataclass(eq=False)
class TextEntity(Entity):
    """Single line of text; `x` is the anchor for `text_align`, `y` the top edge."""

    content: str = ""
    font: str = DEFAULT_FONT
    color: object = "#ffffff"
    text_align: str = "left"
    text_renderer: Optional[TextRenderer] = None

    def draw(self, surface: pygame.Surface) -> None:
        renderer = self.text_renderer or default_text_renderer()
        renderer.draw_text(
            surface,
            self.content,
            self.x,
            self.y,
            parse_color(self.color),
            font=self.font,
            align=self.text_align,
            alpha=self.alpha,
            scale=(self.scale_x, self.scale_y),
        )


__all__ = ["TextEntity"]
