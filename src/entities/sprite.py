"""Image-backed sprite.

Without an image a sprite still renders: filled with its `color` if it has
one (handy for paddles and placeholders), otherwise nothing at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from entities.base import Entity
from textures.texture_utils import parse_color, scale_surface


@dataclass(eq=False)
class Sprite(Entity):
    image: Optional[pygame.Surface] = None

    def set_image(self, image: Optional[pygame.Surface]) -> None:
        """Attach an image; a sprite with no size adopts the image's size."""
        self.image = image
        if image is not None and not self.width and not self.height:
            self.width, self.height = image.get_size()

    def draw(self, surface: pygame.Surface) -> None:
        w = int(round(abs(self.width * self.scale_x)))
        h = int(round(abs(self.height * self.scale_y)))
        if w <= 0 or h <= 0:
            return
        if self.image is not None:
            img = scale_surface(self.image, (w, h))
        elif self.color is not None:
            img = pygame.Surface((w, h), pygame.SRCALPHA)
            img.fill(parse_color(self.color))
        else:
            return
        self._present(surface, img)


__all__ = ["Sprite"]
