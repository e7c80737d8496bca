"""Shared base for every renderable scene entity.

Entities are positioned by their top-left corner in canvas pixels. Scale is
applied about the entity's center (so a `scale`/`pulse` animation grows an
entity in place) and rotation is in radians, clockwise, like a web canvas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from textures.texture_utils import ColorLike


@dataclass(eq=False)
class Entity:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    rotation: float = 0.0
    alpha: float = 1.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    visible: bool = True
    color: ColorLike = None

    # ------------------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        if not self.visible or self.alpha <= 0.0:
            return
        self.draw(surface)

    def draw(self, surface: pygame.Surface) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    # ------------------------------------------------------------------
    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def bounds(self) -> pygame.Rect:
        """Screen-space rectangle after scaling about the center."""
        w = abs(self.width * self.scale_x)
        h = abs(self.height * self.scale_y)
        cx, cy = self.center
        return pygame.Rect(int(round(cx - w / 2)), int(round(cy - h / 2)), int(round(w)), int(round(h)))

    def contains_point(self, px: float, py: float) -> bool:
        r = self.bounds()
        return r.left <= px <= r.right and r.top <= py <= r.bottom

    def _present(
        self,
        surface: pygame.Surface,
        image: pygame.Surface,
        center: Optional[Tuple[float, float]] = None,
    ) -> None:
        """Rotate, fade and blit an already-scaled image centered on `center`."""
        if self.rotation:
            image = pygame.transform.rotate(image, -math.degrees(self.rotation))
        a = int(max(0.0, min(1.0, self.alpha)) * 255)
        if a < 255:
            image = image.copy()
            image.set_alpha(a)
        cx, cy = center if center is not None else self.center
        rect = image.get_rect(center=(int(round(cx)), int(round(cy))))
        surface.blit(image, rect)


__all__ = ["Entity"]
