"""Primitive shapes: rectangle, circle and line.

- rect:   (x, y) top-left, width x height
- circle: (x, y) top-left of the bounding box, so the center is
          (x + radius, y + radius)
- line:   from (x, y) to (x + width, y + height); always stroked
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import pygame

from entities.base import Entity
from textures.texture_utils import parse_color


class ShapeKind(str, Enum):
    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"


@dataclass(eq=False)
class ShapeEntity(Entity):
    shape: ShapeKind = ShapeKind.RECT
    width: float = 100.0
    height: float = 100.0
    radius: float = 50.0
    color: object = "#ffffff"
    fill: bool = True
    stroke_width: int = 1

    @property
    def center(self) -> Tuple[float, float]:
        if self.shape is ShapeKind.CIRCLE:
            return (self.x + self.radius, self.y + self.radius)
        return super().center

    def draw(self, surface: pygame.Surface) -> None:
        color = parse_color(self.color)
        sx, sy = abs(self.scale_x), abs(self.scale_y)
        stroke = max(1, int(round(self.stroke_width)))

        if self.shape is ShapeKind.CIRCLE:
            r = self.radius * min(sx, sy)
            size = int(round(2 * r))
            if size <= 0:
                return
            img = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(
                img, color, (size / 2, size / 2), r, 0 if self.fill else stroke
            )
        elif self.shape is ShapeKind.LINE:
            dx, dy = self.width * sx, self.height * sy
            w = int(round(abs(dx))) + stroke * 2
            h = int(round(abs(dy))) + stroke * 2
            img = pygame.Surface((w, h), pygame.SRCALPHA)
            # endpoints inside the padded box, preserving direction
            x0 = stroke if dx >= 0 else w - stroke
            y0 = stroke if dy >= 0 else h - stroke
            pygame.draw.line(img, color, (x0, y0), (x0 + dx, y0 + dy), stroke)
        else:
            w = int(round(abs(self.width) * sx))
            h = int(round(abs(self.height) * sy))
            if w <= 0 or h <= 0:
                return
            img = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.rect(img, color, img.get_rect(), 0 if self.fill else stroke)

        self._present(surface, img)


__all__ = ["ShapeEntity", "ShapeKind"]
