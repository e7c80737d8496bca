"""Text rendering on pygame surfaces with CSS-like font strings.

Scene documents describe fonts the way a web canvas does ("48px Arial",
"bold 32px Helvetica"). This module parses those, caches the resulting
pygame fonts and rendered labels, and draws aligned, alpha-blended text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

_FONT_RE = re.compile(r"(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+)$")

DEFAULT_FONT = "48px Arial"


@dataclass(frozen=True)
class FontSpec:
    size: int
    family: str
    bold: bool = False
    italic: bool = False


def parse_font(font: str) -> FontSpec:
    """Parse '[italic] [bold] <N>px <family>' into a FontSpec.

    Falls back to 48px default family when the string has no '<N>px' part.
    """
    text = (font or DEFAULT_FONT).strip()
    bold = False
    italic = False
    words = text.split()
    while words and words[0].lower() in ("bold", "italic", "normal"):
        w = words.pop(0).lower()
        bold = bold or w == "bold"
        italic = italic or w == "italic"
    m = _FONT_RE.match(" ".join(words))
    if m is None:
        print(f"[TextRenderer] Warning: unparseable font '{font}', using default")
        return FontSpec(size=48, family="arial", bold=bold, italic=italic)
    family = m.group("family").strip().strip("'\"").lower()
    return FontSpec(
        size=max(1, int(float(m.group("size")))),
        family=family,
        bold=bold,
        italic=italic,
    )


class TextRenderer:
    """2D text renderer for pygame surfaces.

    - Fonts are cached per FontSpec.
    - Rendered labels are cached by (text, font, color) and reused every frame.
    """

    def __init__(self, max_cached_labels: int = 512) -> None:
        self._fonts: Dict[FontSpec, pygame.font.Font] = {}
        self._labels: Dict[Tuple[str, FontSpec, Tuple[int, int, int]], pygame.Surface] = {}
        self._max_cached_labels = max_cached_labels

    def get_font(self, spec: FontSpec) -> pygame.font.Font:
        font = self._fonts.get(spec)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(
                spec.family, spec.size, bold=spec.bold, italic=spec.italic
            )
            self._fonts[spec] = font
        return font

    def render_label(
        self, text: str, spec: FontSpec, color: Tuple[int, int, int]
    ) -> pygame.Surface:
        key = (text, spec, color)
        surf = self._labels.get(key)
        if surf is None:
            if len(self._labels) >= self._max_cached_labels:
                # dynamic labels (scores, timers) would otherwise grow forever
                self._labels.clear()
            surf = self.get_font(spec).render(text, True, color)
            self._labels[key] = surf
        return surf

    def measure(self, text: str, font: str = DEFAULT_FONT) -> Tuple[int, int]:
        return self.get_font(parse_font(font)).size(text)

    def draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color=(255, 255, 255, 255),
        *,
        font: str = DEFAULT_FONT,
        align: str = "left",
        alpha: float = 1.0,
        scale: Tuple[float, float] = (1.0, 1.0),
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single line of text with its top edge at `y`.

        align: 'left' | 'start' | 'center' | 'right' | 'end', relative to `x`
        """
        if not text or alpha <= 0.0:
            return 0, 0
        rgb = (int(color[0]), int(color[1]), int(color[2]))
        base_alpha = color[3] if len(color) > 3 else 255
        label = self.render_label(text, parse_font(font), rgb)

        sx, sy = scale
        if sx != 1.0 or sy != 1.0:
            w = max(0, int(round(label.get_width() * abs(sx))))
            h = max(0, int(round(label.get_height() * abs(sy))))
            if w == 0 or h == 0:
                return 0, 0
            label = pygame.transform.smoothscale(label, (w, h))

        w, h = label.get_size()
        if align == "center":
            draw_x = x - w / 2
        elif align in ("right", "end"):
            draw_x = x - w
        else:
            draw_x = x

        a = int(max(0.0, min(1.0, alpha)) * base_alpha)
        if a < 255:
            label = label.copy()
            label.set_alpha(a)
        surface.blit(label, (int(draw_x), int(y)))
        return w, h


_default: Optional[TextRenderer] = None


def default_text_renderer() -> TextRenderer:
    """Shared renderer for entities created without an explicit one."""
    global _default
    if _default is None:
        _default = TextRenderer()
    return _default


__all__ = ["FontSpec", "TextRenderer", "parse_font", "default_text_renderer"]
