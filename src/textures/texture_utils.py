"""Image loading utilities for pygame surfaces.

Loading never raises: a missing or unreadable file yields a checkerboard
placeholder so a scene with a broken asset still runs and the problem is
visible on screen. Colors given as CSS-ish strings in scene documents are
parsed here as well.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple, Union

import pygame

RGBA = Tuple[int, int, int, int]
ColorLike = Union[str, Sequence[int], pygame.Color, None]

_PLACEHOLDER_CACHE: Dict[int, pygame.Surface] = {}
_COLOR_CACHE: Dict[str, RGBA] = {}

WHITE: RGBA = (255, 255, 255, 255)


def load_image(filename: str) -> pygame.Surface:
    """Load an image file into a pygame Surface.

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    pygame.Surface
        The image (with per-pixel alpha when a display is up), or the
        checkerboard placeholder if loading failed.
    """
    try:
        surface = pygame.image.load(filename)
        # convert_alpha() needs a display mode; headless loads keep the raw format
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface
    except (pygame.error, OSError) as e:
        print(f"Failed to load image {filename}: {e}")
        return create_placeholder_surface()


def create_placeholder_surface(size: int = 64) -> pygame.Surface:
    """Create a red/transparent checkerboard used for missing images."""
    cached = _PLACEHOLDER_CACHE.get(size)
    if cached is not None:
        return cached

    surface = pygame.Surface((size, size), pygame.SRCALPHA)

    # Checkerboard tile size in pixels
    tile = 8
    red = (255, 0, 0, 255)
    transparent = (0, 0, 0, 0)

    for ty in range(0, size, tile):
        for tx in range(0, size, tile):
            color = red if ((tx // tile) + (ty // tile)) % 2 == 0 else transparent
            surface.fill(color, pygame.Rect(tx, ty, tile, tile))

    _PLACEHOLDER_CACHE[size] = surface
    return surface


def parse_color(value: ColorLike, default: RGBA = WHITE) -> RGBA:
    """Convert a color value to an (R, G, B, A) tuple.

    Accepts '#RGB', '#RRGGBB', '#RRGGBBAA', pygame color names ('white'),
    and 3/4-item sequences. Unparseable values print a warning and return
    `default`.
    """
    if value is None:
        return default
    if isinstance(value, pygame.Color):
        return (value.r, value.g, value.b, value.a)
    if isinstance(value, str):
        cached = _COLOR_CACHE.get(value)
        if cached is not None:
            return cached
        text = value.strip()
        # expand CSS shorthand '#fff' -> '#ffffff'
        if text.startswith("#") and len(text) == 4:
            text = "#" + "".join(c * 2 for c in text[1:])
        try:
            c = pygame.Color(text)
        except ValueError:
            print(f"[Colors] Warning: unknown color '{value}'")
            return default
        rgba = (c.r, c.g, c.b, c.a)
        _COLOR_CACHE[value] = rgba
        return rgba
    try:
        parts = [int(v) for v in value]
    except (TypeError, ValueError):
        print(f"[Colors] Warning: unknown color '{value}'")
        return default
    if len(parts) not in (3, 4) or any(not 0 <= p <= 255 for p in parts):
        # pygame.draw rejects channels outside 0..255 at render time
        print(f"[Colors] Warning: unknown color '{value}'")
        return default
    if len(parts) == 3:
        return (parts[0], parts[1], parts[2], 255)
    return (parts[0], parts[1], parts[2], parts[3])


def scale_surface(surface: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
    """Scale to `size`, smoothly when the pixel format allows it."""
    if surface.get_size() == size:
        return surface
    if surface.get_bitsize() in (24, 32):
        return pygame.transform.smoothscale(surface, size)
    # smoothscale rejects palette/16-bit surfaces (unconverted headless loads)
    return pygame.transform.scale(surface, size)
