"""Pointer and keyboard state polled once per frame.

The engine feeds every pygame event through `handle_event()` and calls
`end_frame()` after the scene update, so `mouse.pressed` is True for exactly
one update after a button press (a "fresh press"), while `mouse.down`
tracks whether the button is still held.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Set, Tuple

import pygame


@dataclass
class PointerState:
    x: float = 0.0
    y: float = 0.0
    pressed: bool = False
    down: bool = False


class InputHandler:
    def __init__(self, scale: Tuple[float, float] = (1.0, 1.0)) -> None:
        # window pixels -> canvas pixels
        self.scale_x, self.scale_y = scale
        self.mouse = PointerState()
        self._keys: Set[int] = set()

    def _to_canvas(self, pos) -> Tuple[float, float]:
        return pos[0] * self.scale_x, pos[1] * self.scale_y

    def handle_event(self, event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self.mouse.x, self.mouse.y = self._to_canvas(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.mouse.x, self.mouse.y = self._to_canvas(event.pos)
            self.mouse.pressed = True
            self.mouse.down = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.mouse.x, self.mouse.y = self._to_canvas(event.pos)
            self.mouse.down = False
        elif event.type == pygame.KEYDOWN:
            self._keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self._keys.discard(event.key)

    def end_frame(self) -> None:
        self.mouse.pressed = False

    def is_key_down(self, *keys: int) -> bool:
        return any(k in self._keys for k in keys)

    def reset(self) -> None:
        self.mouse = PointerState()
        self._keys.clear()


__all__ = ["InputHandler", "PointerState"]
