"""Per-entity time-based animations.

Each entity has at most one animation. The table is keyed by the entity
handle (its identity), not by the optional document id, so anonymous
entities animate too and two entities sharing an id never clobber each
other.

Setup snapshots the entity's resting values (alpha, x, y, scale) and moves
it to the effect's start appearance; `update(dt)` then interpolates back
toward (or, for fadeOut, away from) the resting values:

    fadeIn   alpha 0 -> initial
    fadeOut  alpha initial -> 0
    slideIn  from just off-canvas on one side -> initial position
    scale    scale 0 -> initial
    pulse    scale oscillates +-10% around initial, forever
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

from scenes.scene_config import AnimationConfig, AnimationType, Easing, SlideDirection

# How far outside the canvas a slideIn starts
SLIDE_OFFSCREEN_MARGIN = 100.0
PULSE_AMPLITUDE = 0.1
PULSE_SPEED = 4.0


def _linear(t: float) -> float:
    return t


def _ease_in(t: float) -> float:
    return t * t


def _ease_out(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def _ease_in_out(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - ((-2 * t + 2) ** 2) / 2


_EASINGS: Dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: _linear,
    Easing.EASE_IN: _ease_in,
    Easing.EASE_OUT: _ease_out,
    Easing.EASE_IN_OUT: _ease_in_out,
}


def apply_easing(t: float, easing: Easing) -> float:
    fn = _EASINGS.get(easing)
    if fn is None:
        return _linear(t)
    return fn(t)


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def _clamp01(v: float) -> float:
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return v


@dataclass(eq=False)
class Animation:
    entity: object
    type: AnimationType
    duration: float = 1.0
    delay: float = 0.0
    easing: Easing = Easing.LINEAR
    direction: SlideDirection = SlideDirection.TOP
    elapsed: float = 0.0
    completed: bool = False

    # resting values captured before the start appearance is applied
    initial_alpha: float = 1.0
    initial_x: float = 0.0
    initial_y: float = 0.0
    initial_scale_x: float = 1.0
    initial_scale_y: float = 1.0

    @classmethod
    def from_config(cls, entity, config: AnimationConfig) -> "Animation":
        return cls(
            entity=entity,
            type=config.type,
            duration=config.duration,
            delay=config.delay,
            easing=config.easing,
            direction=config.direction,
            initial_alpha=getattr(entity, "alpha", 1.0),
            initial_x=getattr(entity, "x", 0.0),
            initial_y=getattr(entity, "y", 0.0),
            initial_scale_x=getattr(entity, "scale_x", 1.0) or 1.0,
            initial_scale_y=getattr(entity, "scale_y", 1.0) or 1.0,
        )

    @property
    def active_time(self) -> float:
        """Time since the delay ran out (negative while still delayed)."""
        return self.elapsed - self.delay

    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return _clamp01(self.active_time / self.duration)

    # ------------------------------------------------------------------
    def apply_start(self, canvas_size: Tuple[float, float]) -> None:
        """Move the entity into the effect's starting appearance."""
        e = self.entity
        if self.type is AnimationType.FADE_IN:
            e.alpha = 0.0
        elif self.type is AnimationType.SLIDE_IN:
            canvas_w, canvas_h = canvas_size
            if self.direction is SlideDirection.TOP:
                e.y = -getattr(e, "height", 0.0) - SLIDE_OFFSCREEN_MARGIN
            elif self.direction is SlideDirection.BOTTOM:
                e.y = canvas_h + SLIDE_OFFSCREEN_MARGIN
            elif self.direction is SlideDirection.LEFT:
                e.x = -getattr(e, "width", 0.0) - SLIDE_OFFSCREEN_MARGIN
            elif self.direction is SlideDirection.RIGHT:
                e.x = canvas_w + SLIDE_OFFSCREEN_MARGIN
        elif self.type is AnimationType.SCALE:
            e.scale_x = 0.0
            e.scale_y = 0.0
        # fadeOut and pulse start from the resting appearance

    def step(self, dt: float) -> None:
        if self.completed:
            return
        self.elapsed += dt
        if self.elapsed < self.delay:
            return

        progress = self.progress()
        eased = apply_easing(progress, self.easing)
        e = self.entity

        if self.type is AnimationType.FADE_IN:
            e.alpha = eased * self.initial_alpha
        elif self.type is AnimationType.FADE_OUT:
            e.alpha = self.initial_alpha * (1 - eased)
        elif self.type is AnimationType.SLIDE_IN:
            # approaches the resting position from wherever it is now
            if self.direction in (SlideDirection.TOP, SlideDirection.BOTTOM):
                e.y = lerp(e.y, self.initial_y, eased)
            else:
                e.x = lerp(e.x, self.initial_x, eased)
        elif self.type is AnimationType.SCALE:
            e.scale_x = eased * self.initial_scale_x
            e.scale_y = eased * self.initial_scale_y
        elif self.type is AnimationType.PULSE:
            pulse = 1 + PULSE_AMPLITUDE * math.sin(PULSE_SPEED * self.active_time)
            e.scale_x = self.initial_scale_x * pulse
            e.scale_y = self.initial_scale_y * pulse
            return

        if progress >= 1:
            self.completed = True


class Animator:
    """Side table of running animations keyed by entity identity."""

    def __init__(self) -> None:
        self._animations: Dict[int, Animation] = {}

    def attach(
        self, entity, config: AnimationConfig, canvas_size: Tuple[float, float]
    ) -> Animation:
        """Start `config` on `entity`, replacing any animation it already has."""
        anim = Animation.from_config(entity, config)
        anim.apply_start(canvas_size)
        # the Animation holds a reference to the entity, so id() stays unique
        self._animations[id(entity)] = anim
        return anim

    def get(self, entity) -> Optional[Animation]:
        return self._animations.get(id(entity))

    def remove(self, entity) -> None:
        self._animations.pop(id(entity), None)

    def update(self, dt: float) -> None:
        for anim in list(self._animations.values()):
            anim.step(dt)

    def clear(self) -> None:
        self._animations.clear()

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, entity) -> bool:
        return id(entity) in self._animations

    def __iter__(self) -> Iterator[Animation]:
        return iter(list(self._animations.values()))


__all__ = ["Animation", "Animator", "apply_easing", "lerp"]
