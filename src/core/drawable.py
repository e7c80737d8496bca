"""Structural types for what the compositor and click dispatch accept."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Drawable(Protocol):
    def render(self, surface) -> None: ...  # noqa: D401


@runtime_checkable
class Clickable(Protocol):
    def check_click(self, x: float, y: float) -> bool: ...  # noqa: D401
