"""Entities package: re-export the renderable scene objects.

    from entities import Sprite, Button, TextEntity, ShapeEntity
"""

from .base import Entity
from .sprite import Sprite
from .button import Button
from .text import TextEntity
from .shape import ShapeEntity, ShapeKind

__all__ = [
    "Entity",
    "Sprite",
    "Button",
    "TextEntity",
    "ShapeEntity",
    "ShapeKind",
]
