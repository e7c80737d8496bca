"""Layered 2D compositor.

Entities are bucketed into a fixed set of z-ordered layers. Render order is
decided by the layer enumeration alone, so scenes can populate layers in any
order (and across several states) without affecting what draws on top.

Render order (bottom to top):

    BG_FAR -> BG_NEAR -> VIDEO_IMAGE -> SHAPES -> SPRITES -> TEXT -> UI_BUTTONS
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional, Union

from core.drawable import Drawable


class Layer(IntEnum):
    BG_FAR = 0
    BG_NEAR = 1
    VIDEO_IMAGE = 2
    SHAPES = 3
    SPRITES = 4
    TEXT = 5
    UI_BUTTONS = 6

    @classmethod
    def from_name(cls, name: Union[str, "Layer"]) -> Optional["Layer"]:
        """Return the layer for a name (or member), None if unrecognized."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            return cls.__members__.get(name)
        return None


LayerName = Union[str, Layer]


class LayerManager:
    """Owns one insertion-ordered entity list per layer."""

    def __init__(self) -> None:
        self._layers: Dict[Layer, List[object]] = {layer: [] for layer in Layer}

    # --------------------------- mutation -------------------------------
    def add_to_layer(self, entity: object, layer_name: LayerName) -> None:
        layer = Layer.from_name(layer_name)
        if layer is None:
            print(f"[LayerManager] Warning: unknown layer '{layer_name}'")
            return
        entities = self._layers[layer]
        # identity check; entities may define __eq__
        if any(e is entity for e in entities):
            return
        entities.append(entity)

    def remove_from_layer(self, entity: object, layer_name: LayerName) -> None:
        layer = Layer.from_name(layer_name)
        if layer is None:
            return
        entities = self._layers[layer]
        for i, e in enumerate(entities):
            if e is entity:
                del entities[i]
                return

    def clear_layer(self, layer_name: LayerName) -> None:
        layer = Layer.from_name(layer_name)
        if layer is not None:
            self._layers[layer] = []

    def clear_all(self) -> None:
        for layer in Layer:
            self._layers[layer] = []

    # --------------------------- queries --------------------------------
    def get_layer(self, layer_name: LayerName) -> List[object]:
        """Return a copy of a layer's entities (empty for unknown names)."""
        layer = Layer.from_name(layer_name)
        if layer is None:
            return []
        return list(self._layers[layer])

    def layer_counts(self) -> Dict[str, int]:
        return {layer.name: len(self._layers[layer]) for layer in Layer}

    def __len__(self) -> int:
        return sum(len(entities) for entities in self._layers.values())

    # --------------------------- rendering ------------------------------
    def render(self, surface) -> None:  # surface: pygame.Surface
        for layer in sorted(Layer):
            for entity in self._layers[layer]:
                if isinstance(entity, Drawable):
                    entity.render(surface)


__all__ = ["Layer", "LayerManager", "LayerName"]
