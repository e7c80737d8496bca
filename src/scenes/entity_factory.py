"""Build entities from scene-document entity configs.

Dispatch is a table over EntityKind; the unknown-kind path is a single
warning branch in `create()`. Every omitted field gets a default so a
config can be as small as ``{"type": "shape"}`` (a 100x100 white square at
the origin).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from entities import Button, Entity, ShapeEntity, ShapeKind, Sprite, TextEntity
from entities.button import DEFAULT_BUTTON_COLOR
from scenes.scene_config import ActionConfig, EntityKind, parse_action, parse_enum
from ui.text_renderer import DEFAULT_FONT, TextRenderer

ActionHandler = Callable[[ActionConfig], None]


def _num(config: Mapping[str, Any], key: str, default: float) -> float:
    value = config.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        print(f"[EntityFactory] Warning: '{key}' is not a number: {value!r}")
        return default


def _apply_common(entity: Entity, config: Mapping[str, Any]) -> None:
    """Optional visual attributes shared by every kind."""
    if "rotation" in config:
        entity.rotation = _num(config, "rotation", 0.0)
    if "scaleX" in config:
        entity.scale_x = _num(config, "scaleX", 1.0)
    if "scaleY" in config:
        entity.scale_y = _num(config, "scaleY", 1.0)
    entity.alpha = _num(config, "alpha", 1.0)
    entity.visible = bool(config.get("visible", True))


class EntityFactory:
    def __init__(
        self,
        *,
        get_image: Optional[Callable[[str], Any]] = None,
        on_action: Optional[ActionHandler] = None,
        text_renderer: Optional[TextRenderer] = None,
    ) -> None:
        self.get_image = get_image
        self.on_action = on_action
        self.text_renderer = text_renderer
        self._builders: Dict[EntityKind, Callable[[Mapping[str, Any]], Entity]] = {
            EntityKind.SPRITE: self.create_sprite,
            EntityKind.BUTTON: self.create_button,
            EntityKind.TEXT: self.create_text,
            EntityKind.SHAPE: self.create_shape,
        }

    def create(self, config: Mapping[str, Any]) -> Optional[Entity]:
        kind = parse_enum(
            EntityKind, config.get("type"), "entity type", context="EntityFactory"
        )
        if kind is None:
            if config.get("type") is None:
                print(f"[EntityFactory] Warning: entity without a type: {dict(config)}")
            return None
        return self._builders[kind](config)

    # ------------------------------------------------------------------
    def create_sprite(self, config: Mapping[str, Any]) -> Sprite:
        sprite = Sprite(
            x=_num(config, "x", 0.0),
            y=_num(config, "y", 0.0),
            width=_num(config, "width", 0.0),
            height=_num(config, "height", 0.0),
            color=config.get("color"),
        )
        asset_id = config.get("assetId")
        if asset_id and self.get_image is not None:
            image = self.get_image(asset_id)
            if image is not None:
                sprite.set_image(image)
            else:
                print(f"[EntityFactory] Warning: image '{asset_id}' not loaded")
        _apply_common(sprite, config)
        return sprite

    def create_button(self, config: Mapping[str, Any]) -> Button:
        button = Button(
            x=_num(config, "x", 0.0),
            y=_num(config, "y", 0.0),
            width=_num(config, "width", 200.0),
            height=_num(config, "height", 80.0),
            text=str(config.get("text", "")),
            color=config.get("color") or DEFAULT_BUTTON_COLOR,
            text_renderer=self.text_renderer,
        )
        if config.get("textColor"):
            button.text_color = config["textColor"]
        if config.get("font"):
            button.font = str(config["font"])
        _apply_common(button, config)

        if config.get("onClick") is not None:
            action = parse_action(config["onClick"])
            if action is not None:
                button.action = action
                if self.on_action is not None:
                    handler = self.on_action
                    button.on_click = lambda: handler(action)
        return button

    def create_text(self, config: Mapping[str, Any]) -> TextEntity:
        text = TextEntity(
            x=_num(config, "x", 0.0),
            y=_num(config, "y", 0.0),
            width=_num(config, "width", 0.0),
            height=_num(config, "height", 0.0),
            content=str(config.get("content", "")),
            font=str(config.get("font") or DEFAULT_FONT),
            color=config.get("color") or "#ffffff",
            text_align=str(config.get("textAlign") or "left"),
            text_renderer=self.text_renderer,
        )
        _apply_common(text, config)
        return text

    def create_shape(self, config: Mapping[str, Any]) -> ShapeEntity:
        kind = parse_enum(
            ShapeKind, config.get("shape"), "shape", ShapeKind.RECT, context="EntityFactory"
        )
        shape = ShapeEntity(
            shape=kind,
            x=_num(config, "x", 0.0),
            y=_num(config, "y", 0.0),
            width=_num(config, "width", 100.0),
            height=_num(config, "height", 100.0),
            radius=_num(config, "radius", 50.0),
            color=config.get("color") or "#ffffff",
            fill=bool(config.get("fill", True)),
            stroke_width=int(_num(config, "strokeWidth", 1)),
        )
        _apply_common(shape, config)
        return shape


__all__ = ["EntityFactory", "ActionHandler"]
