"""Tests for building entities from scene-document configs."""

import math

import pygame
import pytest

from entities import Button, ShapeEntity, ShapeKind, Sprite, TextEntity
from scenes.entity_factory import EntityFactory
from scenes.scene_config import ActionKind


@pytest.fixture
def factory():
    return EntityFactory()


class TestDefaults:
    def test_minimal_shape_is_white_square_at_origin(self, factory):
        shape = factory.create({"type": "shape"})
        assert isinstance(shape, ShapeEntity)
        assert shape.shape is ShapeKind.RECT
        assert (shape.x, shape.y, shape.width, shape.height) == (0, 0, 100, 100)
        assert shape.radius == 50
        assert shape.color == "#ffffff"
        assert shape.fill is True
        assert shape.stroke_width == 1

    def test_button_defaults(self, factory):
        button = factory.create({"type": "button"})
        assert isinstance(button, Button)
        assert (button.width, button.height) == (200, 80)
        assert button.color == "#4a90e2"
        assert button.text == ""
        assert button.on_click is None

    def test_text_defaults(self, factory):
        text = factory.create({"type": "text"})
        assert isinstance(text, TextEntity)
        assert text.content == ""
        assert text.font == "48px Arial"
        assert text.color == "#ffffff"
        assert text.text_align == "left"

    def test_common_fields(self, factory):
        shape = factory.create({
            "type": "shape",
            "rotation": math.pi / 4,
            "scaleX": 2,
            "scaleY": 0.5,
            "alpha": 0.25,
            "visible": False,
        })
        assert shape.rotation == pytest.approx(math.pi / 4)
        assert (shape.scale_x, shape.scale_y) == (2.0, 0.5)
        assert shape.alpha == 0.25
        assert shape.visible is False

    def test_bad_number_uses_default(self, factory, capsys):
        shape = factory.create({"type": "shape", "width": "wide"})
        assert shape.width == 100
        assert "'width' is not a number" in capsys.readouterr().out


class TestKinds:
    def test_unknown_kind(self, factory, capsys):
        assert factory.create({"type": "video"}) is None
        assert "unknown entity type 'video'" in capsys.readouterr().out

    def test_missing_kind(self, factory, capsys):
        assert factory.create({"x": 1}) is None
        assert "entity without a type" in capsys.readouterr().out

    def test_circle_and_line(self, factory):
        circle = factory.create({"type": "shape", "shape": "circle", "radius": 20})
        line = factory.create({"type": "shape", "shape": "line", "strokeWidth": 3})
        assert circle.shape is ShapeKind.CIRCLE
        assert circle.radius == 20
        assert line.shape is ShapeKind.LINE
        assert line.stroke_width == 3

    def test_unknown_shape_falls_back_to_rect(self, factory, capsys):
        shape = factory.create({"type": "shape", "shape": "star"})
        assert shape.shape is ShapeKind.RECT
        assert "unknown shape 'star'" in capsys.readouterr().out

    def test_text_fields(self, factory):
        text = factory.create({
            "type": "text",
            "content": "Score",
            "font": "bold 20px Courier",
            "color": "red",
            "textAlign": "center",
        })
        assert (text.content, text.font, text.color, text.text_align) == (
            "Score", "bold 20px Courier", "red", "center",
        )


class TestSprites:
    def test_image_from_loader_sets_size(self):
        image = pygame.Surface((30, 20))
        factory = EntityFactory(get_image={"logo": image}.get)
        sprite = factory.create({"type": "sprite", "assetId": "logo"})
        assert isinstance(sprite, Sprite)
        assert sprite.image is image
        assert (sprite.width, sprite.height) == (30, 20)

    def test_explicit_size_wins(self):
        factory = EntityFactory(get_image={"logo": pygame.Surface((30, 20))}.get)
        sprite = factory.create({"type": "sprite", "assetId": "logo", "width": 60, "height": 40})
        assert (sprite.width, sprite.height) == (60, 40)

    def test_missing_image_warns(self, capsys):
        factory = EntityFactory(get_image={}.get)
        sprite = factory.create({"type": "sprite", "assetId": "ghost"})
        assert sprite.image is None
        assert "image 'ghost' not loaded" in capsys.readouterr().out


class TestButtons:
    def test_on_click_forwards_parsed_action(self):
        received = []
        factory = EntityFactory(on_action=received.append)
        button = factory.create({
            "type": "button",
            "onClick": {"action": "switchState", "target": "menu"},
        })
        assert button.action.kind is ActionKind.SWITCH_STATE
        assert button.check_click(10, 10) is True
        assert len(received) == 1
        assert received[0].target == "menu"

    def test_each_button_binds_its_own_action(self):
        received = []
        factory = EntityFactory(on_action=received.append)
        first = factory.create({"type": "button", "onClick": {"action": "custom", "n": 1}})
        second = factory.create({"type": "button", "onClick": {"action": "custom", "n": 2}})
        second.on_click()
        first.on_click()
        assert [a.params["n"] for a in received] == [2, 1]

    def test_unknown_action_leaves_button_inert(self, capsys):
        factory = EntityFactory(on_action=lambda action: None)
        button = factory.create({"type": "button", "onClick": {"action": "fly"}})
        assert button.on_click is None
        assert button.check_click(10, 10) is False
        assert "unknown click action 'fly'" in capsys.readouterr().out

    def test_text_color_and_font(self, factory):
        button = factory.create({
            "type": "button",
            "text": "OK",
            "textColor": "#000",
            "font": "20px Arial",
        })
        assert button.text_color == "#000"
        assert button.font == "20px Arial"
