"""Tests for scene document parsing and loading."""

import json

import pytest
import yaml

from scenes.scene_config import (
    ActionKind,
    AnimationType,
    Easing,
    EntityKind,
    SceneConfigError,
    SlideDirection,
    TransitionType,
    load_scene_config,
    parse_action,
    parse_animation,
    parse_enum,
    parse_scene_config,
    parse_transition,
)


def _document(**overrides):
    doc = {
        "sceneName": "Test",
        "canvasSize": {"width": 800, "height": 600},
        "assets": {"images": [{"id": "logo", "src": "logo.png"}], "audio": []},
        "states": [
            {
                "name": "A",
                "clearLayers": True,
                "layers": {"TEXT": [{"type": "text", "content": "hi"}]},
                "transition": {"type": "timer", "duration": 2, "nextState": "B"},
            },
            {"name": "B"},
        ],
    }
    doc.update(overrides)
    return doc


class TestParseSceneConfig:
    def test_basic_fields(self):
        config = parse_scene_config(_document())
        assert config.scene_name == "Test"
        assert config.canvas_size == (800, 600)
        assert config.state_names() == ["A", "B"]

    def test_state_fields(self):
        a, b = parse_scene_config(_document()).states
        assert a.clear_layers is True
        assert a.layers == {"TEXT": [{"type": "text", "content": "hi"}]}
        assert a.transition.type is TransitionType.TIMER
        assert a.transition.duration == 2.0
        assert a.transition.next_state == "B"
        assert b.clear_layers is False
        assert b.layers == {}
        assert b.transition is None

    def test_layer_order_is_document_order(self):
        doc = _document(states=[{
            "name": "A",
            "layers": {"UI_BUTTONS": [], "BG_FAR": [], "TEXT": []},
        }])
        state = parse_scene_config(doc).states[0]
        assert list(state.layers) == ["UI_BUTTONS", "BG_FAR", "TEXT"]

    def test_defaults_for_missing_fields(self):
        config = parse_scene_config({})
        assert config.scene_name == "ConfigurableScene"
        assert config.canvas_size == (1080, 1920)
        assert config.states == []

    def test_asset_ids(self):
        config = parse_scene_config(_document(assets={
            "images": [{"id": "logo", "src": "a.png"}],
            "audio": [{"id": "click", "src": "c.ogg"}, "sounds/boom.wav"],
        }))
        assert config.assets.ids() == ["logo", "click", "boom"]

    def test_non_mapping_document_raises(self):
        with pytest.raises(SceneConfigError):
            parse_scene_config(["not", "a", "scene"])

    def test_states_must_be_list(self):
        with pytest.raises(SceneConfigError):
            parse_scene_config(_document(states={"A": {}}))

    def test_state_without_name_raises(self):
        with pytest.raises(SceneConfigError, match="no name"):
            parse_scene_config(_document(states=[{"layers": {}}]))

    def test_layer_that_is_not_a_list_is_dropped(self, capsys):
        doc = _document(states=[{"name": "A", "layers": {"TEXT": {"type": "text"}}}])
        state = parse_scene_config(doc).states[0]
        assert state.layers == {}
        assert "is not a list" in capsys.readouterr().out

    @pytest.mark.parametrize("key", ["canvasSize", "assets"])
    def test_section_that_is_not_a_mapping_is_ignored(self, key, capsys):
        config = parse_scene_config(_document(**{key: [1080, 1920]}))
        assert config.canvas_size == ((800, 600) if key == "assets" else (1080, 1920))
        assert config.state_names() == ["A", "B"]
        assert f"{key} is not a mapping" in capsys.readouterr().out

    def test_malformed_asset_entries_are_dropped(self, capsys):
        config = parse_scene_config(_document(assets={
            "images": [{"id": "logo", "src": "a.png"}, 42, None],
            "audio": "click.ogg",
        }))
        assert config.assets.images == [{"id": "logo", "src": "a.png"}]
        assert config.assets.audio == []
        out = capsys.readouterr().out
        assert "skipped 2 malformed images entries" in out
        assert "assets.audio is not a list" in out

    def test_duplicate_state_names_warn(self, capsys):
        parse_scene_config(_document(states=[{"name": "A"}, {"name": "A"}]))
        assert "duplicate state name 'A'" in capsys.readouterr().out


class TestParseParts:
    def test_parse_enum_known_and_unknown(self, capsys):
        assert parse_enum(EntityKind, "sprite", "entity type") is EntityKind.SPRITE
        assert parse_enum(EntityKind, "video", "entity type") is None
        assert "unknown entity type 'video'" in capsys.readouterr().out

    def test_parse_enum_missing_returns_default_silently(self, capsys):
        assert parse_enum(Easing, None, "easing", Easing.LINEAR) is Easing.LINEAR
        assert capsys.readouterr().out == ""

    def test_animation_defaults(self):
        anim = parse_animation({"type": "slideIn"})
        assert anim.type is AnimationType.SLIDE_IN
        assert anim.duration == 1.0
        assert anim.delay == 0.0
        assert anim.easing is Easing.LINEAR
        assert anim.direction is SlideDirection.TOP

    def test_unknown_easing_falls_back_to_linear(self, capsys):
        anim = parse_animation({"type": "fadeIn", "easing": "bounce"})
        assert anim.easing is Easing.LINEAR
        assert "unknown easing 'bounce'" in capsys.readouterr().out

    def test_unknown_animation_type(self, capsys):
        assert parse_animation({"type": "spin"}) is None
        assert "unknown animation type 'spin'" in capsys.readouterr().out

    def test_action(self):
        action = parse_action({"action": "playSound", "sound": "click"})
        assert action.kind is ActionKind.PLAY_SOUND
        assert action.sound == "click"
        assert action.params == {"action": "playSound", "sound": "click"}

    def test_unknown_action(self, capsys):
        assert parse_action({"action": "explode"}) is None
        assert "unknown click action 'explode'" in capsys.readouterr().out

    def test_transition_to_scene(self):
        t = parse_transition({"type": "timer", "duration": 1.5, "nextScene": "Menu"})
        assert t.next_scene == "Menu"
        assert t.next_state is None

    def test_unknown_transition_type_is_ignored(self, capsys):
        assert parse_transition({"type": "onKey", "duration": 1}) is None
        assert "unknown transition type 'onKey'" in capsys.readouterr().out

    def test_timer_without_duration_is_ignored(self):
        assert parse_transition({"type": "timer", "nextState": "B"}) is None


class TestLoadSceneConfig:
    def test_load_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(_document()))
        config = load_scene_config(path)
        assert config.scene_name == "Test"
        assert config.base_path == str(tmp_path)

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "scene.yaml"
        path.write_text(yaml.dump(_document()))
        config = load_scene_config(str(path))
        assert config.state_names() == ["A", "B"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scene_config(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json")
        with pytest.raises(SceneConfigError, match="could not parse"):
            load_scene_config(path)

    def test_sample_document_loads(self):
        from pathlib import Path

        sample = Path(__file__).resolve().parent.parent / "assets" / "scenes" / "intro.json"
        config = load_scene_config(sample)
        assert config.state_names() == ["splash", "menu", "done"]
