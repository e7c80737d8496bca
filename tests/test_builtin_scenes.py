"""The boot scene, the paddle demo and loading documents from main."""

import pygame
import pytest

from conftest import press
from core.layer_manager import Layer
from main import build_parser, load_document_scene
from scenes.boot_scene import BOOT_SCENE_NAME, BootScene
from scenes.configurable_scene import ConfigurableScene
from scenes.pong_scene import PONG_SCENE_NAME, PongScene


class TestBootScene:
    def test_populates_from_inline_document(self, engine):
        boot = BootScene()
        engine.scene_manager.register(BOOT_SCENE_NAME, boot)
        engine.scene_manager.switch_to(BOOT_SCENE_NAME)
        assert boot.get_current_state_name() == "ready"
        assert boot.get_entity("title") is not None
        counts = engine.layer_manager.layer_counts()
        assert counts["BG_FAR"] == 1
        assert counts["TEXT"] == 2
        assert counts["UI_BUTTONS"] == 1

    def test_demo_button_opens_pong(self, engine):
        boot, pong = BootScene(), PongScene()
        engine.scene_manager.register(BOOT_SCENE_NAME, boot)
        engine.scene_manager.register(PONG_SCENE_NAME, pong)
        engine.scene_manager.switch_to(BOOT_SCENE_NAME)
        # let the button's scale-in animation finish
        boot.update(2.0)
        button = boot.get_entity("play-demo")
        cx, cy = button.center
        press(engine, cx, cy)
        boot.update(0.016)
        assert engine.scene_manager.current_scene is pong


class TestPongScene:
    @pytest.fixture
    def pong(self, engine):
        scene = PongScene()
        engine.scene_manager.register(PONG_SCENE_NAME, scene)
        engine.scene_manager.register("Boot", ConfigurableScene("Boot"))
        engine.scene_manager.switch_to(PONG_SCENE_NAME)
        return scene

    def test_layers(self, engine, pong):
        assert len(engine.layer_manager.get_layer(Layer.SPRITES)) == 3
        assert engine.layer_manager.get_layer(Layer.TEXT) == [pong.score_text]
        assert pong.score_text.content == "0 - 0"

    def test_ball_moves(self, pong):
        pong.ball_vel_x, pong.ball_vel_y = 100.0, 0.0
        x = pong.ball.x
        pong.update(0.1)
        assert pong.ball.x == pytest.approx(x + 10.0)

    def test_player_scores_when_ball_leaves_right(self, pong):
        pong.ball.x = pong.game_width + 1
        pong._check_score()
        assert pong.player_score == 1
        assert pong.score_text.content == "1 - 0"

    def test_paddle_stays_in_court(self, engine, pong):
        engine.input_handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
        for _ in range(100):
            pong.update(0.1)
        assert pong.player_paddle.y == pytest.approx(pong.offset_y)

    def test_escape_returns(self, engine, pong):
        engine.input_handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        pong.update(0.016)
        assert engine.scene_manager.current_scene.name == "Boot"


class TestMain:
    def test_load_document_scene(self, engine, tmp_path):
        path = tmp_path / "doc.yaml"
        path.write_text(
            "sceneName: Yaml\n"
            "states:\n"
            "  - name: only\n"
            "    layers:\n"
            "      TEXT:\n"
            "        - {type: text, content: hi}\n"
        )
        scene = load_document_scene(engine, str(path))
        assert scene is engine.scene_manager.current_scene
        assert scene.name == "Yaml"
        assert len(engine.layer_manager.get_layer("TEXT")) == 1

    def test_bad_document_returns_none(self, engine, tmp_path, capsys):
        assert load_document_scene(engine, str(tmp_path / "nope.json")) is None
        assert engine.scene_manager.current_scene is None
        assert "Failed to load scene" in capsys.readouterr().out

    def test_parser(self):
        args = build_parser().parse_args(["--scene", "x.json", "--debug"])
        assert args.scene == "x.json"
        assert args.debug is True
        assert args.demo is None
