"""Paddle-and-ball demo written directly against the engine.

Sample content rather than part of the interpreter: it shows a code-defined
scene using the same compositor layers and entities as scene documents.
Player paddle on the left (W/S or arrow keys), a simple AI on the right.
Escape returns to the boot scene.
"""

from __future__ import annotations

import random

import pygame

from config import WIDTH, HEIGHT
from core.layer_manager import Layer
from core.scene import Scene
from entities import Entity, ShapeEntity, Sprite, TextEntity

PONG_SCENE_NAME = "Pong"


class _CenterLine(Entity):
    """Dashed vertical divider."""

    dash: int = 20

    def draw(self, surface: pygame.Surface) -> None:
        x = int(self.x)
        y = int(self.y)
        end = int(self.y + self.height)
        while y < end:
            pygame.draw.line(surface, (255, 255, 255), (x, y), (x, min(end, y + self.dash // 2)), 2)
            y += self.dash


class PongScene(Scene):
    def __init__(
        self,
        *,
        width: int = WIDTH,
        canvas_height: int = HEIGHT,
        court_height: int = 600,
        ball_speed: float = 400.0,
        paddle_speed: float = 300.0,
        return_scene: str = "Boot",
    ) -> None:
        super().__init__(name=PONG_SCENE_NAME)
        self.game_width = width
        self.game_height = court_height
        # court centered vertically on the canvas
        self.offset_y = (canvas_height - court_height) / 2
        self.ball_speed = ball_speed
        self.paddle_speed = paddle_speed
        self.return_scene = return_scene

        self.player_score = 0
        self.ai_score = 0
        self.ball_vel_x = ball_speed
        self.ball_vel_y = 0.0

        self.player_paddle: Sprite
        self.ai_paddle: Sprite
        self.ball: Sprite
        self.score_text: TextEntity

    def init(self) -> None:
        mid_y = self.offset_y + self.game_height / 2
        self.player_paddle = Sprite(x=50, y=mid_y - 50, width=20, height=100, color="#00ff00")
        self.ai_paddle = Sprite(
            x=self.game_width - 70, y=mid_y - 50, width=20, height=100, color="#ff0000"
        )
        self.ball = Sprite(x=self.game_width / 2 - 10, y=mid_y - 10, width=20, height=20, color="#ffffff")
        self.score_text = TextEntity(
            x=self.game_width / 2, y=self.offset_y - 80, font="48px Arial", text_align="center"
        )
        self.reset_ball()

    def enter(self) -> None:
        super().enter()
        self.player_score = 0
        self.ai_score = 0
        self.reset_ball()

    def populate_layers(self) -> None:
        layers = self.layer_manager
        layers.add_to_layer(
            ShapeEntity(y=self.offset_y, width=self.game_width, height=self.game_height, color="#000000"),
            Layer.BG_FAR,
        )
        layers.add_to_layer(
            _CenterLine(x=self.game_width / 2, y=self.offset_y, height=self.game_height),
            Layer.BG_NEAR,
        )
        for sprite in (self.player_paddle, self.ai_paddle, self.ball):
            layers.add_to_layer(sprite, Layer.SPRITES)
        layers.add_to_layer(self.score_text, Layer.TEXT)
        self._update_score_text()

    # ------------------------------------------------------------------
    def reset_ball(self) -> None:
        self.ball.x = self.game_width / 2 - 10
        self.ball.y = self.offset_y + self.game_height / 2 - 10
        self.ball_vel_x = self.ball_speed * (1 if random.random() > 0.5 else -1)
        self.ball_vel_y = (random.random() - 0.5) * self.ball_speed * 0.5

    def update(self, dt: float) -> None:
        inp = self.input_handler
        if inp is not None and inp.is_key_down(pygame.K_ESCAPE):
            self.switch_scene(self.return_scene)
            return
        self._handle_input(dt)
        self._update_ai(dt)
        self.ball.x += self.ball_vel_x * dt
        self.ball.y += self.ball_vel_y * dt
        self._bounce()
        self._check_score()

    def _clamp_paddle(self, paddle: Sprite) -> None:
        top = self.offset_y
        bottom = self.offset_y + self.game_height - paddle.height
        paddle.y = max(top, min(bottom, paddle.y))

    def _handle_input(self, dt: float) -> None:
        inp = self.input_handler
        if inp is None:
            return
        if inp.is_key_down(pygame.K_UP, pygame.K_w):
            self.player_paddle.y -= self.paddle_speed * dt
        if inp.is_key_down(pygame.K_DOWN, pygame.K_s):
            self.player_paddle.y += self.paddle_speed * dt
        self._clamp_paddle(self.player_paddle)

    def _update_ai(self, dt: float) -> None:
        paddle_center = self.ai_paddle.y + self.ai_paddle.height / 2
        ball_center = self.ball.y + self.ball.height / 2
        # slightly slower than the player
        step = self.paddle_speed * dt * 0.8
        if ball_center < paddle_center - 10:
            self.ai_paddle.y -= step
        elif ball_center > paddle_center + 10:
            self.ai_paddle.y += step
        self._clamp_paddle(self.ai_paddle)

    @staticmethod
    def _overlaps(a: Sprite, b: Sprite) -> bool:
        return (
            a.x <= b.x + b.width
            and a.x + a.width >= b.x
            and a.y + a.height >= b.y
            and a.y <= b.y + b.height
        )

    def _bounce(self) -> None:
        ball = self.ball
        if ball.y <= self.offset_y or ball.y + ball.height >= self.offset_y + self.game_height:
            self.ball_vel_y = -self.ball_vel_y

        for paddle, sign in ((self.player_paddle, 1), (self.ai_paddle, -1)):
            if self._overlaps(ball, paddle):
                self.ball_vel_x = sign * abs(self.ball_vel_x)
                # angle depends on where the ball met the paddle
                hit = (ball.y + ball.height / 2 - paddle.y) / paddle.height
                self.ball_vel_y = (hit - 0.5) * self.ball_speed

    def _check_score(self) -> None:
        if self.ball.x + self.ball.width < 0:
            self.ai_score += 1
            self.reset_ball()
            self._update_score_text()
        elif self.ball.x > self.game_width:
            self.player_score += 1
            self.reset_ball()
            self._update_score_text()

    def _update_score_text(self) -> None:
        self.score_text.content = f"{self.player_score} - {self.ai_score}"


__all__ = ["PongScene", "PONG_SCENE_NAME"]
