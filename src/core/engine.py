"""Core engine loop & orchestration.

Separates concerns:
- Engine: window, clock, the per-frame event -> update -> render loop, and
  ownership of the shared collaborators scenes reach through `scene.engine`.
- LayerManager: z-ordered entity buckets rendered every frame.
- SceneManager: named scenes and the current one.

Scenes draw onto a fixed-size logical canvas (WIDTH x HEIGHT, portrait by
default); the canvas is scaled into the window each frame and pointer
positions are mapped back into canvas pixels.
"""

from __future__ import annotations

from typing import Dict, Optional

import pygame

from config import *
from core.input_handler import InputHandler
from core.layer_manager import LayerManager
from core.scene_manager import SceneManager
from sound.sound_utils import AudioManager
from textures.texture_manager import AssetLoader
from textures.texture_utils import scale_surface
from ui.text_renderer import TextRenderer


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        *,
        window_scale: float = WINDOW_SCALE,
        show_debug: bool = SHOW_DEBUG,
    ) -> None:
        pygame.init()
        pygame.display.set_caption("Scene Canvas")
        self.width = width
        self.height = height
        self.window_size = (
            max(1, int(width * window_scale)),
            max(1, int(height * window_scale)),
        )
        flags = pygame.FULLSCREEN if FULLSCREEN else 0
        try:
            # vsync: 1 to enable, 0 to disable
            self.window = pygame.display.set_mode(
                self.window_size, flags, vsync=(1 if VSYNC else 0)
            )
        except pygame.error:
            # vsync was requested but is unavailable on this system/driver
            self.window = pygame.display.set_mode(self.window_size, flags)
        self.canvas = pygame.Surface((width, height)).convert()
        self.clock = pygame.time.Clock()
        self.is_running = False
        self.show_debug = show_debug

        # Collaborators shared with scenes
        self.layer_manager = LayerManager()
        self.scene_manager = SceneManager(self)
        self.input_handler = InputHandler(
            scale=(width / self.window_size[0], height / self.window_size[1])
        )
        self.audio_manager = AudioManager()
        self.asset_loader = AssetLoader(audio_manager=self.audio_manager)
        self.text_renderer = TextRenderer()

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            self.input_handler.handle_event(event)
            # Forward events to the active scene
            self.scene_manager.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        self.scene_manager.update(min(dt, MAX_FRAME_DT))
        self.input_handler.end_frame()

    # ------------------------------------------------------------------
    def render(self) -> None:  # pragma: no cover - visual
        self.canvas.fill(CLEAR_COLOR)
        self.layer_manager.render(self.canvas)
        if self.show_debug:
            self._draw_debug_overlay()
        self.window.blit(scale_surface(self.canvas, self.window_size), (0, 0))
        pygame.display.flip()

    def _draw_debug_overlay(self) -> None:  # pragma: no cover - visual
        info = self.debug_info()
        lines = [
            f"FPS {info['fps']:.0f}",
            f"Scene {info['scene']}",
            f"State {info['state']}",
            f"Entities {info['total_entities']}",
        ]
        for i, line in enumerate(lines):
            self.text_renderer.draw_text(
                self.canvas, line, 16, 16 + i * 40, DEBUG_TEXT_COLOR, font="32px Arial"
            )

    def debug_info(self) -> Dict[str, object]:
        scene = self.scene_manager.current_scene
        get_state = getattr(scene, "get_current_state_name", None)
        counts = self.layer_manager.layer_counts()
        return {
            "running": self.is_running,
            "scene": getattr(scene, "name", None) or "None",
            "state": (get_state() if callable(get_state) else None) or "N/A",
            "fps": self.clock.get_fps(),
            "layer_counts": counts,
            "total_entities": sum(counts.values()),
        }

    # ------------------------------------------------------------------
    def run(self, max_frames: Optional[int] = None) -> None:  # pragma: no cover - visual
        self.is_running = True
        frames = 0
        while self.is_running:
            # Without VSYNC tick() still caps at FPS as a safety net
            dt = self.clock.tick(FPS) / 1000.0
            if not self.handle_events():
                break
            self.update(dt)
            self.render()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
        self.is_running = False
        pygame.quit()

    def stop(self) -> None:
        self.is_running = False
