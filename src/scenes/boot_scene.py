"""Fallback scene shown when no scene document is given or loading failed.

It is itself a ConfigurableScene built from an inline document, so it
doubles as a smoke test of the interpreter: a fading title, a pulsing
hint, and a button that opens the demo game when that scene is registered.
"""

from __future__ import annotations

from config import WIDTH, HEIGHT
from scenes.configurable_scene import ConfigurableScene

BOOT_SCENE_NAME = "Boot"


def boot_document(width: int = WIDTH, height: int = HEIGHT) -> dict:
    cx, cy = width / 2, height / 2
    return {
        "sceneName": BOOT_SCENE_NAME,
        "canvasSize": {"width": width, "height": height},
        "states": [
            {
                "name": "ready",
                "clearLayers": True,
                "layers": {
                    "BG_FAR": [
                        {"type": "shape", "shape": "rect", "width": width,
                         "height": height, "color": "#0f172a"},
                    ],
                    "BG_NEAR": [
                        {"type": "shape", "shape": "rect", "y": height / 2,
                         "width": width, "height": height / 2,
                         "color": "#1e3a5f", "alpha": 0.35},
                    ],
                    "TEXT": [
                        {"id": "title", "type": "text", "content": "Ready",
                         "x": cx, "y": cy - 160, "font": "bold 96px Arial",
                         "color": "#94a3b8", "textAlign": "center",
                         "animation": {"type": "fadeIn", "duration": 0.8,
                                       "easing": "easeOut"}},
                        {"id": "hint", "type": "text",
                         "content": "Pass --scene <file.json> to load a scene",
                         "x": cx, "y": cy - 20, "font": "36px Arial",
                         "color": "#64748b", "textAlign": "center",
                         "animation": {"type": "fadeIn", "duration": 0.8,
                                       "delay": 0.4}},
                    ],
                    "UI_BUTTONS": [
                        {"id": "play-demo", "type": "button", "text": "Play demo",
                         "x": cx - 160, "y": cy + 120, "width": 320, "height": 96,
                         "onClick": {"action": "switchScene", "target": "Pong"},
                         "animation": {"type": "scale", "duration": 0.5,
                                       "delay": 0.6, "easing": "easeInOut"}},
                    ],
                },
            },
        ],
    }


class BootScene(ConfigurableScene):
    def __init__(self) -> None:
        super().__init__(BOOT_SCENE_NAME)
        self.load_from_config(boot_document())


__all__ = ["BootScene", "BOOT_SCENE_NAME", "boot_document"]
