"""Shared test fixtures.

pygame runs headless (SDL dummy drivers). Scenes get a stub engine that
carries the real LayerManager / SceneManager / InputHandler plus recording
stand-ins for the asset loader and audio manager.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from core.input_handler import InputHandler  # noqa: E402
from core.layer_manager import LayerManager  # noqa: E402
from core.scene_manager import SceneManager  # noqa: E402


class RecordingAudio:
    def __init__(self):
        self.played = []
        self.loaded = []
        self.unloaded = []

    def load(self, key, path, *, volume=None):
        self.loaded.append((key, path))
        return True

    def unload(self, key):
        self.unloaded.append(key)

    def play_sfx(self, key, *, volume=None):
        self.played.append(key)


class RecordingAssets:
    def __init__(self, images=None):
        self.images = dict(images or {})
        self.image_batches = []
        self.audio_batches = []
        self.unloaded = []

    def load_images(self, entries, base_path=None):
        self.image_batches.append((list(entries), base_path))
        return [e["id"] for e in entries]

    def load_audio_files(self, entries, base_path=None):
        self.audio_batches.append((list(entries), base_path))
        return [e["id"] for e in entries]

    def get_image(self, asset_id):
        return self.images.get(asset_id)

    def unload_assets(self, asset_ids):
        self.unloaded.extend(asset_ids)


class StubEngine:
    def __init__(self):
        self.layer_manager = LayerManager()
        self.scene_manager = SceneManager(self)
        self.input_handler = InputHandler()
        self.audio_manager = RecordingAudio()
        self.asset_loader = RecordingAssets()
        self.text_renderer = None


@pytest.fixture
def engine():
    return StubEngine()


def press(engine, x, y):
    """Simulate a fresh left-button press at canvas (x, y)."""
    mouse = engine.input_handler.mouse
    mouse.x, mouse.y = x, y
    mouse.pressed = True
    mouse.down = True
