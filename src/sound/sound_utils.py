"""Sound effects for scenes, keyed by the ids used in scene documents.

The engine owns one AudioManager and hands it to scenes:

    engine.audio_manager.load("click", "assets/sounds/click.ogg", volume=0.5)
    engine.audio_manager.play_sfx("click")

The mixer starts lazily on the first load. If it can't start (no audio
device, dummy driver without mixer support) every call turns into a no-op
after one printed note, and a scene keeps running without sound.
"""

from __future__ import annotations

from typing import Dict, Optional, Set
import os
import pygame
from config import MUTE


def _clamp_volume(volume: float) -> float:
    return max(0.0, min(1.0, float(volume)))


class AudioManager:
    def __init__(self, *, muted: bool = MUTE) -> None:
        self.muted = muted
        self._mixer_state: Optional[bool] = None  # None until the first attempt
        self._effects: Dict[str, pygame.mixer.Sound] = {}
        self._warned: Set[str] = set()

    # --------------------------- mixer ----------------------------------
    def _mixer_ready(self) -> bool:
        if self._mixer_state is None:
            try:
                if pygame.mixer.get_init() is None:
                    pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
                self._mixer_state = pygame.mixer.get_init() is not None
            except pygame.error as e:  # pragma: no cover - environment dependent
                print(f"[AudioManager] Mixer unavailable, sound disabled: {e}")
                self._mixer_state = False
        return self._mixer_state and pygame.mixer.get_init() is not None

    # --------------------------- registry -------------------------------
    def load(self, key: str, path: str, *, volume: Optional[float] = None) -> bool:
        """Register the sound at `path` under `key`. Returns False if skipped."""
        if not os.path.exists(path):
            print(f"[AudioManager] Skipping missing sound '{key}': {path}")
            return False
        if not self._mixer_ready():
            return False
        try:
            effect = pygame.mixer.Sound(path)
        except pygame.error as e:  # pragma: no cover - codec dependent
            print(f"[AudioManager] Could not decode '{key}' ({path}): {e}")
            return False
        if volume is not None:
            effect.set_volume(_clamp_volume(volume))
        self._effects[key] = effect
        self._warned.discard(key)
        return True

    def unload(self, key: str) -> None:
        effect = self._effects.pop(key, None)
        if effect is not None and self._mixer_ready():
            effect.stop()

    def is_loaded(self, key: str) -> bool:
        return key in self._effects

    def clear(self) -> None:
        for key in list(self._effects):
            self.unload(key)

    # --------------------------- playback -------------------------------
    def play_sfx(
        self, key: str, *, volume: Optional[float] = None
    ) -> Optional[pygame.mixer.Channel]:
        """Play `key` once on a free channel (stealing one if all are busy)."""
        if self.muted or not self._mixer_ready():
            return None
        effect = self._effects.get(key)
        if effect is None:
            # one note per id; a button pressed repeatedly would spam
            if key not in self._warned:
                print(f"[AudioManager] Warning: sound '{key}' not loaded")
                self._warned.add(key)
            return None
        channel = pygame.mixer.find_channel(True)
        if channel is None:
            return None
        # channel volume only, so the sound's base volume is untouched
        channel.set_volume(_clamp_volume(volume) if volume is not None else 1.0)
        channel.play(effect)
        return channel

    def stop(self, key: str) -> None:
        effect = self._effects.get(key)
        if effect is not None and self._mixer_ready():
            effect.stop()


__all__ = ["AudioManager"]
