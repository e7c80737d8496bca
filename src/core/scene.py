"""Base scene with optional lifecycle hooks.

A scene is bound to the engine by the SceneManager right before it is
entered; until then `engine` is None and the convenience accessors return
None as well. Subclasses override whichever hooks they need:

- init():            one-time setup (asset loading), run by the first enter()
- enter() / exit():  activation and teardown
- populate_layers(): initial compositor population after enter()
- update(dt):        per-frame logic
- handle_event(ev):  raw pygame events
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Scene:
    name: str = "Scene"
    engine: Optional[object] = None
    _initialized: bool = field(default=False, repr=False)

    def set_engine(self, engine) -> None:
        self.engine = engine

    # Collaborators owned by the engine
    @property
    def layer_manager(self):
        return getattr(self.engine, "layer_manager", None)

    @property
    def input_handler(self):
        return getattr(self.engine, "input_handler", None)

    @property
    def asset_loader(self):
        return getattr(self.engine, "asset_loader", None)

    @property
    def audio_manager(self):
        return getattr(self.engine, "audio_manager", None)

    @property
    def scene_manager(self):
        return getattr(self.engine, "scene_manager", None)

    # ------------------------------------------------------------------
    def init(self) -> None:
        pass

    def enter(self) -> None:
        if not self._initialized:
            self.init()
            self._initialized = True

    def exit(self) -> None:
        pass

    def populate_layers(self) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def switch_scene(self, name: str) -> None:
        manager = self.scene_manager
        if manager is None:
            print(f"[{self.name}] Warning: no scene manager to switch to '{name}'")
            return
        manager.switch_to(name)
