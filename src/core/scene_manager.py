"""Scene registry and the single scene-transition primitive."""

from __future__ import annotations

from typing import Dict, Optional


class SceneManager:
    """Holds the named scenes and the currently active one.

    Scenes are duck-typed: `exit`, `enter`, `populate_layers`, `update` and
    `handle_event` are all optional and silently skipped when missing.
    """

    def __init__(self, engine) -> None:
        self.engine = engine
        self._current = None
        self._scenes: Dict[str, object] = {}

    @property
    def current_scene(self):
        return self._current

    def register(self, name: str, scene) -> None:
        self._scenes[name] = scene

    def get(self, name: str) -> Optional[object]:
        return self._scenes.get(name)

    def switch_to(self, name: str) -> None:
        scene = self._scenes.get(name)
        if scene is None:
            print(f"[SceneManager] Warning: scene '{name}' not registered")
            return
        self.change_scene(scene)

    def change_scene(self, new_scene) -> None:
        """Exit the current scene and bring up `new_scene`.

        Order matters: the compositor is emptied before the new scene is
        entered, and `enter` runs before `populate_layers`, so nothing from
        the previous scene is ever drawn on top of the new one.
        """
        old = self._current
        if old is not None and callable(getattr(old, "exit", None)):
            old.exit()

        if new_scene is not None and callable(getattr(new_scene, "set_engine", None)):
            new_scene.set_engine(self.engine)

        self.engine.layer_manager.clear_all()

        self._current = new_scene

        if new_scene is None:
            return
        if callable(getattr(new_scene, "enter", None)):
            new_scene.enter()
        if callable(getattr(new_scene, "populate_layers", None)):
            new_scene.populate_layers()

    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        scene = self._current
        if scene is not None and callable(getattr(scene, "update", None)):
            scene.update(dt)

    def handle_event(self, event) -> None:
        scene = self._current
        if scene is not None and callable(getattr(scene, "handle_event", None)):
            scene.handle_event(event)


__all__ = ["SceneManager"]
