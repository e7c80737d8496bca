"""Entry point kept minimal by delegating to Engine.

    python src/main.py                        # boot scene
    python src/main.py --scene intro.json     # run a scene document
    python src/main.py --demo pong            # jump straight into the demo

A scene document that can't be read or parsed is reported and the boot
scene is shown instead, so the window always comes up.
"""

from __future__ import annotations

import argparse
import os
from typing import Optional

from config import DEFAULT_SCENE, SHOW_DEBUG
from core.engine import Engine  # noqa: E402 (local import order)
from scenes.boot_scene import BOOT_SCENE_NAME, BootScene
from scenes.configurable_scene import ConfigurableScene
from scenes.pong_scene import PONG_SCENE_NAME, PongScene
from scenes.scene_config import SceneConfigError, load_scene_config
from textures.resourcepath import SCENES_PATH


def find_scene_document(path: str) -> str:
    """Fall back to the bundled scenes directory for bare names like `intro.json`."""
    if os.path.exists(path) or os.path.isabs(path):
        return path
    bundled = os.path.join(SCENES_PATH, path)
    return bundled if os.path.exists(bundled) else path


def load_document_scene(engine: Engine, path: str) -> Optional[ConfigurableScene]:
    """Register the scene described by `path` and switch to it.

    Returns None (leaving the current scene alone) if the document fails to load.
    """
    try:
        config = load_scene_config(find_scene_document(path))
    except (OSError, SceneConfigError) as e:
        print(f"Failed to load scene {path}: {e}")
        return None
    scene = ConfigurableScene().load_from_config(config)
    engine.scene_manager.register(config.scene_name, scene)
    engine.scene_manager.switch_to(config.scene_name)
    print(f"Scene '{config.scene_name}' loaded: {' -> '.join(config.state_names())}")
    return scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a declarative 2D scene.")
    parser.add_argument("--scene", default=DEFAULT_SCENE, help="scene document (.json/.yaml)")
    parser.add_argument("--demo", choices=["pong"], help="start the built-in demo instead")
    parser.add_argument("--debug", action="store_true", default=SHOW_DEBUG, help="show the debug overlay")
    return parser


def main(argv=None):  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    engine = Engine(show_debug=args.debug)
    engine.scene_manager.register(BOOT_SCENE_NAME, BootScene())
    engine.scene_manager.register(PONG_SCENE_NAME, PongScene())

    started = None
    if args.demo == "pong":
        engine.scene_manager.switch_to(PONG_SCENE_NAME)
        started = PONG_SCENE_NAME
    elif args.scene:
        if load_document_scene(engine, args.scene) is not None:
            started = args.scene
    if started is None:
        engine.scene_manager.switch_to(BOOT_SCENE_NAME)
    engine.run()


if __name__ == "__main__":
    main()
