"""Scenes package: re-export the interpreter and the built-in scenes.

    from scenes import ConfigurableScene, load_scene_config
"""

from .scene_config import SceneConfig, SceneConfigError, load_scene_config, parse_scene_config
from .animation import Animation, Animator, apply_easing
from .entity_factory import EntityFactory
from .configurable_scene import ConfigurableScene
from .boot_scene import BootScene, BOOT_SCENE_NAME
from .pong_scene import PongScene, PONG_SCENE_NAME

__all__ = [
    "SceneConfig",
    "SceneConfigError",
    "load_scene_config",
    "parse_scene_config",
    "Animation",
    "Animator",
    "apply_easing",
    "EntityFactory",
    "ConfigurableScene",
    "BootScene",
    "BOOT_SCENE_NAME",
    "PongScene",
    "PONG_SCENE_NAME",
]
