"""Scene document model and loader.

A scene document (JSON, or YAML with the same structure) describes a scene
as data: canvas size, assets to preload, and an ordered list of states.

    {
      "sceneName": "Intro",
      "canvasSize": {"width": 1080, "height": 1920},
      "assets": {"images": [{"id": "logo", "src": "images/logo.png"}],
                 "audio": [{"id": "click", "src": "sounds/click.ogg"}]},
      "states": [
        {"name": "title", "clearLayers": true,
         "layers": {"TEXT": [{"type": "text", "content": "Hello"}]},
         "transition": {"type": "timer", "duration": 2, "nextState": "menu"}}
      ]
    }

Every string that selects behavior (entity kind, animation type, easing,
click action, transition type) is parsed here into a closed enum through
`parse_enum`, which is the single place unknown values are reported.
Entity configs themselves stay plain dicts; the entity factory reads their
fields with defaults.

Structural problems that leave nothing to run (the document or a state is
not a mapping, `states` is not a list, a state has no name) raise
SceneConfigError. Everything else degrades with a printed warning.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import yaml

from config import WIDTH, HEIGHT

E = TypeVar("E", bound=Enum)


class SceneConfigError(ValueError):
    """Raised when a scene document is structurally unusable."""


# ── Closed value sets ─────────────────────────────────────────────


class EntityKind(str, Enum):
    SPRITE = "sprite"
    BUTTON = "button"
    TEXT = "text"
    SHAPE = "shape"


class AnimationType(str, Enum):
    FADE_IN = "fadeIn"
    FADE_OUT = "fadeOut"
    SLIDE_IN = "slideIn"
    SCALE = "scale"
    PULSE = "pulse"


class Easing(str, Enum):
    LINEAR = "linear"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"


class SlideDirection(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class ActionKind(str, Enum):
    SWITCH_SCENE = "switchScene"
    SWITCH_STATE = "switchState"
    PLAY_SOUND = "playSound"
    CUSTOM = "custom"


class TransitionType(str, Enum):
    TIMER = "timer"


def parse_enum(
    enum_cls: Type[E],
    value: Any,
    what: str,
    default: Optional[E] = None,
    *,
    context: str = "SceneConfig",
) -> Optional[E]:
    """Map a document string onto `enum_cls`.

    Unknown values print a warning and return `default`; a missing value
    (None) returns `default` silently.
    """
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        fallback = f", using '{default.value}'" if default is not None else ""
        print(f"[{context}] Warning: unknown {what} '{value}'{fallback}")
        return default


# ── Document model ────────────────────────────────────────────────


@dataclass
class AnimationConfig:
    type: AnimationType
    duration: float = 1.0
    delay: float = 0.0
    easing: Easing = Easing.LINEAR
    direction: SlideDirection = SlideDirection.TOP


@dataclass
class ActionConfig:
    kind: ActionKind
    target: Optional[str] = None
    sound: Optional[str] = None
    # the raw descriptor, so custom handlers can read their own keys
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TransitionConfig:
    type: TransitionType
    duration: float
    next_state: Optional[str] = None
    next_scene: Optional[str] = None


@dataclass
class StateConfig:
    name: str
    clear_layers: bool = False
    layers: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)
    transition: Optional[TransitionConfig] = None


@dataclass
class AssetManifest:
    images: List[Any] = field(default_factory=list)
    audio: List[Any] = field(default_factory=list)
    videos: List[Any] = field(default_factory=list)

    def ids(self) -> List[str]:
        out: List[str] = []
        for entry in self.images + self.audio:
            if isinstance(entry, Mapping) and entry.get("id"):
                out.append(str(entry["id"]))
            elif isinstance(entry, str):
                out.append(os.path.splitext(os.path.basename(entry))[0])
        return out


@dataclass
class SceneConfig:
    scene_name: str = "ConfigurableScene"
    canvas_size: Tuple[int, int] = (WIDTH, HEIGHT)
    assets: AssetManifest = field(default_factory=AssetManifest)
    states: List[StateConfig] = field(default_factory=list)
    # directory of the document, used to resolve relative asset paths
    base_path: Optional[str] = None

    def state_names(self) -> List[str]:
        return [s.name for s in self.states]


# ── Parsing ───────────────────────────────────────────────────────


def _as_float(value: Any, default: float, what: str) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        print(f"[SceneConfig] Warning: {what} is not a number: {value!r}")
        return default


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        print(f"[SceneConfig] Warning: {what} is not a mapping, ignoring: {value!r}")
        return {}
    return value


def _asset_entries(value: Any, what: str) -> List[Any]:
    """Keep `{id, src}` mappings and bare path strings; drop anything else."""
    if value is None:
        return []
    if not isinstance(value, list):
        print(f"[SceneConfig] Warning: assets.{what} is not a list, ignoring")
        return []
    entries = [e for e in value if isinstance(e, (str, Mapping))]
    if len(entries) != len(value):
        print(f"[SceneConfig] Warning: skipped {len(value) - len(entries)} malformed {what} entries")
    return entries


def parse_animation(raw: Any) -> Optional[AnimationConfig]:
    if not isinstance(raw, Mapping):
        print(f"[SceneConfig] Warning: animation is not a mapping: {raw!r}")
        return None
    anim_type = parse_enum(AnimationType, raw.get("type"), "animation type")
    if anim_type is None:
        if raw.get("type") is None:
            print("[SceneConfig] Warning: animation without a type")
        return None
    return AnimationConfig(
        type=anim_type,
        duration=_as_float(raw.get("duration"), 1.0, "animation duration"),
        delay=_as_float(raw.get("delay"), 0.0, "animation delay"),
        easing=parse_enum(Easing, raw.get("easing"), "easing", Easing.LINEAR),
        direction=parse_enum(
            SlideDirection, raw.get("direction"), "slide direction", SlideDirection.TOP
        ),
    )


def parse_action(raw: Any) -> Optional[ActionConfig]:
    if not isinstance(raw, Mapping):
        print(f"[SceneConfig] Warning: onClick is not a mapping: {raw!r}")
        return None
    kind = parse_enum(ActionKind, raw.get("action"), "click action")
    if kind is None:
        if raw.get("action") is None:
            print("[SceneConfig] Warning: onClick without an action")
        return None
    return ActionConfig(
        kind=kind,
        target=raw.get("target"),
        sound=raw.get("sound"),
        params=dict(raw),
    )


def parse_transition(raw: Any) -> Optional[TransitionConfig]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        print(f"[SceneConfig] Warning: transition is not a mapping: {raw!r}")
        return None
    ttype = parse_enum(TransitionType, raw.get("type"), "transition type")
    if ttype is None:
        return None
    if raw.get("duration") is None:
        print("[SceneConfig] Warning: timer transition without a duration")
        return None
    return TransitionConfig(
        type=ttype,
        duration=_as_float(raw.get("duration"), 0.0, "transition duration"),
        next_state=raw.get("nextState"),
        next_scene=raw.get("nextScene"),
    )


def parse_state(raw: Any, index: int) -> StateConfig:
    if not isinstance(raw, Mapping):
        raise SceneConfigError(f"state #{index} is not a mapping")
    name = raw.get("name")
    if not name:
        raise SceneConfigError(f"state #{index} has no name")

    layers: Dict[str, List[Dict[str, Any]]] = {}
    raw_layers = raw.get("layers") or {}
    if not isinstance(raw_layers, Mapping):
        print(f"[SceneConfig] Warning: state '{name}' layers is not a mapping")
        raw_layers = {}
    for layer_name, entities in raw_layers.items():
        if not isinstance(entities, list):
            print(
                f"[SceneConfig] Warning: state '{name}' layer '{layer_name}' "
                "is not a list, ignoring"
            )
            continue
        layers[str(layer_name)] = [dict(e) for e in entities if isinstance(e, Mapping)]

    return StateConfig(
        name=str(name),
        clear_layers=bool(raw.get("clearLayers", False)),
        layers=layers,
        transition=parse_transition(raw.get("transition")),
    )


def parse_scene_config(raw: Any, base_path: Optional[str] = None) -> SceneConfig:
    """Build a SceneConfig from an already-decoded document."""
    if not isinstance(raw, Mapping):
        raise SceneConfigError("scene document must be a mapping")

    canvas = _as_mapping(raw.get("canvasSize"), "canvasSize")
    canvas_size = (
        int(_as_float(canvas.get("width"), WIDTH, "canvas width")),
        int(_as_float(canvas.get("height"), HEIGHT, "canvas height")),
    )

    assets = _as_mapping(raw.get("assets"), "assets")
    manifest = AssetManifest(
        images=_asset_entries(assets.get("images"), "images"),
        audio=_asset_entries(assets.get("audio"), "audio"),
        videos=_asset_entries(assets.get("videos"), "videos"),
    )

    raw_states = raw.get("states") or []
    if not isinstance(raw_states, list):
        raise SceneConfigError("'states' must be a list")
    states = [parse_state(s, i) for i, s in enumerate(raw_states)]

    seen = set()
    for s in states:
        if s.name in seen:
            print(f"[SceneConfig] Warning: duplicate state name '{s.name}'")
        seen.add(s.name)

    return SceneConfig(
        scene_name=str(raw.get("sceneName") or "ConfigurableScene"),
        canvas_size=canvas_size,
        assets=manifest,
        states=states,
        base_path=base_path,
    )


def load_scene_config(path: Union[str, Path]) -> SceneConfig:
    """Read and parse a scene document from disk.

    `.yaml` / `.yml` files are read with PyYAML, anything else as JSON.

    Raises:
        FileNotFoundError: Missing document.
        SceneConfigError: Undecodable or structurally invalid document.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                raw = yaml.safe_load(f)
            else:
                raw = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneConfigError(f"could not parse {path}: {e}") from e
    return parse_scene_config(raw, base_path=str(path.parent))


__all__ = [
    "SceneConfigError",
    "EntityKind",
    "AnimationType",
    "Easing",
    "SlideDirection",
    "ActionKind",
    "TransitionType",
    "parse_enum",
    "AnimationConfig",
    "ActionConfig",
    "TransitionConfig",
    "StateConfig",
    "AssetManifest",
    "SceneConfig",
    "parse_animation",
    "parse_action",
    "parse_transition",
    "parse_state",
    "parse_scene_config",
    "load_scene_config",
]
