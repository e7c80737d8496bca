"""Scene whose content and behavior come from a scene document.

The scene walks an ordered list of named states. Activating a state
(optionally) clears the compositor, then instantiates every entity the
state lists into its layer, records entities that carry an `id`, and starts
their declared animations. Each frame it advances the state timer and the
animations, dispatches clicks on buttons, and fires the state's timer
transition once it is due.

Data mistakes (unknown layers, entity kinds, states, scenes...) never raise:
they print a warning and the scene keeps running with what it could build.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from core.drawable import Clickable
from core.layer_manager import Layer
from core.scene import Scene
from scenes.animation import Animator
from scenes.entity_factory import EntityFactory
from scenes.scene_config import (
    ActionConfig,
    ActionKind,
    SceneConfig,
    StateConfig,
    TransitionConfig,
    TransitionType,
    parse_animation,
    parse_scene_config,
)


class ConfigurableScene(Scene):
    def __init__(
        self,
        name: str = "ConfigurableScene",
        *,
        custom_action_handler: Optional[Callable[[ActionConfig], None]] = None,
    ) -> None:
        super().__init__(name=name)
        self.config: Optional[SceneConfig] = None
        self.canvas_size: Tuple[int, int] = (1080, 1920)

        # State machine
        self.states: List[StateConfig] = []
        self.current_state_index = 0
        self.current_state_name: Optional[str] = None
        self.state_timer = 0.0

        # Entity tracking
        self._entities: Dict[str, object] = {}
        self._clickables: List[object] = []
        self.animations = Animator()
        # bumped on every activation or teardown; click dispatch stops when it changes
        self._activation = 0

        self.custom_action_handler = custom_action_handler

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_from_config(
        self, config: Union[SceneConfig, Mapping[str, Any]]
    ) -> "ConfigurableScene":
        """Adopt a scene document (parsed or raw). Returns self for chaining."""
        if not isinstance(config, SceneConfig):
            config = parse_scene_config(config)
        self.config = config
        self.name = config.scene_name
        self.canvas_size = config.canvas_size
        self.states = list(config.states)
        return self

    def init(self) -> None:
        """Preload the document's images and audio."""
        if self.config is None:
            print(f"[{self.name}] Warning: no config loaded")
            return
        loader = self.asset_loader
        if loader is None:
            print(f"[{self.name}] Warning: no asset loader, skipping preload")
            return
        assets = self.config.assets
        base = self.config.base_path
        images = loader.load_images(assets.images, base) if assets.images else []
        audio = loader.load_audio_files(assets.audio, base) if assets.audio else []
        if assets.videos:
            print(f"[{self.name}] Skipping {len(assets.videos)} video asset(s): not supported")
        print(f"[{self.name}] Assets loaded: images={len(images)} audio={len(audio)}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def enter(self) -> None:
        super().enter()
        self.current_state_index = 0
        self.state_timer = 0.0
        if self.states:
            self.current_state_name = self.states[0].name
            print(f"[{self.name}] Entering state: {self.current_state_name}")

    def exit(self) -> None:
        self._drop_tracking()
        loader = self.asset_loader
        if self.config is not None and loader is not None:
            asset_ids = self.config.assets.ids()
            if asset_ids:
                loader.unload_assets(asset_ids)
                # reload on the next enter()
                self._initialized = False

    def populate_layers(self) -> None:
        if self.states:
            self._setup_state(self.states[0])

    # ------------------------------------------------------------------
    # Per-frame
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        if not self.states:
            return
        state = self.current_state
        if state is None:
            return

        self.state_timer += dt
        self.animations.update(dt)

        pointer = getattr(self.input_handler, "mouse", None)
        if pointer is not None and pointer.pressed:
            activation = self._activation
            self._handle_clicks(pointer.x, pointer.y)
            # a click changed state or left the scene
            if self._activation != activation:
                return

        transition = state.transition
        if transition is not None and transition.type is TransitionType.TIMER:
            if self.state_timer >= transition.duration:
                self._handle_transition(transition)

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    @property
    def current_state(self) -> Optional[StateConfig]:
        if 0 <= self.current_state_index < len(self.states):
            return self.states[self.current_state_index]
        return None

    def get_current_state_name(self) -> Optional[str]:
        return self.current_state_name

    def get_entity(self, entity_id: str):
        return self._entities.get(entity_id)

    def switch_to_state(self, state_name: str) -> None:
        index = next(
            (i for i, s in enumerate(self.states) if s.name == state_name), None
        )
        if index is None:
            print(f"[{self.name}] Warning: state not found: {state_name}")
            return

        print(f"[{self.name}] Switching to state: {state_name}")
        self.current_state_index = index
        self.current_state_name = state_name
        self.state_timer = 0.0
        self._setup_state(self.states[index])

    def _handle_transition(self, transition: TransitionConfig) -> None:
        if transition.next_scene:
            self.switch_scene(transition.next_scene)
        elif transition.next_state:
            self.switch_to_state(transition.next_state)

    def _drop_tracking(self) -> None:
        self._activation += 1
        self._entities.clear()
        self._clickables.clear()
        self.animations.clear()

    def _setup_state(self, state: StateConfig) -> None:
        self._activation += 1
        layers = self.layer_manager
        if state.clear_layers:
            if layers is not None:
                layers.clear_all()
            self._drop_tracking()

        factory = self._entity_factory()
        for layer_name, entity_configs in state.layers.items():
            layer = Layer.from_name(layer_name)
            if layer is None:
                print(
                    f"[{self.name}] Warning: state '{state.name}' uses unknown layer "
                    f"'{layer_name}', skipping {len(entity_configs)} entities"
                )
                continue
            for entity_config in entity_configs:
                entity = factory.create(entity_config)
                if entity is None:
                    continue
                if layers is not None:
                    layers.add_to_layer(entity, layer)

                entity_id = entity_config.get("id")
                if entity_id:
                    self._entities[str(entity_id)] = entity
                if isinstance(entity, Clickable):
                    self._clickables.append(entity)

                if entity_config.get("animation") is not None:
                    anim_config = parse_animation(entity_config["animation"])
                    if anim_config is not None:
                        self.animations.attach(entity, anim_config, self.canvas_size)

    def _entity_factory(self) -> EntityFactory:
        loader = self.asset_loader
        return EntityFactory(
            get_image=loader.get_image if loader is not None else None,
            on_action=self._handle_button_action,
            text_renderer=getattr(self.engine, "text_renderer", None),
        )

    # ------------------------------------------------------------------
    # Input / actions
    # ------------------------------------------------------------------
    def _handle_clicks(self, x: float, y: float) -> None:
        activation = self._activation
        for entity in list(self._clickables):
            entity.check_click(x, y)
            # the action rebuilt the state (or left the scene); the rest are stale
            if self._activation != activation:
                return

    def _handle_button_action(self, action: ActionConfig) -> None:
        print(f"[{self.name}] Button action: {action.kind.value}")
        if action.kind is ActionKind.SWITCH_SCENE:
            if action.target:
                self.switch_scene(action.target)
        elif action.kind is ActionKind.SWITCH_STATE:
            if action.target:
                self.switch_to_state(action.target)
        elif action.kind is ActionKind.PLAY_SOUND:
            audio = self.audio_manager
            if action.sound and audio is not None:
                audio.play_sfx(action.sound)
        elif action.kind is ActionKind.CUSTOM:
            if self.custom_action_handler is not None:
                self.custom_action_handler(action)
            else:
                print(f"[{self.name}] Custom action: {action.params}")


__all__ = ["ConfigurableScene"]
