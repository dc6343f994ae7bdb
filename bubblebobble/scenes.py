"""Scene identifiers and the game object that keeps a stack of scene states."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable, Mapping, Optional

TITLE_SCREEN_SOUND = "Sounds/TitleScreen.wav"
TITLE_SCREEN_VOLUME = 80


class GameMode(Enum):
    SINGLE_PLAYER = "single_player"
    MULTI_PLAYER = "multi_player"
    VERSUS = "versus"


class CurrScene(Enum):
    TITLE_SCREEN = "title_screen"
    MENU = "menu"
    LEVEL = "level"
    PAUSE_SCREEN = "pause_screen"
    RESULTS = "results"
    HIGH_SCORE = "high_score"
    DEATH_SCREEN = "death_screen"
    WELCOME_SCREEN = "welcome_screen"


class SoundEvent(IntEnum):
    """Sound identifiers; the values are the ids handed to the audio service."""

    MAIN_THEME = 0
    TITLE_SCREEN = 1
    SELECT = 2
    SHOOT = 3
    ENEMY_DEATH = 4
    PICK_UP = 5
    JUMP = 6
    JUMP_BUBBLE = 7
    BOULDER = 8


class ScenePhase(Enum):
    """Where a scene state is in its life on the stack."""

    CREATED = "created"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    EXITED = "exited"


class SceneState:
    """A scene of the game; it records its phase as the hooks are called.

    Subclasses override the hooks they need and call the base hook to keep
    the recorded phase up to date.
    """

    phase: ScenePhase = ScenePhase.CREATED

    def on_enter(self) -> None:
        """Called when the scene becomes active for the first time."""
        self.phase = ScenePhase.ACTIVE

    def on_exit(self) -> None:
        """Called when the scene is removed from the stack."""
        self.phase = ScenePhase.EXITED

    def on_suspend(self) -> None:
        """Called when another scene is pushed on top of this one."""
        self.phase = ScenePhase.SUSPENDED

    def on_resume(self) -> None:
        """Called when the scene on top of this one is popped."""
        self.phase = ScenePhase.ACTIVE


SceneFactory = Callable[[], SceneState]
SoundPlayer = Callable[[SoundEvent, int], object]


class Game:
    """Owns the stack of scene states and the chosen game mode."""

    def __init__(
        self,
        scene_factories: Mapping[CurrScene, SceneFactory],
        play_sound: Optional[SoundPlayer] = None,
    ) -> None:
        self._factories = dict(scene_factories)
        self._play_sound = play_sound
        self._stack: list[SceneState] = []
        self.game_mode = GameMode.SINGLE_PLAYER

    @property
    def stack(self) -> tuple[SceneState, ...]:
        return tuple(self._stack)

    @property
    def current_scene(self) -> Optional[SceneState]:
        return self._stack[-1] if self._stack else None

    def _create(self, scene: CurrScene) -> SceneState:
        try:
            factory = self._factories[scene]
        except KeyError:
            raise ValueError(f"no scene registered for {scene}") from None
        return factory()

    def start(self) -> None:
        """Play the title music and enter the title screen."""
        if self._play_sound is not None:
            self._play_sound(SoundEvent.TITLE_SCREEN, TITLE_SCREEN_VOLUME)
        state = self._create(CurrScene.TITLE_SCREEN)
        self._stack.append(state)
        state.on_enter()

    def set_scene(self, scene: CurrScene) -> None:
        """Exit every scene, top first, and enter ``scene`` on an empty stack."""
        state = self._create(scene)
        for old in reversed(self._stack):
            old.on_exit()
        self._stack.clear()
        self._stack.append(state)
        state.on_enter()

    def push_scene(self, scene: CurrScene) -> None:
        """Suspend the current scene and enter ``scene`` on top of it."""
        if not self._stack:
            raise RuntimeError("there is no scene to suspend")
        state = self._create(scene)
        self._stack[-1].on_suspend()
        self._stack.append(state)
        state.on_enter()

    def pop_scene(self) -> None:
        """Exit the top scene and resume the one below it."""
        if len(self._stack) < 2:
            raise RuntimeError("there is no scene to return to")
        self._stack.pop().on_exit()
        self._stack[-1].on_resume()

    def set_game_mode(self, mode: GameMode) -> None:
        self.game_mode = mode