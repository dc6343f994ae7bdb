import pytest

from bubblebobble.scenes import (
    CurrScene,
    Game,
    GameMode,
    SceneState,
    SoundEvent,
)


class RecordingState(SceneState):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_enter(self):
        self.log.append((self.name, "enter"))

    def on_exit(self):
        self.log.append((self.name, "exit"))

    def on_suspend(self):
        self.log.append((self.name, "suspend"))

    def on_resume(self):
        self.log.append((self.name, "resume"))


@pytest.fixture
def log():
    return []


@pytest.fixture
def game(log):
    factories = {
        scene: (lambda scene=scene: RecordingState(scene.value, log))
        for scene in CurrScene
        if scene is not CurrScene.WELCOME_SCREEN
    }
    sounds = []
    g = Game(factories, play_sound=lambda event, volume: sounds.append((event, volume)))
    g.sounds = sounds
    return g


def test_start_enters_title_screen_and_plays_music(game, log):
    game.start()
    assert log == [("title_screen", "enter")]
    assert game.current_scene.name == "title_screen"
    assert game.sounds == [(SoundEvent.TITLE_SCREEN, 80)]


def test_set_scene_exits_all_from_top(game, log):
    game.start()
    game.push_scene(CurrScene.LEVEL)
    game.push_scene(CurrScene.PAUSE_SCREEN)
    log.clear()
    game.set_scene(CurrScene.MENU)
    assert log == [
        ("pause_screen", "exit"),
        ("level", "exit"),
        ("title_screen", "exit"),
        ("menu", "enter"),
    ]
    assert [s.name for s in game.stack] == ["menu"]


def test_push_then_pop_suspends_and_resumes(game, log):
    game.set_scene(CurrScene.LEVEL)
    game.push_scene(CurrScene.PAUSE_SCREEN)
    game.pop_scene()
    assert log == [
        ("level", "enter"),
        ("level", "suspend"),
        ("pause_screen", "enter"),
        ("pause_screen", "exit"),
        ("level", "resume"),
    ]
    assert game.current_scene.name == "level"
    assert len(game.stack) == 1


def test_pop_without_scene_below_raises(game):
    game.start()
    with pytest.raises(RuntimeError):
        game.pop_scene()


def test_push_on_empty_stack_raises(game):
    with pytest.raises(RuntimeError):
        game.push_scene(CurrScene.MENU)


def test_unregistered_scene_raises_and_keeps_stack(game, log):
    game.start()
    with pytest.raises(ValueError):
        game.set_scene(CurrScene.WELCOME_SCREEN)
    assert [s.name for s in game.stack] == ["title_screen"]
    assert log == [("title_screen", "enter")]


def test_game_mode_defaults_and_changes(game):
    assert game.game_mode is GameMode.SINGLE_PLAYER
    game.set_game_mode(GameMode.VERSUS)
    assert game.game_mode is GameMode.VERSUS


def test_start_plays_title_sound_with_declared_id(game):
    game.start()
    event, volume = game.sounds[0]
    assert event.value == 1
    assert volume == 80
    assert [e.value for e in SoundEvent] == list(range(len(SoundEvent)))


def test_base_scene_hooks_do_nothing():
    state = SceneState()
    g = Game({CurrScene.TITLE_SCREEN: lambda: state})
    g.start()
    assert g.current_scene is state