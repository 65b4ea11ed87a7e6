import pytest

from nightcastle.camera import Camera
from nightcastle.config import MENU_BACKGROUND_ID
from nightcastle.objects import RenderView
from nightcastle.scenes import IntroScene, MenuScene, Scene, SceneManager
from nightcastle.sprites import SpriteSheet
from nightcastle.state import GameState


class RecordingGraphics:
    def __init__(self):
        self.calls = []
        self.color = (255, 255, 255)

    def draw(self, *args):
        self.calls.append(args)

    def set_color(self, r, g, b):
        self.color = (r, g, b)


class RecordingScene(Scene):
    def __init__(self):
        self.events = []

    def enter(self):
        self.events.append("enter")

    def update(self, dt, co_objects=None):
        self.events.append(("update", dt))

    def draw(self, view):
        self.events.append("draw")


def test_change_scene_enters_scene():
    manager = SceneManager(GameState(), RecordingGraphics())
    scene = RecordingScene()
    manager.change_scene(scene)
    assert manager.current is scene
    assert scene.events == ["enter"]


def test_update_and_draw_forward_during_play():
    manager = SceneManager(GameState(), RecordingGraphics())
    scene = RecordingScene()
    manager.change_scene(scene)
    manager.update(16)
    manager.draw(RenderView(RecordingGraphics(), SpriteSheet()))
    assert scene.events == ["enter", ("update", 16), "draw"]


@pytest.mark.parametrize("flag", ["is_game_win", "is_game_end"])
def test_halted_game_skips_scene(flag):
    state = GameState()
    setattr(state, flag, True)
    manager = SceneManager(state, RecordingGraphics())
    scene = RecordingScene()
    manager.change_scene(scene)
    manager.update(16)
    manager.draw(RenderView(RecordingGraphics(), SpriteSheet()))
    assert scene.events == ["enter"]


def test_cross_flashes_white_or_black():
    state = GameState(is_cross_activated=True)
    graphics = RecordingGraphics()
    graphics.color = (1, 2, 3)
    SceneManager(state, graphics).update(16)
    assert graphics.color in {(255, 255, 255), (0, 0, 0)}


def test_intro_enter_loads_map_and_bounds_camera(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("1 2\n3 4\n")
    camera = Camera()
    scene = IntroScene(path, camera)
    scene.enter()
    assert (camera.left_corner_block, camera.right_corner_block) == (0.0, 1504.0)
    assert scene.background.matrix == [[3, 4]]


def test_intro_draw_renders_each_tile(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("1 2\n3 4\n")
    sprites = SpriteSheet()
    sprites.add(3, 0, 0, 32, 32, None)
    sprites.add(4, 32, 0, 64, 32, None)
    scene = IntroScene(path, Camera())
    scene.enter()
    graphics = RecordingGraphics()
    scene.draw(RenderView(graphics, sprites))
    assert [call[:2] for call in graphics.calls] == [(0.0, 0.0), (32.0, 0.0)]


def test_intro_missing_map_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        IntroScene(tmp_path / "none.txt", Camera()).enter()


def test_menu_draws_background_at_origin():
    sprites = SpriteSheet()
    sprites.add(MENU_BACKGROUND_ID, 0, 0, 552, 384, None)
    scene = MenuScene(sprites, GameState())
    graphics = RecordingGraphics()
    scene.draw(RenderView(graphics, sprites))
    assert len(graphics.calls) == 1
    assert graphics.calls[0][:2] == (0, 0)
    assert graphics.calls[0][3:7] == (0, 0, 552, 384)


def test_menu_without_background_draws_nothing():
    scene = MenuScene(SpriteSheet(), GameState())
    graphics = RecordingGraphics()
    scene.draw(RenderView(graphics, SpriteSheet()))
    assert graphics.calls == []