from nightcastle.objects import RenderView
from nightcastle.simon import Simon
from nightcastle.sprites import SpriteSheet


class RecordingGraphics:
    def __init__(self):
        self.calls = []

    def draw(self, *args):
        self.calls.append(args)


def test_starting_position_and_size():
    simon = Simon()
    assert (simon.x, simon.y) == (200.0, 100.0)
    assert (simon.width, simon.height) == (32.0, 60.0)


def test_update_keeps_position():
    simon = Simon()
    simon.vx = 2.0
    before = (simon.x, simon.y)
    simon.update(16)
    simon.update_location()
    assert (simon.x, simon.y) == before
    assert simon.dt == 16


def test_render_draws_sprite_zero_relative_to_camera():
    graphics = RecordingGraphics()
    sprites = SpriteSheet()
    sprites.add(0, 0, 0, 32, 60, None)
    simon = Simon()
    simon.render(RenderView(graphics, sprites, camera_x=50.0, camera_y=20.0))
    assert len(graphics.calls) == 1
    x, y = graphics.calls[0][0], graphics.calls[0][1]
    assert (x, y) == (simon.x - 50.0, simon.y - 20.0)


def test_render_without_sprite_draws_nothing():
    graphics = RecordingGraphics()
    Simon().render(RenderView(graphics, SpriteSheet()))
    assert graphics.calls == []


def test_stop_run_and_walk_leave_speed():
    simon = Simon()
    simon.vx = 1.5
    simon.stop_run()
    simon.walk()
    assert simon.vx == 1.5
    assert simon.dx == 0.0