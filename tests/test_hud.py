from nightcastle.hud import VisualFigures


class FakeClock:
    def __init__(self, value=0):
        self.value = value

    def __call__(self):
        return self.value


def test_starts_at_three_hundred():
    hud = VisualFigures(FakeClock(5))
    assert hud.time_count == 300
    assert hud.time_start_count == 5


def test_no_tick_before_a_second():
    clock = FakeClock(0)
    hud = VisualFigures(clock)
    clock.value = 999
    hud.update(16)
    assert hud.time_count == 300
    assert hud.time_start_count == 0


def test_ticks_after_a_second():
    clock = FakeClock(0)
    hud = VisualFigures(clock)
    clock.value = 1000
    hud.update(16)
    assert hud.time_count == 299
    assert hud.time_start_count == 1000


def test_stopped_time_does_not_tick():
    clock = FakeClock(0)
    hud = VisualFigures(clock)
    hud.is_stop_time = True
    clock.value = 5000
    hud.update(16)
    assert hud.time_count == 300


def test_timer_never_goes_below_zero():
    clock = FakeClock(0)
    hud = VisualFigures(clock)
    hud.time_count = 0
    clock.value = 2000
    hud.update(16)
    assert hud.time_count == 0
    assert hud.time_start_count == 2000