from nane.fps import FpsTimer


def _clock(values):
    it = iter(values)
    return lambda: next(it)


def test_no_rate_until_a_second_passes():
    timer = FpsTimer(_clock([0, 0, 0]))
    assert [timer.calc_fps() for _ in range(3)] == [0, 0, 0]


def test_reports_frames_counted_in_previous_second():
    timer = FpsTimer(_clock([0, 100, 200, 300, 400, 1001]))
    for _ in range(5):
        timer.calc_fps()
    assert timer.calc_fps() == 5
    assert timer.counter == 1
    assert timer.start_time == 1001


def test_exactly_one_second_does_not_roll_over():
    timer = FpsTimer(_clock([0, 1000]))
    timer.calc_fps()
    assert timer.calc_fps() == 0
    assert timer.counter == 2


def test_tick_wraparound():
    timer = FpsTimer(_clock([0xFFFFFF00, 0xFFFFFF10, 0x00000500]))
    timer.start_time = 0xFFFFFF00
    timer.calc_fps()
    timer.calc_fps()
    assert timer.calc_fps() == 2


def test_default_clock_counts_frames():
    timer = FpsTimer()
    first = timer.calc_fps()
    timer.calc_fps()
    assert first == 0
    assert timer.counter >= 1