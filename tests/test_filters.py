import pytest

from nane.filters import FirstOrderFilter, HighPassFilter, LowPassFilter

RATE = 1789773


def test_base_filter_is_abstract():
    with pytest.raises(TypeError):
        FirstOrderFilter(90, RATE)


@pytest.mark.parametrize("cls", [LowPassFilter, HighPassFilter])
def test_silence_stays_silent(cls):
    flt = cls(440, RATE)
    assert all(flt.process(0.0) == 0.0 for _ in range(100))


def test_low_pass_step_response_rises_monotonically():
    flt = LowPassFilter(14000, RATE)
    outputs = [flt.process(1.0) for _ in range(200)]
    assert all(0.0 < y <= 1.0 for y in outputs)
    assert all(a < b for a, b in zip(outputs, outputs[1:]))


def test_low_pass_converges_to_constant_input():
    flt = LowPassFilter(14000, RATE)
    y = 0.0
    for _ in range(10000):
        y = flt.process(1.0)
    assert y == pytest.approx(1.0, rel=1e-6)


def test_high_pass_step_response_decays():
    flt = HighPassFilter(440, RATE)
    outputs = [flt.process(1.0) for _ in range(200)]
    assert 0.0 < outputs[0] < 1.0
    assert all(a > b for a, b in zip(outputs, outputs[1:]))


def test_high_pass_removes_constant_offset():
    flt = HighPassFilter(440, RATE)
    y = 1.0
    for _ in range(20000):
        y = flt.process(1.0)
    assert y == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("cls", [LowPassFilter, HighPassFilter])
def test_filters_are_linear(cls):
    signal = [0.3, -0.2, 0.9, 0.1, 0.0, 0.5]
    single = cls(90, RATE)
    double = cls(90, RATE)
    for x in signal:
        assert double.process(2 * x) == pytest.approx(2 * single.process(x))