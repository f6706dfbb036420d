import pytest

from vastucompass.smoothing import AngleSmoother, normalize_degrees, shortest_delta


@pytest.mark.parametrize(
    "angle, expected",
    [(0.0, 0.0), (360.0, 0.0), (-10.0, 350.0), (725.0, 5.0), (-1e-15, 0.0)],
)
def test_normalize_degrees(angle, expected):
    assert normalize_degrees(angle) == pytest.approx(expected)
    assert 0.0 <= normalize_degrees(angle) < 360.0


@pytest.mark.parametrize(
    "target, current, expected",
    [(1.0, 359.0, 2.0), (359.0, 1.0, -2.0), (180.0, 0.0, 180.0), (0.0, 180.0, 180.0), (90.0, 45.0, 45.0)],
)
def test_shortest_delta_stays_within_half_turn(target, current, expected):
    assert shortest_delta(target, current) == pytest.approx(expected)


def test_first_sample_initialises_state():
    s = AngleSmoother(0.15)
    assert s.value is None
    assert s.filter(370.0) == pytest.approx(10.0)
    assert s.value == pytest.approx(10.0)


def test_output_always_normalised():
    s = AngleSmoother(0.5)
    for angle in [0, 359, -720, 1e6, 181, -181, 45.5]:
        out = s.filter(angle)
        assert 0.0 <= out < 360.0


def test_wraparound_takes_short_arc():
    s = AngleSmoother(0.5)
    s.filter(359.0)
    out = s.filter(1.0)
    # Half-way along the 2° arc through north, not back through 180°
    assert out == pytest.approx(0.0, abs=1e-9)


def test_wraparound_never_passes_through_south():
    s = AngleSmoother(0.15)
    s.filter(350.0)
    for _ in range(50):
        out = s.filter(10.0)
        assert out >= 350.0 or out <= 10.0


def test_converges_to_constant_input():
    s = AngleSmoother(0.15)
    s.filter(0.0)
    for _ in range(200):
        out = s.filter(120.0)
    assert out == pytest.approx(120.0, abs=1e-6)


def test_samples_around_north_stay_near_north():
    s = AngleSmoother(0.15)
    for angle in [0.0, 10.0, 350.0] * 20:
        out = s.filter(angle)
        assert out <= 10.0 or out >= 350.0


def test_reset_forgets_state():
    s = AngleSmoother(0.15)
    s.filter(100.0)
    s.reset()
    assert s.value is None
    assert s.filter(200.0) == pytest.approx(200.0)


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
def test_invalid_alpha_rejected(alpha):
    with pytest.raises(ValueError):
        AngleSmoother(alpha)
