import math

import pytest

from world.geometry import (
    angle_between,
    cartesian_to_polar,
    distance,
    polar_to_cartesian,
    random_point,
    wrap_around,
)


def test_polar_to_cartesian_axes():
    x, y = polar_to_cartesian(2.0, math.pi / 2)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(2.0)

    x, y = polar_to_cartesian(3.0, 0.0)
    assert (x, y) == pytest.approx((3.0, 0.0))


def test_cartesian_to_polar_inverts_polar_to_cartesian():
    mag, ang = cartesian_to_polar(*polar_to_cartesian(5.0, 1.1))
    assert mag == pytest.approx(5.0)
    assert ang == pytest.approx(1.1)


def test_angle_between_points():
    assert angle_between((0.0, 0.0), (1.0, 1.0)) == pytest.approx(math.pi / 4)
    assert angle_between((5.0, 5.0), (0.0, 5.0)) == pytest.approx(math.pi)
    assert angle_between((0.0, 0.0), (0.0, -3.0)) == pytest.approx(-math.pi / 2)


def test_distance():
    assert distance((5.0, 5.0), (2.0, 2.0)) == pytest.approx(4.2426, abs=1e-3)


def test_wrap_inside_is_noop():
    assert wrap_around(10.0, 20.0, 100.0, 50.0) == (10.0, 20.0)
    assert wrap_around(0.0, 0.0, 100.0, 50.0) == (0.0, 0.0)


def test_wrap_at_or_beyond_bound_goes_to_opposite_edge():
    assert wrap_around(100.0, 10.0, 100.0, 50.0) == (0.0, 10.0)
    x, y = wrap_around(101.5, -2.0, 100.0, 50.0)
    assert x == pytest.approx(1.5)
    assert y == pytest.approx(48.0)


@pytest.mark.parametrize("x, y", [(-1e-20, 3.0), (250.0, -75.0), (99.999, 50.0), (-0.5, 49.9)])
def test_wrap_is_idempotent(x, y):
    once = wrap_around(x, y, 100.0, 50.0)
    assert wrap_around(*once, 100.0, 50.0) == once
    assert 0.0 <= once[0] < 100.0
    assert 0.0 <= once[1] < 50.0


def test_random_point_inside_field(seeded_rng):
    for _ in range(500):
        x, y = random_point(seeded_rng, 30.0, 10.0)
        assert 0.0 <= x < 30.0
        assert 0.0 <= y < 10.0
