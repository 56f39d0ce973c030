import math

import pytest

from geometry import angle_from_vertical, joint_angle, midpoint


def _rigid(p, theta, dx, dy):
    c, s = math.cos(theta), math.sin(theta)
    return (c * p[0] - s * p[1] + dx, s * p[0] + c * p[1] + dy)


def test_straight_leg_reads_180():
    assert joint_angle((0.5, 0.6), (0.5, 0.8), (0.5, 1.0)) == pytest.approx(180.0)


def test_right_angle_reads_90():
    assert joint_angle((0.2, 0.5), (0.5, 0.5), (0.5, 0.8)) == pytest.approx(90.0)


def test_folded_chain_reads_0():
    assert joint_angle((0.5, 0.5), (0.5, 0.8), (0.5, 0.5)) == pytest.approx(0.0)


@pytest.mark.parametrize(
    "a,b,c",
    [
        ((0.3, 0.3), (0.3, 0.3), (0.6, 0.6)),
        ((0.3, 0.3), (0.6, 0.6), (0.6, 0.6)),
        ((0.4, 0.4), (0.4, 0.4), (0.4, 0.4)),
    ],
)
def test_coincident_points_are_unavailable(a, b, c):
    assert joint_angle(a, b, c) is None


@pytest.mark.parametrize("missing", [0, 1, 2])
def test_missing_point_is_unavailable(missing):
    pts = [(0.1, 0.2), (0.4, 0.5), (0.7, 0.3)]
    pts[missing] = None
    assert joint_angle(*pts) is None


@pytest.mark.parametrize(
    "theta,dx,dy",
    [(0.0, 0.3, -0.2), (math.pi / 3, 0.0, 0.0), (-2.1, 1.5, 4.0), (math.pi, -0.7, 0.25)],
)
def test_joint_angle_is_rigid_motion_invariant(theta, dx, dy):
    a, b, c = (0.2, 0.3), (0.45, 0.55), (0.5, 0.9)
    expected = joint_angle(a, b, c)
    moved = joint_angle(*(_rigid(p, theta, dx, dy) for p in (a, b, c)))
    assert moved == pytest.approx(expected, abs=0.011)


def test_upright_trunk_is_zero():
    assert angle_from_vertical((0.5, 0.3), (0.5, 0.6)) == pytest.approx(0.0, abs=1e-9)


def test_vertical_angle_grows_with_lean():
    assert angle_from_vertical((0.6, 0.5), (0.5, 0.6)) == pytest.approx(45.0)
    assert angle_from_vertical((0.8, 0.6), (0.5, 0.6)) == pytest.approx(90.0)
    assert angle_from_vertical((0.5, 0.9), (0.5, 0.6)) == pytest.approx(180.0)


def test_vertical_angle_degenerate_inputs():
    assert angle_from_vertical((0.5, 0.5), (0.5, 0.5)) is None
    assert angle_from_vertical(None, (0.5, 0.5)) is None
    assert angle_from_vertical((0.5, 0.5), None) is None


def test_midpoint():
    assert midpoint((0.2, 0.4), (0.6, 0.8)) == pytest.approx((0.4, 0.6))
    assert midpoint(None, (0.6, 0.8)) is None
    assert midpoint((0.2, 0.4), None) is None
