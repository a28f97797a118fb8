import math

import pytest

from gadgetry.quat import Quat


def z_rotation(theta):
    return Quat(0.0, 0.0, math.sin(theta / 2), math.cos(theta / 2))


def test_identity_components():
    q = Quat.identity()
    assert (q.x, q.y, q.z, q.w) == (0.0, 0.0, 0.0, 1.0)


def test_mul_returns_quat():
    assert isinstance(Quat.identity().mul(Quat.identity()), Quat)
    assert Quat.identity().mul(Quat.identity()) == Quat.identity()


@pytest.mark.parametrize("a,b", [(0.3, 0.5), (1.0, 0.25), (-0.7, 2.0)])
def test_mul_composes_rotations(a, b):
    composed = z_rotation(a).mul(z_rotation(b))
    assert composed.eq(z_rotation(a + b))


@pytest.mark.parametrize("theta", [0.25, 1.0, 2.5])
def test_angle_rad_to_identity(theta):
    assert math.isclose(Quat.identity().angle_rad(z_rotation(theta)), theta)


def test_angle_deg_matches_rad():
    q = z_rotation(math.pi / 2)
    assert math.isclose(Quat.identity().angle_deg(q), 90.0)


def test_angle_to_self_is_zero():
    q = z_rotation(0.8)
    assert q.angle_rad(q) == pytest.approx(0.0, abs=1e-6)


def test_eq_threshold():
    assert z_rotation(0.4).eq(z_rotation(0.4))
    assert not z_rotation(0.4).eq(z_rotation(1.4))