import math

import pytest

from gadgetry.mat4 import MAT4_IDENTITY, Mat4, mat4_identities
from gadgetry.vec3 import Vec3
from gadgetry.vec4 import Vec4


def _sample() -> Mat4:
    return Mat4(float(i + 1) * (-1) ** i for i in range(16))


def test_new_matrix_is_zero_and_clear_zeroes():
    m = _sample()
    m.clear()
    assert m == Mat4()
    assert all(c == 0.0 for c in Mat4())


def test_wrong_cell_count_raises():
    with pytest.raises(ValueError):
        Mat4([1.0, 2.0])


def test_identity():
    m = _sample()
    m.identity()
    assert list(m) == list(MAT4_IDENTITY)
    assert Mat4.new_identity() == m
    assert all(m[i * 5] == 1.0 for i in range(4))


def test_mult_with_identity_keeps_matrix():
    m = _sample()
    assert Mat4.new_mult4(m, Mat4.new_identity()) == m
    assert Mat4.new_mult4(Mat4.new_identity(), m) == m


def test_transposed_twice_is_original():
    m = _sample()
    t = m.transposed()
    assert t != m
    assert t.transposed() == m
    assert t[1] == m[4]
    assert t[12] == m[3]


def test_add_and_sub_round_trip():
    a, b = _sample(), Mat4(range(16))
    total = Mat4.new_add(a, b)
    assert Mat4.new_sub(total, b) == a
    c = a.clone()
    c.add(b)
    assert c == total
    c.sub(b)
    assert c == a


def test_mult1_matches_adding_to_itself():
    m = _sample()
    assert Mat4.new_mult1(m, 2.0) == Mat4.new_add(m, m)
    n = m.clone()
    n.mult1(2.0)
    assert n == Mat4.new_add(m, m)


def test_clone_is_independent():
    m = _sample()
    c = m.clone()
    c[0] = 100.0
    assert m[0] != c[0]


def test_copy_to_and_from():
    m = _sample()
    dst = Mat4()
    m.copy_to(dst)
    assert dst == m
    other = Mat4()
    other.copy_from(m)
    assert other == m


def test_abs():
    m = _sample()
    a = m.abs()
    assert all(c >= 0 for c in a)
    assert Mat4.new_mult1(m, -1.0).abs() == a


def test_rotation_inverse_is_identity():
    for make in (Mat4.new_rotation_x, Mat4.new_rotation_y, Mat4.new_rotation_z):
        prod = Mat4.new_mult4(make(0.7), make(-0.7))
        assert list(prod) == pytest.approx(list(MAT4_IDENTITY))


def test_rotation_z_quarter_turn():
    v = Vec4(1.0, 0.0, 0.0, 1.0)
    v.mult_mat4(Mat4.new_rotation_z(math.pi / 2))
    assert (v.x, v.y, v.z, v.w) == pytest.approx((0.0, 1.0, 0.0, 1.0), abs=1e-12)


def test_translation_moves_point():
    t = Mat4.new_translation(Vec3(3.0, -2.0, 5.0))
    v = Vec4(0.0, 0.0, 0.0, 1.0)
    v.mult_mat4(t)
    assert (v.x, v.y, v.z, v.w) == (3.0, -2.0, 5.0, 1.0)


def test_scaling_scales_point():
    s = Mat4.new_scaling(Vec3(2.0, 3.0, 4.0))
    v = Vec4(1.0, 1.0, 1.0, 1.0)
    v.mult_mat4(s)
    assert (v.x, v.y, v.z, v.w) == (2.0, 3.0, 4.0, 1.0)


def test_mult_n_matches_chained_mult4():
    a, b, c = Mat4.new_rotation_x(0.3), Mat4.new_translation(Vec3(1, 2, 3)), _sample()
    expected = Mat4.new_mult4(Mat4.new_mult4(a, b), c)
    assert list(Mat4.new_mult_n(a, b, c)) == pytest.approx(list(expected))
    assert list(Mat4.new_mult_n(a, None, b)) == pytest.approx(list(Mat4.new_mult4(a, b)))


def test_mult_n_single_leaves_matrix_unchanged():
    m = _sample()
    m.set_from_mult_n(Mat4.new_identity())
    assert m == _sample()


def test_mult_n_without_matrices_raises():
    with pytest.raises(ValueError):
        Mat4.new_mult_n()


def test_perspective_returns_half_fov():
    m = Mat4()
    half = m.perspective(90.0, 1.5, 0.1, 100.0)
    assert half == pytest.approx(math.pi / 4)
    assert m[11] == -1.0
    assert m[15] == 0.0
    assert Mat4.new_perspective(90.0, 1.5, 0.1, 100.0) == m


def test_frustum_fixed_cells():
    m = Mat4.new_frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
    assert m[11] == -1.0
    assert m[15] == 0.0
    assert m[8] == 0.0
    assert m[9] == 0.0


def test_lookat_down_negative_z_is_identity():
    m = Mat4.new_lookat(Vec3(0, 0, 0), Vec3(0, 0, -1), Vec3(0, 1, 0))
    assert list(m) == pytest.approx(list(MAT4_IDENTITY))


def test_orient_rows_are_orthogonal():
    m = Mat4.new_orient(Vec3(0.0, 0.0, 1.0), Vec3(0.0, 1.0, 0.0))
    u = Vec3(m[0], m[4], m[8])
    v = Vec3(m[1], m[5], m[9])
    n = Vec3(m[2], m[6], m[10])
    assert u.dot(v) == pytest.approx(0.0)
    assert u.dot(n) == pytest.approx(0.0)
    assert v.dot(n) == pytest.approx(0.0)
    assert m[15] == 1.0


def test_mat4_identities():
    a, b = _sample(), Mat4()
    mat4_identities(a, b)
    assert a == Mat4.new_identity()
    assert b == Mat4.new_identity()