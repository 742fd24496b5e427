import math

import pytest

from cdfengine.matrix import Matrix
from cdfengine.vector3 import Vector3


def assert_close(a: Matrix, b: Matrix) -> None:
    for x, y in zip(a.to_list(), b.to_list()):
        assert math.isclose(x, y, rel_tol=1e-9, abs_tol=1e-9)


def sample() -> Matrix:
    return (
        Matrix.translate(1.5, -2.0, 3.0)
        * Matrix.rotate(Vector3(1.0, 2.0, 3.0), 0.7)
        * Matrix.scaling(2.0, 3.0, 0.5)
    )


def test_identity_layout():
    assert Matrix.identity().to_list() == [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


def test_translate_stores_offset_in_last_column():
    values = Matrix.translate(4.0, 5.0, 6.0).to_list()
    assert values[12:15] == [4.0, 5.0, 6.0]
    assert values[15] == 1.0


def test_multiply_by_identity():
    m = sample()
    assert_close(m * Matrix.identity(), m)
    assert_close(Matrix.identity() * m, m)


def test_operator_matches_method():
    a = sample()
    b = Matrix.rotate_y(0.3)
    assert a * b == a.multiply(b)
    assert a @ b == a.multiply(b)


def test_inverse_gives_identity():
    m = sample()
    assert_close(m * m.invert(), Matrix.identity())


def test_singular_matrix_cannot_be_inverted():
    with pytest.raises(ZeroDivisionError):
        Matrix().invert()


def test_determinant_of_scaling():
    assert math.isclose(Matrix.scaling(2.0, 3.0, 4.0).determinant(), 2.0 * 3.0 * 4.0)


def test_determinant_is_multiplicative():
    a = sample()
    b = Matrix.scaling(1.5, 2.5, -1.0) * Matrix.rotate_x(1.1)
    assert math.isclose(
        (a * b).determinant(), a.determinant() * b.determinant(), rel_tol=1e-9
    )


def test_transpose_round_trip_and_trace():
    m = sample()
    assert m.transpose().transpose() == m
    assert math.isclose(m.transpose().trace(), m.trace())
    assert m.transpose().m1 == m.m4


def test_add_subtract_round_trip():
    a = sample()
    b = Matrix.rotate_z(0.4)
    assert_close((a + b) - b, a)


def test_axis_rotation_matches_rotate_x():
    assert_close(Matrix.rotate(Vector3(1.0, 0.0, 0.0), 0.9), Matrix.rotate_x(0.9))
    assert_close(Matrix.rotate(Vector3(5.0, 0.0, 0.0), 0.9), Matrix.rotate_x(0.9))


def test_euler_rotations_for_single_axes():
    assert_close(Matrix.rotate_xyz(Vector3(0.6, 0.0, 0.0)), Matrix.rotate_x(0.6))
    assert_close(Matrix.rotate_zyx(Vector3(0.6, 0.0, 0.0)), Matrix.rotate_x(0.6))
    assert_close(Matrix.rotate_xyz(Vector3(0.0, 0.0, 0.6)), Matrix.rotate_z(0.6))
    assert_close(Matrix.rotate_zyx(Vector3(0.0, 0.0, 0.6)), Matrix.rotate_z(0.6))


def test_rotation_is_orthonormal():
    rot = Matrix.rotate(Vector3(1.0, -2.0, 0.5), 1.3)
    assert_close(rot.transpose(), rot.invert())
    assert math.isclose(rot.determinant(), 1.0)


def test_perspective_matches_symmetric_frustum():
    fov, aspect, near, far = 1.0, 1.5, 0.1, 100.0
    top = near * math.tan(fov * 0.5)
    right = top * aspect
    assert_close(
        Matrix.perspective(fov, aspect, near, far),
        Matrix.frustum(-right, right, -top, top, near, far),
    )


def test_unit_ortho_flips_depth():
    assert_close(
        Matrix.ortho(-1.0, 1.0, -1.0, 1.0, -1.0, 1.0), Matrix.scaling(1.0, 1.0, -1.0)
    )


def test_look_at_down_negative_z_is_translation():
    view = Matrix.look_at(
        Vector3(0.0, 0.0, 5.0), Vector3.zero(), Vector3(0.0, 1.0, 0.0)
    )
    assert_close(view, Matrix.translate(0.0, 0.0, -5.0))