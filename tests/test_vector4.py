import math

import pytest

from cdfengine.vector4 import Vector4

A = Vector4(1.5, -2.0, 3.25, 4.0)
B = Vector4(-0.5, 6.0, 2.0, -1.0)


def test_zero_and_one_components():
    assert tuple(Vector4.zero()) == (0.0, 0.0, 0.0, 0.0)
    assert tuple(Vector4.one()) == (1.0, 1.0, 1.0, 1.0)


def test_add_then_subtract_round_trip():
    assert A.add(B).subtract(B).equals(A)
    assert A.add(B) == B.add(A)


def test_add_value_then_subtract_value_round_trip():
    assert A.add_value(2.5).subtract_value(2.5).equals(A)


def test_subtract_self_is_zero():
    assert A.subtract(A) == Vector4.zero()


def test_length_sqr_matches_dot_with_self():
    assert A.length_sqr() == pytest.approx(A.dot(A))
    assert A.length() == pytest.approx(math.sqrt(A.dot(A)))


def test_unit_vector_length():
    assert Vector4.one().length() == pytest.approx(2.0)


def test_dot_is_symmetric():
    assert A.dot(B) == pytest.approx(B.dot(A))


def test_distance_matches_length_of_difference():
    assert A.distance(B) == pytest.approx(A.subtract(B).length())
    assert A.distance_sqr(B) == pytest.approx(B.distance_sqr(A))


def test_scale_and_divide_by_scalar_round_trip():
    assert A.scale(4.0).scale(0.25).equals(A)
    assert (A * 2.0 / 2.0).equals(A)


def test_multiply_divide_round_trip():
    assert A.multiply(B).divide(B).equals(A)


def test_negate_twice_is_identity():
    assert A.negate().negate() == A
    assert (-A).add(A) == Vector4.zero()


def test_normalize_gives_unit_length():
    assert A.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_stays_zero():
    assert Vector4.zero().normalize() == Vector4.zero()


def test_min_max_per_component():
    low = A.min(B)
    high = A.max(B)
    for lo, hi, a, b in zip(low, high, A, B):
        assert lo == min(a, b)
        assert hi == max(a, b)


def test_lerp_endpoints():
    assert A.lerp(B, 0.0).equals(A)
    assert A.lerp(B, 1.0).equals(B)
    mid = A.lerp(B, 0.5)
    assert mid.distance(A) == pytest.approx(mid.distance(B))


def test_move_towards_reaches_target_when_close():
    assert A.move_towards(B, A.distance(B) + 1.0) == B


def test_move_towards_steps_by_max_distance():
    moved = A.move_towards(B, 1.0)
    assert A.distance(moved) == pytest.approx(1.0)
    assert moved.distance(B) == pytest.approx(A.distance(B) - 1.0)


def test_move_towards_same_point_returns_target():
    assert A.move_towards(A, -3.0) == A


def test_invert_twice_is_identity():
    assert A.invert().invert().equals(A)
    assert A.multiply(A.invert()).equals(Vector4.one())


def test_invert_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vector4(0.0, 1.0, 1.0, 1.0).invert()


def test_equals_tolerates_tiny_difference():
    assert A.equals(A.add_value(1e-9))
    assert not A.equals(A.add_value(1e-3))