import math

import pytest

from cdfengine.vector2 import Vector2


def test_length_of_three_four():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)


def test_zero_and_one():
    assert Vector2.zero() == Vector2(0.0, 0.0)
    assert Vector2.one() == Vector2(1.0, 1.0)


def test_add_subtract_round_trip():
    a = Vector2(1.5, -2.25)
    b = Vector2(0.75, 8.0)
    assert a.add(b).subtract(b).equals(a)
    assert (a + b - b).equals(a)


def test_add_value_subtract_value_round_trip():
    v = Vector2(2.0, -7.0)
    assert v.add_value(3.5).subtract_value(3.5).equals(v)


def test_length_sqr_matches_dot_with_self():
    v = Vector2(2.5, -1.5)
    assert v.length_sqr() == pytest.approx(v.dot(v))
    assert v.length() ** 2 == pytest.approx(v.length_sqr())


def test_distance_is_symmetric():
    a = Vector2(1.0, 2.0)
    b = Vector2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance_sqr(b) == pytest.approx(a.subtract(b).length_sqr())


def test_angle_of_perpendicular_vectors():
    assert Vector2(1.0, 0.0).angle(Vector2(0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert Vector2(0.0, 1.0).angle(Vector2(1.0, 0.0)) == pytest.approx(-math.pi / 2)


def test_line_angle_is_clockwise():
    start = Vector2(0.0, 0.0)
    assert start.line_angle(Vector2(0.0, 1.0)) == pytest.approx(-math.pi / 2)
    assert start.line_angle(Vector2(1.0, 0.0)) == pytest.approx(0.0)


def test_scale_and_multiply():
    v = Vector2(2.0, 3.0)
    assert v.scale(2.0).equals(v.multiply(Vector2(2.0, 2.0)))
    assert (v * 2.0).equals(2.0 * v)


def test_negate_twice_is_identity():
    v = Vector2(4.0, -9.0)
    assert v.negate().negate() == v
    assert v.add(v.negate()).equals(Vector2.zero())


def test_divide_inverts_multiply():
    a = Vector2(3.0, -6.0)
    b = Vector2(2.0, 4.0)
    assert a.multiply(b).divide(b).equals(a)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0).divide(Vector2(0.0, 1.0))


def test_normalize_gives_unit_length():
    assert Vector2(7.0, -3.0).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_stays_zero():
    assert Vector2.zero().normalize() == Vector2.zero()


def test_lerp_endpoints():
    a = Vector2(1.0, 2.0)
    b = Vector2(5.0, -6.0)
    assert a.lerp(b, 0.0).equals(a)
    assert a.lerp(b, 1.0).equals(b)
    mid = a.lerp(b, 0.5)
    assert mid.distance(a) == pytest.approx(mid.distance(b))


def test_reflect_preserves_length_and_flips_normal_component():
    v = Vector2(1.0, -1.0)
    normal = Vector2(0.0, 1.0)
    r = v.reflect(normal)
    assert r.length() == pytest.approx(v.length())
    assert r.dot(normal) == pytest.approx(-v.dot(normal))


def test_min_max():
    a = Vector2(1.0, 5.0)
    b = Vector2(3.0, 2.0)
    assert a.min(b) == Vector2(1.0, 2.0)
    assert a.max(b) == Vector2(3.0, 5.0)


def test_rotate_half_turn_twice_negates():
    v = Vector2(2.0, 1.0)
    assert v.rotate(math.pi / 2).rotate(math.pi / 2).equals(v.negate())


def test_rotate_preserves_length():
    v = Vector2(2.0, 1.0)
    assert v.rotate(0.7).length() == pytest.approx(v.length())


def test_move_towards_reaches_target_when_close():
    target = Vector2(1.0, 1.0)
    assert Vector2.zero().move_towards(target, 10.0) == target


def test_move_towards_steps_by_max_distance():
    start = Vector2.zero()
    target = Vector2(10.0, 0.0)
    moved = start.move_towards(target, 2.5)
    assert moved.distance(start) == pytest.approx(2.5)
    assert moved.distance(target) == pytest.approx(target.length() - 2.5)


def test_invert_round_trip():
    v = Vector2(4.0, -0.5)
    assert v.invert().invert().equals(v)
    assert v.multiply(v.invert()).equals(Vector2.one())


def test_clamp_components():
    v = Vector2(-5.0, 5.0)
    result = v.clamp(Vector2(-1.0, -1.0), Vector2(1.0, 1.0))
    assert result == Vector2(-1.0, 1.0)


def test_clamp_value_limits_magnitude():
    v = Vector2(30.0, 40.0)
    assert v.clamp_value(0.0, 5.0).length() == pytest.approx(5.0)
    assert Vector2(0.3, 0.4).clamp_value(2.0, 5.0).length() == pytest.approx(2.0)
    assert Vector2.zero().clamp_value(1.0, 2.0) == Vector2.zero()


def test_equals_tolerance():
    v = Vector2(1.0, 2.0)
    assert v.equals(Vector2(1.0 + 1e-9, 2.0))
    assert not v.equals(Vector2(1.001, 2.0))


def test_refract_ratio_one_passes_straight_through():
    v = Vector2(0.0, -1.0)
    normal = Vector2(0.0, 1.0)
    assert v.refract(normal, 1.0).equals(v)


def test_refract_total_internal_reflection_is_zero():
    v = Vector2(1.0, -0.1).normalize()
    normal = Vector2(0.0, 1.0)
    assert v.refract(normal, 3.0) == Vector2.zero()