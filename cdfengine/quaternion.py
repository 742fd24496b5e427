"""Rotation quaternions stored as Vector4 values (x, y, z, w)."""

from __future__ import annotations

import math

from .matrix import Matrix
from .vector3 import EPSILON, Vector3
from .vector4 import Vector4

Quaternion = Vector4


def quaternion_identity() -> Vector4:
    """The quaternion that represents no rotation."""
    return Vector4(0.0, 0.0, 0.0, 1.0)


def quaternion_length(q: Vector4) -> float:
    return math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)


def quaternion_normalize(q: Vector4) -> Vector4:
    """Unit quaternion; the zero quaternion stays zero."""
    length = quaternion_length(q) or 1.0
    return q.scale(1.0 / length)


def quaternion_invert(q: Vector4) -> Vector4:
    """Inverse quaternion; the zero quaternion is returned unchanged."""
    length_sqr = q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w
    if length_sqr == 0.0:
        return q
    inv = 1.0 / length_sqr
    return Vector4(-q.x * inv, -q.y * inv, -q.z * inv, q.w * inv)


def quaternion_multiply(q1: Vector4, q2: Vector4) -> Vector4:
    """Hamilton product ``q1 * q2``."""
    ax, ay, az, aw = q1.x, q1.y, q1.z, q1.w
    bx, by, bz, bw = q2.x, q2.y, q2.z, q2.w
    return Vector4(
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def quaternion_nlerp(q1: Vector4, q2: Vector4, amount: float) -> Vector4:
    """Linear interpolation followed by normalization."""
    return quaternion_normalize(q1.lerp(q2, amount))


def quaternion_slerp(q1: Vector4, q2: Vector4, amount: float) -> Vector4:
    """Spherical linear interpolation along the shorter arc."""
    cos_half_theta = q1.dot(q2)
    if cos_half_theta < 0:
        q2 = q2.negate()
        cos_half_theta = -cos_half_theta

    if abs(cos_half_theta) >= 1.0:
        return q1
    if cos_half_theta > 0.95:
        return quaternion_nlerp(q1, q2, amount)

    half_theta = math.acos(cos_half_theta)
    sin_half_theta = math.sqrt(1.0 - cos_half_theta * cos_half_theta)
    if abs(sin_half_theta) < EPSILON:
        return q1.scale(0.5).add(q2.scale(0.5))
    ratio_a = math.sin((1 - amount) * half_theta) / sin_half_theta
    ratio_b = math.sin(amount * half_theta) / sin_half_theta
    return q1.scale(ratio_a).add(q2.scale(ratio_b))


def quaternion_cubic_hermite_spline(
    q1: Vector4, out_tangent1: Vector4, q2: Vector4, in_tangent2: Vector4, t: float
) -> Vector4:
    """Cubic Hermite spline between ``q1`` and ``q2``, normalized."""
    t2 = t * t
    t3 = t2 * t
    h00 = 2 * t3 - 3 * t2 + 1
    h10 = t3 - 2 * t2 + t
    h01 = -2 * t3 + 3 * t2
    h11 = t3 - t2
    result = (
        q1.scale(h00)
        .add(out_tangent1.scale(h10))
        .add(q2.scale(h01))
        .add(in_tangent2.scale(h11))
    )
    return quaternion_normalize(result)


def quaternion_from_vector3_to_vector3(source: Vector3, target: Vector3) -> Vector4:
    """Rotation taking the direction ``source`` to the direction ``target``."""
    cos2_theta = source.dot(target)
    cross = source.cross(target)
    return quaternion_normalize(Vector4(cross.x, cross.y, cross.z, 1.0 + cos2_theta))


def quaternion_from_matrix(mat: Matrix) -> Vector4:
    """Quaternion of the rotation held in ``mat``."""
    candidates = [
        mat.m0 + mat.m5 + mat.m10,
        mat.m0 - mat.m5 - mat.m10,
        mat.m5 - mat.m0 - mat.m10,
        mat.m10 - mat.m0 - mat.m5,
    ]
    biggest_index = 0
    for index in (1, 2, 3):
        if candidates[index] > candidates[biggest_index]:
            biggest_index = index

    biggest = math.sqrt(candidates[biggest_index] + 1.0) * 0.5
    mult = 0.25 / biggest

    if biggest_index == 0:
        return Vector4(
            (mat.m6 - mat.m9) * mult,
            (mat.m8 - mat.m2) * mult,
            (mat.m1 - mat.m4) * mult,
            biggest,
        )
    if biggest_index == 1:
        return Vector4(
            biggest,
            (mat.m1 + mat.m4) * mult,
            (mat.m8 + mat.m2) * mult,
            (mat.m6 - mat.m9) * mult,
        )
    if biggest_index == 2:
        return Vector4(
            (mat.m1 + mat.m4) * mult,
            biggest,
            (mat.m6 + mat.m9) * mult,
            (mat.m8 - mat.m2) * mult,
        )
    return Vector4(
        (mat.m8 + mat.m2) * mult,
        (mat.m6 + mat.m9) * mult,
        biggest,
        (mat.m1 - mat.m4) * mult,
    )


def quaternion_to_matrix(q: Vector4) -> Matrix:
    """Rotation matrix of ``q``."""
    a2 = q.x * q.x
    b2 = q.y * q.y
    c2 = q.z * q.z
    ac = q.x * q.z
    ab = q.x * q.y
    bc = q.y * q.z
    ad = q.w * q.x
    bd = q.w * q.y
    cd = q.w * q.z
    return Matrix(
        m0=1 - 2 * (b2 + c2),
        m1=2 * (ab + cd),
        m2=2 * (ac - bd),
        m4=2 * (ab - cd),
        m5=1 - 2 * (a2 + c2),
        m6=2 * (bc + ad),
        m8=2 * (ac + bd),
        m9=2 * (bc - ad),
        m10=1 - 2 * (a2 + b2),
        m15=1.0,
    )


def quaternion_from_axis_angle(axis: Vector3, angle: float) -> Vector4:
    """Rotation of ``angle`` radians about ``axis``; a zero axis gives identity."""
    if axis.length() == 0.0:
        return quaternion_identity()
    unit = axis.normalize()
    half = angle * 0.5
    s = math.sin(half)
    return quaternion_normalize(
        Vector4(unit.x * s, unit.y * s, unit.z * s, math.cos(half))
    )


def quaternion_to_axis_angle(q: Vector4) -> tuple[Vector3, float]:
    """Return the rotation axis and angle in radians of ``q``.

    With no rotation the axis is the arbitrary unit vector (1, 0, 0).
    """
    if abs(q.w) > 1.0:
        q = quaternion_normalize(q)
    w = max(-1.0, min(1.0, q.w))
    angle = 2.0 * math.acos(w)
    den = math.sqrt(max(0.0, 1.0 - w * w))
    if den > EPSILON:
        axis = Vector3(q.x / den, q.y / den, q.z / den)
    else:
        axis = Vector3(1.0, 0.0, 0.0)
    return axis, angle


def quaternion_from_euler(pitch: float, yaw: float, roll: float) -> Vector4:
    """Quaternion from Euler angles in radians about x, y and z (order ZYX)."""
    x0 = math.cos(pitch * 0.5)
    x1 = math.sin(pitch * 0.5)
    y0 = math.cos(yaw * 0.5)
    y1 = math.sin(yaw * 0.5)
    z0 = math.cos(roll * 0.5)
    z1 = math.sin(roll * 0.5)
    return Vector4(
        x1 * y0 * z0 - x0 * y1 * z1,
        x0 * y1 * z0 + x1 * y0 * z1,
        x0 * y0 * z1 - x1 * y1 * z0,
        x0 * y0 * z0 + x1 * y1 * z1,
    )


def quaternion_to_euler(q: Vector4) -> Vector3:
    """Euler angles in radians about x, y and z."""
    x0 = 2.0 * (q.w * q.x + q.y * q.z)
    x1 = 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
    y0 = 2.0 * (q.w * q.y - q.z * q.x)
    y0 = max(-1.0, min(1.0, y0))
    z0 = 2.0 * (q.w * q.z + q.x * q.y)
    z1 = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return Vector3(math.atan2(x0, x1), math.asin(y0), math.atan2(z0, z1))


def _close(a: float, b: float, diff: float) -> bool:
    return abs(diff) <= EPSILON * max(1.0, abs(a), abs(b))


def quaternion_equals(p: Vector4, q: Vector4) -> bool:
    """Whether ``p`` and ``q`` are almost equal, or almost opposite."""
    pairs = list(zip(p, q))
    same = all(_close(a, b, a - b) for a, b in pairs)
    opposite = all(_close(a, b, a + b) for a, b in pairs)
    return same or opposite


def rotate_vector3(v: Vector3, q: Vector4) -> Vector3:
    """Rotate ``v`` by the quaternion ``q``."""
    x, y, z, w = q.x, q.y, q.z, q.w
    return Vector3(
        v.x * (x * x + w * w - y * y - z * z)
        + v.y * (2 * x * y - 2 * w * z)
        + v.z * (2 * x * z + 2 * w * y),
        v.x * (2 * w * z + 2 * x * y)
        + v.y * (w * w - x * x + y * y - z * z)
        + v.z * (-2 * w * x + 2 * y * z),
        v.x * (-2 * w * y + 2 * x * z)
        + v.y * (2 * w * x + 2 * y * z)
        + v.z * (w * w - x * x - y * y + z * z),
    )