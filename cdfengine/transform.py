"""Applying matrices to vectors and quaternions, unprojection and decomposition."""

from __future__ import annotations

from .matrix import Matrix
from .quaternion import quaternion_from_matrix, quaternion_identity
from .vector2 import Vector2
from .vector3 import Vector3, float_equals
from .vector4 import Vector4


def transform_vector2(v: Vector2, mat: Matrix) -> Vector2:
    """Apply ``mat`` to the point (x, y, 0) and keep x and y."""
    return Vector2(
        mat.m0 * v.x + mat.m4 * v.y + mat.m12,
        mat.m1 * v.x + mat.m5 * v.y + mat.m13,
    )


def transform_vector3(v: Vector3, mat: Matrix) -> Vector3:
    """Apply ``mat`` to the point ``v``, treating it as having w = 1."""
    return Vector3(
        mat.m0 * v.x + mat.m4 * v.y + mat.m8 * v.z + mat.m12,
        mat.m1 * v.x + mat.m5 * v.y + mat.m9 * v.z + mat.m13,
        mat.m2 * v.x + mat.m6 * v.y + mat.m10 * v.z + mat.m14,
    )


def transform_quaternion(q: Vector4, mat: Matrix) -> Vector4:
    """Apply ``mat`` to all four components of ``q``."""
    return Vector4(
        mat.m0 * q.x + mat.m4 * q.y + mat.m8 * q.z + mat.m12 * q.w,
        mat.m1 * q.x + mat.m5 * q.y + mat.m9 * q.z + mat.m13 * q.w,
        mat.m2 * q.x + mat.m6 * q.y + mat.m10 * q.z + mat.m14 * q.w,
        mat.m3 * q.x + mat.m7 * q.y + mat.m11 * q.z + mat.m15 * q.w,
    )


def unproject(source: Vector3, projection: Matrix, view: Matrix) -> Vector3:
    """Map a point from screen space back into object space.

    Raises ZeroDivisionError when the combined view-projection is singular.
    """
    inverse = view.multiply(projection).invert()
    point = transform_quaternion(Vector4(source.x, source.y, source.z, 1.0), inverse)
    return Vector3(point.x / point.w, point.y / point.w, point.z / point.w)


def decompose(mat: Matrix) -> tuple[Vector3, Vector4, Vector3]:
    """Split ``mat`` into its translation, rotation quaternion and scale.

    A matrix with a negative determinant gets a negated scale; one whose
    determinant is close to zero gets the identity rotation.
    """
    translation = Vector3(mat.m12, mat.m13, mat.m14)

    a, b, c = mat.m0, mat.m4, mat.m8
    d, e, f = mat.m1, mat.m5, mat.m9
    g, h, i = mat.m2, mat.m6, mat.m10
    det = a * (e * i - f * h) + b * (f * g - d * i) + c * (d * h - e * g)

    scale = Vector3(
        Vector3(a, b, c).length(),
        Vector3(d, e, f).length(),
        Vector3(g, h, i).length(),
    )
    if det < 0:
        scale = scale.negate()

    if float_equals(det, 0.0):
        return translation, quaternion_identity(), scale

    unscaled = Matrix(
        m0=mat.m0 / scale.x,
        m1=mat.m1 / scale.y,
        m2=mat.m2 / scale.z,
        m3=mat.m3,
        m4=mat.m4 / scale.x,
        m5=mat.m5 / scale.y,
        m6=mat.m6 / scale.z,
        m7=mat.m7,
        m8=mat.m8 / scale.x,
        m9=mat.m9 / scale.y,
        m10=mat.m10 / scale.z,
        m11=mat.m11,
        m12=mat.m12,
        m13=mat.m13,
        m14=mat.m14,
        m15=mat.m15,
    )
    return translation, quaternion_from_matrix(unscaled), scale