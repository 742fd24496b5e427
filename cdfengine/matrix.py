"""A 4x4 float matrix in OpenGL layout (right handed, column major)."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterable

from .vector3 import Vector3


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix.

    Fields are numbered as the flat array sent to the graphics API: ``m0``
    to ``m3`` form the first column, ``m12``, ``m13`` and ``m14`` hold the
    translation.
    """

    m0: float = 0.0
    m1: float = 0.0
    m2: float = 0.0
    m3: float = 0.0
    m4: float = 0.0
    m5: float = 0.0
    m6: float = 0.0
    m7: float = 0.0
    m8: float = 0.0
    m9: float = 0.0
    m10: float = 0.0
    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m15: float = 0.0

    @classmethod
    def _from_values(cls, values: Iterable[float]) -> Matrix:
        return cls(*values)

    def to_list(self) -> list[float]:
        """The sixteen values in order ``m0`` to ``m15``."""
        return list(astuple(self))

    def _partials(self) -> tuple[list[float], list[float]]:
        a = self.to_list()
        b = [
            a[0] * a[5] - a[1] * a[4],
            a[0] * a[6] - a[2] * a[4],
            a[0] * a[7] - a[3] * a[4],
            a[1] * a[6] - a[2] * a[5],
            a[1] * a[7] - a[3] * a[5],
            a[2] * a[7] - a[3] * a[6],
            a[8] * a[13] - a[9] * a[12],
            a[8] * a[14] - a[10] * a[12],
            a[8] * a[15] - a[11] * a[12],
            a[9] * a[14] - a[10] * a[13],
            a[9] * a[15] - a[11] * a[13],
            a[10] * a[15] - a[11] * a[14],
        ]
        return a, b

    def determinant(self) -> float:
        _, b = self._partials()
        return (
            b[0] * b[11]
            - b[1] * b[10]
            + b[2] * b[9]
            + b[3] * b[8]
            - b[4] * b[7]
            + b[5] * b[6]
        )

    def trace(self) -> float:
        """Sum of the diagonal."""
        return self.m0 + self.m5 + self.m10 + self.m15

    def transpose(self) -> Matrix:
        a = self.to_list()
        return Matrix._from_values(a[4 * c + r] for r in range(4) for c in range(4))

    def invert(self) -> Matrix:
        """Inverse matrix; raises ZeroDivisionError for a singular matrix."""
        (a00, a01, a02, a03, a10, a11, a12, a13,
         a20, a21, a22, a23, a30, a31, a32, a33), b = self._partials()
        (b00, b01, b02, b03, b04, b05, b06, b07, b08, b09, b10, b11) = b
        inv_det = 1.0 / (
            b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
        )
        return Matrix(
            (a11 * b11 - a12 * b10 + a13 * b09) * inv_det,
            (-a01 * b11 + a02 * b10 - a03 * b09) * inv_det,
            (a31 * b05 - a32 * b04 + a33 * b03) * inv_det,
            (-a21 * b05 + a22 * b04 - a23 * b03) * inv_det,
            (-a10 * b11 + a12 * b08 - a13 * b07) * inv_det,
            (a00 * b11 - a02 * b08 + a03 * b07) * inv_det,
            (-a30 * b05 + a32 * b02 - a33 * b01) * inv_det,
            (a20 * b05 - a22 * b02 + a23 * b01) * inv_det,
            (a10 * b10 - a11 * b08 + a13 * b06) * inv_det,
            (-a00 * b10 + a01 * b08 - a03 * b06) * inv_det,
            (a30 * b04 - a31 * b02 + a33 * b00) * inv_det,
            (-a20 * b04 + a21 * b02 - a23 * b00) * inv_det,
            (-a10 * b09 + a11 * b07 - a12 * b06) * inv_det,
            (a00 * b09 - a01 * b07 + a02 * b06) * inv_det,
            (-a30 * b03 + a31 * b01 - a32 * b00) * inv_det,
            (a20 * b03 - a21 * b01 + a22 * b00) * inv_det,
        )

    @classmethod
    def identity(cls) -> Matrix:
        return cls(m0=1.0, m5=1.0, m10=1.0, m15=1.0)

    def add(self, other: Matrix) -> Matrix:
        return Matrix._from_values(
            x + y for x, y in zip(self.to_list(), other.to_list())
        )

    def subtract(self, other: Matrix) -> Matrix:
        return Matrix._from_values(
            x - y for x, y in zip(self.to_list(), other.to_list())
        )

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product; the order of the operands matters."""
        a = self.to_list()
        b = other.to_list()
        return Matrix._from_values(
            sum(a[4 * r + k] * b[4 * k + c] for k in range(4))
            for r in range(4)
            for c in range(4)
        )

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> Matrix:
        return replace(cls.identity(), m12=x, m13=y, m14=z)

    @classmethod
    def rotate(cls, axis: Vector3, angle: float) -> Matrix:
        """Rotation of ``angle`` radians about ``axis``."""
        x, y, z = axis.x, axis.y, axis.z
        length_sqr = x * x + y * y + z * z
        if length_sqr != 1.0 and length_sqr != 0.0:
            inv = 1.0 / math.sqrt(length_sqr)
            x, y, z = x * inv, y * inv, z * inv
        s = math.sin(angle)
        c = math.cos(angle)
        t = 1.0 - c
        return cls(
            m0=x * x * t + c,
            m1=y * x * t + z * s,
            m2=z * x * t - y * s,
            m4=x * y * t - z * s,
            m5=y * y * t + c,
            m6=z * y * t + x * s,
            m8=x * z * t + y * s,
            m9=y * z * t - x * s,
            m10=z * z * t + c,
            m15=1.0,
        )

    @classmethod
    def rotate_x(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return replace(cls.identity(), m5=c, m6=s, m9=-s, m10=c)

    @classmethod
    def rotate_y(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return replace(cls.identity(), m0=c, m2=-s, m8=s, m10=c)

    @classmethod
    def rotate_z(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        return replace(cls.identity(), m0=c, m1=s, m4=-s, m5=c)

    @classmethod
    def rotate_xyz(cls, angle: Vector3) -> Matrix:
        """Rotation from Euler angles in radians, applied x, then y, then z."""
        cosz, sinz = math.cos(-angle.z), math.sin(-angle.z)
        cosy, siny = math.cos(-angle.y), math.sin(-angle.y)
        cosx, sinx = math.cos(-angle.x), math.sin(-angle.x)
        return replace(
            cls.identity(),
            m0=cosz * cosy,
            m1=(cosz * siny * sinx) - (sinz * cosx),
            m2=(cosz * siny * cosx) + (sinz * sinx),
            m4=sinz * cosy,
            m5=(sinz * siny * sinx) + (cosz * cosx),
            m6=(sinz * siny * cosx) - (cosz * sinx),
            m8=-siny,
            m9=cosy * sinx,
            m10=cosy * cosx,
        )

    @classmethod
    def rotate_zyx(cls, angle: Vector3) -> Matrix:
        """Rotation from Euler angles in radians, composed z, y, x."""
        cz, sz = math.cos(angle.z), math.sin(angle.z)
        cy, sy = math.cos(angle.y), math.sin(angle.y)
        cx, sx = math.cos(angle.x), math.sin(angle.x)
        return cls(
            m0=cz * cy,
            m4=cz * sy * sx - cx * sz,
            m8=sz * sx + cz * cx * sy,
            m1=cy * sz,
            m5=cz * cx + sz * sy * sx,
            m9=cx * sz * sy - cz * sx,
            m2=-sy,
            m6=cy * sx,
            m10=cy * cx,
            m15=1.0,
        )

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        return cls(m0=x, m5=y, m10=z, m15=1.0)

    @classmethod
    def frustum(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> Matrix:
        """Perspective projection for the given view frustum."""
        rl = right - left
        tb = top - bottom
        fn = far_plane - near_plane
        return cls(
            m0=(near_plane * 2.0) / rl,
            m5=(near_plane * 2.0) / tb,
            m8=(right + left) / rl,
            m9=(top + bottom) / tb,
            m10=-(far_plane + near_plane) / fn,
            m11=-1.0,
            m14=-(far_plane * near_plane * 2.0) / fn,
        )

    @classmethod
    def perspective(
        cls, fov_y: float, aspect: float, near_plane: float, far_plane: float
    ) -> Matrix:
        """Perspective projection; ``fov_y`` is in radians."""
        top = near_plane * math.tan(fov_y * 0.5)
        right = top * aspect
        return cls.frustum(-right, right, -top, top, near_plane, far_plane)

    @classmethod
    def ortho(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> Matrix:
        """Orthographic projection."""
        rl = right - left
        tb = top - bottom
        fn = far_plane - near_plane
        return cls(
            m0=2.0 / rl,
            m5=2.0 / tb,
            m10=-2.0 / fn,
            m12=-(left + right) / rl,
            m13=-(top + bottom) / tb,
            m14=-(far_plane + near_plane) / fn,
            m15=1.0,
        )

    @classmethod
    def look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
        """View matrix of a camera at ``eye`` looking at ``target``."""
        vz = eye.subtract(target).normalize()
        vx = up.cross(vz).normalize()
        vy = vz.cross(vx)
        return cls(
            m0=vx.x,
            m1=vy.x,
            m2=vz.x,
            m4=vx.y,
            m5=vy.y,
            m6=vz.y,
            m8=vx.z,
            m9=vy.z,
            m10=vz.z,
            m12=-vx.dot(eye),
            m13=-vy.dot(eye),
            m14=-vz.dot(eye),
            m15=1.0,
        )

    def __add__(self, other: Matrix) -> Matrix:
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        return self.subtract(other)

    def __mul__(self, other: Matrix) -> Matrix:
        return self.multiply(other)

    __matmul__ = __mul__