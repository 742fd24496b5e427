"""Scalar helpers and a three-component float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

EPSILON = 0.000001


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    result = low if value < low else value
    return high if result > high else result


def lerp(start: float, end: float, amount: float) -> float:
    """Linearly interpolate between ``start`` and ``end``."""
    return start + amount * (end - start)


def normalize(value: float, start: float, end: float) -> float:
    """Map ``value`` from ``[start, end]`` to ``[0, 1]``."""
    return (value - start) / (end - start)


def remap(
    value: float,
    input_start: float,
    input_end: float,
    output_start: float,
    output_end: float,
) -> float:
    """Map ``value`` from the input range onto the output range."""
    return (value - input_start) / (input_end - input_start) * (
        output_end - output_start
    ) + output_start


def wrap(value: float, low: float, high: float) -> float:
    """Wrap ``value`` into the half-open range ``[low, high)``."""
    return value - (high - low) * math.floor((value - low) / (high - low))


def float_equals(x: float, y: float) -> bool:
    """Whether two floats are equal within a relative tolerance of EPSILON."""
    return abs(x - y) <= EPSILON * max(1.0, abs(x), abs(y))


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def add_value(self, value: float) -> Vector3:
        return Vector3(self.x + value, self.y + value, self.z + value)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def subtract_value(self, value: float) -> Vector3:
        return Vector3(self.x - value, self.y - value, self.z - value)

    def scale(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def multiply(self, other: Vector3) -> Vector3:
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def perpendicular(self) -> Vector3:
        """Return a vector perpendicular to this one."""
        smallest = abs(self.x)
        axis = Vector3(1.0, 0.0, 0.0)
        if abs(self.y) < smallest:
            smallest = abs(self.y)
            axis = Vector3(0.0, 1.0, 0.0)
        if abs(self.z) < smallest:
            axis = Vector3(0.0, 0.0, 1.0)
        return self.cross(axis)

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: Vector3) -> float:
        return math.sqrt(self.distance_sqr(other))

    def distance_sqr(self, other: Vector3) -> float:
        return other.subtract(self).length_sqr()

    def angle(self, other: Vector3) -> float:
        """Unsigned angle between the two vectors, in radians."""
        return math.atan2(self.cross(other).length(), self.dot(other))

    def negate(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def divide(self, other: Vector3) -> Vector3:
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def normalize(self) -> Vector3:
        """Return the unit vector; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        return self.scale(1.0 / length)

    def _unit_or_self(self) -> Vector3:
        length = self.length() or 1.0
        return self.scale(1.0 / length)

    def project(self, other: Vector3) -> Vector3:
        """Projection of this vector onto ``other``."""
        return other.scale(self.dot(other) / other.dot(other))

    def reject(self, other: Vector3) -> Vector3:
        """Component of this vector perpendicular to ``other``."""
        return self.subtract(self.project(other))

    def ortho_normalize(self, other: Vector3) -> tuple[Vector3, Vector3]:
        """Gram-Schmidt: return this vector normalized and ``other`` made orthonormal to it."""
        first = self._unit_or_self()
        normal = first.cross(other)._unit_or_self()
        return first, normal.cross(first)

    def rotate_by_axis_angle(self, axis: Vector3, angle: float) -> Vector3:
        """Rotate about ``axis`` by ``angle`` radians (Euler-Rodrigues)."""
        axis = axis._unit_or_self()
        half = angle / 2.0
        w = axis.scale(math.sin(half))
        a = math.cos(half)
        wv = w.cross(self)
        wwv = w.cross(wv)
        return self.add(wv.scale(2.0 * a)).add(wwv.scale(2.0))

    def move_towards(self, target: Vector3, max_distance: float) -> Vector3:
        """Step towards ``target`` by at most ``max_distance``."""
        delta = target.subtract(self)
        value = delta.length_sqr()
        if value == 0 or (max_distance >= 0 and value <= max_distance * max_distance):
            return target
        dist = math.sqrt(value)
        return self.add(delta.scale(max_distance / dist))

    def lerp(self, other: Vector3, amount: float) -> Vector3:
        return Vector3(
            lerp(self.x, other.x, amount),
            lerp(self.y, other.y, amount),
            lerp(self.z, other.z, amount),
        )

    def cubic_hermite(
        self, tangent1: Vector3, other: Vector3, tangent2: Vector3, amount: float
    ) -> Vector3:
        """Cubic Hermite interpolation from this point to ``other``."""
        t2 = amount * amount
        t3 = t2 * amount
        h00 = 2 * t3 - 3 * t2 + 1
        h10 = t3 - 2 * t2 + amount
        h01 = -2 * t3 + 3 * t2
        h11 = t3 - t2
        return (
            self.scale(h00)
            .add(tangent1.scale(h10))
            .add(other.scale(h01))
            .add(tangent2.scale(h11))
        )

    def reflect(self, normal: Vector3) -> Vector3:
        return self.subtract(normal.scale(2.0 * self.dot(normal)))

    def min(self, other: Vector3) -> Vector3:
        return Vector3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Vector3) -> Vector3:
        return Vector3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def barycenter(self, a: Vector3, b: Vector3, c: Vector3) -> Vector3:
        """Barycentric coordinates (u, v, w) of this point in triangle abc."""
        v0 = b.subtract(a)
        v1 = c.subtract(a)
        v2 = self.subtract(a)
        d00 = v0.dot(v0)
        d01 = v0.dot(v1)
        d11 = v1.dot(v1)
        d20 = v2.dot(v0)
        d21 = v2.dot(v1)
        denom = d00 * d11 - d01 * d01
        v = (d11 * d20 - d01 * d21) / denom
        w = (d00 * d21 - d01 * d20) / denom
        return Vector3(1.0 - (w + v), v, w)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def invert(self) -> Vector3:
        return Vector3(1.0 / self.x, 1.0 / self.y, 1.0 / self.z)

    def clamp(self, low: Vector3, high: Vector3) -> Vector3:
        return Vector3(
            min(high.x, max(low.x, self.x)),
            min(high.y, max(low.y, self.y)),
            min(high.z, max(low.z, self.z)),
        )

    def clamp_value(self, low: float, high: float) -> Vector3:
        """Clamp the magnitude into ``[low, high]``."""
        length_sqr = self.length_sqr()
        if length_sqr <= 0.0:
            return self
        length = math.sqrt(length_sqr)
        factor = 1.0
        if length < low:
            factor = low / length
        elif length > high:
            factor = high / length
        return self.scale(factor)

    def equals(self, other: Vector3) -> bool:
        return (
            float_equals(self.x, other.x)
            and float_equals(self.y, other.y)
            and float_equals(self.z, other.z)
        )

    def refract(self, normal: Vector3, ratio: float) -> Vector3:
        """Refracted direction; the zero vector on total internal reflection."""
        dot = self.dot(normal)
        d = 1.0 - ratio * ratio * (1.0 - dot * dot)
        if d < 0.0:
            return Vector3.zero()
        d = math.sqrt(d)
        return self.scale(ratio).subtract(normal.scale(ratio * dot + d))

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.subtract(other)

    def __neg__(self) -> Vector3:
        return self.negate()

    def __mul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return self.multiply(other)
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return self.divide(other)
        return self.scale(1.0 / other)