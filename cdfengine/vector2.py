"""A two-component float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .vector3 import float_equals, lerp


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1.0, 1.0)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def add_value(self, value: float) -> Vector2:
        return Vector2(self.x + value, self.y + value)

    def subtract(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def subtract_value(self, value: float) -> Vector2:
        return Vector2(self.x - value, self.y - value)

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vector2) -> float:
        return math.sqrt(self.distance_sqr(other))

    def distance_sqr(self, other: Vector2) -> float:
        return self.subtract(other).length_sqr()

    def angle(self, other: Vector2) -> float:
        """Signed angle from this vector to ``other``, in radians."""
        dot = self.x * other.x + self.y * other.y
        det = self.x * other.y - self.y * other.x
        return math.atan2(det, dot)

    def line_angle(self, end: Vector2) -> float:
        """Angle of the line from this point to ``end``, measured clockwise."""
        return -math.atan2(end.y - self.y, end.x - self.x)

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def multiply(self, other: Vector2) -> Vector2:
        return Vector2(self.x * other.x, self.y * other.y)

    def negate(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def divide(self, other: Vector2) -> Vector2:
        return Vector2(self.x / other.x, self.y / other.y)

    def normalize(self) -> Vector2:
        """Return the unit vector; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return self.scale(1.0 / length)
        return Vector2.zero()

    def lerp(self, other: Vector2, amount: float) -> Vector2:
        return Vector2(lerp(self.x, other.x, amount), lerp(self.y, other.y, amount))

    def reflect(self, normal: Vector2) -> Vector2:
        return self.subtract(normal.scale(2.0 * self.dot(normal)))

    def min(self, other: Vector2) -> Vector2:
        return Vector2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vector2) -> Vector2:
        return Vector2(max(self.x, other.x), max(self.y, other.y))

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians."""
        cos_res = math.cos(angle)
        sin_res = math.sin(angle)
        return Vector2(
            self.x * cos_res - self.y * sin_res,
            self.x * sin_res + self.y * cos_res,
        )

    def move_towards(self, target: Vector2, max_distance: float) -> Vector2:
        """Step towards ``target`` by at most ``max_distance``."""
        delta = target.subtract(self)
        value = delta.length_sqr()
        if value == 0 or (max_distance >= 0 and value <= max_distance * max_distance):
            return target
        dist = math.sqrt(value)
        return self.add(delta.scale(max_distance / dist))

    def invert(self) -> Vector2:
        return Vector2(1.0 / self.x, 1.0 / self.y)

    def clamp(self, low: Vector2, high: Vector2) -> Vector2:
        return Vector2(
            min(high.x, max(low.x, self.x)),
            min(high.y, max(low.y, self.y)),
        )

    def clamp_value(self, low: float, high: float) -> Vector2:
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

    def equals(self, other: Vector2) -> bool:
        return float_equals(self.x, other.x) and float_equals(self.y, other.y)

    def refract(self, normal: Vector2, ratio: float) -> Vector2:
        """Refracted direction; the zero vector on total internal reflection."""
        dot = self.dot(normal)
        d = 1.0 - ratio * ratio * (1.0 - dot * dot)
        if d < 0.0:
            return Vector2.zero()
        d = math.sqrt(d)
        return self.scale(ratio).subtract(normal.scale(ratio * dot + d))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.subtract(other)

    def __neg__(self) -> Vector2:
        return self.negate()

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return self.multiply(other)
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return self.divide(other)
        return self.scale(1.0 / other)