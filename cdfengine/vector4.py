"""A four-component float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .vector3 import float_equals, lerp


@dataclass(frozen=True)
class Vector4:
    """An immutable 4D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def zero(cls) -> Vector4:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector4:
        return cls(1.0, 1.0, 1.0, 1.0)

    def add(self, other: Vector4) -> Vector4:
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def add_value(self, value: float) -> Vector4:
        return Vector4(self.x + value, self.y + value, self.z + value, self.w + value)

    def subtract(self, other: Vector4) -> Vector4:
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def subtract_value(self, value: float) -> Vector4:
        return Vector4(self.x - value, self.y - value, self.z - value, self.w - value)

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        return self.dot(self)

    def dot(self, other: Vector4) -> float:
        return (
            self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        )

    def distance(self, other: Vector4) -> float:
        return math.sqrt(self.distance_sqr(other))

    def distance_sqr(self, other: Vector4) -> float:
        return self.subtract(other).length_sqr()

    def scale(self, scalar: float) -> Vector4:
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def multiply(self, other: Vector4) -> Vector4:
        return Vector4(
            self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w
        )

    def negate(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def divide(self, other: Vector4) -> Vector4:
        return Vector4(
            self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w
        )

    def normalize(self) -> Vector4:
        """Return the unit vector; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return self.scale(1.0 / length)
        return Vector4.zero()

    def min(self, other: Vector4) -> Vector4:
        return Vector4(
            min(self.x, other.x),
            min(self.y, other.y),
            min(self.z, other.z),
            min(self.w, other.w),
        )

    def max(self, other: Vector4) -> Vector4:
        return Vector4(
            max(self.x, other.x),
            max(self.y, other.y),
            max(self.z, other.z),
            max(self.w, other.w),
        )

    def lerp(self, other: Vector4, amount: float) -> Vector4:
        return Vector4(
            lerp(self.x, other.x, amount),
            lerp(self.y, other.y, amount),
            lerp(self.z, other.z, amount),
            lerp(self.w, other.w, amount),
        )

    def move_towards(self, target: Vector4, max_distance: float) -> Vector4:
        """Step towards ``target`` by at most ``max_distance``."""
        delta = target.subtract(self)
        value = delta.length_sqr()
        if value == 0 or (max_distance >= 0 and value <= max_distance * max_distance):
            return target
        dist = math.sqrt(value)
        return self.add(delta.scale(max_distance / dist))

    def invert(self) -> Vector4:
        return Vector4(1.0 / self.x, 1.0 / self.y, 1.0 / self.z, 1.0 / self.w)

    def equals(self, other: Vector4) -> bool:
        return (
            float_equals(self.x, other.x)
            and float_equals(self.y, other.y)
            and float_equals(self.z, other.z)
            and float_equals(self.w, other.w)
        )

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: Vector4) -> Vector4:
        return self.add(other)

    def __sub__(self, other: Vector4) -> Vector4:
        return self.subtract(other)

    def __neg__(self) -> Vector4:
        return self.negate()

    def __mul__(self, other: Vector4 | float) -> Vector4:
        if isinstance(other, Vector4):
            return self.multiply(other)
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vector4 | float) -> Vector4:
        if isinstance(other, Vector4):
            return self.divide(other)
        return self.scale(1.0 / other)