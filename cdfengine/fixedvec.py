"""Fixed-point helpers and a 2D vector of 64-bit integer components."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields

FRACBITS = 32
FRACUNIT = 1 << FRACBITS

_INT64_MIN = -(1 << 63)
_INT64_SPAN = 1 << 64


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 64-bit integer, wrapping on overflow."""
    return (value - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return _wrap(quotient if (a < 0) == (b < 0) else -quotient)


def _check_ints(obj: object) -> None:
    for f in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, f.name)
        if not isinstance(value, int):
            raise TypeError(f"{f.name} must be an int, not {type(value).__name__}")
        object.__setattr__(obj, f.name, _wrap(value))


def fixed_mul(a: int, b: int) -> int:
    """Multiply two fixed-point numbers with FRACBITS fractional bits."""
    return _wrap(a * b) >> FRACBITS


@dataclass(frozen=True)
class FixedMatrix:
    """A 4x4 matrix of 64-bit integers in column-major layout."""

    m0: int = 0
    m1: int = 0
    m2: int = 0
    m3: int = 0
    m4: int = 0
    m5: int = 0
    m6: int = 0
    m7: int = 0
    m8: int = 0
    m9: int = 0
    m10: int = 0
    m11: int = 0
    m12: int = 0
    m13: int = 0
    m14: int = 0
    m15: int = 0

    def __post_init__(self) -> None:
        _check_ints(self)


@dataclass(frozen=True)
class FixedVector2:
    """An immutable 2D vector of 64-bit integers; arithmetic wraps on overflow."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _check_ints(self)

    def add(self, other: FixedVector2) -> FixedVector2:
        return FixedVector2(_wrap(self.x + other.x), _wrap(self.y + other.y))

    def subtract(self, other: FixedVector2) -> FixedVector2:
        return FixedVector2(_wrap(self.x - other.x), _wrap(self.y - other.y))

    def add_value(self, value: int) -> FixedVector2:
        return FixedVector2(_wrap(self.x + value), _wrap(self.y + value))

    def subtract_value(self, value: int) -> FixedVector2:
        return FixedVector2(_wrap(self.x - value), _wrap(self.y - value))

    def scale(self, factor: int) -> FixedVector2:
        return FixedVector2(_wrap(self.x * factor), _wrap(self.y * factor))

    def multiply(self, other: FixedVector2) -> FixedVector2:
        return FixedVector2(_wrap(self.x * other.x), _wrap(self.y * other.y))

    def divide(self, other: FixedVector2) -> FixedVector2:
        """Componentwise division rounding towards zero."""
        return FixedVector2(_trunc_div(self.x, other.x), _trunc_div(self.y, other.y))

    def negate(self) -> FixedVector2:
        return FixedVector2(_wrap(-self.x), _wrap(-self.y))

    def dot(self, other: FixedVector2) -> int:
        return _wrap(self.x * other.x + self.y * other.y)

    def length_sqr(self) -> int:
        return self.dot(self)

    def distance_sqr(self, other: FixedVector2) -> int:
        return self.subtract(other).length_sqr()

    def lerp(self, other: FixedVector2, amount: int) -> FixedVector2:
        return FixedVector2(
            _wrap(self.x + amount * (other.x - self.x)),
            _wrap(self.y + amount * (other.y - self.y)),
        )

    def reflect(self, normal: FixedVector2) -> FixedVector2:
        dot = self.dot(normal)
        return FixedVector2(
            _wrap(self.x - (2 * normal.x) * dot),
            _wrap(self.y - (2 * normal.y) * dot),
        )

    def min(self, other: FixedVector2) -> FixedVector2:
        return FixedVector2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: FixedVector2) -> FixedVector2:
        return FixedVector2(max(self.x, other.x), max(self.y, other.y))

    def clamp(self, low: FixedVector2, high: FixedVector2) -> FixedVector2:
        return FixedVector2(
            min(high.x, max(low.x, self.x)),
            min(high.y, max(low.y, self.y)),
        )

    def transform(self, matrix: FixedMatrix) -> FixedVector2:
        """Apply ``matrix`` to the point (x, y, 0)."""
        return FixedVector2(
            _wrap(matrix.m0 * self.x + matrix.m4 * self.y + matrix.m12),
            _wrap(matrix.m1 * self.x + matrix.m5 * self.y + matrix.m13),
        )

    def to_tuple(self) -> tuple[int, int]:
        return astuple(self)

    def __add__(self, other: FixedVector2) -> FixedVector2:
        return self.add(other)

    def __sub__(self, other: FixedVector2) -> FixedVector2:
        return self.subtract(other)

    def __neg__(self) -> FixedVector2:
        return self.negate()