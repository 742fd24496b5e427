import pytest

from cdfengine.collision import (
    Cylinder,
    Hit,
    Ray,
    component_along_plane,
    intersect,
    ray_cylinder_collision,
)
from cdfengine.vector3 import Vector3

A = Vector3(0.0, 0.0, 0.0)
B = Vector3(1.0, 0.0, 0.0)
C = Vector3(0.0, 1.0, 0.0)
UP = Vector3(0.0, 0.0, 1.0)


def test_hit_point_lies_on_ray_and_plane():
    ray = Ray(Vector3(0.2, 0.2, -0.5), UP)
    hit = intersect(ray, A, B, C)
    assert isinstance(hit, Hit)
    assert hit.intersection.z == pytest.approx(0.0)
    assert hit.intersection.equals(ray.position.add(ray.direction.scale(hit.t)))
    assert hit.u == pytest.approx(0.2)
    assert hit.v == pytest.approx(hit.t)


def test_hit_t_is_distance_for_unit_direction():
    ray = Ray(Vector3(0.2, 0.2, -0.5), UP)
    hit = intersect(ray, A, B, C)
    assert hit is not None
    assert hit.t == pytest.approx(ray.position.distance(hit.intersection))


def test_parallel_ray_misses():
    ray = Ray(Vector3(0.2, 0.2, -0.5), Vector3(1.0, 0.0, 0.0))
    assert intersect(ray, A, B, C) is None


def test_ray_outside_triangle_misses():
    ray = Ray(Vector3(2.0, 0.2, -0.5), UP)
    assert intersect(ray, A, B, C) is None


def test_triangle_behind_ray_misses():
    ray = Ray(Vector3(0.2, 0.2, 0.5), UP)
    assert intersect(ray, A, B, C) is None


def test_degenerate_triangle_misses():
    ray = Ray(Vector3(0.2, 0.2, -0.5), UP)
    assert intersect(ray, A, B, B.scale(2.0)) is None


def test_nan_input_raises():
    ray = Ray(Vector3(0.2, 0.2, -0.5), Vector3(float("nan"), 0.0, 1.0))
    with pytest.raises(ValueError):
        intersect(ray, A, B, C)


def test_component_along_plane_is_orthogonal_to_normal():
    vector = Vector3(3.0, -2.0, 5.0)
    normal = Vector3(1.0, 2.0, 2.0).normalize()
    result = component_along_plane(vector, normal)
    assert result.dot(normal) == pytest.approx(0.0, abs=1e-12)
    assert result.add(normal.scale(vector.dot(normal))).equals(vector)


def test_component_along_plane_drops_normal_axis():
    vector = Vector3(3.0, -2.0, 5.0)
    assert component_along_plane(vector, UP) == Vector3(3.0, -2.0, 0.0)


def test_ray_cylinder_collision_reports_no_hit():
    ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
    assert ray_cylinder_collision(ray, Vector3(0.5, 0.0, 0.0), Cylinder(1.0, 2.0)) is None