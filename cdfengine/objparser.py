"""Reading collision meshes from Wavefront OBJ text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .vector3 import Vector3

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Face:
    """A triangle given by zero-based vertex indices and vertex-normal indices."""

    a: int
    b: int
    c: int
    n_a: int
    n_b: int
    n_c: int


@dataclass
class CollisionMesh:
    """Vertices, vertex normals, per-face surface normals and faces of a mesh."""

    vertices: list[Vector3] = field(default_factory=list)
    vertex_normals: list[Vector3] = field(default_factory=list)
    surface_normals: list[Vector3] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    @property
    def face_count(self) -> int:
        return len(self.faces)


def _to_index(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"invalid index {text!r} in face") from None
    # Indices in the format start at one.
    return value - 1


def parse_face(line: str) -> Face:
    """Parse the part of an ``f`` line after the keyword.

    Each of the first three corners must be written ``vertex/texture/normal``.
    """
    corners = line.split()
    if len(corners) < 3:
        raise ValueError(f"face needs three corners: {line!r}")
    vertices: list[int] = []
    normals: list[int] = []
    for corner in corners[:3]:
        parts = corner.split("/")
        if len(parts) < 3 or not parts[0] or not parts[2]:
            raise ValueError(f"face corner needs vertex and normal indices: {corner!r}")
        vertices.append(_to_index(parts[0]))
        normals.append(_to_index(parts[2]))
    return Face(*vertices, *normals)


def parse_vector3(line: str) -> Vector3:
    """Read up to three leading floats; missing or unreadable ones are 0."""
    values: list[float] = []
    position = 0
    for _ in range(3):
        match = _FLOAT_RE.match(line, position)
        if match is None:
            values.append(0.0)
            continue
        values.append(float(match.group(1)))
        position = match.end()
    return Vector3(*values)


def _surface_normal(mesh: CollisionMesh, face: Face) -> Vector3:
    count = len(mesh.vertices)
    for index in (face.a, face.b, face.c):
        if not 0 <= index < count:
            raise ValueError(f"face refers to missing vertex {index + 1}")
    a = mesh.vertices[face.a]
    b = mesh.vertices[face.b]
    c = mesh.vertices[face.c]
    edge1 = b.subtract(a)
    edge2 = c.subtract(b)
    return edge1.cross(edge2).normalize()


def parse_collision_mesh(text: str) -> CollisionMesh:
    """Build a collision mesh from OBJ text, computing each face's surface normal."""
    mesh = CollisionMesh()
    for line in text.split("\n"):
        if not line:
            continue
        if line[0] == "v":
            kind = line[1:2]
            if kind == "n":
                mesh.vertex_normals.append(parse_vector3(line[2:]))
            elif kind != "t":
                mesh.vertices.append(parse_vector3(line[1:]))
        elif line[0] == "f":
            mesh.faces.append(parse_face(line[1:]))
    mesh.surface_normals = [_surface_normal(mesh, face) for face in mesh.faces]
    return mesh


def load_collision_mesh(path: str | Path) -> CollisionMesh:
    """Read an OBJ file and build its collision mesh."""
    return parse_collision_mesh(Path(path).read_text(encoding="utf-8"))