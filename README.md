# cdfengine

Core pieces of a small game engine, in plain Python with no third-party
dependencies.

## Modules

- `cdfengine.hashing`: `hash_int` (a 32-bit integer scrambler) and
  `hash_str` (a djb2 hash of a string padded with spaces to
  `MAX_STR_LEN`, 32 by default). `keyword_hashes()` returns the padded hash
  of every content definition format keyword.
- `cdfengine.containers`: `IntDict` (keyed by unsigned 32-bit ids),
  `StrDict` (keyed by strings) and a FIFO `Queue`. `get` on an absent key
  and `dequeue` on an empty queue return `None`.
- `cdfengine.vector2`, `cdfengine.vector3`, `cdfengine.vector4`: immutable
  float vectors `Vector2`, `Vector3` and `Vector4` with arithmetic,
  normalization, interpolation, clamping, reflection, refraction and
  approximate comparison (`equals`). `cdfengine.vector3` also has the
  scalar helpers `clamp`, `lerp`, `normalize`, `remap`, `wrap` and
  `float_equals`.
- `cdfengine.matrix`: `Matrix`, an immutable 4x4 column-major matrix with
  determinant, inverse, products, and builders for translation, rotation,
  scaling, frustum, perspective, orthographic and look-at matrices.
- `cdfengine.quaternion`: rotation quaternions stored as `Vector4`
  `(x, y, z, w)`: normalization, inversion, products, nlerp, slerp, cubic
  Hermite splines, and conversion to and from matrices, axis-angle and
  Euler angles.
- `cdfengine.transform`: applies matrices to vectors and quaternions,
  `unproject` from screen space, and `decompose` a matrix into translation,
  rotation and scale.
- `cdfengine.fixedvec`: `fixed_mul` for numbers with 32 fractional bits,
  and `FixedVector2` / `FixedMatrix` with 64-bit integer components whose
  arithmetic wraps on overflow.
- `cdfengine.collision`: `intersect` (ray against triangle, returning a
  `Hit` or `None`), `component_along_plane`, and `ray_cylinder_collision`,
  which never reports a hit.
- `cdfengine.objparser`: reads Wavefront OBJ text (`parse_collision_mesh`)
  or files (`load_collision_mesh`) into a `CollisionMesh` of vertices,
  vertex normals, faces and computed surface normals. Face corners must be
  written `vertex/texture/normal`.
- `cdfengine.cdfparser`: `CdfParser` reads object templates with `float`
  and `int` properties from content definition text, files, or every file
  listed in `<root>/cdf/root.cdf`. `events`, `a_events`, `transitions` and
  `states` blocks are skipped. Malformed input raises `CdfError`.
- `cdfengine.statemachine`: `EventBus` keeps one event queue per object id;
  `StateMachine` advances through timed states and takes transitions
  returned by the queued events' functions on each `tick`.

## Install

```
pip install .
```

## Example

```python
from cdfengine.cdfparser import CdfParser
from cdfengine.vector3 import Vector3
from cdfengine.collision import Ray, intersect

parser = CdfParser()
(player,) = parser.parse_text("""
object player {
  float speed 4.5
  int health 100
}
""")
print(player.floats["speed"], player.ints["health"])  # 4.5 100

hit = intersect(
    Ray(Vector3(0.25, 0.25, 1.0), Vector3(0.0, 0.0, -1.0)),
    Vector3(0.0, 0.0, 0.0),
    Vector3(1.0, 0.0, 0.0),
    Vector3(0.0, 1.0, 0.0),
)
```

## Command

Print the hashes of the content definition format keywords, one per line:

```
cdf-keyword-hashes
```

## What it does not do

The package holds no window, renderer, audio or game loop, and reads no
controller input: there is no mapping of gamepad buttons to actions. Cylinder
collision is a stub that always reports no hit.

## Tests

```
pip install .[test]
pytest
```