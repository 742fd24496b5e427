"""Game engine core: content definition parsing, containers, 3D math, OBJ meshes, collision and state machines."""

__version__ = "0.1.0"