"""Shadow-map depth pass window with a fly-through camera, matrix helpers and a shader wrapper."""

__version__ = "0.1.0"
__all__ = ["app", "camera", "shader", "transforms"]