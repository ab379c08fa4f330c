"""GLSL shader programs loaded from source files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import numpy as np


class ShaderError(Exception):
    """Raised when shader source cannot be read, compiled or linked."""


class ShaderType(Enum):
    """Shader pipeline stages."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"
    GEOMETRY = "geometry"


def read_source(path) -> str:
    """Return the text of a shader source file."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ShaderError(f"ERROR::SHADER::FILE_NOT_SUCCESSSFULLY_READ: {path}") from exc


def _floats(values, count: int) -> tuple:
    flat = np.asarray(values, dtype=np.float64).ravel()
    if flat.size != count:
        raise ValueError(f"expected {count} components, got {flat.size}")
    return tuple(float(x) for x in flat)


def _column_major(matrix, size: int) -> tuple:
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {m.shape}")
    return tuple(float(x) for x in m.T.ravel())


class Shader:
    """A linked program built from vertex, fragment and optional geometry files.

    Needs a current OpenGL context. The program is made current on creation.
    """

    def __init__(self, vertex_path, fragment_path, geometry_path=None):
        sources = [
            (ShaderType.VERTEX, read_source(vertex_path)),
            (ShaderType.FRAGMENT, read_source(fragment_path)),
        ]
        if geometry_path is not None:
            sources.append((ShaderType.GEOMETRY, read_source(geometry_path)))

        from pyglet.graphics import shader as gl_shader

        stages = []
        try:
            for stage, code in sources:
                stages.append(gl_shader.Shader(code, stage.value))
            self._program = gl_shader.ShaderProgram(*stages)
        except gl_shader.ShaderException as exc:
            raise ShaderError(str(exc)) from exc
        finally:
            for stage in stages:
                stage.delete()
        self.use()

    @property
    def id(self) -> int:
        return self._program.id

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.delete()

    def use(self) -> None:
        """Make this program current."""
        self._program.use()

    def delete(self) -> None:
        """Release the program object."""
        self._program.delete()

    def _set(self, name: str, value) -> None:
        # Unknown uniforms are ignored, as OpenGL does for location -1.
        if name in self._program.uniforms:
            self._program[name] = value

    def set_bool(self, name, value) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name, value) -> None:
        self._set(name, int(value))

    def set_float(self, name, value) -> None:
        self._set(name, float(value))

    def set_vec2(self, name, vec) -> None:
        self._set(name, _floats(vec, 2))

    def set_vec3(self, name, *args) -> None:
        """Set a vec3 from one 3-component vector or from three scalars."""
        if len(args) == 1:
            vec = args[0]
        elif len(args) == 3:
            vec = args
        else:
            raise TypeError("set_vec3 takes a vector or three components")
        self._set(name, _floats(vec, 3))

    def set_vec4(self, name, vec) -> None:
        self._set(name, _floats(vec, 4))

    def set_matrix4(self, name, matrix) -> None:
        self._set(name, _column_major(matrix, 4))

    def set_matrix3(self, name, matrix) -> None:
        self._set(name, _column_major(matrix, 3))