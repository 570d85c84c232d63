"""
OpenGL 3.3 backend (PyOpenGL).

Требует уже созданного текущего GL‑контекста (см. `Window`).
"""

import ctypes
from typing import Any, Sequence

import numpy as np
from OpenGL import GL

from meshview.errors import ShaderError
from meshview.graphics.backend import GraphicsBackend
from meshview.utils.logger import logger


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"[GL] OpenGL error 0x{err:04x} [{context}]")


def _compile_shader(source: str, shader_type) -> int:
    shader = GL.glCreateShader(shader_type)
    GL.glShaderSource(shader, source)
    GL.glCompileShader(shader)
    if not GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS):
        error = GL.glGetShaderInfoLog(shader)
        GL.glDeleteShader(shader)
        if isinstance(error, bytes):
            error = error.decode(errors="replace")
        raise ShaderError(f"Shader compilation failed: {error}")
    return shader


class GLBackend(GraphicsBackend):
    """OpenGL backend: один VAO на всё время жизни."""

    _USAGE_TARGETS = {
        "vertex": GL.GL_ARRAY_BUFFER,
        "index": GL.GL_ELEMENT_ARRAY_BUFFER,
    }

    def __init__(self):
        self.vao = GL.glGenVertexArrays(1)
        GL.glBindVertexArray(self.vao)
        self._buffers: set[int] = set()
        self._programs: set[int] = set()
        self._uniform_cache: dict[tuple[int, str], int] = {}

    # -----------------------------------------------------------------
    # Программы
    # -----------------------------------------------------------------
    def create_program(self, vertex_source: str, fragment_source: str) -> Any:
        vs = _compile_shader(vertex_source, GL.GL_VERTEX_SHADER)
        try:
            fs = _compile_shader(fragment_source, GL.GL_FRAGMENT_SHADER)
        except ShaderError:
            GL.glDeleteShader(vs)
            raise

        program = GL.glCreateProgram()
        GL.glAttachShader(program, vs)
        GL.glAttachShader(program, fs)
        GL.glLinkProgram(program)
        # после линковки шейдеры больше не нужны
        GL.glDeleteShader(vs)
        GL.glDeleteShader(fs)

        if not GL.glGetProgramiv(program, GL.GL_LINK_STATUS):
            error = GL.glGetProgramInfoLog(program)
            GL.glDeleteProgram(program)
            if isinstance(error, bytes):
                error = error.decode(errors="replace")
            raise ShaderError(f"Program link failed: {error}")

        self._programs.add(program)
        logger.debug(f"[GL] Program {program} linked.")
        return program

    def use_program(self, program: Any) -> None:
        GL.glUseProgram(program)

    # -----------------------------------------------------------------
    # Буферы
    # -----------------------------------------------------------------
    def create_buffer(self, data: np.ndarray, usage: str = "vertex") -> Any:
        if usage not in self._USAGE_TARGETS:
            raise ValueError(f"Unknown buffer usage: {usage}")
        target = self._USAGE_TARGETS[usage]
        buffer = GL.glGenBuffers(1)
        GL.glBindBuffer(target, buffer)
        GL.glBufferData(target, data.nbytes, data, GL.GL_STATIC_DRAW)
        self._buffers.add(buffer)
        gl_check_error("create_buffer")
        return buffer

    def bind_attribute(self, buffer: Any, location: int, size: int) -> None:
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, buffer)
        GL.glVertexAttribPointer(location, size, GL.GL_FLOAT, False, 0, None)
        GL.glEnableVertexAttribArray(location)

    def bind_index_buffer(self, buffer: Any) -> None:
        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, buffer)

    # -----------------------------------------------------------------
    # Uniform‑ы
    # -----------------------------------------------------------------
    def _location(self, program: Any, name: str) -> int:
        key = (program, name)
        if key not in self._uniform_cache:
            self._uniform_cache[key] = GL.glGetUniformLocation(program, name)
        return self._uniform_cache[key]

    def set_uniform_mat4(self, program: Any, name: str, value: np.ndarray) -> None:
        GL.glUniformMatrix4fv(self._location(program, name), 1, False,
                              np.asarray(value, dtype=np.float32))

    def set_uniform_mat3(self, program: Any, name: str, value: np.ndarray) -> None:
        GL.glUniformMatrix3fv(self._location(program, name), 1, False,
                              np.asarray(value, dtype=np.float32))

    def set_uniform_vec3(self, program: Any, name: str, value: Sequence[float]) -> None:
        GL.glUniform3fv(self._location(program, name), 1,
                        np.asarray(value, dtype=np.float32))

    def set_uniform_float(self, program: Any, name: str, value: float) -> None:
        GL.glUniform1f(self._location(program, name), float(value))

    # -----------------------------------------------------------------
    # Кадр
    # -----------------------------------------------------------------
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        GL.glViewport(x, y, width, height)

    def enable_depth_test(self, enable: bool) -> None:
        if enable:
            GL.glEnable(GL.GL_DEPTH_TEST)
        else:
            GL.glDisable(GL.GL_DEPTH_TEST)

    def set_blending(self, enable: bool) -> None:
        if enable:
            GL.glEnable(GL.GL_BLEND)
            GL.glBlendFunc(GL.GL_SRC_ALPHA, GL.GL_ONE_MINUS_SRC_ALPHA)
        else:
            GL.glDisable(GL.GL_BLEND)

    def clear(self, color: Sequence[float]) -> None:
        GL.glClearColor(*color)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

    def draw_indexed(self, index_count: int, start_index: int = 0) -> None:
        # смещение в байтах, индексы uint32
        GL.glDrawElements(GL.GL_TRIANGLES, index_count, GL.GL_UNSIGNED_INT,
                          ctypes.c_void_p(start_index * 4))

    def release_resource(self, resource: Any) -> None:
        if resource in self._buffers:
            GL.glDeleteBuffers(1, [resource])
            self._buffers.discard(resource)
        elif resource in self._programs:
            GL.glDeleteProgram(resource)
            self._programs.discard(resource)
