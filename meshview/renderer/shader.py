"""
GLSL‑программа просмотрщика.
* Исходники лежат в `meshview/resources/shaders/`.
* Uniform‑ы выставляются через графический бекенд.
"""

from pathlib import Path

import numpy as np

from meshview.graphics.backend import GraphicsBackend
from meshview.utils.logger import logger

SHADER_DIR = Path(__file__).resolve().parents[1] / "resources" / "shaders"


def read_shader_source(name: str) -> str:
    return (SHADER_DIR / name).read_text(encoding="utf-8")


class Shader:
    """Обёртка над программой: знает свой бекенд и типы uniform‑ов."""

    def __init__(self, backend: GraphicsBackend,
                 vertex_name: str = "mesh_vert.glsl",
                 fragment_name: str = "mesh_frag.glsl"):
        self.backend = backend
        logger.info(f"[Shader] Compiling {vertex_name} + {fragment_name}")
        self.program = backend.create_program(
            read_shader_source(vertex_name),
            read_shader_source(fragment_name),
        )

    def use(self) -> None:
        self.backend.use_program(self.program)

    def set_uniform_mat4(self, name: str, mat) -> None:
        self.backend.set_uniform_mat4(self.program, name, np.asarray(mat, dtype=np.float32))

    def set_uniform_mat3(self, name: str, mat) -> None:
        self.backend.set_uniform_mat3(self.program, name, np.asarray(mat, dtype=np.float32))

    def set_uniform_vec3(self, name: str, vec) -> None:
        self.backend.set_uniform_vec3(self.program, name, np.asarray(vec, dtype=np.float32))

    def set_uniform_float(self, name: str, value: float) -> None:
        self.backend.set_uniform_float(self.program, name, float(value))

    def set_uniforms(self, values: dict) -> None:
        """Скаляры -> float, 3‑векторы -> vec3."""
        for name, value in values.items():
            if np.ndim(value) == 0:
                self.set_uniform_float(name, value)
            else:
                self.set_uniform_vec3(name, value)

    def release(self) -> None:
        self.backend.release_resource(self.program)
