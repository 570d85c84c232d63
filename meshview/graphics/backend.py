"""
Абстрактный интерфейс для графических бекендов.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np


class GraphicsBackend(ABC):
    """Base interface for graphics backends."""

    @abstractmethod
    def create_program(self, vertex_source: str, fragment_source: str) -> Any:
        pass

    @abstractmethod
    def use_program(self, program: Any) -> None:
        pass

    @abstractmethod
    def create_buffer(self, data: np.ndarray, usage: str = "vertex") -> Any:
        pass

    @abstractmethod
    def bind_attribute(self, buffer: Any, location: int, size: int) -> None:
        pass

    @abstractmethod
    def bind_index_buffer(self, buffer: Any) -> None:
        pass

    @abstractmethod
    def set_uniform_mat4(self, program: Any, name: str, value: np.ndarray) -> None:
        pass

    @abstractmethod
    def set_uniform_mat3(self, program: Any, name: str, value: np.ndarray) -> None:
        pass

    @abstractmethod
    def set_uniform_vec3(self, program: Any, name: str, value: Sequence[float]) -> None:
        pass

    @abstractmethod
    def set_uniform_float(self, program: Any, name: str, value: float) -> None:
        pass

    @abstractmethod
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        pass

    @abstractmethod
    def enable_depth_test(self, enable: bool) -> None:
        pass

    @abstractmethod
    def set_blending(self, enable: bool) -> None:
        pass

    @abstractmethod
    def clear(self, color: Sequence[float]) -> None:
        pass

    @abstractmethod
    def draw_indexed(self, index_count: int, start_index: int = 0) -> None:
        pass

    @abstractmethod
    def release_resource(self, resource: Any) -> None:
        pass


def select_backend(name: str = "gl") -> GraphicsBackend:
    """Select graphics backend by name."""
    name = name.lower()
    if name == "gl":
        from .gl_backend import GLBackend
        return GLBackend()
    else:
        raise ValueError(f"Unknown graphics backend: {name}")
