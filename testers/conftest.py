# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бэкенд для рендерера.
Не требует GL‑контекста, а проверяет, что MeshRenderer → Backend
вызывают ожидаемые методы.
"""

from typing import Any, Sequence, Tuple
import pytest

from meshview.graphics.backend import GraphicsBackend


# ----------------------------------------------------------------------
# MockBackend – полностью реализует интерфейс GraphicsBackend.
# ----------------------------------------------------------------------
class MockBackend(GraphicsBackend):
    """
    Каждый метод только записывает вызов в `self.calls`.
    Ресурсы – просто возрастающие целые «хэндлы».
    """

    def __init__(self) -> None:
        # (method_name, args)
        self.calls: list[Tuple[str, Tuple[Any, ...]]] = []
        self._next_handle = 1
        self.live: set[int] = set()

    # -----------------------------------------------------------------
    # Вспомогательная запись вызова
    # -----------------------------------------------------------------
    def _record(self, name: str, *a) -> None:
        self.calls.append((name, a))

    def _handle(self) -> int:
        h = self._next_handle
        self._next_handle += 1
        self.live.add(h)
        return h

    # -----------------------------------------------------------------
    # Programs / buffers --------------------------------------------------
    # -----------------------------------------------------------------
    def create_program(self, vertex_source: str, fragment_source: str) -> Any:
        self._record("create_program", vertex_source, fragment_source)
        return self._handle()

    def use_program(self, program: Any) -> None:
        self._record("use_program", program)

    def create_buffer(self, data, usage: str = "vertex") -> Any:
        self._record("create_buffer", data, usage)
        return self._handle()

    def bind_attribute(self, buffer: Any, location: int, size: int) -> None:
        self._record("bind_attribute", buffer, location, size)

    def bind_index_buffer(self, buffer: Any) -> None:
        self._record("bind_index_buffer", buffer)

    # -----------------------------------------------------------------
    # Uniforms --------------------------------------------------------------
    # -----------------------------------------------------------------
    def set_uniform_mat4(self, program: Any, name: str, value) -> None:
        self._record("set_uniform_mat4", program, name, value)

    def set_uniform_mat3(self, program: Any, name: str, value) -> None:
        self._record("set_uniform_mat3", program, name, value)

    def set_uniform_vec3(self, program: Any, name: str, value: Sequence[float]) -> None:
        self._record("set_uniform_vec3", program, name, value)

    def set_uniform_float(self, program: Any, name: str, value: float) -> None:
        self._record("set_uniform_float", program, name, value)

    # -----------------------------------------------------------------
    # Frame -----------------------------------------------------------------
    # -----------------------------------------------------------------
    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self._record("set_viewport", x, y, width, height)

    def enable_depth_test(self, enable: bool) -> None:
        self._record("enable_depth_test", enable)

    def set_blending(self, enable: bool) -> None:
        self._record("set_blending", enable)

    def clear(self, color: Sequence[float]) -> None:
        self._record("clear", tuple(color))

    def draw_indexed(self, index_count: int, start_index: int = 0) -> None:
        self._record("draw_indexed", index_count, start_index)

    def release_resource(self, resource: Any) -> None:
        self._record("release_resource", resource)
        self.live.discard(resource)

    # -----------------------------------------------------------------
    # Утилиты для тестов --------------------------------------------------
    # -----------------------------------------------------------------
    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """Сколько раз был вызван метод `name`."""
        return sum(1 for call in self.calls if call[0] == name)

    def args_of(self, name: str) -> list:
        return [call[1] for call in self.calls if call[0] == name]

    def uniform(self, name: str):
        """Последнее значение uniform‑а `name` (любого типа)."""
        value = None
        for method, args in self.calls:
            if method.startswith("set_uniform_") and args[1] == name:
                value = args[2]
        return value


# ----------------------------------------------------------------------
# PyTest‑fixture – возвращает новый мок‑бэкенд для каждого теста
# ----------------------------------------------------------------------
@pytest.fixture
def mock_backend() -> MockBackend:
    """Создаёт чистый MockBackend."""
    return MockBackend()


# ----------------------------------------------------------------------
# Небольшие модели для тестов
# ----------------------------------------------------------------------
SQUARE_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""

TWO_MATERIALS_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
v 0 0 1
usemtl Red
f 1 2 3
usemtl Green
f 1 2 4
"""

TWO_MATERIALS_MTL = """\
newmtl Red
Kd 1 0 0
newmtl Green
Kd 0 1 0
Ns 10
"""


@pytest.fixture
def square_obj() -> str:
    return SQUARE_OBJ


@pytest.fixture
def two_materials_obj() -> str:
    return TWO_MATERIALS_OBJ


@pytest.fixture
def two_materials_mtl() -> str:
    return TWO_MATERIALS_MTL
