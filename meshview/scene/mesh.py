"""
Готовый к отрисовке меш: позиции, нормали, индексы треугольников
и группы материалов.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from meshview.assets.material import Material


class MaterialGroup:
    """Непрерывный диапазон [start_index, start_index + index_count) в индексах."""

    __slots__ = ("name", "start_index", "index_count", "material")

    def __init__(self, name: str, start_index: int = 0, index_count: int = 0,
                 material: Optional[Material] = None):
        self.name = name
        self.start_index = start_index
        self.index_count = index_count
        self.material = material

    @property
    def end_index(self) -> int:
        return self.start_index + self.index_count

    @property
    def triangle_count(self) -> int:
        return self.index_count // 3

    def __repr__(self):
        return (f"MaterialGroup({self.name!r}, start={self.start_index}, "
                f"count={self.index_count})")


class RenderableMesh:
    """
    Результат загрузки модели. После создания массивы только для чтения:
    новая загрузка создаёт новый объект.
    """

    def __init__(self,
                 positions: np.ndarray,
                 normals: np.ndarray,
                 indices: np.ndarray,
                 groups: dict[str, MaterialGroup] | None = None,
                 material_libraries: tuple[str, ...] = ()):
        self.positions = np.array(positions, dtype=np.float32).reshape((-1, 3))
        self.normals = np.array(normals, dtype=np.float32).reshape((-1, 3))
        self.indices = np.array(indices, dtype=np.uint32).ravel()
        self.groups = dict(groups or {})
        self.material_libraries = tuple(material_libraries)

        for arr in (self.positions, self.normals, self.indices):
            arr.flags.writeable = False

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangles(self) -> np.ndarray:
        """Индексы в виде (M, 3)."""
        return self.indices.reshape((-1, 3))

    @property
    def ungrouped_count(self) -> int:
        """Сколько индексов в начале не относится ни к одной группе."""
        if not self.groups:
            return self.index_count
        return min(g.start_index for g in self.groups.values())

    def with_materials(self, materials: dict[str, Material]) -> RenderableMesh:
        """
        Тот же меш с группами, материалы которых взяты из `materials`.
        Диапазоны индексов не меняются; имена без записи получают None.
        """
        groups = {
            name: MaterialGroup(name, g.start_index, g.index_count, materials.get(name))
            for name, g in self.groups.items()
        }
        return RenderableMesh(self.positions, self.normals, self.indices, groups,
                              material_libraries=self.material_libraries)

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """(min, max) по осям."""
        return self.positions.min(axis=0), self.positions.max(axis=0)

    def __repr__(self):
        return (f"RenderableMesh(vertices={self.vertex_count}, "
                f"triangles={self.index_count // 3}, groups={list(self.groups)})")
