# -*- coding: utf-8 -*-
"""
Материал из MTL‑библиотеки (модель освещения Фонга).

Значения по‑умолчанию фиксированы здесь и больше нигде:
ambient = 1, diffuse = 0.8, specular = 0.5, shininess = 32,
refraction index = 1.5, opacity = 1, illum = 2.
"""

from __future__ import annotations

import numpy as np

DEFAULT_AMBIENT = (1.0, 1.0, 1.0)
DEFAULT_DIFFUSE = (0.8, 0.8, 0.8)
DEFAULT_SPECULAR = (0.5, 0.5, 0.5)
DEFAULT_EMISSIVE = (0.0, 0.0, 0.0)
DEFAULT_SHININESS = 32.0
DEFAULT_REFRACTION_INDEX = 1.5
DEFAULT_OPACITY = 1.0
DEFAULT_ILLUM = 2


class Material:
    """Параметры одного `newmtl` блока."""

    __slots__ = ("name", "ambient", "diffuse", "specular", "emissive",
                 "shininess", "refraction_index", "opacity", "illum")

    def __init__(
        self,
        name: str,
        ambient: tuple[float, float, float] = DEFAULT_AMBIENT,
        diffuse: tuple[float, float, float] = DEFAULT_DIFFUSE,
        specular: tuple[float, float, float] = DEFAULT_SPECULAR,
        emissive: tuple[float, float, float] = DEFAULT_EMISSIVE,
        shininess: float = DEFAULT_SHININESS,
        refraction_index: float = DEFAULT_REFRACTION_INDEX,
        opacity: float = DEFAULT_OPACITY,
        illum: int = DEFAULT_ILLUM,
    ) -> None:
        self.name = name
        self.ambient = tuple(ambient)
        self.diffuse = tuple(diffuse)
        self.specular = tuple(specular)
        self.emissive = tuple(emissive)
        self.shininess = float(shininess)
        self.refraction_index = float(refraction_index)
        self.opacity = float(opacity)
        self.illum = int(illum)

    def uniforms(self) -> dict[str, np.ndarray | float]:
        """Значения для шейдера: имя uniform‑а -> значение."""
        return {
            "uKa": np.array(self.ambient, dtype=np.float32),
            "uKd": np.array(self.diffuse, dtype=np.float32),
            "uKs": np.array(self.specular, dtype=np.float32),
            "uKe": np.array(self.emissive, dtype=np.float32),
            "uNs": self.shininess,
            "uOpacity": self.opacity,
        }

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return all(getattr(self, s) == getattr(other, s) for s in self.__slots__)

    def __repr__(self):
        return (f"Material({self.name!r}, Kd={self.diffuse}, "
                f"Ns={self.shininess}, d={self.opacity})")


DEFAULT_MATERIAL = Material("__default__")
