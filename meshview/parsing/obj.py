# -*- coding: utf-8 -*-
"""
Построение RenderableMesh из текста Wavefront OBJ.

Поддерживается подмножество формата: `v`, `f` (индексы с единицы,
формы `i`, `i/t`, `i//n`, `i/t/n`), `usemtl`, `mtllib`.
Нормали из `vn` не используются – они всегда пересчитываются
накоплением нормалей граней (метод Ньюэлла).

После разбора меш центрируется и масштабируется так, что наибольший
габарит равен 2 (куб [-1, 1]).
"""

from __future__ import annotations

import numpy as np

from meshview.assets.material import Material
from meshview.errors import DegenerateMeshError, ParseError
from meshview.parsing.tokenizer import OBJ_DIRECTIVES, Line, parse_floats, tokenize
from meshview.scene.mesh import MaterialGroup, RenderableMesh
from meshview.utils.logger import logger

FALLBACK_NORMAL = (0.0, 0.0, 1.0)
_INITIAL_CAPACITY = 64


def newell_normal(points: np.ndarray) -> np.ndarray:
    """
    Нормаль многоугольника (k, 3) методом Ньюэлла.

    Возвращает единичный вектор или нулевой, если площадь нулевая.
    Обход против часовой стрелки (смотрим с +Z) даёт +Z.
    Точки переносятся в центроид и приводятся к масштабу ~1,
    иначе произведения переполняют float64 на больших координатах.
    """
    points = points - points.mean(axis=0)
    span = np.abs(points).max()
    if span > 0.0:
        points = points / span
    nxt = np.roll(points, -1, axis=0)
    normal = np.array([
        np.sum((points[:, 1] - nxt[:, 1]) * (points[:, 2] + nxt[:, 2])),
        np.sum((points[:, 2] - nxt[:, 2]) * (points[:, 0] + nxt[:, 0])),
        np.sum((points[:, 0] - nxt[:, 0]) * (points[:, 1] + nxt[:, 1])),
    ], dtype=np.float64)
    length = np.linalg.norm(normal)
    if length > 0.0:
        normal /= length
    return normal


def fan_triangulate(face: list[int]) -> list[int]:
    """Веер из вершины 0: k‑угольник -> k-2 треугольника (плоский список)."""
    out = []
    for i in range(1, len(face) - 1):
        out.extend((face[0], face[i], face[i + 1]))
    return out


class MeshBuilder:
    """
    Однопроходный разбор OBJ.

    Позиции и накопители нормалей хранятся в плотных массивах,
    растущих удвоением; индекс вершины – прямой индекс строки.
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self._positions = np.zeros((_INITIAL_CAPACITY, 3), dtype=np.float64)
        self._accum = np.zeros((_INITIAL_CAPACITY, 3), dtype=np.float64)
        self._referenced = np.zeros(_INITIAL_CAPACITY, dtype=bool)
        self._count = 0

        # треугольники до первого usemtl и по группам (порядок объявления)
        self._ungrouped: list[int] = []
        self._buckets: dict[str, list[int]] = {}
        self._current: str | None = None
        self._libraries: list[str] = []

    # -----------------------------------------------------------------
    # Публичный API
    # -----------------------------------------------------------------
    def build(self, obj_text: str,
              materials: dict[str, Material] | None = None) -> RenderableMesh:
        self._reset()
        self._materials = materials

        for line in tokenize(obj_text):
            if line.keyword not in OBJ_DIRECTIVES:
                logger.debug(f"[ObjParser] line {line.lineno}: unknown directive "
                             f"'{line.keyword}', skipped")
                continue
            if line.keyword == "v":
                self._add_position(line)
            elif line.keyword == "f":
                self._add_face(line)
            elif line.keyword == "usemtl":
                self._use_material(line)
            elif line.keyword == "mtllib":
                self._libraries.extend(line.args)
            # vn, vt, o, g, s – игнорируем

        positions = self._positions[:self._count].copy()
        normals = self._finalize_normals()
        indices, groups = self._collect_indices()
        _normalize_positions(positions)

        mesh = RenderableMesh(positions, normals, indices, groups,
                              material_libraries=tuple(self._libraries))
        logger.info(f"[ObjParser] Built mesh: {mesh.vertex_count} vertices, "
                    f"{mesh.index_count // 3} triangles, {len(groups)} group(s).")
        return mesh

    # -----------------------------------------------------------------
    # Директивы
    # -----------------------------------------------------------------
    def _add_position(self, line: Line) -> None:
        try:
            xyz = parse_floats(line, 3)
        except ValueError as exc:
            raise ParseError(str(exc), line.lineno) from exc
        if not np.all(np.isfinite(xyz)):
            raise ParseError(f"non-finite vertex position {line.args[:3]}", line.lineno)

        if self._count == len(self._positions):
            self._grow()
        self._positions[self._count] = xyz
        self._count += 1

    def _add_face(self, line: Line) -> None:
        face = []
        for token in line.args:
            head = token.split("/", 1)[0]
            try:
                index = int(head) - 1
            except ValueError:
                raise ParseError(f"bad face index {token!r}", line.lineno) from None
            if index < 0 or index >= self._count:
                raise ParseError(
                    f"face index {index + 1} out of range (1..{self._count})",
                    line.lineno,
                )
            face.append(index)

        if len(face) < 3:
            raise ParseError(f"face needs at least 3 vertices, got {len(face)}", line.lineno)

        idx = np.asarray(face, dtype=np.intp)
        normal = newell_normal(self._positions[idx])
        # add.at – вершина может повторяться в одной грани
        np.add.at(self._accum, idx, normal)
        self._referenced[idx] = True

        if self._current is None:
            bucket = self._ungrouped
        else:
            bucket = self._buckets[self._current]
        bucket.extend(fan_triangulate(face))

    def _use_material(self, line: Line) -> None:
        if not line.args:
            raise ParseError("usemtl without a material name", line.lineno)
        name = " ".join(line.args)
        if name not in self._buckets:
            self._buckets[name] = []
            if self._materials is not None and name not in self._materials:
                logger.warning(f"[ObjParser] line {line.lineno}: material '{name}' "
                               f"not found in library, using default")
        self._current = name

    # -----------------------------------------------------------------
    # Финализация
    # -----------------------------------------------------------------
    def _grow(self) -> None:
        capacity = len(self._positions) * 2
        for attr in ("_positions", "_accum", "_referenced"):
            old = getattr(self, attr)
            new = np.zeros((capacity,) + old.shape[1:], dtype=old.dtype)
            new[:len(old)] = old
            setattr(self, attr, new)

    def _finalize_normals(self) -> np.ndarray:
        n = self._count
        normals = np.tile(np.asarray(FALLBACK_NORMAL, dtype=np.float64), (n, 1))
        referenced = self._referenced[:n]
        acc = self._accum[:n][referenced]
        lengths = np.linalg.norm(acc, axis=1, keepdims=True)
        # нулевые суммы оставляем как есть
        normals[referenced] = acc / np.where(lengths > 0.0, lengths, 1.0)
        return normals

    def _collect_indices(self) -> tuple[np.ndarray, dict[str, MaterialGroup]]:
        indices = list(self._ungrouped)
        groups = {}
        for name, bucket in self._buckets.items():
            material = self._materials.get(name) if self._materials else None
            groups[name] = MaterialGroup(name, len(indices), len(bucket), material)
            indices.extend(bucket)
        return np.asarray(indices, dtype=np.uint32), groups


def _normalize_positions(positions: np.ndarray) -> None:
    """(p - center) * 2 / max_extent, на месте."""
    if len(positions) == 0:
        raise DegenerateMeshError("mesh has no vertices")
    lo = positions.min(axis=0)
    hi = positions.max(axis=0)
    with np.errstate(over="ignore", divide="ignore"):
        extent = float(np.max(hi - lo))
        scale = 2.0 / extent if extent != 0.0 else np.inf
    if extent == 0.0:
        raise DegenerateMeshError("mesh has zero extent, cannot normalize")
    if not np.isfinite(extent) or not np.isfinite(scale) or scale == 0.0:
        raise DegenerateMeshError(f"mesh extent {extent!r} gives unusable scale {scale!r}")
    center = lo / 2.0 + hi / 2.0
    positions -= center
    positions *= scale


def build_mesh(obj_text: str,
               materials: dict[str, Material] | None = None) -> RenderableMesh:
    """Короткий вызов `MeshBuilder().build`."""
    return MeshBuilder().build(obj_text, materials)
