# -*- coding: utf-8 -*-
"""
Загрузка модели с диска: OBJ и MTL читаются параллельно (TaskPool),
затем разбираются в одном потоке.

Ошибки чтения (OSError) пробрасываются как есть; частичный меш
не возвращается.
"""

from __future__ import annotations

from pathlib import Path

from meshview.multithread.task_pool import TaskPool
from meshview.parsing.mtl import parse_mtl
from meshview.parsing.obj import build_mesh
from meshview.scene.mesh import RenderableMesh
from meshview.utils.logger import logger
from meshview.utils.profiler import Profiler


def read_text(path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def find_material_library(obj_path, libraries) -> Path | None:
    """Первый `mtllib` меша, если такой файл лежит рядом с моделью."""
    if not libraries:
        return None
    candidate = Path(obj_path).parent / libraries[0]
    if candidate.is_file():
        return candidate
    logger.warning(f"[Loader] mtllib '{libraries[0]}' not found next to {obj_path}")
    return None


def load_model(obj_path, mtl_path=None) -> RenderableMesh:
    """Прочитать OBJ (+ MTL) и построить RenderableMesh."""
    with TaskPool(max_workers=2) as pool:
        obj_future = pool.submit(read_text, obj_path)
        mtl_future = pool.submit(read_text, mtl_path) if mtl_path is not None else None
        obj_text = obj_future.result()
        mtl_text = mtl_future.result() if mtl_future is not None else None

    with Profiler(f"parse {Path(obj_path).name}") as prof:
        materials = parse_mtl(mtl_text) if mtl_text is not None else None
        mesh = build_mesh(obj_text, materials)

        # библиотека из `mtllib` известна только после разбора OBJ
        if materials is None:
            library = find_material_library(obj_path, mesh.material_libraries)
            if library is not None:
                materials = parse_mtl(read_text(library))
                for name in mesh.groups:
                    if name not in materials:
                        logger.warning(f"[Loader] material '{name}' not found "
                                       f"in {library.name}, using default")
                mesh = mesh.with_materials(materials)

    logger.info(f"[Loader] Loaded {obj_path} in {prof.elapsed_ms:.1f} ms: {mesh!r}")
    return mesh
