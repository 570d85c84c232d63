"""
meshview – просмотрщик моделей Wavefront OBJ/MTL.

Ядро (разбор, пересчёт нормалей, нормализация, группы материалов)
не зависит от графического контекста; окно и OpenGL подключаются
только в `meshview.viewer`.
"""

from meshview.utils import logger, Config, load_model
from meshview.errors import MeshViewError, ParseError, DegenerateMeshError, ShaderError
from meshview.assets.material import Material
from meshview.parsing import MaterialLibraryParser, MeshBuilder, build_mesh, parse_mtl
from meshview.scene import (
    MaterialGroup, RenderableMesh, CameraInput, CameraSettings, CameraState,
    update_camera,
)
from meshview.math import Vec3, Mat4

__version__ = "1.0.0"

__all__ = [
    "Config",
    "load_model",
    "MeshViewError",
    "ParseError",
    "DegenerateMeshError",
    "ShaderError",
    "Material",
    "MaterialLibraryParser",
    "MeshBuilder",
    "build_mesh",
    "parse_mtl",
    "MaterialGroup",
    "RenderableMesh",
    "CameraInput",
    "CameraSettings",
    "CameraState",
    "update_camera",
    "Vec3",
    "Mat4",
]
