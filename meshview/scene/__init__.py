"""
Пакет scene – готовый меш и орбитальная камера.
"""

from meshview.scene.mesh import MaterialGroup, RenderableMesh
from meshview.scene.camera import (
    CameraInput, CameraSettings, CameraState, update_camera, view_matrix,
)

__all__ = ["MaterialGroup", "RenderableMesh", "CameraInput", "CameraSettings",
           "CameraState", "update_camera", "view_matrix"]
