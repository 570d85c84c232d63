"""
Экспорт рендер‑компонентов.
"""

from meshview.renderer.base_renderer import BaseRenderer
from meshview.renderer.shader import Shader
from meshview.renderer.mesh_renderer import MeshRenderer

__all__ = ["BaseRenderer", "Shader", "MeshRenderer"]
