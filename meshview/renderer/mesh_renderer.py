# ------------------------------------------------------------
# Forward‑рендер одного RenderableMesh: один draw_indexed на
# группу материалов, общий шейдер Блинна‑Фонга.
# ------------------------------------------------------------

import numpy as np

from meshview.assets.material import DEFAULT_MATERIAL
from meshview.graphics.backend import GraphicsBackend
from meshview.math.mat4 import Mat4
from meshview.renderer.base_renderer import BaseRenderer
from meshview.renderer.shader import Shader
from meshview.scene.camera import CameraState, projection_matrix, view_matrix
from meshview.utils.logger import logger


class MeshRenderer(BaseRenderer):
    """
    Рисует загруженный меш.
    Буферы создаются один раз в `upload`; новая модель заменяет старую.
    """
    def __init__(self, backend: GraphicsBackend, config, width: int, height: int):
        self.backend = backend
        self.cfg = config
        self.width, self.height = width, height
        self.mesh = None
        self._buffers = []

        self.shader = Shader(backend)
        self.backend.enable_depth_test(True)
        # альфа из uOpacity (MTL `d`)
        self.backend.set_blending(True)
        self.backend.set_viewport(0, 0, width, height)

    def upload(self, mesh) -> None:
        self._release_buffers()
        self.mesh = mesh
        if mesh.index_count == 0:
            logger.warning("[Renderer] Mesh has no triangles, nothing to draw.")
            return

        position_buf = self.backend.create_buffer(mesh.positions, usage="vertex")
        normal_buf = self.backend.create_buffer(mesh.normals, usage="vertex")
        index_buf = self.backend.create_buffer(mesh.indices, usage="index")
        self._buffers = [position_buf, normal_buf, index_buf]

        self.backend.bind_attribute(position_buf, 0, 3)
        self.backend.bind_attribute(normal_buf, 1, 3)
        self.backend.bind_index_buffer(index_buf)
        logger.info(f"[Renderer] Uploaded {mesh!r}")

    def draw_calls(self):
        """[(material, start_index, index_count)] для текущего меша."""
        if self.mesh is None or self.mesh.index_count == 0:
            return []
        calls = []
        ungrouped = self.mesh.ungrouped_count
        if ungrouped:
            calls.append((DEFAULT_MATERIAL, 0, ungrouped))
        for group in self.mesh.groups.values():
            if group.index_count == 0:
                continue
            calls.append((group.material or DEFAULT_MATERIAL,
                          group.start_index, group.index_count))
        return calls

    def resize(self, w: int, h: int) -> None:
        self.width, self.height = w, h
        self.backend.set_viewport(0, 0, w, h)

    def render(self, camera_state: CameraState) -> None:
        self.backend.clear(self.cfg["clear_color"])
        calls = self.draw_calls()
        if not calls:
            return

        cam = self.cfg["camera"]
        light = self.cfg["light"]
        aspect = self.width / self.height if self.height else 1.0

        model_view = view_matrix(camera_state) @ Mat4.identity()
        proj = projection_matrix(cam["fov"], aspect, cam["near"], cam["far"])

        self.shader.use()
        self.shader.set_uniform_mat4("uModelView", model_view.to_gl())
        self.shader.set_uniform_mat4("uProj", proj.to_gl())
        self.shader.set_uniform_mat3("uNormalMatrix", model_view.normal_matrix().T)
        self.shader.set_uniform_vec3("uLightDirection", np.asarray(light["direction"], np.float32))
        self.shader.set_uniform_vec3("uLightColor", np.asarray(light["color"], np.float32))

        for material, start, count in calls:
            self.shader.set_uniforms(material.uniforms())
            self.backend.draw_indexed(count, start)

    def _release_buffers(self) -> None:
        for buf in self._buffers:
            self.backend.release_resource(buf)
        self._buffers = []

    def cleanup(self) -> None:
        self._release_buffers()
        self.shader.release()
