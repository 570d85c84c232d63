# meshview/viewer.py
# -*- coding: utf-8 -*-
"""
Главный цикл просмотрщика.

* Загружает модель (OBJ + MTL) до открытия окна – ошибка разбора
  прерывает запуск целиком.
* Каждый кадр: ввод -> новое CameraState -> отрисовка.
"""
from meshview.graphics import select_backend
from meshview.renderer.mesh_renderer import MeshRenderer
from meshview.scene.camera import CameraSettings, CameraState, update_camera
from meshview.utils import Config, load_model, logger
from meshview.window import Window


class Viewer:
    """Окно с одной моделью и орбитальной камерой."""

    def __init__(self, obj_path, mtl_path=None, config_path: str = "meshview.json"):
        self.cfg = Config(config_path)
        self.mesh = load_model(obj_path, mtl_path)

        win_cfg = self.cfg["window"]
        self.window = Window(win_cfg["width"], win_cfg["height"], win_cfg["title"],
                             v_sync=self.cfg["v_sync"])
        self.backend = select_backend("gl")
        self.renderer = MeshRenderer(self.backend, self.cfg,
                                     self.window.width, self.window.height)
        self.renderer.upload(self.mesh)
        self.window.on_resize(self.renderer.resize)

        cam_cfg = self.cfg["camera"]
        self.camera_settings = CameraSettings.from_config(cam_cfg)
        self.camera = CameraState(distance=cam_cfg["distance"])

    def run(self):
        logger.info("[Viewer] Entering main loop.")
        try:
            while not self.window.should_close():
                self.window.poll_events()
                self.camera = update_camera(self.camera,
                                            self.window.input.snapshot(),
                                            self.camera_settings)
                self.renderer.render(self.camera)
                self.window.swap_buffers()
        finally:
            self.renderer.cleanup()
            self.window.destroy()
            logger.info("[Viewer] Shut down.")
