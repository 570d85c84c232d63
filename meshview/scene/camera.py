"""
Орбитальная камера вокруг начала координат.

Состояние – неизменяемое значение `CameraState`; каждый кадр
`update_camera` получает старое состояние и снимок ввода и возвращает
новое.
"""

from typing import NamedTuple, Optional, Tuple

import numpy as np

from meshview.math.mat4 import Mat4
from meshview.math.vec3 import Vec3

PITCH_LIMIT = 89.0


class CameraState(NamedTuple):
    yaw: float = 0.0          # градусы, вокруг +Y
    pitch: float = 0.0        # градусы, от плоскости XZ
    distance: float = 4.0
    dragging: bool = False
    last_cursor: Optional[Tuple[float, float]] = None


class CameraInput(NamedTuple):
    """Снимок ввода за кадр."""
    cursor: Tuple[float, float] = (0.0, 0.0)
    button_down: bool = False
    scroll: float = 0.0


class CameraSettings(NamedTuple):
    rotate_speed: float = 0.4
    zoom_speed: float = 0.5
    min_distance: float = 1.5
    max_distance: float = 20.0

    @classmethod
    def from_config(cls, camera_cfg: dict) -> "CameraSettings":
        return cls(**{k: camera_cfg[k] for k in cls._fields if k in camera_cfg})


def update_camera(state: CameraState, inp: CameraInput,
                  settings: CameraSettings = CameraSettings()) -> CameraState:
    """Перетаскивание при зажатой кнопке вращает, колесо приближает."""
    yaw, pitch = state.yaw, state.pitch

    if inp.button_down and state.dragging and state.last_cursor is not None:
        dx = inp.cursor[0] - state.last_cursor[0]
        dy = inp.cursor[1] - state.last_cursor[1]
        yaw = (yaw - dx * settings.rotate_speed) % 360.0
        pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch + dy * settings.rotate_speed))

    distance = state.distance - inp.scroll * settings.zoom_speed
    distance = max(settings.min_distance, min(settings.max_distance, distance))

    return CameraState(
        yaw=yaw,
        pitch=pitch,
        distance=distance,
        dragging=inp.button_down,
        last_cursor=tuple(inp.cursor) if inp.button_down else None,
    )


def eye_position(state: CameraState) -> np.ndarray:
    return Vec3.from_spherical(state.yaw, state.pitch, state.distance).as_np()


def view_matrix(state: CameraState) -> Mat4:
    eye = eye_position(state)
    target = np.zeros(3, dtype=np.float32)
    up = np.array([0.0, 1.0, 0.0], dtype=np.float32)
    return Mat4.look_at(eye, target, up)


def projection_matrix(fov: float, aspect: float, near: float, far: float) -> Mat4:
    return Mat4.perspective(fov, aspect, near, far)
