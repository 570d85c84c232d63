"""
Математический суб‑пакет: Vec3, Mat4.
"""

from meshview.math.vec3 import Vec3
from meshview.math.mat4 import Mat4

__all__ = ["Vec3", "Mat4"]
