"""
Окно + GLFW‑контекст OpenGL 3.3 core.
"""

import glfw
from meshview.core.input import InputManager

class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 1280, height: int = 720, title: str = "meshview",
                 v_sync: bool = True):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = glfw.get_framebuffer_size(self.handle)
        self.title = title
        self.input = InputManager(self.handle)
        self._resize_listeners = []

        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)
        self.set_vsync(v_sync)

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h
        for listener in self._resize_listeners:
            listener(w, h)

    def on_resize(self, listener):
        self._resize_listeners.append(listener)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        glfw.destroy_window(self.handle)
        glfw.terminate()
