"""
Скрывает GLFW‑callback‑механику: на каждый кадр отдаёт `CameraInput`.
"""

import glfw

from meshview.scene.camera import CameraInput

class InputManager:
    """Скрывает GLFW‑callback‑механику."""
    def __init__(self, window):
        self.window = window
        self.cursor = (0.0, 0.0)
        self.button_down = False
        self.scroll = 0.0
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_cursor_pos_callback(self.window, self._mouse_move_cb)
        glfw.set_mouse_button_callback(self.window, self._mouse_button_cb)
        glfw.set_scroll_callback(self.window, self._mouse_scroll_cb)
        glfw.set_key_callback(self.window, self._key_cb)

    def _mouse_move_cb(self, win, xpos, ypos):
        self.cursor = (xpos, ypos)

    def _mouse_button_cb(self, win, button, action, mods):
        if button == glfw.MOUSE_BUTTON_LEFT:
            self.button_down = action == glfw.PRESS

    def _mouse_scroll_cb(self, win, xoff, yoff):
        self.scroll += yoff

    def _key_cb(self, win, key, scancode, action, mods):
        if key == glfw.KEY_ESCAPE and action == glfw.PRESS:
            glfw.set_window_should_close(win, True)

    def snapshot(self) -> CameraInput:
        """Текущий ввод; накопленная прокрутка сбрасывается."""
        inp = CameraInput(self.cursor, self.button_down, self.scroll)
        self.scroll = 0.0
        return inp
