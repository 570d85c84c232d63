from meshview.graphics.backend import GraphicsBackend, select_backend

__all__ = ["GraphicsBackend", "select_backend"]
