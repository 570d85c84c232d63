from meshview.assets.material import Material, DEFAULT_MATERIAL

__all__ = ["Material", "DEFAULT_MATERIAL"]
