"""
Открыть OBJ‑модель в окне.

    python examples/view_model.py [model.obj] [model.mtl]

Без аргументов показывает куб из examples/assets.
"""
import sys
from pathlib import Path

from meshview.utils import logger
from meshview.viewer import Viewer

ASSETS = Path(__file__).parent / "assets"


if __name__ == "__main__":
    obj_path = sys.argv[1] if len(sys.argv) > 1 else ASSETS / "cube.obj"
    mtl_path = sys.argv[2] if len(sys.argv) > 2 else None

    logger.info(f"Opening {obj_path}...")
    Viewer(obj_path, mtl_path).run()
