"""
Парсеры Wavefront OBJ/MTL.
"""

from meshview.parsing.tokenizer import Line, tokenize
from meshview.parsing.mtl import MaterialLibraryParser, parse_mtl
from meshview.parsing.obj import MeshBuilder, build_mesh

__all__ = ["Line", "tokenize", "MaterialLibraryParser", "parse_mtl",
           "MeshBuilder", "build_mesh"]
