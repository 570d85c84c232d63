# -*- coding: utf-8 -*-
"""
Парсер библиотек материалов (MTL).

Никогда не падает: строки свойств до первого `newmtl`, а также строки
с недостающими или нечисловыми полями пропускаются с DEBUG‑сообщением.
"""

from meshview.assets.material import Material
from meshview.parsing.tokenizer import MTL_DIRECTIVES, parse_floats, tokenize
from meshview.utils.logger import logger

# ключевое слово -> атрибут Material
_COLOR_FIELDS = {
    "Ka": "ambient",
    "Kd": "diffuse",
    "Ks": "specular",
    "Ke": "emissive",
}
_SCALAR_FIELDS = {
    "Ns": "shininess",
    "Ni": "refraction_index",
    "d": "opacity",
}


class MaterialLibraryParser:
    """MTL‑текст -> упорядоченный словарь {имя: Material}."""

    def parse(self, mtl_text: str) -> dict[str, Material]:
        materials: dict[str, Material] = {}
        current = None

        for line in tokenize(mtl_text):
            if line.keyword == "newmtl":
                if not line.args:
                    logger.debug(f"[MtlParser] line {line.lineno}: newmtl without a name")
                    current = None
                    continue
                name = " ".join(line.args)
                current = Material(name)
                materials[name] = current
                continue

            if line.keyword not in MTL_DIRECTIVES:
                continue

            if current is None:
                logger.debug(f"[MtlParser] line {line.lineno}: '{line.keyword}' before newmtl, skipped")
                continue

            try:
                if line.keyword in _COLOR_FIELDS:
                    setattr(current, _COLOR_FIELDS[line.keyword], tuple(parse_floats(line, 3)))
                elif line.keyword in _SCALAR_FIELDS:
                    setattr(current, _SCALAR_FIELDS[line.keyword], parse_floats(line, 1)[0])
                else:
                    current.illum = int(parse_floats(line, 1)[0])
            except (ValueError, OverflowError) as exc:
                logger.debug(f"[MtlParser] line {line.lineno}: {exc}, skipped")

        logger.info(f"[MtlParser] Parsed {len(materials)} material(s).")
        return materials


def parse_mtl(mtl_text: str) -> dict[str, Material]:
    """Короткий вызов `MaterialLibraryParser().parse`."""
    return MaterialLibraryParser().parse(mtl_text)
