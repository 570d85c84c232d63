# -*- coding: utf-8 -*-
"""
Построчный токенизатор для OBJ/MTL.

Каждая непустая строка превращается в `Line(keyword, args, lineno)`.
Комментарии (`# ...`, в том числе в хвосте строки) и пустые строки
пропускаются; неизвестные
ключевые слова отдаются как есть – решать, что игнорировать, будут
потребители.
"""
from typing import Iterator, NamedTuple, Tuple

OBJ_DIRECTIVES = frozenset({"v", "vn", "vt", "f", "usemtl", "mtllib", "o", "g", "s"})
MTL_DIRECTIVES = frozenset({"newmtl", "Ka", "Kd", "Ks", "Ke", "Ns", "Ni", "d", "illum"})


class Line(NamedTuple):
    keyword: str
    args: Tuple[str, ...]
    lineno: int


def tokenize(text: str) -> Iterator[Line]:
    """Разбить текст на классифицированные строки (lineno – с единицы)."""
    for lineno, raw in enumerate(text.splitlines(), start=1):
        parts = raw.split()
        # хвостовой комментарий: всё от первого токена с `#`
        for i, tok in enumerate(parts):
            if tok.startswith("#"):
                del parts[i:]
                break
        if not parts:
            continue
        yield Line(parts[0], tuple(parts[1:]), lineno)


def parse_floats(line: Line, count: int) -> list[float]:
    """
    Первые `count` аргументов строки как float.

    ValueError, если аргументов меньше или один из них не число.
    """
    if len(line.args) < count:
        raise ValueError(
            f"'{line.keyword}' expects {count} numeric fields, got {len(line.args)}"
        )
    return [float(tok) for tok in line.args[:count]]
