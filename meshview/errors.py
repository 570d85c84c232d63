# -*- coding: utf-8 -*-
"""
Иерархия исключений meshview.

Все ошибки загрузки фатальны: частичный меш вызывающему коду
не возвращается.
"""
from __future__ import annotations


class MeshViewError(Exception):
    """Базовое исключение пакета."""


class ParseError(MeshViewError, ValueError):
    """Некорректная директива OBJ (мало полей, индекс вне диапазона...)."""

    def __init__(self, message: str, lineno: int | None = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class DegenerateMeshError(ParseError):
    """Пустой меш или нулевой габарит – масштаб не определён."""


class ShaderError(MeshViewError, RuntimeError):
    """Ошибка компиляции/линковки GLSL‑программы."""
