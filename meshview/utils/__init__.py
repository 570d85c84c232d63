# meshview/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger     – готовый объект logging.Logger (с level INFO)
    * Config     – JSON‑конфигурация просмотрщика
    * Profiler   – замер времени блока кода
    * load_model – загрузка OBJ/MTL с диска
"""

from .logger import logger
from .config import Config
from .profiler import Profiler
from .loader import load_model

__all__ = ["logger", "Config", "Profiler", "load_model"]
