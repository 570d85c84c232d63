"""
Простой загрузчик/сохранитель конфигурации просмотрщика в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from meshview.utils.logger import logger

DEFAULT_CONFIG = {
    "window": {"width": 1280, "height": 720, "title": "meshview"},
    "camera": {
        "fov": 45.0,
        "near": 0.1,
        "far": 100.0,
        "distance": 4.0,
        "min_distance": 1.5,
        "max_distance": 20.0,
        "rotate_speed": 0.4,
        "zoom_speed": 0.5,
    },
    "light": {"direction": [0.0, 0.0, -1.0], "color": [1.0, 1.0, 1.0]},
    "clear_color": [1.0, 1.0, 1.0, 1.0],
    "v_sync": True,
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "meshview.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration from %s.", self.path)
            except (OSError, json.JSONDecodeError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        value = self.data.get(key, DEFAULT_CONFIG.get(key))
        default = DEFAULT_CONFIG.get(key)
        # недостающие ключи секции берём из умолчаний
        if isinstance(value, dict) and isinstance(default, dict):
            return {**default, **value}
        return value

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
