"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файла нет – используются настройки по‑умолчанию (файл не создаётся).
"""

import copy
import json
import os
from pathlib import Path

from libv.utils.logger import logger

CONFIG_ENV = "LIBV_CONFIG"

DEFAULT_CONFIG = {
    "log_level": "WARNING",
    "tolerance": {"rel": 1e-09, "abs": 1e-12},
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            if path is None:
                path = os.environ.get(CONFIG_ENV, "libv.json")
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if not self.path.is_file():
            logger.debug(f"[Config] {self.path} not found – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] {self.path}: top level must be an object.")
            return
        for key, value in loaded.items():
            # вложенные секции сливаются по ключам, а не заменяются целиком
            if isinstance(value, dict) and isinstance(self.data.get(key), dict):
                self.data[key].update(value)
            else:
                self.data[key] = value
        logger.info(f"[Config] Loaded configuration from {self.path}.")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")
            raise

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)

    def tolerance(self):
        """(rel, abs) для приближённых сравнений."""
        default = DEFAULT_CONFIG["tolerance"]
        tol = self["tolerance"]
        return (float(tol.get("rel", default["rel"])),
                float(tol.get("abs", default["abs"])))
