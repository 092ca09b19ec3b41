# libv/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – объект logging.Logger библиотеки
    * init_logger – включение вывода логов для приложения
    * Config      – JSON‑конфигурация
"""

from .logger import logger, init_logger
from .config import Config

__all__ = ["logger", "init_logger", "Config"]
