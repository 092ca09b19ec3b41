# libv/utils/logger.py
# ---------------------------------------------------------------
# Логгер библиотеки. Сама библиотека ничего не настраивает –
# вызов init_logger() остаётся за приложением.
# ---------------------------------------------------------------

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("libv")
logger.addHandler(logging.NullHandler())


def init_logger(level=None):
    """
    Включить вывод логов libv.

    Если ``level`` не задан – берётся ``log_level`` из конфигурации.
    """
    if level is None:
        from libv.utils.config import Config
        level = Config()["log_level"]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)
    return logger
