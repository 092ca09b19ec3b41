# libv/errors.py
"""
Исключения libv.

Единственная «восстанавливаемая» ошибка времени выполнения –
``OutOfRangeError`` из ``Vec3.at()``. Всё остальное – ошибки
использования типов (аналог ошибок компиляции).
"""


class LibvError(Exception):
    """Базовый класс всех ошибок библиотеки."""


class OutOfRangeError(LibvError, IndexError):
    """Проверяемый доступ за пределами вектора. Текст – имя операции."""

    def __init__(self, where: str, index=None):
        super().__init__(where)
        self.where = where
        self.index = index


class DimensionError(LibvError, TypeError):
    """Неверная параметризация / несовпадение размерностей."""
