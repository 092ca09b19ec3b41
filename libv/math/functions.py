# libv/math/functions.py
"""
Свободные функции над векторами.

Работают с любым из двух типов (``Vec[T, N]`` и ``Vec3[T]``) и не меняют
аргументы – это «значимые» пары к методам, меняющим объект на месте.
"""

import math

from libv.errors import DimensionError
from libv.math.vec import Vec
from libv.math.vec3 import Vec3
from libv.utils.config import Config


def normalize(v):
    """Нормализованная копия ``v``."""
    return v.copy().normalize()


def dot(a, b):
    return a.dot(b)


def cross(a, b):
    """Векторное произведение; у ``Vec[T, N]`` с N != 3 метода нет вовсе."""
    return a.cross(b)


def allclose(a, b, rel_tol: float = None, abs_tol: float = None) -> bool:
    """
    Поэлементное приближённое равенство (``math.isclose``).

    Допуски по умолчанию – ``tolerance`` из конфигурации.
    """
    if type(a) is not type(b):
        raise DimensionError(f"allclose: {type(a).__name__} and {type(b).__name__}")
    cfg_rel, cfg_abs = Config().tolerance()
    rel = cfg_rel if rel_tol is None else rel_tol
    tol = cfg_abs if abs_tol is None else abs_tol
    return all(math.isclose(x, y, rel_tol=rel, abs_tol=tol) for x, y in zip(a, b))


# -----------------------------------------------------------------
# явное преобразование между параллельными типами
# -----------------------------------------------------------------
def to_vec(v: Vec3) -> Vec:
    """Vec3[T] → Vec[T, 3]."""
    if not isinstance(v, Vec3):
        raise DimensionError(f"to_vec expects Vec3, got {type(v).__name__}")
    return Vec[v.value_type, 3](*v)


def to_vec3(v: Vec) -> Vec3:
    """Vec[T, 3] → Vec3[T]."""
    if not isinstance(v, Vec) or v.size != 3:
        raise DimensionError(f"to_vec3 expects Vec[T, 3], got {type(v).__name__}")
    return Vec3[v.value_type](*v)
