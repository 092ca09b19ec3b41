"""
libv – векторы фиксированной размерности для Python.

    * Vec[T, N] – N‑мерный вектор
    * Vec3[T]   – трёхмерный вектор с осями x / y / z
"""

from libv.utils import logger, init_logger, Config
from libv.errors import LibvError, OutOfRangeError, DimensionError
from libv.math import (
    Vec, Vec3, allclose, cross, dot, normalize, to_vec, to_vec3,
)

__version__ = "1.0.0"

__all__ = [
    "Vec",
    "Vec3",
    "allclose",
    "cross",
    "dot",
    "normalize",
    "to_vec",
    "to_vec3",
    "LibvError",
    "OutOfRangeError",
    "DimensionError",
    "Config",
    "logger",
    "init_logger",
]
