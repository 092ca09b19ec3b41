"""
Математический суб‑пакет: Vec (N‑мерный), Vec3 и свободные функции.
"""

from libv.math.vec import Vec
from libv.math.vec3 import Vec3
from libv.math.functions import allclose, cross, dot, normalize, to_vec, to_vec3

__all__ = ["Vec", "Vec3", "allclose", "cross", "dot", "normalize", "to_vec", "to_vec3"]
