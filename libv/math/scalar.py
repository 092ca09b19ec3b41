# libv/math/scalar.py
"""
Общие правила для типа элемента T (value_type).

Здесь только функции (и маркер ``VectorLike``), которыми пользуются и ``Vec[T, N]``,
и ``Vec3[T]``. Сами векторные типы друг от друга не зависят.
"""

import abc
import numbers
import operator

import numpy as np

# Python‑типы, которые numpy хранит «нативно».
_NATIVE = (bool, int, float, complex)

# Маркер «это не скаляр» (None сам может быть элементом object‑массива).
NOT_SCALAR = object()


class VectorLike(abc.ABC):
    """Маркер векторных типов libv: вектор никогда не бывает скаляром."""


def resolve_dtype(value_type) -> np.dtype:
    """dtype хранилища для T. Всё, чего numpy не знает, – object."""
    if value_type in _NATIVE:
        return np.dtype(value_type)
    if isinstance(value_type, type) and issubclass(value_type, np.generic):
        return np.dtype(value_type)
    return np.dtype(object)


def type_name(value_type) -> str:
    return getattr(value_type, "__name__", repr(value_type))


def is_integral(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer)


def is_object(dtype: np.dtype) -> bool:
    return dtype == np.dtype(object)


def make_storage(value_type, dtype: np.dtype, size: int, values) -> np.ndarray:
    """
    Создать хранилище длины ``size``.

    Пустой ``values`` – каждый элемент равен ``T()`` (value_type{}).
    Элементы кладутся по одному, чтобы object‑элементы‑последовательности
    не превратились в многомерный массив.
    """
    p = np.empty(size, dtype=dtype)
    if values:
        for i, value in enumerate(values):
            p[i] = value
    else:
        for i in range(size):
            p[i] = value_type()
    return p


def to_value(value_type, dtype: np.dtype, raw):
    """numpy‑скаляр → T (для object‑хранилища объект уже нужного типа)."""
    if is_object(dtype):
        return raw
    return value_type(raw)


def coerce_scalar(dtype: np.dtype, value):
    """
    Привести правый операнд ``v *= s`` / ``v /= s`` к T.

    Возвращает ``NOT_SCALAR``, если значение скаляром не является –
    тогда оператор отдаёт ``NotImplemented``.
    """
    if isinstance(value, (VectorLike, np.ndarray)):
        return NOT_SCALAR
    if is_object(dtype):
        return value
    if isinstance(value, numbers.Number):
        return dtype.type(value)
    return NOT_SCALAR


def divide_op(dtype: np.dtype):
    """Деление «по правилам T»: для целых – целочисленное."""
    return operator.floordiv if is_integral(dtype) else operator.truediv


def divide_ufunc(dtype: np.dtype):
    return np.floor_divide if is_integral(dtype) else np.true_divide


def lexicographical_less(lhs, rhs) -> bool:
    """Лексикографическое «меньше», элемент 0 – самый старший."""
    for a, b in zip(lhs, rhs):
        if a < b:
            return True
        if b < a:
            return False
    return False
