# -*- coding: utf-8 -*-
"""
Трёхмерный вектор ``Vec3[T]`` на базе NumPy.

Те же операции, что и у ``Vec[T, 3]``, но без циклов – прямой доступ к
трём слотам. Плюс именованные оси (x, y, z) и проверяемый доступ ``at()``.
Просто ``Vec3`` – это ``Vec3[float]``.
"""

import copy as _copy
import operator
from typing import Iterator, Tuple

import numpy as np

from libv.errors import DimensionError, OutOfRangeError
from libv.math import scalar
from libv.utils.logger import logger

_UNSET = object()


class Vec3:
    __slots__ = ("_v",)

    value_type = float
    dtype = np.dtype(float)
    size = 3

    _classes = {}

    def __class_getitem__(cls, value_type):
        if cls is not Vec3:
            raise DimensionError(f"{cls.__name__} is already parameterised")
        if value_type is float:
            return Vec3
        klass = Vec3._classes.get(value_type)
        if klass is None:
            name = f"Vec3[{scalar.type_name(value_type)}]"
            klass = type(name, (Vec3,), {
                "__slots__": (),
                "__module__": __name__,
                "__qualname__": name,
                "value_type": value_type,
                "dtype": scalar.resolve_dtype(value_type),
            })
            Vec3._classes[value_type] = klass
            logger.debug(f"[Vec3] new class {name} (dtype={klass.dtype})")
        return klass

    def __init__(self, x=_UNSET, y=_UNSET, z=_UNSET):
        t = self.value_type
        self._v = scalar.make_storage(t, self.dtype, 3, (
            t() if x is _UNSET else x,
            t() if y is _UNSET else y,
            t() if z is _UNSET else z,
        ))

    def _wrap(self, raw):
        return scalar.to_value(self.value_type, self.dtype, raw)

    def _same(self, other) -> bool:
        return type(other) is type(self)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self):
        return self._wrap(self._v[0])

    @x.setter
    def x(self, value):
        self._v[0] = value

    @property
    def y(self):
        return self._wrap(self._v[1])

    @y.setter
    def y(self, value):
        self._v[1] = value

    @property
    def z(self):
        return self._wrap(self._v[2])

    @z.setter
    def z(self, value):
        self._v[2] = value

    # -------------------------------------------------
    # доступ по индексу
    # -------------------------------------------------
    def __getitem__(self, n: int):
        return self._wrap(self._v[n])

    def __setitem__(self, n: int, value):
        self._v[n] = value

    def _check(self, n) -> int:
        n = operator.index(n)
        # отрицательный индекс – тоже «за пределами» (size_type беззнаковый)
        if n < 0 or n >= 3:
            logger.debug(f"[Vec3] at({n}) out of range")
            raise OutOfRangeError("libv.Vec3.at", n)
        return n

    def at(self, n: int):
        """Доступ с проверкой границ; ``OutOfRangeError`` при n ∉ [0, 3)."""
        n = self._check(n)
        return self._wrap(self._v[n])

    def set_at(self, n: int, value) -> None:
        n = self._check(n)
        self._v[n] = value

    # -------------------------------------------------
    # значение / контейнер
    # -------------------------------------------------
    def copy(self) -> "Vec3":
        new = object.__new__(type(self))
        new._v = self._v.copy()
        return new

    __copy__ = copy

    def __deepcopy__(self, memo):
        new = object.__new__(type(self))
        new._v = _copy.deepcopy(self._v, memo)
        return new

    def swap(self, other: "Vec3") -> None:
        if not self._same(other):
            raise DimensionError(
                f"cannot swap {type(self).__name__} with {type(other).__name__}")
        self._v, other._v = other._v, self._v

    def fill(self, u) -> None:
        self._v[0] = u
        self._v[1] = u
        self._v[2] = u

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y
        yield self.z

    def __reversed__(self) -> Iterator:
        yield self.z
        yield self.y
        yield self.x

    # -------------------------------------------------
    # свёртки
    # -------------------------------------------------
    def sum(self):
        p = self._v
        return self._wrap(p[0] + p[1] + p[2])

    def prod(self):
        p = self._v
        return self._wrap(p[0] * p[1] * p[2])

    def mean(self):
        p = self._v
        return self._wrap(scalar.divide_op(self.dtype)(p[0] + p[1] + p[2], 3))

    def min(self):
        return self._wrap(min(self._v))

    def max(self):
        return self._wrap(max(self._v))

    def dot(self, o: "Vec3"):
        if not self._same(o):
            raise DimensionError(f"dot: {type(self).__name__} and {type(o).__name__}")
        p, q = self._v, o._v
        return self._wrap((p[0] * q[0]) + (p[1] * q[1]) + (p[2] * q[2]))

    def cross(self, o: "Vec3") -> "Vec3":
        if not self._same(o):
            raise DimensionError(f"cross: {type(self).__name__} and {type(o).__name__}")
        p, q = self._v, o._v
        return type(self)(
            (p[1] * q[2]) - (p[2] * q[1]),
            (p[2] * q[0]) - (p[0] * q[2]),
            (p[0] * q[1]) - (p[1] * q[0]),
        )

    def magnitude2(self):
        p = self._v
        return self._wrap((p[0] * p[0]) + (p[1] * p[1]) + (p[2] * p[2]))

    def magnitude(self):
        return self._wrap(np.sqrt(self.magnitude2()))

    def normalize(self) -> "Vec3":
        """Нормализовать на месте; нулевой вектор даёт nan/inf без проверки."""
        m = self.magnitude()
        if m == 0:
            logger.warning(f"[Vec3] normalize() of zero-magnitude {type(self).__name__}")
        with np.errstate(divide="ignore", invalid="ignore"):
            self /= m
        return self

    # -------------------------------------------------
    # составное присваивание (меняет self)
    # -------------------------------------------------
    def __iadd__(self, rhs: "Vec3") -> "Vec3":
        if not self._same(rhs):
            return NotImplemented
        p, q = self._v, rhs._v
        p[0] += q[0]
        p[1] += q[1]
        p[2] += q[2]
        return self

    def __isub__(self, rhs: "Vec3") -> "Vec3":
        if not self._same(rhs):
            return NotImplemented
        p, q = self._v, rhs._v
        p[0] -= q[0]
        p[1] -= q[1]
        p[2] -= q[2]
        return self

    def __imul__(self, rhs) -> "Vec3":
        p = self._v
        if self._same(rhs):
            q = rhs._v
            p[0] *= q[0]
            p[1] *= q[1]
            p[2] *= q[2]
            return self
        if isinstance(rhs, Vec3):
            return NotImplemented
        s = scalar.coerce_scalar(self.dtype, rhs)
        if s is scalar.NOT_SCALAR:
            return NotImplemented
        p[0] *= s
        p[1] *= s
        p[2] *= s
        return self

    def __itruediv__(self, rhs) -> "Vec3":
        p = self._v
        div = scalar.divide_op(self.dtype)
        if self._same(rhs):
            q = rhs._v
            p[0] = div(p[0], q[0])
            p[1] = div(p[1], q[1])
            p[2] = div(p[2], q[2])
            return self
        if isinstance(rhs, Vec3):
            return NotImplemented
        s = scalar.coerce_scalar(self.dtype, rhs)
        if s is scalar.NOT_SCALAR:
            return NotImplemented
        p[0] = div(p[0], s)
        p[1] = div(p[1], s)
        p[2] = div(p[2], s)
        return self

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, rhs):
        return self.copy().__iadd__(rhs)

    def __sub__(self, rhs):
        return self.copy().__isub__(rhs)

    def __mul__(self, rhs):
        return self.copy().__imul__(rhs)

    def __rmul__(self, lhs):
        if isinstance(lhs, Vec3):
            return NotImplemented
        return self.__mul__(lhs)

    def __truediv__(self, rhs):
        return self.copy().__itruediv__(rhs)

    # -------------------------------------------------
    # сравнение
    # -------------------------------------------------
    def __eq__(self, other):
        if not self._same(other):
            return NotImplemented
        p, q = self._v, other._v
        return bool(p[0] == q[0] and p[1] == q[1] and p[2] == q[2])

    def __ne__(self, other):
        if not self._same(other):
            return NotImplemented
        return not self == other

    def __lt__(self, other):
        if not self._same(other):
            return NotImplemented
        return scalar.lexicographical_less(self._v, other._v)

    def __gt__(self, other):
        if not self._same(other):
            return NotImplemented
        return other < self

    def __le__(self, other):
        if not self._same(other):
            return NotImplemented
        return not self > other

    def __ge__(self, other):
        if not self._same(other):
            return NotImplemented
        return not self < other

    __hash__ = None

    # numpy‑скаляр слева от `*` должен уступить __rmul__
    __array_ufunc__ = None

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива."""
        return self._v.copy()

    def to_tuple(self) -> Tuple:
        return (self.x, self.y, self.z)

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


scalar.VectorLike.register(Vec3)
