# libv/math/vec.py
"""
N‑мерный вектор ``Vec[T, N]`` на базе NumPy.

Класс параметризуется типом элемента и размерностью::

    V4 = Vec[float, 4]
    v = V4(1.0, 2.0, 3.0, 4.0)

Параметризованные классы кэшируются: ``Vec[float, 4] is Vec[float, 4]``.
Операции определены только между векторами одного и того же класса,
иначе Python поднимает ``TypeError``. ``cross`` есть только при N == 3.
"""

import copy as _copy
import numbers
import operator
from functools import reduce
from typing import Iterable, Iterator, Tuple

import numpy as np

from libv.errors import DimensionError
from libv.math import scalar
from libv.utils.logger import logger


class Vec:
    """Вектор фиксированной длины N с элементами типа T (value semantics)."""

    __slots__ = ("_v",)

    value_type = None
    dtype = None
    size = 0

    _classes = {}

    def __class_getitem__(cls, params):
        if cls is not Vec:
            raise DimensionError(f"{cls.__name__} is already parameterised")
        try:
            value_type, size = params
        except (TypeError, ValueError):
            raise DimensionError("expected Vec[T, N]") from None
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
            raise DimensionError(f"Vec dimension must be a positive integer, got {size!r}")
        size = int(size)

        key = (value_type, size)
        klass = Vec._classes.get(key)
        if klass is None:
            bases = (Vec, _Cross3) if size == 3 else (Vec,)
            name = f"Vec[{scalar.type_name(value_type)}, {size}]"
            klass = type(name, bases, {
                "__slots__": (),
                "__module__": __name__,
                "__qualname__": name,
                "value_type": value_type,
                "dtype": scalar.resolve_dtype(value_type),
                "size": size,
            })
            Vec._classes[key] = klass
            logger.debug(f"[Vec] new class {name} (dtype={klass.dtype})")
        return klass

    def __init__(self, *values):
        if not self.size:
            raise DimensionError("Vec must be parameterised: Vec[T, N](...)")
        if values and len(values) != self.size:
            raise DimensionError(
                f"{type(self).__name__} takes 0 or {self.size} values, got {len(values)}")
        self._v = scalar.make_storage(self.value_type, self.dtype, self.size, values)

    @classmethod
    def from_iterable(cls, values: Iterable) -> "Vec":
        return cls(*values)

    @classmethod
    def filled(cls, u) -> "Vec":
        v = cls()
        v.fill(u)
        return v

    def _wrap(self, raw):
        return scalar.to_value(self.value_type, self.dtype, raw)

    def _same(self, other) -> bool:
        return type(other) is type(self)

    # -----------------------------------------------------------------
    # значение / контейнер
    # -----------------------------------------------------------------
    def copy(self) -> "Vec":
        new = object.__new__(type(self))
        new._v = self._v.copy()
        return new

    __copy__ = copy

    def __deepcopy__(self, memo):
        new = object.__new__(type(self))
        new._v = _copy.deepcopy(self._v, memo)
        return new

    def swap(self, other: "Vec") -> None:
        if not self._same(other):
            raise DimensionError(
                f"cannot swap {type(self).__name__} with {type(other).__name__}")
        self._v, other._v = other._v, self._v

    def fill(self, u) -> None:
        for i in range(self.size):
            self._v[i] = u

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator:
        for raw in self._v:
            yield self._wrap(raw)

    def __reversed__(self) -> Iterator:
        for raw in self._v[::-1]:
            yield self._wrap(raw)

    def __getitem__(self, n: int):
        return self._wrap(self._v[n])

    def __setitem__(self, n: int, value) -> None:
        self._v[n] = value

    # -----------------------------------------------------------------
    # свёртки
    # -----------------------------------------------------------------
    def sum(self):
        return self._wrap(reduce(operator.add, self._v, self.value_type()))

    def prod(self):
        # затравка – первый элемент, а не «единица» T
        return self._wrap(reduce(operator.mul, self._v[1:], self._v[0]))

    def mean(self):
        div = scalar.divide_op(self.dtype)
        return self._wrap(div(reduce(operator.add, self._v, self.value_type()), self.size))

    def min(self):
        return self._wrap(min(self._v))

    def max(self):
        return self._wrap(max(self._v))

    def dot(self, other: "Vec"):
        """Скалярное произведение (левая свёртка от T())."""
        if not self._same(other):
            raise DimensionError(
                f"dot: {type(self).__name__} and {type(other).__name__}")
        terms = (a * b for a, b in zip(self._v, other._v))
        return self._wrap(reduce(operator.add, terms, self.value_type()))

    def magnitude2(self):
        return self.dot(self)

    def magnitude(self):
        return self._wrap(np.sqrt(self.magnitude2()))

    def normalize(self) -> "Vec":
        """
        Нормализовать на месте и вернуть self.

        Нулевой вектор не обрабатывается особо: элементы станут nan/inf
        (для целых T – по правилам целочисленного деления numpy).
        """
        m = self.magnitude()
        if m == 0:
            logger.warning(f"[Vec] normalize() of zero-magnitude {type(self).__name__}")
        with np.errstate(divide="ignore", invalid="ignore"):
            self /= m
        return self

    # -----------------------------------------------------------------
    # составное присваивание (меняет self)
    # -----------------------------------------------------------------
    def __iadd__(self, rhs: "Vec") -> "Vec":
        if not self._same(rhs):
            return NotImplemented
        np.add(self._v, rhs._v, out=self._v)
        return self

    def __isub__(self, rhs: "Vec") -> "Vec":
        if not self._same(rhs):
            return NotImplemented
        np.subtract(self._v, rhs._v, out=self._v)
        return self

    def __imul__(self, rhs) -> "Vec":
        if self._same(rhs):
            np.multiply(self._v, rhs._v, out=self._v)
            return self
        if isinstance(rhs, Vec):
            return NotImplemented
        s = scalar.coerce_scalar(self.dtype, rhs)
        if s is scalar.NOT_SCALAR:
            return NotImplemented
        np.multiply(self._v, s, out=self._v)
        return self

    def __itruediv__(self, rhs) -> "Vec":
        div = scalar.divide_ufunc(self.dtype)
        if self._same(rhs):
            div(self._v, rhs._v, out=self._v)
            return self
        if isinstance(rhs, Vec):
            return NotImplemented
        s = scalar.coerce_scalar(self.dtype, rhs)
        if s is scalar.NOT_SCALAR:
            return NotImplemented
        div(self._v, s, out=self._v)
        return self

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, rhs):
        return self.copy().__iadd__(rhs)

    def __sub__(self, rhs):
        return self.copy().__isub__(rhs)

    def __mul__(self, rhs):
        return self.copy().__imul__(rhs)

    def __rmul__(self, lhs):
        if isinstance(lhs, Vec):
            return NotImplemented
        return self.__mul__(lhs)

    def __truediv__(self, rhs):
        return self.copy().__itruediv__(rhs)

    # -----------------------------------------------------------------
    # сравнение (поэлементное / лексикографическое)
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not self._same(other):
            return NotImplemented
        return all(a == b for a, b in zip(self._v, other._v))

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

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Копия хранилища."""
        return self._v.copy()

    def to_tuple(self) -> Tuple:
        return tuple(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self)})"


scalar.VectorLike.register(Vec)


class _Cross3:
    """Векторное произведение – подмешивается только в Vec[T, 3]."""

    __slots__ = ()

    def cross(self, o):
        if type(o) is not type(self):
            raise DimensionError(
                f"cross: {type(self).__name__} and {type(o).__name__}")
        p, q = self._v, o._v
        return type(self)(
            (p[1] * q[2]) - (p[2] * q[1]),
            (p[2] * q[0]) - (p[0] * q[2]),
            (p[0] * q[1]) - (p[1] * q[0]),
        )
