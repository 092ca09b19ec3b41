# -*- coding: utf-8 -*-
"""
Vec3[T] и Vec[T, 3] – две независимые реализации одного контракта.
На одинаковых входах они обязаны давать одинаковые результаты.
"""

from fractions import Fraction

import numpy as np
import pytest

from libv.errors import DimensionError
from libv.math import Vec, Vec3, allclose, cross, dot, to_vec, to_vec3

OTHER = (0.5, -4.0, 2.0)


def pair(values, value_type=float):
    return Vec3[value_type](*values), Vec[value_type, 3](*values)


def test_reductions_agree(triple):
    s, g = pair(triple)
    for name in ("sum", "prod", "mean", "min", "max", "magnitude2", "magnitude"):
        assert getattr(s, name)() == getattr(g, name)(), name


def test_dot_and_cross_agree(triple):
    s, g = pair(triple)
    so, go = pair(OTHER)
    assert s.dot(so) == g.dot(go)
    assert s.cross(so).to_tuple() == g.cross(go).to_tuple()
    assert dot(s, so) == dot(g, go)
    assert cross(s, so).to_tuple() == cross(g, go).to_tuple()


@pytest.mark.parametrize("op", ["__add__", "__sub__", "__mul__", "__truediv__"])
def test_vector_operators_agree(triple, op):
    s, g = pair(triple)
    so, go = pair(OTHER)
    assert getattr(s, op)(so).to_tuple() == getattr(g, op)(go).to_tuple()


@pytest.mark.parametrize("k", [2.0, -0.5, 3])
def test_scalar_operators_agree(triple, k):
    s, g = pair(triple)
    assert (s * k).to_tuple() == (g * k).to_tuple()
    assert (s / k).to_tuple() == (g / k).to_tuple()


def test_normalize_agrees(triple):
    s, g = pair(triple)
    assert s.normalize().to_tuple() == g.normalize().to_tuple()


def test_comparisons_agree(triple):
    s, g = pair(triple)
    so, go = pair(OTHER)
    assert (s < so) == (g < go)
    assert (s > so) == (g > go)
    assert (s == so) == (g == go)


@pytest.mark.parametrize("values", [(1, 2, 3), (-7, 4, 2), (5, 5, -5)])
def test_integer_elements_agree(values):
    s, g = pair(values, int)
    so, go = pair((2, -3, 1), int)
    for name in ("sum", "prod", "mean", "min", "max", "magnitude2", "magnitude"):
        assert getattr(s, name)() == getattr(g, name)(), name
    assert (s / so).to_tuple() == (g / go).to_tuple()
    assert (s / 2).to_tuple() == (g / 2).to_tuple()
    assert s.cross(so).to_tuple() == g.cross(go).to_tuple()


def test_cross_product_is_orthogonal(triple):
    a = Vec3(*triple)
    b = Vec3(*OTHER)
    c = a.cross(b)
    scale = a.magnitude() * b.magnitude() * c.magnitude()
    assert abs(dot(c, a)) <= 1e-12 * scale
    assert abs(dot(c, b)) <= 1e-12 * scale


def test_normalize_gives_unit_magnitude(triple):
    for v in pair(triple):
        v.normalize()
        assert v.magnitude() == pytest.approx(1.0)
        assert allclose(v, v.copy().normalize())


def test_conversion_round_trip(triple):
    s, g = pair(triple)
    assert to_vec(s) == g
    assert to_vec3(g) == s
    assert type(to_vec3(Vec[int, 3](1, 2, 3))) is Vec3[int]
    with pytest.raises(DimensionError):
        to_vec3(Vec[float, 4]())
    with pytest.raises(DimensionError):
        to_vec(g)


def test_object_vectors_of_other_type_are_not_scalars():
    s = Vec3[Fraction](1, 2, 3)
    g = Vec[Fraction, 3](1, 2, 3)
    for a, b in ((s, g), (g, s)):
        with pytest.raises(TypeError):
            a * b
        with pytest.raises(TypeError):
            a / b
        c = a.copy()
        with pytest.raises(TypeError):
            c *= b
        with pytest.raises(TypeError):
            c /= b
    assert s.to_tuple() == (1, 2, 3)
    assert g.to_tuple() == (1, 2, 3)


def test_object_vector_rejects_ndarray_operand():
    g = Vec[Fraction, 3](1, 2, 3)
    with pytest.raises(TypeError):
        g * np.array([1, 2, 3], dtype=object)


def test_numpy_scalar_on_the_left_keeps_vector_type():
    v = Vec3[np.float32](1, 2, 3)
    r = v.x * v
    assert type(r) is Vec3[np.float32]
    assert r.to_tuple() == (1.0, 2.0, 3.0)
    r = np.float32(2) * v
    assert type(r) is Vec3[np.float32]
    assert r.to_tuple() == (2.0, 4.0, 6.0)
    g = np.float64(2.0) * Vec[float, 3](1, 2, 3)
    assert type(g) is Vec[float, 3]
    assert g.to_tuple() == (2.0, 4.0, 6.0)
