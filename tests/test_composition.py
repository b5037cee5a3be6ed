import math

import pytest

from dualdiff import function as ddf
from dualdiff.autodiff import differentiate, lower
from dualdiff.composition import compose, polynomial
from dualdiff.dual import DualNumber, variable


def test_compose():
    fun = compose(ddf.exp, ddf.sin)
    a = 0.8
    assert lower(fun)(a) == pytest.approx(math.exp(math.sin(a)))
    assert differentiate(fun)(a) == pytest.approx(math.exp(math.sin(a)) * math.cos(a))


def test_compose_order():
    fun = compose(lambda x: x * 2, lambda x: x + 1)
    assert fun(DualNumber(3, 1)) == DualNumber(8, 2)


def test_compose_identity():
    x = DualNumber(1.5, 2.0)
    assert compose()(x) is x


def test_nested_lifted():
    # sin(cos(x^2))
    fun = compose(ddf.sin, ddf.cos, lambda x: x**2)
    a = 1.1
    expected = math.cos(math.cos(a**2)) * -math.sin(a**2) * 2 * a
    assert differentiate(fun)(a) == pytest.approx(expected)


def test_polynomial():
    fun = polynomial(-1, 2, 3)
    assert fun(variable(2)) == DualNumber(15, 14)
    assert lower(fun)(2.0) == 15.0
    assert differentiate(fun)(2.0) == 14.0


def test_polynomial_constant():
    assert polynomial(5)(variable(2.0)) == DualNumber(5, 0)
    assert polynomial()(variable(2.0)) == DualNumber(0, 0)


def test_constant_input():
    fun = polynomial(0, 0, 1)
    assert fun(DualNumber(3.0, 0)).tangent == 0
