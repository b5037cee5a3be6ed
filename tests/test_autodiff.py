import math

import pytest

from dualdiff import function as ddf
from dualdiff.autodiff import differentiate, lower, value_and_deriv
from dualdiff.dual import add, multiply, power, promote, subtract, variable


def f(x):
    # 3x^2 + 2x - 1
    return subtract(
        add(multiply(promote(3), power(x, 2)), multiply(promote(2), x)), promote(1)
    )


def g(x):
    # x e^{2x} + x^2
    return add(multiply(x, ddf.exp(multiply(promote(2), x))), power(x, 2))


def test_differentiate():
    assert differentiate(f)(2) == 14
    assert differentiate(f)(0.0) == 2.0


def test_lower():
    assert lower(f)(2) == 15
    assert lower(f)(-1.0) == 0.0


@pytest.mark.parametrize("a", [-3.0, -0.5, 0.0, 1.0, 2.5, 10.0])
def test_scaled_square(a):
    df = differentiate(lambda x: multiply(promote(3), power(x, 2)))
    assert df(a) == 6 * a


@pytest.mark.parametrize("a", [-1.0, 0.0, 0.75])
def test_exponential(a):
    expected = math.exp(2 * a) * (1 + 2 * a) + 2 * a
    assert differentiate(g)(a) == pytest.approx(expected, abs=1e-9)


def test_exponential_at_minus_one():
    assert differentiate(g)(-1.0) == pytest.approx(-math.exp(-2) - 2, abs=1e-9)


@pytest.mark.parametrize("fun", [f, g, ddf.sin, lambda x: 1 / (x * x + 1)])
@pytest.mark.parametrize("a", [-2.0, 0.5, 3.0])
def test_lower_agrees_with_primal(fun, a):
    assert fun(variable(a)).primal == lower(fun)(a)


def test_value_and_deriv():
    value, slope = value_and_deriv(f)(2.0)
    assert value == 15.0
    assert slope == 14.0


def test_keyword_arguments():
    def scaled(x, *, k):
        return k * ddf.sin(x)

    assert differentiate(scaled)(0.0, k=4.0) == pytest.approx(4.0)
    assert lower(scaled)(0.0, k=4.0) == pytest.approx(0.0)


def test_metadata():
    assert differentiate(f).__name__ == "f"
    assert lower(g).__wrapped__ is g


def test_reciprocal():
    df = differentiate(lambda x: 1 / x)
    assert df(2.0) == pytest.approx(-0.25)
    assert not math.isfinite(df(0.0))
