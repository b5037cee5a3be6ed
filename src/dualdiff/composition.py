"""
##################################################
Function composition (:mod:`dualdiff.composition`)
##################################################

.. currentmodule:: dualdiff.composition

Dual-valued functions are ordinary Python callables built from the arithmetic of
:mod:`dualdiff.dual`, lifted functions, and promoted constants. This module provides
helpers for building them.

.. autosummary::
    :toctree: generated/

    compose
    polynomial

"""

import functools

from dualdiff.dual import DualNumber, add, multiply, promote
from dualdiff.typing import DualFunction, Real


def compose(*funs: DualFunction) -> DualFunction:
    """Return the composition of the functions.

    ``compose(f, g, h)(x)`` is ``f(g(h(x)))``. If no function is given, the identity
    is returned.

    Examples
    --------
    >>> from dualdiff.dual import variable
    >>> from dualdiff.function import exp, sin
    >>> fun = compose(exp, sin)
    >>> print(format(fun(variable(0.0)).tangent, ".6f"))
    1.000000
    """

    def result(x: DualNumber) -> DualNumber:
        return functools.reduce(lambda acc, fun: fun(acc), reversed(funs), x)

    return result


def polynomial(*coeffs: Real) -> DualFunction:
    """Return the polynomial with the coefficients in ascending order of degree.

    Parameters
    ----------
    *coeffs : Real
        ``coeffs[k]`` is the coefficient of ``x**k``.

    Returns
    -------
    Callable
        Dual-valued function evaluating the polynomial by Horner's method.

    Examples
    --------
    >>> from dualdiff.dual import variable
    >>> fun = polynomial(-1, 2, 3)  # 3x^2 + 2x - 1
    >>> print(fun(variable(2)))
    DualNumber(primal=15.0, tangent=14.0)
    """

    def result(x: DualNumber) -> DualNumber:
        acc = promote(0)

        for c in reversed(coeffs):
            acc = add(multiply(acc, x), promote(c))

        return acc

    return result
