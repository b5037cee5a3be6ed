import functools
from collections.abc import Callable

from dualdiff.dual import variable
from dualdiff.typing import DualFunction, Real, RealFunction


def differentiate(fun: DualFunction) -> RealFunction:
    """Return a function that evaluates the derivative of the univariate function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. It takes and returns a
        :class:`~dualdiff.dual.DualNumber`.

    Returns
    -------
    Callable
        Derivative of `fun`, taking and returning a real number. Keyword arguments are
        passed to `fun` as they are.

    Warnings
    --------
    `fun` must not inspect or branch on the tangent of its argument.

    Examples
    --------
    >>> f = lambda x: 3 * x**2 + 2 * x - 1
    >>> df = differentiate(f)
    >>> print(df(2.0))
    14.0

    >>> from dualdiff import function as ddf
    >>> g = lambda x: x * ddf.exp(2 * x) + x**2
    >>> dg = differentiate(g)
    >>> print(format(dg(-1.0), ".6f"))
    -2.135335
    """

    @functools.wraps(fun)
    def result(a: Real, /, **kwargs) -> Real:
        return fun(variable(a), **kwargs).tangent

    return result


def lower(fun: DualFunction) -> RealFunction:
    """Return the ordinary real function underlying the dual-valued function.

    The returned function evaluates `fun` on the seeded variable and discards the
    tangent.

    Examples
    --------
    >>> f = lambda x: 3 * x**2 + 2 * x - 1
    >>> print(lower(f)(2.0))
    15.0
    """

    @functools.wraps(fun)
    def result(x: Real, /, **kwargs) -> Real:
        return fun(variable(x), **kwargs).primal

    return result


def value_and_deriv(fun: DualFunction) -> Callable[[Real], tuple[Real, Real]]:
    """Return a function that evaluates `fun` and its derivative at once.

    Examples
    --------
    >>> from dualdiff import function as ddf
    >>> value, slope = value_and_deriv(ddf.sin)(0.0)
    >>> print(value, slope)
    0.0 1.0
    """

    @functools.wraps(fun)
    def result(a: Real, /, **kwargs) -> tuple[Real, Real]:
        return tuple(fun(variable(a), **kwargs))

    return result
