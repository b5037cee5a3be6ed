"""
#################################################
Mathematical functions (:mod:`dualdiff.function`)
#################################################

.. currentmodule:: dualdiff.function

This module provides mathematical functions lifted to dual numbers. Each function also
accepts a plain real number, in which case it returns a plain real number.

Functions are evaluated with numpy in double precision. Domain errors yield ``nan`` or
``inf`` and follow the floating-point policy of :func:`dualdiff.context.getcontext`.

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    cos
    sin
    tan

Exponents, logarithms, and roots
================================

.. autosummary::
    :toctree: generated/

    exp
    log
    sqrt

"""

import numpy as np

from dualdiff.lifting import lift
from dualdiff.typing import Real


def cos(x: Real, /) -> Real:
    """Cosine.

    Examples
    --------
    >>> print(format(cos(1.0), ".6f"))
    0.540302
    """
    return np.cos(x)


def exp(x: Real, /) -> Real:
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    >>> from dualdiff.dual import variable
    >>> print(format(exp(variable(2.0)).tangent, ".6f"))
    7.389056
    """
    return np.exp(x)


def log(x: Real, /) -> Real:
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    return np.log(x)


def sin(x: Real, /) -> Real:
    """Sine.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    >>> from dualdiff.dual import variable
    >>> print(sin(variable(0.0)))
    DualNumber(primal=0.0, tangent=1.0)
    """
    return np.sin(x)


def sqrt(x: Real, /) -> Real:
    """Square root.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    """
    return np.sqrt(x)


def tan(x: Real, /) -> Real:
    """Tangent.

    Examples
    --------
    >>> print(format(tan(1.0), ".6f"))
    1.557408
    """
    return np.tan(x)


_cos = cos
_exp = exp
_log = log
_sin = sin
_sqrt = sqrt
_tan = tan

cos = lift(_cos, lambda x: -_sin(x))
exp = lift(_exp, _exp)
log = lift(_log, lambda x: np.divide(1.0, x))
sin = lift(_sin, _cos)
sqrt = lift(_sqrt, lambda x: np.divide(1.0, 2 * _sqrt(x)))
tan = lift(_tan, lambda x: np.divide(1.0, _cos(x) ** 2))
