"""Elementary functions for plain scalars and Evaluations.

Every function accepts either a plain number or an
:class:`~poreprops.numerics.ad.forward_mode.Evaluation`. Numbers are passed on to the
corresponding numpy function, such that code written with these functions runs
unchanged on floats. For Evaluations, the value is computed with the same numpy
function and the derivatives follow from the chain rule.

The module is meant to be imported under a short name, e.g.

    >>> from poreprops.numerics.ad import functions as af
    >>> af.exp(x)

"""

from __future__ import annotations

import numpy as np

from poreprops.numerics.ad.forward_mode import Evaluation, _scale
from poreprops.numerics.precision import SCALAR_TYPE

__all__ = [
    "abs",
    "sqrt",
    "exp",
    "log",
    "log10",
    "pow",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "tanh",
    "min",
    "max",
    "sign",
    "isnan",
    "isfinite",
    "isinf",
]


def _apply(var: Evaluation, val, factor) -> Evaluation:
    return Evaluation._new(val, _scale(factor, var.derivatives))


def abs(var):
    if not isinstance(var, Evaluation):
        return np.abs(var)
    return Evaluation._new(np.abs(var.value), np.sign(var.value) * var.derivatives)


def sqrt(var):
    if not isinstance(var, Evaluation):
        return np.sqrt(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        val = np.sqrt(var.value)
        return _apply(var, val, 0.5 / val)


def exp(var):
    if not isinstance(var, Evaluation):
        return np.exp(var)
    val = np.exp(var.value)
    return _apply(var, val, val)


def log(var):
    if not isinstance(var, Evaluation):
        return np.log(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _apply(var, np.log(var.value), 1.0 / var.value)


def log10(var):
    if not isinstance(var, Evaluation):
        return np.log10(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        return _apply(var, np.log10(var.value), 1.0 / (var.value * np.log(10.0)))


def pow(base, exponent):
    """Power function for any combination of numbers and Evaluations.

    A base of exactly zero is treated separately for Evaluations: the derivative
    ``exponent * base**(exponent - 1)`` is replaced by its limit, and derivatives with
    a zero seed stay zero. The result is never NaN for a zero base.

    """
    if isinstance(base, Evaluation) or isinstance(exponent, Evaluation):
        return base**exponent
    if isinstance(base, (int, np.integer)):
        # Integers to negative integer powers are not allowed in numpy.
        base = SCALAR_TYPE(base)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.power(base, exponent)


def sin(var):
    if not isinstance(var, Evaluation):
        return np.sin(var)
    return _apply(var, np.sin(var.value), np.cos(var.value))


def cos(var):
    if not isinstance(var, Evaluation):
        return np.cos(var)
    return _apply(var, np.cos(var.value), -np.sin(var.value))


def tan(var):
    if not isinstance(var, Evaluation):
        return np.tan(var)
    val = np.tan(var.value)
    return _apply(var, val, 1.0 + val * val)


def asin(var):
    if not isinstance(var, Evaluation):
        return np.arcsin(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        factor = 1.0 / np.sqrt(1.0 - var.value * var.value)
        return _apply(var, np.arcsin(var.value), factor)


def acos(var):
    if not isinstance(var, Evaluation):
        return np.arccos(var)
    with np.errstate(divide="ignore", invalid="ignore"):
        factor = -1.0 / np.sqrt(1.0 - var.value * var.value)
        return _apply(var, np.arccos(var.value), factor)


def atan(var):
    if not isinstance(var, Evaluation):
        return np.arctan(var)
    return _apply(var, np.arctan(var.value), 1.0 / (1.0 + var.value * var.value))


def atan2(y, x):
    """Arc tangent of ``y / x`` using the signs of both arguments for the quadrant."""
    if not isinstance(y, Evaluation) and not isinstance(x, Evaluation):
        return np.arctan2(y, x)
    y, x = _promote(y, x)
    val = np.arctan2(y.value, x.value)
    with np.errstate(divide="ignore", invalid="ignore"):
        denominator = x.value * x.value + y.value * y.value
        der = (x.value * y.derivatives - y.value * x.derivatives) / denominator
    return Evaluation._new(val, der)


def tanh(var):
    if not isinstance(var, Evaluation):
        return np.tanh(var)
    val = np.tanh(var.value)
    return _apply(var, val, 1.0 - val * val)


def _promote(var1, var2) -> tuple[Evaluation, Evaluation]:
    # Turn a number into a constant with as many derivatives as the other operand.
    if not isinstance(var1, Evaluation):
        var1 = Evaluation.constant(var1, var2.num_derivatives)
    if not isinstance(var2, Evaluation):
        var2 = Evaluation.constant(var2, var1.num_derivatives)
    var1._check_compatible(var2)
    return var1, var2


def min(var1, var2):
    """Smaller of two values.

    The result carries the derivatives of the selected operand. If the values are
    equal, the left operand is selected. If one operand is an Evaluation, so is the
    result.

    """
    if isinstance(var1, Evaluation) or isinstance(var2, Evaluation):
        var1, var2 = _promote(var1, var2)
    return var1 if var1 <= var2 else var2


def max(var1, var2):
    """Larger of two values, see :func:`min` for the selection of derivatives."""
    if isinstance(var1, Evaluation) or isinstance(var2, Evaluation):
        var1, var2 = _promote(var1, var2)
    return var1 if var1 >= var2 else var2


def sign(var):
    if not isinstance(var, Evaluation):
        return np.sign(var)
    return np.sign(var.value)


def isnan(var) -> bool:
    if isinstance(var, Evaluation):
        var = var.value
    return bool(np.isnan(var))


def isfinite(var) -> bool:
    if isinstance(var, Evaluation):
        var = var.value
    return bool(np.isfinite(var))


def isinf(var) -> bool:
    if isinstance(var, Evaluation):
        var = var.value
    return bool(np.isinf(var))
