"""Conversions between plain numbers and Evaluations, and assembly of jacobians."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from poreprops.numerics.ad.forward_mode import Evaluation
from poreprops.numerics.precision import SCALAR_TYPE

__all__ = ["decay", "constant", "constant_like", "variable", "values", "jacobian"]


def decay(var):
    """Return the plain value of an Evaluation, or the argument itself if it is not
    an Evaluation.

    Used to hand results to code which accepts only numbers, e.g. for output.

    """
    if isinstance(var, Evaluation):
        return var.value
    return var


def constant(value, num_derivatives: int) -> Evaluation:
    """Lift a number into an Evaluation with ``num_derivatives`` zero derivatives."""
    return Evaluation.constant(decay(value), num_derivatives)


def constant_like(value, *variables):
    """Return ``value`` as a constant with the number of derivatives of the first
    Evaluation among ``variables``, or ``value`` itself if there is none.

    Used by correlations returning a fixed value, such that Evaluation arguments give
    an Evaluation result.

    """
    for var in variables:
        if isinstance(var, Evaluation):
            return Evaluation.constant(decay(value), var.num_derivatives)
    return value


def variable(value, var_idx: int, num_derivatives: int) -> Evaluation:
    """Seed the independent variable ``var_idx`` out of ``num_derivatives``."""
    return Evaluation.variable(decay(value), var_idx, num_derivatives)


def values(variables: Sequence[Any]) -> np.ndarray:
    """Decay a sequence of numbers and Evaluations into an array of values."""
    return np.array([decay(var) for var in variables], dtype=SCALAR_TYPE)


def jacobian(variables: Sequence[Any]) -> np.ndarray:
    """Stack the derivatives of a sequence of Evaluations row-wise.

    Numbers in the sequence are treated as constants and give zero rows.

    Parameters:
        variables: Functions of the same ``N`` independent variables.

    Raises:
        ValueError: If the sequence contains no Evaluation (the number of columns is
            unknown), or if the Evaluations differ in their number of derivatives.

    Returns:
        Array of shape ``(len(variables), N)``.

    """
    sizes = {var.num_derivatives for var in variables if isinstance(var, Evaluation)}
    if len(sizes) == 0:
        raise ValueError("Cannot assemble a jacobian without any Evaluation.")
    if len(sizes) > 1:
        raise ValueError(f"Inconsistent numbers of derivatives {sorted(sizes)}.")
    num_derivatives = sizes.pop()

    jac = np.zeros((len(variables), num_derivatives), dtype=SCALAR_TYPE)
    for row, var in enumerate(variables):
        if isinstance(var, Evaluation):
            jac[row] = var.derivatives
    return jac
