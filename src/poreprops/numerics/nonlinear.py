"""Newton's method for small, dense systems of nonlinear equations.

The jacobian is not provided by the caller. The residual function is evaluated with
:class:`~poreprops.numerics.ad.forward_mode.Evaluation` arguments, such that the
derivatives come with the residual values.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

import numpy as np
import scipy.linalg

from poreprops.numerics.ad.forward_mode import Evaluation, init_evaluations
from poreprops.numerics.ad.utils import jacobian, values
from poreprops.numerics.precision import EXTREMELY_LARGE, SCALAR_TYPE
from poreprops.utils.logging import time_logger

__all__ = ["ConvergenceError", "NewtonResult", "default_tolerance", "newton_solve"]

logger = logging.getLogger(__name__)

module_sections = ["numerics"]


class ConvergenceError(Exception):
    """Raised when Newton's method does not converge."""


@dataclass(frozen=True)
class NewtonResult:
    """Outcome of :func:`newton_solve`."""

    x: np.ndarray
    """Values of the unknowns at the last iterate."""

    num_iterations: int
    """Number of Newton updates performed."""

    residual_norm: float
    """Euclidean norm of the residual at :attr:`x`."""


def default_tolerance() -> float:
    """Residual tolerance reachable in the configured floating point precision,
    ``eps**0.75`` of :data:`~poreprops.numerics.precision.SCALAR_TYPE`.

    About ``2e-12`` in double and ``6e-6`` in single precision.

    """
    return float(np.finfo(SCALAR_TYPE).eps) ** 0.75


@time_logger(sections=module_sections)
def newton_solve(
    residual: Callable[[list[Evaluation]], Sequence[Any]],
    x0: Sequence[Any],
    tolerance: Optional[float] = None,
    max_iterations: int = 50,
) -> NewtonResult:
    """Solve ``residual(x) = 0`` with Newton's method.

    Parameters:
        residual: Function mapping the list of unknowns to a sequence of residual
            values, one per unknown. It is called with Evaluations and must be
            written with operators and :mod:`~poreprops.numerics.ad.functions`.
            Entries which do not depend on the unknowns may be plain numbers.
        x0: Initial guess.
        tolerance: ``(optional)`` Convergence is reached when the Euclidean norm of
            the residual is below this value. By default, the tolerance is relative
            to the residual norm at ``x0`` (at least one), scaled with
            :func:`default_tolerance` of the configured precision.
        max_iterations: ``(optional)`` Maximal number of Newton updates.

    Raises:
        ValueError: If the number of residual equations differs from the number of
            unknowns.
        ConvergenceError: If the residual norm is not below ``tolerance`` after
            ``max_iterations`` updates, if the iteration diverges, or if the jacobian
            is singular or not finite.

    Returns:
        The solution and convergence information.

    """
    x = values(x0)
    num_unknowns = x.size

    for iteration in range(max_iterations + 1):
        res = residual(init_evaluations(x))
        if len(res) != num_unknowns:
            raise ValueError(
                f"Expecting {num_unknowns} residual equations, got {len(res)}."
            )
        res_values = values(res)
        residual_norm = float(np.linalg.norm(res_values))
        logger.debug(f"Newton iteration {iteration}: residual norm {residual_norm}")

        if not np.isfinite(residual_norm) or residual_norm > EXTREMELY_LARGE:
            raise ConvergenceError(
                f"Newton's method diverged in iteration {iteration}"
                + f" (residual norm {residual_norm})."
            )
        if tolerance is None:
            tolerance = default_tolerance() * max(1.0, residual_norm)
        if residual_norm < tolerance:
            logger.info(f"Newton's method converged after {iteration} iterations.")
            return NewtonResult(x, iteration, residual_norm)
        if iteration == max_iterations:
            break

        jac = jacobian(res)
        if not np.all(np.isfinite(jac)):
            raise ConvergenceError(
                f"Non-finite jacobian in Newton iteration {iteration}."
            )
        try:
            dx = scipy.linalg.solve(jac, -res_values)
        except scipy.linalg.LinAlgError as err:
            raise ConvergenceError(
                f"Singular jacobian in Newton iteration {iteration}."
            ) from err
        x = x + dx

    raise ConvergenceError(
        f"Newton's method did not converge in {max_iterations} iterations"
        + f" (residual norm {residual_norm})."
    )
