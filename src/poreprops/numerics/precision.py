"""Floating point precision used for values and derivatives of
:class:`~poreprops.numerics.ad.forward_mode.Evaluation`.

The precision is a configuration constant. It is read from the ``[numerics]`` section
of ``poreprops.cfg`` once, when the package is imported, and cannot be changed
afterwards:

    [numerics]
    # double (default) or single
    precision: single

Besides the scalar type, the precision determines :data:`EXTREMELY_LARGE`, the value
treated as numerically infinite. It must be representable in the chosen type.

"""

from __future__ import annotations

import logging

import numpy as np

import poreprops as pp

__all__ = ["SCALAR_TYPE", "EXTREMELY_LARGE", "PRECISION", "resolve_precision"]

logger = logging.getLogger(__name__)

_PRECISIONS: dict[str, tuple[type[np.floating], float]] = {
    "double": (np.float64, 1e100),
    "single": (np.float32, 1e30),
}


def resolve_precision(name: str) -> tuple[type[np.floating], float]:
    """Map the name of a precision to its scalar type and the "numerically infinite"
    sentinel.

    Parameters:
        name: ``'double'`` or ``'single'``. Case and surrounding whitespace are
            ignored.

    Raises:
        ValueError: If the name is not a known precision.

    Returns:
        The numpy scalar type and the sentinel value.

    """
    key = name.strip().lower()
    if key not in _PRECISIONS:
        raise ValueError(
            f"Unknown floating point precision '{name}'."
            + f" Expected one of {list(_PRECISIONS)}."
        )
    return _PRECISIONS[key]


try:
    PRECISION: str = pp.config["numerics"]["precision"].strip().lower()
except KeyError:
    PRECISION = "double"

SCALAR_TYPE, EXTREMELY_LARGE = resolve_precision(PRECISION)
"""Scalar type of values and derivatives, and the largest value regarded as finite by
the numerical routines of poreprops."""

logger.debug(f"Using {PRECISION} precision ({SCALAR_TYPE.__name__}).")
