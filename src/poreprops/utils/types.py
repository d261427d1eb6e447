"""
Defines types commonly used in poreprops.
"""

from typing import Union

__all__ = [
    "number",
    "Scalar",
]

number = Union[float, int]
"""Type for numbers."""

Scalar = Union[float, int, "pp.ad.Evaluation"]
"""Numeric type accepted by the material correlations.

Every correlation is written once and evaluated either with plain numbers or with
:class:`~poreprops.numerics.ad.forward_mode.Evaluation` instances, in which case the
derivatives are propagated alongside the values.

"""
