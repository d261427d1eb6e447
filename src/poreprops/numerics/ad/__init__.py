"""Dense forward-mode automatic differentiation.

:mod:`~poreprops.numerics.ad.forward_mode` provides the
:class:`~poreprops.numerics.ad.forward_mode.Evaluation` type,
:mod:`~poreprops.numerics.ad.functions` the elementary functions acting on numbers and
Evaluations alike, and :mod:`~poreprops.numerics.ad.utils` the conversions between the
two.

"""

from . import forward_mode, functions, utils
from .forward_mode import Evaluation, init_evaluations
from .utils import constant, constant_like, decay, jacobian, values, variable

__all__ = [
    "Evaluation",
    "init_evaluations",
    "constant",
    "constant_like",
    "decay",
    "jacobian",
    "values",
    "variable",
    "functions",
]
