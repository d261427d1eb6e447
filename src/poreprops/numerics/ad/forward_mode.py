"""Dense forward-mode automatic differentiation.

An :class:`Evaluation` holds the value of a scalar function together with its partial
derivatives with respect to ``N`` independent variables. Arithmetic on Evaluations
applies the chain rule, such that any expression written with the usual operators
(and the functions in :mod:`~poreprops.numerics.ad.functions`) yields the value and the
gradient of the expression at once.

The number of derivatives ``N`` is fixed when the independent variables are seeded,
usually by :func:`init_evaluations`, and must be the same for all Evaluations combined
in one expression.

Example:
    >>> p, T = init_evaluations([1e5, 300.0])
    >>> rho = p * 0.028 / (8.314 * T)
    >>> rho.derivatives  # [d rho / d p, d rho / d T]

"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np

from poreprops.numerics.precision import SCALAR_TYPE

__all__ = ["Evaluation", "init_evaluations"]


def init_evaluations(values: Sequence[Any]) -> list[Evaluation]:
    """Seed a set of independent variables.

    The i-th returned Evaluation has the i-th value, and its derivative with respect
    to itself is one while all other derivatives are zero. The number of derivatives
    of every returned Evaluation equals the number of values.

    Parameters:
        values: Values of the independent variables.

    Returns:
        A list of Evaluations, one per value.

    """
    num_derivatives = len(values)
    return [
        Evaluation.variable(val, idx, num_derivatives) for idx, val in enumerate(values)
    ]


def _is_scalar(other: Any) -> bool:
    return isinstance(other, numbers.Real)


def _power_derivative(base, exponent):
    """Derivative of ``base**exponent`` with respect to ``base``.

    For ``base == 0`` the formula ``exponent * base**(exponent - 1)`` evaluates to
    ``0 * inf`` for fractional exponents. The limit values are returned instead.

    """
    if base == 0.0:
        if exponent == 0.0 or exponent > 1.0:
            return SCALAR_TYPE(0.0)
        if exponent == 1.0:
            return SCALAR_TYPE(1.0)
        # Unbounded slope, approached from the right.
        return SCALAR_TYPE(np.copysign(np.inf, exponent))
    return exponent * base ** (exponent - 1)


def _scale(factor, derivatives: np.ndarray) -> np.ndarray:
    """Multiply derivatives with the outer derivative of a chain rule.

    An infinite factor leaves zero entries at zero (no dependency on that variable)
    instead of producing ``inf * 0 = nan``.

    """
    if np.isinf(factor):
        return np.where(derivatives == 0.0, 0.0, factor * derivatives)
    return factor * derivatives


class Evaluation:
    """A scalar value paired with its partial derivatives.

    Evaluations are immutable. All operations return new instances, and the array of
    derivatives is read-only, such that it can be shared between instances.

    Numbers (Python or numpy scalars) can be used on either side of an operator, they
    are treated as constants. Comparisons and equality look at the values only.

    Parameters:
        value: The value.
        derivatives: The partial derivatives of the value, one per independent
            variable. The array is copied.

    """

    __slots__ = ("_value", "_derivatives")

    # Numpy scalars on the left-hand side of an operator defer to the reflected
    # operators of this class, and numpy ufuncs refuse Evaluations.
    __array_ufunc__ = None

    def __init__(self, value, derivatives) -> None:
        der = np.array(derivatives, dtype=SCALAR_TYPE).reshape(-1)
        der.flags.writeable = False
        self._value = SCALAR_TYPE(value)
        self._derivatives = der

    @classmethod
    def _new(cls, value, derivatives: np.ndarray) -> Evaluation:
        # Internal constructor without copying. The derivatives must not be referenced
        # by anybody who could change them.
        obj = cls.__new__(cls)
        der = derivatives.astype(SCALAR_TYPE, copy=False)
        der.flags.writeable = False
        obj._value = SCALAR_TYPE(value)
        obj._derivatives = der
        return obj

    @classmethod
    def constant(cls, value, num_derivatives: int) -> Evaluation:
        """Create an Evaluation with ``num_derivatives`` zero derivatives."""
        return cls._new(value, np.zeros(num_derivatives, dtype=SCALAR_TYPE))

    @classmethod
    def variable(cls, value, var_idx: int, num_derivatives: int) -> Evaluation:
        """Create the independent variable ``var_idx`` out of ``num_derivatives``.

        Raises:
            ValueError: If ``var_idx`` is not in ``[0, num_derivatives)``.

        """
        if not 0 <= var_idx < num_derivatives:
            raise ValueError(
                f"Variable index {var_idx} out of range for {num_derivatives}"
                + " derivatives."
            )
        der = np.zeros(num_derivatives, dtype=SCALAR_TYPE)
        der[var_idx] = 1.0
        return cls._new(value, der)

    @property
    def value(self):
        """The value of the evaluated function."""
        return self._value

    @property
    def derivatives(self) -> np.ndarray:
        """Read-only array of partial derivatives."""
        return self._derivatives

    @property
    def num_derivatives(self) -> int:
        """Number of independent variables."""
        return self._derivatives.size

    def derivative(self, var_idx: int):
        """Partial derivative with respect to the independent variable ``var_idx``."""
        return self._derivatives[var_idx]

    def copy(self) -> Evaluation:
        return Evaluation(self._value, self._derivatives)

    def __repr__(self) -> str:
        return f"Evaluation(value={self._value!r}, derivatives={self._derivatives!r})"

    def _check_compatible(self, other: Evaluation) -> None:
        if other._derivatives.size != self._derivatives.size:
            raise ValueError(
                "Cannot combine Evaluations with "
                + f"{self._derivatives.size} and {other._derivatives.size} derivatives."
            )

    # Arithmetic operators

    def __add__(self, other):
        if isinstance(other, Evaluation):
            self._check_compatible(other)
            return Evaluation._new(
                self._value + other._value, self._derivatives + other._derivatives
            )
        if not _is_scalar(other):
            return NotImplemented
        return Evaluation._new(self._value + other, self._derivatives)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Evaluation):
            self._check_compatible(other)
            return Evaluation._new(
                self._value - other._value, self._derivatives - other._derivatives
            )
        if not _is_scalar(other):
            return NotImplemented
        return Evaluation._new(self._value - other, self._derivatives)

    def __rsub__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return Evaluation._new(other - self._value, -self._derivatives)

    def __mul__(self, other):
        if isinstance(other, Evaluation):
            self._check_compatible(other)
            return Evaluation._new(
                self._value * other._value,
                self._derivatives * other._value + other._derivatives * self._value,
            )
        if not _is_scalar(other):
            return NotImplemented
        return Evaluation._new(self._value * other, self._derivatives * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        # Division by zero gives non-finite values, never an exception.
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if isinstance(other, Evaluation):
                self._check_compatible(other)
                val = self._value / other._value
                der = (
                    self._derivatives * other._value - other._derivatives * self._value
                ) / (other._value * other._value)
                return Evaluation._new(val, der)
            if not _is_scalar(other):
                return NotImplemented
            divisor = SCALAR_TYPE(other)
            return Evaluation._new(
                self._value / divisor, self._derivatives / divisor
            )

    def __rtruediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        numerator = SCALAR_TYPE(other)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            val = numerator / self._value
            der = -numerator * self._derivatives / (self._value * self._value)
        return Evaluation._new(val, der)

    def __pow__(self, other):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if isinstance(other, Evaluation):
                self._check_compatible(other)
                val = self._value**other._value
                d_base = _power_derivative(self._value, other._value)
                # x**y * ln(x) tends to zero for x -> 0
                d_exp = 0.0 if self._value == 0.0 else val * np.log(self._value)
                der = _scale(d_base, self._derivatives) + _scale(
                    d_exp, other._derivatives
                )
                return Evaluation._new(val, der)
            if not _is_scalar(other):
                return NotImplemented
            val = self._value**other
            der = _scale(_power_derivative(self._value, other), self._derivatives)
            return Evaluation._new(val, der)

    def __rpow__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        base = SCALAR_TYPE(other)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            val = base**self._value
            factor = 0.0 if base == 0.0 else val * np.log(base)
            der = _scale(factor, self._derivatives)
        return Evaluation._new(val, der)

    def __neg__(self):
        return Evaluation._new(-self._value, -self._derivatives)

    def __pos__(self):
        return self

    def __abs__(self):
        return Evaluation._new(
            abs(self._value), np.sign(self._value) * self._derivatives
        )

    # Comparisons act on values only

    def __eq__(self, other):
        if isinstance(other, Evaluation):
            return bool(self._value == other._value)
        if not _is_scalar(other):
            return NotImplemented
        return bool(self._value == other)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other):
        if isinstance(other, Evaluation):
            return bool(self._value < other._value)
        if not _is_scalar(other):
            return NotImplemented
        return bool(self._value < other)

    def __le__(self, other):
        if isinstance(other, Evaluation):
            return bool(self._value <= other._value)
        if not _is_scalar(other):
            return NotImplemented
        return bool(self._value <= other)

    def __gt__(self, other):
        if isinstance(other, Evaluation):
            return bool(self._value > other._value)
        if not _is_scalar(other):
            return NotImplemented
        return bool(self._value > other)

    def __ge__(self, other):
        if isinstance(other, Evaluation):
            return bool(self._value >= other._value)
        if not _is_scalar(other):
            return NotImplemented
        return bool(self._value >= other)
