"""Tests of the conversion functions between numbers and Evaluations, and of the
assembly of jacobians."""
from __future__ import annotations

import numpy as np
import pytest

from poreprops.numerics.ad.forward_mode import Evaluation, init_evaluations
from poreprops.numerics.ad.utils import (
    constant,
    constant_like,
    decay,
    jacobian,
    values,
    variable,
)


@pytest.mark.parametrize("value", [0.0, -1.5, 3e8])
def test_decay_of_constant(value):
    assert decay(constant(value, 3)) == value
    assert decay(value) == value


def test_constant():
    c = constant(2.0, 3)
    assert isinstance(c, Evaluation)
    assert c.num_derivatives == 3 and np.all(c.derivatives == 0)
    # Lifting an Evaluation keeps its value only
    d = constant(variable(5.0, 0, 2), 2)
    assert d.value == 5 and np.all(d.derivatives == 0)


def test_variable():
    v = variable(2.0, 1, 3)
    assert v.value == 2 and np.all(v.derivatives == [0, 1, 0])
    with pytest.raises(ValueError):
        variable(2.0, 3, 3)


def test_values():
    x, y = init_evaluations([1.0, 2.0])
    vals = values([x * y, 3.0, y])
    assert isinstance(vals, np.ndarray)
    assert np.allclose(vals, [2, 3, 2])


def test_jacobian():
    x, y = init_evaluations([1.0, 2.0])
    jac = jacobian([x * y, x + 2.0, 3.0])
    assert jac.shape == (3, 2)
    assert np.allclose(jac, [[2, 1], [1, 0], [0, 0]])


def test_jacobian_without_evaluations():
    with pytest.raises(ValueError):
        jacobian([1.0, 2.0])


def test_jacobian_inconsistent_number_of_derivatives():
    with pytest.raises(ValueError):
        jacobian([variable(1.0, 0, 2), variable(1.0, 0, 3)])


def test_constant_like():
    x, y = init_evaluations([1.0, 2.0])
    c = constant_like(5.0, 3.0, y)
    assert isinstance(c, Evaluation)
    assert c.value == 5 and c.num_derivatives == 2 and np.all(c.derivatives == 0)

    # Without Evaluations, the value is returned unchanged
    assert constant_like(5.0, 3.0, 4.0) == 5.0
    assert not isinstance(constant_like(5.0), Evaluation)
