"""Tests of the elementary functions in poreprops.numerics.ad.functions.

Each function is checked for plain numbers, where it must behave as the corresponding
numpy function, and for Evaluations, where the derivative is compared with the
analytical derivative.

"""
from __future__ import annotations

import numpy as np
import pytest

from poreprops.numerics.ad import functions as af
from poreprops.numerics.ad.forward_mode import Evaluation, init_evaluations


@pytest.mark.parametrize(
    "func, np_func, derivative, x0",
    [
        (af.exp, np.exp, np.exp, 0.7),
        (af.log, np.log, lambda x: 1 / x, 0.7),
        (af.log10, np.log10, lambda x: 1 / (x * np.log(10)), 0.7),
        (af.sqrt, np.sqrt, lambda x: 0.5 / np.sqrt(x), 0.7),
        (af.sin, np.sin, np.cos, 0.7),
        (af.cos, np.cos, lambda x: -np.sin(x), 0.7),
        (af.tan, np.tan, lambda x: 1 / np.cos(x) ** 2, 0.7),
        (af.asin, np.arcsin, lambda x: 1 / np.sqrt(1 - x**2), 0.3),
        (af.acos, np.arccos, lambda x: -1 / np.sqrt(1 - x**2), 0.3),
        (af.atan, np.arctan, lambda x: 1 / (1 + x**2), 0.7),
        (af.tanh, np.tanh, lambda x: 1 - np.tanh(x) ** 2, 0.7),
        (af.abs, np.abs, np.sign, -0.7),
    ],
)
def test_unary_function(func, np_func, derivative, x0):
    assert np.isclose(func(x0), np_func(x0))

    x, y = init_evaluations([x0, 2.0])
    # Chain rule with an inner function
    f = func(2.0 * x) * y
    assert np.isclose(f.value, np_func(2 * x0) * 2)
    assert np.allclose(f.derivatives, [2 * derivative(2 * x0) * 2, np_func(2 * x0)])


def test_functions_return_evaluations():
    (x,) = init_evaluations([0.5])
    for func in [af.exp, af.log, af.sqrt, af.sin, af.tanh]:
        assert isinstance(func(x), Evaluation)
        assert not isinstance(func(0.5), Evaluation)


def test_pow():
    a, b = init_evaluations([2.0, 3.0])
    assert np.isclose(af.pow(2.0, 3.0), 8)
    # Integers to negative powers
    assert np.isclose(af.pow(2, -1), 0.5)

    c = af.pow(a, 3.0)
    assert np.isclose(c.value, 8) and np.allclose(c.derivatives, [12, 0])

    d = af.pow(a, b)
    assert np.allclose(d.derivatives, [12, 8 * np.log(2)])

    e = af.pow(2.0, b)
    assert np.allclose(e.derivatives, [0, 8 * np.log(2)])


@pytest.mark.parametrize("exponent", [-1.0, 0.5, 2.0])
def test_pow_zero_base(exponent):
    (x,) = init_evaluations([0.0])
    res = af.pow(x, exponent)
    assert not af.isnan(res)
    assert not np.any(np.isnan(res.derivatives))


def test_sqrt_of_zero():
    x, y = init_evaluations([0.0, 1.0])
    res = af.sqrt(x * 0.0 + y * 0.0)
    assert res.value == 0
    assert not np.any(np.isnan(res.derivatives))


def test_atan2():
    x, y = init_evaluations([1.0, 2.0])
    res = af.atan2(y, x)
    assert np.isclose(res.value, np.arctan2(2, 1))
    # d/dx = -y / (x^2 + y^2), d/dy = x / (x^2 + y^2)
    assert np.allclose(res.derivatives, [-2 / 5, 1 / 5])

    res = af.atan2(2.0, x)
    assert np.allclose(res.derivatives, [-2 / 5, 0])
    assert np.isclose(af.atan2(2.0, 1.0), np.arctan2(2, 1))


def test_min_max():
    a, b = init_evaluations([1.0, 2.0])
    assert af.min(a, b) is a
    assert af.max(a, b) is b
    assert af.min(1.0, 2.0) == 1.0
    assert af.max(1.0, 2.0) == 2.0

    # Mixed arguments give Evaluations
    c = af.min(a, 0.5)
    assert isinstance(c, Evaluation)
    assert c.value == 0.5 and np.all(c.derivatives == 0)
    d = af.max(3.0, b)
    assert d.value == 3 and np.all(d.derivatives == 0)


def test_min_max_tie_selects_left_operand():
    a, b = init_evaluations([1.0, 1.0])
    assert np.all(af.min(a, b).derivatives == [1, 0])
    assert np.all(af.min(b, a).derivatives == [0, 1])
    assert np.all(af.max(a, b).derivatives == [1, 0])
    assert np.all(af.max(b, a).derivatives == [0, 1])


def test_min_mismatching_number_of_derivatives():
    a = Evaluation.variable(1.0, 0, 2)
    b = Evaluation.variable(1.0, 0, 3)
    with pytest.raises(ValueError):
        af.min(a, b)


def test_sign():
    (x,) = init_evaluations([-3.0])
    assert af.sign(x) == -1
    assert af.sign(2.0) == 1


def test_checks_for_non_finite_values():
    (x,) = init_evaluations([1.0])
    assert af.isfinite(x)
    assert not af.isnan(x) and not af.isinf(x)

    y = x / 0.0
    assert af.isinf(y) and not af.isfinite(y)

    z = af.log(x - 2.0)
    assert af.isnan(z)

    assert af.isnan(np.nan) and af.isinf(np.inf) and af.isfinite(1.0)
