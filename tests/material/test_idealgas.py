"""Tests of the ideal gas law."""
from __future__ import annotations

import numpy as np

from poreprops.material.idealgas import IdealGas
from poreprops.numerics.ad.forward_mode import init_evaluations


def test_density():
    rho = IdealGas.density(0.02, 300.0, 1e5)
    assert np.isclose(rho, 1e5 * 0.02 / (8.314472 * 300))


def test_pressure_and_concentration_are_consistent():
    c = IdealGas.concentration(300.0, 1e5)
    assert np.isclose(IdealGas.pressure(300.0, c), 1e5)
    assert np.isclose(IdealGas.density(0.02, 300.0, 1e5), c * 0.02)


def test_density_derivatives():
    p, T = init_evaluations([1e5, 300.0])
    rho = IdealGas.density(0.02, T, p)
    assert np.allclose(
        rho.derivatives,
        [0.02 / (IdealGas.R * 300), -1e5 * 0.02 / (IdealGas.R * 300**2)],
    )
