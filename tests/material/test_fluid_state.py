"""Tests of the fluid state container."""
from __future__ import annotations

import numpy as np
import pytest

from poreprops.material.fluid_state import FluidState
from poreprops.numerics.ad.forward_mode import init_evaluations


def test_default_state():
    state = FluidState(molar_masses=[0.018, 0.028, 0.044], num_phases=2)
    assert state.num_components == 3
    assert state.pressures == [0.0, 0.0]
    assert state.saturations == [0.0, 0.0]
    assert np.array(state.mole_fractions).shape == (2, 3)
    assert state.partial_pressures == [0.0, 0.0, 0.0]


def test_default_rows_are_independent():
    state = FluidState(molar_masses=[0.018, 0.028])
    state.set_mole_frac(0, 1, 0.5)
    assert state.mole_frac(0, 1) == 0.5
    assert state.mole_frac(1, 1) == 0.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pressures": [1e5]},
        {"saturations": [0.2, 0.3, 0.5]},
        {"mole_fractions": [[0.5, 0.5]]},
        {"mole_fractions": [[0.5, 0.5], [1.0]]},
        {"partial_pressures": [1e5]},
    ],
)
def test_invalid_shapes(kwargs):
    with pytest.raises(ValueError):
        FluidState(molar_masses=[0.018, 0.028], **kwargs)


def test_partial_pressures():
    state = FluidState(molar_masses=[0.018, 0.028])
    state.set_partial_pressure(1, 8e4)
    assert state.partial_pressure(1) == 8e4
    assert state.partial_pressure(0) == 0


def test_mean_molar_mass_and_mass_fractions():
    state = FluidState(
        molar_masses=[0.018, 0.028], mole_fractions=[[0.9, 0.1], [0.2, 0.8]]
    )
    assert np.isclose(state.mean_molar_mass(0), 0.9 * 0.018 + 0.1 * 0.028)
    assert np.isclose(state.mass_frac(1, 0), 0.2 * 0.018 / (0.2 * 0.018 + 0.8 * 0.028))
    for phase_idx in range(2):
        assert np.isclose(state.mass_frac(phase_idx, 0) + state.mass_frac(phase_idx, 1), 1)


def test_state_with_evaluations():
    x, y = init_evaluations([0.3, 0.7])
    state = FluidState(molar_masses=[0.018, 0.028])
    state.set_mole_frac(1, 0, x)
    state.set_mole_frac(1, 1, y)
    M = state.mean_molar_mass(1)
    assert np.allclose(M.derivatives, [0.018, 0.028])
