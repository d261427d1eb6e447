"""Tests of the Brooks-Corey relation for capillary pressure and relative
permeabilities."""
from __future__ import annotations

import numpy as np
import pytest

from poreprops.material.fluidmatrixinteractions import BrooksCorey, BrooksCoreyParams
from poreprops.numerics.ad.forward_mode import init_evaluations


@pytest.fixture
def params() -> BrooksCoreyParams:
    return BrooksCoreyParams(pe=1000.0, alpha=2.0)


def test_capillary_pressure(params):
    assert np.isclose(BrooksCorey.pc(params, 0.5), 1000 * np.sqrt(2))
    assert np.isclose(BrooksCorey.pc(params, 1.0), params.pe)
    assert np.isclose(BrooksCorey.dpc_dsw(params, 0.5), -1000 * np.sqrt(2))


@pytest.mark.parametrize("swe", [0.05, 0.3, 0.5, 0.99, 1.0])
def test_saturation_is_inverse_of_capillary_pressure(params, swe):
    pc = BrooksCorey.pc(params, swe)
    assert np.isclose(BrooksCorey.sw(params, pc), swe)


def test_saturation_is_clamped(params):
    # Capillary pressures below the entry pressure
    assert BrooksCorey.sw(params, 0.5 * params.pe) == 1.0
    assert BrooksCorey.sw(params, 0.0) == 1.0


@pytest.mark.parametrize("swe", [0.1, 0.5, 0.9])
def test_derivatives_agree_with_ad(params, swe):
    (s,) = init_evaluations([swe])
    pc = BrooksCorey.pc(params, s)
    assert np.isclose(pc.derivative(0), BrooksCorey.dpc_dsw(params, swe))

    pc_value = BrooksCorey.pc(params, swe)
    (p,) = init_evaluations([pc_value])
    sw = BrooksCorey.sw(params, p)
    assert np.isclose(sw.derivative(0), BrooksCorey.dsw_dpc(params, pc_value))
    # Inverse functions have reciprocal derivatives
    assert np.isclose(
        BrooksCorey.dsw_dpc(params, pc_value) * BrooksCorey.dpc_dsw(params, swe),
        1.0,
    )


def test_relative_permeabilities(params):
    assert np.isclose(BrooksCorey.krw(params, 0.5), 0.5**4)
    assert np.isclose(BrooksCorey.krn(params, 0.5), 0.25 * 0.75)

    assert BrooksCorey.krw(params, 0.0) == 0 and BrooksCorey.krw(params, 1.0) == 1
    assert BrooksCorey.krn(params, 0.0) == 1 and BrooksCorey.krn(params, 1.0) == 0


def test_relative_permeability_derivatives(params):
    (s,) = init_evaluations([0.5])
    krw = BrooksCorey.krw(params, s)
    assert np.isclose(krw.derivative(0), 4 * 0.5**3)

    krn = BrooksCorey.krn(params, s)
    # d/ds (1 - s)^2 (1 - s^2) = -2 (1 - s) (1 - s^2) - 2 s (1 - s)^2
    assert np.isclose(krn.derivative(0), -2 * 0.5 * 0.75 - 2 * 0.5 * 0.25)


def test_zero_saturation_with_ad(params):
    (s,) = init_evaluations([0.0])
    pc = BrooksCorey.pc(params, s)
    assert np.isinf(pc.value)
    assert not np.any(np.isnan(pc.derivatives))


@pytest.mark.parametrize("swe", [-0.1, 1.1])
def test_saturation_out_of_range(params, swe):
    with pytest.raises(AssertionError):
        BrooksCorey.pc(params, swe)
    with pytest.raises(AssertionError):
        BrooksCorey.krw(params, swe)


def test_negative_capillary_pressure(params):
    with pytest.raises(AssertionError):
        BrooksCorey.sw(params, -1.0)
