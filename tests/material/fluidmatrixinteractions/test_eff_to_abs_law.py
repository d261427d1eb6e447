"""Tests of the conversion between effective and absolute saturations."""
from __future__ import annotations

import numpy as np
import pytest

from poreprops.material.fluidmatrixinteractions import (
    BrooksCorey,
    BrooksCoreyParams,
    EffToAbsLaw,
    EffToAbsParams,
    VanGenuchten,
    VanGenuchtenParams,
)
from poreprops.numerics.ad.forward_mode import init_evaluations


@pytest.fixture
def params() -> EffToAbsParams:
    return EffToAbsParams(BrooksCoreyParams(pe=1000.0, alpha=2.0), swr=0.1, snr=0.1)


@pytest.fixture
def law() -> EffToAbsLaw:
    return EffToAbsLaw(BrooksCorey)


def test_saturation_conversion(params):
    assert np.isclose(EffToAbsLaw.sw_to_swe(params, 0.5), 0.5)
    assert np.isclose(EffToAbsLaw.sw_to_swe(params, 0.1), 0.0)
    assert np.isclose(EffToAbsLaw.sw_to_swe(params, 0.9), 1.0)
    for sw in [0.1, 0.3, 0.75]:
        swe = EffToAbsLaw.sw_to_swe(params, sw)
        assert np.isclose(EffToAbsLaw.swe_to_sw(params, swe), sw)


def test_wraps_effective_law(law, params):
    bc_params = params.law_params
    # sw = 0.3 corresponds to swe = 0.25
    assert np.isclose(law.pc(params, 0.3), BrooksCorey.pc(bc_params, 0.25))
    assert np.isclose(law.krw(params, 0.3), BrooksCorey.krw(bc_params, 0.25))
    assert np.isclose(law.krn(params, 0.3), BrooksCorey.krn(bc_params, 0.25))
    assert np.isclose(law.sw(params, law.pc(params, 0.3)), 0.3)


def test_derivatives(law, params):
    assert np.isclose(law.dpc_dsw(params, 0.5), -1000 * np.sqrt(2) / 0.8)

    (sw,) = init_evaluations([0.5])
    assert np.isclose(law.pc(params, sw).derivative(0), law.dpc_dsw(params, 0.5))

    pc_value = law.pc(params, 0.5)
    (pc,) = init_evaluations([pc_value])
    assert np.isclose(law.sw(params, pc).derivative(0), law.dsw_dpc(params, pc_value))


def test_no_residual_saturations():
    vg_params = VanGenuchtenParams(vg_alpha=1e-3, vg_n=3.0)
    params = EffToAbsParams(vg_params)
    law = EffToAbsLaw(VanGenuchten)
    assert params.swr == 0 and params.snr == 0
    assert np.isclose(law.pc(params, 0.4), VanGenuchten.pc(vg_params, 0.4))
    assert np.isclose(law.dsw_dpc(params, 500.0), VanGenuchten.dsw_dpc(vg_params, 500.0))


def test_saturation_below_residual(law, params):
    with pytest.raises(AssertionError):
        law.pc(params, 0.05)
