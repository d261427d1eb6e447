"""Adapter turning a material law of effective saturations into one of absolute
saturations, given the residual saturations of both phases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["EffToAbsParams", "EffToAbsLaw"]


@dataclass(frozen=True)
class EffToAbsParams:
    """Parameters of the wrapped law and the residual saturations."""

    law_params: Any
    """Parameters of the law acting on effective saturations."""

    swr: float = 0.0
    """Residual saturation of the wetting phase."""

    snr: float = 0.0
    """Residual saturation of the non-wetting phase."""


class EffToAbsLaw:
    """Material law in absolute saturations.

    The effective wetting saturation is ``S_we = (S_w - S_wr) / (1 - S_wr - S_nr)``.
    Capillary pressures and relative permeabilities are those of the wrapped law at
    ``S_we``. Derivatives with respect to the saturation are scaled accordingly.

    Parameters:
        law: A law of effective saturations, e.g.
            :class:`~.brooks_corey.BrooksCorey` or
            :class:`~.van_genuchten.VanGenuchten`.

    Example:
        >>> law = EffToAbsLaw(BrooksCorey)
        >>> params = EffToAbsParams(BrooksCoreyParams(pe=1e3, alpha=2), swr=0.1)
        >>> law.pc(params, 0.5)

    """

    def __init__(self, law) -> None:
        self.law = law

    @staticmethod
    def sw_to_swe(params: EffToAbsParams, sw):
        """Effective saturation of the wetting phase."""
        return (sw - params.swr) / (1.0 - params.swr - params.snr)

    @staticmethod
    def swe_to_sw(params: EffToAbsParams, swe):
        """Absolute saturation of the wetting phase."""
        return swe * (1.0 - params.swr - params.snr) + params.swr

    @staticmethod
    def dswe_dsw(params: EffToAbsParams) -> float:
        return 1.0 / (1.0 - params.swr - params.snr)

    def pc(self, params: EffToAbsParams, sw):
        return self.law.pc(params.law_params, self.sw_to_swe(params, sw))

    def sw(self, params: EffToAbsParams, pc):
        return self.swe_to_sw(params, self.law.sw(params.law_params, pc))

    def dpc_dsw(self, params: EffToAbsParams, sw):
        return self.law.dpc_dsw(
            params.law_params, self.sw_to_swe(params, sw)
        ) * self.dswe_dsw(params)

    def dsw_dpc(self, params: EffToAbsParams, pc):
        return self.law.dsw_dpc(params.law_params, pc) / self.dswe_dsw(params)

    def krw(self, params: EffToAbsParams, sw):
        return self.law.krw(params.law_params, self.sw_to_swe(params, sw))

    def krn(self, params: EffToAbsParams, sw):
        return self.law.krn(params.law_params, self.sw_to_swe(params, sw))
