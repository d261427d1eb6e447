"""Capillary pressure - saturation relation of van Genuchten, with the relative
permeabilities of Mualem's model."""

from __future__ import annotations

from dataclasses import dataclass

from poreprops.numerics.ad import functions as af

__all__ = ["VanGenuchtenParams", "VanGenuchten"]


@dataclass(frozen=True)
class VanGenuchtenParams:
    """Parameters of the van Genuchten relation."""

    vg_alpha: float
    """Inverse of the characteristic capillary pressure in ``[1 / Pa]``."""

    vg_n: float
    """Shape parameter, greater than one."""

    @property
    def vg_m(self) -> float:
        """Shape parameter ``m = 1 - 1 / n`` of Mualem's model."""
        return 1.0 - 1.0 / self.vg_n


class VanGenuchten:
    """van Genuchten capillary pressure and relative permeability curves, as functions
    of the effective wetting phase saturation."""

    @staticmethod
    def pc(params: VanGenuchtenParams, swe):
        """Capillary pressure ``(S_we^(-1/m) - 1)^(1/n) / alpha``."""
        assert 0 <= swe <= 1

        return (
            af.pow(af.pow(swe, -1.0 / params.vg_m) - 1.0, 1.0 / params.vg_n)
            / params.vg_alpha
        )

    @staticmethod
    def sw(params: VanGenuchtenParams, pc):
        """Effective wetting phase saturation ``((alpha p_C)^n + 1)^(-m)``, clamped to
        ``[0, 1]``."""
        assert pc >= 0

        tmp = af.pow(af.pow(params.vg_alpha * pc, params.vg_n) + 1.0, -params.vg_m)
        return af.min(af.max(tmp, 0.0), 1.0)

    @staticmethod
    def dpc_dsw(params: VanGenuchtenParams, swe):
        assert 0 <= swe <= 1

        n, m = params.vg_n, params.vg_m
        return (
            -1.0
            / (params.vg_alpha * n * m)
            * af.pow(af.pow(swe, -1.0 / m) - 1.0, 1.0 / n - 1.0)
            * af.pow(swe, -1.0 / m - 1.0)
        )

    @staticmethod
    def dsw_dpc(params: VanGenuchtenParams, pc):
        assert pc >= 0

        n, m = params.vg_n, params.vg_m
        alpha_pc = params.vg_alpha * pc
        return (
            -params.vg_alpha
            * n
            * m
            * af.pow(alpha_pc, n - 1.0)
            * af.pow(af.pow(alpha_pc, n) + 1.0, -m - 1.0)
        )

    @staticmethod
    def krw(params: VanGenuchtenParams, swe):
        """Relative permeability of the wetting phase,
        ``sqrt(S_we) (1 - (1 - S_we^(1/m))^m)^2``."""
        assert 0 <= swe <= 1

        m = params.vg_m
        r = 1.0 - af.pow(1.0 - af.pow(swe, 1.0 / m), m)
        return af.sqrt(swe) * r * r

    @staticmethod
    def krn(params: VanGenuchtenParams, swe):
        """Relative permeability of the non-wetting phase,
        ``(1 - S_we)^(1/3) (1 - S_we^(1/m))^(2m)``."""
        assert 0 <= swe <= 1

        m = params.vg_m
        return af.pow(1.0 - swe, 1.0 / 3.0) * af.pow(
            1.0 - af.pow(swe, 1.0 / m), 2.0 * m
        )
