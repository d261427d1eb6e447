"""Capillary pressure - saturation relation of Brooks and Corey, with the relative
permeabilities of Burdine's model.

The functions act on the effective saturation of the wetting phase. For the conversion
from absolute saturations, see :class:`~.eff_to_abs_law.EffToAbsLaw`.

"""

from __future__ import annotations

from dataclasses import dataclass

from poreprops.numerics.ad import functions as af

__all__ = ["BrooksCoreyParams", "BrooksCorey"]


@dataclass(frozen=True)
class BrooksCoreyParams:
    """Parameters of the Brooks-Corey relation."""

    pe: float
    """Entry pressure in ``[Pa]``."""

    alpha: float
    """Shape parameter, also known as the pore size distribution index (lambda)."""


class BrooksCorey:
    """Brooks-Corey capillary pressure and relative permeability curves.

    All methods take the parameters and a scalar, which can be a plain number or an
    Evaluation. Arguments outside the physical domain fail an assertion.

    """

    @staticmethod
    def pc(params: BrooksCoreyParams, swe):
        """Capillary pressure ``p_C = p_e S_we^(-1 / alpha)``.

        Parameters:
            params: Parameters of the relation.
            swe: Effective saturation of the wetting phase.

        """
        assert 0 <= swe <= 1

        return params.pe * af.pow(swe, -1.0 / params.alpha)

    @staticmethod
    def sw(params: BrooksCoreyParams, pc):
        """Effective wetting phase saturation ``S_we = (p_C / p_e)^(-alpha)``, the
        inverse of :meth:`pc`.

        The result is clamped to ``[0, 1]``, capillary pressures below the entry
        pressure give full saturation.

        Parameters:
            params: Parameters of the relation.
            pc: Capillary pressure.

        """
        assert pc >= 0

        tmp = af.pow(pc / params.pe, -params.alpha)
        return af.min(af.max(tmp, 0.0), 1.0)

    @staticmethod
    def dpc_dsw(params: BrooksCoreyParams, swe):
        """Derivative of :meth:`pc` with respect to the effective saturation,
        ``-p_e / alpha * S_we^(-1 / alpha - 1)``."""
        assert 0 <= swe <= 1

        return -params.pe / params.alpha * af.pow(swe, -1.0 / params.alpha - 1.0)

    @staticmethod
    def dsw_dpc(params: BrooksCoreyParams, pc):
        """Derivative of :meth:`sw` with respect to the capillary pressure."""
        assert pc >= 0

        return (
            -params.alpha
            / params.pe
            * af.pow(pc / params.pe, -params.alpha - 1.0)
        )

    @staticmethod
    def krw(params: BrooksCoreyParams, swe):
        """Relative permeability of the wetting phase,
        ``S_we^((2 + 3 alpha) / alpha)``."""
        assert 0 <= swe <= 1

        return af.pow(swe, (2.0 + 3.0 * params.alpha) / params.alpha)

    @staticmethod
    def krn(params: BrooksCoreyParams, swe):
        """Relative permeability of the non-wetting phase,
        ``(1 - S_we)^2 (1 - S_we^((2 + alpha) / alpha))``."""
        assert 0 <= swe <= 1

        exponent = (2.0 + params.alpha) / params.alpha
        tmp = 1.0 - swe
        return tmp * tmp * (1.0 - af.pow(swe, exponent))
