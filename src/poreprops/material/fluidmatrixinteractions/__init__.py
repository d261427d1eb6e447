"""Relations between saturation, capillary pressure and relative permeability of two
fluid phases in a porous medium."""

from .brooks_corey import BrooksCorey, BrooksCoreyParams
from .eff_to_abs_law import EffToAbsLaw, EffToAbsParams
from .van_genuchten import VanGenuchten, VanGenuchtenParams

__all__ = [
    "BrooksCorey",
    "BrooksCoreyParams",
    "EffToAbsLaw",
    "EffToAbsParams",
    "VanGenuchten",
    "VanGenuchtenParams",
]
