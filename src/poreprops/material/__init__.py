"""Material laws for porous media flow.

The sub-package contains pure components (:mod:`~poreprops.material.components`),
binary coefficients of component pairs
(:mod:`~poreprops.material.binary_coefficients`), fluid systems combining components
to phases (:mod:`~poreprops.material.fluidsystems`) and the relations between
saturations, capillary pressure and relative permeabilities
(:mod:`~poreprops.material.fluidmatrixinteractions`).

All correlations accept plain numbers or
:class:`~poreprops.numerics.ad.forward_mode.Evaluation` instances. Units are SI
throughout, temperatures are given in Kelvin.

"""

from . import (
    binary_coefficients,
    components,
    fluid_state,
    fluidmatrixinteractions,
    fluidsystems,
    idealgas,
)
