"""   poreprops.

Root directory for the poreprops package. Contains the following sub-packages:

numerics: Dense forward-mode automatic differentiation, precision settings and a Newton
    solver operating on AD jacobians.

material: Pure components, binary coefficients, fluid states, fluid systems and
    capillary pressure / relative permeability relations.

utils: Units and physical constants, error classes, logging.


isort:skip_file

"""

import os
from pathlib import Path
import configparser


__version__ = "0.1.0"

# Try to read the config file from the directory where python process was launched
try:
    cwd = Path(os.getcwd())
    pth = cwd / Path("poreprops.cfg")
    cfg = configparser.ConfigParser()
    cfg.read(pth)
    config = {key: dict(section) for key, section in cfg.items()}
except configparser.Error:
    # the assumption is that no valid configurations are given
    config = {}

# ------------------------------------
# Simplified namespaces. The rule of thumb is that classes and modules that a
# user can be exposed to should have a shortcut here.

from poreprops.utils.common_constants import *
from poreprops.utils.types import *
from poreprops.utils.errors import InvalidStateError
from poreprops.utils.logging import time_logger

# Numerics
from poreprops.numerics import precision
from poreprops.numerics import ad
from poreprops.numerics.ad.forward_mode import Evaluation, init_evaluations
from poreprops.numerics.ad.utils import constant, decay, variable
from poreprops.numerics.nonlinear import ConvergenceError, NewtonResult, newton_solve

# Material
from poreprops import material
from poreprops.material.idealgas import IdealGas
from poreprops.material.fluid_state import FluidState
from poreprops.material.components import N2, SimpleH2O
from poreprops.material.binary_coefficients import H2O_N2
from poreprops.material.fluidsystems import SimpleH2ON2FluidSystem
from poreprops.material.fluidmatrixinteractions import (
    BrooksCorey,
    BrooksCoreyParams,
    EffToAbsLaw,
    EffToAbsParams,
    VanGenuchten,
    VanGenuchtenParams,
)
