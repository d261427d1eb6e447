"""Fluid systems: phases composed of components, with the properties of each phase."""

from .simple_h2o_n2 import SimpleH2ON2FluidSystem

__all__ = ["SimpleH2ON2FluidSystem"]
