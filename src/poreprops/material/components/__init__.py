"""Pure chemical components and their thermodynamic properties."""

from .base import Component
from .n2 import N2
from .simple_h2o import SimpleH2O

__all__ = ["Component", "N2", "SimpleH2O"]
