"""Container for the thermodynamic state of a multi-phase, multi-component fluid at a
single point.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = ["FluidState"]


def _zeros(rows: int, cols: int) -> list[list[Any]]:
    return [[0.0] * cols for _ in range(rows)]


@dataclass
class FluidState:
    """Thermodynamic state of a fluid at one point.

    Entries can be plain numbers or Evaluations. Fractions are stored per phase and
    component, ``mole_fractions[phase][component]``.

    Parameters:
        molar_masses: Molar mass of each component in ``[kg / mol]``. Defines the
            number of components.
        num_phases: ``default=2`` Number of phases.

    """

    molar_masses: Sequence[float]
    num_phases: int = 2

    temperature: Any = 0.0
    """Temperature in ``[K]``, equal in all phases."""

    pressures: list[Any] = field(default_factory=list)
    """Pressure per phase in ``[Pa]``."""

    saturations: list[Any] = field(default_factory=list)
    """Saturation per phase."""

    mole_fractions: list[list[Any]] = field(default_factory=list)
    """Mole fraction of each component in each phase."""

    partial_pressures: list[Any] = field(default_factory=list)
    """Partial pressure of each component in the gas phase in ``[Pa]``."""

    def __post_init__(self) -> None:
        nphase, ncomp = self.num_phases, self.num_components
        if not self.pressures:
            self.pressures = [0.0] * nphase
        if not self.saturations:
            self.saturations = [0.0] * nphase
        if not self.mole_fractions:
            self.mole_fractions = _zeros(nphase, ncomp)
        if not self.partial_pressures:
            self.partial_pressures = [0.0] * ncomp

        if len(self.pressures) != nphase or len(self.saturations) != nphase:
            raise ValueError(f"Expecting pressures and saturations of {nphase} phases.")
        if len(self.mole_fractions) != nphase or any(
            len(x) != ncomp for x in self.mole_fractions
        ):
            raise ValueError(f"Expecting mole fractions of shape ({nphase}, {ncomp}).")
        if len(self.partial_pressures) != ncomp:
            raise ValueError(f"Expecting partial pressures of {ncomp} components.")

    @property
    def num_components(self) -> int:
        return len(self.molar_masses)

    def mole_frac(self, phase_idx: int, comp_idx: int):
        return self.mole_fractions[phase_idx][comp_idx]

    def set_mole_frac(self, phase_idx: int, comp_idx: int, value) -> None:
        self.mole_fractions[phase_idx][comp_idx] = value

    def partial_pressure(self, comp_idx: int):
        return self.partial_pressures[comp_idx]

    def set_partial_pressure(self, comp_idx: int, value) -> None:
        self.partial_pressures[comp_idx] = value

    def mean_molar_mass(self, phase_idx: int):
        """Mole fraction weighted average of the molar masses in a phase, in
        ``[kg / mol]``."""
        result = 0.0
        for x, M in zip(self.mole_fractions[phase_idx], self.molar_masses):
            result = result + x * M
        return result

    def mass_frac(self, phase_idx: int, comp_idx: int):
        """Mass fraction of a component in a phase, computed from the mole
        fractions."""
        return (
            self.mole_fractions[phase_idx][comp_idx]
            * self.molar_masses[comp_idx]
            / self.mean_molar_mass(phase_idx)
        )
