"""Fluid system with a liquid and a gas phase, composed of water and molecular
nitrogen."""

from __future__ import annotations

import logging

from poreprops.material.binary_coefficients import H2O_N2
from poreprops.material.components import N2, SimpleH2O
from poreprops.material.fluid_state import FluidState
from poreprops.material.idealgas import IdealGas
from poreprops.utils.errors import InvalidStateError
from poreprops.utils.logging import time_logger

__all__ = ["SimpleH2ON2FluidSystem"]

logger = logging.getLogger(__name__)

module_sections = ["material"]


class SimpleH2ON2FluidSystem:
    """Water and molecular nitrogen in a liquid and a gas phase.

    Both components are present in both phases. The liquid phase is the wetting phase.
    Liquid properties are those of pure water, the gas is an ideal mixture of ideal
    gases.

    Every property is a function of the phase (and component) index, temperature,
    pressure and, where the composition matters, a :class:`FluidState`. Indices which
    are not defined raise an :class:`~poreprops.utils.errors.InvalidStateError`.

    """

    H2O = SimpleH2O
    N2 = N2

    num_components: int = 2
    num_phases: int = 2

    l_phase_idx: int = 0
    """Index of the liquid phase."""
    g_phase_idx: int = 1
    """Index of the gas phase."""

    w_phase_idx: int = l_phase_idx
    """Index of the wetting phase."""
    n_phase_idx: int = g_phase_idx
    """Index of the non-wetting phase."""

    H2O_idx: int = 0
    N2_idx: int = 1

    def __init__(self) -> None:
        self.components = (self.H2O, self.N2)
        logger.debug(
            f"Initialized fluid system with components {self.component_names()}."
        )

    def _check_phase(self, phase_idx: int) -> None:
        if phase_idx not in (self.l_phase_idx, self.g_phase_idx):
            raise InvalidStateError(f"Invalid phase index {phase_idx}")

    def _component(self, comp_idx: int):
        if comp_idx not in (self.H2O_idx, self.N2_idx):
            raise InvalidStateError(f"Invalid component index {comp_idx}")
        return self.components[comp_idx]

    def component_names(self) -> list[str]:
        return [comp.name for comp in self.components]

    def component_name(self, comp_idx: int) -> str:
        """Human readable name of a component."""
        return self._component(comp_idx).name

    def molar_mass(self, comp_idx: int) -> float:
        """Molar mass of a component in ``[kg / mol]``."""
        return self._component(comp_idx).molar_mass

    def create_fluid_state(self) -> FluidState:
        """An empty fluid state with the molar masses of this system."""
        return FluidState(
            molar_masses=[comp.molar_mass for comp in self.components],
            num_phases=self.num_phases,
        )

    def compute_partial_pressures(
        self, temperature, pg, fluid_state: FluidState
    ) -> None:
        """Assign the partial pressures ``p_c = pg * x_gc`` of both components to the
        fluid state, assuming ideal gases.

        Parameters:
            temperature: Temperature in ``[K]``.
            pg: Pressure of the gas phase in ``[Pa]``.
            fluid_state: Fluid state with the mole fractions of the gas phase. Its
                partial pressures are modified.

        """
        for comp_idx in (self.H2O_idx, self.N2_idx):
            fluid_state.set_partial_pressure(
                comp_idx, pg * fluid_state.mole_frac(self.g_phase_idx, comp_idx)
            )

    @time_logger(sections=module_sections)
    def phase_density(self, phase_idx: int, temperature, pressure, fluid_state):
        """Density of a phase in ``[kg / m^3]``.

        The gas density is the ideal gas density for the mean molar mass of the gas
        phase.

        """
        self._check_phase(phase_idx)
        if phase_idx == self.l_phase_idx:
            return self.H2O.liquid_density(temperature, pressure)

        mean_molar_mass = fluid_state.mean_molar_mass(self.g_phase_idx)
        return IdealGas.density(mean_molar_mass, temperature, pressure)

    @time_logger(sections=module_sections)
    def phase_viscosity(self, phase_idx: int, temperature, pressure, fluid_state):
        """Dynamic viscosity of a phase in ``[Pa s]``, assuming pure water in the
        liquid and pure nitrogen in the gas."""
        self._check_phase(phase_idx)
        if phase_idx == self.l_phase_idx:
            return self.H2O.liquid_viscosity(temperature, pressure)
        return self.N2.gas_viscosity(temperature, pressure)

    def degas_pressure(self, comp_idx: int, temperature, pressure):
        """Derivative of the partial pressure of a component in the gas with respect
        to its mole fraction in the liquid, in ``[Pa]``.

        For traces in a solvent this is the Henry coefficient of the solute and the
        vapor pressure of the solvent.

        """
        component = self._component(comp_idx)
        if comp_idx == self.H2O_idx:
            return component.vapor_pressure(temperature)
        return H2O_N2.henry(temperature)

    def component_density(self, phase_idx: int, comp_idx: int, temperature, pressure):
        """Density of a pure component in a phase in ``[kg / m^3]``.

        Raises:
            NotImplementedError: For liquid nitrogen.

        """
        self._check_phase(phase_idx)
        component = self._component(comp_idx)
        if phase_idx == self.l_phase_idx:
            return component.liquid_density(temperature, pressure)
        return component.gas_density(temperature, pressure)

    def component_pressure(self, phase_idx: int, comp_idx: int, temperature, density):
        """Pressure of a pure component in a phase at a given density, in ``[Pa]``.

        Raises:
            NotImplementedError: For the liquid phase.

        """
        self._check_phase(phase_idx)
        component = self._component(comp_idx)
        if phase_idx == self.l_phase_idx:
            return component.liquid_pressure(temperature, density)
        return component.gas_pressure(temperature, density)

    @time_logger(sections=module_sections)
    def diff_coeff(
        self,
        phase_idx: int,
        comp_i_idx: int,
        comp_j_idx: int,
        temperature,
        pressure,
        fluid_state,
    ):
        """Binary diffusion coefficient of two components in a phase, in
        ``[m^2 / s]``.

        The coefficient is symmetric in the components.

        Raises:
            InvalidStateError: If the indices do not denote the pair H2O-N2.

        """
        self._check_phase(phase_idx)
        self._component(comp_i_idx)
        self._component(comp_j_idx)
        if comp_i_idx > comp_j_idx:
            comp_i_idx, comp_j_idx = comp_j_idx, comp_i_idx

        if (comp_i_idx, comp_j_idx) != (self.H2O_idx, self.N2_idx):
            raise InvalidStateError(
                f"Binary diffusion coefficient of components {comp_i_idx} and"
                + f" {comp_j_idx} in phase {phase_idx} is undefined."
            )
        if phase_idx == self.l_phase_idx:
            return H2O_N2.liquid_diff_coeff(temperature, pressure)
        return H2O_N2.gas_diff_coeff(temperature, pressure)

    @time_logger(sections=module_sections)
    def phase_enthalpy(
        self, phase_idx: int, temperature, pressure, fluid_state: FluidState
    ):
        """Specific enthalpy of a phase in ``[J / kg]``.

        The liquid enthalpy is that of pure water. The gas enthalpy is the mass
        fraction weighted sum of the component enthalpies, each evaluated at the
        partial pressure of the component.

        """
        self._check_phase(phase_idx)
        if phase_idx == self.l_phase_idx:
            return self.H2O.liquid_enthalpy(temperature, pressure)

        result = 0.0
        for comp_idx, component in enumerate(self.components):
            result = result + component.gas_enthalpy(
                temperature, fluid_state.partial_pressure(comp_idx)
            ) * fluid_state.mass_frac(self.g_phase_idx, comp_idx)
        return result

    @time_logger(sections=module_sections)
    def phase_internal_energy(
        self, phase_idx: int, temperature, pressure, fluid_state: FluidState
    ):
        """Specific internal energy of a phase in ``[J / kg]``, ``u = h - p / rho``."""
        h = self.phase_enthalpy(phase_idx, temperature, pressure, fluid_state)
        if phase_idx == self.l_phase_idx:
            return h - pressure / self.phase_density(
                phase_idx, temperature, pressure, fluid_state
            )
        # p / rho == R T / M for an ideal gas
        return h - IdealGas.R * temperature / fluid_state.mean_molar_mass(phase_idx)

    @time_logger(sections=module_sections)
    def equilibrium_mole_fractions(self, temperature, pressure):
        """Mole fractions of both phases at equilibrium.

        Water follows Raoult's law with its vapor pressure, nitrogen follows Henry's
        law. With the liquid mole fractions summing up to one and the partial
        pressures summing up to ``pressure``, the liquid mole fraction of nitrogen is
        ``(p - p_vap) / (H - p_vap)``.

        Parameters:
            temperature: Temperature in ``[K]``.
            pressure: Gas pressure in ``[Pa]``.

        Returns:
            Mole fractions of the liquid and of the gas phase, each as a list indexed
            by component.

        """
        p_vap = self.degas_pressure(self.H2O_idx, temperature, pressure)
        henry = self.degas_pressure(self.N2_idx, temperature, pressure)

        x_l_n2 = (pressure - p_vap) / (henry - p_vap)
        x_l_h2o = 1.0 - x_l_n2
        x_g_h2o = x_l_h2o * p_vap / pressure
        x_g_n2 = x_l_n2 * henry / pressure

        # Components are ordered H2O, N2
        return [x_l_h2o, x_l_n2], [x_g_h2o, x_g_n2]
