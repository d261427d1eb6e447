"""Interface of pure components."""

from __future__ import annotations

__all__ = ["Component"]


class Component:
    """Base class for pure chemical components.

    Components are stateless: constants are class attributes and properties are
    class methods of temperature and pressure (or density). All properties accept
    plain numbers and Evaluations. If an argument is an Evaluation, so is the result,
    also where the property is constant.

    Properties which are not provided by a derived class raise a
    ``NotImplementedError`` naming the component and the property.

    """

    name: str = "unnamed_component"
    """Human readable name of the component."""

    molar_mass: float
    """Molar mass in ``[kg / mol]``."""

    critical_temperature: float
    """Critical temperature in ``[K]``."""

    critical_pressure: float
    """Critical pressure in ``[Pa]``."""

    triple_temperature: float
    """Temperature at the triple point in ``[K]``."""

    triple_pressure: float
    """Pressure at the triple point in ``[Pa]``."""

    @classmethod
    def _not_available(cls, prop: str) -> NotImplementedError:
        return NotImplementedError(f"{prop} is not available for component {cls.name}.")

    @classmethod
    def vapor_pressure(cls, temperature):
        """Vapor pressure in ``[Pa]`` of the pure component."""
        raise cls._not_available("Vapor pressure")

    @classmethod
    def gas_density(cls, temperature, pressure):
        """Density in ``[kg / m^3]`` of the gaseous component."""
        raise cls._not_available("Gas density")

    @classmethod
    def liquid_density(cls, temperature, pressure):
        """Density in ``[kg / m^3]`` of the liquid component."""
        raise cls._not_available("Liquid density")

    @classmethod
    def gas_pressure(cls, temperature, density):
        """Pressure in ``[Pa]`` of the gaseous component at the given density."""
        raise cls._not_available("Gas pressure")

    @classmethod
    def liquid_pressure(cls, temperature, density):
        """Pressure in ``[Pa]`` of the liquid component at the given density."""
        raise cls._not_available("Liquid pressure")

    @classmethod
    def gas_enthalpy(cls, temperature, pressure):
        """Specific enthalpy in ``[J / kg]`` of the gaseous component."""
        raise cls._not_available("Gas enthalpy")

    @classmethod
    def liquid_enthalpy(cls, temperature, pressure):
        """Specific enthalpy in ``[J / kg]`` of the liquid component."""
        raise cls._not_available("Liquid enthalpy")

    @classmethod
    def gas_internal_energy(cls, temperature, pressure):
        """Specific internal energy in ``[J / kg]`` of the gaseous component."""
        raise cls._not_available("Gas internal energy")

    @classmethod
    def liquid_internal_energy(cls, temperature, pressure):
        """Specific internal energy in ``[J / kg]`` of the liquid component."""
        raise cls._not_available("Liquid internal energy")

    @classmethod
    def gas_viscosity(cls, temperature, pressure):
        """Dynamic viscosity in ``[Pa s]`` of the gaseous component."""
        raise cls._not_available("Gas viscosity")

    @classmethod
    def liquid_viscosity(cls, temperature, pressure):
        """Dynamic viscosity in ``[Pa s]`` of the liquid component."""
        raise cls._not_available("Liquid viscosity")
