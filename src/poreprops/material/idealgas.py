"""Relations of the ideal gas law."""

from __future__ import annotations

__all__ = ["IdealGas"]


class IdealGas:
    """Ideal gas law ``p V = n R T``."""

    R: float = 8.314472
    """Universal gas constant in ``[J / (mol K)]``."""

    @classmethod
    def density(cls, avg_molar_mass, temperature, pressure):
        """Mass density in ``[kg / m^3]`` of an ideal gas with the given mean molar
        mass in ``[kg / mol]``."""
        return pressure * avg_molar_mass / (cls.R * temperature)

    @classmethod
    def pressure(cls, temperature, rho_molar):
        """Pressure in ``[Pa]`` of an ideal gas with molar density ``rho_molar`` in
        ``[mol / m^3]``."""
        return cls.R * temperature * rho_molar

    @classmethod
    def concentration(cls, temperature, pressure):
        """Molar density in ``[mol / m^3]``."""
        return pressure / (cls.R * temperature)
