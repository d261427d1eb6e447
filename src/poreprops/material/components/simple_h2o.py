"""Simplified water with constant liquid properties."""

from __future__ import annotations

from poreprops.material.idealgas import IdealGas
from poreprops.numerics.ad import functions as af
from poreprops.numerics.ad.utils import constant_like

from .base import Component

__all__ = ["SimpleH2O"]

# IAPWS-IF97, region 4 (saturation line)
_N_REGION_4 = (
    0.11670521452767e4,
    -0.72421316703206e6,
    -0.17073846940092e2,
    0.12020824702470e5,
    -0.32325550322333e7,
    0.14915108613530e2,
    -0.48232657361591e4,
    0.40511340542057e6,
    -0.23855557567849,
    0.65017534844798e3,
)


class SimpleH2O(Component):
    """Water as an incompressible liquid and an ideal gas.

    Density and viscosity of the liquid are constant, enthalpies are linear in
    temperature with constant heat capacities. Only the vapor pressure follows an
    accurate correlation (IAPWS-IF97).

    """

    name = "H2O"
    molar_mass = 18e-3
    critical_temperature = 647.096
    critical_pressure = 22.064e6
    triple_temperature = 273.16
    triple_pressure = 611.657

    reference_temperature: float = 293.15
    """Temperature in ``[K]`` at which the liquid enthalpy is zero."""

    liquid_heat_capacity: float = 4180.0
    """Isobaric heat capacity of the liquid in ``[J / (kg K)]``."""

    gas_heat_capacity: float = 2.08e3
    """Isobaric heat capacity of the vapor in ``[J / (kg K)]``."""

    vaporization_enthalpy: float = 2.453e6
    """Enthalpy of vaporization in ``[J / kg]`` at :attr:`reference_temperature`."""

    @classmethod
    def vapor_pressure(cls, temperature):
        """Vapor pressure in ``[Pa]`` on the saturation line of IAPWS-IF97.

        Above the critical temperature the critical pressure is returned, below the
        triple point zero.

        """
        if temperature > cls.critical_temperature:
            return constant_like(cls.critical_pressure, temperature)
        if temperature < cls.triple_temperature:
            return constant_like(0.0, temperature)

        n = _N_REGION_4
        sigma = temperature + n[8] / (temperature - n[9])
        A = (sigma + n[0]) * sigma + n[1]
        B = (n[2] * sigma + n[3]) * sigma + n[4]
        C = (n[5] * sigma + n[6]) * sigma + n[7]

        tmp = 2.0 * C / (af.sqrt(B * B - 4.0 * A * C) - B)
        tmp = tmp * tmp
        tmp = tmp * tmp
        return 1e6 * tmp

    @classmethod
    def gas_density(cls, temperature, pressure):
        return IdealGas.density(cls.molar_mass, temperature, pressure)

    @classmethod
    def liquid_density(cls, temperature, pressure):
        return constant_like(1000.0, temperature, pressure)

    @classmethod
    def gas_pressure(cls, temperature, density):
        return IdealGas.pressure(temperature, density / cls.molar_mass)

    @classmethod
    def liquid_pressure(cls, temperature, density):
        raise NotImplementedError(
            "The liquid pressure is undefined for incompressible water."
        )

    @classmethod
    def gas_enthalpy(cls, temperature, pressure):
        return (
            cls.gas_heat_capacity * (temperature - cls.reference_temperature)
            + cls.vaporization_enthalpy
        )

    @classmethod
    def liquid_enthalpy(cls, temperature, pressure):
        return cls.liquid_heat_capacity * (temperature - cls.reference_temperature)

    @classmethod
    def gas_internal_energy(cls, temperature, pressure):
        # p / rho = R T / M for an ideal gas
        return (
            cls.gas_enthalpy(temperature, pressure)
            - IdealGas.R * temperature / cls.molar_mass
        )

    @classmethod
    def liquid_internal_energy(cls, temperature, pressure):
        return cls.liquid_enthalpy(temperature, pressure) - pressure / cls.liquid_density(
            temperature, pressure
        )

    @classmethod
    def gas_viscosity(cls, temperature, pressure):
        return constant_like(1e-5, temperature, pressure)

    @classmethod
    def liquid_viscosity(cls, temperature, pressure):
        return constant_like(1e-3, temperature, pressure)
