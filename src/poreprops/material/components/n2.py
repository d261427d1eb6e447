"""Molecular nitrogen."""

from __future__ import annotations

from poreprops.material.idealgas import IdealGas
from poreprops.numerics.ad import functions as af
from poreprops.numerics.ad.utils import constant_like

from .base import Component

__all__ = ["N2"]


class N2(Component):
    """Molecular nitrogen as an ideal gas.

    Liquid properties are not available.

    """

    name = "N2"
    molar_mass = 28.0134e-3
    critical_temperature = 126.192
    critical_pressure = 3.39858e6
    triple_temperature = 63.151
    triple_pressure = 12.523e3

    critical_volume: float = 90.1
    """Critical molar volume in ``[cm^3 / mol]``, as used by the viscosity
    correlation."""

    acentric_factor: float = 0.037

    @classmethod
    def vapor_pressure(cls, temperature):
        """Vapor pressure in ``[Pa]`` from the ancillary equation of Span et al. (2000).

        Above the critical temperature the critical pressure is returned, below the
        triple point zero.

        """
        if temperature > cls.critical_temperature:
            return constant_like(cls.critical_pressure, temperature)
        if temperature < cls.triple_temperature:
            return constant_like(0.0, temperature)

        sigma = 1.0 - temperature / cls.critical_temperature
        exponent = (
            -6.12445284 * sigma
            + 1.26327220 * af.pow(sigma, 1.5)
            - 0.765910082 * af.pow(sigma, 2.5)
            - 1.77570564 * af.pow(sigma, 5.0)
        ) * (cls.critical_temperature / temperature)
        return cls.critical_pressure * af.exp(exponent)

    @classmethod
    def gas_density(cls, temperature, pressure):
        return IdealGas.density(cls.molar_mass, temperature, pressure)

    @classmethod
    def gas_pressure(cls, temperature, density):
        return IdealGas.pressure(temperature, density / cls.molar_mass)

    @classmethod
    def gas_enthalpy(cls, temperature, pressure):
        """Specific enthalpy in ``[J / kg]``, the integral of the isobaric heat
        capacity polynomial of Reid et al. (1987) from 0 K."""
        cp_a = 31.15
        cp_b = -0.01357
        cp_c = 2.680e-5
        cp_d = -1.168e-8
        T = temperature
        return (
            T * (cp_a + T * (cp_b / 2 + T * (cp_c / 3 + T * (cp_d / 4))))
            / cls.molar_mass
        )

    @classmethod
    def gas_internal_energy(cls, temperature, pressure):
        return (
            cls.gas_enthalpy(temperature, pressure)
            - IdealGas.R * temperature / cls.molar_mass
        )

    @classmethod
    def gas_viscosity(cls, temperature, pressure):
        """Dynamic viscosity in ``[Pa s]`` after the method of Chung et al., for a
        non-polar gas at low pressure."""
        f_c = 1.0 - 0.2756 * cls.acentric_factor
        t_star = 1.2593 * temperature / cls.critical_temperature
        omega_v = (
            1.16145 * af.pow(t_star, -0.14874)
            + 0.52487 * af.exp(-0.77320 * t_star)
            + 2.16178 * af.exp(-2.43787 * t_star)
        )
        # molar mass in [g / mol], result in micropoise
        mu = (
            40.785
            * f_c
            * af.sqrt(cls.molar_mass * 1e3 * temperature)
            / (cls.critical_volume ** (2.0 / 3.0) * omega_v)
        )
        return mu * 1e-7
