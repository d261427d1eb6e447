"""Coefficients describing the interaction of two components: Henry coefficients and
binary diffusion coefficients.

"""

from __future__ import annotations

from typing import Sequence

from poreprops.material.components import N2, SimpleH2O
from poreprops.numerics.ad import functions as af

__all__ = ["henry_iapws", "fuller_method", "H2O_N2"]

# IAPWS (2004), guideline on the Henry's constant and vapor-liquid distribution
# constant for gases in H2O and D2O at high temperatures.
_HENRY_C = (
    1.99274064,
    1.09965342,
    -0.510839303,
    -1.75493479,
    -45.5170352,
    -6.7469445e5,
)
_HENRY_D = (1 / 3, 2 / 3, 5 / 3, 16 / 3, 43 / 3, 110 / 3)
_HENRY_Q = -0.023767


def henry_iapws(E: float, F: float, G: float, H: float, temperature):
    """Henry coefficient in ``[Pa]`` of a gas dissolved in liquid water.

    The IAPWS correlation gives the vapor-liquid distribution constant ``K_D`` (ratio
    of the mole fractions in gas and liquid). Multiplied with the vapor pressure of
    water it becomes the derivative of the partial pressure of the gas with respect to
    its mole fraction in the liquid.

    Parameters:
        E: Gas-specific coefficient of the correlation.
        F: Same as above.
        G: Same as above.
        H: Same as above.
        temperature: Temperature in ``[K]``.

    Returns:
        The Henry coefficient.

    """
    tau = 1.0 - temperature / SimpleH2O.critical_temperature

    f = 0.0
    for c, d in zip(_HENRY_C, _HENRY_D):
        f = f + c * af.pow(tau, d)

    exponent = (
        _HENRY_Q * F
        + E / temperature * f
        + (F + G * af.pow(tau, 2.0 / 3.0) + H * tau)
        * af.exp((273.15 - temperature) / 100.0)
    )
    return af.exp(exponent) * SimpleH2O.vapor_pressure(temperature)


def fuller_method(
    molar_masses: Sequence[float],
    diffusion_volumes: Sequence[float],
    temperature,
    pressure,
):
    """Binary diffusion coefficient in ``[m^2 / s]`` of two gases after Fuller et al.

    Parameters:
        molar_masses: Molar masses of the two components in ``[kg / mol]``.
        diffusion_volumes: Atomic diffusion volumes of the two components.
        temperature: Temperature in ``[K]``.
        pressure: Pressure in ``[Pa]``.

    Returns:
        The diffusion coefficient.

    """
    # The correlation is fitted for [g / mol], [bar] and [cm^2 / s].
    M_ab = 2.0 / (1.0 / (molar_masses[0] * 1e3) + 1.0 / (molar_masses[1] * 1e3))
    tmp = diffusion_volumes[0] ** (1.0 / 3.0) + diffusion_volumes[1] ** (1.0 / 3.0)
    D = (
        1.43e-3
        * af.pow(temperature, 1.75)
        / (pressure * 1e-5 * M_ab**0.5 * tmp * tmp)
    )
    return D * 1e-4


class H2O_N2:
    """Binary coefficients for water and molecular nitrogen."""

    @staticmethod
    def henry(temperature):
        """Henry coefficient in ``[Pa]`` of N2 in liquid water."""
        E = 2388.8777
        F = -14.9593
        G = 42.0179
        H = -29.4396
        return henry_iapws(E, F, G, H, temperature)

    @staticmethod
    def gas_diff_coeff(temperature, pressure):
        """Binary diffusion coefficient in ``[m^2 / s]`` of water vapor and N2."""
        return fuller_method(
            (SimpleH2O.molar_mass, N2.molar_mass), (13.1, 18.5), temperature, pressure
        )

    @staticmethod
    def liquid_diff_coeff(temperature, pressure):
        """Diffusion coefficient in ``[m^2 / s]`` of dissolved N2 in liquid water.

        Scaled linearly in temperature from the value measured at 25 degree Celsius.

        """
        T_exp = 273.15 + 25.0
        D_exp = 2.01e-9
        return D_exp / T_exp * temperature
