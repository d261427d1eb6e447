"""
The module gives access to a set of unified units and physical constants.

To access the quantities, invoke pp.KEY.

All quantities are given in base SI units, i.e. a value multiplied with a unit
constant is converted to SI. Temperatures are an exception, see
:func:`CELSIUS_to_KELVIN`.

"""

__all__ = [
    "MILLI",
    "KILO",
    "MEGA",
    "SECOND",
    "KILOGRAM",
    "GRAM",
    "METER",
    "CENTIMETER",
    "MOLE",
    "PASCAL",
    "BAR",
    "ATMOSPHERIC_PRESSURE",
    "GRAVITY_ACCELERATION",
    "CELSIUS",
    "ZERO_CELSIUS_IN_KELVIN",
    "CELSIUS_to_KELVIN",
    "KELVIN_to_CELSIUS",
    "JOULE",
]

""" Units """
# SI Prefixes
MILLI = 1e-3
CENTI = 1e-2
KILO = 1e3
MEGA = 1e6

# Time
SECOND = 1.0

# Weight
KILOGRAM = 1.0
GRAM = 1e-3 * KILOGRAM

# Amount of substance
MOLE = 1.0

# Length
METER = 1.0
CENTIMETER = CENTI * METER

# Pressure related quantities
PASCAL = 1.0
BAR = 100000 * PASCAL
ATMOSPHERIC_PRESSURE = 101325 * PASCAL

GRAVITY_ACCELERATION = 9.80665 * METER / SECOND**2

# Energy
JOULE = KILOGRAM * METER**2 / SECOND**2

# Temperature
CELSIUS = 1.0
ZERO_CELSIUS_IN_KELVIN = 273.15


def CELSIUS_to_KELVIN(celsius):
    return celsius + ZERO_CELSIUS_IN_KELVIN


def KELVIN_to_CELSIUS(kelvin):
    return kelvin - ZERO_CELSIUS_IN_KELVIN
