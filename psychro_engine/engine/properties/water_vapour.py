"""
Water vapour property equations (superheated / low partial pressure vapour).
"""

import math

import numpy as np

from psychro_engine.config import HEAT_OF_WATER_VAPORIZATION, WATER_VAPOUR_GAS_CONSTANT

_CP_LOW = [-2.7939677238430251e-16, 4.0000000111904223e-05, 1.8429999999889115]
_CP_HIGH = [
    9.8631583006961855e-20,
    -7.0213425618115390e-16,
    2.0703915723982299e-12,
    -3.3653682733422277e-09,
    3.1728684251752865e-06,
    -9.1586611999057584e-04,
    1.9295247225621268,
]


def dynamic_viscosity(ta: float) -> float:
    """Dynamic viscosity in Pa·s (reduced-temperature correlation)."""
    tk = ta + 273.15
    b_aux = 647.27 / tk
    denominator = (
        0.0181583
        + 0.0177624 * b_aux
        + 0.0105287 * b_aux**2
        - 0.0036744 * b_aux**3
    )
    return math.sqrt(tk / 647.27) / denominator * 1.0e-6


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m·K)."""
    return float(np.polyval(
        [-3.1765e-12, 2.59524e-9, -3.23464e-7, 7.69127e-5, 1.74822e-2], ta
    ))


def specific_heat(ta: float) -> float:
    """Isobaric specific heat in kJ/(kg·K). Polynomials are in kelvin."""
    tk = ta + 273.15
    if ta <= -48.15:
        return float(np.polyval(_CP_LOW, tk))
    return float(np.polyval(_CP_HIGH, tk))


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg, including latent heat at 0 °C."""
    return specific_heat(ta) * ta + HEAT_OF_WATER_VAPORIZATION


def density(ta: float, pressure: float) -> float:
    """Density in kg/m³, treating vapour as an ideal gas at `pressure`."""
    return pressure / (WATER_VAPOUR_GAS_CONSTANT * (ta + 273.15))


def kinematic_viscosity(ta: float, rho: float) -> float:
    return dynamic_viscosity(ta) / rho
