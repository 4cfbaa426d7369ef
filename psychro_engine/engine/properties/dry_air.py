"""
Dry air property equations.

Correlations valid roughly from -100 °C to 200 °C at near-atmospheric
pressures. Temperature arguments are in °C, pressure in Pa.
"""

import numpy as np

from psychro_engine.config import DRY_AIR_GAS_CONSTANT

# Specific heat polynomials, highest order first (for np.polyval)
_CP_LOW = [
    1.3020833332371173e-10,
    -1.3405671294850166e-08,
    2.9091167529181888e-07,
    5.2562229415778261e-05,
    1.0036104793123004,
]
_CP_HIGH = [
    3.0582028042912701e-13,
    -8.4171864437938596e-10,
    7.4445335877306371e-07,
    -2.9062712816134989e-05,
    1.0065876262557212,
]


def dynamic_viscosity(ta: float) -> float:
    """Dynamic viscosity in Pa·s."""
    tk = ta + 273.15
    return float(np.polyval(
        [-6.2524e-12, 2.9928e-8, -5.7171e-5, 0.074582, 0.40401], tk
    )) * 1.0e-6


def thermal_conductivity(ta: float) -> float:
    """Thermal conductivity in W/(m·K)."""
    return float(np.polyval(
        [-2.61420e-14, 2.85943e-12, -1.94021e-8, 7.83035e-5, 2.43714e-2], ta
    ))


def specific_heat(ta: float) -> float:
    """Isobaric specific heat in kJ/(kg·K), piecewise over temperature."""
    if ta <= -73.15:
        return 1.002
    if ta <= -53.15:
        # linear blend between the two low-temperature plateaus
        return 1.002 + (1.003 - 1.002) * (ta + 73.15) / 20.0
    if ta <= -13.15:
        return 1.003
    if ta <= 86.85:
        return float(np.polyval(_CP_LOW, ta))
    return float(np.polyval(_CP_HIGH, ta))


def specific_enthalpy(ta: float) -> float:
    """Specific enthalpy in kJ/kg (reference 0 °C)."""
    return specific_heat(ta) * ta


def density(ta: float, pressure: float) -> float:
    """Density in kg/m³ from the ideal gas law."""
    return pressure / (DRY_AIR_GAS_CONSTANT * (ta + 273.15))


def kinematic_viscosity(ta: float, rho: float) -> float:
    """Kinematic viscosity in m²/s."""
    return dynamic_viscosity(ta) / rho
