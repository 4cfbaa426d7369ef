"""
Ice property equations, used for ice fog and frosting below 0 °C.
"""

import numpy as np

from psychro_engine.config import HEAT_OF_ICE_MELT

_RHO = [
    0.00000000000078,
    0.00000000005916,
    -0.00000003790984,
    -0.00000784399543,
    -0.00061508830263,
    -0.02237994685111,
    -0.42803436487679,
    916.1204382651714,
]


def density(ti: float) -> float:
    """Density in kg/m³."""
    return float(np.polyval(_RHO, ti))


def specific_heat(ti: float) -> float:
    """Specific heat in kJ/(kg·K)."""
    return float(np.polyval([-0.0000001031, -0.0000277225, 0.0048764802, 2.0509727263], ti))


def thermal_conductivity(ti: float) -> float:
    """Thermal conductivity in W/(m·K)."""
    return float(np.polyval([0.0000004456743, 0.0001016721167, -0.0069168602852, 2.2173524402158], ti))


def specific_enthalpy(ti: float) -> float:
    """Specific enthalpy in kJ/kg relative to liquid water at 0 °C; zero above 0 °C."""
    if ti > 0.0:
        return 0.0
    return ti * specific_heat(ti) - HEAT_OF_ICE_MELT
