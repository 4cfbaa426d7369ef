"""
Liquid water property equations at near-atmospheric pressure.

Used for condensate leaving a cooling coil, water mist in fogged air and
coolant supply/return streams.
"""

import numpy as np

_CP_TO_100 = [
    3.93240161e-13,
    -1.525847751e-10,
    2.47922718e-8,
    -2.166932275e-6,
    1.156152199e-4,
    -3.400567477e-3,
    4.219924305,
]
_CP_ABOVE_100 = [
    2.588246403e-15,
    -3.604612987e-12,
    2.112059173e-9,
    -6.727469888e-7,
    1.25584188e-4,
    -1.370455849e-2,
    8.093157187e-1,
    -15.75651097,
]
_RHO_NUMERATOR = [
    -280.54253e-12,
    105.56302e-9,
    -46.170461e-6,
    -7.9870401e-3,
    16.945176,
    999.83952,
]


def density(tw: float) -> float:
    """Density in kg/m³ (Kell correlation, 0..150 °C at 101.325 kPa)."""
    return float(np.polyval(_RHO_NUMERATOR, tw)) / (1.0 + 16.89785e-3 * tw)


def specific_heat(tw: float) -> float:
    """Isobaric specific heat in kJ/(kg·K)."""
    if tw <= 100.0:
        return float(np.polyval(_CP_TO_100, tw))
    return float(np.polyval(_CP_ABOVE_100, tw))


def specific_enthalpy(tw: float) -> float:
    """Specific enthalpy in kJ/kg; zero for sub-zero mist (ice takes over)."""
    if tw < 0.0:
        return 0.0
    return tw * specific_heat(tw)
