"""
Humid air property equations.

Humid air is treated as a mixture of dry air and water vapour, with any
moisture above the saturation humidity ratio present as water mist (above
0 °C) or ice fog (at or below 0 °C).

Saturation pressure follows the ASHRAE Hyland-Wexler formulation. Its
defining equation is implicit in the log of pressure, so an Arden-Buck
estimate is refined with the Brent root finder. Dew point and wet bulb
temperatures start from closed-form estimates (Arden-Buck, Stull) and are
refined where the estimate is not accurate enough. The dry bulb inversions
(from enthalpy, from humidity ratio + RH, etc.) have no closed form and are
always solved numerically using the forward function as the residual.

Units: °C, Pa, %, kg/kg, kJ/kg.
"""

import math

from psychro_engine.config import (
    DEW_POINT_REFINE_RH,
    DRY_AIR_MOLAR_MASS,
    DRY_AIR_SUTHERLAND_CONSTANT,
    SOLVER_A_COEF,
    SOLVER_B_COEF,
    SOLVER_HIGH_TEMP_COEF,
    WATER_VAPOUR_MOLAR_MASS,
    WATER_VAPOUR_SUTHERLAND_CONSTANT,
    WG_RATIO,
)
from psychro_engine.engine.properties import dry_air, ice, liquid_water, water_vapour
from psychro_engine.engine.solver import find_root
from psychro_engine.exceptions import InvalidArgumentError

# Lowest temperature any internal solve is allowed to probe
_SOLVER_T_MIN = -150.0

# Hyland-Wexler coefficients: over ice (t < 0 °C) and over liquid water
_HW_ICE = (
    -5.6745359e03,
    6.3925247e00,
    -9.6778430e-03,
    6.2215701e-07,
    2.0747825e-09,
    -9.4840240e-13,
    4.1635019e00,
)
_HW_WATER = (
    -5.8002206e03,
    1.3914993e00,
    -4.8640239e-02,
    4.1764768e-05,
    -1.4452093e-08,
    6.5459673e00,
)


def _alfa_t(ta: float) -> float:
    """Arden-Buck exponent term used by the saturation pressure and dew point estimates."""
    if ta > 0.0:
        b, c, d = 18.678, 257.14, 234.50
    else:
        b, c, d = 23.036, 279.82, 333.70
    return (b - ta / d) * (ta / (c + ta))


def _hyland_wexler_log(ta: float) -> float:
    """Right-hand side f(T) of ln(ps) = f(T)."""
    tk = ta + 273.15
    if ta < 0.0:
        c1, c2, c3, c4, c5, c6, c7 = _HW_ICE
        return (
            c1 / tk + c2 + c3 * tk + c4 * tk**2 + c5 * tk**3 + c6 * tk**4
            + c7 * math.log(tk)
        )
    c8, c9, c10, c11, c12, c13 = _HW_WATER
    return c8 / tk + c9 + c10 * tk + c11 * tk**2 + c12 * tk**3 + c13 * math.log(tk)


# ---------------------------------------------------------------------------
# Core humidity relations
# ---------------------------------------------------------------------------

def saturation_pressure(ta: float) -> float:
    """
    Water vapour saturation pressure over water or ice, Pa.

    The Arden-Buck estimate seeds a bracket of [0.8·est, 1.01·est·n]
    (n = 1.1 above 50 °C where the estimate drifts low) for the Brent solve of
    ln(ps) - f(T) = 0.
    """
    f_t = _hyland_wexler_log(ta)
    a = 6.1115 if ta < 0.0 else 6.1121
    n = SOLVER_HIGH_TEMP_COEF if ta > 50.0 else 1.0
    estimate = a * math.exp(_alfa_t(ta)) * 100.0

    return find_root(
        lambda ps: math.log(ps) - f_t,
        estimate * SOLVER_A_COEF,
        estimate * SOLVER_B_COEF * n,
        name="saturation_pressure",
    )


def saturation_pressure_from_humidity_ratio(x: float, rh: float, pressure: float) -> float:
    """Saturation pressure implied by a humidity ratio at a given RH, Pa."""
    if rh == 0.0:
        raise InvalidArgumentError(
            f"Saturation pressure is undefined for RH = 0 % with humidity ratio x = {x} kg/kg"
        )
    return x * pressure / ((WG_RATIO * rh / 100.0) + x * rh / 100.0)


def humidity_ratio(rh: float, ps: float, pressure: float) -> float:
    """
    Humidity ratio from RH and saturation pressure, kg/kg.

    Infinite when the vapour partial pressure reaches the total pressure
    (the air can take up any amount of vapour).
    """
    if rh == 0.0:
        return 0.0
    pv = rh / 100.0 * ps
    if pv >= pressure:
        return math.inf
    return WG_RATIO * pv / (pressure - pv)


def max_humidity_ratio(ps: float, pressure: float) -> float:
    """Humidity ratio at saturation, kg/kg."""
    return humidity_ratio(100.0, ps, pressure)


def relative_humidity(ta: float, x: float, pressure: float) -> float:
    """Relative humidity from dry bulb and humidity ratio, %. Capped at 100."""
    if x == 0.0:
        return 0.0
    ps = saturation_pressure(ta)
    rh = x * pressure / (WG_RATIO * ps + x * ps)
    return 100.0 if rh > 1.0 else rh * 100.0


def relative_humidity_from_dew_point(tdp: float, ta: float) -> float:
    """Relative humidity from dew point and dry bulb (Arden-Buck ratio), %."""
    return math.exp(_alfa_t(tdp) - _alfa_t(ta)) * 100.0


def dew_point_temperature(ta: float, rh: float, pressure: float) -> float:
    """
    Dew point temperature, °C.

    Arden-Buck closed form, refined numerically below 25 % RH where the
    estimate loses accuracy. Saturated air returns ta, perfectly dry air -inf.
    """
    if rh >= 100.0:
        return ta
    if rh == 0.0:
        return -math.inf

    if ta > 0.0:
        b, c, d = 18.678, 257.14, 234.50
    else:
        b, c, d = 23.036, 279.82, 333.70
    a = 2.0 / d
    beta = math.log(rh / 100.0) + _alfa_t(ta)
    b_trh = b - beta
    c_trh = -c * beta
    tdp_estimated = (b_trh - math.sqrt(b_trh * b_trh + 2.0 * a * c_trh)) / a

    if rh >= DEW_POINT_REFINE_RH:
        return tdp_estimated

    x = humidity_ratio(rh, saturation_pressure(ta), pressure)
    return find_root(
        lambda t: max_humidity_ratio(saturation_pressure(t), pressure) - x,
        tdp_estimated - 20.0,
        ta,
        name="dew_point_temperature",
    )


def wet_bulb_temperature(ta: float, rh: float, pressure: float) -> float:
    """
    Thermodynamic wet bulb temperature, °C.

    Solves the adiabatic saturation balance
        h(ta, x) + (x_s - x)·h_w(t) - h(t, x_s) = 0
    where x_s is the saturation humidity ratio at t and h_w is the enthalpy of
    the evaporated water (ice at or below 0 °C). The Stull approximation is
    used to tighten the [dew point, ta] bracket.
    """
    if rh >= 100.0:
        return ta

    x = humidity_ratio(rh, saturation_pressure(ta), pressure)
    h = specific_enthalpy(ta, x, pressure)

    def balance(t: float) -> float:
        x_s = max_humidity_ratio(saturation_pressure(t), pressure)
        h_s = specific_enthalpy(t, x_s, pressure)
        h_w = ice.specific_enthalpy(t) if t <= 0.0 else liquid_water.specific_enthalpy(t)
        return h + (x_s - x) * h_w - h_s

    lower = max(dew_point_temperature(ta, rh, pressure) - 5.0, _SOLVER_T_MIN)
    upper = ta

    estimate = (
        ta * math.atan(0.151977 * math.sqrt(rh + 8.313659))
        + math.atan(ta + rh)
        - math.atan(rh - 1.676331)
        + 0.00391838 * rh**1.5 * math.atan(0.023101 * rh)
        - 4.686035
    )
    if lower < estimate < upper:
        if balance(estimate) > 0.0:
            lower = estimate
        else:
            upper = estimate

    return find_root(balance, lower, upper, name="wet_bulb_temperature")


# ---------------------------------------------------------------------------
# Thermodynamic and transport properties
# ---------------------------------------------------------------------------

def specific_enthalpy(ta: float, x: float, pressure: float) -> float:
    """
    Specific enthalpy of humid air per kg of dry air, kJ/kg.

    Unsaturated air carries all moisture as vapour. Above saturation the
    excess is water mist (t > 0 °C) or ice fog (t <= 0 °C).
    """
    i_da = dry_air.specific_enthalpy(ta)
    if x == 0.0:
        return i_da

    x_max = max_humidity_ratio(saturation_pressure(ta), pressure)
    i_wv = water_vapour.specific_enthalpy(ta)
    if x <= x_max:
        return i_da + i_wv * x

    excess = x - x_max
    return (
        i_da
        + i_wv * x_max
        + liquid_water.specific_enthalpy(ta) * excess
        + ice.specific_enthalpy(ta) * excess
    )


def specific_heat(ta: float, x: float) -> float:
    """Isobaric specific heat per kg of dry air, kJ/(kg·K)."""
    return dry_air.specific_heat(ta) + x * water_vapour.specific_heat(ta)


def density(ta: float, x: float, pressure: float) -> float:
    """Humid air density, kg/m³."""
    if x == 0.0:
        return dry_air.density(ta, pressure)
    tk = ta + 273.15
    return 1.0 / ((0.2871 * tk * (1.0 + 1.6078 * x)) / (pressure / 1000.0))


def dynamic_viscosity(ta: float, x: float) -> float:
    """Dynamic viscosity of the mixture (Wilke mixing rule), Pa·s."""
    mu_da = dry_air.dynamic_viscosity(ta)
    if x == 0.0:
        return mu_da
    mu_wv = water_vapour.dynamic_viscosity(ta)
    xm = 1.61 * x
    fi_av = (1.0 + math.sqrt(mu_da / mu_wv) * (WATER_VAPOUR_MOLAR_MASS / DRY_AIR_MOLAR_MASS) ** 0.25) ** 2 / (
        2.0 * math.sqrt(2.0) * math.sqrt(1.0 + DRY_AIR_MOLAR_MASS / WATER_VAPOUR_MOLAR_MASS)
    )
    fi_va = (1.0 + math.sqrt(mu_wv / mu_da) * (DRY_AIR_MOLAR_MASS / WATER_VAPOUR_MOLAR_MASS) ** 0.25) ** 2 / (
        2.0 * math.sqrt(2.0) * math.sqrt(1.0 + WATER_VAPOUR_MOLAR_MASS / DRY_AIR_MOLAR_MASS)
    )
    return mu_da / (1.0 + fi_av * xm) + mu_wv / (1.0 + fi_va / xm)


def kinematic_viscosity(ta: float, x: float, rho: float) -> float:
    """Kinematic viscosity, m²/s."""
    return dynamic_viscosity(ta, x) / rho


def thermal_conductivity(ta: float, x: float) -> float:
    """Thermal conductivity of the mixture (Lindsay-Bromley), W/(m·K)."""
    k_da = dry_air.thermal_conductivity(ta)
    if x == 0.0:
        return k_da
    mu_da = dry_air.dynamic_viscosity(ta)
    mu_wv = water_vapour.dynamic_viscosity(ta)
    k_wv = water_vapour.thermal_conductivity(ta)
    sut_da = DRY_AIR_SUTHERLAND_CONSTANT
    sut_wv = WATER_VAPOUR_SUTHERLAND_CONSTANT
    sut_av = 0.733 * math.sqrt(sut_da * sut_wv)
    tk = ta + 273.15
    xm = 1.61 * x

    alfa_av = (mu_da / mu_wv) * WG_RATIO**0.75 * ((1.0 + sut_da / tk) / (1.0 + sut_wv / tk))
    alfa_va = (mu_wv / mu_da) * WG_RATIO**0.75 * ((1.0 + sut_wv / tk) / (1.0 + sut_da / tk))
    beta_av = (1.0 + sut_av / tk) / (1.0 + sut_da / tk)
    beta_va = (1.0 + sut_av / tk) / (1.0 + sut_wv / tk)
    a_av = 0.25 * (1.0 + alfa_av) ** 2 * beta_av
    a_va = 0.25 * (1.0 + alfa_va) ** 2 * beta_va
    return k_da / (1.0 + a_av * xm) + k_wv / (1.0 + a_va / xm)


def thermal_diffusivity(rho: float, k: float, cp: float) -> float:
    """Thermal diffusivity, m²/s. cp in kJ/(kg·K)."""
    return k / (rho * cp * 1000.0)


def prandtl_number(mu: float, k: float, cp: float) -> float:
    """Prandtl number. cp in kJ/(kg·K)."""
    return mu * cp * 1000.0 / k


# ---------------------------------------------------------------------------
# Dry bulb temperature from other quantities
# ---------------------------------------------------------------------------

def dry_bulb_temperature_max(pressure: float) -> float:
    """Dry bulb at which saturation pressure equals the total pressure, °C."""
    log_p = math.log(0.001638 * pressure)
    estimate = -237300.0 * log_p / (1000.0 * log_p - 17269.0)
    return find_root(
        lambda t: pressure - saturation_pressure(t),
        estimate * SOLVER_A_COEF,
        estimate * SOLVER_B_COEF * 1.5,
        name="dry_bulb_temperature_max",
    )


def dry_bulb_temperature_ix(enthalpy: float, x: float, pressure: float) -> float:
    """Dry bulb from specific enthalpy and humidity ratio, °C."""
    upper = 0.99 * dry_bulb_temperature_max(pressure)
    return find_root(
        lambda t: enthalpy - specific_enthalpy(t, x, pressure),
        _SOLVER_T_MIN,
        upper,
        name="dry_bulb_temperature_ix",
    )


def dry_bulb_temperature_xrh(x: float, rh: float, pressure: float) -> float:
    """Dry bulb from humidity ratio and relative humidity, °C."""
    ps_target = saturation_pressure_from_humidity_ratio(x, rh, pressure)
    return find_root(
        lambda t: ps_target - saturation_pressure(t),
        _SOLVER_T_MIN,
        dry_bulb_temperature_max(pressure),
        name="dry_bulb_temperature_xrh",
    )


def dry_bulb_temperature_tdp_rh(tdp: float, rh: float, pressure: float) -> float:
    """Dry bulb from dew point and relative humidity, °C."""
    if rh >= 100.0:
        return tdp
    if rh == 0.0:
        return math.inf
    return find_root(
        lambda t: tdp - dew_point_temperature(t, rh, pressure),
        tdp,
        0.99 * dry_bulb_temperature_max(pressure),
        name="dry_bulb_temperature_tdp_rh",
    )


def dry_bulb_temperature_wbt_rh(wbt: float, rh: float, pressure: float) -> float:
    """Dry bulb from wet bulb and relative humidity, °C."""
    if rh >= 100.0:
        return wbt
    return find_root(
        lambda t: wbt - wet_bulb_temperature(t, rh, pressure),
        wbt,
        0.99 * dry_bulb_temperature_max(pressure),
        name="dry_bulb_temperature_wbt_rh",
    )
