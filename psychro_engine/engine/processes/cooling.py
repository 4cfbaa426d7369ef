"""
Air cooling process equations.

Real cooling uses the coil bypass-factor model: a fraction BF of the dry air
bypasses the coil unchanged, the remaining (1 - BF) leaves at the mean wall
temperature, saturated if the wall is below the inlet dew point. Moisture
removed from the contacted part leaves as condensate at wall temperature.

    BF = (t_out - t_wall) / (t_in - t_wall)

Cooling to a target temperature is the closed-form base case. Target RH and
target power are solved for the outlet temperature with the root finder,
each residual evaluation running a full cooling_from_temperature.

Dry cooling keeps the humidity ratio constant (no condensation).
"""

import logging

from psychro_engine.config import WATER_TEMPERATURE_MIN
from psychro_engine.engine.fluids import (
    build_humid_air,
    build_liquid_water,
    flow_from_dry_air_mass_flow,
    flow_of_liquid_water,
)
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.properties import liquid_water as lw
from psychro_engine.engine.processes.validators import (
    require_cooling_power,
    require_cooling_target_relative_humidity,
    require_cooling_target_temperature,
    require_dry_cooling_target_temperature,
    require_physical_cooling_power,
)
from psychro_engine.engine.solver import find_root
from psychro_engine.engine.validators import require_finite
from psychro_engine.exceptions import InvalidArgumentError, ProcessLimitError
from psychro_engine.models.humid_air import FlowOfHumidAir
from psychro_engine.models.process import (
    CoolantData,
    CoolingMode,
    CoolingResult,
    DryCoolingMode,
    DryCoolingResult,
)

logger = logging.getLogger(__name__)

# Lowest outlet temperature handed to cooling_from_temperature by the solvers, °C
_MIN_SOLVER_OUTLET_TEMPERATURE = 1e-3


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def coil_bypass_factor(average_wall_temperature: float, inlet_temperature: float,
                       outlet_temperature: float) -> float:
    """Coil bypass factor, dimensionless. Not clamped: values outside [0, 1] are returned as is."""
    if inlet_temperature == average_wall_temperature:
        raise InvalidArgumentError(
            "Bypass factor is undefined when inlet temperature equals wall temperature. "
            f"t_in = {inlet_temperature} °C, t_wall = {average_wall_temperature} °C"
        )
    return (outlet_temperature - average_wall_temperature) / (inlet_temperature - average_wall_temperature)


def condensate_discharge(dry_air_mass_flow: float, inlet_humidity_ratio: float,
                         outlet_humidity_ratio: float) -> float:
    """Condensate mass flow [kg/s] from the humidity ratio drop of the given dry air flow."""
    if dry_air_mass_flow < 0.0 or inlet_humidity_ratio < 0.0 or outlet_humidity_ratio < 0.0:
        raise InvalidArgumentError(
            "Negative values of mda, x_in or x_out passed as argument. "
            f"mda = {dry_air_mass_flow}, x_in = {inlet_humidity_ratio}, x_out = {outlet_humidity_ratio}"
        )
    if inlet_humidity_ratio == 0.0:
        return 0.0
    return dry_air_mass_flow * (inlet_humidity_ratio - outlet_humidity_ratio)


def coolant_mass_flow(supply_temperature: float, return_temperature: float, power: float) -> float:
    """
    Coolant mass flow [kg/s] needed to carry the given duty [W] between the
    supply and return temperatures, using the mean liquid water cp.
    """
    delta_t = return_temperature - supply_temperature
    if delta_t == 0.0:
        logger.warning(
            "Coolant mass flow cannot be computed for equal supply and return "
            "temperatures (%.2f °C), reporting 0 kg/s", supply_temperature
        )
        return 0.0
    cp_avg = (lw.specific_heat(supply_temperature) + lw.specific_heat(return_temperature)) / 2.0
    return abs(power) / 1000.0 / (cp_avg * delta_t)


def _coolant_flows(coolant: CoolantData, power: float):
    mass_flow = coolant_mass_flow(coolant.supply_temperature, coolant.return_temperature, power)
    supply = flow_of_liquid_water(build_liquid_water(coolant.supply_temperature), mass_flow)
    ret = flow_of_liquid_water(build_liquid_water(coolant.return_temperature), mass_flow)
    return supply, ret


def _unchanged(inlet_air_flow: FlowOfHumidAir, coolant: CoolantData, mode: CoolingMode) -> CoolingResult:
    condensate = build_liquid_water(max(inlet_air_flow.temperature, WATER_TEMPERATURE_MIN))
    supply_flow, return_flow = _coolant_flows(coolant, 0.0)
    return CoolingResult(
        mode=mode,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=inlet_air_flow,
        heat_of_process=0.0,
        condensate_flow=flow_of_liquid_water(condensate, 0.0),
        bypass_factor=1.0,
        average_wall_temperature=coolant.average_temperature,
        coolant_data=coolant,
        coolant_supply_flow=supply_flow,
        coolant_return_flow=return_flow,
    )


# ---------------------------------------------------------------------------
# Real cooling
# ---------------------------------------------------------------------------

def cooling_from_temperature(inlet_air_flow: FlowOfHumidAir, coolant: CoolantData,
                             target_temperature: float, mode: CoolingMode = CoolingMode.TEMPERATURE
                             ) -> CoolingResult:
    """
    Cooling duty, condensate and outlet state for a target outlet dry bulb [°C].

    Args:
        inlet_air_flow: Inlet humid air flow
        coolant: Coolant supply/return data, its mean is the coil wall temperature
        target_temperature: Outlet dry bulb, 0 < target <= inlet temperature
        mode: Mode recorded on the result, set by the nested solvers

    Raises:
        InvalidArgumentError: if target is not above 0 °C
        ProcessDirectionError: if target is above inlet temperature
    """
    require_cooling_target_temperature(inlet_air_flow.temperature, target_temperature)
    if target_temperature == inlet_air_flow.temperature or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, coolant, mode)

    pressure = inlet_air_flow.pressure
    t_in = inlet_air_flow.temperature
    x_in = inlet_air_flow.humidity_ratio
    h_in = inlet_air_flow.specific_enthalpy
    mda = inlet_air_flow.dry_air_mass_flow
    t_wall = coolant.average_temperature

    bypass_factor = coil_bypass_factor(t_wall, t_in, target_temperature)
    mda_direct = (1.0 - bypass_factor) * mda
    mda_bypass = mda - mda_direct

    # Near-wall air
    wet_wall = t_wall < inlet_air_flow.dew_point_temperature
    x_wall = ha.max_humidity_ratio(ha.saturation_pressure(t_wall), pressure) if wet_wall else x_in
    h_wall = ha.specific_enthalpy(t_wall, x_wall, pressure)

    m_cond = condensate_discharge(mda_direct, x_in, x_wall) if wet_wall else 0.0
    q_cool = mda_direct * (h_wall - h_in) + m_cond * lw.specific_enthalpy(t_wall)  # kW
    power = q_cool * 1000.0

    x_out = (x_wall * mda_direct + x_in * mda_bypass) / mda
    outlet_air = build_humid_air(pressure, target_temperature, x_out)
    condensate = build_liquid_water(t_wall)
    supply_flow, return_flow = _coolant_flows(coolant, power)

    warnings = []
    if not 0.0 <= bypass_factor <= 1.0:
        message = (
            f"Bypass factor {bypass_factor:.4f} is outside [0, 1]: outlet temperature "
            f"{target_temperature} °C is not between wall {t_wall} °C and inlet {t_in} °C"
        )
        logger.warning(message)
        warnings.append(message)

    return CoolingResult(
        mode=mode,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=flow_from_dry_air_mass_flow(outlet_air, mda),
        heat_of_process=power,
        condensate_flow=flow_of_liquid_water(condensate, m_cond),
        bypass_factor=bypass_factor,
        average_wall_temperature=t_wall,
        coolant_data=coolant,
        coolant_supply_flow=supply_flow,
        coolant_return_flow=return_flow,
        warnings=warnings,
    )


def cooling_from_relative_humidity(inlet_air_flow: FlowOfHumidAir, coolant: CoolantData,
                                   target_rh: float) -> CoolingResult:
    """
    Cooling for a target outlet relative humidity [%].

    The outlet temperature is bracketed between the inlet dry bulb and the
    lower of the inlet dew point and the coil wall temperature, where the
    outlet air is saturated.
    """
    require_cooling_target_relative_humidity(inlet_air_flow.relative_humidity, target_rh)
    if target_rh == inlet_air_flow.relative_humidity or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, coolant, CoolingMode.RELATIVE_HUMIDITY)

    pressure = inlet_air_flow.pressure
    t_low = max(
        min(inlet_air_flow.dew_point_temperature, coolant.average_temperature),
        _MIN_SOLVER_OUTLET_TEMPERATURE,
    )

    def residual(t_out: float) -> float:
        outlet = cooling_from_temperature(inlet_air_flow, coolant, t_out).outlet_air_flow
        return target_rh - ha.relative_humidity(outlet.temperature, outlet.humidity_ratio, pressure)

    t_out = find_root(residual, t_low, inlet_air_flow.temperature, name="cooling_from_relative_humidity")
    return cooling_from_temperature(inlet_air_flow, coolant, t_out, mode=CoolingMode.RELATIVE_HUMIDITY)


def cooling_from_power(inlet_air_flow: FlowOfHumidAir, coolant: CoolantData, power: float) -> CoolingResult:
    """
    Outlet state for a given cooling power [W, negative].

    With the wall state fixed the duty is linear in the outlet temperature,
    so the outlet is searched over the whole (0, t_in] range.

    Raises:
        ProcessDirectionError: if power is positive
        ProcessLimitError: if power is beyond the estimated physical limit, or
            more than the coil removes with the outlet at 0 °C
    """
    require_cooling_power(power)
    if power == 0.0 or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, coolant, CoolingMode.POWER)
    require_physical_cooling_power(inlet_air_flow, power)

    coil_limit = cooling_from_temperature(
        inlet_air_flow, coolant, _MIN_SOLVER_OUTLET_TEMPERATURE
    ).heat_of_process
    if coil_limit > power:
        raise ProcessLimitError(
            "Cooling power too large for provided coil and flow. "
            f"Q_in = {power:.3f} W, Q_coil_limit = {coil_limit:.3f} W"
        )

    def residual(t_out: float) -> float:
        return cooling_from_temperature(inlet_air_flow, coolant, t_out).heat_of_process - power

    t_out = find_root(
        residual, _MIN_SOLVER_OUTLET_TEMPERATURE, inlet_air_flow.temperature, name="cooling_from_power"
    )
    return cooling_from_temperature(inlet_air_flow, coolant, t_out, mode=CoolingMode.POWER)


# ---------------------------------------------------------------------------
# Dry cooling
# ---------------------------------------------------------------------------

def dry_cooling_from_power(inlet_air_flow: FlowOfHumidAir, power: float) -> DryCoolingResult:
    """Outlet state for a given cooling power [W, negative] at constant humidity ratio."""
    require_cooling_power(power)
    if power == 0.0 or inlet_air_flow.dry_air_mass_flow == 0.0:
        return DryCoolingResult(
            mode=DryCoolingMode.POWER,
            inlet_air_flow=inlet_air_flow,
            outlet_air_flow=inlet_air_flow,
            heat_of_process=0.0,
        )
    require_physical_cooling_power(inlet_air_flow, power)

    mda = inlet_air_flow.dry_air_mass_flow
    i_out = inlet_air_flow.specific_enthalpy + power / 1000.0 / mda
    t_out = ha.dry_bulb_temperature_ix(i_out, inlet_air_flow.humidity_ratio, inlet_air_flow.pressure)
    outlet_air = build_humid_air(inlet_air_flow.pressure, t_out, inlet_air_flow.humidity_ratio)

    return DryCoolingResult(
        mode=DryCoolingMode.POWER,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=flow_from_dry_air_mass_flow(outlet_air, mda),
        heat_of_process=power,
    )


def dry_cooling_from_temperature(inlet_air_flow: FlowOfHumidAir, target_temperature: float) -> DryCoolingResult:
    """Required cooling power for a target dry bulb between inlet dew point and inlet temperature."""
    require_dry_cooling_target_temperature(inlet_air_flow, target_temperature)
    if target_temperature == inlet_air_flow.temperature or inlet_air_flow.dry_air_mass_flow == 0.0:
        return DryCoolingResult(
            mode=DryCoolingMode.TEMPERATURE,
            inlet_air_flow=inlet_air_flow,
            outlet_air_flow=inlet_air_flow,
            heat_of_process=0.0,
        )

    mda = inlet_air_flow.dry_air_mass_flow
    outlet_air = build_humid_air(inlet_air_flow.pressure, target_temperature, inlet_air_flow.humidity_ratio)
    power = mda * (outlet_air.specific_enthalpy - inlet_air_flow.specific_enthalpy) * 1000.0

    return DryCoolingResult(
        mode=DryCoolingMode.TEMPERATURE,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=flow_from_dry_air_mass_flow(outlet_air, mda),
        heat_of_process=power,
    )


# ---------------------------------------------------------------------------
# Mode dispatch
# ---------------------------------------------------------------------------

_COOLING_MODES = {
    CoolingMode.POWER: cooling_from_power,
    CoolingMode.TEMPERATURE: cooling_from_temperature,
    CoolingMode.RELATIVE_HUMIDITY: cooling_from_relative_humidity,
}

_DRY_COOLING_MODES = {
    DryCoolingMode.POWER: dry_cooling_from_power,
    DryCoolingMode.TEMPERATURE: dry_cooling_from_temperature,
}


def cool(inlet_air_flow: FlowOfHumidAir, coolant: CoolantData, mode: CoolingMode, value: float) -> CoolingResult:
    """
    Run a real cooling process in the given mode.

    Args:
        inlet_air_flow: Inlet humid air flow
        coolant: Coolant supply/return data
        mode: What `value` represents
        value: Power [W, negative], target dry bulb [°C] or target RH [%]
    """
    equation = _COOLING_MODES.get(mode)
    if equation is None:
        raise InvalidArgumentError(f"Unknown cooling mode: {mode}")
    require_finite(value, f"cooling {CoolingMode(mode).value}")
    logger.debug("Cooling %s = %s for inlet %.3f °C", mode, value, inlet_air_flow.temperature)
    return equation(inlet_air_flow, coolant, value)


def dry_cool(inlet_air_flow: FlowOfHumidAir, mode: DryCoolingMode, value: float) -> DryCoolingResult:
    equation = _DRY_COOLING_MODES.get(mode)
    if equation is None:
        raise InvalidArgumentError(f"Unknown dry cooling mode: {mode}")
    require_finite(value, f"dry cooling {DryCoolingMode(mode).value}")
    logger.debug("Dry cooling %s = %s for inlet %.3f °C", mode, value, inlet_air_flow.temperature)
    return equation(inlet_air_flow, value)
