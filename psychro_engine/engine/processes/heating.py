"""
Air heating process equations.

Sensible heating only: humidity ratio and dry-air mass flow are conserved,
so the outlet state follows from an enthalpy balance
    Q = mda · (h_out - h_in)
Three modes share this model:
  - POWER: given heating power → outlet temperature (enthalpy inversion)
  - TEMPERATURE: given outlet dry bulb → required power (closed form)
  - RELATIVE_HUMIDITY: given outlet RH → outlet dry bulb (x + RH inversion)
    → required power
"""

import logging

from psychro_engine.engine.fluids import build_humid_air, flow_from_dry_air_mass_flow
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.processes.validators import (
    require_heating_power,
    require_heating_target_relative_humidity,
    require_heating_target_temperature,
    require_physical_heating_power,
    require_physical_heating_relative_humidity,
)
from psychro_engine.engine.validators import require_finite
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.models.humid_air import FlowOfHumidAir
from psychro_engine.models.process import HeatingMode, HeatingResult

logger = logging.getLogger(__name__)


def _outlet_flow(inlet_air_flow: FlowOfHumidAir, outlet_temperature: float) -> FlowOfHumidAir:
    outlet_air = build_humid_air(
        inlet_air_flow.pressure, outlet_temperature, inlet_air_flow.humidity_ratio
    )
    return flow_from_dry_air_mass_flow(outlet_air, inlet_air_flow.dry_air_mass_flow)


def _unchanged(inlet_air_flow: FlowOfHumidAir, mode: HeatingMode) -> HeatingResult:
    return HeatingResult(
        mode=mode,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=inlet_air_flow,
        heat_of_process=0.0,
    )


def heating_from_power(inlet_air_flow: FlowOfHumidAir, power: float) -> HeatingResult:
    """
    Outlet state for a given heating power [W].

    Raises:
        ProcessDirectionError: if power is negative
        ProcessLimitError: if power exceeds the estimated physical limit
    """
    require_heating_power(power)
    if power == 0.0 or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, HeatingMode.POWER)
    require_physical_heating_power(inlet_air_flow, power)

    mda = inlet_air_flow.dry_air_mass_flow
    i_out = inlet_air_flow.specific_enthalpy + power / 1000.0 / mda
    t_out = ha.dry_bulb_temperature_ix(i_out, inlet_air_flow.humidity_ratio, inlet_air_flow.pressure)

    return HeatingResult(
        mode=HeatingMode.POWER,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=_outlet_flow(inlet_air_flow, t_out),
        heat_of_process=power,
    )


def heating_from_temperature(inlet_air_flow: FlowOfHumidAir, target_temperature: float) -> HeatingResult:
    """Required heating power for a target outlet dry bulb [°C]."""
    require_heating_target_temperature(inlet_air_flow.temperature, target_temperature)
    if target_temperature == inlet_air_flow.temperature or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, HeatingMode.TEMPERATURE)

    outlet_flow = _outlet_flow(inlet_air_flow, target_temperature)
    power = (
        inlet_air_flow.dry_air_mass_flow
        * (outlet_flow.specific_enthalpy - inlet_air_flow.specific_enthalpy)
        * 1000.0
    )

    return HeatingResult(
        mode=HeatingMode.TEMPERATURE,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=outlet_flow,
        heat_of_process=power,
    )


def heating_from_relative_humidity(inlet_air_flow: FlowOfHumidAir, target_rh: float) -> HeatingResult:
    """
    Required heating power for a target outlet relative humidity [%].

    Raises:
        ProcessDirectionError: if target is above the inlet RH
        ProcessLimitError: if target is only reachable above the max dry bulb
    """
    require_heating_target_relative_humidity(inlet_air_flow.relative_humidity, target_rh)
    if target_rh == inlet_air_flow.relative_humidity or inlet_air_flow.dry_air_mass_flow == 0.0:
        return _unchanged(inlet_air_flow, HeatingMode.RELATIVE_HUMIDITY)
    require_physical_heating_relative_humidity(inlet_air_flow, target_rh)

    t_out = ha.dry_bulb_temperature_xrh(
        inlet_air_flow.humidity_ratio, target_rh, inlet_air_flow.pressure
    )
    outlet_flow = _outlet_flow(inlet_air_flow, t_out)
    power = (
        inlet_air_flow.dry_air_mass_flow
        * (outlet_flow.specific_enthalpy - inlet_air_flow.specific_enthalpy)
        * 1000.0
    )

    return HeatingResult(
        mode=HeatingMode.RELATIVE_HUMIDITY,
        inlet_air_flow=inlet_air_flow,
        outlet_air_flow=outlet_flow,
        heat_of_process=power,
    )


# Mode dispatch table
_HEATING_MODES = {
    HeatingMode.POWER: heating_from_power,
    HeatingMode.TEMPERATURE: heating_from_temperature,
    HeatingMode.RELATIVE_HUMIDITY: heating_from_relative_humidity,
}


def heat(inlet_air_flow: FlowOfHumidAir, mode: HeatingMode, value: float) -> HeatingResult:
    """
    Run a heating process in the given mode.

    Args:
        inlet_air_flow: Inlet humid air flow
        mode: What `value` represents
        value: Power [W], target dry bulb [°C] or target RH [%]
    """
    equation = _HEATING_MODES.get(mode)
    if equation is None:
        raise InvalidArgumentError(f"Unknown heating mode: {mode}")
    require_finite(value, f"heating {HeatingMode(mode).value}")
    logger.debug("Heating %s = %s for inlet %.3f °C", mode, value, inlet_air_flow.temperature)
    return equation(inlet_air_flow, value)
