"""
Direction and physical-limit checks for heating and cooling.

Direction violations raise ProcessDirectionError, infeasible magnitudes raise
ProcessLimitError. Limits are enthalpy-based estimates evaluated before any
solver runs, so an infeasible request never reaches the root finder with a
bracket that cannot contain a root.
"""

from psychro_engine.config import (
    HEATING_LIMIT_RATIO,
    RH_MAX_PROCESS,
    RH_MIN,
    TEMPERATURE_MAX,
)
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.validators import (
    require_above,
    require_between,
    require_below_or_equal,
    require_finite,
)
from psychro_engine.exceptions import ProcessDirectionError, ProcessLimitError
from psychro_engine.models.humid_air import FlowOfHumidAir


def require_process_relative_humidity(target_rh: float) -> None:
    """Target RH is limited to the practical ceiling, not 100 %."""
    require_between(target_rh, RH_MIN, RH_MAX_PROCESS, "target relative humidity")


# ---------------------------------------------------------------------------
# Heating
# ---------------------------------------------------------------------------

def estimate_max_heating_power(inlet_air_flow: FlowOfHumidAir) -> float:
    """Power [W] needed to reach 98 % of the saturation-limited max dry bulb."""
    t_max = ha.dry_bulb_temperature_max(inlet_air_flow.pressure) * HEATING_LIMIT_RATIO
    i_max = ha.specific_enthalpy(t_max, inlet_air_flow.humidity_ratio, inlet_air_flow.pressure)
    return (i_max - inlet_air_flow.specific_enthalpy) * inlet_air_flow.mass_flow * 1000.0


def require_heating_power(power: float) -> None:
    require_finite(power, "heating power")
    if power < 0.0:
        raise ProcessDirectionError(
            "Power must be provided as positive value for heating. If this was intended, "
            f"use cooling process instead. Q_heat = {power} W"
        )


def require_physical_heating_power(inlet_air_flow: FlowOfHumidAir, power: float) -> None:
    limit = estimate_max_heating_power(inlet_air_flow)
    if power > limit:
        raise ProcessLimitError(
            "Heating power too large for provided flow. "
            f"Q_in = {power:.3f} W, Q_limit = {limit:.3f} W"
        )


def require_heating_target_temperature(inlet_temperature: float, target_temperature: float) -> None:
    require_below_or_equal(target_temperature, TEMPERATURE_MAX, "target temperature")
    if target_temperature < inlet_temperature:
        raise ProcessDirectionError(
            "Temperature cannot be decreased in heating process. If this was intended, use "
            f"cooling process. t_in = {inlet_temperature} °C, t_target = {target_temperature} °C"
        )


def require_heating_target_relative_humidity(inlet_rh: float, target_rh: float) -> None:
    require_process_relative_humidity(target_rh)
    if target_rh > inlet_rh:
        raise ProcessDirectionError(
            "Relative humidity cannot be increased in heating process. If this was intended, "
            f"use cooling process. RH_in = {inlet_rh:.4f} %, RH_target = {target_rh} %"
        )


def estimate_min_heating_relative_humidity(inlet_air_flow: FlowOfHumidAir) -> float:
    """Lowest RH [%] reachable by heating, at 98 % of the saturation-limited max dry bulb."""
    t_max = ha.dry_bulb_temperature_max(inlet_air_flow.pressure) * HEATING_LIMIT_RATIO
    return ha.relative_humidity(t_max, inlet_air_flow.humidity_ratio, inlet_air_flow.pressure)


def require_physical_heating_relative_humidity(inlet_air_flow: FlowOfHumidAir, target_rh: float) -> None:
    if inlet_air_flow.humidity_ratio > 0.0 and target_rh <= 0.0:
        raise ProcessLimitError(
            "Humid air cannot be heated to 0 % relative humidity. "
            f"x_in = {inlet_air_flow.humidity_ratio:.6f} kg/kg, RH_target = {target_rh} %"
        )
    limit = estimate_min_heating_relative_humidity(inlet_air_flow)
    if target_rh < limit:
        raise ProcessLimitError(
            "Target relative humidity too low for a heating process. "
            f"RH_target = {target_rh} %, RH_limit = {limit:.4f} %"
        )


# ---------------------------------------------------------------------------
# Cooling
# ---------------------------------------------------------------------------

def estimate_max_cooling_power(inlet_air_flow: FlowOfHumidAir) -> float:
    """Quick estimate of the cooling power [W, negative] to bring the air to 0 kJ/kg."""
    return (0.0 - inlet_air_flow.specific_enthalpy) * inlet_air_flow.mass_flow * 1000.0


def require_cooling_power(power: float) -> None:
    require_finite(power, "cooling power")
    if power > 0.0:
        raise ProcessDirectionError(
            "Power must be provided as negative value for cooling. If this was intended, "
            f"use heating process instead. Q_cool = {power} W"
        )


def require_physical_cooling_power(inlet_air_flow: FlowOfHumidAir, power: float) -> None:
    limit = estimate_max_cooling_power(inlet_air_flow)
    if power < limit:
        raise ProcessLimitError(
            "Cooling power too large for provided flow. "
            f"Q_in = {power:.3f} W, Q_limit = {limit:.3f} W"
        )


def require_cooling_target_temperature(inlet_temperature: float, target_temperature: float) -> None:
    require_above(target_temperature, 0.0, "target temperature")
    if target_temperature > inlet_temperature:
        raise ProcessDirectionError(
            "Temperature cannot be increased in cooling process. If this was intended, use "
            f"heating process. t_in = {inlet_temperature} °C, t_target = {target_temperature} °C"
        )


def require_cooling_target_relative_humidity(inlet_rh: float, target_rh: float) -> None:
    require_process_relative_humidity(target_rh)
    if target_rh < inlet_rh:
        raise ProcessDirectionError(
            "Relative humidity cannot be decreased in cooling process. If this was intended, "
            f"use heating process. RH_in = {inlet_rh:.4f} %, RH_target = {target_rh} %"
        )


def require_dry_cooling_target_temperature(inlet_air_flow: FlowOfHumidAir, target_temperature: float) -> None:
    require_finite(target_temperature, "target temperature")
    if target_temperature > inlet_air_flow.temperature:
        raise ProcessDirectionError(
            "Temperature cannot be increased in cooling process. If this was intended, use "
            f"heating process. t_in = {inlet_air_flow.temperature} °C, "
            f"t_target = {target_temperature} °C"
        )
    if target_temperature < inlet_air_flow.dew_point_temperature:
        raise ProcessLimitError(
            "Target temperature cannot be lower than inlet dew point temperature for a dry "
            f"cooling process, use real cooling instead. t_target = {target_temperature} °C, "
            f"t_dp = {inlet_air_flow.dew_point_temperature:.4f} °C"
        )
