"""
Core state point resolver.

Given any supported pair of independent psychrometric properties and absolute
pressure, resolves a full HumidAir state. Every pair is reduced to dry bulb
plus humidity ratio, then the state is built by the fluid builders.

Pairs with no closed-form reduction (Tdb+Twb, Tdb+h) are inverted with the
engine root finder.
"""

import logging

import psychrolib

from psychro_engine.config import SUPPORTED_INPUT_PAIRS
from psychro_engine.engine.fluids import build_humid_air, humid_air_from_relative_humidity
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.solver import find_root
from psychro_engine.exceptions import ConvergenceError, InvalidArgumentError
from psychro_engine.models.humid_air import HumidAir
from psychro_engine.models.state_point import StatePointOutput

logger = logging.getLogger(__name__)


def _resolve_tdb_rh(Tdb: float, RH: float, pressure: float) -> HumidAir:
    """Resolve from dry-bulb temperature and relative humidity."""
    return humid_air_from_relative_humidity(pressure, Tdb, RH)


def _resolve_tdb_w(Tdb: float, W: float, pressure: float) -> HumidAir:
    """Resolve from dry-bulb temperature and humidity ratio (kg/kg)."""
    return build_humid_air(pressure, Tdb, W)


def _resolve_tdb_tdp(Tdb: float, Tdp: float, pressure: float) -> HumidAir:
    """Resolve from dry-bulb and dew point temperatures."""
    if Tdp > Tdb:
        raise InvalidArgumentError(
            f"Dew point {Tdp} °C cannot be higher than dry bulb {Tdb} °C"
        )
    W = ha.max_humidity_ratio(ha.saturation_pressure(Tdp), pressure)
    return build_humid_air(pressure, Tdb, W)


def _resolve_tdb_twb(Tdb: float, Twb: float, pressure: float) -> HumidAir:
    """
    Resolve from dry-bulb and wet-bulb temperatures.

    Wet bulb rises monotonically with RH at fixed Tdb, so we find the RH on
    [0, 100] % at which the computed wet bulb matches the target.
    """
    if Twb > Tdb:
        raise InvalidArgumentError(
            f"Wet bulb {Twb} °C cannot be higher than dry bulb {Tdb} °C"
        )

    def objective(RH: float) -> float:
        return ha.wet_bulb_temperature(Tdb, RH, pressure) - Twb

    try:
        RH = find_root(objective, 0.0, 100.0, name="resolve_tdb_twb")
    except ConvergenceError as exc:
        raise InvalidArgumentError(
            f"Cannot find a valid RH for Tdb={Tdb}, Twb={Twb}"
        ) from exc
    return humid_air_from_relative_humidity(pressure, Tdb, RH)


def _resolve_tdb_h(Tdb: float, h_target: float, pressure: float) -> HumidAir:
    """
    Resolve from dry-bulb temperature and specific enthalpy.

    W bounds are 0 to saturation; the target enthalpy must lie between the
    dry and the saturated enthalpy at this Tdb.
    """
    W_sat = ha.max_humidity_ratio(ha.saturation_pressure(Tdb), pressure)
    h_at_min = ha.specific_enthalpy(Tdb, 0.0, pressure)
    h_at_max = ha.specific_enthalpy(Tdb, W_sat, pressure)

    if h_target < h_at_min or h_target > h_at_max:
        raise InvalidArgumentError(
            f"Target enthalpy {h_target} is outside the achievable range "
            f"[{h_at_min:.2f}, {h_at_max:.2f}] at Tdb={Tdb}"
        )

    W = find_root(
        lambda W: ha.specific_enthalpy(Tdb, W, pressure) - h_target,
        0.0,
        W_sat,
        name="resolve_tdb_h",
    )
    return build_humid_air(pressure, Tdb, W)


def _resolve_w_h(W: float, h: float, pressure: float) -> HumidAir:
    """Resolve from humidity ratio and specific enthalpy."""
    try:
        Tdb = ha.dry_bulb_temperature_ix(h, W, pressure)
    except ConvergenceError as exc:
        raise InvalidArgumentError(f"Cannot find a valid Tdb for W={W}, h={h}") from exc
    return build_humid_air(pressure, Tdb, W)


def _resolve_w_rh(W: float, RH: float, pressure: float) -> HumidAir:
    """Resolve from humidity ratio and relative humidity."""
    if RH <= 0.0 or RH > 100.0:
        raise InvalidArgumentError(f"RH must be in (0, 100] % to resolve from W, got {RH}")
    try:
        Tdb = ha.dry_bulb_temperature_xrh(W, RH, pressure)
    except ConvergenceError as exc:
        raise InvalidArgumentError(f"Cannot find a valid Tdb for W={W}, RH={RH}%") from exc
    return build_humid_air(pressure, Tdb, W)


def _resolve_tdp_rh(Tdp: float, RH: float, pressure: float) -> HumidAir:
    """Resolve from dew point temperature and relative humidity."""
    if RH <= 0.0 or RH > 100.0:
        raise InvalidArgumentError(f"RH must be in (0, 100] % to resolve from Tdp, got {RH}")
    try:
        Tdb = ha.dry_bulb_temperature_tdp_rh(Tdp, RH, pressure)
    except ConvergenceError as exc:
        raise InvalidArgumentError(f"Cannot find a valid Tdb for Tdp={Tdp}, RH={RH}%") from exc
    return humid_air_from_relative_humidity(pressure, Tdb, RH)


def _resolve_twb_rh(Twb: float, RH: float, pressure: float) -> HumidAir:
    """Resolve from wet-bulb temperature and relative humidity."""
    if RH < 0.0 or RH > 100.0:
        raise InvalidArgumentError(f"RH must be in [0, 100] %, got {RH}")
    try:
        Tdb = ha.dry_bulb_temperature_wbt_rh(Twb, RH, pressure)
    except ConvergenceError as exc:
        raise InvalidArgumentError(f"Cannot find a valid Tdb for Twb={Twb}, RH={RH}%") from exc
    return humid_air_from_relative_humidity(pressure, Tdb, RH)


# Resolver dispatch table
_RESOLVERS = {
    ("Tdb", "RH"): _resolve_tdb_rh,
    ("Tdb", "W"): _resolve_tdb_w,
    ("Tdb", "Tdp"): _resolve_tdb_tdp,
    ("Tdb", "Twb"): _resolve_tdb_twb,
    ("Tdb", "h"): _resolve_tdb_h,
    ("W", "h"): _resolve_w_h,
    ("W", "RH"): _resolve_w_rh,
    ("Tdp", "RH"): _resolve_tdp_rh,
    ("Twb", "RH"): _resolve_twb_rh,
}


def resolve_state_point(
    input_pair: tuple[str, str],
    values: tuple[float, float],
    pressure: float,
    label: str = "",
) -> StatePointOutput:
    """
    Main entry point. Resolves a full state point from any supported input pair.

    Args:
        input_pair: Tuple of two property names, e.g. ("Tdb", "RH")
        values: Tuple of two values corresponding to the input pair
        pressure: Absolute pressure, Pa
        label: Optional user label

    Returns:
        StatePointOutput with the resolved HumidAir state

    Raises:
        InvalidArgumentError: If the input pair is not supported or values are out of range
    """
    pair = tuple(input_pair)
    ordered_values = tuple(values)

    # Check if pair is supported (or its reverse)
    if pair not in _RESOLVERS:
        reverse_pair = (pair[1], pair[0])
        if reverse_pair in _RESOLVERS:
            pair = reverse_pair
            ordered_values = (ordered_values[1], ordered_values[0])
        else:
            supported = [f"({a}, {b})" for a, b in SUPPORTED_INPUT_PAIRS]
            raise InvalidArgumentError(
                f"Unsupported input pair: {input_pair}. "
                f"Supported pairs: {', '.join(supported)}"
            )

    logger.debug("Resolving state point %s = %s at %.1f Pa", pair, ordered_values, pressure)
    resolver = _RESOLVERS[pair]
    state = resolver(ordered_values[0], ordered_values[1], pressure)

    return StatePointOutput(
        label=label,
        input_pair=tuple(input_pair),
        input_values=tuple(values),
        state=state,
    )


def get_pressure_from_altitude(altitude: float) -> float:
    """
    Convert altitude [m] to atmospheric pressure [Pa] using psychrolib's
    standard atmosphere model.
    """
    psychrolib.SetUnitSystem(psychrolib.SI)
    return psychrolib.GetStandardAtmPressure(altitude)
