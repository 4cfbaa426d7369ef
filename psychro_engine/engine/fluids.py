"""
Builders for fluid and flow value objects.

Every builder validates its primitive inputs, then computes all derived
properties eagerly and returns a frozen model. Models are never mutated;
a changed state is a new object.
"""

import math

from psychro_engine.config import (
    COOLANT_TEMPERATURE_MAX,
    COOLANT_TEMPERATURE_MIN,
    DEFAULT_PRESSURE,
    HUMIDITY_RATIO_MAX,
    MASS_FLOW_MAX,
    PRESSURE_MAX,
    PRESSURE_MIN,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    WATER_TEMPERATURE_MAX,
    WATER_TEMPERATURE_MIN,
)
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.properties import liquid_water as lw
from psychro_engine.engine.validators import (
    require_between,
    require_non_negative,
    require_positive,
)
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.models.humid_air import FlowOfHumidAir, HumidAir, VapourState
from psychro_engine.models.liquid_water import FlowOfLiquidWater, LiquidWater
from psychro_engine.models.process import CoolantData


def _vapour_state(temperature: float, x: float, x_max: float) -> VapourState:
    if math.isclose(x, x_max, rel_tol=1e-12, abs_tol=0.0):
        return VapourState.SATURATED
    if x > x_max:
        return VapourState.WATER_MIST if temperature > 0.0 else VapourState.ICE_FOG
    return VapourState.UNSATURATED


def _require_air_pressure_and_temperature(pressure: float, temperature: float) -> None:
    require_between(pressure, PRESSURE_MIN, PRESSURE_MAX, "pressure")
    require_between(temperature, TEMPERATURE_MIN, TEMPERATURE_MAX, "temperature")


def build_humid_air(pressure: float, temperature: float, humidity_ratio: float) -> HumidAir:
    """
    Build a humid air state from pressure [Pa], dry bulb [°C] and humidity ratio [kg/kg].

    Raises:
        InvalidArgumentError: if any input is out of range, or the saturation
            pressure at this temperature is not below the absolute pressure
    """
    _require_air_pressure_and_temperature(pressure, temperature)
    require_between(humidity_ratio, 0.0, HUMIDITY_RATIO_MAX, "humidity_ratio")

    ps = ha.saturation_pressure(temperature)
    if ps >= pressure:
        raise InvalidArgumentError(
            f"Saturation pressure {ps:.1f} Pa at {temperature} °C must be lower than "
            f"absolute pressure {pressure:.1f} Pa"
        )

    x = humidity_ratio
    x_max = ha.max_humidity_ratio(ps, pressure)
    rh = ha.relative_humidity(temperature, x, pressure)
    rho = ha.density(temperature, x, pressure)
    cp = ha.specific_heat(temperature, x)
    mu = ha.dynamic_viscosity(temperature, x)
    k = ha.thermal_conductivity(temperature, x)

    return HumidAir(
        pressure=pressure,
        temperature=temperature,
        humidity_ratio=x,
        relative_humidity=rh,
        saturation_pressure=ps,
        max_humidity_ratio=x_max,
        vapour_state=_vapour_state(temperature, x, x_max),
        wet_bulb_temperature=ha.wet_bulb_temperature(temperature, rh, pressure),
        dew_point_temperature=ha.dew_point_temperature(temperature, rh, pressure),
        density=rho,
        specific_heat=cp,
        specific_enthalpy=ha.specific_enthalpy(temperature, x, pressure),
        dynamic_viscosity=mu,
        kinematic_viscosity=ha.kinematic_viscosity(temperature, x, rho),
        thermal_conductivity=k,
        thermal_diffusivity=ha.thermal_diffusivity(rho, k, cp),
        prandtl_number=ha.prandtl_number(mu, k, cp),
    )


def humid_air_from_relative_humidity(
    pressure: float, temperature: float, relative_humidity: float
) -> HumidAir:
    """Build a humid air state from pressure [Pa], dry bulb [°C] and RH [%]."""
    _require_air_pressure_and_temperature(pressure, temperature)
    require_between(relative_humidity, 0.0, 100.0, "relative_humidity")
    ps = ha.saturation_pressure(temperature)
    x = ha.humidity_ratio(relative_humidity, ps, pressure)
    return build_humid_air(pressure, temperature, x)


# ---------------------------------------------------------------------------
# Humid air flows
# ---------------------------------------------------------------------------

def flow_from_dry_air_mass_flow(humid_air: HumidAir, dry_air_mass_flow: float) -> FlowOfHumidAir:
    """Flow of humid air from its dry-air mass flow [kg/s]."""
    require_non_negative(dry_air_mass_flow, "dry_air_mass_flow")
    mass_flow = dry_air_mass_flow * (1.0 + humid_air.humidity_ratio)
    require_between(mass_flow, 0.0, MASS_FLOW_MAX, "mass_flow")
    return FlowOfHumidAir(
        fluid=humid_air,
        dry_air_mass_flow=dry_air_mass_flow,
        mass_flow=mass_flow,
        volumetric_flow=mass_flow / humid_air.density,
    )


def flow_from_mass_flow(humid_air: HumidAir, mass_flow: float) -> FlowOfHumidAir:
    """Flow of humid air from its total (humid) mass flow [kg/s]."""
    require_between(mass_flow, 0.0, MASS_FLOW_MAX, "mass_flow")
    return flow_from_dry_air_mass_flow(humid_air, mass_flow / (1.0 + humid_air.humidity_ratio))


def flow_from_volumetric_flow(humid_air: HumidAir, volumetric_flow: float) -> FlowOfHumidAir:
    """Flow of humid air from its volumetric flow [m³/s]."""
    require_non_negative(volumetric_flow, "volumetric_flow")
    return flow_from_mass_flow(humid_air, volumetric_flow * humid_air.density)


# ---------------------------------------------------------------------------
# Liquid water and coolant
# ---------------------------------------------------------------------------

def build_liquid_water(temperature: float, pressure: float = DEFAULT_PRESSURE) -> LiquidWater:
    require_between(temperature, WATER_TEMPERATURE_MIN, WATER_TEMPERATURE_MAX, "water temperature")
    require_positive(pressure, "water pressure")
    return LiquidWater(
        pressure=pressure,
        temperature=temperature,
        density=lw.density(temperature),
        specific_heat=lw.specific_heat(temperature),
        specific_enthalpy=lw.specific_enthalpy(temperature),
    )


def flow_of_liquid_water(water: LiquidWater, mass_flow: float) -> FlowOfLiquidWater:
    require_between(mass_flow, 0.0, MASS_FLOW_MAX, "water mass_flow")
    return FlowOfLiquidWater(
        fluid=water,
        mass_flow=mass_flow,
        volumetric_flow=mass_flow / water.density,
    )


def build_coolant_data(supply_temperature: float, return_temperature: float) -> CoolantData:
    """
    Coolant supply/return pair. The coil wall temperature is taken as their
    arithmetic mean.
    """
    require_between(supply_temperature, COOLANT_TEMPERATURE_MIN, COOLANT_TEMPERATURE_MAX,
                    "coolant supply temperature")
    require_between(return_temperature, COOLANT_TEMPERATURE_MIN, COOLANT_TEMPERATURE_MAX,
                    "coolant return temperature")
    if supply_temperature > return_temperature:
        raise InvalidArgumentError(
            "Invalid temperatures for coolant data. Supply temperature cannot be greater "
            f"than return temperature. t_su = {supply_temperature}, t_ret = {return_temperature}"
        )
    return CoolantData(
        supply_temperature=supply_temperature,
        return_temperature=return_temperature,
        average_temperature=(supply_temperature + return_temperature) / 2.0,
    )
