"""
Pydantic models for humid air states and flows.

Instances are immutable snapshots. Build them with the factory functions in
psychro_engine.engine.fluids, which validate the inputs and compute every
derived property up front.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VapourState(str, Enum):
    UNSATURATED = "unsaturated"
    SATURATED = "saturated"
    WATER_MIST = "water_mist"  # fog above 0 °C
    ICE_FOG = "ice_fog"  # fog at or below 0 °C


class HumidAir(BaseModel):
    """Full humid air state with all derived properties."""

    model_config = ConfigDict(frozen=True)

    # Defining state
    pressure: float = Field(..., description="Absolute pressure, Pa")
    temperature: float = Field(..., description="Dry-bulb temperature, °C")
    humidity_ratio: float = Field(..., description="Humidity ratio, kg_w/kg_da")

    # Derived properties
    relative_humidity: float = Field(..., description="Relative humidity (0-100%)")
    saturation_pressure: float = Field(..., description="Saturation pressure at dry bulb, Pa")
    max_humidity_ratio: float = Field(..., description="Humidity ratio at saturation, kg_w/kg_da")
    vapour_state: VapourState
    wet_bulb_temperature: float = Field(..., description="Wet-bulb temperature, °C")
    dew_point_temperature: float = Field(..., description="Dew point temperature, °C")
    density: float = Field(..., description="Density, kg/m³")
    specific_heat: float = Field(..., description="Specific heat, kJ/(kg_da·K)")
    specific_enthalpy: float = Field(..., description="Specific enthalpy, kJ/kg_da")
    dynamic_viscosity: float = Field(..., description="Dynamic viscosity, Pa·s")
    kinematic_viscosity: float = Field(..., description="Kinematic viscosity, m²/s")
    thermal_conductivity: float = Field(..., description="Thermal conductivity, W/(m·K)")
    thermal_diffusivity: float = Field(..., description="Thermal diffusivity, m²/s")
    prandtl_number: float = Field(..., description="Prandtl number")


class FlowOfHumidAir(BaseModel):
    """Humid air stream. Dry-air mass flow is the conserved quantity."""

    model_config = ConfigDict(frozen=True)

    fluid: HumidAir
    dry_air_mass_flow: float = Field(..., description="Dry air mass flow, kg/s")
    mass_flow: float = Field(..., description="Humid air mass flow, kg/s")
    volumetric_flow: float = Field(..., description="Humid air volumetric flow, m³/s")

    # Shortcuts used throughout the process equations
    @property
    def pressure(self) -> float:
        return self.fluid.pressure

    @property
    def temperature(self) -> float:
        return self.fluid.temperature

    @property
    def humidity_ratio(self) -> float:
        return self.fluid.humidity_ratio

    @property
    def relative_humidity(self) -> float:
        return self.fluid.relative_humidity

    @property
    def specific_enthalpy(self) -> float:
        return self.fluid.specific_enthalpy

    @property
    def dew_point_temperature(self) -> float:
        return self.fluid.dew_point_temperature
