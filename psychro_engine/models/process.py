"""
Pydantic models for heating, cooling and mixing process input/output.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from psychro_engine.config import DEFAULT_PRESSURE
from psychro_engine.models.humid_air import FlowOfHumidAir
from psychro_engine.models.liquid_water import FlowOfLiquidWater


class HeatingMode(str, Enum):
    POWER = "power"  # heating power [W] → outlet state
    TEMPERATURE = "temperature"  # target outlet dry bulb [°C] → power
    RELATIVE_HUMIDITY = "relative_humidity"  # target outlet RH [%] → power


class CoolingMode(str, Enum):
    POWER = "power"  # cooling power [W], negative → outlet state
    TEMPERATURE = "temperature"  # target outlet dry bulb [°C] → power
    RELATIVE_HUMIDITY = "relative_humidity"  # target outlet RH [%] → power


class DryCoolingMode(str, Enum):
    POWER = "power"
    TEMPERATURE = "temperature"


class CoolantData(BaseModel):
    """Cooling coil coolant: supply/return temperatures and the mean wall temperature."""

    model_config = ConfigDict(frozen=True)

    supply_temperature: float = Field(..., description="Coolant supply temperature, °C")
    return_temperature: float = Field(..., description="Coolant return temperature, °C")
    average_temperature: float = Field(
        ..., description="Arithmetic mean of supply and return, used as coil wall temperature, °C"
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class HeatingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: HeatingMode
    inlet_air_flow: FlowOfHumidAir
    outlet_air_flow: FlowOfHumidAir
    heat_of_process: float = Field(..., description="Heat added to the air, W")


class DryCoolingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: DryCoolingMode
    inlet_air_flow: FlowOfHumidAir
    outlet_air_flow: FlowOfHumidAir
    heat_of_process: float = Field(..., description="Heat added to the air (negative), W")


class CoolingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: CoolingMode
    inlet_air_flow: FlowOfHumidAir
    outlet_air_flow: FlowOfHumidAir
    heat_of_process: float = Field(..., description="Heat added to the air (negative), W")
    condensate_flow: FlowOfLiquidWater
    bypass_factor: float = Field(..., description="Coil bypass factor, not clamped to [0, 1]")
    average_wall_temperature: float = Field(..., description="Mean coil wall temperature, °C")
    coolant_data: CoolantData
    coolant_supply_flow: FlowOfLiquidWater
    coolant_return_flow: FlowOfLiquidWater
    warnings: list[str] = Field(default_factory=list)


class MixingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    inlet_air_flow: FlowOfHumidAir
    recirculation_flows: list[FlowOfHumidAir]
    outlet_air_flow: FlowOfHumidAir


# ---------------------------------------------------------------------------
# API input
# ---------------------------------------------------------------------------

class AirFlowInput(BaseModel):
    """Humid air flow described by a state point pair and exactly one flow quantity."""

    pressure: float = DEFAULT_PRESSURE
    state_pair: tuple[str, str] = Field(
        ...,
        description="Pair of independent properties, e.g. ('Tdb', 'RH')",
        examples=[("Tdb", "RH")],
    )
    state_values: tuple[float, float] = Field(
        ...,
        description="Values for the pair, in order matching state_pair",
        examples=[(34.0, 40.0)],
    )
    dry_air_mass_flow: Optional[float] = None  # kg/s
    mass_flow: Optional[float] = None  # kg/s, humid air
    volumetric_flow: Optional[float] = None  # m³/s


class HeatingInput(BaseModel):
    inlet: AirFlowInput
    mode: HeatingMode
    value: float = Field(..., description="Power [W], target temperature [°C] or target RH [%]")


class CoolingInput(BaseModel):
    inlet: AirFlowInput
    coolant_supply_temperature: float = Field(..., description="°C")
    coolant_return_temperature: float = Field(..., description="°C")
    mode: CoolingMode
    value: float = Field(..., description="Power [W], target temperature [°C] or target RH [%]")


class DryCoolingInput(BaseModel):
    inlet: AirFlowInput
    mode: DryCoolingMode
    value: float = Field(..., description="Power [W] or target temperature [°C]")


class MixingInput(BaseModel):
    inlet: AirFlowInput
    recirculation: list[AirFlowInput] = Field(default_factory=list)
