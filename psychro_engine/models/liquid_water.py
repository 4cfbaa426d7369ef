"""
Pydantic models for liquid water (condensate, coolant).
"""

from pydantic import BaseModel, ConfigDict, Field


class LiquidWater(BaseModel):
    model_config = ConfigDict(frozen=True)

    pressure: float = Field(..., description="Absolute pressure, Pa")
    temperature: float = Field(..., description="Water temperature, °C")
    density: float = Field(..., description="Density, kg/m³")
    specific_heat: float = Field(..., description="Specific heat, kJ/(kg·K)")
    specific_enthalpy: float = Field(..., description="Specific enthalpy, kJ/kg")


class FlowOfLiquidWater(BaseModel):
    model_config = ConfigDict(frozen=True)

    fluid: LiquidWater
    mass_flow: float = Field(..., description="Mass flow, kg/s")
    volumetric_flow: float = Field(..., description="Volumetric flow, m³/s")

    @property
    def temperature(self) -> float:
        return self.fluid.temperature
