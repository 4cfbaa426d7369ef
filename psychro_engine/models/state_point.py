"""
Pydantic models for state point input/output.
"""

from pydantic import BaseModel, Field

from psychro_engine.config import DEFAULT_PRESSURE
from psychro_engine.models.humid_air import HumidAir


class StatePointInput(BaseModel):
    """Input model for resolving a state point from two known properties."""

    input_pair: tuple[str, str] = Field(
        ...,
        description="Pair of independent properties, e.g. ('Tdb', 'RH')",
        examples=[("Tdb", "RH"), ("W", "h")],
    )
    values: tuple[float, float] = Field(
        ...,
        description="Values for the input pair, in order matching input_pair",
        examples=[(20.0, 50.0), (0.0073, 38.7)],
    )
    pressure: float = Field(
        default=DEFAULT_PRESSURE,
        description="Absolute pressure, Pa",
    )
    label: str = Field(
        default="",
        description="Optional user-facing label for this state point",
    )


class StatePointOutput(BaseModel):
    """Resolved state point with the input echoed back."""

    label: str = ""
    input_pair: tuple[str, str]
    input_values: tuple[float, float]
    state: HumidAir
