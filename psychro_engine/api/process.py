"""
API routes for heating, cooling and mixing processes.
"""

from fastapi import APIRouter, HTTPException

from psychro_engine.engine.fluids import (
    build_coolant_data,
    flow_from_dry_air_mass_flow,
    flow_from_mass_flow,
    flow_from_volumetric_flow,
)
from psychro_engine.engine.processes.cooling import cool, dry_cool
from psychro_engine.engine.processes.heating import heat
from psychro_engine.engine.processes.mixing import mixing_of_multiple_flows
from psychro_engine.engine.state_resolver import resolve_state_point
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.models.humid_air import FlowOfHumidAir
from psychro_engine.models.process import (
    AirFlowInput,
    CoolingInput,
    CoolingResult,
    DryCoolingInput,
    DryCoolingResult,
    HeatingInput,
    HeatingResult,
    MixingInput,
    MixingResult,
)

router = APIRouter(prefix="/api/v1", tags=["process"])


def _build_flow(data: AirFlowInput) -> FlowOfHumidAir:
    """Resolve the inlet state and attach exactly one of the flow quantities."""
    quantities = {
        "dry_air_mass_flow": data.dry_air_mass_flow,
        "mass_flow": data.mass_flow,
        "volumetric_flow": data.volumetric_flow,
    }
    given = [name for name, value in quantities.items() if value is not None]
    if len(given) != 1:
        raise InvalidArgumentError(
            "Exactly one of dry_air_mass_flow, mass_flow or volumetric_flow must be "
            f"given, got: {given or 'none'}"
        )

    humid_air = resolve_state_point(data.state_pair, data.state_values, data.pressure).state
    if data.dry_air_mass_flow is not None:
        return flow_from_dry_air_mass_flow(humid_air, data.dry_air_mass_flow)
    if data.mass_flow is not None:
        return flow_from_mass_flow(humid_air, data.mass_flow)
    return flow_from_volumetric_flow(humid_air, data.volumetric_flow)


@router.post("/heating", response_model=HeatingResult)
async def calculate_heating(data: HeatingInput) -> HeatingResult:
    """Heat an air flow from power [W], target temperature [°C] or target RH [%]."""
    try:
        return heat(_build_flow(data.inlet), data.mode, data.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/cooling", response_model=CoolingResult)
async def calculate_cooling(data: CoolingInput) -> CoolingResult:
    """
    Cool an air flow on a coil with condensation (bypass factor model).

    Power is given as a negative value; target RH must not be below the inlet RH.
    """
    try:
        coolant = build_coolant_data(data.coolant_supply_temperature, data.coolant_return_temperature)
        return cool(_build_flow(data.inlet), coolant, data.mode, data.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/dry-cooling", response_model=DryCoolingResult)
async def calculate_dry_cooling(data: DryCoolingInput) -> DryCoolingResult:
    """Sensible cooling at constant humidity ratio."""
    try:
        return dry_cool(_build_flow(data.inlet), data.mode, data.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/mixing", response_model=MixingResult)
async def calculate_mixing(data: MixingInput) -> MixingResult:
    """Adiabatic mixing of the inlet flow with any number of recirculation flows."""
    try:
        inlet = _build_flow(data.inlet)
        recirculation = [_build_flow(flow) for flow in data.recirculation]
        return mixing_of_multiple_flows(inlet, recirculation)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
