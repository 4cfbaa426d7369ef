"""
API routes for state point resolution.
"""

from fastapi import APIRouter, HTTPException

from psychro_engine.models.state_point import StatePointInput, StatePointOutput
from psychro_engine.engine.state_resolver import resolve_state_point, get_pressure_from_altitude

router = APIRouter(prefix="/api/v1", tags=["state-point"])


@router.post("/state-point", response_model=StatePointOutput)
async def create_state_point(data: StatePointInput) -> StatePointOutput:
    """
    Resolve a full humid air state from two independent properties.

    Accepts any supported input pair (e.g., Tdb+RH, Tdb+Twb, W+h, etc.)
    in either order and returns all humid air properties.
    """
    try:
        return resolve_state_point(
            input_pair=data.input_pair,
            values=data.values,
            pressure=data.pressure,
            label=data.label,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/pressure-from-altitude")
async def pressure_from_altitude(altitude: float) -> dict:
    """
    Convert altitude [m] to standard atmospheric pressure [Pa].
    """
    try:
        pressure = get_pressure_from_altitude(altitude)
        return {"altitude": altitude, "pressure": round(pressure, 6)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
