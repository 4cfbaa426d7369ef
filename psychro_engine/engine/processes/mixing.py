"""
Adiabatic mixing of humid air flows.

Humidity ratio and specific enthalpy of the outlet are dry-air mass flow
weighted averages of the inlets; the outlet dry bulb follows from the mixed
enthalpy and humidity ratio.
"""

import logging
from typing import Optional

from psychro_engine.config import MASS_FLOW_MAX
from psychro_engine.engine.fluids import build_humid_air, flow_from_dry_air_mass_flow
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.validators import require_below_or_equal
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.models.humid_air import FlowOfHumidAir
from psychro_engine.models.process import MixingResult

logger = logging.getLogger(__name__)


def _mixed_flow(pressure: float, dry_air_mass_flow: float, x_mda: float, i_mda: float) -> FlowOfHumidAir:
    x_out = x_mda / dry_air_mass_flow
    i_out = i_mda / dry_air_mass_flow
    t_out = ha.dry_bulb_temperature_ix(i_out, x_out, pressure)
    logger.debug("Mixed flow: t = %.4f °C, x = %.6f kg/kg", t_out, x_out)
    return flow_from_dry_air_mass_flow(build_humid_air(pressure, t_out, x_out), dry_air_mass_flow)


def mixing_of_two_flows(inlet_air_flow: FlowOfHumidAir, recirculation_flow: FlowOfHumidAir) -> MixingResult:
    """
    Mix the inlet flow with one recirculation flow.

    The outlet takes the inlet pressure. A zero inlet flow returns the
    recirculation flow, a zero recirculation flow returns the inlet.
    """
    require_below_or_equal(
        inlet_air_flow.mass_flow + recirculation_flow.mass_flow, MASS_FLOW_MAX, "total mass_flow"
    )
    mda_in = inlet_air_flow.dry_air_mass_flow
    mda_rec = recirculation_flow.dry_air_mass_flow

    if mda_in == 0.0:
        outlet_flow = recirculation_flow
    elif mda_rec == 0.0:
        outlet_flow = inlet_air_flow
    else:
        outlet_flow = _mixed_flow(
            inlet_air_flow.pressure,
            mda_in + mda_rec,
            mda_in * inlet_air_flow.humidity_ratio + mda_rec * recirculation_flow.humidity_ratio,
            mda_in * inlet_air_flow.specific_enthalpy + mda_rec * recirculation_flow.specific_enthalpy,
        )

    return MixingResult(
        inlet_air_flow=inlet_air_flow,
        recirculation_flows=[recirculation_flow],
        outlet_air_flow=outlet_flow,
    )


def mixing_of_multiple_flows(inlet_air_flow: FlowOfHumidAir,
                             recirculation_flows: Optional[list[FlowOfHumidAir]] = None) -> MixingResult:
    """
    Mix the inlet flow with any number of recirculation flows.

    The outlet pressure is the highest of all inlet pressures.

    Raises:
        InvalidArgumentError: if the total dry air mass flow is zero
    """
    recirculation_flows = list(recirculation_flows or [])
    if not recirculation_flows:
        return MixingResult(
            inlet_air_flow=inlet_air_flow,
            recirculation_flows=[],
            outlet_air_flow=inlet_air_flow,
        )

    total_mass_flow = inlet_air_flow.mass_flow + sum(flow.mass_flow for flow in recirculation_flows)
    require_below_or_equal(total_mass_flow, MASS_FLOW_MAX, "total mass_flow")

    mda_out = inlet_air_flow.dry_air_mass_flow
    x_mda = mda_out * inlet_air_flow.humidity_ratio
    i_mda = mda_out * inlet_air_flow.specific_enthalpy
    pressure = inlet_air_flow.pressure

    for flow in recirculation_flows:
        mda_out += flow.dry_air_mass_flow
        x_mda += flow.dry_air_mass_flow * flow.humidity_ratio
        i_mda += flow.dry_air_mass_flow * flow.specific_enthalpy
        pressure = max(pressure, flow.pressure)

    if mda_out == 0.0:
        raise InvalidArgumentError(
            f"Sum of all dry air mass flows must be positive for mixing. mda = {mda_out}"
        )

    return MixingResult(
        inlet_air_flow=inlet_air_flow,
        recirculation_flows=recirculation_flows,
        outlet_air_flow=_mixed_flow(pressure, mda_out, x_mda, i_mda),
    )
