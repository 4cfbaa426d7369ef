"""
Tests for the humid air, flow, liquid water and coolant builders.
"""

import pytest

from psychro_engine.config import DEFAULT_PRESSURE
from psychro_engine.engine.fluids import (
    build_coolant_data,
    build_humid_air,
    build_liquid_water,
    flow_from_dry_air_mass_flow,
    flow_from_mass_flow,
    flow_from_volumetric_flow,
    flow_of_liquid_water,
    humid_air_from_relative_humidity,
)
from psychro_engine.exceptions import InvalidArgumentError
from psychro_engine.models.humid_air import VapourState


def approx(value: float, rel_tol: float = 1e-9, abs_tol: float = 1e-12):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


@pytest.fixture
def room_air():
    return humid_air_from_relative_humidity(DEFAULT_PRESSURE, 20.0, 50.0)


# ---------------------------------------------------------------------------
# HumidAir
# ---------------------------------------------------------------------------

class TestHumidAir:

    def test_relative_humidity_round_trip(self, room_air):
        assert room_air.relative_humidity == pytest.approx(50.0, abs=1e-9)

    def test_humidity_ratio_of_room_air(self, room_air):
        assert room_air.humidity_ratio == pytest.approx(0.00726, abs=5e-5)

    def test_derived_temperatures_are_ordered(self, room_air):
        assert room_air.dew_point_temperature < room_air.wet_bulb_temperature < room_air.temperature

    def test_vapour_state_unsaturated(self, room_air):
        assert room_air.vapour_state == VapourState.UNSATURATED

    def test_vapour_state_saturated(self):
        air = humid_air_from_relative_humidity(DEFAULT_PRESSURE, 20.0, 100.0)
        assert air.vapour_state == VapourState.SATURATED

    def test_vapour_state_water_mist(self):
        air = build_humid_air(DEFAULT_PRESSURE, 20.0, 0.03)
        assert air.vapour_state == VapourState.WATER_MIST
        assert air.relative_humidity == 100.0

    def test_vapour_state_ice_fog(self):
        air = build_humid_air(DEFAULT_PRESSURE, -10.0, 0.01)
        assert air.vapour_state == VapourState.ICE_FOG

    def test_is_immutable(self, room_air):
        with pytest.raises(Exception):
            room_air.temperature = 25.0

    def test_serializes_with_model_dump(self, room_air):
        data = room_air.model_dump()
        assert data["temperature"] == 20.0
        assert data["vapour_state"] == VapourState.UNSATURATED

    def test_rejects_low_pressure(self):
        with pytest.raises(InvalidArgumentError, match="pressure"):
            build_humid_air(10_000.0, 20.0, 0.007)

    def test_rejects_temperature_out_of_range(self):
        with pytest.raises(InvalidArgumentError, match="temperature"):
            build_humid_air(DEFAULT_PRESSURE, 250.0, 0.007)

    def test_rejects_negative_humidity_ratio(self):
        with pytest.raises(InvalidArgumentError, match="humidity_ratio"):
            build_humid_air(DEFAULT_PRESSURE, 20.0, -0.001)

    def test_rejects_saturation_pressure_above_total_pressure(self):
        with pytest.raises(InvalidArgumentError, match="Saturation pressure"):
            build_humid_air(DEFAULT_PRESSURE, 120.0, 0.01)

    def test_rejects_nan(self):
        with pytest.raises(InvalidArgumentError):
            build_humid_air(DEFAULT_PRESSURE, float("nan"), 0.007)

    def test_rejects_relative_humidity_above_100(self):
        with pytest.raises(InvalidArgumentError):
            humid_air_from_relative_humidity(DEFAULT_PRESSURE, 20.0, 101.0)


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------

class TestFlowOfHumidAir:

    def test_from_dry_air_mass_flow(self, room_air):
        flow = flow_from_dry_air_mass_flow(room_air, 2.0)
        assert flow.dry_air_mass_flow == 2.0
        assert flow.mass_flow == approx(2.0 * (1.0 + room_air.humidity_ratio))
        assert flow.volumetric_flow == approx(flow.mass_flow / room_air.density)

    def test_from_mass_flow(self, room_air):
        flow = flow_from_mass_flow(room_air, 3.0)
        assert flow.mass_flow == approx(3.0)
        assert flow.dry_air_mass_flow == approx(3.0 / (1.0 + room_air.humidity_ratio))

    def test_from_volumetric_flow(self, room_air):
        flow = flow_from_volumetric_flow(room_air, 1.0)
        assert flow.mass_flow == approx(room_air.density)
        assert flow.volumetric_flow == approx(1.0)

    def test_shortcuts_read_the_fluid(self, room_air):
        flow = flow_from_mass_flow(room_air, 1.0)
        assert flow.temperature == room_air.temperature
        assert flow.pressure == room_air.pressure
        assert flow.humidity_ratio == room_air.humidity_ratio
        assert flow.relative_humidity == room_air.relative_humidity
        assert flow.specific_enthalpy == room_air.specific_enthalpy
        assert flow.dew_point_temperature == room_air.dew_point_temperature

    def test_zero_flow_is_allowed(self, room_air):
        assert flow_from_mass_flow(room_air, 0.0).dry_air_mass_flow == 0.0

    def test_rejects_negative_flow(self, room_air):
        with pytest.raises(InvalidArgumentError):
            flow_from_dry_air_mass_flow(room_air, -1.0)

    def test_rejects_flow_above_limit(self, room_air):
        with pytest.raises(InvalidArgumentError):
            flow_from_mass_flow(room_air, 1.0e10)


# ---------------------------------------------------------------------------
# Liquid water and coolant
# ---------------------------------------------------------------------------

class TestLiquidWater:

    def test_build(self):
        water = build_liquid_water(15.0)
        assert water.density == pytest.approx(998.8844003066922, rel=1e-6)
        assert water.specific_enthalpy == pytest.approx(62.83139309762801, rel=1e-6)

    def test_flow(self):
        flow = flow_of_liquid_water(build_liquid_water(15.0), 2.0)
        assert flow.volumetric_flow == approx(2.0 / flow.fluid.density)
        assert flow.temperature == 15.0

    def test_rejects_frozen_water(self):
        with pytest.raises(InvalidArgumentError):
            build_liquid_water(-5.0)


class TestCoolantData:

    def test_average_temperature(self):
        coolant = build_coolant_data(9.0, 14.0)
        assert coolant.average_temperature == 11.5

    def test_equal_temperatures_are_allowed(self):
        assert build_coolant_data(7.0, 7.0).average_temperature == 7.0

    def test_rejects_supply_above_return(self):
        with pytest.raises(InvalidArgumentError, match="Supply temperature"):
            build_coolant_data(14.0, 9.0)

    def test_rejects_temperature_above_limit(self):
        with pytest.raises(InvalidArgumentError):
            build_coolant_data(9.0, 95.0)
