"""
Tests for adiabatic mixing of humid air flows.
"""

import pytest

from psychro_engine.engine.fluids import (
    flow_from_dry_air_mass_flow,
    humid_air_from_relative_humidity,
)
from psychro_engine.engine.processes.mixing import mixing_of_multiple_flows, mixing_of_two_flows
from psychro_engine.exceptions import InvalidArgumentError


def approx(value: float, rel_tol: float = 1e-6, abs_tol: float = 1e-9):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


def make_flow(temperature: float, rh: float, dry_air_mass_flow: float, pressure: float = 101_325.0):
    air = humid_air_from_relative_humidity(pressure, temperature, rh)
    return flow_from_dry_air_mass_flow(air, dry_air_mass_flow)


# ---------------------------------------------------------------------------
# Two flows
# ---------------------------------------------------------------------------

class TestMixingOfTwoFlows:

    def setup_method(self):
        self.outdoor = make_flow(30.0, 40.0, 1.0)
        self.room = make_flow(20.0, 50.0, 3.0)

    def test_mass_and_energy_balance(self):
        result = mixing_of_two_flows(self.outdoor, self.room)
        outlet = result.outlet_air_flow
        expected_x = (self.outdoor.humidity_ratio + 3.0 * self.room.humidity_ratio) / 4.0
        expected_h = (self.outdoor.specific_enthalpy + 3.0 * self.room.specific_enthalpy) / 4.0
        assert outlet.dry_air_mass_flow == approx(4.0)
        assert outlet.humidity_ratio == approx(expected_x)
        assert outlet.specific_enthalpy == approx(expected_h, abs_tol=1e-6)

    def test_outlet_temperature_between_inlets(self):
        outlet = mixing_of_two_flows(self.outdoor, self.room).outlet_air_flow
        assert 20.0 < outlet.temperature < 30.0
        assert outlet.temperature == pytest.approx(22.5, abs=0.1)

    def test_outlet_takes_inlet_pressure(self):
        room = make_flow(20.0, 50.0, 3.0, pressure=100_000.0)
        result = mixing_of_two_flows(self.outdoor, room)
        assert result.outlet_air_flow.pressure == self.outdoor.pressure

    def test_zero_inlet_returns_recirculation(self):
        empty = make_flow(30.0, 40.0, 0.0)
        result = mixing_of_two_flows(empty, self.room)
        assert result.outlet_air_flow == self.room

    def test_zero_recirculation_returns_inlet(self):
        empty = make_flow(20.0, 50.0, 0.0)
        result = mixing_of_two_flows(self.outdoor, empty)
        assert result.outlet_air_flow == self.outdoor
        assert result.recirculation_flows == [empty]

    def test_total_mass_flow_limit(self):
        huge = make_flow(20.0, 50.0, 3.0e9)
        with pytest.raises(InvalidArgumentError, match="total mass_flow"):
            mixing_of_two_flows(huge, huge)


# ---------------------------------------------------------------------------
# Multiple flows
# ---------------------------------------------------------------------------

class TestMixingOfMultipleFlows:

    def test_matches_two_flow_mixing(self):
        outdoor = make_flow(30.0, 40.0, 1.0)
        room = make_flow(20.0, 50.0, 3.0)
        pairwise = mixing_of_two_flows(outdoor, room).outlet_air_flow
        multiple = mixing_of_multiple_flows(outdoor, [room]).outlet_air_flow
        assert multiple.temperature == approx(pairwise.temperature)
        assert multiple.humidity_ratio == approx(pairwise.humidity_ratio)

    def test_three_flows(self):
        flows = [make_flow(25.0, 30.0, 2.0), make_flow(15.0, 80.0, 1.0)]
        inlet = make_flow(35.0, 20.0, 1.0)
        outlet = mixing_of_multiple_flows(inlet, flows).outlet_air_flow
        expected_x = (inlet.humidity_ratio + 2.0 * flows[0].humidity_ratio + flows[1].humidity_ratio) / 4.0
        assert outlet.dry_air_mass_flow == approx(4.0)
        assert outlet.humidity_ratio == approx(expected_x)

    def test_no_recirculation_returns_inlet(self):
        inlet = make_flow(30.0, 40.0, 1.0)
        for flows in (None, []):
            result = mixing_of_multiple_flows(inlet, flows)
            assert result.outlet_air_flow == inlet
            assert result.recirculation_flows == []

    def test_outlet_takes_highest_pressure(self):
        inlet = make_flow(30.0, 40.0, 1.0, pressure=100_000.0)
        flows = [make_flow(20.0, 50.0, 1.0, pressure=101_325.0), make_flow(25.0, 50.0, 1.0, pressure=100_500.0)]
        result = mixing_of_multiple_flows(inlet, flows)
        assert result.outlet_air_flow.pressure == 101_325.0

    def test_zero_total_flow_raises(self):
        inlet = make_flow(30.0, 40.0, 0.0)
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            mixing_of_multiple_flows(inlet, [make_flow(20.0, 50.0, 0.0)])
