"""
Tests for argument validators and process direction/limit checks.
"""

import math

import pytest

from psychro_engine.engine.fluids import flow_from_dry_air_mass_flow, humid_air_from_relative_humidity
from psychro_engine.engine.processes import validators as pv
from psychro_engine.engine.properties import humid_air as ha
from psychro_engine.engine.validators import (
    require_above,
    require_below_or_equal,
    require_between,
    require_finite,
    require_non_negative,
    require_positive,
)
from psychro_engine.exceptions import InvalidArgumentError, ProcessDirectionError, ProcessLimitError


@pytest.fixture
def inlet_flow():
    air = humid_air_from_relative_humidity(100_000.0, 20.0, 50.0)
    return flow_from_dry_air_mass_flow(air, 1.0)


# ---------------------------------------------------------------------------
# Argument validators
# ---------------------------------------------------------------------------

class TestArgumentValidators:

    def test_valid_values_are_returned(self):
        assert require_finite(1.5, "x") == 1.5
        assert require_non_negative(0.0, "x") == 0.0
        assert require_positive(2.0, "x") == 2.0
        assert require_between(5.0, 0.0, 5.0, "x") == 5.0
        assert require_above(0.1, 0.0, "x") == 0.1
        assert require_below_or_equal(3.0, 3.0, "x") == 3.0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_raise(self, value):
        with pytest.raises(InvalidArgumentError, match="finite"):
            require_finite(value, "temperature")

    def test_missing_value_raises(self):
        with pytest.raises(InvalidArgumentError, match="temperature is required"):
            require_finite(None, "temperature")

    def test_negative_raises(self):
        with pytest.raises(InvalidArgumentError, match="mass_flow must not be negative"):
            require_non_negative(-0.1, "mass_flow")

    def test_zero_is_not_positive(self):
        with pytest.raises(InvalidArgumentError):
            require_positive(0.0, "pressure")

    @pytest.mark.parametrize("value", [-0.001, 100.001])
    def test_out_of_range_raises(self, value):
        with pytest.raises(InvalidArgumentError, match="outside the allowed range"):
            require_between(value, 0.0, 100.0, "relative_humidity")

    def test_exclusive_lower_bound(self):
        with pytest.raises(InvalidArgumentError):
            require_above(0.0, 0.0, "target temperature")

    def test_upper_bound(self):
        with pytest.raises(InvalidArgumentError, match="must not exceed"):
            require_below_or_equal(201.0, 200.0, "target temperature")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            require_positive(-1.0, "pressure")


# ---------------------------------------------------------------------------
# Process checks
# ---------------------------------------------------------------------------

class TestHeatingChecks:

    def test_max_heating_power(self, inlet_flow):
        t_max = ha.dry_bulb_temperature_max(100_000.0) * 0.98
        i_max = ha.specific_enthalpy(t_max, inlet_flow.humidity_ratio, 100_000.0)
        expected = (i_max - inlet_flow.specific_enthalpy) * inlet_flow.mass_flow * 1000.0
        assert pv.estimate_max_heating_power(inlet_flow) == pytest.approx(expected)

    def test_negative_power_is_wrong_direction(self):
        with pytest.raises(ProcessDirectionError):
            pv.require_heating_power(-1.0)

    def test_power_over_limit(self, inlet_flow):
        limit = pv.estimate_max_heating_power(inlet_flow)
        pv.require_physical_heating_power(inlet_flow, limit)
        with pytest.raises(ProcessLimitError):
            pv.require_physical_heating_power(inlet_flow, limit * 1.01)

    def test_target_temperature(self):
        pv.require_heating_target_temperature(20.0, 20.0)
        with pytest.raises(ProcessDirectionError):
            pv.require_heating_target_temperature(20.0, 19.0)
        with pytest.raises(InvalidArgumentError):
            pv.require_heating_target_temperature(20.0, 250.0)

    def test_target_relative_humidity(self):
        pv.require_heating_target_relative_humidity(50.0, 30.0)
        with pytest.raises(ProcessDirectionError):
            pv.require_heating_target_relative_humidity(50.0, 60.0)

    def test_min_heating_relative_humidity(self, inlet_flow):
        limit = pv.estimate_min_heating_relative_humidity(inlet_flow)
        assert 0.0 < limit < inlet_flow.relative_humidity
        pv.require_physical_heating_relative_humidity(inlet_flow, limit)
        with pytest.raises(ProcessLimitError):
            pv.require_physical_heating_relative_humidity(inlet_flow, 0.9 * limit)

    def test_zero_relative_humidity_is_unreachable(self, inlet_flow):
        with pytest.raises(ProcessLimitError, match="0 %"):
            pv.require_physical_heating_relative_humidity(inlet_flow, 0.0)

    def test_relative_humidity_ceiling(self):
        pv.require_process_relative_humidity(98.0)
        with pytest.raises(InvalidArgumentError):
            pv.require_process_relative_humidity(98.5)


class TestCoolingChecks:

    def test_max_cooling_power(self, inlet_flow):
        expected = -inlet_flow.specific_enthalpy * inlet_flow.mass_flow * 1000.0
        assert pv.estimate_max_cooling_power(inlet_flow) == pytest.approx(expected)
        assert pv.estimate_max_cooling_power(inlet_flow) < 0.0

    def test_positive_power_is_wrong_direction(self):
        with pytest.raises(ProcessDirectionError):
            pv.require_cooling_power(1.0)

    def test_power_over_limit(self, inlet_flow):
        limit = pv.estimate_max_cooling_power(inlet_flow)
        with pytest.raises(ProcessLimitError):
            pv.require_physical_cooling_power(inlet_flow, limit * 1.01)

    def test_target_temperature(self):
        with pytest.raises(ProcessDirectionError):
            pv.require_cooling_target_temperature(20.0, 21.0)
        with pytest.raises(InvalidArgumentError):
            pv.require_cooling_target_temperature(20.0, 0.0)

    def test_target_relative_humidity(self):
        with pytest.raises(ProcessDirectionError):
            pv.require_cooling_target_relative_humidity(50.0, 40.0)

    def test_dry_cooling_target(self, inlet_flow):
        pv.require_dry_cooling_target_temperature(inlet_flow, 15.0)
        with pytest.raises(ProcessDirectionError):
            pv.require_dry_cooling_target_temperature(inlet_flow, 25.0)
        with pytest.raises(ProcessLimitError, match="dew point"):
            pv.require_dry_cooling_target_temperature(inlet_flow, 5.0)
