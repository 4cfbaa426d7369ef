"""
Tests for the state point resolver.

Every supported input pair is checked by round trip: a reference state is
built from Tdb + RH, then re-resolved from each other pair of its properties.
"""

import psychrolib
import pytest

from psychro_engine.config import DEFAULT_PRESSURE, SUPPORTED_INPUT_PAIRS
from psychro_engine.engine.state_resolver import get_pressure_from_altitude, resolve_state_point
from psychro_engine.exceptions import InvalidArgumentError

psychrolib.SetUnitSystem(psychrolib.SI)

P = DEFAULT_PRESSURE


def approx(value: float, rel_tol: float = 1e-5, abs_tol: float = 1e-4):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


@pytest.fixture(scope="module")
def reference():
    return resolve_state_point(("Tdb", "RH"), (20.0, 50.0), P).state


def _pair_values(state, pair):
    fields = {
        "Tdb": state.temperature,
        "RH": state.relative_humidity,
        "W": state.humidity_ratio,
        "Tdp": state.dew_point_temperature,
        "Twb": state.wet_bulb_temperature,
        "h": state.specific_enthalpy,
    }
    return fields[pair[0]], fields[pair[1]]


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

class TestRoundTrip:

    @pytest.mark.parametrize("pair", SUPPORTED_INPUT_PAIRS)
    def test_resolves_reference_state(self, reference, pair):
        values = _pair_values(reference, pair)
        state = resolve_state_point(pair, values, P).state
        assert state.temperature == approx(20.0, abs_tol=1e-3)
        assert state.humidity_ratio == approx(reference.humidity_ratio, abs_tol=1e-6)
        assert state.relative_humidity == approx(50.0, abs_tol=1e-2)

    @pytest.mark.parametrize("pair", SUPPORTED_INPUT_PAIRS)
    def test_reversed_pair(self, reference, pair):
        values = _pair_values(reference, pair)
        result = resolve_state_point((pair[1], pair[0]), (values[1], values[0]), P)
        assert result.state.temperature == approx(20.0, abs_tol=1e-3)
        assert result.input_pair == (pair[1], pair[0])
        assert result.input_values == (values[1], values[0])

    def test_label_is_echoed(self):
        result = resolve_state_point(("Tdb", "RH"), (25.0, 60.0), P, label="Supply")
        assert result.label == "Supply"


# ---------------------------------------------------------------------------
# Reference values
# ---------------------------------------------------------------------------

class TestReferenceValues:

    def test_humidity_ratio_matches_psychrolib(self, reference):
        expected = psychrolib.GetHumRatioFromRelHum(20.0, 0.5, P)
        assert reference.humidity_ratio == pytest.approx(expected, abs=1e-4)

    def test_dew_point_matches_psychrolib(self, reference):
        expected = psychrolib.GetTDewPointFromRelHum(20.0, 0.5)
        assert reference.dew_point_temperature == pytest.approx(expected, abs=0.1)

    def test_wet_bulb_matches_psychrolib(self, reference):
        expected = psychrolib.GetTWetBulbFromRelHum(20.0, 0.5, P)
        assert reference.wet_bulb_temperature == pytest.approx(expected, abs=0.1)

    def test_saturated_dew_point(self):
        state = resolve_state_point(("Tdb", "Tdp"), (15.0, 15.0), P).state
        assert state.relative_humidity == pytest.approx(100.0, abs=1e-3)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:

    def test_unsupported_pair(self):
        with pytest.raises(InvalidArgumentError, match="Unsupported input pair"):
            resolve_state_point(("Tdp", "W"), (10.0, 0.007), P)

    def test_dew_point_above_dry_bulb(self):
        with pytest.raises(InvalidArgumentError, match="Dew point"):
            resolve_state_point(("Tdb", "Tdp"), (20.0, 25.0), P)

    def test_wet_bulb_above_dry_bulb(self):
        with pytest.raises(InvalidArgumentError, match="Wet bulb"):
            resolve_state_point(("Tdb", "Twb"), (20.0, 25.0), P)

    def test_enthalpy_out_of_range(self):
        with pytest.raises(InvalidArgumentError, match="achievable range"):
            resolve_state_point(("Tdb", "h"), (20.0, 500.0), P)

    @pytest.mark.parametrize("pair, values", [
        (("W", "RH"), (0.007, 0.0)),
        (("Tdp", "RH"), (10.0, 120.0)),
        (("Twb", "RH"), (15.0, -5.0)),
    ])
    def test_relative_humidity_out_of_range(self, pair, values):
        with pytest.raises(InvalidArgumentError):
            resolve_state_point(pair, values, P)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            resolve_state_point(("Tdb", "RH"), (20.0, 150.0), P)


# ---------------------------------------------------------------------------
# Altitude
# ---------------------------------------------------------------------------

class TestPressureFromAltitude:

    def test_sea_level(self):
        assert get_pressure_from_altitude(0.0) == pytest.approx(101325.0, abs=1.0)

    def test_pressure_drops_with_altitude(self):
        assert get_pressure_from_altitude(1500.0) == pytest.approx(84556.0, rel=1e-3)
