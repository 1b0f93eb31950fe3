"""Tests for input validation and coordinate formatting."""

import math

import pytest

from nws_weather.errors import ErrorCode, WeatherServiceError
from nws_weather.validation import format_coordinates, validate_coordinates, validate_state_code


class TestValidateStateCode:
    @pytest.mark.parametrize("state,expected", [("CA", "CA"), ("ca", "CA"), ("nY", "NY"), ("Tx", "TX")])
    def test_normalizes_to_upper_case(self, state: str, expected: str):
        assert validate_state_code(state) == expected

    @pytest.mark.parametrize("state", ["", "C", "CAL", "C1", "12", "C ", " CA", "ca\n", "é1", "ß", "ÇA"])
    def test_rejects_malformed(self, state: str):
        with pytest.raises(WeatherServiceError) as exc_info:
            validate_state_code(state)
        err = exc_info.value
        assert err.code is ErrorCode.INVALID_STATE_CODE
        assert err.retryable is False
        assert err.status_code is None
        assert "Must be a two-letter state code" in err.message


class TestValidateCoordinates:
    @pytest.mark.parametrize(
        "lat,lon",
        [(0, 0), (-90, -180), (90, 180), (-90, 180), (40.7128, -74.006), (89.9999, -179.9999)],
    )
    def test_accepts_in_range(self, lat: float, lon: float):
        assert validate_coordinates(lat, lon) is None

    @pytest.mark.parametrize("lat", [91, -90.0001, 1e9])
    def test_rejects_latitude(self, lat: float):
        with pytest.raises(WeatherServiceError) as exc_info:
            validate_coordinates(lat, 0)
        assert exc_info.value.code is ErrorCode.INVALID_LATITUDE

    @pytest.mark.parametrize("lon", [180.5, -181])
    def test_rejects_longitude(self, lon: float):
        with pytest.raises(WeatherServiceError) as exc_info:
            validate_coordinates(0, lon)
        assert exc_info.value.code is ErrorCode.INVALID_LONGITUDE

    def test_latitude_reported_first(self):
        with pytest.raises(WeatherServiceError) as exc_info:
            validate_coordinates(91, 500)
        assert exc_info.value.code is ErrorCode.INVALID_LATITUDE
        assert exc_info.value.message == "Invalid latitude: 91. Must be between -90 and 90"

    def test_rejects_nan(self):
        with pytest.raises(WeatherServiceError) as exc_info:
            validate_coordinates(math.nan, 0)
        assert exc_info.value.code is ErrorCode.INVALID_LATITUDE


class TestFormatCoordinates:
    def test_rounds_to_four_places(self):
        assert format_coordinates(40.71276, -74.00601) == "40.7128,-74.0060"

    def test_pads_integers(self):
        assert format_coordinates(40, -74) == "40.0000,-74.0000"

    def test_custom_precision(self):
        assert format_coordinates(1.23456, 2.5, precision=2) == "1.23,2.50"

    def test_uses_binary_value_for_ties(self):
        # 40.71275 is stored as 40.712749999..., so it rounds down
        assert format_coordinates(40.71275, 0) == "40.7127,0.0000"

    def test_binary_ties_round_away_from_zero(self):
        # 0.03125 and 74.03125 are exact in binary
        assert format_coordinates(0.03125, -74.03125) == "0.0313,-74.0313"

    def test_large_finite_values(self):
        assert format_coordinates(1e30, -0.5, precision=0) == "1000000000000000019884624838656,-1"
