"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from nws_weather.api import NWSAPIClient
from nws_weather.config import Settings
from nws_weather.service import WeatherService

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-nws.example.com"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base=TEST_BASE_URL)


@pytest.fixture
def client(settings: Settings) -> NWSAPIClient:
    return NWSAPIClient(settings)


@pytest.fixture
def service(client: NWSAPIClient) -> WeatherService:
    return WeatherService(client)


@pytest.fixture
def alerts_ca() -> dict:
    return load_fixture("alerts_ca.json")


@pytest.fixture
def alerts_empty() -> dict:
    return load_fixture("alerts_empty.json")


@pytest.fixture
def points_nyc() -> dict:
    return load_fixture("points_nyc.json")


@pytest.fixture
def forecast_nyc() -> dict:
    return load_fixture("forecast_nyc.json")
