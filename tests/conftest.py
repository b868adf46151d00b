# shared fixtures: a client pointed at fake hosts, never the real apis

import pytest
from citytempavg.client import CityTemperatureClient
from citytempavg.config import Settings

CITIES_URL = "https://cities.test/api/records/1.0/search/"
METAWEATHER_URL = "https://metaweather.test"
SEARCH_URL = METAWEATHER_URL + "/api/location/search/"


def city_records(n: int) -> dict:
    # opendatasoft-shaped payload with n distinct coordinates
    return {
        "nhits": 130000,
        "records": [
            {"fields": {"coordinates": [30.0 + i * 0.1, -120.0 + i * 0.5]}}
            for i in range(n)
        ],
    }


def day_url(woeid: int, year: int = 2026, month: int = 10, day: int = 17) -> str:
    return f"{METAWEATHER_URL}/api/location/{woeid}/{year}/{month}/{day}/"


@pytest.fixture
def settings():
    return Settings(cities_url=CITIES_URL, metaweather_url=METAWEATHER_URL, timeout=2.0)


@pytest.fixture
def client(settings):
    with CityTemperatureClient(settings=settings) as c:
        yield c
