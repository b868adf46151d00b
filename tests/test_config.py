# settings are read from the environment with sane defaults

import pytest
from citytempavg.config import CITIES_URL, METAWEATHER_URL, ConfigError, Settings

ENV_KEYS = ("CITIES_URL", "METAWEATHER_URL", "HTTP_TIMEOUT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    s = Settings.from_env()
    assert s.cities_url == CITIES_URL
    assert "refine.country=United+States" in s.cities_url
    assert s.metaweather_url == METAWEATHER_URL
    assert s.timeout == 10.0
    assert s.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("METAWEATHER_URL", "http://localhost:8080/")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.metaweather_url == "http://localhost:8080"
    assert s.timeout == 2.5
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("key, value", [("HTTP_TIMEOUT", "soon"), ("HTTP_TIMEOUT", "-1"), ("LOG_LEVEL", "LOUD")])
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError, match=key):
        Settings.from_env()
