# runtime settings come from the environment only (a local .env is honoured by the client layer)

from __future__ import annotations
import logging
import os
from dataclasses import dataclass

CITY_COUNT = 100
COUNTRY = "United States"

# let the server sort and trim the fields, we only read the coordinates
CITIES_URL = (
    "https://public.opendatasoft.com/api/records/1.0/search/"
    "?rows=100&disjunctive.country=true&refine.country=United+States&sort=population"
    "&start=0&fields=coordinates&dataset=geonames-all-cities-with-a-population-1000"
    "&timezone=UTC&lang=en"
)
METAWEATHER_URL = "https://www.metaweather.com"
DEFAULT_TIMEOUT = 10.0


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    cities_url: str = CITIES_URL
    metaweather_url: str = METAWEATHER_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        raw_timeout = os.getenv("HTTP_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(f"HTTP_TIMEOUT must be a number (got {raw_timeout!r})") from exc
            if timeout <= 0:
                raise ConfigError(f"HTTP_TIMEOUT must be positive (got {raw_timeout!r})")

        log_level = (os.getenv("LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL is not a logging level (got {log_level!r})")

        return cls(
            cities_url=os.getenv("CITIES_URL") or CITIES_URL,
            metaweather_url=(os.getenv("METAWEATHER_URL") or METAWEATHER_URL).rstrip("/"),
            timeout=timeout,
            log_level=log_level,
        )
