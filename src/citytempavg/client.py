# OOP boundary for external i/o
# all http, urls and timeouts live here, so the parsing and aggregation code is pure and testable

from __future__ import annotations
import logging
from datetime import date
from typing import Any, Optional
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from dotenv import load_dotenv

from .config import Settings
from .models import Coordinate

load_dotenv()  # in production, environment variables are injected by the scheduler or container

logger = logging.getLogger(__name__)


class CityTemperatureError(RuntimeError):
    # base type for every failure raised by the client and service layers
    pass


class TransportError(CityTemperatureError):
    # connection failure, error status or unreadable body
    pass


class SchemaError(CityTemperatureError):
    # payload does not have the shape we parse
    pass


class IncompleteCityListError(SchemaError):
    pass


class NoLocationIdError(CityTemperatureError):
    pass


class NoTemperatureError(CityTemperatureError):
    # the only recoverable condition, the orchestrator skips the city
    pass


class CityTemperatureClient:
    # encapsulates provider details like urls, headers, timeouts and the adapter
    SEARCH_PATH = "/api/location/search/"
    DAY_PATH = "/api/location/{woeid}/{year}/{month}/{day}/"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        user_agent: str = "city-temp-avg/0.1",
    ):
        self.settings = settings or Settings.from_env()
        self.timeout = self.settings.timeout
        self.user_agent = user_agent

        # exactly one GET per call
        self._retry = Retry(
            total=0,
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        self.session = session or self._build_session()

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        adapter = HTTPAdapter(max_retries=self._retry)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> CityTemperatureClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_json(self, url: str, params: Optional[dict] = None) -> Any:
        # single GET, full body read, decoded json or TransportError
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Request error for {url}: {exc}") from exc

        if resp.status_code >= 400:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            raise TransportError(f"HTTP {resp.status_code} for {url}. Body: {snippet}")

        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from {url}: {exc}") from exc

    def get_city_records(self) -> Any:
        return self.get_json(self.settings.cities_url)

    def search_locations(self, coord: Coordinate) -> Any:
        lattlong = f"{coord.latitude:f},{coord.longitude:f}"
        return self.get_json(self.settings.metaweather_url + self.SEARCH_PATH, params={"lattlong": lattlong})

    def get_location_day(self, woeid: int, day: date) -> Any:
        path = self.DAY_PATH.format(woeid=woeid, year=day.year, month=day.month, day=day.day)
        return self.get_json(self.settings.metaweather_url + path)
