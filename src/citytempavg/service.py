# orchestration and business rules.
# pure parsers turn raw payloads into value objects, the three fetch steps wrap them around the client,
# and average_temperature() drives the whole pass one city at a time


from __future__ import annotations
import logging
import math
import numbers
from datetime import date
from typing import Any, List, Optional
from .client import (
    CityTemperatureClient,
    IncompleteCityListError,
    NoLocationIdError,
    NoTemperatureError,
    SchemaError,
)
from .config import CITY_COUNT, COUNTRY
from .models import Accumulator, AverageResult, Coordinate, TemperatureReading

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; json Infinity and NaN decode to floats
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _first_field(payload: Any, field: str) -> Optional[Any]:
    # first element of a json array, or None when the array or the field is missing
    if not isinstance(payload, list) or not payload:
        return None
    first = payload[0]
    if not isinstance(first, dict):
        return None
    return first.get(field)


# opendatasoft shape: data["records"][i]["fields"]["coordinates"] == [lat, lon]
def parse_coordinates(data: Any, expected: int = CITY_COUNT) -> List[Coordinate]:
    try:
        records = data["records"]
    except (KeyError, TypeError) as exc:
        raise SchemaError("Unexpected API shape: missing records") from exc
    if not isinstance(records, list):
        raise SchemaError("Unexpected API shape: records is not a list")

    if len(records) < expected:
        raise IncompleteCityListError(f"{expected} cities were not returned (got {len(records)})")

    coords: List[Coordinate] = []
    for i, record in enumerate(records[:expected]):
        try:
            pair = record["fields"]["coordinates"]
        except (KeyError, TypeError) as exc:
            raise SchemaError(f"record {i}: missing fields.coordinates") from exc
        if not isinstance(pair, list) or len(pair) != 2 or not all(_is_number(v) for v in pair):
            raise SchemaError(f"record {i}: coordinates must be [lat, lon], got {pair!r}")
        try:
            coords.append(Coordinate(latitude=float(pair[0]), longitude=float(pair[1])))
        except ValueError as exc:
            raise SchemaError(f"record {i}: {exc}") from exc
    return coords


# metaweather search shape: [{"woeid": 2487956, "distance": 1836, ...}, ...] closest first
def extract_woeid(data: Any) -> Optional[int]:
    value = _first_field(data, "woeid")
    if not _is_number(value) or int(value) == 0:
        return None
    return int(value)


# metaweather day shape: [{"the_temp": 14.2, "created": "..."}, ...] most recent first
def extract_temperature(data: Any) -> Optional[float]:
    value = _first_field(data, "the_temp")
    # a reading of exactly zero is indistinguishable from a missing one upstream
    if not _is_number(value) or float(value) == 0.0:
        return None
    return float(value)


def largest_cities(client: CityTemperatureClient, expected: int = CITY_COUNT) -> List[Coordinate]:
    coords = parse_coordinates(client.get_city_records(), expected=expected)
    logger.debug("fetched %d city coordinates", len(coords))
    return coords


def resolve_woeid(client: CityTemperatureClient, coord: Coordinate) -> int:
    woeid = extract_woeid(client.search_locations(coord))
    if woeid is None:
        raise NoLocationIdError(
            f"no Where On Earth ID returned for ({coord.latitude:f}, {coord.longitude:f})"
        )
    return woeid


def temperature_for(client: CityTemperatureClient, woeid: int, day: date) -> TemperatureReading:
    temperature = extract_temperature(client.get_location_day(woeid, day))
    if temperature is None:
        raise NoTemperatureError(f"no temperature reading returned for WOE ID {woeid} on {day.isoformat()}")
    return TemperatureReading(woeid=woeid, temperature=temperature)


def average_temperature(client: CityTemperatureClient, day: date) -> AverageResult:
    # any error other than a missing temperature propagates and the partial aggregate is dropped
    coords = largest_cities(client)

    acc = Accumulator()
    skipped = 0
    for coord in coords:
        woeid = resolve_woeid(client, coord)
        try:
            reading = temperature_for(client, woeid, day)
        except NoTemperatureError:
            logger.warning("Failed to get temperature for WOE ID: %d. Continuing anyways.", woeid)
            skipped += 1
            continue
        acc = acc.add(reading.temperature)

    return AverageResult(cities=len(coords), readings=acc.count, skipped=skipped, average_temp=acc.mean())


def report_line(cities: int, average_temp: float) -> str:
    return f"The average temperature in the {cities} most populous cities in the {COUNTRY} is: {average_temp:.2f}"
