# value objects and the running aggregate, kept free of any i/o

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    # one city's location as returned by the ranking endpoint
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class TemperatureReading:
    woeid: int
    temperature: float


@dataclass(frozen=True)
class Accumulator:
    # running (sum, count); add() returns a new value so the loop threads it explicitly
    total: float = 0.0
    count: int = 0

    def add(self, value: float) -> Accumulator:
        return Accumulator(total=self.total + value, count=self.count + 1)

    def mean(self) -> float:
        return self.total / self.count if self.count else float("nan")


@dataclass(frozen=True)
class AverageResult:
    # output value object used by the cli and the dag
    cities: int
    readings: int
    skipped: int
    average_temp: float
