"""Forecast view-model: normalized days and the result lifecycle variants."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import ClassVar, TypeAlias


class ResultStatus(StrEnum):
    IDLE = "idle"
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class FailureReason(StrEnum):
    NOT_FOUND = "not-found"  # provider answered but had no daily data
    EMPTY = "empty"          # blank query, never sent
    TRANSPORT = "transport"  # network error, bad status or unreadable body


@dataclass(frozen=True)
class ForecastDay:
    date: date
    condition_code: str
    temp_max: float  # °C
    temp_min: float  # °C
    feels_like: float  # °C
    humidity: float  # percent
    wind_speed: float
    description: str


@dataclass(frozen=True)
class Idle:
    status: ClassVar[ResultStatus] = ResultStatus.IDLE


@dataclass(frozen=True)
class Pending:
    query: str
    status: ClassVar[ResultStatus] = ResultStatus.PENDING


@dataclass(frozen=True)
class Ready:
    """A resolved forecast.

    ``selected_day`` is always ``upcoming[selected_index]``. ``total_days``
    counts what the provider returned before ``upcoming`` was truncated.
    """

    resolved_location_name: str
    selected_day: ForecastDay
    upcoming: tuple[ForecastDay, ...]
    selected_index: int = 0
    total_days: int = 0
    status: ClassVar[ResultStatus] = ResultStatus.READY


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    status: ClassVar[ResultStatus] = ResultStatus.FAILED


ForecastResult: TypeAlias = Idle | Pending | Ready | Failed
