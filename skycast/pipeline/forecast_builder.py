"""Forecast view-model builder: provider timeline -> render-ready result."""

import dataclasses
import logging
from datetime import date
from urllib.parse import quote, unquote

import httpx

from skycast.config.defaults import DEFAULT_MAX_DAYS
from skycast.ingest.timeline_client import TimelineClient
from skycast.models.forecast import (
    Failed,
    FailureReason,
    ForecastDay,
    ForecastResult,
    Ready,
)

logger = logging.getLogger(__name__)


def encode_query(raw: str) -> str:
    """Trim a user-entered location and percent-encode every reserved char."""
    return quote(raw.strip(), safe="")


class ForecastBuilder:
    def __init__(self, client: TimelineClient, max_days: int = DEFAULT_MAX_DAYS):
        self.client = client
        self.max_days = max_days

    async def build(self, query: str) -> Ready | Failed:
        """Fetch and normalize the forecast for a percent-encoded query.

        Every failure is classified into a Failed result; nothing but
        task cancellation escapes.
        """
        if not query.strip():
            return Failed(FailureReason.EMPTY)

        try:
            raw = await self.client.get_timeline(query)
            return _extract_result(raw, unquote(query), self.max_days)
        except httpx.HTTPStatusError as e:
            # the exception text carries the full URL, API key included
            logger.warning(
                "Timeline request for %s returned %d", query, e.response.status_code
            )
            return Failed(FailureReason.TRANSPORT)
        except httpx.RequestError as e:
            logger.warning(
                "Timeline request for %s failed: %s", query, type(e).__name__
            )
            return Failed(FailureReason.TRANSPORT)
        except Exception:
            logger.exception("Unreadable timeline response for %s", query)
            return Failed(FailureReason.TRANSPORT)


def select(result: ForecastResult, index: int) -> Ready:
    """Return a copy of a Ready result with upcoming[index] selected."""
    if not isinstance(result, Ready):
        raise TypeError(f"Can only select a day on a ready result, got {result.status}")
    if not 0 <= index < len(result.upcoming):
        raise IndexError(
            f"Day index {index} out of range for {len(result.upcoming)} days"
        )
    return dataclasses.replace(
        result, selected_day=result.upcoming[index], selected_index=index
    )


def _extract_result(raw: object, fallback_name: str, max_days: int) -> Ready | Failed:
    """Map a decoded timeline body onto the view-model.

    Malformed day entries raise and are classified by the caller.
    """
    days = raw.get("days") if isinstance(raw, dict) else None
    if not isinstance(days, list) or not days:
        logger.info("No daily data for %s", fallback_name)
        return Failed(FailureReason.NOT_FOUND)

    upcoming = []
    for i, d in enumerate(days[:max_days]):
        try:
            upcoming.append(_parse_day(d))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed day %d for %s: %s", i, fallback_name, e)
            raise

    return Ready(
        resolved_location_name=raw.get("resolvedAddress") or fallback_name,
        selected_day=upcoming[0],
        upcoming=tuple(upcoming),
        selected_index=0,
        total_days=len(days),
    )


def _parse_day(d: dict) -> ForecastDay:
    if not isinstance(d, dict):
        raise TypeError(f"day entry is {type(d).__name__}, not an object")
    return ForecastDay(
        date=date.fromisoformat(_field(d, "datetime")),
        condition_code=str(d.get("icon") or ""),
        temp_max=_number(d, "tempmax"),
        temp_min=_number(d, "tempmin"),
        feels_like=_number(d, "feelslike"),
        humidity=_number(d, "humidity"),
        wind_speed=_number(d, "windspeed"),
        description=str(d.get("description") or ""),
    )


def _field(d: dict, name: str):
    if d.get(name) is None:
        raise KeyError(f"{name} is missing")
    return d[name]


def _number(d: dict, name: str) -> float:
    value = _field(d, name)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} is not a number: {value!r}") from None
