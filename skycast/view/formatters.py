"""Output formatters for forecast results."""

import json

from skycast.models.forecast import (
    Failed,
    ForecastDay,
    ForecastResult,
    Pending,
    Ready,
)
from skycast.view.icons import icon_for
from skycast.view.labels import LOADING_MESSAGE, failure_message, weekday_of


def format_result_text(result: ForecastResult) -> str:
    """Plain text rendering of the current state for a terminal."""
    if isinstance(result, Pending):
        return LOADING_MESSAGE
    if isinstance(result, Failed):
        return failure_message(result.reason)
    if not isinstance(result, Ready):
        return ""

    d = result.selected_day
    lines = [
        f"{weekday_of(d.date)} {icon_for(d.condition_code)}".rstrip(),
        f"{d.date.isoformat()} | {d.temp_max:g} °C | {d.description}",
        "",
        f"Location: {result.resolved_location_name or 'Unknown'}",
        f"Max temperature: {d.temp_max:g} °C",
        f"Min temperature: {d.temp_min:g} °C",
        f"Feels Like: {d.feels_like:g} °C",
        f"Humidity: {d.humidity:g}%",
        f"Wind: {d.wind_speed:g} m/s",
        "",
    ]
    for i, day in enumerate(result.upcoming):
        marker = ">" if i == result.selected_index else " "
        lines.append(
            f"{marker} {i}  {weekday_of(day.date):<9} "
            f"{icon_for(day.condition_code) or '-':<2} "
            f"{day.temp_max:g}° {day.temp_min:g}°"
        )
    return "\n".join(lines)


def day_to_dict(day: ForecastDay) -> dict:
    return {
        "date": day.date.isoformat(),
        "weekday": weekday_of(day.date),
        "condition_code": day.condition_code,
        "icon": icon_for(day.condition_code),
        "temp_max": day.temp_max,
        "temp_min": day.temp_min,
        "feels_like": day.feels_like,
        "humidity": day.humidity,
        "wind_speed": day.wind_speed,
        "description": day.description,
    }


def result_to_dict(result: ForecastResult) -> dict:
    """JSON-ready view-model, tagged by status."""
    data: dict = {"status": str(result.status)}
    if isinstance(result, Pending):
        data["query"] = result.query
        data["message"] = LOADING_MESSAGE
    elif isinstance(result, Failed):
        data["reason"] = str(result.reason)
        data["message"] = failure_message(result.reason)
    elif isinstance(result, Ready):
        data["resolved_location_name"] = result.resolved_location_name
        data["selected_index"] = result.selected_index
        data["selected_day"] = day_to_dict(result.selected_day)
        data["upcoming"] = [day_to_dict(d) for d in result.upcoming]
        data["total_days"] = result.total_days
    return data


def format_result_json(result: ForecastResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)
