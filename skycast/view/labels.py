"""Display labels: weekday names and user-facing status messages."""

from datetime import date

from skycast.models.forecast import FailureReason

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

LOADING_MESSAGE = "Loading..."

FAILURE_MESSAGES: dict[FailureReason, str] = {
    FailureReason.NOT_FOUND: "No data available",
    FailureReason.TRANSPORT: "An error occurred. Please try again.",
    FailureReason.EMPTY: "Enter a location to search.",
}


def weekday_of(day: date | str) -> str:
    """Weekday name for a date or a YYYY-MM-DD string."""
    if isinstance(day, str):
        day = date.fromisoformat(day)
    return WEEKDAYS[day.weekday()]


def failure_message(reason: FailureReason) -> str:
    return FAILURE_MESSAGES[reason]
