"""Formatting helpers for display values."""

import math
from datetime import date, datetime
from typing import Optional

DISPLAY_DATETIME_FORMAT = "%d/%m/%Y %H:%M"

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def format_timestamp(value: Optional[str], now: Optional[datetime] = None) -> str:
    """Format an Open-Meteo timestamp as DD/MM/YYYY HH:MM.

    Args:
        value: Timestamp like 'YYYY-MM-DDTHH:MM' or 'YYYY-MM-DDTHH:MM:SS'
        now: Reference time used when value is empty (defaults to local now)

    Returns:
        Formatted timestamp, or the original value if it cannot be parsed
    """
    if not value:
        return (now or datetime.now()).strftime(DISPLAY_DATETIME_FORMAT)

    parts = value.split("T")
    if len(parts) == 2:
        date_parts = parts[0].split("-")
        time_parts = parts[1].split(":")
        if len(date_parts) == 3 and time_parts[0]:
            year, month, day = date_parts
            hour = time_parts[0]
            minute = time_parts[1] if len(time_parts) > 1 and time_parts[1] else "00"
            return f"{day}/{month}/{year} {hour}:{minute}"

    try:
        return datetime.fromisoformat(value).strftime(DISPLAY_DATETIME_FORMAT)
    except (TypeError, ValueError):
        return value


def format_date(value: str) -> str:
    """Reformat 'YYYY-MM-DD' as 'DD/MM/YYYY', leaving other input untouched."""
    parts = value.split("-")
    if len(parts) != 3:
        return value
    year, month, day = parts
    return f"{day}/{month}/{year}"


def weekday_name(value: str) -> Optional[str]:
    """Weekday name of a 'YYYY-MM-DD' date, or None if it does not parse."""
    try:
        return WEEKDAYS[date.fromisoformat(value).weekday()]
    except (TypeError, ValueError):
        return None


def round_half_up(value: float) -> int:
    # 25.5 -> 26 and -0.5 -> 0, unlike round()
    return int(math.floor(value + 0.5))


def format_temperature(value: float) -> str:
    return f"{round_half_up(value)}°C"
