import json
import logging
from datetime import datetime
from typing import Dict, Optional

logger = logging.getLogger(__name__)

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def _to_minutes(value: str) -> int:
    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def _time_or_none(value) -> Optional[str]:
    # Times are "HH:MM" strings; anything else is treated as unset.
    return value if isinstance(value, str) and value else None


def parse_working_hours(raw: Optional[str]) -> Optional[Dict[str, dict]]:
    """
    Parse the stored working-hours JSON.

    Accepts {"sunday": {"isOpen": true, "openTime": "09:00", "closeTime": "17:00"}, ...}
    as well as snake_case keys. Returns None for empty or malformed input.
    """
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed working hours: %r", raw)
        return None
    if not isinstance(data, dict):
        return None

    hours = {}
    for day, value in data.items():
        if day not in WEEKDAYS or not isinstance(value, dict):
            continue
        hours[day] = {
            "is_open": value.get("is_open", value.get("isOpen")) is True,
            "open_time": _time_or_none(value.get("open_time", value.get("openTime"))),
            "close_time": _time_or_none(value.get("close_time", value.get("closeTime"))),
        }
    return hours


def is_business_open(hours: Optional[Dict[str, dict]], now: datetime) -> bool:
    if hours is None:
        return True

    day_hours = hours.get(WEEKDAYS[now.weekday()])
    if not day_hours or not day_hours["is_open"]:
        return False
    if not day_hours["open_time"] or not day_hours["close_time"]:
        return True

    try:
        open_minutes = _to_minutes(day_hours["open_time"])
        close_minutes = _to_minutes(day_hours["close_time"])
    except (AttributeError, TypeError, ValueError):
        return True
    current = now.hour * 60 + now.minute

    # Overnight window, e.g. 18:00 - 02:00
    if close_minutes < open_minutes:
        return current >= open_minutes or current <= close_minutes
    return open_minutes <= current <= close_minutes
