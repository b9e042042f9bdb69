"""
Local wall-clock time for city results.

Lookups go through the fixed TIMEZONE_MAP; anything that cannot be resolved
yields an empty string so the card simply shows no time.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from travel_recs.config import TIMEZONE_MAP

logger = logging.getLogger(__name__)

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def timezone_for(place_name: str) -> str | None:
    return TIMEZONE_MAP.get(place_name)


def format_local_time(moment: datetime) -> str:
    """en-US style date/time on a 12-hour clock, e.g. "Oct 17, 2026, 9:05:07 PM".

    Independent of the process locale.
    """
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    month = MONTH_ABBR[moment.month - 1]
    return f"{month} {moment.day}, {moment.year}, {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def current_time(place_name: str, now: datetime | None = None) -> str:
    """Current local time at place_name, or "" when it cannot be determined.

    ``now`` must be timezone-aware when given; it defaults to the current UTC time.
    """
    tz_name = timezone_for(place_name)
    if not tz_name:
        return ""

    try:
        zone = ZoneInfo(tz_name)
        moment = (now or datetime.now(timezone.utc)).astimezone(zone)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        logger.warning("Invalid timezone %s for %s: %s", tz_name, place_name, exc)
        return ""

    return format_local_time(moment)
