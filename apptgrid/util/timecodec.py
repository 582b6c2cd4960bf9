# apptgrid/util/timecodec.py
from __future__ import annotations

import re
from typing import Optional, Tuple

BUSINESS_START_MIN = 7 * 60
BUSINESS_END_MIN = 19 * 60  # exclusive
SLOT_MINUTES = 5

_DAY_MINUTE_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{1,2})$")


def parse_time(s: str | None) -> Optional[Tuple[int, int]]:
    """Parse a 12-hour clock string ("2:15 PM") into (hour, minute) on a 24h clock.

    Returns None for anything that cannot be read as a time of day. Callers
    treat None as "do not place", never as midnight.
    """
    if not isinstance(s, str):
        return None
    parts = s.split()
    if len(parts) != 2:
        return None
    clock, meridiem = parts[0], parts[1].upper()
    if meridiem not in ("AM", "PM"):
        return None

    m = _CLOCK_RE.match(clock)
    if not m:
        return None
    hour = int(m.group(1))
    minute = int(m.group(2))
    if not (1 <= hour <= 12 and 0 <= minute <= 59):
        return None

    if meridiem == "PM" and hour != 12:
        hour += 12
    if meridiem == "AM" and hour == 12:
        hour = 0
    return hour, minute


def parse_minutes(s: str | None) -> Optional[int]:
    hm = parse_time(s)
    if hm is None:
        return None
    return hm[0] * 60 + hm[1]


def format_time(hour: int, minute: int) -> str:
    period = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {period}"


def parse_day_minute(s: str) -> int:
    """Minutes since midnight for a 24h "HH:MM" bound; "24:00" closes the day."""
    m = _DAY_MINUTE_RE.match(s.strip())
    if not m:
        raise ValueError(f"business-hours bound must be HH:MM, got {s!r}")
    minute = int(m.group(1)) * 60 + int(m.group(2))
    if int(m.group(2)) > 59 or minute > 24 * 60:
        raise ValueError(f"business-hours bound outside the day: {s!r}")
    return minute


def parse_workhours(s: str) -> Tuple[int, int]:
    """Business-hours window "07:00-19:00" as (start_min, end_min), end exclusive."""
    start_s, sep, end_s = s.partition("-")
    if not sep or "-" in end_s:
        raise ValueError(f"business-hours window must look like 07:00-19:00, got {s!r}")
    start = parse_day_minute(start_s)
    end = parse_day_minute(end_s)
    if end <= start:
        raise ValueError(f"business-hours window is empty: {s!r}")
    return start, end
