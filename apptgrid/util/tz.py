# apptgrid/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve "local", "UTC", an IANA zone name or a fixed offset ("+02:00").

    Raises ValueError for identifiers that name no timezone.
    """
    s = (name or "").strip()
    low = s.lower()
    if not s or low in {"local", "system"}:
        return dt.datetime.now().astimezone().tzinfo or dt.timezone.utc
    if low in {"utc", "z", "gmt"}:
        return dt.timezone.utc

    m = _OFFSET_RE.match(s)
    if m:
        sign, hh, mm = m.group(1), int(m.group(2)), int(m.group(3))
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {s!r}")
        minutes = hh * 60 + mm
        return dt.timezone(dt.timedelta(minutes=minutes if sign == "+" else -minutes))

    try:
        return ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError, OSError) as ex:
        raise ValueError(f"Invalid timezone identifier: {s!r}") from ex


def now_in(name: Optional[str] = "local") -> dt.datetime:
    return dt.datetime.now(tz=resolve_tz(name))
