# apptgrid/normalize.py
from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .model import Appointment
from .status import normalize_status
from .util.console import obs_warn


def _first(raw: Dict[str, Any], *keys: str) -> Any:
    for k in keys:
        v = raw.get(k)
        if v is not None:
            return v
    return None


def parse_date(value: Any) -> Optional[dt.date]:
    """Accept a date, a datetime, "YYYY-MM-DD" or an ISO timestamp."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    s = value.strip()
    try:
        return dt.date.fromisoformat(s[:10])
    except ValueError:
        return None


def normalize_appointment(raw: Dict[str, Any]) -> Optional[Appointment]:
    """Build an Appointment from a booking API record; None when it cannot be placed on a day."""
    if not isinstance(raw, dict):
        return None
    raw_id = _first(raw, "id", "_id")
    appt_id = "" if raw_id is None else str(raw_id).strip()
    if not appt_id:
        obs_warn("normalize", "record without id dropped")
        return None

    day = parse_date(raw.get("date"))
    if day is None:
        obs_warn("normalize", f"invalid date id={appt_id!r} value={raw.get('date')!r}; dropped")
        return None

    return Appointment(
        id=appt_id,
        start_time=str(_first(raw, "startTime", "start_time", "time") or ""),
        duration_label=str(_first(raw, "durationLabel", "duration_label", "duration") or ""),
        date=day,
        status=normalize_status(raw.get("status")),
        title=str(_first(raw, "title", "patientName", "clientName") or ""),
    )


def normalize_appointments(records: List[Any]) -> List[Appointment]:
    out: List[Appointment] = []
    for r in records:
        appt = normalize_appointment(r)
        if appt is not None:
            out.append(appt)
    return out


def load_appointments_json(path: Union[str, Path]) -> List[Appointment]:
    p = Path(path)
    obj = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if isinstance(obj, dict):
        obj = obj.get("appointments")
    if not isinstance(obj, list):
        raise ValueError("appointments JSON must be a list or an object with an 'appointments' list")
    return normalize_appointments(obj)
