# apptgrid/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Tuple

from .status import AppointmentStatus


@dataclass(frozen=True)
class Appointment:
    id: str
    start_time: str          # "2:15 PM"
    duration_label: str      # "45 min" | "N/A" | ""
    date: dt.date
    status: Optional[AppointmentStatus] = None
    title: str = ""


@dataclass(frozen=True)
class TimeSlot:
    index: int
    hour: int
    minute: int
    start_minute: int        # minutes since midnight
    label: str
    is_quarter_hour: bool
    is_five_minute_mark: bool


@dataclass(frozen=True)
class Position:
    appointment: Appointment
    top: float
    height: float
    left: float
    width: float

    # Overlap-resolved values; collapse restores exactly these.
    original_top: float
    original_height: float
    original_left: float

    @property
    def id(self) -> str:
        return self.appointment.id


@dataclass(frozen=True)
class OverlapGroup:
    bucket_key: float
    first_top: float
    count: int
    appointment_ids: Tuple[str, ...]


@dataclass(frozen=True)
class ExpansionState:
    """Collapsed (bucket_top is None) or expanded at one bucket top."""

    bucket_top: Optional[float] = None

    @property
    def is_expanded(self) -> bool:
        return self.bucket_top is not None

    @classmethod
    def expanded_at(cls, bucket_top: float) -> "ExpansionState":
        return cls(bucket_top=float(bucket_top))


COLLAPSED = ExpansionState()


@dataclass(frozen=True)
class TimeIndicator:
    top: float
    visible: bool


HIDDEN_INDICATOR = TimeIndicator(top=-1, visible=False)


@dataclass(frozen=True)
class MonthStackItem:
    appointment: Appointment
    stack_index: int
    total_in_stack: int
    top: float
    z_index: Optional[int]   # None: normal flow
    margin_bottom: int
    is_absolute: bool


__all__ = [
    "Appointment",
    "TimeSlot",
    "Position",
    "OverlapGroup",
    "ExpansionState",
    "COLLAPSED",
    "TimeIndicator",
    "HIDDEN_INDICATOR",
    "MonthStackItem",
]
