"""Appointment status vocabulary.

Statuses arrive from the booking API as numbers, numeric strings or loose
labels ("no-show", "Canceled"). They are normalized here, once, at the
boundary; layout and views only ever see `AppointmentStatus` or None.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Optional


class AppointmentStatus(enum.IntEnum):
    PENDING = 0
    CONFIRMED = 1
    IN_PROGRESS = 2
    COMPLETED = 3
    CANCELLED = 4
    NO_SHOW = 5


STATUS_LABELS: Dict[AppointmentStatus, str] = {
    AppointmentStatus.PENDING: "Pending",
    AppointmentStatus.CONFIRMED: "Confirmed",
    AppointmentStatus.IN_PROGRESS: "In Progress",
    AppointmentStatus.COMPLETED: "Completed",
    AppointmentStatus.CANCELLED: "Cancelled",
    AppointmentStatus.NO_SHOW: "No Show",
}

_ALIASES: Dict[str, AppointmentStatus] = {
    "pending": AppointmentStatus.PENDING,
    "confirmed": AppointmentStatus.CONFIRMED,
    "in progress": AppointmentStatus.IN_PROGRESS,
    "in-progress": AppointmentStatus.IN_PROGRESS,
    "in_progress": AppointmentStatus.IN_PROGRESS,
    "inprogress": AppointmentStatus.IN_PROGRESS,
    "completed": AppointmentStatus.COMPLETED,
    "cancelled": AppointmentStatus.CANCELLED,
    "canceled": AppointmentStatus.CANCELLED,
    "no show": AppointmentStatus.NO_SHOW,
    "no-show": AppointmentStatus.NO_SHOW,
    "no_show": AppointmentStatus.NO_SHOW,
    "noshow": AppointmentStatus.NO_SHOW,
}


@dataclass(frozen=True)
class StatusColors:
    badge: str
    background: str
    border: str
    left_border: str


def _colors(name: str) -> StatusColors:
    return StatusColors(
        badge=f"bg-{name}-500/20 text-{name}-600 dark:text-{name}-400 border-{name}-500/30",
        background=f"bg-{name}-500/20",
        border=f"border-{name}-500/30",
        left_border=f"border-l-{name}-500",
    )


_GRAY = _colors("gray")

STATUS_COLORS: Dict[AppointmentStatus, StatusColors] = {
    AppointmentStatus.CONFIRMED: _colors("green"),
    AppointmentStatus.PENDING: _colors("orange"),
    AppointmentStatus.IN_PROGRESS: _colors("purple"),
    AppointmentStatus.COMPLETED: _colors("blue"),
    AppointmentStatus.CANCELLED: _colors("red"),
    AppointmentStatus.NO_SHOW: _GRAY,
}


def normalize_status(value: object) -> Optional[AppointmentStatus]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, AppointmentStatus):
        return value
    if isinstance(value, int):
        try:
            return AppointmentStatus(value)
        except ValueError:
            return None
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _ALIASES:
            return _ALIASES[s]
        if s.isdigit():
            return normalize_status(int(s))
    return None


def status_label(status: Optional[AppointmentStatus]) -> str:
    if status is None:
        return "Pending"
    return STATUS_LABELS.get(status, "Unknown")


def status_colors(status: Optional[AppointmentStatus]) -> StatusColors:
    if status is None:
        return _GRAY
    return STATUS_COLORS.get(status, _GRAY)
