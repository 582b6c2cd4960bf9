"""apptgrid.api

Stable library entrypoint for the calendar layout engine.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from .config import DAY_VIEW, MONTH_CELL, WEEK_COLUMN, LayoutConfig, MonthStackConfig, config_from_dict
from .engine import compute_day_layout
from .expansion import GroupExpansionController, apply_expansion, toggle_group
from .indicator import current_time_indicator
from .model import (
    COLLAPSED,
    Appointment,
    ExpansionState,
    MonthStackItem,
    OverlapGroup,
    Position,
    TimeIndicator,
    TimeSlot,
)
from .month import month_grid_days, organize_for_stacking
from .normalize import load_appointments_json, normalize_appointment
from .overlap import detect_overlap_groups, overlap_groups
from .slots import generate_slots
from .status import AppointmentStatus, normalize_status, status_colors, status_label
from .util.duration import parse_duration_label
from .util.timecodec import format_time, parse_time
from .views import DayView, MonthCellView, WeekColumnView, WeekView, week_days

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "COLLAPSED",
    "DAY_VIEW",
    "DayView",
    "ExpansionState",
    "GroupExpansionController",
    "LayoutConfig",
    "MONTH_CELL",
    "MonthCellView",
    "MonthStackConfig",
    "MonthStackItem",
    "OverlapGroup",
    "Position",
    "TimeIndicator",
    "TimeSlot",
    "WEEK_COLUMN",
    "WeekColumnView",
    "WeekView",
    "apply_expansion",
    "compute_day_layout",
    "config_from_dict",
    "current_time_indicator",
    "detect_overlap_groups",
    "format_time",
    "generate_slots",
    "load_appointments_json",
    "month_grid_days",
    "normalize_appointment",
    "normalize_status",
    "organize_for_stacking",
    "overlap_groups",
    "parse_duration_label",
    "parse_time",
    "status_colors",
    "status_label",
    "toggle_group",
    "week_days",
]
