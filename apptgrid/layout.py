# apptgrid/layout.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .config import DAY_VIEW, LayoutConfig
from .model import Appointment, Position
from .util.console import obs_warn
from .util.duration import duration_or_default
from .util.timecodec import parse_minutes


def in_business_hours(minute_of_day: int, cfg: LayoutConfig = DAY_VIEW) -> bool:
    return cfg.work_start_min <= minute_of_day < cfg.work_end_min


def minute_offset_px(minute_of_day: int, cfg: LayoutConfig = DAY_VIEW) -> float:
    """Pixel offset of a minute of the day from the top of the grid."""
    return (minute_of_day - cfg.work_start_min) * cfg.px_per_slot / cfg.slot_minutes


def card_height(duration_min: int, cfg: LayoutConfig = DAY_VIEW) -> float:
    return max(duration_min * cfg.px_per_slot / cfg.slot_minutes, cfg.min_card_height)


def base_position(appt: Appointment, cfg: LayoutConfig = DAY_VIEW) -> Optional[Position]:
    """Initial placement of one appointment, ignoring every other appointment.

    Returns None when the start time is unreadable or outside business hours.
    """
    minute_of_day = parse_minutes(appt.start_time)
    if minute_of_day is None:
        obs_warn("layout", f"unparsable start time id={appt.id!r} value={appt.start_time!r}; excluded")
        return None
    if not in_business_hours(minute_of_day, cfg):
        obs_warn("layout", f"outside business hours id={appt.id!r} value={appt.start_time!r}; excluded")
        return None

    top = minute_offset_px(minute_of_day, cfg)
    height = card_height(duration_or_default(appt.duration_label, cfg.default_duration_min), cfg)
    return Position(
        appointment=appt,
        top=top,
        height=height,
        left=cfg.base_left,
        width=cfg.card_width,
        original_top=top,
        original_height=height,
        original_left=cfg.base_left,
    )


def base_positions(appointments: Iterable[Appointment], cfg: LayoutConfig = DAY_VIEW) -> Tuple[Position, ...]:
    out: List[Position] = []
    for appt in appointments:
        pos = base_position(appt, cfg)
        if pos is not None:
            out.append(pos)
    return tuple(out)
