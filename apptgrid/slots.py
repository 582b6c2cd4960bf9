# apptgrid/slots.py
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .config import DAY_VIEW, LayoutConfig
from .model import TimeSlot
from .util.timecodec import format_time


@lru_cache(maxsize=16)
def generate_slots(cfg: LayoutConfig = DAY_VIEW) -> Tuple[TimeSlot, ...]:
    """Time slots covering [work_start_min, work_end_min) at slot granularity."""
    out = []
    for start in range(cfg.work_start_min, cfg.work_end_min, cfg.slot_minutes):
        hour, minute = divmod(start, 60)
        out.append(
            TimeSlot(
                index=len(out),
                hour=hour,
                minute=minute,
                start_minute=start,
                label=format_time(hour, minute),
                is_quarter_hour=minute % 15 == 0,
                is_five_minute_mark=minute % 5 == 0,
            )
        )
    return tuple(out)


def slot_top(slot: TimeSlot, cfg: LayoutConfig = DAY_VIEW) -> float:
    return slot.index * cfg.px_per_slot


def grid_height(cfg: LayoutConfig = DAY_VIEW) -> float:
    return len(generate_slots(cfg)) * cfg.px_per_slot
