"""Month-cell stacking.

Month cells have no time axis. Appointments are sorted by start time and
grouped greedily: each still-ungrouped appointment takes every ungrouped
appointment within `proximity_min` minutes of it. Groups of two or more are
drawn as a fanned stack; the cell's own scroll region absorbs overflow.
"""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Iterable, List, Set, Tuple

from .config import MONTH_CELL, MonthStackConfig
from .model import Appointment, MonthStackItem
from .overlap import same_bucket
from .util.console import obs_warn
from .util.timecodec import parse_minutes


def _timed(appointments: Iterable[Appointment]) -> List[Tuple[int, Appointment]]:
    out: List[Tuple[int, Appointment]] = []
    for appt in appointments:
        minutes = parse_minutes(appt.start_time)
        if minutes is None:
            obs_warn("month", f"unparsable start time id={appt.id!r} value={appt.start_time!r}; excluded")
            continue
        out.append((minutes, appt))
    out.sort(key=lambda x: x[0])
    return out


def stack_groups(
    appointments: Iterable[Appointment],
    cfg: MonthStackConfig = MONTH_CELL,
) -> List[List[Tuple[int, Appointment]]]:
    timed = _timed(appointments)
    taken: Set[int] = set()
    groups: List[List[Tuple[int, Appointment]]] = []
    for i, (anchor, _appt) in enumerate(timed):
        if i in taken:
            continue
        group = []
        for j in range(i, len(timed)):
            if j in taken:
                continue
            if same_bucket(timed[j][0], anchor, cfg.proximity_min, inclusive=True):
                group.append(timed[j])
                taken.add(j)
        groups.append(group)
    return groups


def organize_for_stacking(
    appointments: Iterable[Appointment],
    cfg: MonthStackConfig = MONTH_CELL,
) -> Tuple[MonthStackItem, ...]:
    out: List[MonthStackItem] = []
    for group in stack_groups(appointments, cfg):
        total = len(group)
        stacked = total > 1
        # A group always starts a new slot: its anchor is more than
        # proximity_min past the previous anchor.
        current_top = len(out) * cfg.item_height
        for stack_index, (_minutes, appt) in enumerate(group):
            out.append(
                MonthStackItem(
                    appointment=appt,
                    stack_index=stack_index,
                    total_in_stack=total,
                    top=current_top + stack_index * cfg.stack_offset if stacked else current_top,
                    z_index=cfg.base_z + stack_index if stacked else None,
                    margin_bottom=cfg.last_gap_px if stacked and stack_index == total - 1 else cfg.gap_px,
                    is_absolute=stacked and stack_index > 0,
                )
            )
    return tuple(out)


def month_grid_days(year: int, month: int) -> List[dt.date]:
    """Days shown for a month: Monday of the first week through Sunday of the last."""
    first = dt.date(year, month, 1)
    last = dt.date(year, month, calendar.monthrange(year, month)[1])
    start = first - dt.timedelta(days=first.weekday())
    end = last + dt.timedelta(days=6 - last.weekday())
    return [start + dt.timedelta(days=i) for i in range((end - start).days + 1)]
