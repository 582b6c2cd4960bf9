"""View adapters.

Each adapter filters the appointment list down to one calendar day, runs the
shared engine with its own pixel constants and owns its own expansion state.
Nothing is shared between view instances.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .config import DAY_VIEW, MONTH_CELL, WEEK_COLUMN, LayoutConfig, MonthStackConfig
from .engine import compute_day_layout
from .expansion import GroupExpansionController
from .indicator import current_time_indicator
from .model import Appointment, MonthStackItem, Position, TimeIndicator, TimeSlot
from .month import month_grid_days, organize_for_stacking
from .overlap import detect_overlap_groups, has_overlaps, same_bucket
from .slots import generate_slots
from .status import StatusColors, status_colors, status_label

Z_BASE = 30
Z_OVERLAP_WHILE_EXPANDED = 31
Z_EXPANDED_MEMBER = 35
Z_HOVERED = 50

_MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def appointments_on(appointments: Iterable[Appointment], day: dt.date) -> List[Appointment]:
    return [a for a in appointments if a.date == day]


def week_days(day: dt.date) -> List[dt.date]:
    """The Monday-start week containing `day`."""
    monday = day - dt.timedelta(days=day.weekday())
    return [monday + dt.timedelta(days=i) for i in range(7)]


def week_range_label(days: Sequence[dt.date]) -> str:
    start, end = days[0], days[-1]
    if start.month == end.month:
        return f"{_MONTH_NAMES[start.month - 1]} {start.day} - {end.day}, {start.year}"
    return (
        f"{_MONTH_NAMES[start.month - 1]} {start.day} - "
        f"{_MONTH_NAMES[end.month - 1]} {end.day}, {start.year}"
    )


@dataclass
class InteractionState:
    """Hover and open-control state for one view.

    One map is the only record of which controls (status select, actions
    menu, ...) are open per appointment; readers query it directly.
    """

    hovered_id: Optional[str] = None
    open_controls: Dict[str, Set[str]] = field(default_factory=dict)

    def hover(self, appointment_id: Optional[str]) -> None:
        self.hovered_id = appointment_id

    def set_control_open(self, appointment_id: str, control: str, is_open: bool) -> None:
        opened = self.open_controls.setdefault(appointment_id, set())
        if is_open:
            opened.add(control)
        else:
            opened.discard(control)
            if not opened:
                del self.open_controls[appointment_id]

    def is_menu_open(self, appointment_id: str) -> bool:
        return bool(self.open_controls.get(appointment_id))


@dataclass(frozen=True)
class CardRender:
    position: Position
    z_index: int
    status_label: str
    colors: StatusColors
    menu_open: bool
    in_expanded_group: bool


@dataclass(frozen=True)
class GroupAffordance:
    top: float
    expanded: bool


@dataclass(frozen=True)
class DayRender:
    day: dt.date
    slots: Tuple[TimeSlot, ...]
    positions: Tuple[Position, ...]
    groups: Tuple[GroupAffordance, ...]
    cards: Tuple[CardRender, ...]
    indicator: TimeIndicator


class DayView:
    def __init__(self, cfg: LayoutConfig = DAY_VIEW) -> None:
        self.cfg = cfg
        self.expansion = GroupExpansionController(cfg)
        self.interaction = InteractionState()

    def toggle_group(self, bucket_top: float) -> None:
        self.expansion.toggle(bucket_top)

    def layout(self, appointments: Iterable[Appointment], day: dt.date) -> Tuple[Position, ...]:
        return compute_day_layout(appointments_on(appointments, day), self.expansion.state, self.cfg)

    def _z_index(self, pos: Position, positions: Sequence[Position]) -> Tuple[int, bool]:
        state = self.expansion.state
        in_group = state.bucket_top is not None and same_bucket(
            pos.original_top, state.bucket_top, self.cfg.bucket_threshold
        )
        if self.interaction.hovered_id == pos.id:
            return Z_HOVERED, in_group
        if in_group:
            return Z_EXPANDED_MEMBER, in_group
        if state.is_expanded and has_overlaps(pos, positions, self.cfg):
            return Z_OVERLAP_WHILE_EXPANDED, in_group
        return Z_BASE, in_group

    def render(
        self,
        appointments: Iterable[Appointment],
        day: dt.date,
        now: Optional[dt.datetime] = None,
    ) -> DayRender:
        positions = self.layout(appointments, day)
        cards = []
        for pos in positions:
            z, in_group = self._z_index(pos, positions)
            cards.append(
                CardRender(
                    position=pos,
                    z_index=z,
                    status_label=status_label(pos.appointment.status),
                    colors=status_colors(pos.appointment.status),
                    menu_open=self.interaction.is_menu_open(pos.id),
                    in_expanded_group=in_group,
                )
            )
        groups = tuple(
            GroupAffordance(top=top, expanded=self.expansion.is_expanded(top))
            for top in detect_overlap_groups(positions, self.cfg)
        )
        return DayRender(
            day=day,
            slots=generate_slots(self.cfg),
            positions=positions,
            groups=groups,
            cards=tuple(cards),
            indicator=current_time_indicator(day, now, self.cfg),
        )


class WeekColumnView(DayView):
    def __init__(self, cfg: LayoutConfig = WEEK_COLUMN) -> None:
        super().__init__(cfg)


class WeekView:
    """Seven independent day columns, Monday first.

    Only the columns of the most recently rendered week are kept; moving to
    another week drops the old columns and their expansion state.
    """

    def __init__(self, cfg: LayoutConfig = WEEK_COLUMN) -> None:
        self.cfg = cfg
        self.columns: Dict[dt.date, WeekColumnView] = {}

    def column(self, day: dt.date) -> WeekColumnView:
        if day not in self.columns:
            self.columns[day] = WeekColumnView(self.cfg)
        return self.columns[day]

    def render(
        self,
        appointments: Iterable[Appointment],
        day: dt.date,
        now: Optional[dt.datetime] = None,
    ) -> List[DayRender]:
        appts = list(appointments)
        days = week_days(day)
        self.columns = {d: self.column(d) for d in days}
        return [self.columns[d].render(appts, d, now) for d in days]


@dataclass(frozen=True)
class MonthCellRender:
    day: dt.date
    count: int
    items: Tuple[MonthStackItem, ...]
    in_month: bool
    is_today: bool


class MonthCellView:
    def __init__(self, cfg: MonthStackConfig = MONTH_CELL) -> None:
        self.cfg = cfg

    def render(
        self,
        appointments: Iterable[Appointment],
        day: dt.date,
        *,
        month: Optional[int] = None,
        today: Optional[dt.date] = None,
    ) -> MonthCellRender:
        mine = appointments_on(appointments, day)
        return MonthCellRender(
            day=day,
            count=len(mine),
            items=organize_for_stacking(mine, self.cfg),
            in_month=month is None or day.month == month,
            is_today=today is not None and day == today,
        )


def render_month(
    appointments: Iterable[Appointment],
    year: int,
    month: int,
    *,
    today: Optional[dt.date] = None,
    cfg: MonthStackConfig = MONTH_CELL,
) -> List[MonthCellRender]:
    appts = list(appointments)
    cell = MonthCellView(cfg)
    return [cell.render(appts, d, month=month, today=today) for d in month_grid_days(year, month)]
