# apptgrid/indicator.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from .config import DAY_VIEW, LayoutConfig
from .layout import in_business_hours, minute_offset_px
from .model import HIDDEN_INDICATOR, TimeIndicator
from .util.tz import now_in


def current_time_indicator(
    rendered_date: dt.date,
    now: Optional[dt.datetime] = None,
    cfg: LayoutConfig = DAY_VIEW,
    *,
    tz: Optional[str] = "local",
) -> TimeIndicator:
    """The "now" line: shown only on today's grid and only inside business hours."""
    if now is None:
        now = now_in(tz)
    if rendered_date != now.date():
        return HIDDEN_INDICATOR

    minute_of_day = now.hour * 60 + now.minute
    if not in_business_hours(minute_of_day, cfg):
        return HIDDEN_INDICATOR
    return TimeIndicator(top=minute_offset_px(minute_of_day, cfg), visible=True)
