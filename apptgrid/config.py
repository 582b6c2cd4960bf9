"""Layout configuration.

Every pixel and time constant the engine uses lives in one frozen record so
the day, week-column and month-cell views can share one implementation with
different parameters. Configuration problems raise ValueError; appointment
data problems never do.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .util.duration import DEFAULT_DURATION_MIN
from .util.timecodec import BUSINESS_END_MIN, BUSINESS_START_MIN, SLOT_MINUTES, parse_workhours


@dataclass(frozen=True)
class LayoutConfig:
    work_start_min: int = BUSINESS_START_MIN
    work_end_min: int = BUSINESS_END_MIN
    slot_minutes: int = SLOT_MINUTES
    px_per_slot: float = 10

    min_card_height: float = 60
    base_left: float = 64
    card_width: float = 280
    offset_increment: float = 20
    bucket_threshold: float = 10

    stacked_height: float = 60
    stacked_spacing: float = 2
    expanded_left: float = 40

    default_duration_min: int = DEFAULT_DURATION_MIN

    def __post_init__(self) -> None:
        if not (0 <= self.work_start_min < self.work_end_min <= 1440):
            raise ValueError(
                f"invalid business-hours window: {self.work_start_min}-{self.work_end_min}"
            )
        if self.slot_minutes <= 0:
            raise ValueError("slot_minutes must be positive")
        if self.px_per_slot <= 0:
            raise ValueError("px_per_slot must be positive")
        if self.bucket_threshold <= 0:
            raise ValueError("bucket_threshold must be positive")
        if self.default_duration_min <= 0:
            raise ValueError("default_duration_min must be positive")


@dataclass(frozen=True)
class MonthStackConfig:
    proximity_min: int = 15
    item_height: float = 60
    stack_offset: float = 50
    gap_px: int = 4
    last_gap_px: int = 16
    base_z: int = 10

    def __post_init__(self) -> None:
        if self.proximity_min < 0:
            raise ValueError("proximity_min must be >= 0")


DAY_VIEW = LayoutConfig()
WEEK_COLUMN = LayoutConfig(card_width=200)
MONTH_CELL = MonthStackConfig()

_INT_KEYS = ("work_start_min", "work_end_min", "slot_minutes", "default_duration_min")
_FLOAT_KEYS = (
    "px_per_slot",
    "min_card_height",
    "base_left",
    "card_width",
    "offset_increment",
    "bucket_threshold",
    "stacked_height",
    "stacked_spacing",
    "expanded_left",
)


def config_from_dict(cfg: Optional[Dict[str, Any]], base: LayoutConfig = DAY_VIEW) -> LayoutConfig:
    """Overlay a plain dict (e.g. loaded from JSON) on a base config.

    Unknown keys are ignored. `workhours` ("07:00-19:00") sets both window
    bounds and wins over explicit work_start_min/work_end_min.
    """
    if not cfg:
        return base
    if not isinstance(cfg, dict):
        raise ValueError(f"cfg must be a dict; got {type(cfg).__name__}")

    changes: Dict[str, Any] = {}
    for keys, conv in ((_INT_KEYS, int), (_FLOAT_KEYS, float)):
        for k in keys:
            v = cfg.get(k)
            if v is None:
                continue
            try:
                changes[k] = conv(v)
            except (TypeError, ValueError, OverflowError):
                raise ValueError(f"invalid {k}: {v!r}") from None

    wh = cfg.get("workhours")
    if isinstance(wh, str) and wh.strip():
        changes["work_start_min"], changes["work_end_min"] = parse_workhours(wh)

    return replace(base, **changes)


__all__ = [
    "LayoutConfig",
    "MonthStackConfig",
    "DAY_VIEW",
    "WEEK_COLUMN",
    "MONTH_CELL",
    "config_from_dict",
]
