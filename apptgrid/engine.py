# apptgrid/engine.py
from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Tuple

from .config import DAY_VIEW, LayoutConfig
from .expansion import apply_expansion
from .layout import base_positions
from .model import COLLAPSED, Appointment, ExpansionState, Position
from .overlap import resolve_overlaps


@lru_cache(maxsize=128)
def _layout_cached(
    appointments: Tuple[Appointment, ...],
    expansion: ExpansionState,
    cfg: LayoutConfig,
) -> Tuple[Position, ...]:
    resolved = resolve_overlaps(base_positions(appointments, cfg), cfg)
    return apply_expansion(resolved, expansion, cfg)


def compute_day_layout(
    appointments: Iterable[Appointment],
    expansion: ExpansionState = COLLAPSED,
    cfg: LayoutConfig = DAY_VIEW,
) -> Tuple[Position, ...]:
    """Positions for one day's appointments (already filtered to that day).

    Deterministic in (appointments, expansion, cfg) and memoized on that key.
    """
    return _layout_cached(tuple(appointments), expansion, cfg)


def clear_layout_cache() -> None:
    _layout_cached.cache_clear()
