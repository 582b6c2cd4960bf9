# apptgrid/expansion.py
from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

from .config import DAY_VIEW, LayoutConfig
from .model import COLLAPSED, ExpansionState, Position
from .overlap import same_bucket


def is_target(state: ExpansionState, bucket_top: float, cfg: LayoutConfig = DAY_VIEW) -> bool:
    return state.bucket_top is not None and same_bucket(state.bucket_top, bucket_top, cfg.bucket_threshold)


def toggle_group(state: ExpansionState, bucket_top: float, cfg: LayoutConfig = DAY_VIEW) -> ExpansionState:
    """Same target collapses; anything else expands at bucket_top (replacing any other)."""
    if is_target(state, bucket_top, cfg):
        return COLLAPSED
    return ExpansionState.expanded_at(bucket_top)


def collapse_positions(positions: Sequence[Position]) -> Tuple[Position, ...]:
    return tuple(
        replace(p, top=p.original_top, height=p.original_height, left=p.original_left)
        for p in positions
    )


def apply_expansion(
    positions: Sequence[Position],
    state: ExpansionState,
    cfg: LayoutConfig = DAY_VIEW,
) -> Tuple[Position, ...]:
    """Stack the expanded group vertically; everything else keeps its resolved placement.

    A target with fewer than two members changes nothing.
    """
    restored = collapse_positions(positions)
    if state.bucket_top is None:
        return restored

    target = state.bucket_top
    member_idx = [
        i for i, p in enumerate(restored)
        if same_bucket(p.original_top, target, cfg.bucket_threshold)
    ]
    if len(member_idx) < 2:
        return restored

    group_top = min(restored[i].original_top for i in member_idx)
    step = cfg.stacked_height + cfg.stacked_spacing
    out: List[Position] = list(restored)
    for rank, i in enumerate(member_idx):
        out[i] = replace(
            restored[i],
            top=group_top + rank * step,
            height=cfg.stacked_height,
            left=cfg.expanded_left,
        )
    return tuple(out)


class GroupExpansionController:
    """Expansion state owned by one view instance."""

    def __init__(self, cfg: LayoutConfig = DAY_VIEW, state: ExpansionState = COLLAPSED) -> None:
        self.cfg = cfg
        self.state = state

    def toggle(self, bucket_top: float) -> ExpansionState:
        self.state = toggle_group(self.state, bucket_top, self.cfg)
        return self.state

    def collapse(self) -> ExpansionState:
        self.state = COLLAPSED
        return self.state

    def is_expanded(self, bucket_top: float) -> bool:
        return is_target(self.state, bucket_top, self.cfg)

    def apply(self, positions: Sequence[Position]) -> Tuple[Position, ...]:
        return apply_expansion(positions, self.state, self.cfg)
