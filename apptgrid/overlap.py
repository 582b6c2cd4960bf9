"""Same-time detection and horizontal offsetting.

Two appointments share a bucket when their start offsets are closer than the
bucket threshold (one 5-minute slot by default). This compares start times
only; durations are not considered, so 9:00-9:50 and 9:20 are not treated as
overlapping. Ordering inside a bucket is the input order.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from .config import DAY_VIEW, LayoutConfig
from .model import OverlapGroup, Position


def same_bucket(a: float, b: float, threshold: float, *, inclusive: bool = False) -> bool:
    diff = abs(a - b)
    return diff <= threshold if inclusive else diff < threshold


def bucket_key(top: float, threshold: float) -> float:
    # Half-up rounding; Python's round() would send 2.5 to 2.
    return math.floor(top / threshold + 0.5) * threshold


def same_time_index(positions: Sequence[Position], i: int, cfg: LayoutConfig = DAY_VIEW) -> int:
    """Number of earlier-indexed positions sharing a bucket with positions[i]."""
    me = positions[i].original_top
    return sum(
        1
        for other in positions[:i]
        if same_bucket(me, other.original_top, cfg.bucket_threshold)
    )


def resolve_overlaps(positions: Sequence[Position], cfg: LayoutConfig = DAY_VIEW) -> Tuple[Position, ...]:
    """Offset same-bucket cards to the right by offset_increment each.

    Pairwise O(n^2); days carry tens of appointments, not thousands.
    """
    out: List[Position] = []
    for i, pos in enumerate(positions):
        left = cfg.base_left + same_time_index(positions, i, cfg) * cfg.offset_increment
        out.append(replace(pos, left=left, width=cfg.card_width, original_left=left))
    return tuple(out)


def overlap_groups(positions: Sequence[Position], cfg: LayoutConfig = DAY_VIEW) -> Tuple[OverlapGroup, ...]:
    """Buckets with two or more members, in first-seen order."""
    buckets: Dict[float, List[Position]] = {}
    for pos in positions:
        buckets.setdefault(bucket_key(pos.original_top, cfg.bucket_threshold), []).append(pos)

    out: List[OverlapGroup] = []
    for key, members in buckets.items():
        if len(members) < 2:
            continue
        out.append(
            OverlapGroup(
                bucket_key=key,
                first_top=min(p.original_top for p in members),
                count=len(members),
                appointment_ids=tuple(p.id for p in members),
            )
        )
    return tuple(out)


def detect_overlap_groups(positions: Sequence[Position], cfg: LayoutConfig = DAY_VIEW) -> Tuple[float, ...]:
    """Tops at which to draw an expand affordance."""
    return tuple(g.first_top for g in overlap_groups(positions, cfg))


def has_overlaps(position: Position, positions: Sequence[Position], cfg: LayoutConfig = DAY_VIEW) -> bool:
    return any(
        other.id != position.id
        and same_bucket(other.original_top, position.original_top, cfg.bucket_threshold)
        for other in positions
    )
