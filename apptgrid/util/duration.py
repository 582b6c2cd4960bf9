# apptgrid/util/duration.py
from __future__ import annotations

import re
from typing import Optional

# Booking API durations are free text like "45 min"; only the first number counts.
_NUM_RE = re.compile(r"(\d+)")
_SENTINELS = {"n/a", "na", "none", "-"}

DEFAULT_DURATION_MIN = 30


def parse_duration_label(label: str | None) -> Optional[int]:
    if label is None:
        return None
    s = str(label).strip()
    if not s or s.lower() in _SENTINELS:
        return None

    m = _NUM_RE.search(s)
    if not m:
        return None

    minutes = int(m.group(1))
    return minutes if minutes > 0 else None


def duration_or_default(label: str | None, default: int = DEFAULT_DURATION_MIN) -> int:
    minutes = parse_duration_label(label)
    return minutes if minutes is not None else int(default)
