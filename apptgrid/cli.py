from __future__ import annotations

import argparse
import datetime as dt
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import DAY_VIEW, WEEK_COLUMN, LayoutConfig, config_from_dict
from .model import COLLAPSED, ExpansionState, MonthStackItem, Position, TimeIndicator
from .normalize import load_appointments_json, parse_date
from .util.tz import now_in
from .views import DayRender, DayView, WeekView, render_month, week_range_label

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore


def _die(msg: str, rc: int = 2) -> int:
    print(f"[apptgrid] ERROR: {msg}", file=sys.stderr)
    return rc


def _position_doc(p: Position) -> Dict[str, Any]:
    return {
        "id": p.id,
        "start_time": p.appointment.start_time,
        "top": p.top,
        "height": p.height,
        "left": p.left,
        "width": p.width,
        "original_top": p.original_top,
        "original_height": p.original_height,
        "original_left": p.original_left,
    }


def _indicator_doc(ind: TimeIndicator) -> Dict[str, Any]:
    return {"top": ind.top, "visible": ind.visible}


def _day_doc(r: DayRender) -> Dict[str, Any]:
    return {
        "date": r.day.isoformat(),
        "positions": [
            dict(_position_doc(c.position), z_index=c.z_index, status=c.status_label)
            for c in r.cards
        ],
        "groups": [{"top": g.top, "expanded": g.expanded} for g in r.groups],
        "indicator": _indicator_doc(r.indicator),
    }


def _stack_doc(item: MonthStackItem) -> Dict[str, Any]:
    return {
        "id": item.appointment.id,
        "start_time": item.appointment.start_time,
        "stack_index": item.stack_index,
        "total_in_stack": item.total_in_stack,
        "top": item.top,
        "z_index": item.z_index,
        "margin_bottom": item.margin_bottom,
        "absolute": item.is_absolute,
    }


def _dumps(doc: Dict[str, Any]) -> str:
    if orjson is not None:
        return orjson.dumps(doc, option=orjson.OPT_INDENT_2).decode("utf-8")
    return json.dumps(doc, ensure_ascii=False, indent=2)


def build_document(
    appointments: List[Any],
    *,
    view: str,
    day: dt.date,
    expansion: ExpansionState,
    cfg: LayoutConfig,
    now: dt.datetime,
) -> Dict[str, Any]:
    if view == "day":
        dv = DayView(cfg)
        dv.expansion.state = expansion
        return {"view": "day", "day": _day_doc(dv.render(appointments, day, now))}

    if view == "week":
        wv = WeekView(cfg)
        wv.column(day).expansion.state = expansion
        cols = wv.render(appointments, day, now)
        return {
            "view": "week",
            "label": week_range_label([c.day for c in cols]),
            "days": [_day_doc(c) for c in cols],
        }

    cells = render_month(appointments, day.year, day.month, today=now.date())
    return {
        "view": "month",
        "month": f"{day.year:04d}-{day.month:02d}",
        "cells": [
            {
                "date": c.day.isoformat(),
                "count": c.count,
                "in_month": c.in_month,
                "is_today": c.is_today,
                "items": [_stack_doc(i) for i in c.items],
            }
            for c in cells
        ],
    }


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="apptgrid",
        description="Compute the calendar layout (pixel positions) for a set of appointments.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Appointments JSON (list or {'appointments': [...]})")
    ap.add_argument("--date", default=None, help="Rendered date YYYY-MM-DD (default: today in --tz)")
    ap.add_argument("--view", choices=("day", "week", "month"), default="day", help="View to lay out (default: day)")
    ap.add_argument("--expand", type=float, default=None, help="Bucket top (px) of the group to expand (day/week)")
    ap.add_argument("--workhours", default=None, help="Business-hours window, e.g. 07:00-19:00")
    ap.add_argument("--cfg", default=None, help="JSON file of layout config overrides")
    ap.add_argument(
        "--tz",
        default=os.getenv("APPTGRID_TZ", "local"),
        help="Timezone for 'today' and the now-indicator (default: env APPTGRID_TZ or 'local')",
    )
    ap.add_argument("--out", default=None, help="Output JSON path (default: stdout)")
    ns = ap.parse_args(argv)

    in_path = Path(ns.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")

    try:
        now = now_in(ns.tz)
    except ValueError as e:
        return _die(f"Invalid --tz value: {e}")

    day = now.date()
    if ns.date:
        day = parse_date(ns.date)
        if day is None:
            return _die(f"Invalid --date value: {ns.date!r}")

    try:
        overrides: Dict[str, Any] = {}
        if ns.cfg:
            overrides = json.loads(Path(ns.cfg).read_text(encoding="utf-8"))
        if ns.workhours:
            overrides = dict(overrides, workhours=ns.workhours)
        base = DAY_VIEW if ns.view == "day" else WEEK_COLUMN
        cfg = config_from_dict(overrides, base=base)
    except (OSError, ValueError) as e:
        return _die(f"Invalid layout config: {e}")

    try:
        appointments = load_appointments_json(in_path)
    except (OSError, ValueError) as e:
        return _die(f"Failed to load appointments: {in_path} ({e})")

    expansion = COLLAPSED if ns.expand is None else ExpansionState.expanded_at(ns.expand)
    doc = build_document(appointments, view=ns.view, day=day, expansion=expansion, cfg=cfg, now=now)
    text = _dumps(doc)

    if ns.out:
        out_path = Path(ns.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(str(out_path))
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
