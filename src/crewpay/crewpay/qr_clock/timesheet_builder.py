"""Turn a day's clock events into a timesheet entry."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Optional, Sequence

from ..core.constants import MINUTES_PER_DAY
from ..core.enums import ClockEventType, RoundingMethod
from ..timesheets.model import TimesheetEntry
from .model import ClockEvent

_STEP = {RoundingMethod.NEAREST_15: 15, RoundingMethod.NEAREST_30: 30, RoundingMethod.EXACT: 1}


def round_clock_time(moment: datetime, method: RoundingMethod | str) -> str:
    """``HH:MM`` of ``moment`` rounded to the company's rounding step (ties round up)."""
    step = _STEP[RoundingMethod(method)]
    minutes = moment.hour * 60 + moment.minute
    if step > 1:
        exact = minutes + moment.second / 60
        minutes = int(math.floor(exact / step + 0.5)) * step
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _break_minutes(events: Sequence[ClockEvent], shift_end: datetime) -> int:
    total = 0.0
    opened: Optional[datetime] = None
    for ev in events:
        if ev.event_type == ClockEventType.BREAK_START and opened is None:
            opened = ev.event_time
        elif ev.event_type == ClockEventType.BREAK_END and opened is not None:
            total += (ev.event_time - opened).total_seconds() / 60
            opened = None
    if opened is not None and shift_end > opened:
        total += (shift_end - opened).total_seconds() / 60
    return int(round(total))


def build_entry_from_events(
    worker_id: str,
    events: Sequence[ClockEvent],
    *,
    hourly_rate: Any = 0,
    rounding_method: RoundingMethod | str = RoundingMethod.EXACT,
) -> Optional[TimesheetEntry]:
    """First clock-in to last clock-out, less the breaks taken in between.

    Returns None while the day has no completed shift.
    """
    ordered = sorted(events, key=lambda e: e.event_time)
    clock_ins = [e for e in ordered if e.event_type == ClockEventType.CLOCK_IN]
    clock_outs = [e for e in ordered if e.event_type == ClockEventType.CLOCK_OUT]
    if not clock_ins or not clock_outs:
        return None

    start = clock_ins[0].event_time
    end = clock_outs[-1].event_time
    if end <= start:
        return None

    return TimesheetEntry(
        worker_id=str(worker_id),
        clock_in=round_clock_time(start, rounding_method),
        clock_out=round_clock_time(end, rounding_method),
        break_duration=_break_minutes([e for e in ordered if start <= e.event_time <= end], end),
        hourly_rate=hourly_rate,
    )
