"""Hour and pay arithmetic for timesheet entries and bulk timesheets.

Everything here is pure: no I/O, no shared state. Malformed input never raises;
bad clock strings turn into NaN, which the bulk formatter reports as "0.00".
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Optional, Union

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from .model import TimesheetEntry, TimesheetTotals

logger = logging.getLogger(__name__)

EntryLike = Union[TimesheetEntry, Mapping[str, Any], None]


def parse_time_to_minutes(time_str: str) -> float:
    """Parse ``HH:MM`` (or ``HH:MM:SS``) into minutes since midnight.

    Seconds are ignored. Returns ``math.nan`` when the string is not parseable.
    """
    parts = str(time_str).split(":")
    if len(parts) < 2:
        return math.nan
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return math.nan
    return hours * MINUTES_PER_HOUR + minutes


def _as_amount(value: Any) -> float:
    """Coerce a rate/break input to a non-negative float (0 when unusable)."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return number


def calculate_entry_hours(clock_in: str, clock_out: str, break_minutes: Any = 0) -> float:
    """Worked hours for one shift, handling overnight shifts and the break.

    A clock-out earlier than the clock-in is an overnight shift. The result is
    floored at zero after the break is subtracted.
    """
    diff = parse_time_to_minutes(clock_out) - parse_time_to_minutes(clock_in)
    if math.isnan(diff):
        return math.nan
    if diff < 0:
        diff += MINUTES_PER_DAY

    work_minutes = max(0.0, diff - _as_amount(break_minutes))
    return work_minutes / MINUTES_PER_HOUR


def calculate_entry_cost(hours: float, hourly_rate: Any, number_of_days: int = 1) -> float:
    """Cost of ``hours`` per day over ``number_of_days`` at ``hourly_rate``. Not rounded."""
    return hours * max(int(number_of_days), 0) * _as_amount(hourly_rate)


def _coerce_entry(entry: EntryLike) -> Optional[TimesheetEntry]:
    if entry is None:
        return None
    if isinstance(entry, TimesheetEntry):
        return entry
    if isinstance(entry, Mapping):
        return TimesheetEntry.from_dict(entry)
    return None


def _format_amount(value: float) -> str:
    if math.isnan(value):
        return "0.00"
    return f"{value:.2f}"


def calculate_bulk_timesheet_totals(entries: Iterable[EntryLike], number_of_days: int) -> TimesheetTotals:
    """Totals for a bulk timesheet where every entry repeats on every selected day.

    Entries without a worker, clock-in or clock-out contribute nothing. ``workers``
    is the number of entries supplied, not the number of distinct workers.
    """
    entries = list(entries)
    days = max(int(number_of_days), 0)

    total_hours = 0.0
    total_cost = 0.0

    for raw in entries:
        entry = _coerce_entry(raw)
        if not entry or not (entry.worker_id and entry.clock_in and entry.clock_out):
            continue

        hours = calculate_entry_hours(entry.clock_in, entry.clock_out, entry.break_duration)
        if math.isnan(hours):
            logger.warning(
                "Unparseable clock time for worker %s (%r -> %r); batch totals will report 0.00",
                entry.worker_id,
                entry.clock_in,
                entry.clock_out,
            )

        total_hours += hours * days
        total_cost += calculate_entry_cost(hours, entry.hourly_rate, days)

    return TimesheetTotals(
        hours=_format_amount(total_hours),
        cost=_format_amount(total_cost),
        days=int(number_of_days),
        workers=len(entries),
    )
