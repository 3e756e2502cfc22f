from __future__ import annotations

import math

from ...timesheets.calc import calculate_entry_cost, calculate_entry_hours
from ...timesheets.model import TimesheetEntry
from ..model import DailyPay
from .base import PayrollCalculator

_NOTHING = DailyPay(regular_hours=0.0, overtime_hours=0.0, total_hours=0.0, total_pay=0.0)


def worked_hours(entry: TimesheetEntry) -> float:
    """Hours for one entry; 0 when clock times are missing or unparseable."""
    if not entry.clock_in or not entry.clock_out:
        return 0.0
    hours = calculate_entry_hours(entry.clock_in, entry.clock_out, entry.break_duration)
    return 0.0 if math.isnan(hours) else hours


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: every worked hour at the base rate."""

    def calculate(self, entry: TimesheetEntry) -> DailyPay:
        hours = worked_hours(entry)
        if not hours:
            return _NOTHING
        return DailyPay(
            regular_hours=hours,
            overtime_hours=0.0,
            total_hours=hours,
            total_pay=calculate_entry_cost(hours, entry.hourly_rate),
        )
