from __future__ import annotations

from ...core.constants import DEFAULT_DAILY_OVERTIME_HOURS, DEFAULT_OVERTIME_MULTIPLIER
from ...timesheets.calc import calculate_entry_cost
from ...timesheets.model import TimesheetEntry
from ..model import DailyPay
from .base import PayrollCalculator
from .standard_calculator import worked_hours


class OvertimePayrollCalculator(PayrollCalculator):
    """Hours past the daily threshold are paid at rate x multiplier."""

    def __init__(
        self,
        *,
        daily_threshold_hours: float = DEFAULT_DAILY_OVERTIME_HOURS,
        multiplier: float = DEFAULT_OVERTIME_MULTIPLIER,
    ):
        if daily_threshold_hours < 0:
            raise ValueError("daily_threshold_hours must not be negative")
        self._threshold = float(daily_threshold_hours)
        self._multiplier = float(multiplier)

    def calculate(self, entry: TimesheetEntry) -> DailyPay:
        hours = worked_hours(entry)
        regular = min(hours, self._threshold)
        overtime = max(0.0, hours - self._threshold)
        pay = calculate_entry_cost(regular, entry.hourly_rate) + calculate_entry_cost(overtime, entry.hourly_rate) * self._multiplier
        return DailyPay(regular_hours=regular, overtime_hours=overtime, total_hours=hours, total_pay=pay)
