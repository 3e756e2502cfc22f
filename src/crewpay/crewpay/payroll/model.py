from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayType, PayPeriodType


@dataclass(frozen=True)
class DailyPay:
    """Priced worker-day. Values are unrounded floats."""

    regular_hours: float
    overtime_hours: float
    total_hours: float
    total_pay: float


@dataclass(frozen=True)
class TimesheetRow:
    """Read-model of a stored timesheet, as payroll reports need it."""

    timesheet_id: int
    worker_id: str
    worker_name: str
    work_date: date
    clock_in: Optional[str]
    clock_out: Optional[str]
    break_duration: int
    hourly_rate: float
    approved: bool = False
    task_description: Optional[str] = None


@dataclass(frozen=True)
class PaymentSchedule:
    """When a company pays; day numbers are 1-31 (month) or 1-7 (Mon-Sun)."""

    pay_period_type: PayPeriodType
    pay_day: int
    pay_day_type: DayType
    period_start_day: int = 1
    period_start_type: DayType = DayType.DAY_OF_WEEK
