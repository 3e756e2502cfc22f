"""Pay-date and pay-week arithmetic for company payment schedules."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_NEXT_PAY_DATES, DEFAULT_WEEK_START_DAY
from ..core.enums import DayType, PayPeriodType
from ..core.exceptions import ValidationError
from .model import PaymentSchedule

_WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _day_in_month(year: int, month: int, day: int) -> date:
    # Months without the requested day pay on their last day.
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last))


def _next_month(year: int, month: int) -> tuple[int, int]:
    return (year + 1, 1) if month == 12 else (year, month + 1)


def get_next_pay_date(from_date: date, schedule: PaymentSchedule) -> date:
    """First pay date strictly after ``from_date``."""
    pay_day_type = DayType(schedule.pay_day_type)
    message = validate_pay_day(schedule.pay_day, pay_day_type)
    if message and not message.startswith("Warning"):
        raise ValidationError(message)

    if pay_day_type == DayType.DAY_OF_MONTH:
        target = _day_in_month(from_date.year, from_date.month, schedule.pay_day)
        if target <= from_date:
            target = _day_in_month(*_next_month(from_date.year, from_date.month), schedule.pay_day)
        return target

    days_to_add = schedule.pay_day - from_date.isoweekday()
    if days_to_add <= 0:
        days_to_add += 7 if PayPeriodType(schedule.pay_period_type) == PayPeriodType.WEEKLY else 14
    return from_date + timedelta(days=days_to_add)


def get_next_pay_dates(
    schedule: PaymentSchedule,
    count: int = DEFAULT_NEXT_PAY_DATES,
    *,
    from_date: Optional[date] = None,
) -> list[date]:
    current = from_date or now_local().date()
    dates: list[date] = []
    while len(dates) < count:
        current = get_next_pay_date(current, schedule)
        dates.append(current)
    return dates


def validate_pay_day(pay_day: int, pay_day_type: DayType | str) -> Optional[str]:
    """Error or warning text for a pay day, or None when it is fine."""
    if DayType(pay_day_type) == DayType.DAY_OF_MONTH:
        if pay_day < 1 or pay_day > 31:
            return "Day of month must be between 1 and 31"
        if pay_day > 28:
            return "Warning: Some months don't have this day. Payment will be made on the last day of those months."
    elif pay_day < 1 or pay_day > 7:
        return "Day of week must be between 1 (Monday) and 7 (Sunday)"
    return None


def validate_period_start_day(
    start_day: int,
    start_day_type: DayType | str,
    pay_day: int,
    pay_day_type: DayType | str,
    pay_period_type: PayPeriodType | str,
) -> Optional[str]:
    start_day_type = DayType(start_day_type)
    pay_day_type = DayType(pay_day_type)
    pay_period_type = PayPeriodType(pay_period_type)

    if start_day_type == DayType.DAY_OF_MONTH:
        if start_day < 1 or start_day > 31:
            return "Day of month must be between 1 and 31"
        if start_day > 28:
            return "Warning: Some months don't have this day. Period will start on the last day of those months."
        if pay_day_type == DayType.DAY_OF_MONTH and pay_period_type == PayPeriodType.MONTHLY and start_day >= pay_day:
            return "Period start day should be before the pay day"
        return None

    if start_day < 1 or start_day > 7:
        return "Day of week must be between 1 (Monday) and 7 (Sunday)"
    if pay_day_type == DayType.DAY_OF_WEEK and start_day == pay_day:
        if pay_period_type == PayPeriodType.WEEKLY:
            return "For weekly pay periods, start day should be different from pay day"
        if pay_period_type == PayPeriodType.BI_WEEKLY:
            return "For bi-weekly pay periods, start day should be different from pay day"
    return None


def format_pay_day(day: int, day_type: DayType | str) -> str:
    if DayType(day_type) == DayType.DAY_OF_MONTH:
        if 11 <= day <= 13:
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
        return f"{day}{suffix}"
    return _WEEKDAY_NAMES[day - 1] if 1 <= day <= 7 else ""


def get_week_boundaries(day: date, week_start_day: int = DEFAULT_WEEK_START_DAY) -> tuple[date, date]:
    """Pay week (start, end) containing ``day``; ``week_start_day`` is 0=Sunday .. 6=Saturday."""
    if not 0 <= week_start_day <= 6:
        raise ValidationError("week_start_day must be between 0 (Sunday) and 6 (Saturday)")
    days_since_start = (day.isoweekday() % 7 - week_start_day) % 7
    week_start = day - timedelta(days=days_since_start)
    return week_start, week_start + timedelta(days=6)
