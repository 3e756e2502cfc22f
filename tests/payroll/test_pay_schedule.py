from datetime import date

import pytest

from src.crewpay.crewpay.core.enums import DayType, PayPeriodType
from src.crewpay.crewpay.core.exceptions import ValidationError
from src.crewpay.crewpay.payroll.model import PaymentSchedule
from src.crewpay.crewpay.payroll.schedule import (
    format_pay_day,
    get_next_pay_date,
    get_next_pay_dates,
    get_week_boundaries,
    validate_pay_day,
    validate_period_start_day,
)


def _monthly(pay_day: int) -> PaymentSchedule:
    return PaymentSchedule(pay_period_type=PayPeriodType.MONTHLY, pay_day=pay_day, pay_day_type=DayType.DAY_OF_MONTH)


def _weekly(pay_day: int, period=PayPeriodType.WEEKLY) -> PaymentSchedule:
    return PaymentSchedule(pay_period_type=period, pay_day=pay_day, pay_day_type=DayType.DAY_OF_WEEK)


def test_monthly_pay_day_later_this_month():
    assert get_next_pay_date(date(2026, 1, 10), _monthly(15)) == date(2026, 1, 15)


def test_monthly_pay_day_already_reached_moves_to_next_month():
    assert get_next_pay_date(date(2026, 1, 15), _monthly(15)) == date(2026, 2, 15)
    assert get_next_pay_date(date(2026, 12, 20), _monthly(15)) == date(2027, 1, 15)


def test_monthly_pay_day_clamps_to_month_end():
    assert get_next_pay_dates(_monthly(31), 3, from_date=date(2026, 1, 20)) == [
        date(2026, 1, 31),
        date(2026, 2, 28),
        date(2026, 3, 31),
    ]
    assert get_next_pay_date(date(2028, 1, 31), _monthly(31)) == date(2028, 2, 29)


def test_weekly_pay_day():
    # 2026-10-17 is a Saturday; pay on Fridays.
    assert get_next_pay_date(date(2026, 10, 17), _weekly(5)) == date(2026, 10, 23)
    assert get_next_pay_date(date(2026, 10, 14), _weekly(5)) == date(2026, 10, 16)
    assert get_next_pay_date(date(2026, 10, 16), _weekly(5)) == date(2026, 10, 23)


def test_bi_weekly_rolls_two_weeks_once_day_has_passed():
    assert get_next_pay_date(date(2026, 10, 17), _weekly(5, PayPeriodType.BI_WEEKLY)) == date(2026, 10, 30)


def test_invalid_pay_day_is_rejected():
    with pytest.raises(ValidationError):
        get_next_pay_date(date(2026, 1, 1), _monthly(0))


def test_validate_pay_day():
    assert validate_pay_day(0, DayType.DAY_OF_MONTH) == "Day of month must be between 1 and 31"
    assert validate_pay_day(29, "day_of_month").startswith("Warning")
    assert validate_pay_day(8, DayType.DAY_OF_WEEK) == "Day of week must be between 1 (Monday) and 7 (Sunday)"
    assert validate_pay_day(3, DayType.DAY_OF_WEEK) is None


def test_validate_period_start_day():
    assert (
        validate_period_start_day(15, "day_of_month", 10, "day_of_month", "monthly")
        == "Period start day should be before the pay day"
    )
    assert validate_period_start_day(5, "day_of_week", 5, "day_of_week", "weekly").startswith("For weekly")
    assert validate_period_start_day(5, "day_of_week", 5, "day_of_week", "bi-weekly").startswith("For bi-weekly")
    assert validate_period_start_day(1, "day_of_week", 5, "day_of_week", "weekly") is None


@pytest.mark.parametrize(
    "day,expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"), (31, "31st")],
)
def test_format_pay_day_of_month(day, expected):
    assert format_pay_day(day, DayType.DAY_OF_MONTH) == expected


def test_format_pay_day_of_week():
    assert format_pay_day(1, DayType.DAY_OF_WEEK) == "Monday"
    assert format_pay_day(7, DayType.DAY_OF_WEEK) == "Sunday"
    assert format_pay_day(9, DayType.DAY_OF_WEEK) == ""


def test_week_boundaries_default_saturday_start():
    assert get_week_boundaries(date(2026, 10, 14)) == (date(2026, 10, 10), date(2026, 10, 16))
    assert get_week_boundaries(date(2026, 10, 17)) == (date(2026, 10, 17), date(2026, 10, 23))


def test_week_boundaries_sunday_start():
    assert get_week_boundaries(date(2026, 10, 14), 0) == (date(2026, 10, 11), date(2026, 10, 17))
