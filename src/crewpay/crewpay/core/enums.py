from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Company roles used for authorization."""

    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    WORKER = "worker"


class RoundingMethod(str, Enum):
    """How clock times are rounded when a timesheet is generated."""

    NEAREST_15 = "nearest_15"
    NEAREST_30 = "nearest_30"
    EXACT = "exact"


class PayPeriodType(str, Enum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class DayType(str, Enum):
    """How a pay day / period start day number is interpreted."""

    DAY_OF_MONTH = "day_of_month"
    DAY_OF_WEEK = "day_of_week"


class ClockEventType(str, Enum):
    """QR code types; each scan records an event of the code's type."""

    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"
