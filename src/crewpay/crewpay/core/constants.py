"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

DEFAULT_CLOCK_IN = "07:00"
DEFAULT_CLOCK_OUT = "16:00"
DEFAULT_BREAK_MINUTES = 60

DEFAULT_OVERTIME_THRESHOLD_HOURS = 40
DEFAULT_DAILY_OVERTIME_HOURS = 8
DEFAULT_OVERTIME_MULTIPLIER = 1.5

# 0 = Sunday ... 6 = Saturday; pay weeks run Saturday -> Friday.
DEFAULT_WEEK_START_DAY = 6
DEFAULT_NEXT_PAY_DATES = 3

CLOCK_EVENT_COOLDOWN_SECONDS = 15
DEFAULT_END_OF_DAY = "17:00"
