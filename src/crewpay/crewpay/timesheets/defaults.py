from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_hhmm
from ..core.constants import DEFAULT_BREAK_MINUTES, DEFAULT_CLOCK_IN, DEFAULT_CLOCK_OUT


def _setting(settings: Any, name: str) -> Any:
    if settings is None:
        return None
    if isinstance(settings, Mapping):
        value = settings.get(name)
    else:
        value = getattr(settings, name, None)
    return None if value == "" else value


def get_default_timesheet_values(settings: Optional[Any] = None) -> dict:
    """Clock-in/out and break to prefill a new bulk timesheet entry.

    ``settings`` is a mapping or a ``TimesheetSettings`` with any of
    ``work_day_start``, ``work_day_end`` and ``break_time``; missing values fall
    back to 07:00, 16:00 and 60 minutes. A break of 0 is kept as "no break".
    """
    start = _setting(settings, "work_day_start")
    end = _setting(settings, "work_day_end")
    break_time = _setting(settings, "break_time")

    try:
        break_duration = int(break_time) if break_time is not None else DEFAULT_BREAK_MINUTES
    except (TypeError, ValueError):
        break_duration = DEFAULT_BREAK_MINUTES

    return {
        "clock_in": to_hhmm(start) if start else DEFAULT_CLOCK_IN,
        "clock_out": to_hhmm(end) if end else DEFAULT_CLOCK_OUT,
        "break_duration": break_duration,
    }
