from __future__ import annotations

from dataclasses import asdict, dataclass

from ..core.constants import DEFAULT_BREAK_MINUTES, DEFAULT_OVERTIME_THRESHOLD_HOURS
from ..core.enums import RoundingMethod


@dataclass(frozen=True)
class TimesheetSettings:
    """Company-wide timesheet configuration.

    Times are stored as ``HH:MM:SS`` strings, the way the settings table keeps them.
    """

    company_id: str
    work_day_start: str = "07:00:00"
    work_day_end: str = "16:00:00"
    break_time: int = DEFAULT_BREAK_MINUTES
    overtime_threshold: int = DEFAULT_OVERTIME_THRESHOLD_HOURS
    rounding_method: RoundingMethod = RoundingMethod.NEAREST_15
    auto_clockout: bool = True
    require_approval: bool = True
    allow_overtime: bool = True

    @classmethod
    def defaults_for(cls, company_id: str) -> "TimesheetSettings":
        return cls(company_id=str(company_id))

    def as_dict(self) -> dict:
        data = asdict(self)
        data["rounding_method"] = self.rounding_method.value
        return data
