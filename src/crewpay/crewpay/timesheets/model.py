from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class TimesheetEntry:
    """One worker-day of a bulk timesheet, as typed in by an admin.

    Values come straight from user input, so any field may be missing or falsy;
    the calculators decide what counts as usable.
    """

    worker_id: Optional[str]
    clock_in: Optional[str]
    clock_out: Optional[str]
    break_duration: Any = 0
    hourly_rate: Any = 0
    task_description: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TimesheetEntry":
        worker_id = data.get("worker_id")
        return cls(
            worker_id=str(worker_id) if worker_id else None,
            clock_in=data.get("clock_in"),
            clock_out=data.get("clock_out"),
            break_duration=data.get("break_duration") or 0,
            hourly_rate=data.get("hourly_rate") or 0,
            task_description=data.get("task_description"),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class TimesheetTotals:
    """Period totals; hours and cost are 2-decimal strings."""

    hours: str
    cost: str
    days: int
    workers: int

    def as_dict(self) -> dict:
        return asdict(self)
