from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from ..timesheets.model import TimesheetEntry
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .repository import TimesheetRepository


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]
    totals: dict


def _r2(value: float) -> float:
    return round(value, 2)


class PayrollReportService:
    def __init__(
        self,
        timesheets: TimesheetRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._timesheets = timesheets
        self._calculator = calculator or StandardPayrollCalculator()

    def build_payroll_report(
        self,
        *,
        company_id: str,
        start: date,
        end: date,
        worker_id: Optional[str] = None,
        approved_only: bool = True,
    ) -> ReportData:
        if end < start:
            raise ValidationError("Period end must not be before period start")

        query_rows = self._timesheets.list_range(
            company_id=company_id,
            start_date=start,
            end_date=end,
            worker_id=worker_id,
            approved_only=approved_only,
        )

        summary_map: dict[str, dict] = {}
        out_rows: list[dict] = []
        totals = {
            "total_hours": 0.0,
            "total_regular_hours": 0.0,
            "total_overtime_hours": 0.0,
            "total_pay": 0.0,
            "timesheet_count": 0,
        }

        for r in query_rows:
            entry = TimesheetEntry(
                worker_id=r.worker_id,
                clock_in=r.clock_in,
                clock_out=r.clock_out,
                break_duration=r.break_duration,
                hourly_rate=r.hourly_rate,
                task_description=r.task_description,
            )
            pay = self._calculator.calculate(entry)

            out_rows.append(
                {
                    "timesheet_id": r.timesheet_id,
                    "worker_id": r.worker_id,
                    "worker_name": r.worker_name,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "clock_in": (r.clock_in or "-")[:5],
                    "clock_out": (r.clock_out or "-")[:5],
                    "break_duration": r.break_duration,
                    "hourly_rate": r.hourly_rate,
                    "regular_hours": _r2(pay.regular_hours),
                    "overtime_hours": _r2(pay.overtime_hours),
                    "total_hours": _r2(pay.total_hours),
                    "total_pay": _r2(pay.total_pay),
                }
            )

            s = summary_map.get(r.worker_id)
            if not s:
                s = {
                    "worker_id": r.worker_id,
                    "worker_name": r.worker_name,
                    "days": 0,
                    "total_hours": 0.0,
                    "overtime_hours": 0.0,
                    "total_pay": 0.0,
                }
                summary_map[r.worker_id] = s
            s["days"] += 1
            s["total_hours"] += pay.total_hours
            s["overtime_hours"] += pay.overtime_hours
            s["total_pay"] += pay.total_pay

            totals["total_hours"] += pay.total_hours
            totals["total_regular_hours"] += pay.regular_hours
            totals["total_overtime_hours"] += pay.overtime_hours
            totals["total_pay"] += pay.total_pay
            totals["timesheet_count"] += 1

        summary = [
            {
                **s,
                "total_hours": _r2(s["total_hours"]),
                "overtime_hours": _r2(s["overtime_hours"]),
                "total_pay": _r2(s["total_pay"]),
            }
            for s in summary_map.values()
        ]
        summary.sort(key=lambda x: x["total_pay"], reverse=True)

        for key in ("total_hours", "total_regular_hours", "total_overtime_hours", "total_pay"):
            totals[key] = _r2(totals[key])

        return ReportData(rows=out_rows, summary=summary, totals=totals)
