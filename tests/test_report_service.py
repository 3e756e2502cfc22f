from __future__ import annotations

from datetime import date

import pytest

from src.crewpay.crewpay.core.exceptions import ValidationError
from src.crewpay.crewpay.payroll.calculator.overtime_calculator import OvertimePayrollCalculator
from src.crewpay.crewpay.payroll.model import TimesheetRow
from src.crewpay.crewpay.payroll.service import PayrollReportService


class FakeTimesheetRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_range(self, *, company_id, start_date, end_date, worker_id=None, approved_only=True):
        self.last_args = {
            "company_id": company_id,
            "start_date": start_date,
            "end_date": end_date,
            "worker_id": worker_id,
            "approved_only": approved_only,
        }
        return self._rows


def _rows():
    return [
        TimesheetRow(1, "w1", "Ana", date(2026, 1, 5), "08:00:00", "17:00:00", 60, 20.0, approved=True),
        TimesheetRow(2, "w1", "Ana", date(2026, 1, 6), "07:00:00", "18:00:00", 60, 20.0, approved=True),
        TimesheetRow(3, "w2", "Ben", date(2026, 1, 5), "22:00:00", "06:00:00", 30, 15.0, approved=True),
    ]


def test_report_totals_with_overtime():
    svc = PayrollReportService(FakeTimesheetRepo(_rows()), calculator=OvertimePayrollCalculator())
    report = svc.build_payroll_report(company_id="c1", start=date(2026, 1, 3), end=date(2026, 1, 9))

    assert report.totals == {
        "total_hours": 25.5,
        "total_regular_hours": 23.5,
        "total_overtime_hours": 2.0,
        "total_pay": 492.5,
        "timesheet_count": 3,
    }
    assert report.rows[1]["overtime_hours"] == 2.0
    assert report.rows[2]["clock_in"] == "22:00"


def test_report_summary_groups_by_worker_sorted_by_pay():
    svc = PayrollReportService(FakeTimesheetRepo(_rows()), calculator=OvertimePayrollCalculator())
    report = svc.build_payroll_report(company_id="c1", start=date(2026, 1, 3), end=date(2026, 1, 9))

    assert [s["worker_id"] for s in report.summary] == ["w1", "w2"]
    assert report.summary[0]["days"] == 2
    assert report.summary[0]["total_hours"] == 18.0
    assert report.summary[0]["total_pay"] == 380.0
    assert report.summary[1]["total_pay"] == 112.5


def test_report_default_calculator_has_no_overtime():
    svc = PayrollReportService(FakeTimesheetRepo(_rows()))
    report = svc.build_payroll_report(company_id="c1", start=date(2026, 1, 3), end=date(2026, 1, 9))

    assert report.totals["total_overtime_hours"] == 0
    assert report.totals["total_pay"] == 472.5


def test_report_forwards_filters():
    repo = FakeTimesheetRepo([])
    svc = PayrollReportService(repo)

    report = svc.build_payroll_report(company_id="c1", start=date(2026, 1, 1), end=date(2026, 1, 31), worker_id="w9")

    assert repo.last_args["worker_id"] == "w9"
    assert repo.last_args["company_id"] == "c1"
    assert repo.last_args["approved_only"] is True
    assert report.totals["timesheet_count"] == 0


def test_report_rejects_inverted_period():
    svc = PayrollReportService(FakeTimesheetRepo([]))

    with pytest.raises(ValidationError):
        svc.build_payroll_report(company_id="c1", start=date(2026, 2, 1), end=date(2026, 1, 1))
