from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.identity import IdentityProvider, build_identity_provider
from .database.connection import DBConfig, DatabaseConnection
from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.overtime_calculator import OvertimePayrollCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_timesheet_repository import MySQLTimesheetRepository
from .payroll.repository import TimesheetRepository
from .payroll.service import PayrollReportService
from .qr_clock.mysql_clock_repository import MySQLClockRepository
from .qr_clock.repository import ClockRepository
from .qr_clock.service import ClockService
from .settings.mysql_settings_repository import MySQLTimesheetSettingsRepository
from .settings.repository import TimesheetSettingsRepository
from .settings.service import TimesheetSettingsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    identity: IdentityProvider

    settings_repo: TimesheetSettingsRepository
    timesheets_repo: TimesheetRepository
    clock_repo: ClockRepository

    settings_service: TimesheetSettingsService
    payroll_report_service: PayrollReportService
    clock_service: ClockService


def build_calculator(settings) -> PayrollCalculator:
    if bool(getattr(settings, "PAYROLL_OVERTIME", True)):
        return OvertimePayrollCalculator(
            daily_threshold_hours=float(getattr(settings, "DAILY_OVERTIME_HOURS", 8)),
            multiplier=float(getattr(settings, "OVERTIME_MULTIPLIER", 1.5)),
        )
    return StandardPayrollCalculator()


def build_services(
    *,
    settings,
    settings_repo: TimesheetSettingsRepository,
    timesheets_repo: TimesheetRepository,
    clock_repo: ClockRepository,
    identity: Optional[IdentityProvider] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories (MySQL in the app, fakes in tests)."""
    settings_service = TimesheetSettingsService(settings_repo)
    payroll_report_service = PayrollReportService(timesheets_repo, calculator=build_calculator(settings))
    clock_service = ClockService(
        clock_repo,
        settings=settings_service,
        cooldown_seconds=int(getattr(settings, "CLOCK_COOLDOWN_SECONDS", 15)),
        clock_window=getattr(settings, "CLOCK_WINDOW", None),
    )

    return Container(
        conn=conn,
        identity=identity or build_identity_provider(settings),
        settings_repo=settings_repo,
        timesheets_repo=timesheets_repo,
        clock_repo=clock_repo,
        settings_service=settings_service,
        payroll_report_service=payroll_report_service,
        clock_service=clock_service,
    )


def build_container(*, db_config: dict, settings) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(
        settings=settings,
        settings_repo=MySQLTimesheetSettingsRepository(conn),
        timesheets_repo=MySQLTimesheetRepository(conn),
        clock_repo=MySQLClockRepository(conn),
        conn=conn,
    )
