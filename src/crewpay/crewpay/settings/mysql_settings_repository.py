from __future__ import annotations

from typing import Optional

from ..core.enums import RoundingMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, format_mysql_time
from .model import TimesheetSettings
from .repository import TimesheetSettingsRepository


class MySQLTimesheetSettingsRepository(TimesheetSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_company(self, company_id: str) -> Optional[TimesheetSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_id, work_day_start, work_day_end, break_time, overtime_threshold,
                       rounding_method, auto_clockout, require_approval, allow_overtime
                FROM timesheet_settings
                WHERE company_id=%s
                """,
                (company_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return TimesheetSettings(
                company_id=str(r["company_id"]),
                work_day_start=format_mysql_time(r["work_day_start"]),
                work_day_end=format_mysql_time(r["work_day_end"]),
                break_time=int(r.get("break_time") or 0),
                overtime_threshold=int(r.get("overtime_threshold") or 0),
                rounding_method=RoundingMethod(r["rounding_method"]),
                auto_clockout=bool(r["auto_clockout"]),
                require_approval=bool(r["require_approval"]),
                allow_overtime=bool(r["allow_overtime"]),
            )

    def save(self, settings: TimesheetSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheet_settings
                    (company_id, work_day_start, work_day_end, break_time, overtime_threshold,
                     rounding_method, auto_clockout, require_approval, allow_overtime)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    work_day_start=VALUES(work_day_start),
                    work_day_end=VALUES(work_day_end),
                    break_time=VALUES(break_time),
                    overtime_threshold=VALUES(overtime_threshold),
                    rounding_method=VALUES(rounding_method),
                    auto_clockout=VALUES(auto_clockout),
                    require_approval=VALUES(require_approval),
                    allow_overtime=VALUES(allow_overtime),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (
                    settings.company_id,
                    settings.work_day_start,
                    settings.work_day_end,
                    int(settings.break_time),
                    int(settings.overtime_threshold),
                    settings.rounding_method.value,
                    int(settings.auto_clockout),
                    int(settings.require_approval),
                    int(settings.allow_overtime),
                ),
            )
