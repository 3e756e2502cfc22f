from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_mysql_time
from .model import TimesheetRow
from .repository import TimesheetRepository


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(
        self,
        *,
        company_id: str,
        start_date: date,
        end_date: date,
        worker_id: Optional[str] = None,
        approved_only: bool = True,
    ) -> Sequence[TimesheetRow]:
        where = ["t.company_id=%s", "t.work_date BETWEEN %s AND %s"]
        params: list = [company_id, start_date, end_date]
        if worker_id:
            where.append("t.worker_id=%s")
            params.append(worker_id)
        if approved_only:
            where.append("t.supervisor_approval='approved'")

        sql = f"""
            SELECT t.timesheet_id, t.worker_id, w.name AS worker_name, t.work_date,
                   t.clock_in, t.clock_out, t.break_duration,
                   COALESCE(t.hourly_rate, w.hourly_rate, 0) AS hourly_rate,
                   t.supervisor_approval, t.task_description
            FROM timesheets t
            JOIN workers w ON w.worker_id = t.worker_id
            WHERE {' AND '.join(where)}
            ORDER BY t.work_date, w.name
        """

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                TimesheetRow(
                    timesheet_id=int(r["timesheet_id"]),
                    worker_id=str(r["worker_id"]),
                    worker_name=r["worker_name"],
                    work_date=r["work_date"],
                    clock_in=format_mysql_time(r.get("clock_in")),
                    clock_out=format_mysql_time(r.get("clock_out")),
                    break_duration=int(r.get("break_duration") or 0),
                    hourly_rate=float(r.get("hourly_rate") or 0),
                    approved=r.get("supervisor_approval") == "approved",
                    task_description=r.get("task_description"),
                )
                for r in rows
            ]
