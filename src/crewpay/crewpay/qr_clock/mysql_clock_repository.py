from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ClockEventType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClockEvent, QRCode
from .repository import ClockRepository

_EVENT_COLUMNS = "event_id, company_id, worker_id, project_id, event_type, event_time, qr_code_hash, notes"


def _to_event(r: dict) -> ClockEvent:
    return ClockEvent(
        event_id=int(r["event_id"]),
        company_id=str(r["company_id"]),
        worker_id=str(r["worker_id"]),
        project_id=str(r["project_id"]),
        event_type=ClockEventType(r["event_type"]),
        event_time=r["event_time"],
        qr_code_hash=r.get("qr_code_hash"),
        notes=r.get("notes"),
    )


class MySQLClockRepository(ClockRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_code(self, code_hash: str) -> Optional[QRCode]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT code_hash, company_id, project_id, qr_type, name, is_active, expires_at
                FROM qr_codes
                WHERE code_hash=%s
                """,
                (code_hash,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return QRCode(
                code_hash=r["code_hash"],
                company_id=str(r["company_id"]),
                project_id=str(r["project_id"]),
                qr_type=ClockEventType(r["qr_type"]),
                name=r["name"],
                is_active=bool(r["is_active"]),
                expires_at=r.get("expires_at"),
            )

    def save_code(self, code: QRCode) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO qr_codes (code_hash, company_id, project_id, qr_type, name, is_active, expires_at)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), is_active=VALUES(is_active), expires_at=VALUES(expires_at)
                """,
                (
                    code.code_hash,
                    code.company_id,
                    code.project_id,
                    code.qr_type.value,
                    code.name,
                    int(code.is_active),
                    code.expires_at,
                ),
            )

    def list_events(self, *, company_id: str, worker_id: str, work_date: date) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EVENT_COLUMNS}
                FROM clock_events
                WHERE company_id=%s AND worker_id=%s AND DATE(event_time)=%s
                ORDER BY event_time
                """,
                (company_id, worker_id, work_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def list_company_events(self, *, company_id: str, work_date: date) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_EVENT_COLUMNS}
                FROM clock_events
                WHERE company_id=%s AND DATE(event_time)=%s
                ORDER BY event_time
                """,
                (company_id, work_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def add_event(self, event: ClockEvent) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO clock_events (company_id, worker_id, project_id, event_type, event_time, qr_code_hash, notes)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    event.company_id,
                    event.worker_id,
                    event.project_id,
                    event.event_type.value,
                    event.event_time,
                    event.qr_code_hash,
                    event.notes,
                ),
            )
            return int(cur.lastrowid)
