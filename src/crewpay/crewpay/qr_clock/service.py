from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from ..common.datetime_utils import now_local, to_local_naive
from ..common.validators import require_clock_time, require_non_empty
from ..core.constants import CLOCK_EVENT_COOLDOWN_SECONDS, DEFAULT_END_OF_DAY
from ..core.enums import ClockEventType, RoundingMethod, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..settings.service import TimesheetSettingsService
from ..timesheets.model import TimesheetEntry
from .codes import generate_code_hash
from .model import ClockEvent, QRCode, WorkerClockStatus
from .repository import ClockRepository
from .timesheet_builder import build_entry_from_events
from .validation import success_message, validate_clock_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    event_id: int
    event_type: ClockEventType
    event_time: datetime
    message: str


class ClockService:
    """Use case: QR clock-in/out, breaks, and end-of-day clean-up."""

    def __init__(
        self,
        clock: ClockRepository,
        *,
        settings: Optional[TimesheetSettingsService] = None,
        cooldown_seconds: int = CLOCK_EVENT_COOLDOWN_SECONDS,
        clock_window: Optional[tuple[int, int]] = None,
    ):
        self._clock = clock
        self._settings = settings
        self._cooldown = timedelta(seconds=int(cooldown_seconds))
        self._window = clock_window

    def create_code(
        self,
        *,
        current_role: Role,
        company_id: str,
        project_id: str,
        qr_type: ClockEventType | str,
        name: str,
        expires_at: Optional[datetime] = None,
    ) -> QRCode:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only company admins can create QR codes")
        try:
            qr_type = ClockEventType(qr_type)
        except ValueError:
            raise ValidationError("Invalid QR code type") from None

        code = QRCode(
            code_hash=generate_code_hash(),
            company_id=str(company_id),
            project_id=require_non_empty(project_id, "project_id"),
            qr_type=qr_type,
            name=require_non_empty(name, "name"),
            expires_at=to_local_naive(expires_at) if expires_at else None,
        )
        self._clock.save_code(code)
        return code

    def get_code(self, code_hash: str) -> QRCode:
        code = self._clock.get_code(code_hash)
        if not code:
            raise ValidationError("Invalid QR code")
        return code

    def get_status(self, *, company_id: str, worker_id: str, work_date: date) -> Optional[WorkerClockStatus]:
        events = self._clock.list_events(company_id=company_id, worker_id=worker_id, work_date=work_date)
        return WorkerClockStatus.from_events(worker_id, events)

    def scan(self, *, code_hash: str, worker_id: str, company_id: str, now: Optional[datetime] = None) -> ScanResult:
        now = now or now_local()

        code = self.get_code(code_hash)
        if code.company_id != str(company_id):
            raise ValidationError("Worker not found or unauthorized")
        if not code.is_active:
            raise ValidationError("This QR code is no longer active")
        if code.expires_at and now > code.expires_at:
            raise ValidationError("This QR code has expired")

        if self._window:
            start_hour, end_hour = self._window
            if not start_hour <= now.hour <= end_hour:
                raise ValidationError(f"Clock events only allowed between {start_hour:02d}:00 and {end_hour:02d}:59")

        status = self.get_status(company_id=code.company_id, worker_id=worker_id, work_date=now.date())
        if status and status.last_event_time and now - status.last_event_time < self._cooldown:
            raise ValidationError("Please wait before making another clock event")

        problem = validate_clock_event(code.qr_type, status)
        if problem:
            raise ValidationError(problem)

        event_id = self._clock.add_event(
            ClockEvent(
                company_id=code.company_id,
                worker_id=str(worker_id),
                project_id=code.project_id,
                event_type=code.qr_type,
                event_time=now,
                qr_code_hash=code.code_hash,
            )
        )
        logger.info("Worker %s recorded %s at %s", worker_id, code.qr_type.value, now.isoformat())
        return ScanResult(event_id=event_id, event_type=code.qr_type, event_time=now, message=success_message(code.qr_type))

    def auto_clock_out(self, *, company_id: str, work_date: date, end_of_day: str = DEFAULT_END_OF_DAY) -> dict:
        """Clock out everyone still clocked in on ``work_date`` at ``end_of_day``.

        Open breaks are closed first. A worker whose last event is later than
        ``end_of_day`` is clocked out at that last event instead.
        """
        end_of_day = require_clock_time(end_of_day, "end_of_day")
        hours, minutes = (int(p) for p in end_of_day.split(":")[:2])
        cutoff = datetime.combine(work_date, time(hours, minutes))

        by_worker: dict[str, list[ClockEvent]] = defaultdict(list)
        for ev in self._clock.list_company_events(company_id=company_id, work_date=work_date):
            by_worker[ev.worker_id].append(ev)

        processed: list[str] = []
        for worker_id, events in by_worker.items():
            status = WorkerClockStatus.from_events(worker_id, events)
            if not status or not status.is_clocked_in:
                continue

            at = max(cutoff, status.last_event_time)
            if status.current_break_start:
                self._clock.add_event(
                    ClockEvent(company_id, worker_id, status.project_id, ClockEventType.BREAK_END, at, notes="auto clock-out")
                )
            self._clock.add_event(
                ClockEvent(company_id, worker_id, status.project_id, ClockEventType.CLOCK_OUT, at, notes="auto clock-out")
            )
            processed.append(worker_id)

        logger.info("Auto clock-out for company %s on %s: %d workers", company_id, work_date, len(processed))
        return {"processed": len(processed), "worker_ids": processed}

    def generate_timesheet(
        self,
        *,
        company_id: str,
        worker_id: str,
        work_date: date,
        hourly_rate: Any = 0,
        rounding_method: Optional[RoundingMethod] = None,
    ) -> Optional[TimesheetEntry]:
        """Timesheet entry for a worker's day of clock events, rounded per company settings."""
        if rounding_method is None:
            rounding_method = (
                self._settings.get_settings(company_id).rounding_method if self._settings else RoundingMethod.EXACT
            )
        events = self._clock.list_events(company_id=company_id, worker_id=worker_id, work_date=work_date)
        return build_entry_from_events(worker_id, events, hourly_rate=hourly_rate, rounding_method=rounding_method)
