from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import ClockEventType


@dataclass(frozen=True)
class QRCode:
    """A printed code posted at a project location; scanning records ``qr_type``."""

    code_hash: str
    company_id: str
    project_id: str
    qr_type: ClockEventType
    name: str
    is_active: bool = True
    expires_at: Optional[datetime] = None


@dataclass(frozen=True)
class ClockEvent:
    company_id: str
    worker_id: str
    project_id: str
    event_type: ClockEventType
    event_time: datetime
    qr_code_hash: Optional[str] = None
    notes: Optional[str] = None
    event_id: Optional[int] = None


@dataclass(frozen=True)
class WorkerClockStatus:
    """Where a worker stands for the day, derived from that day's events."""

    worker_id: str
    is_clocked_in: bool
    current_break_start: Optional[datetime]
    last_event_time: Optional[datetime]
    project_id: Optional[str] = None

    @classmethod
    def from_events(cls, worker_id: str, events: Sequence[ClockEvent]) -> Optional["WorkerClockStatus"]:
        if not events:
            return None

        clocked_in = False
        break_start: Optional[datetime] = None
        project_id: Optional[str] = None
        for ev in sorted(events, key=lambda e: e.event_time):
            if ev.event_type == ClockEventType.CLOCK_IN:
                clocked_in, break_start, project_id = True, None, ev.project_id
            elif ev.event_type == ClockEventType.CLOCK_OUT:
                clocked_in, break_start = False, None
            elif ev.event_type == ClockEventType.BREAK_START:
                break_start = ev.event_time
            elif ev.event_type == ClockEventType.BREAK_END:
                break_start = None

        return cls(
            worker_id=worker_id,
            is_clocked_in=clocked_in,
            current_break_start=break_start,
            last_event_time=max(e.event_time for e in events),
            project_id=project_id,
        )
