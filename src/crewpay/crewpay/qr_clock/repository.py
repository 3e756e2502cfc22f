from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ClockEvent, QRCode


class ClockRepository(Protocol):
    def get_code(self, code_hash: str) -> Optional[QRCode]:
        raise NotImplementedError

    def save_code(self, code: QRCode) -> None:
        raise NotImplementedError

    def list_events(self, *, company_id: str, worker_id: str, work_date: date) -> Sequence[ClockEvent]:
        """Events of one worker of one company on one day, oldest first."""

        raise NotImplementedError

    def list_company_events(self, *, company_id: str, work_date: date) -> Sequence[ClockEvent]:
        raise NotImplementedError

    def add_event(self, event: ClockEvent) -> int:
        """Returns event_id."""

        raise NotImplementedError
