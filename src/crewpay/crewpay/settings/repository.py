from __future__ import annotations

from typing import Optional, Protocol

from .model import TimesheetSettings


class TimesheetSettingsRepository(Protocol):
    def get_for_company(self, company_id: str) -> Optional[TimesheetSettings]:
        raise NotImplementedError

    def save(self, settings: TimesheetSettings) -> None:
        """Insert or replace the company's settings row."""

        raise NotImplementedError
