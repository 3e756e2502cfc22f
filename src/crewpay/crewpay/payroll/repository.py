from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimesheetRow


class TimesheetRepository(Protocol):
    def list_range(
        self,
        *,
        company_id: str,
        start_date: date,
        end_date: date,
        worker_id: Optional[str] = None,
        approved_only: bool = True,
    ) -> Sequence[TimesheetRow]:
        raise NotImplementedError
