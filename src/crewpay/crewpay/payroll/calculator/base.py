from __future__ import annotations

from abc import ABC, abstractmethod

from ...timesheets.model import TimesheetEntry
from ..model import DailyPay


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, entry: TimesheetEntry) -> DailyPay:
        raise NotImplementedError
