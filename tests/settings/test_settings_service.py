from __future__ import annotations

from typing import Optional

import pytest

from src.crewpay.crewpay.core.enums import RoundingMethod, Role
from src.crewpay.crewpay.core.exceptions import AuthorizationError, ValidationError
from src.crewpay.crewpay.settings.model import TimesheetSettings
from src.crewpay.crewpay.settings.service import TimesheetSettingsService


class InMemorySettings:
    def __init__(self):
        self.by_company: dict[str, TimesheetSettings] = {}
        self.saves = 0

    def get_for_company(self, company_id: str) -> Optional[TimesheetSettings]:
        return self.by_company.get(company_id)

    def save(self, settings: TimesheetSettings) -> None:
        self.saves += 1
        self.by_company[settings.company_id] = settings


def test_get_settings_creates_defaults_once():
    repo = InMemorySettings()
    svc = TimesheetSettingsService(repo)

    first = svc.get_settings("c1")
    second = svc.get_settings("c1")

    assert first == second == TimesheetSettings.defaults_for("c1")
    assert first.rounding_method == RoundingMethod.NEAREST_15
    assert repo.saves == 1


def test_entry_defaults_follow_company_settings():
    repo = InMemorySettings()
    svc = TimesheetSettingsService(repo)

    assert svc.get_entry_defaults("c1") == {"clock_in": "07:00", "clock_out": "16:00", "break_duration": 60}

    svc.update_settings(
        company_id="c1",
        changes={"work_day_start": "06:30", "break_time": 45, "require_approval": False},
        current_role=Role.ADMIN,
    )

    assert repo.by_company["c1"].work_day_start == "06:30:00"
    assert repo.by_company["c1"].require_approval is False
    assert svc.get_entry_defaults("c1") == {"clock_in": "06:30", "clock_out": "16:00", "break_duration": 45}


def test_update_requires_admin():
    svc = TimesheetSettingsService(InMemorySettings())

    with pytest.raises(AuthorizationError):
        svc.update_settings(company_id="c1", changes={"require_approval": True}, current_role=Role.WORKER)


def test_update_requires_require_approval():
    svc = TimesheetSettingsService(InMemorySettings())

    with pytest.raises(ValidationError, match="require_approval"):
        svc.update_settings(company_id="c1", changes={"break_time": 30}, current_role=Role.ADMIN)


@pytest.mark.parametrize(
    "changes",
    [
        {"work_day_end": "25:00"},
        {"break_time": -5},
        {"overtime_threshold": 0},
        {"rounding_method": "nearest_5"},
        {"auto_clockout": "maybe"},
    ],
)
def test_update_rejects_bad_values(changes):
    repo = InMemorySettings()
    svc = TimesheetSettingsService(repo)

    with pytest.raises(ValidationError):
        svc.update_settings(company_id="c1", changes={"require_approval": True, **changes}, current_role=Role.ADMIN)
    assert repo.saves == 0


def test_update_accepts_string_flags_and_rounding():
    svc = TimesheetSettingsService(InMemorySettings())

    updated = svc.update_settings(
        company_id="c1",
        changes={"require_approval": "true", "allow_overtime": 0, "rounding_method": "exact"},
        current_role=Role.ADMIN,
    )

    assert updated.require_approval is True
    assert updated.allow_overtime is False
    assert updated.rounding_method == RoundingMethod.EXACT
