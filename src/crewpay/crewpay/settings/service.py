from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from ..common.validators import require_bool, require_clock_time, require_int_range
from ..core.enums import RoundingMethod, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..timesheets.defaults import get_default_timesheet_values
from .model import TimesheetSettings
from .repository import TimesheetSettingsRepository

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ("auto_clockout", "require_approval", "allow_overtime")


def _as_db_time(value: Any, field_name: str) -> str:
    text = require_clock_time(value, field_name)
    return text if text.count(":") == 2 else f"{text}:00"


class TimesheetSettingsService:
    """Use case: read and change a company's timesheet settings."""

    def __init__(self, settings: TimesheetSettingsRepository):
        self._settings = settings

    def get_settings(self, company_id: str) -> TimesheetSettings:
        existing = self._settings.get_for_company(company_id)
        if existing:
            return existing

        defaults = TimesheetSettings.defaults_for(company_id)
        self._settings.save(defaults)
        logger.info("Created default timesheet settings for company %s", company_id)
        return defaults

    def get_entry_defaults(self, company_id: str) -> dict:
        return get_default_timesheet_values(self.get_settings(company_id))

    def update_settings(
        self,
        *,
        company_id: str,
        changes: Mapping[str, Any],
        current_role: Role,
    ) -> TimesheetSettings:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only company admins can change timesheet settings")

        if changes.get("require_approval") is None:
            raise ValidationError("require_approval is required")

        cleaned: dict[str, Any] = {}
        if changes.get("work_day_start") is not None:
            cleaned["work_day_start"] = _as_db_time(changes["work_day_start"], "work_day_start")
        if changes.get("work_day_end") is not None:
            cleaned["work_day_end"] = _as_db_time(changes["work_day_end"], "work_day_end")
        if changes.get("break_time") is not None:
            cleaned["break_time"] = require_int_range(changes["break_time"], "break_time", min_value=0, max_value=24 * 60)
        if changes.get("overtime_threshold") is not None:
            cleaned["overtime_threshold"] = require_int_range(
                changes["overtime_threshold"], "overtime_threshold", min_value=1, max_value=168
            )
        if changes.get("rounding_method") is not None:
            try:
                cleaned["rounding_method"] = RoundingMethod(changes["rounding_method"])
            except ValueError:
                raise ValidationError("Invalid rounding method") from None
        for name in _BOOL_FIELDS:
            if changes.get(name) is not None:
                cleaned[name] = require_bool(changes[name], name)

        current = self._settings.get_for_company(company_id) or TimesheetSettings.defaults_for(company_id)
        updated = replace(current, **cleaned)
        self._settings.save(updated)
        return updated
