from __future__ import annotations

from flask import Flask, g, request

from ..auth.decorators import login_required
from ..common.http import domain_error, fail, ok
from ..common.validators import require_int_range
from ..core.exceptions import DomainError
from ..container import Container
from .calc import calculate_bulk_timesheet_totals


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheets/bulk/totals", methods=["POST"], endpoint="api_bulk_timesheet_totals")
    @login_required(container.identity)
    def api_bulk_timesheet_totals():
        data = request.get_json(silent=True) or {}
        entries = data.get("entries") or []
        if not isinstance(entries, list):
            return fail("entries must be a list")

        try:
            number_of_days = require_int_range(data.get("number_of_days", 1), "number_of_days", min_value=0, max_value=366)
        except DomainError as e:
            return domain_error(e)

        totals = calculate_bulk_timesheet_totals(entries, number_of_days)
        return ok(totals.as_dict())

    @app.route("/api/timesheets/defaults", methods=["GET"], endpoint="api_timesheet_defaults")
    @login_required(container.identity)
    def api_timesheet_defaults():
        try:
            return ok(container.settings_service.get_entry_defaults(g.identity.company_id))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Failed to load timesheet defaults for company %s", g.identity.company_id)
            return fail("Internal server error", 500)
