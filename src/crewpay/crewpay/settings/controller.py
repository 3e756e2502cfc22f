from __future__ import annotations

from flask import Flask, g, request

from ..auth.decorators import login_required
from ..common.http import domain_error, fail, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet-settings", methods=["GET"], endpoint="api_timesheet_settings")
    @login_required(container.identity)
    def api_timesheet_settings():
        try:
            settings = container.settings_service.get_settings(g.identity.company_id)
            return ok(settings.as_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Failed to fetch timesheet settings for company %s", g.identity.company_id)
            return fail("Failed to fetch settings", 500)

    @app.route("/api/timesheet-settings", methods=["PUT"], endpoint="api_timesheet_settings_update")
    @login_required(container.identity)
    def api_timesheet_settings_update():
        body = request.get_json(silent=True) or {}
        try:
            settings = container.settings_service.update_settings(
                company_id=g.identity.company_id,
                changes=body,
                current_role=g.identity.role,
            )
            return ok(settings.as_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Failed to update timesheet settings for company %s", g.identity.company_id)
            return fail("Failed to update settings", 500)
