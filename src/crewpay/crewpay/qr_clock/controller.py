from __future__ import annotations

import io
from datetime import date, datetime

from flask import Flask, g, request, send_file

from ..auth.decorators import admin_required, login_required
from ..common.datetime_utils import parse_iso_date
from ..common.http import domain_error, fail, ok
from ..core.constants import DEFAULT_END_OF_DAY
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .codes import render_qr_png


def register(app: Flask, container: Container) -> None:
    def _parse_date(value) -> date:
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format") from None

    @app.route("/api/qr-clock/codes", methods=["POST"], endpoint="api_qr_create_code")
    @admin_required(container.identity)
    def api_qr_create_code():
        body = request.get_json(silent=True) or {}
        try:
            expires_at = None
            if body.get("expires_at"):
                try:
                    raw = str(body["expires_at"]).strip()
                    if raw.endswith("Z"):
                        raw = raw[:-1] + "+00:00"
                    expires_at = datetime.fromisoformat(raw)
                except ValueError:
                    raise ValidationError("expires_at must be an ISO datetime") from None

            code = container.clock_service.create_code(
                current_role=g.identity.role,
                company_id=g.identity.company_id,
                project_id=body.get("project_id", ""),
                qr_type=body.get("qr_type", ""),
                name=body.get("name", ""),
                expires_at=expires_at,
            )
            return ok({"code_hash": code.code_hash, "qr_type": code.qr_type.value, "name": code.name})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Failed to create QR code for company %s", g.identity.company_id)
            return fail("Internal server error", 500)

    @app.route("/api/qr-clock/codes/<code_hash>/image", methods=["GET"], endpoint="api_qr_code_image")
    @admin_required(container.identity)
    def api_qr_code_image(code_hash: str):
        try:
            code = container.clock_service.get_code(code_hash)
            if code.company_id != g.identity.company_id:
                return fail("QR code not found", 404)
            scan_url = request.host_url.rstrip("/") + f"/qr-scan/{code.code_hash}"
            return send_file(io.BytesIO(render_qr_png(scan_url)), mimetype="image/png")
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Failed to render QR code %s", code_hash)
            return fail("Internal server error", 500)

    @app.route("/api/qr-clock/scan", methods=["POST"], endpoint="api_qr_scan")
    @login_required(container.identity)
    def api_qr_scan():
        body = request.get_json(silent=True) or {}
        code_hash = str(body.get("code_hash", "")).strip()
        if not code_hash:
            return fail("QR code is required")

        try:
            result = container.clock_service.scan(
                code_hash=code_hash, worker_id=g.identity.user_id, company_id=g.identity.company_id
            )
            return ok(
                {
                    "event_id": result.event_id,
                    "event_type": result.event_type.value,
                    "event_time": result.event_time.isoformat(timespec="seconds"),
                },
                message=result.message,
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("QR scan failed for worker %s", g.identity.user_id)
            return fail("Internal server error", 500)

    @app.route("/api/qr-clock/auto-clockout", methods=["POST"], endpoint="api_qr_auto_clockout")
    @admin_required(container.identity)
    def api_qr_auto_clockout():
        body = request.get_json(silent=True) or {}
        try:
            if not body.get("date"):
                raise ValidationError("Date parameter is required")
            result = container.clock_service.auto_clock_out(
                company_id=g.identity.company_id,
                work_date=_parse_date(body["date"]),
                end_of_day=body.get("end_of_day") or DEFAULT_END_OF_DAY,
            )
            return ok(result, message=f"Successfully processed {result['processed']} workers")
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Auto clock-out failed for company %s", g.identity.company_id)
            return fail("Internal server error", 500)

    @app.route("/api/qr-clock/generate-timesheet", methods=["POST"], endpoint="api_qr_generate_timesheet")
    @admin_required(container.identity)
    def api_qr_generate_timesheet():
        body = request.get_json(silent=True) or {}
        try:
            if not body.get("worker_id") or not body.get("date"):
                raise ValidationError("worker_id and date are required")
            entry = container.clock_service.generate_timesheet(
                company_id=g.identity.company_id,
                worker_id=str(body["worker_id"]),
                work_date=_parse_date(body["date"]),
                hourly_rate=body.get("hourly_rate") or 0,
            )
            if entry is None:
                return fail("No completed shift found for that day")
            return ok(
                {
                    "worker_id": entry.worker_id,
                    "clock_in": entry.clock_in,
                    "clock_out": entry.clock_out,
                    "break_duration": entry.break_duration,
                    "hourly_rate": entry.hourly_rate,
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Timesheet generation failed for company %s", g.identity.company_id)
            return fail("Internal server error", 500)
