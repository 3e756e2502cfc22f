from __future__ import annotations

from datetime import date

from flask import Flask, g, request

from ..auth.decorators import admin_required, login_required
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import domain_error, fail, ok
from ..common.validators import require_bool, require_int_range
from ..core.enums import DayType, PayPeriodType
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import PaymentSchedule
from .schedule import get_next_pay_dates, get_week_boundaries


def register(app: Flask, container: Container) -> None:
    def _parse_date(value, field_name: str) -> date:
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"{field_name} must be in YYYY-MM-DD format") from None

    @app.route("/api/payroll/report", methods=["POST"], endpoint="api_payroll_report")
    @admin_required(container.identity)
    def api_payroll_report():
        body = request.get_json(silent=True) or {}
        try:
            if not body.get("start") or not body.get("end"):
                raise ValidationError("start and end are required")
            report = container.payroll_report_service.build_payroll_report(
                company_id=g.identity.company_id,
                start=_parse_date(body["start"], "start"),
                end=_parse_date(body["end"], "end"),
                worker_id=body.get("worker_id") or None,
                approved_only=(
                    require_bool(body["approved_only"], "approved_only")
                    if body.get("approved_only") is not None
                    else True
                ),
            )
            return ok({"rows": report.rows, "summary": report.summary, "totals": report.totals})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            app.logger.exception("Payroll report failed for company %s", g.identity.company_id)
            return fail("Internal server error", 500)

    @app.route("/api/payroll/next-pay-dates", methods=["GET"], endpoint="api_next_pay_dates")
    @login_required(container.identity)
    def api_next_pay_dates():
        args = request.args
        try:
            try:
                schedule = PaymentSchedule(
                    pay_period_type=PayPeriodType(args.get("pay_period_type", PayPeriodType.WEEKLY.value)),
                    pay_day=require_int_range(args.get("pay_day", 5), "pay_day", min_value=1, max_value=31),
                    pay_day_type=DayType(args.get("pay_day_type", DayType.DAY_OF_WEEK.value)),
                )
            except ValueError:
                raise ValidationError("Invalid payment schedule") from None
            count = require_int_range(args.get("count", 3), "count", min_value=1, max_value=24)
            start = _parse_date(args["from"], "from") if args.get("from") else now_local().date()

            dates = get_next_pay_dates(schedule, count, from_date=start)
            return ok([d.strftime("%Y-%m-%d") for d in dates])
        except DomainError as e:
            return domain_error(e)

    @app.route("/api/payroll/week", methods=["GET"], endpoint="api_pay_week")
    @login_required(container.identity)
    def api_pay_week():
        try:
            day = _parse_date(request.args["date"], "date") if request.args.get("date") else now_local().date()
            week_start_day = require_int_range(request.args.get("week_start_day", 6), "week_start_day", min_value=0, max_value=6)
            week_start, week_end = get_week_boundaries(day, week_start_day)
            return ok({"week_start": week_start.strftime("%Y-%m-%d"), "week_end": week_end.strftime("%Y-%m-%d")})
        except DomainError as e:
            return domain_error(e)
