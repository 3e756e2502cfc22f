from __future__ import annotations

from datetime import date

import pytest

from config import testing as test_settings
from src.crewpay.crewpay.auth.identity import DemoIdentityProvider, Identity
from src.crewpay.crewpay.container import build_services
from src.crewpay.crewpay.core.enums import ClockEventType, Role
from src.crewpay.crewpay.main import create_app
from src.crewpay.crewpay.payroll.model import TimesheetRow
from src.crewpay.crewpay.qr_clock.model import QRCode


class InMemorySettings:
    def __init__(self):
        self.by_company = {}

    def get_for_company(self, company_id):
        return self.by_company.get(company_id)

    def save(self, settings):
        self.by_company[settings.company_id] = settings


class FakeTimesheetRepo:
    def __init__(self, rows):
        self._rows = rows
        self.approved_only = None

    def list_range(self, *, company_id, start_date, end_date, worker_id=None, approved_only=True):
        self.approved_only = approved_only
        return [r for r in self._rows if start_date <= r.work_date <= end_date]


class InMemoryClock:
    def __init__(self):
        self.codes = {}
        self.events = []

    def get_code(self, code_hash):
        return self.codes.get(code_hash)

    def save_code(self, code):
        self.codes[code.code_hash] = code

    def list_events(self, *, company_id, worker_id, work_date):
        return [
            e
            for e in self.events
            if e.company_id == company_id and e.worker_id == worker_id and e.event_time.date() == work_date
        ]

    def list_company_events(self, *, company_id, work_date):
        return [e for e in self.events if e.company_id == company_id and e.event_time.date() == work_date]

    def add_event(self, event):
        self.events.append(event)
        return len(self.events)


class NoIdentity:
    def current_identity(self):
        return None


def _make_app(monkeypatch, identity, rows=None):
    monkeypatch.setenv("APP_ENV", "testing")
    clock = InMemoryClock()
    container = build_services(
        settings=test_settings,
        settings_repo=InMemorySettings(),
        timesheets_repo=FakeTimesheetRepo(rows or []),
        clock_repo=clock,
        identity=identity,
    )
    app = create_app(container=container)
    return app, container, clock


def _as(role: Role):
    return DemoIdentityProvider(Identity(user_id="w1", company_id="c1", role=role))


@pytest.fixture()
def admin_client(monkeypatch):
    app, _, _ = _make_app(monkeypatch, _as(Role.ADMIN))
    return app.test_client()


@pytest.fixture()
def worker_client(monkeypatch):
    app, _, _ = _make_app(monkeypatch, _as(Role.WORKER))
    return app.test_client()


def test_anonymous_requests_get_401(monkeypatch):
    app, _, _ = _make_app(monkeypatch, NoIdentity())
    client = app.test_client()

    resp = client.post("/api/timesheets/bulk/totals", json={"entries": [], "number_of_days": 1})

    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Unauthorized"}


def test_admin_endpoints_reject_workers(worker_client):
    resp = worker_client.post("/api/payroll/report", json={"start": "2026-01-01", "end": "2026-01-31"})

    assert resp.status_code == 403


def test_bulk_totals(worker_client):
    entries = [
        {"worker_id": "w1", "clock_in": "08:00", "clock_out": "16:00", "break_duration": 60, "hourly_rate": 20},
        {"worker_id": "", "clock_in": "08:00", "clock_out": "16:00", "break_duration": 60, "hourly_rate": 20},
    ]

    resp = worker_client.post("/api/timesheets/bulk/totals", json={"entries": entries, "number_of_days": 5})

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"hours": "35.00", "cost": "700.00", "days": 5, "workers": 2}


def test_bulk_totals_rejects_bad_input(worker_client):
    assert worker_client.post("/api/timesheets/bulk/totals", json={"entries": "x"}).status_code == 400
    assert worker_client.post("/api/timesheets/bulk/totals", json={"entries": [], "number_of_days": -1}).status_code == 400


def test_defaults_then_settings_update(admin_client):
    assert admin_client.get("/api/timesheets/defaults").get_json()["data"] == {
        "clock_in": "07:00",
        "clock_out": "16:00",
        "break_duration": 60,
    }

    resp = admin_client.put(
        "/api/timesheet-settings",
        json={"require_approval": True, "work_day_start": "06:00", "break_time": 0},
    )
    assert resp.status_code == 200
    assert resp.get_json()["data"]["work_day_start"] == "06:00:00"

    assert admin_client.get("/api/timesheets/defaults").get_json()["data"] == {
        "clock_in": "06:00",
        "clock_out": "16:00",
        "break_duration": 0,
    }
    assert admin_client.get("/api/timesheet-settings").get_json()["data"]["rounding_method"] == "nearest_15"


def test_settings_update_by_worker_is_forbidden(worker_client):
    resp = worker_client.put("/api/timesheet-settings", json={"require_approval": True})

    assert resp.status_code == 403


def test_payroll_report(monkeypatch):
    rows = [TimesheetRow(1, "w1", "Ana", date(2026, 1, 5), "08:00:00", "17:00:00", 60, 20.0, approved=True)]
    app, _, _ = _make_app(monkeypatch, _as(Role.ADMIN), rows=rows)
    client = app.test_client()

    resp = client.post("/api/payroll/report", json={"start": "2026-01-01", "end": "2026-01-31"})

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["totals"]["total_pay"] == 160.0
    assert data["rows"][0]["work_date"] == "2026-01-05"
    assert client.post("/api/payroll/report", json={"start": "2026-01-31", "end": "2026-01-01"}).status_code == 400


@pytest.mark.parametrize("flag,expected", [("false", False), ("true", True), (0, False), (True, True)])
def test_payroll_report_parses_approved_only(monkeypatch, flag, expected):
    app, container, _ = _make_app(monkeypatch, _as(Role.ADMIN))

    resp = app.test_client().post(
        "/api/payroll/report", json={"start": "2026-01-01", "end": "2026-01-31", "approved_only": flag}
    )

    assert resp.status_code == 200
    assert container.timesheets_repo.approved_only is expected


def test_payroll_report_rejects_unclear_approved_only(monkeypatch):
    app, _, _ = _make_app(monkeypatch, _as(Role.ADMIN))

    resp = app.test_client().post(
        "/api/payroll/report", json={"start": "2026-01-01", "end": "2026-01-31", "approved_only": "maybe"}
    )

    assert resp.status_code == 400


def test_next_pay_dates_and_week(worker_client):
    resp = worker_client.get(
        "/api/payroll/next-pay-dates?pay_period_type=monthly&pay_day=31&pay_day_type=day_of_month&from=2026-01-20"
    )
    assert resp.get_json()["data"] == ["2026-01-31", "2026-02-28", "2026-03-31"]

    resp = worker_client.get("/api/payroll/week?date=2026-10-14")
    assert resp.get_json()["data"] == {"week_start": "2026-10-10", "week_end": "2026-10-16"}

    assert worker_client.get("/api/payroll/next-pay-dates?pay_period_type=yearly").status_code == 400


def test_qr_scan_flow(monkeypatch):
    app, container, clock = _make_app(monkeypatch, _as(Role.ADMIN))
    clock.save_code(QRCode("in-code", "c1", "p1", ClockEventType.CLOCK_IN, "Gate"))
    client = app.test_client()

    resp = client.post("/api/qr-clock/scan", json={"code_hash": "in-code"})
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Successfully clocked in"

    resp = client.post("/api/qr-clock/scan", json={"code_hash": "in-code"})
    assert resp.status_code == 400

    assert client.post("/api/qr-clock/scan", json={}).status_code == 400
    assert len(clock.events) == 1


def test_qr_scan_of_other_company_code_is_rejected(monkeypatch):
    app, _, clock = _make_app(monkeypatch, _as(Role.WORKER))
    clock.save_code(QRCode("foreign", "c2", "p9", ClockEventType.CLOCK_IN, "Other gate"))

    resp = app.test_client().post("/api/qr-clock/scan", json={"code_hash": "foreign"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Worker not found or unauthorized"
    assert clock.events == []


def test_qr_code_with_utc_expiry_can_be_scanned(monkeypatch):
    app, _, clock = _make_app(monkeypatch, _as(Role.ADMIN))
    client = app.test_client()

    resp = client.post(
        "/api/qr-clock/codes",
        json={"project_id": "p1", "qr_type": "clock_in", "name": "Gate", "expires_at": "2099-01-01T00:00:00Z"},
    )
    code_hash = resp.get_json()["data"]["code_hash"]

    assert clock.codes[code_hash].expires_at.tzinfo is None
    assert client.post("/api/qr-clock/scan", json={"code_hash": code_hash}).status_code == 200


def test_qr_code_create_and_image(admin_client):
    resp = admin_client.post(
        "/api/qr-clock/codes", json={"project_id": "p1", "qr_type": "clock_out", "name": "Exit"}
    )
    assert resp.status_code == 200
    code_hash = resp.get_json()["data"]["code_hash"]

    image = admin_client.get(f"/api/qr-clock/codes/{code_hash}/image")
    assert image.status_code == 200
    assert image.mimetype == "image/png"
    assert image.data.startswith(b"\x89PNG")

    assert admin_client.post("/api/qr-clock/codes", json={"project_id": "p1", "qr_type": "nap", "name": "x"}).status_code == 400


def test_auto_clockout_requires_date(admin_client):
    resp = admin_client.post("/api/qr-clock/auto-clockout", json={})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Date parameter is required"
