from __future__ import annotations

from datetime import datetime

import pytest

from src.moto_tracker.moto_tracker.main import create_app
from src.moto_tracker.moto_tracker.web import controller, report_controller


@pytest.fixture
def app_factory(monkeypatch, memory_repo, fixed_now):
    monkeypatch.setattr(controller, "now_local", lambda: fixed_now)
    monkeypatch.setattr(report_controller, "now_local", lambda: fixed_now)

    def _make(**overrides):
        return create_app(settings_module="config.testing", repository=memory_repo, overrides=overrides)

    return _make


@pytest.fixture
def client(app_factory):
    return app_factory().test_client()


def test_index_redirects_to_calendar(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert "/calendar" in resp.headers["Location"]


def test_calendar_renders_month(client):
    resp = client.get("/calendar?month=2024-02")
    html = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "fevereiro 2024" in html
    assert "FERIADO" in html


def test_invalid_month_falls_back_to_current(client):
    resp = client.get("/calendar?month=banana")
    assert resp.status_code == 200
    assert "fevereiro 2024" in resp.get_data(as_text=True)


def test_toggle_then_confirm_persists(client, memory_repo):
    resp = client.post("/toggle", data={"date": "2024-02-14", "person": "jorge", "leg": "ida"})
    assert resp.status_code == 302
    assert "month=2024-02" in resp.headers["Location"]

    html = client.get("/calendar?month=2024-02").get_data(as_text=True)
    assert "Deseja marcar a IDA para Jorge em 14/02/2024 como realizada?" in html
    assert memory_repo.saves == 0

    client.post("/confirm")
    assert memory_repo.saves == 1
    assert memory_repo.data["2024-02-14"].jorge.outbound_done is True


def test_toggle_then_cancel_does_nothing(client, memory_repo):
    client.post("/toggle", data={"date": "2024-02-14", "person": "william", "leg": "regresso"})
    client.post("/cancel")

    assert memory_repo.saves == 0
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)
    assert "Confirmar Alteração" not in html


def test_weekend_toggle_is_flashed(client, memory_repo):
    client.post("/toggle", data={"date": "2024-02-17", "person": "jorge", "leg": "ida"})
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)

    assert "Não é possível registar viagens ao fim de semana" in html
    assert "Confirmar Alteração" not in html


def test_bad_form_values_are_flashed(client):
    client.post("/toggle", data={"date": "14/02/2024", "person": "jorge", "leg": "ida"})
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)
    assert "Data inválida" in html

    client.post("/toggle", data={"date": "2024-02-14", "person": "maria", "leg": "ida"})
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)
    assert "Pessoa inválido" in html


def test_confirm_without_pending_is_flashed(client, memory_repo):
    client.post("/confirm", data={"month": "2024-02"})
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)

    assert "Não há alteração pendente" in html
    assert memory_repo.saves == 0


def test_extended_profile_day_status(app_factory, memory_repo):
    client = app_factory(TRACKER_PROFILE="extended").test_client()

    client.post("/day-status", data={"date": "2024-02-14", "person": "william", "status": "full"})
    client.post("/confirm")

    assert memory_repo.data["2024-02-14"].william.outbound_done is True
    assert memory_repo.data["2024-02-14"].william.return_done is True

    client.post("/day-status", data={"date": "2024-02-13", "person": "william", "status": "full"})
    html = client.get("/calendar?month=2024-02").get_data(as_text=True)
    assert "registar viagens no feriado: Carnaval" in html
    assert "Confirmar Alteração" not in html


def test_api_stats(client):
    client.post("/toggle", data={"date": "2024-02-14", "person": "jorge", "leg": "ida"})
    client.post("/confirm")

    payload = client.get("/api/stats?month=2024-02").get_json()

    assert payload["success"] is True
    assert payload["profile"] == "basic"
    jorge = payload["stats"]["persons"]["jorge"]
    assert jorge["confirmed_total"] == 300
    assert jorge["completed_trips"] == 0
    assert payload["stats"]["working_days_total"] == 21


def test_api_records_filters_month(client):
    client.post("/toggle", data={"date": "2024-02-14", "person": "jorge", "leg": "ida"})
    client.post("/confirm")

    assert client.get("/api/records?month=2024-02").get_json()["records"] == {
        "2024-02-14": {
            "jorge": {"ida": True, "regresso": False},
            "william": {"ida": False, "regresso": False},
        }
    }
    assert client.get("/api/records?month=2024-03").get_json()["records"] == {}


def test_api_holidays(client):
    payload = client.get("/api/holidays?year=2026").get_json()
    assert len(payload["holidays"]) == 10

    payload = client.get("/api/holidays?year=2024").get_json()
    assert {"month": 2, "day": 13, "name": "Carnaval", "movable": True} in payload["holidays"]

    assert client.get("/api/holidays?year=abc").status_code == 400


def test_report_views(client):
    resp = client.get("/report?month=2024-02")
    assert resp.status_code == 200
    assert "Relatório de Viagens - fevereiro 2024" in resp.get_data(as_text=True)

    resp = client.get("/report.csv?month=2024-02")
    assert resp.mimetype == "text/csv"
    assert "viagens_202402.csv" in resp.headers["Content-Disposition"]

    resp = client.get("/report.xlsx?month=2024-02")
    assert resp.data[:2] == b"PK"


def test_json_backend_is_used_without_repository(tmp_path, monkeypatch, fixed_now):
    monkeypatch.setattr(controller, "now_local", lambda: fixed_now)
    data_file = tmp_path / "store.json"
    app = create_app(settings_module="config.testing", overrides={"DATA_FILE": str(data_file)})
    client = app.test_client()

    client.post("/toggle", data={"date": "2024-02-14", "person": "jorge", "leg": "regresso"})
    client.post("/confirm")

    assert '"regresso": true' in data_file.read_text(encoding="utf-8")
