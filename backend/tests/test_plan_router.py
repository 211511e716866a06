import pytest
from fastapi.testclient import TestClient

from voyage_curator.main import app
from voyage_curator.routers import plan as plan_router


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "voyage-curator"}


def test_create_plan(client, payload):
    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    plan = body["plan"]
    assert plan["currency"] == "USD"
    assert 2 <= len(plan["destinations"]) <= 3
    assert "Kyoto" in [d["destination"] for d in plan["destinations"]]
    assert plan["request"]["preferences"]["cuisineFocus"] == []
    assert plan["request"]["personal"]["notes"] == ""


def test_optional_fields_default_to_empty(client, payload):
    del payload["personal"]["phone"]
    del payload["personal"]["notes"]
    payload["preferences"]["specialOccasion"] = None

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 200
    request = resp.json()["plan"]["request"]
    assert request["personal"]["phone"] == ""
    assert request["preferences"]["specialOccasion"] == ""


def test_validation_errors_are_flattened(client, payload):
    payload["personal"]["email"] = "not-an-email"
    payload["preferences"]["climate"] = []
    payload["preferences"]["budget"] = "backpacker"

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 422
    body = resp.json()
    assert body["ok"] is False
    field_errors = body["errors"]["fieldErrors"]
    assert "personal.email" in field_errors
    assert "preferences.climate" in field_errors
    assert "preferences.budget" in field_errors
    assert body["errors"]["formErrors"] == []


def test_short_phone_rejected(client, payload):
    payload["personal"]["phone"] = "123"
    resp = client.post("/api/plan", json=payload)
    assert resp.status_code == 422
    assert "personal.phone" in resp.json()["errors"]["fieldErrors"]


@pytest.mark.parametrize("phone", ["", None])
def test_sent_blank_phone_rejected(client, payload, phone):
    payload["personal"]["phone"] = phone
    resp = client.post("/api/plan", json=payload)
    assert resp.status_code == 422
    assert "personal.phone" in resp.json()["errors"]["fieldErrors"]


def test_empty_interests_rejected(client, payload):
    payload["preferences"]["interests"] = []
    resp = client.post("/api/plan", json=payload)
    assert resp.status_code == 422


def test_unexpected_failure_returns_generic_message(client, payload, monkeypatch):
    def _boom(request):
        raise KeyError("missing catalog field")

    monkeypatch.setattr(plan_router, "generate_vacation_plan", _boom)

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 500
    body = resp.json()
    assert body == {"ok": False, "message": plan_router.GENERATION_FAILED_MESSAGE}
    assert "catalog" not in body["message"]


def test_form_options(client):
    resp = client.get("/api/plan/options")

    assert resp.status_code == 200
    data = resp.json()
    assert [o["value"] for o in data["budgets"]] == ["budget", "midrange", "luxury"]
    assert len(data["climates"]) == 6
    assert "Food & Wine" in data["interests"]
    assert data["climateLabels"]["arid"] == "Desert / Arid"
    assert data["defaults"]["preferences"]["pace"] == "balanced"
    assert [s["id"] for s in data["steps"]] == ["traveler", "preferences", "review"]
