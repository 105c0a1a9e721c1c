import os
import sys

from fastapi import FastAPI
from fastapi.testclient import TestClient

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.api.routes.strategy import router as strategy_router  # noqa: E402
from northnode.core.errors import register_exception_handlers  # noqa: E402


def _make_app() -> TestClient:
    app = FastAPI()
    app.include_router(strategy_router)
    register_exception_handlers(app)
    return TestClient(app)


def test_intake_returns_recommendation_with_analysis():
    client = _make_app()
    r = client.post(
        "/api/strategy/intake",
        json={
            "intake_text": "We are launching a new program this spring.",
            "audience": "  adults and families  ",
            "goals": "Enrollment inquiries",
        },
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["primary_archetype"] == "program-launch"
    assert data["summary"] == "Audience: adults and families • Goals: Enrollment inquiries"
    assert data["analysis"]["cadence_rule"]["pattern"] == "hybrid"
    assert data["analysis"]["planner_prompt"].startswith("You are a marketing strategy lead")
    assert data["channels"] == ["Email sequence", "Social organic"]


def test_empty_intake_is_accepted():
    client = _make_app()
    r = client.post("/api/strategy/intake", json={})
    assert r.status_code == 200
    data = r.json()
    assert data["primary_archetype"] == "trust-building"
    assert data["risks"] == ["Audience unclear - review MIQ-01"]


def test_intake_rejects_wrong_types():
    client = _make_app()
    r = client.post("/api/strategy/intake", json={"intake_text": ["not", "a", "string"]})
    assert r.status_code == 422
    assert r.json()["error"]["code"] == "validation_error"
