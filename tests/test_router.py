from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fo_app.core.config import get_settings
from fo_app.core.errors import BadRequest, FoAppError, InvalidInput, to_http
from fo_app.modules.organize.router import router


@pytest.fixture
def client(settings) -> TestClient:
    app = FastAPI()
    app.include_router(router, prefix="/api")
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


def test_plan_endpoint_reports_without_copying(client, inbox):
    resp = client.post("/api/organize/plan", json={"path": str(inbox), "dry_run": False})

    assert resp.status_code == 200
    body = resp.json()
    assert body["dry_run"] is True
    assert body["method"] == "extension"
    assert [item["category"] for item in body["placed"]] == ["Documents", "Images"]
    assert not (inbox / "Documents").exists()


def test_apply_endpoint_copies(client, inbox):
    resp = client.post("/api/organize/apply", json={"path": str(inbox)})

    assert resp.status_code == 200
    assert resp.json()["dry_run"] is False
    assert (inbox / "Documents" / "a.pdf").exists()


def test_apply_endpoint_accepts_configuration(client, inbox):
    payload = {
        "path": str(inbox),
        "configuration": {
            "method": {"kind": "extension", "categories": {"Other": ["xyz"]}},
            "run_in_parallel": False,
        },
    }

    resp = client.post("/api/organize/apply", json=payload)

    assert resp.status_code == 200
    assert (inbox / "Other" / "c.xyz").exists()
    assert not (inbox / "Documents").exists()


def test_empty_path_is_a_bad_request(client):
    resp = client.post("/api/organize/apply", json={"path": ""})

    assert resp.status_code == 400
    assert "empty" in resp.json()["detail"]


def test_unknown_method_is_rejected(client, inbox):
    resp = client.post(
        "/api/organize/plan",
        json={"path": str(inbox), "configuration": {"method": {"kind": "colour"}}},
    )

    assert resp.status_code == 422


@pytest.mark.parametrize(
    "exc, status",
    [
        (InvalidInput("x"), 400),
        (BadRequest("x"), 400),
        (FoAppError("x"), 422),
        (RuntimeError("x"), 500),
    ],
)
def test_to_http(exc, status):
    assert to_http(exc).status_code == status


def test_app_factory_serves_health():
    from fo_app.api.main import create_app

    resp = TestClient(create_app()).get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
