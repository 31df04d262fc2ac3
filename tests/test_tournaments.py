from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tournament_api.api.deps import get_db, get_tournament_service
from tournament_api.core.settings import settings
from tournament_api.db.base import Base
import tournament_api.models.tournament  # noqa: F401
from tournament_api.main import app


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr(settings, "FIND_ALL_LATENCY_SECONDS", 0.0)
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _create(client, **overrides):
    payload = {
        "name": "Spring Clash",
        "game": "Chess",
        "status": None,
        "startDate": "2025-01-01T00:00:00",
    }
    payload.update(overrides)
    resp = client.post("/api/tournaments", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_defaults_status_and_participants(client):
    t = _create(client)
    assert isinstance(t["id"], int)
    assert t["status"] == "UPCOMING"
    assert t["currentParticipants"] == 0
    assert t["startDate"] == "2025-01-01T00:00:00"
    assert t["endDate"] is None
    assert t["prizePool"] is None
    assert t["createdAt"] == t["updatedAt"]
    assert set(t) == {
        "id",
        "name",
        "game",
        "status",
        "startDate",
        "endDate",
        "maxParticipants",
        "currentParticipants",
        "prizePool",
        "createdAt",
        "updatedAt",
    }


def test_create_then_get_returns_same_record(client):
    t = _create(client, maxParticipants=64, prizePool=1500.5, status="REGISTRATION_OPEN")
    assert t["prizePool"] == 1500.5

    g = client.get(f"/api/tournaments/{t['id']}")
    assert g.status_code == 200
    assert g.json() == t


def test_get_unknown_id_is_404_with_empty_body(client):
    r = client.get("/api/tournaments/999999")
    assert r.status_code == 404
    assert r.content == b""


def test_create_rejects_blank_fields(client):
    r = client.post(
        "/api/tournaments",
        json={"name": "   ", "game": "", "startDate": None},
    )
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["errors"]}
    assert fields == {"name", "game", "startDate"}


def test_create_rejects_malformed_payload(client):
    r = client.post(
        "/api/tournaments",
        json={"name": "X", "game": "Go", "status": "NOT_A_STATUS", "startDate": "2025-01-01T00:00:00"},
    )
    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "status"

    r2 = client.post(
        "/api/tournaments",
        json={"name": "X", "game": "Go", "startDate": "yesterday"},
    )
    assert r2.status_code == 400


def test_update_overwrites_fields_and_advances_updated_at(client):
    t = _create(client, maxParticipants=16, currentParticipants=5, prizePool=100)

    body = {
        "name": t["name"],
        "game": t["game"],
        "status": "CANCELLED",
        "startDate": t["startDate"],
        "endDate": t["endDate"],
        "maxParticipants": t["maxParticipants"],
        "prizePool": t["prizePool"],
    }
    u = client.put(f"/api/tournaments/{t['id']}", json=body)
    assert u.status_code == 200

    g = client.get(f"/api/tournaments/{t['id']}").json()
    assert g["status"] == "CANCELLED"
    for field in ("id", "name", "game", "startDate", "endDate", "maxParticipants", "prizePool", "createdAt"):
        assert g[field] == t[field]
    assert g["currentParticipants"] == 5
    assert datetime.fromisoformat(g["updatedAt"]) > datetime.fromisoformat(t["updatedAt"])


def test_update_is_full_overwrite(client):
    t = _create(client, maxParticipants=16, prizePool=100, endDate="2025-01-02T00:00:00")

    u = client.put(
        f"/api/tournaments/{t['id']}",
        json={"name": "Renamed", "game": "Go", "status": "IN_PROGRESS", "startDate": "2025-02-01T10:00:00"},
    )
    assert u.status_code == 200
    data = u.json()
    assert data["name"] == "Renamed"
    assert data["game"] == "Go"
    assert data["startDate"] == "2025-02-01T10:00:00"
    assert data["endDate"] is None
    assert data["maxParticipants"] is None
    assert data["prizePool"] is None


def test_update_requires_status(client):
    t = _create(client)
    r = client.put(
        f"/api/tournaments/{t['id']}",
        json={"name": "A", "game": "Chess", "startDate": "2025-01-01T00:00:00"},
    )
    assert r.status_code == 400
    assert r.json() == {"errors": [{"field": "status", "message": "Status is required"}]}


def test_update_unknown_id_is_404(client):
    r = client.put(
        "/api/tournaments/424242",
        json={"name": "A", "game": "Chess", "status": "UPCOMING", "startDate": "2025-01-01T00:00:00"},
    )
    assert r.status_code == 404
    assert r.content == b""


def test_delete_then_get_is_404(client):
    t = _create(client)

    d = client.delete(f"/api/tournaments/{t['id']}")
    assert d.status_code == 204
    assert d.content == b""

    assert client.get(f"/api/tournaments/{t['id']}").status_code == 404
    assert client.delete(f"/api/tournaments/{t['id']}").status_code == 404


def test_list_and_filters(client):
    a = _create(client, game="Chess")
    b = _create(client, game="Chess", status="IN_PROGRESS")
    c = _create(client, game="Go")

    all_ids = [x["id"] for x in client.get("/api/tournaments").json()]
    assert sorted(all_ids) == sorted([a["id"], b["id"], c["id"]])

    chess = client.get("/api/tournaments/game/Chess")
    assert chess.status_code == 200
    assert sorted(x["id"] for x in chess.json()) == sorted([a["id"], b["id"]])

    assert client.get("/api/tournaments/game/chess").json() == []

    upcoming = client.get("/api/tournaments/status/UPCOMING").json()
    assert sorted(x["id"] for x in upcoming) == sorted([a["id"], c["id"]])

    completed = client.get("/api/tournaments/status/COMPLETED")
    assert completed.status_code == 200
    assert completed.json() == []


def test_unknown_status_in_path_is_400(client):
    r = client.get("/api/tournaments/status/FINISHED")
    assert r.status_code == 400


def test_storage_failure_is_500():
    class BrokenService:
        def find_all(self):
            raise RuntimeError("database is down")

    app.dependency_overrides[get_tournament_service] = lambda: BrokenService()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/api/tournaments")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    assert r.json() == {"detail": "Internal Server Error"}


def test_prize_pool_kept_exactly_as_given(client):
    t = _create(client, prizePool=1500.555)
    assert t["prizePool"] == 1500.555
    assert client.get(f"/api/tournaments/{t['id']}").json()["prizePool"] == 1500.555

    u = client.put(
        f"/api/tournaments/{t['id']}",
        json={
            "name": t["name"],
            "game": t["game"],
            "status": "UPCOMING",
            "startDate": t["startDate"],
            "prizePool": 12345678901.125,
        },
    )
    assert u.status_code == 200
    assert u.json()["prizePool"] == 12345678901.125
    assert client.get(f"/api/tournaments/{t['id']}").json()["prizePool"] == 12345678901.125
