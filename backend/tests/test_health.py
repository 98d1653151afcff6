# backend/tests/test_health.py
from conftest import FakeDB, build_client


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "message": "pong"}


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["checks"] == {"database": "ok"}
    assert body["version"] == "0.1.0"


def test_health_degraded_when_mongo_down(collection):
    client = build_client(collection, FakeDB(collection, ping_ok=False))
    r = client.get("/health")
    assert r.status_code == 503
    assert r.json()["status"] == "degraded"
    assert r.json()["checks"]["database"].startswith("error:")
