from fastapi.testclient import TestClient

from app.main import app


def test_healthz_reports_db():
    client = TestClient(app)

    res = client.get("/healthz")

    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["db"] == "ok"
    assert res.headers["cache-control"] == "no-store"


def test_security_headers_present():
    client = TestClient(app)

    res = client.get("/")

    assert res.headers["x-content-type-options"] == "nosniff"
    assert res.headers["x-frame-options"] == "DENY"
    assert "default-src 'none'" in res.headers["content-security-policy"]
