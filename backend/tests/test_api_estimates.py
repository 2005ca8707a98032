from decimal import Decimal

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.models import Modifier, Organization, Service
from app.models.base import BaseModel
from app.api.dependencies import get_db


def setup_app():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseModel.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, expire_on_commit=False)

    def override_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_db
    return Session


def seed(Session):
    db = Session()
    org = Organization(external_id="org_a", name="Shine Co", slug="shine-co")
    other = Organization(external_id="org_b", name="Other", slug="other")
    db.add_all([org, other])
    db.commit()
    wash = Service(org_id=org.id, name="Full Detail", unit_price=Decimal("49.99"))
    foreign = Service(org_id=other.id, name="Foreign", unit_price=Decimal("500.00"))
    wax = Modifier(org_id=org.id, name="Wax", price=Decimal("25.00"))
    db.add_all([wash, foreign, wax])
    db.commit()
    ids = org.id, wash.id, foreign.id, wax.id
    db.close()
    return ids


def test_calculate_estimate_endpoint():
    Session = setup_app()
    org_id, wash_id, foreign_id, wax_id = seed(Session)
    client = TestClient(app)

    res = client.post(
        "/api/v1/estimates/calculate",
        json={"org_id": org_id, "service_ids": [wash_id, foreign_id], "modifier_ids": [wax_id]},
    )

    assert res.status_code == 200
    body = res.json()
    assert [item["name"] for item in body["line_items"]] == ["Full Detail", "Wax"]
    assert [item["type"] for item in body["line_items"]] == ["service", "modifier"]
    assert Decimal(str(body["subtotal"])) == Decimal("74.99")
    assert Decimal(str(body["tax"])) == Decimal("6.19")
    assert Decimal(str(body["total"])) == Decimal("81.18")


def test_calculate_estimate_empty_selection():
    Session = setup_app()
    org_id, *_ = seed(Session)
    client = TestClient(app)

    res = client.post("/api/v1/estimates/calculate", json={"org_id": org_id})

    assert res.status_code == 200
    body = res.json()
    assert body["line_items"] == []
    assert Decimal(str(body["total"])) == Decimal("0")


def test_calculate_estimate_unknown_org():
    setup_app()
    client = TestClient(app)

    res = client.post("/api/v1/estimates/calculate", json={"org_id": 999, "service_ids": [1]})

    assert res.status_code == 404
    assert res.json()["detail"]["field_errors"] == {"org_id": "not_found"}
