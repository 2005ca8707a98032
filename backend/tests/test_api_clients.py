from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.auth.context import AuthContext
from app.models import Assessment, Organization
from app.models.base import BaseModel
from app.api.dependencies import get_auth_context, get_db


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
    db = Session()
    org = Organization(external_id="org_a", name="Shine Co", slug="shine-co")
    other = Organization(external_id="org_b", name="Other", slug="other")
    db.add_all([org, other])
    db.commit()
    ids = org.id, other.id
    db.close()
    return Session, ids


def login_as(org_id):
    app.dependency_overrides[get_auth_context] = lambda: AuthContext(principal_id="user_1", org_id=org_id)


def test_client_crud_flow():
    Session, (org_id, _) = setup_app()
    login_as(org_id)
    client = TestClient(app)

    res = client.post(
        "/api/v1/clients/",
        json={"name": "Jane Doe", "email": "jane@example.com", "phone": "555-0101"},
    )
    assert res.status_code == 201
    created = res.json()
    assert created["org_id"] == org_id

    res = client.put(f"/api/v1/clients/{created['id']}", json={"phone": "555-0202"})
    assert res.status_code == 200
    assert res.json()["phone"] == "555-0202"
    assert res.json()["email"] == "jane@example.com"

    assert client.get(f"/api/v1/clients/{created['id']}").json()["name"] == "Jane Doe"
    assert [c["id"] for c in client.get("/api/v1/clients/").json()] == [created["id"]]

    assert client.delete(f"/api/v1/clients/{created['id']}").status_code == 204
    assert client.get(f"/api/v1/clients/{created['id']}").status_code == 404


def test_client_name_too_short():
    Session, (org_id, _) = setup_app()
    login_as(org_id)
    client = TestClient(app)

    assert client.post("/api/v1/clients/", json={"name": " J "}).status_code == 422


def test_search_clients():
    Session, (org_id, _) = setup_app()
    login_as(org_id)
    client = TestClient(app)
    for name in ["Jane Doe", "Janet Smith", "Bob Stone"]:
        client.post("/api/v1/clients/", json={"name": name})

    res = client.get("/api/v1/clients/search", params={"q": "JAN"})

    assert res.status_code == 200
    assert sorted(c["name"] for c in res.json()) == ["Jane Doe", "Janet Smith"]
    assert client.get("/api/v1/clients/search").json() == []


def test_foreign_client_looks_missing():
    Session, (org_id, other_id) = setup_app()
    login_as(other_id)
    client = TestClient(app)
    foreign_id = client.post("/api/v1/clients/", json={"name": "Jane Doe"}).json()["id"]

    login_as(org_id)
    assert client.get(f"/api/v1/clients/{foreign_id}").status_code == 404
    assert client.put(f"/api/v1/clients/{foreign_id}", json={"name": "Hacked"}).status_code == 404
    assert client.delete(f"/api/v1/clients/{foreign_id}").status_code == 404


def test_delete_client_with_assessments_conflicts():
    Session, (org_id, _) = setup_app()
    login_as(org_id)
    client = TestClient(app)
    client_id = client.post("/api/v1/clients/", json={"name": "Jane Doe"}).json()["id"]
    db = Session()
    db.add(
        Assessment(
            org_id=org_id,
            client_id=client_id,
            created_by="user_1",
            car_make="Honda",
            car_model="Civic",
            car_year=2018,
        )
    )
    db.commit()
    db.close()

    res = client.delete(f"/api/v1/clients/{client_id}")

    assert res.status_code == 409
    assert res.json()["detail"]["field_errors"] == {"client_id": "in_use"}
