import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.crud import crud_client
from app.models import Organization
from app.models.base import BaseModel
from app.schemas.client import ClientContact, ClientCreate
from app.services.client_resolver import MatchStrategy, resolve_client
from app.utils.errors import ClientNotFound, InvalidInput


def setup_db():
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})
    BaseModel.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    return Session()


def create_org(db, external_id):
    org = Organization(external_id=external_id, name=external_id, slug=external_id)
    db.add(org)
    db.commit()
    db.refresh(org)
    return org


def add_client(db, org, name, email=None, phone=None):
    return crud_client.create_client(db, org.id, ClientCreate(name=name, email=email, phone=phone))


def test_email_match_ignores_case_and_whitespace():
    db = setup_db()
    org = create_org(db, "org-a")
    jane = add_client(db, org, "Jane Doe", email="jane@example.com")

    match = resolve_client(db, org.id, ClientContact(name="Someone Else", email="  JANE@Example.COM "))

    assert match.client.id == jane.id
    assert match.strategy is MatchStrategy.EMAIL


def test_email_beats_name_and_phone():
    db = setup_db()
    org = create_org(db, "org-a")
    by_phone = add_client(db, org, "Jane Doe", phone="555-1234")
    by_email = add_client(db, org, "Jane Doe", email="jd@example.com")

    match = resolve_client(
        db, org.id, ClientContact(name="jane doe", email="jd@example.com", phone="(555) 1234")
    )

    assert match.client.id == by_email.id
    assert match.client.id != by_phone.id


def test_name_and_phone_used_when_email_misses():
    db = setup_db()
    org = create_org(db, "org-a")
    add_client(db, org, "Jane Doe")
    by_phone = add_client(db, org, "Jane Doe", phone="555-1234")

    match = resolve_client(
        db, org.id, ClientContact(name=" JANE DOE", email="unknown@example.com", phone="555 1234")
    )

    assert match.client.id == by_phone.id
    assert match.strategy is MatchStrategy.NAME_AND_PHONE


def test_name_alone_picks_oldest():
    db = setup_db()
    org = create_org(db, "org-a")
    first = add_client(db, org, "Jane Doe", phone="111")
    add_client(db, org, "jane doe", phone="222")

    match = resolve_client(db, org.id, ClientContact(name="Jane Doe", phone="999"))

    assert match.client.id == first.id
    assert match.strategy is MatchStrategy.NAME


def test_no_match_raises_and_logs(caplog):
    db = setup_db()
    org = create_org(db, "org-a")
    add_client(db, org, "Jane Doe", email="jane@example.com")

    caplog.set_level(logging.WARNING, logger="app.services.client_resolver")
    with pytest.raises(ClientNotFound) as exc:
        resolve_client(db, org.id, ClientContact(name="John Roe", email="john@example.com"))

    assert exc.value.status_code == 404
    assert any("No client matched" in r.getMessage() for r in caplog.records)


def test_other_organizations_clients_never_match():
    db = setup_db()
    mine = create_org(db, "org-a")
    theirs = create_org(db, "org-b")
    add_client(db, theirs, "Jane Doe", email="jane@example.com", phone="555")

    with pytest.raises(ClientNotFound):
        resolve_client(db, mine.id, ClientContact(name="Jane Doe", email="jane@example.com", phone="555"))


def test_explicit_client_id_skips_matching():
    db = setup_db()
    org = create_org(db, "org-a")
    picked = add_client(db, org, "Picked Client")
    add_client(db, org, "Jane Doe", email="jane@example.com")

    match = resolve_client(
        db, org.id, ClientContact(name="Jane Doe", email="jane@example.com"), client_id=picked.id
    )

    assert match.client.id == picked.id
    assert match.strategy is MatchStrategy.EXPLICIT


def test_explicit_client_id_from_other_org_is_not_found():
    db = setup_db()
    mine = create_org(db, "org-a")
    theirs = create_org(db, "org-b")
    foreign = add_client(db, theirs, "Jane Doe")

    with pytest.raises(ClientNotFound):
        resolve_client(db, mine.id, client_id=foreign.id)


def test_short_name_is_rejected_before_lookup():
    db = setup_db()
    org = create_org(db, "org-a")

    with pytest.raises(InvalidInput):
        resolve_client(db, org.id, ClientContact.model_construct(name=" J", email=None, phone=None))
    with pytest.raises(InvalidInput):
        resolve_client(db, org.id)


def test_resolver_never_creates_clients():
    db = setup_db()
    org = create_org(db, "org-a")

    with pytest.raises(ClientNotFound):
        resolve_client(db, org.id, ClientContact(name="New Person", email="new@example.com"))

    assert crud_client.list_by_org(db, org.id) == []
