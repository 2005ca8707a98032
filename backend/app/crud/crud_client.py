"""Client persistence and the indexed lookups used for client resolution.

Every lookup is scoped by organization and returns the oldest matching row
(lowest id) so repeated resolutions of the same details are stable.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas
from ..utils.normalize import normalize_email, normalize_name, phone_digits

SEARCH_LIMIT = 10


def _apply_contact(
    client: models.Client,
    name: Optional[str] = None,
    email: Optional[str] = None,
    phone: Optional[str] = None,
) -> None:
    if name is not None:
        client.name = name
        client.name_normalized = normalize_name(name)
    if email is not None:
        client.email = email or None
        client.email_normalized = normalize_email(email)
    if phone is not None:
        client.phone = phone or None
        client.phone_digits = phone_digits(phone)


def get_client(db: Session, client_id: int) -> Optional[models.Client]:
    return db.query(models.Client).filter(models.Client.id == client_id).first()


def find_by_email(db: Session, org_id: int, email: str) -> Optional[models.Client]:
    key = normalize_email(email)
    if not key:
        return None
    return (
        db.query(models.Client)
        .filter(models.Client.org_id == org_id, models.Client.email_normalized == key)
        .order_by(models.Client.id)
        .first()
    )


def find_by_name_and_phone(
    db: Session, org_id: int, name: str, phone: str
) -> Optional[models.Client]:
    name_key = normalize_name(name)
    digits = phone_digits(phone)
    if not name_key or not digits:
        return None
    return (
        db.query(models.Client)
        .filter(
            models.Client.org_id == org_id,
            models.Client.name_normalized == name_key,
            models.Client.phone_digits == digits,
        )
        .order_by(models.Client.id)
        .first()
    )


def find_by_name(db: Session, org_id: int, name: str) -> Optional[models.Client]:
    name_key = normalize_name(name)
    if not name_key:
        return None
    return (
        db.query(models.Client)
        .filter(models.Client.org_id == org_id, models.Client.name_normalized == name_key)
        .order_by(models.Client.id)
        .first()
    )


def list_by_org(db: Session, org_id: int) -> List[models.Client]:
    """Clients of one organization, newest first."""
    return (
        db.query(models.Client)
        .filter(models.Client.org_id == org_id)
        .order_by(models.Client.created_at.desc(), models.Client.id.desc())
        .all()
    )


def search_by_name(db: Session, org_id: int, query: str) -> List[models.Client]:
    """Case-insensitive substring search used by the client picker."""
    key = normalize_name(query)
    if not key:
        return []
    escaped = key.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return (
        db.query(models.Client)
        .filter(
            models.Client.org_id == org_id,
            models.Client.name_normalized.like(f"%{escaped}%", escape="\\"),
        )
        .order_by(models.Client.name_normalized, models.Client.id)
        .limit(SEARCH_LIMIT)
        .all()
    )


def create_client(
    db: Session, org_id: int, client_in: schemas.ClientCreate, created_by: Optional[str] = None
) -> models.Client:
    db_client = models.Client(org_id=org_id, created_by=created_by)
    _apply_contact(
        db_client,
        name=client_in.name,
        email=client_in.email or "",
        phone=client_in.phone or "",
    )
    db.add(db_client)
    db.commit()
    db.refresh(db_client)
    return db_client


def update_client(
    db: Session, db_client: models.Client, client_in: schemas.ClientUpdate
) -> models.Client:
    data = client_in.model_dump(exclude_unset=True)
    _apply_contact(
        db_client,
        name=data.get("name"),
        email=(data["email"] or "").strip() if "email" in data else None,
        phone=(data["phone"] or "").strip() if "phone" in data else None,
    )
    db.commit()
    db.refresh(db_client)
    return db_client


def delete_client(db: Session, db_client: models.Client) -> None:
    """Delete a client that has no assessments.

    Raises ``ValueError`` otherwise; assessments keep pointing at their
    client.
    """
    has_assessments = (
        db.query(models.Assessment.id)
        .filter(models.Assessment.client_id == db_client.id)
        .first()
        is not None
    )
    if has_assessments:
        raise ValueError("Client has assessments")
    db.delete(db_client)
    db.commit()
