"""Map typed-in client details to an existing client of the organization.

Order of attempts, all within one organization:

1. explicit ``client_id`` picked from the client search (trusted, only
   checked for existence and ownership);
2. email, compared trimmed and lower-cased;
3. name plus phone, name trimmed/lower-cased and phone reduced to digits;
4. name alone.

The first hit wins; ties inside a strategy go to the oldest record. When
nothing matches the resolver raises ``ClientNotFound``. It never creates
clients.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from .. import models
from ..crud import crud_client
from ..schemas.client import ClientContact
from ..utils.errors import ClientNotFound, InvalidInput
from ..utils.normalize import normalize_name

logger = logging.getLogger(__name__)


class MatchStrategy(str, enum.Enum):
    EXPLICIT = "explicit"
    EMAIL = "email"
    NAME_AND_PHONE = "name_and_phone"
    NAME = "name"


@dataclass(frozen=True)
class ClientMatch:
    client: models.Client
    strategy: MatchStrategy


def resolve_client(
    db: Session,
    org_id: int,
    contact: Optional[ClientContact] = None,
    client_id: Optional[int] = None,
) -> ClientMatch:
    if client_id is not None:
        client = crud_client.get_client(db, client_id)
        if client is None or client.org_id != org_id:
            logger.warning(
                "Selected client %s not found in org %s", client_id, org_id
            )
            raise ClientNotFound("Client not found for this organization")
        return ClientMatch(client, MatchStrategy.EXPLICIT)

    if contact is None:
        raise InvalidInput("Client details are required", field="client")
    if len(normalize_name(contact.name)) < 2:
        raise InvalidInput("Client name must be at least 2 characters", field="client.name")

    if contact.email:
        client = crud_client.find_by_email(db, org_id, contact.email)
        if client is not None:
            return _matched(client, MatchStrategy.EMAIL, org_id)

    if contact.phone:
        client = crud_client.find_by_name_and_phone(db, org_id, contact.name, contact.phone)
        if client is not None:
            return _matched(client, MatchStrategy.NAME_AND_PHONE, org_id)

    client = crud_client.find_by_name(db, org_id, contact.name)
    if client is not None:
        return _matched(client, MatchStrategy.NAME, org_id)

    logger.warning(
        "No client matched in org %s (email=%s phone=%s)",
        org_id,
        bool(contact.email),
        bool(contact.phone),
    )
    raise ClientNotFound("Client not found for this organization")


def _matched(client: models.Client, strategy: MatchStrategy, org_id: int) -> ClientMatch:
    logger.info("Resolved client %s in org %s by %s", client.id, org_id, strategy.value)
    return ClientMatch(client, strategy)
