# app/api/api_client.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from .. import models
from ..auth.context import AuthContext
from ..crud import crud_client
from ..database import get_db
from ..schemas.client import ClientCreate, ClientResponse, ClientUpdate
from ..utils import error_response
from .dependencies import get_org_client, require_active_org

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Clients"])


@router.get("/", response_model=List[ClientResponse])
def list_clients(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    """Clients of the caller's organization, newest first."""
    return crud_client.list_by_org(db, ctx.org_id)


# Keep static routes ahead of /{client_id}.
@router.get("/search", response_model=List[ClientResponse])
def search_clients(
    q: str = Query("", description="Part of the client's name"),
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    return crud_client.search_by_name(db, ctx.org_id, q)


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    *,
    db: Session = Depends(get_db),
    client_in: ClientCreate,
    ctx: AuthContext = Depends(require_active_org),
):
    db_client = crud_client.create_client(db, ctx.org_id, client_in, created_by=ctx.principal_id)
    logger.info("Client %s created in org %s", db_client.id, ctx.org_id)
    return db_client


@router.get("/{client_id}", response_model=ClientResponse)
def read_client(db_client: models.Client = Depends(get_org_client)):
    return db_client


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    *,
    db: Session = Depends(get_db),
    client_in: ClientUpdate,
    db_client: models.Client = Depends(get_org_client),
):
    return crud_client.update_client(db, db_client, client_in)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    *,
    db: Session = Depends(get_db),
    db_client: models.Client = Depends(get_org_client),
):
    try:
        crud_client.delete_client(db, db_client)
    except ValueError as exc:
        raise error_response(str(exc), {"client_id": "in_use"}, status.HTTP_409_CONFLICT)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
