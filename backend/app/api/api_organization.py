# app/api/api_organization.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import crud
from ..auth.context import AuthContext
from ..database import get_db
from ..schemas.organization import OrganizationCreate, OrganizationResponse
from ..utils import error_response
from .dependencies import require_active_org, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Organizations"])


@router.post("/", response_model=OrganizationResponse, status_code=status.HTTP_201_CREATED)
def create_organization(
    *,
    db: Session = Depends(get_db),
    org_in: OrganizationCreate,
    admin: AuthContext = Depends(require_admin),
):
    """Provision the local record for an identity-provider organization."""
    try:
        db_org = crud.organization.create(db, org_in)
    except ValueError as exc:
        raise error_response(str(exc), {"external_id": "duplicate"}, status.HTTP_409_CONFLICT)
    logger.info("Organization %s (%s) created by %s", db_org.id, db_org.slug, admin.principal_id)
    return db_org


@router.get("/me", response_model=OrganizationResponse)
def read_current_organization(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    return crud.organization.get(db, ctx.org_id)
