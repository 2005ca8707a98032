# app/api/api_service.py

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from .. import crud, models
from ..auth.context import AuthContext
from ..database import get_db
from ..schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate
from ..utils import error_response
from .dependencies import require_active_org

router = APIRouter(
    # Note: NO prefix here, because main.py already mounts this under /services
    tags=["Services"],
)


def _get_org_service(db: Session, service_id: int, org_id: int) -> models.Service:
    svc = crud.service.get_service(db, service_id)
    if svc is None or svc.org_id != org_id:
        raise error_response(
            "Service not found",
            {"service_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return svc


@router.get("/", response_model=List[ServiceResponse])
def list_services(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    """List the services of the caller's organization, including inactive ones."""
    return crud.service.get_services_by_org(db, ctx.org_id)


@router.post("/", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
def create_service(
    *,
    db: Session = Depends(get_db),
    service_in: ServiceCreate,
    ctx: AuthContext = Depends(require_active_org),
):
    return crud.service.create_org_service(db, service_in, ctx.org_id)


@router.get("/{service_id}", response_model=ServiceResponse)
def read_service(
    service_id: int,
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    return _get_org_service(db, service_id, ctx.org_id)


@router.put("/{service_id}", response_model=ServiceResponse)
def update_service(
    *,
    db: Session = Depends(get_db),
    service_id: int,
    service_in: ServiceUpdate,
    ctx: AuthContext = Depends(require_active_org),
):
    svc = _get_org_service(db, service_id, ctx.org_id)
    return crud.service.update_service(db, svc, service_in)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    *,
    db: Session = Depends(get_db),
    service_id: int,
    ctx: AuthContext = Depends(require_active_org),
):
    """Delete a service. Assessments keep their snapshot; their primary
    service reference is cleared."""
    svc = _get_org_service(db, service_id, ctx.org_id)
    crud.service.delete_service(db, svc.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
