# app/api/api_public.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import crud, models
from ..auth.context import AuthContext
from ..database import get_db
from ..schemas.assessment import AssessmentCreate, AssessmentResponse
from ..schemas.organization import BookingPage, OrganizationWithServices
from ..services.assessments import create_assessment
from ..utils import DomainError, error_response
from .dependencies import get_auth_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Public"])


def _org_by_slug(db: Session, slug: str) -> models.Organization:
    org = crud.organization.get_by_slug(db, slug)
    if org is None:
        raise error_response(
            "Business not found",
            {"slug": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return org


@router.get("/organizations/{org_id}", response_model=OrganizationWithServices)
def read_public_organization(org_id: int, db: Session = Depends(get_db)):
    org = crud.organization.get(db, org_id)
    if org is None:
        raise error_response(
            "Organization not found",
            {"org_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return {"org": org, "services": crud.service.get_services_by_org(db, org.id)}


@router.get("/book/{slug}", response_model=BookingPage)
def read_booking_page(slug: str, db: Session = Depends(get_db)):
    """Payload for the public booking page: only active services are offered."""
    org = _org_by_slug(db, slug)
    services = [s for s in crud.service.get_services_by_org(db, org.id) if s.is_active]
    return {
        "org_id": org.id,
        "org_name": org.name,
        "org_slug": org.slug,
        "org_image_url": org.logo_url,
        "services": services,
        "modifiers": crud.modifier.get_modifiers_by_org(db, org.id),
    }


@router.post(
    "/book/{slug}/assessments",
    response_model=AssessmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_booking(
    *,
    slug: str,
    db: Session = Depends(get_db),
    assessment_in: AssessmentCreate,
    ctx: AuthContext = Depends(get_auth_context),
):
    """Book through a business's public page.

    The caller needs to be signed in but not a member of the business; the
    client details must match one of the business's existing clients.
    Picking a client by id is reserved for members, who can see the list.
    """
    if assessment_in.client_id is not None:
        logger.warning("Public booking with client_id refused for %s", ctx.principal_id)
        raise error_response(
            "Client selection is not available on the booking page",
            {"client_id": "not_allowed"},
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    org = _org_by_slug(db, slug)
    try:
        db_assessment = create_assessment(db, org.id, ctx.principal_id, assessment_in)
    except DomainError as exc:
        raise exc.to_http()
    logger.info("Public booking %s created for %s by %s", db_assessment.id, org.slug, ctx.principal_id)
    return db_assessment
