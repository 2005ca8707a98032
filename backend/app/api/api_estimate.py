# app/api/api_estimate.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import crud
from ..database import get_db
from ..schemas.estimate import EstimateRead, EstimateRequest
from ..services.estimates import calculate_estimate
from ..utils import error_response

router = APIRouter(tags=["Estimates"])


@router.post("/calculate", response_model=EstimateRead)
def calculate(payload: EstimateRequest, db: Session = Depends(get_db)):
    """Price a selection of services and modifiers (public).

    Backs the live preview on the booking page and the assessment form.
    References that do not resolve to the organization's own priced items
    are left out rather than rejected.
    """
    if crud.organization.get(db, payload.org_id) is None:
        raise error_response(
            "Organization not found",
            {"org_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    estimate = calculate_estimate(
        db, payload.org_id, payload.service_ids, payload.modifier_ids
    )
    return EstimateRead.model_validate(estimate)
