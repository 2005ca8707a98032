# app/api/api_assessment.py

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from .. import models
from ..auth.context import AuthContext
from ..crud import crud_assessment
from ..database import get_db
from ..schemas.assessment import (
    AssessmentCreate,
    AssessmentResponse,
    AssessmentStatusUpdate,
    CalendarEntry,
)
from ..services.assessments import create_assessment
from ..utils import DomainError, error_response
from .dependencies import ensure_same_org, get_org_assessment, require_active_org, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assessments"])

DEFAULT_CALENDAR_DAYS = 30


@router.post("/", response_model=AssessmentResponse, status_code=status.HTTP_201_CREATED)
def create_org_assessment(
    *,
    db: Session = Depends(get_db),
    assessment_in: AssessmentCreate,
    ctx: AuthContext = Depends(require_active_org),
):
    """Create a pending assessment for an existing client of the caller's
    organization, snapshotting the current estimate."""
    try:
        return create_assessment(db, ctx.org_id, ctx.principal_id, assessment_in)
    except DomainError as exc:
        raise exc.to_http()


@router.get("/", response_model=List[AssessmentResponse])
def list_org_assessments(
    org_id: Optional[int] = Query(None, description="Defaults to the active organization"),
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    target = ctx.org_id if org_id is None else org_id
    ensure_same_org(ctx, target)
    return crud_assessment.list_by_org(db, target)


@router.get("/mine", response_model=List[AssessmentResponse])
def list_my_assessments(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    """Dashboard listing for the caller's active organization, newest first."""
    return crud_assessment.list_by_org(db, ctx.org_id)


@router.get("/all", response_model=List[AssessmentResponse])
def list_all_assessments(
    db: Session = Depends(get_db),
    admin: AuthContext = Depends(require_admin),
):
    logger.info("Admin %s listed all assessments", admin.principal_id)
    return crud_assessment.list_all(db)


@router.get("/calendar", response_model=List[CalendarEntry])
def assessment_calendar(
    start: Optional[date] = Query(None, description="First day (YYYY-MM-DD), defaults to today"),
    end: Optional[date] = Query(None, description="Last day (YYYY-MM-DD), inclusive"),
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    """Scheduled assessments between two days, both days included."""
    start = start or datetime.utcnow().date()
    end = end or start + timedelta(days=DEFAULT_CALENDAR_DAYS)
    if end < start:
        raise error_response(
            "End date must not be before start date",
            {"end": "before_start"},
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    rows = crud_assessment.list_scheduled_between(
        db,
        ctx.org_id,
        datetime.combine(start, time.min),
        datetime.combine(end, time.max),
    )
    return [
        CalendarEntry(
            id=row.id,
            org_id=row.org_id,
            client_id=row.client_id,
            client_name=row.client.name,
            scheduled_for=row.scheduled_for,
            car_make=row.car_make,
            car_model=row.car_model,
            car_year=row.car_year,
            status=row.status,
            created_at=row.created_at,
        )
        for row in rows
    ]


# Place the id routes after static ones like /mine and /calendar.
@router.get("/{assessment_id}", response_model=AssessmentResponse)
def read_assessment(db_assessment: models.Assessment = Depends(get_org_assessment)):
    return db_assessment


@router.patch("/{assessment_id}/status", response_model=AssessmentResponse)
def update_assessment_status(
    *,
    db: Session = Depends(get_db),
    status_in: AssessmentStatusUpdate,
    db_assessment: models.Assessment = Depends(get_org_assessment),
):
    return crud_assessment.update_status(db, db_assessment, status_in.status)


@router.delete("/{assessment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_assessment(
    *,
    db: Session = Depends(get_db),
    db_assessment: models.Assessment = Depends(get_org_assessment),
    ctx: AuthContext = Depends(require_active_org),
):
    crud_assessment.delete_assessment(db, db_assessment)
    logger.info("Assessment %s deleted by %s", db_assessment.id, ctx.principal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
