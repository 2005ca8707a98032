from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload
import logging

from .. import models

logger = logging.getLogger(__name__)


def insert_assessment(db: Session, db_assessment: models.Assessment) -> models.Assessment:
    """Persist a fully built assessment in a single commit.

    Any failure rolls the session back and propagates; nothing is left
    half-written.
    """
    try:
        db.add(db_assessment)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_assessment)
    return db_assessment


def get_assessment(db: Session, assessment_id: int) -> Optional[models.Assessment]:
    return (
        db.query(models.Assessment)
        .filter(models.Assessment.id == assessment_id)
        .first()
    )


def list_by_org(db: Session, org_id: int) -> List[models.Assessment]:
    """Assessments of one organization, newest first."""
    return (
        db.query(models.Assessment)
        .filter(models.Assessment.org_id == org_id)
        .order_by(models.Assessment.created_at.desc(), models.Assessment.id.desc())
        .all()
    )


def list_all(db: Session) -> List[models.Assessment]:
    return (
        db.query(models.Assessment)
        .order_by(models.Assessment.created_at.desc(), models.Assessment.id.desc())
        .all()
    )


def list_scheduled_between(
    db: Session, org_id: int, start: datetime, end: datetime
) -> List[models.Assessment]:
    """Assessments scheduled within ``[start, end]`` (inclusive), earliest first."""
    return (
        db.query(models.Assessment)
        .options(joinedload(models.Assessment.client))
        .filter(
            models.Assessment.org_id == org_id,
            models.Assessment.scheduled_for.isnot(None),
            models.Assessment.scheduled_for >= start,
            models.Assessment.scheduled_for <= end,
        )
        .order_by(models.Assessment.scheduled_for, models.Assessment.id)
        .all()
    )


def update_status(
    db: Session, db_assessment: models.Assessment, status: models.AssessmentStatus
) -> models.Assessment:
    previous = db_assessment.status
    db_assessment.status = status
    db.commit()
    db.refresh(db_assessment)
    logger.info(
        "Assessment %s status %s -> %s",
        db_assessment.id,
        getattr(previous, "value", previous),
        status.value,
    )
    return db_assessment


def delete_assessment(db: Session, db_assessment: models.Assessment) -> None:
    db.delete(db_assessment)
    db.commit()
