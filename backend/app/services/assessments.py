"""Assessment creation: resolve client, check services, price, persist.

Nothing is written until every check has passed, and the write itself is a
single insert, so a rejected request leaves no trace in the database.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from .. import crud, models
from ..crud import crud_assessment
from ..schemas.assessment import AssessmentCreate
from ..utils.errors import DomainError, ServiceCrossTenant, ServiceNotFound
from .client_resolver import resolve_client
from .estimates import calculate_estimate

logger = logging.getLogger(__name__)


def _require_services(
    db: Session, org_id: int, service_ids: List[int]
) -> Dict[int, models.Service]:
    found = crud.service.get_many(db, service_ids)
    for sid in service_ids:
        svc = found.get(sid)
        if svc is None:
            raise ServiceNotFound(f"Service {sid} not found")
        if svc.org_id != org_id:
            raise ServiceCrossTenant(f"Service {sid} does not belong to this organization")
    return found


def create_assessment(
    db: Session,
    org_id: int,
    created_by: str,
    data: AssessmentCreate,
    *,
    tax_rate: Any = None,
    discount_percentage: Any = None,
) -> models.Assessment:
    """Create a pending assessment for ``org_id``.

    Raises ``ClientNotFound``, ``ServiceNotFound``, ``ServiceCrossTenant`` or
    ``InvalidInput``; in every case no row is inserted.
    """
    try:
        match = resolve_client(db, org_id, data.client, data.client_id)
        _require_services(db, org_id, data.service_ids)
        estimate = calculate_estimate(
            db,
            org_id,
            data.service_ids,
            data.modifier_ids,
            tax_rate=tax_rate,
            discount_percentage=discount_percentage,
        )
    except DomainError as exc:
        db.rollback()
        logger.warning(
            "Assessment creation aborted for org %s by %s: %s",
            org_id,
            created_by,
            exc.message,
        )
        raise

    db_assessment = models.Assessment(
        org_id=org_id,
        client_id=match.client.id,
        created_by=created_by,
        car_make=data.car_make,
        car_model=data.car_model,
        car_year=data.car_year,
        car_color=data.car_color,
        service_id=data.service_ids[0],
        service_ids=list(data.service_ids),
        modifier_ids=list(data.modifier_ids),
        line_items=[item.as_dict() for item in estimate.line_items],
        subtotal=estimate.subtotal,
        discount=estimate.discount,
        tax=estimate.tax,
        total=estimate.total,
        notes=data.notes,
        scheduled_for=data.scheduled_for,
        status=models.AssessmentStatus.PENDING,
    )
    db_assessment = crud_assessment.insert_assessment(db, db_assessment)
    logger.info(
        "Created assessment %s for client %s in org %s (client matched by %s, total=%s)",
        db_assessment.id,
        match.client.id,
        org_id,
        match.strategy.value,
        estimate.total,
    )
    return db_assessment
