from sqlalchemy.orm import Session
from typing import Dict, Iterable, List, Optional

from .. import models, schemas

class CRUDService:
    def get_service(self, db: Session, service_id: int) -> Optional[models.Service]:
        return db.query(models.Service).filter(models.Service.id == service_id).first()

    def get_many(self, db: Session, service_ids: Iterable[int]) -> Dict[int, models.Service]:
        """Fetch services by primary key in one round trip, keyed by id.

        No org filtering happens here; callers decide what a foreign row means.
        """
        ids = {int(i) for i in service_ids}
        if not ids:
            return {}
        rows = db.query(models.Service).filter(models.Service.id.in_(ids)).all()
        return {row.id: row for row in rows}

    def get_services_by_org(
        self, db: Session, org_id: int, skip: int = 0, limit: int = 100
    ) -> List[models.Service]:
        return (
            db.query(models.Service)
            .filter(models.Service.org_id == org_id)
            .order_by(models.Service.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_org_service(
        self, db: Session, service: schemas.ServiceCreate, org_id: int
    ) -> models.Service:
        db_service = models.Service(**service.model_dump(), org_id=org_id)
        db.add(db_service)
        db.commit()
        db.refresh(db_service)
        return db_service

    def update_service(
        self,
        db: Session,
        db_service: models.Service,
        service_in: schemas.ServiceUpdate
    ) -> models.Service:
        update_data = service_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            if value is None and key in {"name", "unit_price", "type", "is_active"}:
                continue
            setattr(db_service, key, value)
        db.commit()
        db.refresh(db_service)
        return db_service

    def delete_service(self, db: Session, service_id: int) -> Optional[models.Service]:
        db_service = db.query(models.Service).filter(models.Service.id == service_id).first()
        if db_service:
            db.delete(db_service)
            db.commit()
        return db_service

service = CRUDService()
