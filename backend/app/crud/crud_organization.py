from typing import Optional

from sqlalchemy.orm import Session

from .. import models, schemas
from ..utils.slug import generate_unique_slug


class CRUDOrganization:
    def get(self, db: Session, org_id: int) -> Optional[models.Organization]:
        return db.query(models.Organization).filter(models.Organization.id == org_id).first()

    def get_by_external_id(
        self, db: Session, external_id: str
    ) -> Optional[models.Organization]:
        return (
            db.query(models.Organization)
            .filter(models.Organization.external_id == external_id)
            .first()
        )

    def get_by_slug(self, db: Session, slug: str) -> Optional[models.Organization]:
        return (
            db.query(models.Organization)
            .filter(models.Organization.slug == slug.strip().lower())
            .first()
        )

    def create(
        self, db: Session, org_in: schemas.OrganizationCreate
    ) -> models.Organization:
        if self.get_by_external_id(db, org_in.external_id):
            raise ValueError("Organization already exists")
        existing = [row[0] for row in db.query(models.Organization.slug).all()]
        db_org = models.Organization(
            **org_in.model_dump(),
            slug=generate_unique_slug(org_in.name, existing),
        )
        db.add(db_org)
        db.commit()
        db.refresh(db_org)
        return db_org


organization = CRUDOrganization()
