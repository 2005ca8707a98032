from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


class CRUDModifier:
    def get_modifier(self, db: Session, modifier_id: int) -> Optional[models.Modifier]:
        return db.query(models.Modifier).filter(models.Modifier.id == modifier_id).first()

    def get_many(self, db: Session, modifier_ids: Iterable[int]) -> Dict[int, models.Modifier]:
        ids = {int(i) for i in modifier_ids}
        if not ids:
            return {}
        rows = db.query(models.Modifier).filter(models.Modifier.id.in_(ids)).all()
        return {row.id: row for row in rows}

    def get_modifiers_by_org(self, db: Session, org_id: int) -> List[models.Modifier]:
        return (
            db.query(models.Modifier)
            .filter(models.Modifier.org_id == org_id)
            .order_by(models.Modifier.id)
            .all()
        )

    def create_org_modifier(
        self, db: Session, modifier_in: schemas.ModifierCreate, org_id: int
    ) -> models.Modifier:
        db_modifier = models.Modifier(**modifier_in.model_dump(), org_id=org_id)
        db.add(db_modifier)
        db.commit()
        db.refresh(db_modifier)
        return db_modifier

    def delete_modifier(self, db: Session, db_modifier: models.Modifier) -> None:
        db.delete(db_modifier)
        db.commit()


modifier = CRUDModifier()
