# app/api/api_modifier.py

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from .. import crud
from ..auth.context import AuthContext
from ..database import get_db
from ..schemas.modifier import ModifierCreate, ModifierResponse
from ..utils import error_response
from .dependencies import require_active_org

router = APIRouter(tags=["Modifiers"])


@router.get("/", response_model=List[ModifierResponse])
def list_modifiers(
    db: Session = Depends(get_db),
    ctx: AuthContext = Depends(require_active_org),
):
    return crud.modifier.get_modifiers_by_org(db, ctx.org_id)


@router.post("/", response_model=ModifierResponse, status_code=status.HTTP_201_CREATED)
def create_modifier(
    *,
    db: Session = Depends(get_db),
    modifier_in: ModifierCreate,
    ctx: AuthContext = Depends(require_active_org),
):
    return crud.modifier.create_org_modifier(db, modifier_in, ctx.org_id)


@router.delete("/{modifier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_modifier(
    *,
    db: Session = Depends(get_db),
    modifier_id: int,
    ctx: AuthContext = Depends(require_active_org),
):
    db_modifier = crud.modifier.get_modifier(db, modifier_id)
    if db_modifier is None or db_modifier.org_id != ctx.org_id:
        raise error_response(
            "Modifier not found",
            {"modifier_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    crud.modifier.delete_modifier(db, db_modifier)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
