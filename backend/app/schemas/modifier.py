from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ModifierCreate(BaseModel):
    name: str
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Modifier name must not be blank")
        return v


class ModifierResponse(BaseModel):
    id: int
    org_id: int
    name: str
    price: Decimal
    description: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
