from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models.service import ServiceType
from decimal import Decimal
from datetime import datetime


# Shared properties
class ServiceBase(BaseModel):
    name: Optional[str] = None
    unit_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    type: Optional[ServiceType] = None
    description: Optional[str] = None
    category: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Service name must not be blank")
        return v


# Properties to receive on item creation
class ServiceCreate(ServiceBase):
    name: str
    unit_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    type: ServiceType = ServiceType.BASE
    is_active: bool = True


# Properties to receive on item update
class ServiceUpdate(ServiceBase):
    pass


# Properties to return to client
class ServiceResponse(ServiceBase):
    id: int
    org_id: int
    name: str
    unit_price: Decimal
    type: ServiceType
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
