from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from ..models.assessment import AssessmentStatus
from .client import ClientContact
from .estimate import LineItemRead

MIN_CAR_YEAR = 1886
MAX_CAR_YEAR = 2100


class AssessmentCreate(BaseModel):
    """Payload for a new assessment.

    Either ``client_id`` (picked from the client search) or ``client``
    contact details must be supplied. When both are present the explicit id
    wins and the contact details are ignored.
    """

    client_id: Optional[int] = None
    client: Optional[ClientContact] = None
    car_make: str
    car_model: str
    car_year: StrictInt = Field(ge=MIN_CAR_YEAR, le=MAX_CAR_YEAR)
    car_color: Optional[str] = None
    service_ids: List[int] = Field(min_length=1)
    modifier_ids: List[int] = Field(default_factory=list)
    notes: Optional[str] = None
    scheduled_for: Optional[datetime] = None

    @field_validator("car_make", "car_model")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @model_validator(mode="after")
    def client_reference_required(self) -> "AssessmentCreate":
        if self.client_id is None and self.client is None:
            raise ValueError("Either client_id or client details must be provided")
        return self


class AssessmentStatusUpdate(BaseModel):
    status: AssessmentStatus


class AssessmentResponse(BaseModel):
    id: int
    org_id: int
    client_id: int
    created_by: str
    car_make: str
    car_model: str
    car_year: int
    car_color: Optional[str] = None
    service_id: Optional[int] = None
    service_ids: List[int]
    modifier_ids: List[int]
    line_items: List[LineItemRead]
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    notes: Optional[str] = None
    scheduled_for: Optional[datetime] = None
    status: AssessmentStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class CalendarEntry(BaseModel):
    id: int
    org_id: int
    client_id: int
    client_name: str
    scheduled_for: datetime
    car_make: str
    car_model: str
    car_year: int
    status: AssessmentStatus
    created_at: datetime
