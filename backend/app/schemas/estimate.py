from decimal import Decimal
from typing import List, Literal

from pydantic import BaseModel, Field


class EstimateRequest(BaseModel):
    org_id: int
    service_ids: List[int] = Field(default_factory=list)
    modifier_ids: List[int] = Field(default_factory=list)


class LineItemRead(BaseModel):
    type: Literal["service", "modifier"]
    name: str
    price: Decimal

    model_config = {"from_attributes": True}


class EstimateRead(BaseModel):
    line_items: List[LineItemRead]
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal

    model_config = {"from_attributes": True}
