from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from .service import ServiceResponse
from .modifier import ModifierResponse


class OrganizationBase(BaseModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class OrganizationCreate(OrganizationBase):
    external_id: str
    name: str

    @field_validator("external_id", "name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class OrganizationResponse(OrganizationBase):
    id: int
    external_id: str
    name: str
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}


class OrganizationWithServices(BaseModel):
    org: OrganizationResponse
    services: List[ServiceResponse]


class BookingPage(BaseModel):
    """Everything the public booking page needs to render one business."""

    org_id: int
    org_name: str
    org_slug: str
    org_image_url: Optional[str] = None
    services: List[ServiceResponse]
    modifiers: List[ModifierResponse]
