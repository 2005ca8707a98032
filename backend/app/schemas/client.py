from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


def _clean_optional(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


class ClientContact(BaseModel):
    """Free-text contact details typed into the assessment form."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Client name must be at least 2 characters")
        return v

    @field_validator("email", "phone")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _clean_optional(v)


class ClientCreate(ClientContact):
    pass


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_min_length(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Client name must be at least 2 characters")
        return v


class ClientResponse(BaseModel):
    id: int
    org_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
