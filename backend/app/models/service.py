# backend/app/models/service.py
from sqlalchemy import (
    Boolean,
    Column,
    Integer,
    String,
    Numeric,
    ForeignKey,
    Text,
    Enum as SQLAlchemyEnum,
)
from sqlalchemy.orm import relationship
from .base import BaseModel
import enum


class ServiceType(str, enum.Enum):
    """Whether a service is sold on its own or only on top of another."""

    BASE = "base"
    ADD_ON = "add_on"


class Service(BaseModel):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    org_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, index=True, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    type = Column(
        SQLAlchemyEnum(
            ServiceType,
            values_callable=lambda enum: [e.value for e in enum],
            native_enum=False,
        ),
        nullable=False,
        default=ServiceType.BASE,
    )
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    organization = relationship("Organization", back_populates="services")
