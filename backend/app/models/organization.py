from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Organization(BaseModel):
    """A tenant business. Everything else hangs off ``id``."""

    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    # Identifier issued by the identity provider (e.g. "org_2abc...").
    external_id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    logo_url = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    website = Column(String, nullable=True)

    services = relationship(
        "Service", back_populates="organization", cascade="all, delete-orphan"
    )
    modifiers = relationship(
        "Modifier", back_populates="organization", cascade="all, delete-orphan"
    )
    clients = relationship(
        "Client", back_populates="organization", cascade="all, delete-orphan"
    )
    assessments = relationship(
        "Assessment", back_populates="organization", cascade="all, delete-orphan"
    )
