from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class Modifier(BaseModel):
    """Condition-based surcharge, e.g. "Excessive Pet Hair"."""

    __tablename__ = "modifiers"

    id = Column(Integer, primary_key=True, index=True)
    org_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    description = Column(Text, nullable=True)

    organization = relationship("Organization", back_populates="modifiers")
