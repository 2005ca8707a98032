import enum
from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    Enum as SQLAlchemyEnum,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class AssessmentStatus(str, enum.Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class Assessment(BaseModel):
    """A quote/job for one client's vehicle.

    Pricing is snapshotted at creation (``line_items`` plus totals) so later
    price edits on services or modifiers never rewrite an issued quote.
    """

    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True, index=True)
    org_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    created_by = Column(String, nullable=False, index=True)

    car_make = Column(String, nullable=False)
    car_model = Column(String, nullable=False)
    car_year = Column(Integer, nullable=False)
    car_color = Column(String, nullable=True)

    # Primary service first; full selection kept in ``service_ids``
    service_id = Column(Integer, ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    service_ids = Column(JSON, nullable=False, default=list)
    modifier_ids = Column(JSON, nullable=False, default=list)

    line_items = Column(JSON, nullable=False, default=list)
    subtotal = Column(Numeric(10, 2), nullable=False, default=0)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    tax = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False, default=0)

    notes = Column(Text, nullable=True)
    scheduled_for = Column(DateTime, nullable=True, index=True)
    status = Column(
        SQLAlchemyEnum(
            AssessmentStatus,
            name="assessmentstatus",
            values_callable=lambda enum: [e.value for e in enum],
            native_enum=False,
        ),
        nullable=False,
        default=AssessmentStatus.PENDING,
        index=True,
    )

    organization = relationship("Organization", back_populates="assessments")
    client = relationship("Client", back_populates="assessments")
    service = relationship("Service")
