from datetime import datetime
from sqlalchemy import Column, DateTime
from ..database import Base


class BaseModel(Base):
    """Abstract parent for every tenant table: audit timestamps only."""

    __abstract__ = True

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
