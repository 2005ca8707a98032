from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Client(BaseModel):
    """A customer of one organization.

    ``name``/``email``/``phone`` keep what the user typed. The ``*_normalized``
    and ``phone_digits`` columns are derived on every write (see
    ``crud_client``) and back the indexed lookups used by the client
    resolver. Nothing enforces uniqueness; matching is heuristic.
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index("ix_clients_org_email", "org_id", "email_normalized"),
        Index("ix_clients_org_name_phone", "org_id", "name_normalized", "phone_digits"),
        Index("ix_clients_org_name", "org_id", "name_normalized"),
    )

    id = Column(Integer, primary_key=True, index=True)
    org_id = Column(
        Integer,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)

    name_normalized = Column(String, nullable=False)
    email_normalized = Column(String, nullable=True)
    phone_digits = Column(String, nullable=True)

    # Principal (identity-provider subject) who created the record
    created_by = Column(String, nullable=True)

    organization = relationship("Organization", back_populates="clients")
    assessments = relationship("Assessment", back_populates="client")
