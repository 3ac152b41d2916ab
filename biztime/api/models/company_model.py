from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base

class Company(Base):
    __tablename__ = "companies"

    # Short code chosen by the client, never changed afterwards
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text)

    # Relationship: one-to-many (companies → invoices)
    # Deleting a company deletes its invoices
    invoices = relationship(
        "Invoice",
        back_populates="company",
        cascade="all, delete-orphan",
        order_by="Invoice.id",
    )
