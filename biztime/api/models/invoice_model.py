from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    false,
)
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base

# Largest id a 64-bit INTEGER/BIGINT column can hold
MAX_INVOICE_ID = 2**63 - 1


def utcnow() -> datetime:
    """Naive UTC, matching the naive DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amt > 0", name="invoices_amt_check"),
    )

    # 64-bit on every backend; SQLite needs INTEGER for rowid autoincrement
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amt = Column(Float, nullable=False)
    paid = Column(Boolean, nullable=False, default=False, server_default=false())

    # --- Timestamps ---
    # Naive UTC, same clock as paid_date
    add_date = Column(DateTime, nullable=False, default=utcnow)
    # Only ever written by generate_paid_date()
    paid_date = Column(DateTime, nullable=True)

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
