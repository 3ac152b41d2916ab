from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from biztime.api.schemas.company_schema import CompanyOut


# ============================================================
# Create Schema
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float


# ============================================================
# Update Schema
# ============================================================
class InvoiceUpdate(BaseModel):
    amt: float
    paid: bool

    @model_validator(mode="before")
    @classmethod
    def reject_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "id" in data:
            raise ValueError("id cannot be changed")
        return data


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    model_config = ConfigDict(from_attributes=True)


class InvoiceOut(InvoiceSummary):
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None


class InvoiceDetail(BaseModel):
    """Invoice with its company nested in full; comp_code is not repeated."""

    id: int
    amt: float
    paid: bool
    add_date: datetime
    paid_date: Optional[datetime] = None
    company: CompanyOut

    model_config = ConfigDict(from_attributes=True)


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
