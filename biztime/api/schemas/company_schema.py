from typing import Any, List

from pydantic import BaseModel, ConfigDict, model_validator


# ============================================================
# Request bodies
# ============================================================
class CompanyCreate(BaseModel):
    # Keys must be present; empty strings are fine
    code: str
    name: str
    description: str


class CompanyUpdate(BaseModel):
    name: str
    description: str

    @model_validator(mode="before")
    @classmethod
    def reject_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and "code" in data:
            raise ValueError("code cannot be changed")
        return data


# ============================================================
# Response bodies
# ============================================================
class CompanySummary(BaseModel):
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CompanyOut(CompanySummary):
    description: str | None = None


class CompanyDetail(CompanyOut):
    # IDs only; the invoice side nests the full company instead
    invoices: List[int] = []


class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class DeletedResponse(BaseModel):
    status: str = "deleted"
