from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CompanyCreate(BaseModel):
    # Derived from name when omitted
    code: Optional[str] = None
    name: str
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: str
    description: Optional[str] = None


class CompanySummary(BaseModel):
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int] = Field(default_factory=list)


# ============================================================
# Response envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class StatusResponse(BaseModel):
    status: str
