from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date

from biztime.schemas.company_schema import CompanyOut


# ============================================================
# Request Schemas
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float = Field(allow_inf_nan=False)


class InvoiceUpdate(BaseModel):
    """
    Paid-state change for one invoice.

    ``amt`` is optional and keeps the stored amount when left out.
    ``paid`` drives ``paid_date``:
      - unpaid -> paid: stamped with today's date
      - paid -> paid: left as it was
      - anything -> unpaid: cleared
    """
    amt: Optional[float] = Field(default=None, allow_inf_nan=False)
    paid: bool


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
    add_date: date
    paid_date: Optional[date] = None


class InvoiceDetail(BaseModel):
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut


# ============================================================
# Response envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
