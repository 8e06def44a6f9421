from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.schemas.company_schema import StatusResponse
from biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.services.invoice_service import invoice_service

router = APIRouter()

# Largest value a 64-bit INTEGER primary key can hold
MAX_INVOICE_ID = 2**63 - 1


def _invoice_id():
    return Path(..., ge=1, le=MAX_INVOICE_ID)


@router.get("", response_model=InvoiceListResponse)
@router.get("/", response_model=InvoiceListResponse, include_in_schema=False)
def list_invoices(db: Session = Depends(get_db)):
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int = _invoice_id(), db: Session = Depends(get_db)):
    return {"invoice": invoice_service.get_invoice_detail(db, invoice_id)}


@router.post("", response_model=InvoiceResponse)
@router.post("/", response_model=InvoiceResponse, include_in_schema=False)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    payload: InvoiceUpdate,
    invoice_id: int = _invoice_id(),
    db: Session = Depends(get_db),
):
    return {"invoice": invoice_service.update_invoice(db, invoice_id, payload)}


@router.delete("/{invoice_id}", response_model=StatusResponse)
def delete_invoice(invoice_id: int = _invoice_id(), db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return {"status": "DELETED"}
