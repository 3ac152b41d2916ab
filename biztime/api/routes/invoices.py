from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.company_schema import DeletedResponse
from biztime.api.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.api.services.invoice_service import invoice_service

router = APIRouter()


@router.get("", response_model=InvoiceListResponse)
@router.get("/", response_model=InvoiceListResponse, include_in_schema=False)
def list_invoices(db: Session = Depends(get_db)):
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.get_invoice(db, invoice_id)}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    return {"invoice": invoice_service.update_invoice(db, invoice_id, payload)}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return DeletedResponse()
