from typing import Optional

from fastapi import APIRouter, Depends, status

from biztime.core.db import QueryGateway, get_db
from biztime.core.errors import NotFoundError
from biztime.schemas.company_schema import DeletedResponse
from biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from biztime.services.invoice_service import invoice_service

router = APIRouter()

# Signed 32-bit, the range of the invoices.id column
MIN_INVOICE_ID = -2**31
MAX_INVOICE_ID = 2**31 - 1


def _parse_invoice_id(invoice_id: str) -> Optional[int]:
    """
    Ids arrive as raw path text. Anything that is not an integer, or is
    outside the INTEGER column range, cannot match a row, so it is reported
    as not found instead of a 422 or a driver overflow.
    """
    try:
        parsed = int(invoice_id)
    except ValueError:
        return None
    if not MIN_INVOICE_ID <= parsed <= MAX_INVOICE_ID:
        return None
    return parsed


def _require_id(invoice_id: str) -> int:
    parsed = _parse_invoice_id(invoice_id)
    if parsed is None:
        raise NotFoundError("Invoice", invoice_id)
    return parsed


@router.get("", response_model=InvoiceListResponse)
def list_invoices(db: QueryGateway = Depends(get_db)):
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: str, db: QueryGateway = Depends(get_db)):
    invoice = invoice_service.get_invoice(db, _require_id(invoice_id))
    if not invoice:
        raise NotFoundError("Invoice", invoice_id)
    return {"invoice": invoice}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: QueryGateway = Depends(get_db)):
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: str, payload: InvoiceUpdate, db: QueryGateway = Depends(get_db)):
    invoice = invoice_service.update_invoice(db, _require_id(invoice_id), payload)
    if not invoice:
        raise NotFoundError("Invoice", invoice_id)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: str, db: QueryGateway = Depends(get_db)):
    if not invoice_service.delete_invoice(db, _require_id(invoice_id)):
        raise NotFoundError("Invoice", invoice_id)
    return {"status": "deleted"}
