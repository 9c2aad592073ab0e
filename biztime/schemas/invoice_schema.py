from datetime import date
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, field_validator

from biztime.schemas.company_schema import CompanyOut

CENTS = Decimal("0.01")


# ============================================================
# Request bodies
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: Optional[str] = None
    amt: Optional[Decimal] = None


class InvoiceUpdate(BaseModel):
    """
    Only the amount can be changed; paid / paid_date are never touched.
    """
    amt: Optional[Decimal] = None


# ============================================================
# Rows
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str


class InvoiceBase(BaseModel):
    id: int
    amt: Decimal
    paid: bool
    add_date: date
    paid_date: Optional[date] = None

    @field_validator("amt", mode="before")
    @classmethod
    def two_decimal_places(cls, v: Any) -> Any:
        # SQLite hands back int/float, PostgreSQL a Decimal
        if v is None:
            return v
        return Decimal(str(v)).quantize(CENTS)


class InvoiceOut(InvoiceBase):
    comp_code: str


class InvoiceDetail(InvoiceBase):
    company: Optional[CompanyOut] = None


# ============================================================
# Response envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
