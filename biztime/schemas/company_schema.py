from pydantic import BaseModel
from typing import List, Optional


# Fields are optional on input: a missing value is rejected by the
# database (NOT NULL), not by request validation.
class CompanyCreate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyOut(BaseModel):
    code: str
    name: str
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int] = []


class CompanyListResponse(BaseModel):
    companies: List[CompanyOut]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class DeletedResponse(BaseModel):
    status: str = "deleted"
