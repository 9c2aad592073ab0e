from fastapi import APIRouter, Depends, status
from biztime.core.db import QueryGateway, get_db
from biztime.core.errors import NotFoundError
from biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
    DeletedResponse,
)
from biztime.services.company_service import (
    create_company,
    delete_company,
    get_company,
    list_companies,
    update_company,
)

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
def list_companies_route(db: QueryGateway = Depends(get_db)):
    return {"companies": list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, db: QueryGateway = Depends(get_db)):
    company = get_company(db, code)
    if company is None:
        raise NotFoundError("Company", code)
    return {"company": company}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyCreate, db: QueryGateway = Depends(get_db)):
    return {"company": create_company(db, payload)}


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(code: str, payload: CompanyUpdate, db: QueryGateway = Depends(get_db)):
    company = update_company(db, code, payload)
    if company is None:
        raise NotFoundError("Company", code)
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: QueryGateway = Depends(get_db)):
    if not delete_company(db, code):
        raise NotFoundError("Company", code)
    return {"status": "deleted"}
