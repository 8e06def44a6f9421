from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from biztime.core.db import get_db
from biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
    StatusResponse,
)
from biztime.services.company_service import (
    create_company,
    delete_company,
    get_company_detail,
    list_companies,
    update_company,
)

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
@router.get("/", response_model=CompanyListResponse, include_in_schema=False)
def list_companies_route(db: Session = Depends(get_db)):
    return {"companies": list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, db: Session = Depends(get_db)):
    return {"company": get_company_detail(db, code)}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_company_route(payload: CompanyCreate, db: Session = Depends(get_db)):
    return {"company": create_company(db, payload)}


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    return {"company": update_company(db, code, payload)}


@router.delete("/{code}", response_model=StatusResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    delete_company(db, code)
    return {"status": "DELETED"}
