import logging
import re
from typing import Optional

from sqlalchemy.orm import Session
from biztime.core.errors import NotFoundError, RequestValidationFailed
from biztime.models.company_model import Company
from biztime.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"[\W_]+", re.UNICODE)


def slugify_code(name: str) -> str:
    """Company code from a display name: "Big Blue, Inc." -> "bigblueinc"."""
    return _NON_WORD.sub("", name or "").lower()


def list_companies(db: Session):
    return db.query(Company).all()


def get_company(db: Session, code: str) -> Company:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        logger.debug("Company %r not found", code)
        raise NotFoundError(f"Can't find company with code of {code}")
    return company


def get_company_detail(db: Session, code: str) -> dict:
    company = get_company(db, code)
    return {
        "code": company.code,
        "name": company.name,
        "description": company.description,
        "invoices": [inv.id for inv in company.invoices],
    }


def create_company(db: Session, payload: CompanyCreate) -> Company:
    code: Optional[str] = payload.code or slugify_code(payload.name)
    if not code:
        raise RequestValidationFailed("Company code could not be derived from name")

    # Uniqueness is left to the store; a duplicate surfaces as IntegrityError
    company = Company(code=code, name=payload.name, description=payload.description)
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Company:
    updated = (
        db.query(Company)
        .filter(Company.code == code)
        .update(
            {Company.name: payload.name, Company.description: payload.description},
            synchronize_session=False,
        )
    )
    if not updated:
        db.rollback()
        raise NotFoundError(f"Can't update company with code of {code}")

    db.commit()
    logger.info("Updated company %s", code)
    return get_company(db, code)


def delete_company(db: Session, code: str) -> None:
    deleted = db.query(Company).filter(Company.code == code).delete(synchronize_session=False)
    if not deleted:
        db.rollback()
        raise NotFoundError(f"Can't delete company with code of {code}")

    db.commit()
    logger.info("Deleted company %s", code)
