import logging
from typing import List

from sqlalchemy.orm import Session

from biztime.api.core.errors import NotFoundError
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice
from biztime.api.schemas.company_schema import CompanyCreate, CompanyDetail, CompanyUpdate

logger = logging.getLogger(__name__)


def _get_or_404(db: Session, code: str) -> Company:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        raise NotFoundError(f"Company not found: {code}")
    return company


def list_companies(db: Session) -> List[Company]:
    return db.query(Company).all()


def get_company(db: Session, code: str) -> CompanyDetail:
    company = _get_or_404(db, code)

    invoice_ids = [
        invoice_id
        for (invoice_id,) in db.query(Invoice.id)
        .filter(Invoice.comp_code == company.code)
        .order_by(Invoice.id)
    ]

    return CompanyDetail(
        code=company.code,
        name=company.name,
        description=company.description,
        invoices=invoice_ids,
    )


def create_company(db: Session, payload: CompanyCreate) -> Company:
    company = Company(
        code=payload.code,
        name=payload.name,
        description=payload.description,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Company:
    company = _get_or_404(db, code)

    company.name = payload.name
    company.description = payload.description

    db.commit()
    db.refresh(company)
    logger.info("Updated company %s", company.code)
    return company


def delete_company(db: Session, code: str) -> None:
    company = _get_or_404(db, code)

    # Invoices go with it (relationship cascade + ON DELETE CASCADE)
    db.delete(company)
    db.commit()
    logger.info("Deleted company %s", code)
