import logging
from datetime import date
from typing import List

from sqlalchemy import delete, func, update
from sqlalchemy.orm import Session

from biztime.core.errors import NotFoundError
from biztime.models.company_model import Company
from biztime.models.invoice_model import Invoice
from biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

INVOICE_COLUMNS = (
    Invoice.id,
    Invoice.comp_code,
    Invoice.amt,
    Invoice.paid,
    Invoice.add_date,
    Invoice.paid_date,
)


def paid_date_expression(paid: bool, today: date):
    """
    Value for ``paid_date`` evaluated inside the UPDATE itself.

    Paying keeps an existing date and stamps ``today`` only when there is
    none; unpaying always clears it.
    """
    if paid:
        return func.coalesce(Invoice.paid_date, today)
    return None


class InvoiceService:
    """
    Data-access layer for invoices.

    Every write is a single statement, so the paid-date rule cannot race
    with a concurrent update of the same invoice.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id.asc()).all()

    # ------------------------------------------------------------
    # Fetch single invoice joined with its company
    # ------------------------------------------------------------
    def get_invoice_detail(self, db: Session, invoice_id: int) -> dict:
        row = (
            db.query(Invoice, Company)
            .join(Company, Invoice.comp_code == Company.code)
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if row is None:
            logger.debug("Invoice %s not found", invoice_id)
            raise NotFoundError(f"No such invoice: {invoice_id}")

        invoice, company = row
        return {
            "id": invoice.id,
            "amt": invoice.amt,
            "paid": invoice.paid,
            "add_date": invoice.add_date,
            "paid_date": invoice.paid_date,
            "company": {
                "code": company.code,
                "name": company.name,
                "description": company.description,
            },
        }

    # ------------------------------------------------------------
    # Create (store fills paid / add_date / paid_date)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice %s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount / paid state
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
        today: date | None = None,
    ) -> dict:
        values = {
            "paid": payload.paid,
            "paid_date": paid_date_expression(payload.paid, today or date.today()),
        }
        if payload.amt is not None:
            values["amt"] = payload.amt

        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(**values)
            .returning(*INVOICE_COLUMNS)
            .execution_options(synchronize_session=False)
        )
        row = db.execute(stmt).mappings().first()
        if row is None:
            db.rollback()
            raise NotFoundError(f"No such invoice: {invoice_id}")

        db.commit()
        logger.info("Updated invoice %s (paid=%s, paid_date=%s)", invoice_id, row["paid"], row["paid_date"])
        return dict(row)

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> None:
        result = db.execute(
            delete(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(synchronize_session=False)
        )
        if not result.rowcount:
            db.rollback()
            raise NotFoundError(f"No such invoice: {invoice_id}")

        db.commit()
        logger.info("Deleted invoice %s", invoice_id)


invoice_service = InvoiceService()
