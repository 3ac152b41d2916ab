import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy.orm import Session, contains_eager

from biztime.api.core.errors import NotFoundError
from biztime.api.models.invoice_model import MAX_INVOICE_ID, Invoice, utcnow
from biztime.api.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)


def generate_paid_date(
    prior_paid: bool,
    prior_paid_date: Optional[datetime],
    paid: bool,
    clock: Callable[[], datetime] = utcnow,
) -> Optional[datetime]:
    """
    Work out the paid_date to store when an invoice's paid flag is set.

    - unpaid (no paid_date) -> paid   : now
    - paid -> unpaid                  : None
    - anything else                   : prior paid_date, untouched
    """
    if prior_paid_date is None and paid:
        return clock()
    if prior_paid and not paid:
        return None
    return prior_paid_date


def _require_storable_id(invoice_id: int) -> None:
    # Ids outside the 64-bit column range can never match a row
    if not -MAX_INVOICE_ID - 1 <= invoice_id <= MAX_INVOICE_ID:
        raise NotFoundError(f"Invoice not found: {invoice_id}")


class InvoiceService:
    """
    Data-access layer for invoices.

    Lookups by id raise NotFoundError when nothing matches.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self.clock = clock

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID, company joined in the same query
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Invoice:
        _require_storable_id(invoice_id)
        invoice = (
            db.query(Invoice)
            .join(Invoice.company)
            .options(contains_eager(Invoice.company))
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if invoice is None:
            raise NotFoundError(f"Invoice not found: {invoice_id}")
        return invoice

    # ------------------------------------------------------------
    # Create
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice #%s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount / paid status
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Invoice:
        _require_storable_id(invoice_id)

        # Row lock on backends that support it; SQLite serializes writers anyway
        invoice = (
            db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .with_for_update()
            .first()
        )
        if invoice is None:
            raise NotFoundError(f"Invoice not found: {invoice_id}")

        paid_date = generate_paid_date(
            invoice.paid, invoice.paid_date, payload.paid, clock=self.clock
        )

        invoice.amt = payload.amt
        invoice.paid = payload.paid
        invoice.paid_date = paid_date

        db.commit()
        db.refresh(invoice)
        logger.info("Updated invoice #%s (paid=%s)", invoice.id, invoice.paid)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> None:
        _require_storable_id(invoice_id)
        deleted = db.query(Invoice).filter(Invoice.id == invoice_id).delete(
            synchronize_session=False
        )
        if not deleted:
            db.rollback()
            raise NotFoundError(f"Invoice not found: {invoice_id}")

        db.commit()
        logger.info("Deleted invoice #%s", invoice_id)


invoice_service = InvoiceService()
