# services/invoice_service.py
"""
Invoice Service - Business logic layer for invoice operations.

This service handles invoice creation, updates, payments and reminders,
keeping the stored status in step with every mutation it performs.
"""
import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from database import write_lock
from models import Invoice, InvoiceItem, Payment
from models.invoice import InvoiceStatus
from schemas.invoice import InvoiceCreate, InvoiceItemRequest, InvoiceUpdate
from services.errors import NotFoundError
from services.payment_ledger import PaymentLedger
from services.status_engine import track_status
from services.validation import InvoiceCandidate, ensure_valid_invoice

logger = logging.getLogger(__name__)


def _build_items(items: List[InvoiceItemRequest]) -> List[InvoiceItem]:
     return [
          InvoiceItem(name=item.name, unit_price=item.unit_price, quantity=item.quantity)
          for item in items
     ]


class InvoiceService:
     """Service class for invoice-related business logic."""

     @staticmethod
     def get_invoice(db: Session, invoice_id: int) -> Invoice:
          """
          Fetch an invoice by id.

          Raises:
               NotFoundError: If the invoice doesn't exist
          """
          invoice = db.get(Invoice, invoice_id)
          if invoice is None:
               raise NotFoundError("Invoice", invoice_id)
          return invoice

     @staticmethod
     def list_invoices(db: Session) -> List[Invoice]:
          return db.query(Invoice).order_by(Invoice.id).all()

     @staticmethod
     def create_invoice(
          db: Session,
          request: InvoiceCreate,
          now: Optional[datetime] = None
     ) -> Invoice:
          """
          Create a Draft invoice.

          Args:
               db: SQLAlchemy database session
               request: Client, pricing and item details
               now: Creation time (defaults to the current time)

          Returns:
               Created Invoice object with its id assigned

          Raises:
               ValidationError: If the invoice breaks a validation rule;
                    nothing is added to the session in that case
          """
          now = now or datetime.now()
          invoice = Invoice(
               client_id=request.client_id,
               client_name=request.client_name,
               client_email=request.client_email,
               client_phone=request.client_phone,
               region=request.region,
               discount_kind=request.discount_kind,
               discount=request.discount,
               created_at=now,
               due_date=now + timedelta(days=request.due_in_days),
               status=InvoiceStatus.DRAFT,
               items=_build_items(request.items),
          )
          ensure_valid_invoice(invoice)

          db.add(invoice)
          db.flush()  # Flush to get the ID without committing

          logger.info(f"Created invoice {invoice.id} for {invoice.client_name}, grand total {invoice.grand_total}")
          return invoice

     @staticmethod
     def update_invoice(
          db: Session,
          invoice_id: int,
          request: InvoiceUpdate,
          now: Optional[datetime] = None
     ) -> Invoice:
          """
          Replace the supplied fields of an invoice and recompute its status.

          The resulting invoice is validated before the stored row is touched,
          so a rejected update leaves the invoice exactly as it was.

          Raises:
               NotFoundError: If the invoice doesn't exist
               ValidationError: If the updated invoice would be invalid
          """
          now = now or datetime.now()
          with write_lock:
               invoice = InvoiceService.get_invoice(db, invoice_id)

               new_items = _build_items(request.items) if request.items is not None else None
               ensure_valid_invoice(InvoiceCandidate(
                    items=new_items if new_items is not None else invoice.items,
                    discount_kind=request.discount_kind or invoice.discount_kind,
                    discount=request.discount if request.discount is not None else invoice.discount,
               ))

               if request.client_name is not None:
                    invoice.client_name = request.client_name
               if request.client_email is not None:
                    invoice.client_email = request.client_email
               if request.client_phone is not None:
                    invoice.client_phone = request.client_phone
               if request.region is not None:
                    invoice.region = request.region
               if request.discount_kind is not None:
                    invoice.discount_kind = request.discount_kind
               if request.discount is not None:
                    invoice.discount = request.discount
               if request.due_in_days is not None:
                    invoice.due_date = now + timedelta(days=request.due_in_days)
               if new_items is not None:
                    invoice.items = new_items

               track_status(invoice, now)
               db.flush()

          logger.info(f"Updated invoice {invoice.id}, status {invoice.status.value}")
          return invoice

     @staticmethod
     def record_payment(
          db: Session,
          invoice_id: int,
          amount: Decimal,
          method: str,
          now: Optional[datetime] = None,
          ledger: Optional[PaymentLedger] = None
     ) -> Payment:
          """
          Record a payment against an invoice and recompute the invoice status.

          Raises:
               NotFoundError: If the invoice doesn't exist
               ValidationError: If the ledger rejects the payment
          """
          now = now or datetime.now()
          ledger = ledger or PaymentLedger(db)
          with write_lock:
               invoice = InvoiceService.get_invoice(db, invoice_id)
               payment = ledger.record(Payment(
                    invoice_id=invoice.id,
                    amount=amount,
                    paid_at=now,
                    method=method,
               ))
               track_status(invoice, now)
               db.flush()
          return payment

     @staticmethod
     def due_reminders(
          db: Session,
          threshold_days: int = 7,
          now: Optional[datetime] = None
     ) -> List[Invoice]:
          """
          Unpaid invoices due within `threshold_days` of now, including those
          already past due, ordered by due date.
          """
          now = now or datetime.now()
          cutoff = now + timedelta(days=threshold_days)
          return (
               db.query(Invoice)
               .filter(
                    Invoice.due_date <= cutoff,
                    Invoice.status != InvoiceStatus.PAID
               )
               .order_by(Invoice.due_date, Invoice.id)
               .all()
          )

     @staticmethod
     def refresh_statuses(db: Session, now: Optional[datetime] = None) -> int:
          """
          Re-derive the status of every invoice.

          Invoices turn Overdue through the passage of time alone, so this
          should run periodically (or before reporting).

          Returns:
               Number of invoices whose status changed
          """
          now = now or datetime.now()
          changed = 0
          with write_lock:
               for invoice in db.query(Invoice).all():
                    previous = invoice.status
                    if track_status(invoice, now) != previous:
                         changed += 1
               db.flush()

          if changed:
               logger.warning(f"Status refresh changed {changed} invoice(s)")
          return changed
