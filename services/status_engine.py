# services/status_engine.py
"""
Invoice status derivation.

The status is recomputed from scratch on every call, never transitioned
incrementally. Rules are checked in order and the first match wins:

     1. total_due <= 0                                  -> Paid
     2. has payments and total_due < grand_total        -> Partial
     3. now > due_date and total_due > 0                -> Overdue
     4. current status is Draft and no payments         -> Draft
     5. has payments                                    -> Partial
     6. otherwise                                       -> Sent

With positive payment amounts rule 2 always matches before rule 5 can, so
rule 5 is effectively unreachable. Both are kept in this order.
"""
from datetime import datetime
from typing import Optional

from models.invoice import Invoice, InvoiceStatus
from services import invoice_calculator as calc
from services.formatting import format_currency


def derive_status(invoice: Invoice, now: Optional[datetime] = None) -> InvoiceStatus:
     """Compute the status the invoice should have at `now` without changing it."""
     now = now or datetime.now()
     due = calc.total_due(invoice)
     has_payments = bool(invoice.payments)

     if due <= 0:
          return InvoiceStatus.PAID
     if has_payments and due < calc.grand_total(invoice):
          return InvoiceStatus.PARTIAL
     if now > invoice.due_date and due > 0:
          return InvoiceStatus.OVERDUE
     if invoice.status == InvoiceStatus.DRAFT and not has_payments:
          return InvoiceStatus.DRAFT
     if has_payments:
          return InvoiceStatus.PARTIAL
     return InvoiceStatus.SENT


def track_status(invoice: Invoice, now: Optional[datetime] = None) -> InvoiceStatus:
     """
     Recompute the status and write it onto the invoice.

     Must be called again after anything that changes the money values or the
     due date (new payment, item edit, due date edit); it is never triggered
     automatically.
     """
     invoice.status = derive_status(invoice, now)
     return invoice.status


def status_summary(invoice: Invoice, now: Optional[datetime] = None) -> str:
     """Human-readable status block, recomputing the status first."""
     now = now or datetime.now()
     status = track_status(invoice, now)
     lines = [
          f"Invoice #{invoice.id} Status: {status.value}",
          f"Amount Due: {format_currency(calc.total_due(invoice))}",
     ]
     if status == InvoiceStatus.OVERDUE:
          days_overdue = (now - invoice.due_date).days
          lines.append(f"This invoice is {days_overdue} days overdue.")
     elif status == InvoiceStatus.PARTIAL:
          lines.append(
               f"Partially paid: {format_currency(calc.total_paid(invoice))} "
               f"of {format_currency(calc.grand_total(invoice))}"
          )
     return "\n".join(lines) + "\n"
