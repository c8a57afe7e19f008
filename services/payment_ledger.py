# services/payment_ledger.py
"""
Payment Ledger - validated, append-only record of payments.

Recording a payment:
1. Validate amount (> 0) and method (non-blank)
2. Check the invoice exists (and, under the "reject" overpayment policy,
   that the amount does not exceed the outstanding balance)
3. Flush to assign the next sequential id and attach it to the invoice

Records are never updated or deleted. The ledger does not recompute invoice
status; callers do that right after recording (see InvoiceService).
"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from config import OVERPAYMENT_POLICY, OVERPAYMENT_REJECT
from models import Invoice, Payment
from services import invoice_calculator as calc
from services.errors import NotFoundError, ValidationError
from services.formatting import format_currency

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


class PaymentLedger:
     """Records payments and answers per-invoice payment questions."""

     def __init__(self, db: Session, overpayment_policy: Optional[str] = None):
          self.db = db
          self.overpayment_policy = overpayment_policy or OVERPAYMENT_POLICY

     def record(self, payment: Optional[Payment]) -> Payment:
          """
          Validate and append a payment.

          Raises:
               ValidationError: payment is None, amount <= 0, blank method,
                    or an overpayment under the "reject" policy
               NotFoundError: the referenced invoice does not exist
          """
          if payment is None:
               raise ValidationError(["Payment is required"])

          errors = []
          if payment.amount is None or payment.amount <= 0:
               errors.append("Payment amount must be positive")
          if payment.method is None or not str(payment.method).strip():
               errors.append("Payment method is required")
          if errors:
               logger.warning(f"Rejected payment for invoice {payment.invoice_id}: {errors}")
               raise ValidationError(errors)

          invoice = self.db.get(Invoice, payment.invoice_id)
          if invoice is None:
               raise NotFoundError("Invoice", payment.invoice_id)

          if self.overpayment_policy == OVERPAYMENT_REJECT:
               outstanding = calc.total_due(invoice)
               if payment.amount > outstanding:
                    raise ValidationError(
                         [f"Payment of {format_currency(payment.amount)} exceeds the balance due of {format_currency(outstanding)}"]
                    )

          invoice.payments.append(payment)
          self.db.add(payment)
          self.db.flush()  # assigns the id without committing

          logger.info(f"Recorded payment {payment.id} of {payment.amount} for invoice {invoice.id} via {payment.method}")
          return payment

     def get(self, payment_id: int) -> Payment:
          payment = self.db.get(Payment, payment_id)
          if payment is None:
               raise NotFoundError("Payment", payment_id)
          return payment

     def history(self, invoice_id: int) -> List[Payment]:
          """Payments for an invoice, oldest first."""
          return (
               self.db.query(Payment)
               .filter(Payment.invoice_id == invoice_id)
               .order_by(Payment.paid_at, Payment.id)
               .all()
          )

     def total_paid(self, invoice_id: int) -> Decimal:
          return sum((p.amount for p in self.history(invoice_id)), Decimal("0"))

     def history_report(self, invoice_id: int) -> str:
          payments = self.history(invoice_id)
          if not payments:
               return "No payments found for this invoice."

          lines = [f"Payment History for Invoice #{invoice_id}", SEPARATOR]
          for payment in payments:
               lines.append(
                    f"[{payment.paid_at:%Y-%m-%d %H:%M:%S}] {format_currency(payment.amount)} via {payment.method}"
               )
          lines.append(SEPARATOR)
          lines.append(f"Total Paid: {format_currency(self.total_paid(invoice_id))}")
          return "\n".join(lines) + "\n"
