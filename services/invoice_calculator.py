# services/invoice_calculator.py
"""
Invoice money values.

Every function takes an invoice-like object (anything exposing `items`,
`payments`, `region`, `discount_kind` and `discount`) and recomputes the
value from its current state. Nothing is cached, so in-place edits to items
or payments are always reflected.

     subtotal    = sum(unit_price * quantity)
     tax         = subtotal * rate(region)
     grand_total = (subtotal + tax) * (1 - discount / 100)   Percentage
                   subtotal + tax - discount                 Fixed
     total_paid  = sum(payment.amount)
     total_due   = grand_total - total_paid

total_due is not clamped: an overpaid invoice reports a negative balance.
"""
from decimal import Decimal

from models.invoice import DiscountType
from services import tax_table

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _money(value) -> Decimal:
     if value is None:
          return ZERO
     if isinstance(value, Decimal):
          return value
     return Decimal(str(value))


def subtotal(invoice) -> Decimal:
     return sum(
          (_money(item.unit_price) * item.quantity for item in (invoice.items or [])),
          ZERO,
     )


def tax(invoice) -> Decimal:
     return tax_table.tax_for(subtotal(invoice), invoice.region)


def grand_total(invoice) -> Decimal:
     gross = subtotal(invoice) + tax(invoice)
     discount = _money(invoice.discount)
     if invoice.discount_kind == DiscountType.PERCENTAGE:
          return gross * (1 - discount / HUNDRED)
     return gross - discount


def total_paid(invoice) -> Decimal:
     return sum((_money(p.amount) for p in (invoice.payments or [])), ZERO)


def total_due(invoice) -> Decimal:
     return grand_total(invoice) - total_paid(invoice)


def effective_tax_rate(invoice) -> Decimal:
     """Tax as a fraction of subtotal; 0 for an invoice with a zero subtotal."""
     base = subtotal(invoice)
     if base == ZERO:
          return ZERO
     return tax(invoice) / base
