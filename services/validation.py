# services/validation.py
"""
Structural checks applied before an invoice is created or updated.

The checks run against a candidate (the new invoice, or the values an update
would produce) so that a failing update never touches the stored row.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from models.invoice import DiscountType
from services.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class InvoiceCandidate:
     """The fields validation looks at, detached from any session."""
     items: list = field(default_factory=list)
     discount_kind: DiscountType = DiscountType.FIXED
     discount: Optional[Decimal] = None


def validate_invoice(invoice) -> List[str]:
     """
     Return the list of rule violations for an invoice-like object.

     An empty list means the invoice may be persisted.
     """
     errors = []
     items = invoice.items or []

     if not items:
          errors.append("Invoice must have at least one item")

     for position, item in enumerate(items, start=1):
          if item.quantity is None or item.quantity < 1:
               errors.append(f"Item {position} ({item.name}): quantity must be at least 1")
          if item.unit_price is None or item.unit_price < 0:
               errors.append(f"Item {position} ({item.name}): unit price cannot be negative")

     if invoice.discount_kind == DiscountType.PERCENTAGE:
          discount = invoice.discount if invoice.discount is not None else Decimal("0")
          if discount < 0 or discount > 100:
               errors.append("Percentage discount must be between 0-100")

     return errors


def ensure_valid_invoice(invoice) -> None:
     """Raise ValidationError listing every violation, if there are any."""
     errors = validate_invoice(invoice)
     if errors:
          logger.warning(f"Invoice validation failed: {errors}")
          raise ValidationError(errors)
