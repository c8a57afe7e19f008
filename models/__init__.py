# models/__init__.py
from .base import Base
from .cost import Cost
from .invoice import Invoice, InvoiceItem, InvoiceStatus, DiscountType
from .payment import Payment

__all__ = [
     "Base",
     "Cost",
     "Invoice",
     "InvoiceItem",
     "InvoiceStatus",
     "DiscountType",
     "Payment",
]
