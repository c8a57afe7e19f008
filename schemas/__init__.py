# schemas/__init__.py
from .cost import CostCreate, CostResponse
from .payment import PaymentCreate, PaymentResponse
from .invoice import (
     InvoiceItemRequest,
     InvoiceCreate,
     InvoiceUpdate,
     InvoiceResponse,
     DueReminderResponse,
     InvoiceStatusResponse,
     StatusRefreshResponse,
)
from .report import TabularReport, GroupSummary, SummaryStatistics
from .money import Money, to_cents

__all__ = [
     "CostCreate",
     "CostResponse",
     "PaymentCreate",
     "PaymentResponse",
     "InvoiceItemRequest",
     "InvoiceCreate",
     "InvoiceUpdate",
     "InvoiceResponse",
     "DueReminderResponse",
     "InvoiceStatusResponse",
     "StatusRefreshResponse",
     "TabularReport",
     "GroupSummary",
     "SummaryStatistics",
     "Money",
     "to_cents",
]
