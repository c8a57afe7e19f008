# services/__init__.py
from .errors import BillingError, ValidationError, NotFoundError
from .invoice_service import InvoiceService
from .cost_service import CostService
from .payment_ledger import PaymentLedger
from .report_engine import ReportEngine, render_report, render_summary
from .status_engine import derive_status, track_status, status_summary
from .validation import validate_invoice, ensure_valid_invoice

__all__ = [
     "BillingError",
     "ValidationError",
     "NotFoundError",
     "InvoiceService",
     "CostService",
     "PaymentLedger",
     "ReportEngine",
     "render_report",
     "render_summary",
     "derive_status",
     "track_status",
     "status_summary",
     "validate_invoice",
     "ensure_valid_invoice",
]
