# routers/invoices.py
"""
Invoice API routes.

Provides create/read/update for invoices, due reminders and status
recomputation. Every response carries the computed money values
(subtotal, tax, grand total, paid, due).
"""
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from config import DUE_REMINDER_DAYS
from database import get_session, write_lock
from routers.errors import to_http_exception
from schemas.invoice import (
     InvoiceCreate,
     InvoiceUpdate,
     InvoiceResponse,
     DueReminderResponse,
     InvoiceStatusResponse,
     StatusRefreshResponse,
)
from services.errors import BillingError
from services.invoice_service import InvoiceService
from services.status_engine import status_summary

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", response_model=List[InvoiceResponse], summary="List all invoices")
def list_invoices(db: Session = Depends(get_session)):
     return [InvoiceResponse.model_validate(inv) for inv in InvoiceService.list_invoices(db)]


@router.post(
     "",
     response_model=InvoiceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new invoice"
)
def create_invoice(invoice_data: InvoiceCreate, db: Session = Depends(get_session)):
     """
     Create a Draft invoice.

     - **client_id / client_name / client_email / client_phone**: Billed client
     - **region**: Two-letter code selecting the VAT rate (unknown codes use 5%)
     - **discount_kind**: Fixed (amount) or Percentage (0-100)
     - **due_in_days**: Due date offset from now
     - **items**: At least one line; quantity >= 1, unit price >= 0
     """
     try:
          invoice = InvoiceService.create_invoice(db, invoice_data)
     except BillingError as e:
          db.rollback()
          raise to_http_exception(e)

     db.commit()
     db.refresh(invoice)
     return InvoiceResponse.model_validate(invoice)


@router.get(
     "/due-reminders",
     response_model=List[DueReminderResponse],
     summary="Unpaid invoices due soon"
)
def get_due_reminders(
     days_until_due: int = Query(DUE_REMINDER_DAYS, description="Reminder window in days"),
     db: Session = Depends(get_session)
):
     """
     Invoices with a due date within the window (past-due ones included)
     whose status is not Paid.
     """
     return [
          DueReminderResponse(
               invoice_id=inv.id,
               due_date=inv.due_date,
               total_due=inv.total_due,
               status=inv.status,
               client_name=inv.client_name,
               client_email=inv.client_email,
               client_phone=inv.client_phone,
          )
          for inv in InvoiceService.due_reminders(db, threshold_days=days_until_due)
     ]


@router.post(
     "/refresh-status",
     response_model=StatusRefreshResponse,
     summary="Recompute the status of every invoice"
)
def refresh_statuses(db: Session = Depends(get_session)):
     """
     Re-derive every stored status, e.g. to mark invoices that have become
     overdue since they were last touched.
     """
     with write_lock:
          changed = InvoiceService.refresh_statuses(db)
          db.commit()
     return StatusRefreshResponse(checked=len(InvoiceService.list_invoices(db)), changed=changed)


@router.get("/{invoice_id}", response_model=InvoiceResponse, summary="Get invoice by ID")
def get_invoice(invoice_id: int, db: Session = Depends(get_session)):
     try:
          invoice = InvoiceService.get_invoice(db, invoice_id)
     except BillingError as e:
          raise to_http_exception(e)
     return InvoiceResponse.model_validate(invoice)


@router.put("/{invoice_id}", response_model=InvoiceResponse, summary="Update invoice")
def update_invoice(
     invoice_id: int,
     invoice_data: InvoiceUpdate,
     db: Session = Depends(get_session)
):
     """
     Update an existing invoice.

     Only provided fields will be updated. A provided item list replaces
     the existing items. The status is recomputed afterwards.
     """
     with write_lock:
          try:
               invoice = InvoiceService.update_invoice(db, invoice_id, invoice_data)
          except BillingError as e:
               db.rollback()
               raise to_http_exception(e)
          db.commit()

     db.refresh(invoice)
     return InvoiceResponse.model_validate(invoice)


@router.get(
     "/{invoice_id}/status",
     response_model=InvoiceStatusResponse,
     summary="Recompute and describe an invoice's status"
)
def get_invoice_status(invoice_id: int, db: Session = Depends(get_session)):
     try:
          invoice = InvoiceService.get_invoice(db, invoice_id)
     except BillingError as e:
          raise to_http_exception(e)

     with write_lock:
          summary = status_summary(invoice)
          db.commit()
     return InvoiceStatusResponse(invoice_id=invoice.id, status=invoice.status, summary=summary)
