# routers/payments.py
"""
Payments API.

POST /api/payments/invoice/{invoice_id}: record a payment (validated by the
payment ledger) and recompute the invoice status.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from database import get_session, write_lock
from routers.errors import to_http_exception
from schemas.payment import PaymentCreate, PaymentResponse
from services.errors import BillingError
from services.invoice_service import InvoiceService
from services.payment_ledger import PaymentLedger
from services.receipt_service import generate_receipt_pdf, receipt_filename

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get(
     "/invoice/{invoice_id}",
     response_model=List[PaymentResponse],
     summary="Payment history for an invoice"
)
def get_payments_by_invoice(invoice_id: int, db: Session = Depends(get_session)):
     """Payments recorded against the invoice, oldest first."""
     try:
          InvoiceService.get_invoice(db, invoice_id)
     except BillingError as e:
          raise to_http_exception(e)
     return PaymentLedger(db).history(invoice_id)


@router.get(
     "/invoice/{invoice_id}/report",
     response_class=PlainTextResponse,
     summary="Text payment history for an invoice"
)
def get_payment_history_report(invoice_id: int, db: Session = Depends(get_session)):
     try:
          InvoiceService.get_invoice(db, invoice_id)
     except BillingError as e:
          raise to_http_exception(e)
     return PaymentLedger(db).history_report(invoice_id)


@router.post(
     "/invoice/{invoice_id}",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a payment",
)
def create_payment(
     invoice_id: int,
     body: PaymentCreate,
     db: Session = Depends(get_session),
):
     """
     Record a payment against an invoice.

     1. Validates amount (> 0) and method (non-blank).
     2. Appends the payment to the ledger and the invoice.
     3. Recomputes the invoice status (Partial, Paid, ...).
     """
     with write_lock:
          try:
               payment = InvoiceService.record_payment(db, invoice_id, body.amount, body.method)
          except BillingError as e:
               db.rollback()
               raise to_http_exception(e)
          db.commit()

     db.refresh(payment)
     return payment


@router.get(
     "/{payment_id}/receipt",
     response_class=Response,
     responses={200: {"content": {"application/pdf": {}}}},
     summary="PDF receipt for a payment",
)
def get_receipt(payment_id: int, db: Session = Depends(get_session)):
     try:
          payment = PaymentLedger(db).get(payment_id)
          invoice = InvoiceService.get_invoice(db, payment.invoice_id)
     except BillingError as e:
          raise to_http_exception(e)

     return Response(
          content=generate_receipt_pdf(invoice, payment),
          media_type="application/pdf",
          headers={"Content-Disposition": f'attachment; filename="{receipt_filename(invoice, payment)}"'},
     )
