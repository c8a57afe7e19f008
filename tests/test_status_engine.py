from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from models import Invoice, InvoiceItem, Payment
from models.invoice import DiscountType, InvoiceStatus
from services.status_engine import derive_status, status_summary, track_status

NOW = datetime(2026, 10, 19, 9, 0, 0)


def invoice_due_in(days, status=InvoiceStatus.SENT, payments=()):
     """A 105.00 invoice (100 + 5% tax) due `days` from NOW."""
     invoice = Invoice(
          id=7,
          client_id=1,
          client_name="Acme",
          region="AE",
          discount_kind=DiscountType.FIXED,
          discount=Decimal("0"),
          status=status,
          created_at=NOW - timedelta(days=30),
          due_date=NOW + timedelta(days=days),
          items=[InvoiceItem(name="Consulting", unit_price=Decimal("100"), quantity=1)],
     )
     for amount in payments:
          invoice.payments.append(Payment(amount=Decimal(amount), method="Cash", paid_at=NOW))
     return invoice


class TestDeriveStatus:

     def test_fully_paid_is_paid_even_when_past_due(self):
          invoice = invoice_due_in(-10, payments=["105"])
          assert derive_status(invoice, NOW) == InvoiceStatus.PAID

     def test_overpaid_is_paid(self):
          invoice = invoice_due_in(5, payments=["200"])
          assert derive_status(invoice, NOW) == InvoiceStatus.PAID

     def test_partial_wins_over_overdue(self):
          invoice = invoice_due_in(-3, payments=["50"])
          assert derive_status(invoice, NOW) == InvoiceStatus.PARTIAL

     def test_unpaid_past_due_is_overdue(self):
          invoice = invoice_due_in(-1)
          assert derive_status(invoice, NOW) == InvoiceStatus.OVERDUE

     def test_draft_past_due_is_overdue(self):
          invoice = invoice_due_in(-1, status=InvoiceStatus.DRAFT)
          assert derive_status(invoice, NOW) == InvoiceStatus.OVERDUE

     def test_draft_without_payments_stays_draft(self):
          invoice = invoice_due_in(10, status=InvoiceStatus.DRAFT)
          assert derive_status(invoice, NOW) == InvoiceStatus.DRAFT

     @pytest.mark.parametrize("previous", [InvoiceStatus.SENT, InvoiceStatus.OVERDUE, InvoiceStatus.PARTIAL])
     def test_otherwise_sent(self, previous):
          invoice = invoice_due_in(10, status=previous)
          assert derive_status(invoice, NOW) == InvoiceStatus.SENT

     def test_exactly_at_due_date_is_not_overdue(self):
          invoice = invoice_due_in(0)
          assert derive_status(invoice, NOW) == InvoiceStatus.SENT

     def test_derive_does_not_write(self):
          invoice = invoice_due_in(-1)
          derive_status(invoice, NOW)
          assert invoice.status == InvoiceStatus.SENT


class TestTrackStatus:

     def test_writes_and_returns_status(self):
          invoice = invoice_due_in(-1)
          assert track_status(invoice, NOW) == InvoiceStatus.OVERDUE
          assert invoice.status == InvoiceStatus.OVERDUE

     def test_payment_then_recompute(self):
          invoice = invoice_due_in(10)
          invoice.payments.append(Payment(amount=Decimal("105"), method="Card", paid_at=NOW))
          assert track_status(invoice, NOW) == InvoiceStatus.PAID


class TestStatusSummary:

     def test_overdue_summary_counts_days(self):
          invoice = invoice_due_in(-4)
          summary = status_summary(invoice, NOW)
          assert summary == (
               "Invoice #7 Status: Overdue\n"
               "Amount Due: $105.00\n"
               "This invoice is 4 days overdue.\n"
          )

     def test_partial_summary(self):
          invoice = invoice_due_in(10, payments=["5"])
          summary = status_summary(invoice, NOW)
          assert "Status: Partial" in summary
          assert "Amount Due: $100.00" in summary
          assert "Partially paid: $5.00 of $105.00" in summary

     def test_sent_summary_has_two_lines(self):
          invoice = invoice_due_in(10)
          assert status_summary(invoice, NOW).splitlines() == [
               "Invoice #7 Status: Sent",
               "Amount Due: $105.00",
          ]
