from datetime import timedelta
from decimal import Decimal

import pytest

from models import Payment
from services.errors import NotFoundError, ValidationError
from services.payment_ledger import PaymentLedger


def payment_for(invoice, amount, method="Cash", paid_at=None):
     return Payment(invoice_id=invoice.id, amount=Decimal(amount), method=method, paid_at=paid_at)


class TestRecord:

     def test_records_valid_payment(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)

          payment = ledger.record(payment_for(invoice, "1", paid_at=now))

          assert payment.id is not None
          assert ledger.history(invoice.id) == [payment]
          assert invoice.payments == [payment]
          assert invoice.total_paid == Decimal("1")

     def test_ids_are_sequential(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)
          first = ledger.record(payment_for(invoice, "10", paid_at=now))
          second = ledger.record(payment_for(invoice, "20", paid_at=now))
          assert second.id == first.id + 1

     @pytest.mark.parametrize("amount", ["0", "-5"])
     def test_rejects_non_positive_amount(self, db_session, make_invoice, now, amount):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)

          with pytest.raises(ValidationError) as exc_info:
               ledger.record(payment_for(invoice, amount, paid_at=now))

          assert exc_info.value.errors == ["Payment amount must be positive"]
          assert ledger.history(invoice.id) == []
          assert invoice.payments == []

     @pytest.mark.parametrize("method", ["", "   ", None])
     def test_rejects_blank_method(self, db_session, make_invoice, now, method):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)

          with pytest.raises(ValidationError) as exc_info:
               ledger.record(payment_for(invoice, "50", method=method, paid_at=now))

          assert exc_info.value.errors == ["Payment method is required"]
          assert ledger.history(invoice.id) == []

     def test_rejects_missing_payment(self, db_session):
          with pytest.raises(ValidationError):
               PaymentLedger(db_session).record(None)

     def test_unknown_invoice(self, db_session, now):
          ledger = PaymentLedger(db_session)
          with pytest.raises(NotFoundError) as exc_info:
               ledger.record(Payment(invoice_id=999, amount=Decimal("5"), method="Cash", paid_at=now))
          assert str(exc_info.value) == "Invoice with ID 999 not found"

     def test_overpayment_allowed_by_default_policy(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session, overpayment_policy="allow")
          ledger.record(payment_for(invoice, "700", paid_at=now))
          assert invoice.total_due == Decimal("-52.72")

     def test_overpayment_rejected_by_policy(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session, overpayment_policy="reject")

          with pytest.raises(ValidationError):
               ledger.record(payment_for(invoice, "700", paid_at=now))
          assert ledger.history(invoice.id) == []

          ledger.record(payment_for(invoice, "647.28", paid_at=now))
          assert invoice.total_due == 0


class TestHistory:

     def test_history_is_oldest_first(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)
          late = ledger.record(payment_for(invoice, "20", paid_at=now))
          early = ledger.record(payment_for(invoice, "10", paid_at=now - timedelta(days=2)))

          assert ledger.history(invoice.id) == [early, late]
          assert ledger.total_paid(invoice.id) == Decimal("30")

     def test_history_is_per_invoice(self, db_session, make_invoice, now):
          first = make_invoice()
          second = make_invoice(client_name="Other")
          ledger = PaymentLedger(db_session)
          ledger.record(payment_for(first, "10", paid_at=now))

          assert ledger.history(second.id) == []
          assert ledger.total_paid(second.id) == 0

     def test_get_unknown_payment(self, db_session):
          with pytest.raises(NotFoundError):
               PaymentLedger(db_session).get(42)


class TestHistoryReport:

     def test_no_payments(self, db_session, make_invoice):
          invoice = make_invoice()
          assert PaymentLedger(db_session).history_report(invoice.id) == "No payments found for this invoice."

     def test_lists_payments_and_total(self, db_session, make_invoice, now):
          invoice = make_invoice()
          ledger = PaymentLedger(db_session)
          ledger.record(payment_for(invoice, "300", method="Bank Transfer", paid_at=now))
          ledger.record(payment_for(invoice, "1000", method="Card", paid_at=now + timedelta(hours=1)))

          report = ledger.history_report(invoice.id)

          assert report.splitlines() == [
               f"Payment History for Invoice #{invoice.id}",
               "-" * 40,
               "[2026-10-19 09:00:00] $300.00 via Bank Transfer",
               "[2026-10-19 10:00:00] $1,000.00 via Card",
               "-" * 40,
               "Total Paid: $1,300.00",
          ]
